"""
test_ghadi_engine.py
====================
Test suite for the Ghadi Engine.

Test vectors covering:
  - Documented Kathmandu example (manual and estimated sunrise)
  - Bare solar model rolling sunrise into the previous evening
  - Birth exactly at sunrise
  - Sunrise supplied on a different date
  - Sub-Pala remainders
Plus unit tests for the sunrise estimator and Vedic time converter, and
property checks over a full day of seconds.

Run with: python -m pytest ghadi_engine/ -v
"""

import sys
import os
from datetime import date, datetime, timedelta
from fractions import Fraction

import pytest

# Allow running from project root
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), ".."))

from ghadi_engine import calculate_ghadi_pala
from ghadi_engine.core.errors import (
    GhadiPalaError, MissingInputError, InvalidCoordinateError,
    InvalidDateTimeError, NegativeDurationError, UndefinedSunriseError,
)
from ghadi_engine.core.models import GeoCoordinate
from ghadi_engine.core.sunrise import (
    day_of_year, solar_declination, hour_angle, estimate_sunrise, sunrise_minutes,
)
from ghadi_engine.core.vedic_time import (
    elapsed_to_vedic, seconds_to_vedic, vedic_to_seconds, format_elapsed,
    calculation_steps,
)


# ---------------------------------------------------------------------------
# Tolerances
# ---------------------------------------------------------------------------
DECLINATION_TOLERANCE_DEG = 0.05
VIGHATI_SECONDS = Fraction(2, 5)


# ---------------------------------------------------------------------------
# Test Vectors
# ---------------------------------------------------------------------------
# Format: {id, description, input, expected}
# "*_options" keys accept any listed value (estimated sunrise is approximate)

KATHMANDU = {"latitude": 27.7172, "longitude": 85.3240, "city_name": "Kathmandu, Nepal"}

TEST_VECTORS = [
    {
        "id": "TV-01",
        "description": "Documented example — Kathmandu, manual sunrise 05:30",
        "input": {"birth_date": "2025-07-31", "birth_time": "16:00:00",
                  "manual_sunrise": "05:30:00"},
        "expected": {
            "ghadi": 26, "pala": 15, "vighati": 0,
            "time_difference_formatted": "10h 30m",
            "sunrise_time": "05:30:00",
            "sunrise_source": "manual",
        },
    },
    {
        "id": "TV-02",
        "description": "Documented example — Kathmandu, estimated on Nepal clock",
        "input": {"birth_date": "2025-07-31", "birth_time": "16:00:00",
                  "utc_offset_hours": 5.75, **KATHMANDU},
        "expected": {
            "ghadi": 26,
            "pala_options": [29, 30],
            "time_difference_formatted_options": ["10h 35m", "10h 36m"],
            "sunrise_source": "coordinates",
        },
    },
    {
        "id": "TV-03",
        "description": "Bare solar model — Kathmandu sunrise falls the previous evening",
        "input": {"birth_date": "2025-07-31", "birth_time": "16:00:00", **KATHMANDU},
        "expected": {
            "ghadi": 40,
            "sunrise_date": date(2025, 7, 30),
        },
    },
    {
        "id": "TV-04",
        "description": "Birth exactly at sunrise",
        "input": {"birth_date": "2024-03-20", "birth_time": "06:12:30",
                  "manual_sunrise": "06:12:30"},
        "expected": {"ghadi": 0, "pala": 0, "vighati": 0,
                     "time_difference_formatted": "0h 0m"},
    },
    {
        "id": "TV-05",
        "description": "One second after sunrise — 2 Vighati",
        "input": {"birth_date": "2024-03-20", "birth_time": "06:00:01",
                  "manual_sunrise": "06:00"},
        "expected": {"ghadi": 0, "pala": 0, "vighati": 2},
    },
    {
        "id": "TV-06",
        "description": "Sunrise supplied on the previous date",
        "input": {"birth_date": "2025-07-31", "birth_time": "01:00:00",
                  "manual_sunrise": "2025-07-30T23:00:00"},
        "expected": {"ghadi": 5, "pala": 0, "vighati": 0,
                     "sunrise_date": date(2025, 7, 30)},
    },
    {
        "id": "TV-07",
        "description": "Equator, prime meridian — sunrise at 06:00 every day",
        "input": {"birth_date": "2023-11-05", "birth_time": "18:00:00",
                  "latitude": 0.0, "longitude": 0.0},
        "expected": {"ghadi": 30, "pala": 0, "vighati": 0,
                     "sunrise_time": "06:00:00",
                     "time_difference_formatted": "12h 0m"},
    },
    {
        "id": "TV-08",
        "description": "String coordinates as typed into a form",
        "input": {"birth_date": "2023-11-05", "birth_time": "07:01:19",
                  "latitude": " 0 ", "longitude": "15"},
        "expected": {"sunrise_time": "05:00:00",
                     "ghadi": 5, "pala": 3, "vighati": 17},
    },
]


@pytest.mark.parametrize("tv", TEST_VECTORS, ids=[tv["id"] for tv in TEST_VECTORS])
def test_vector(tv):
    result = calculate_ghadi_pala(**tv["input"])
    exp = tv["expected"]

    for key in ("ghadi", "pala", "vighati", "time_difference_formatted",
                "sunrise_time", "sunrise_source"):
        if key in exp:
            assert getattr(result, key) == exp[key], f"{tv['id']} {key}"
        if f"{key}_options" in exp:
            assert getattr(result, key) in exp[f"{key}_options"], f"{tv['id']} {key}"

    if "sunrise_date" in exp:
        assert result.sunrise.date() == exp["sunrise_date"]

    # Every result must satisfy the decomposition bound
    reconstructed = vedic_to_seconds(result.duration)
    total = result.calculations["total_seconds"]
    assert total - VIGHATI_SECONDS < reconstructed <= total


# ---------------------------------------------------------------------------
# Sunrise estimator
# ---------------------------------------------------------------------------

def test_day_of_year():
    assert day_of_year(date(2025, 1, 1)) == 1
    assert day_of_year(date(2025, 7, 31)) == 212
    assert day_of_year(date(2024, 3, 1)) == 61          # leap year
    assert day_of_year(date(2024, 12, 31)) == 366


def test_solar_declination_extremes():
    # 284 + 81 = 365 → sin(360°) = 0
    assert abs(solar_declination(81)) < 1e-9
    assert abs(solar_declination(172) - 23.45) < DECLINATION_TOLERANCE_DEG
    assert abs(solar_declination(355) + 23.45) < DECLINATION_TOLERANCE_DEG


def test_hour_angle_equator_is_quarter_turn():
    for declination in (-23.45, 0.0, 12.0, 23.45):
        assert hour_angle(0.0, declination) == pytest.approx(90.0)


def test_hour_angle_longer_days_in_summer():
    assert hour_angle(45.0, 20.0) > 90.0
    assert hour_angle(45.0, -20.0) < 90.0
    assert hour_angle(-45.0, 20.0) < 90.0


def test_estimate_sunrise_prime_meridian():
    sunrise = estimate_sunrise(date(2023, 11, 5), GeoCoordinate(0.0, 0.0))
    assert sunrise == datetime(2023, 11, 5, 6, 0, 0)


def test_estimate_sunrise_longitude_and_offset():
    day = date(2023, 11, 5)
    east = estimate_sunrise(day, GeoCoordinate(0.0, 15.0))
    assert east == datetime(2023, 11, 5, 5, 0, 0)
    # one hour of clock offset cancels 15° east
    assert estimate_sunrise(day, GeoCoordinate(0.0, 15.0), 1.0) == datetime(2023, 11, 5, 6, 0, 0)


def test_estimate_sunrise_fractional_minutes_carry_into_seconds():
    # 720 − 4·(−0.125) − 360 = 360.5 minutes → 06:00:30
    sunrise = estimate_sunrise(date(2023, 11, 5), GeoCoordinate(0.0, -0.125))
    assert sunrise == datetime(2023, 11, 5, 6, 0, 30)


def test_estimate_sunrise_rolls_into_previous_day():
    day = date(2025, 7, 31)
    coord = GeoCoordinate(27.7172, 85.3240)
    minutes = sunrise_minutes(day, coord)
    assert minutes < 0
    sunrise = estimate_sunrise(day, coord)
    assert sunrise.date() == date(2025, 7, 30)
    assert sunrise.hour == 23


def test_estimate_sunrise_deterministic():
    day = date(1999, 12, 31)
    coord = GeoCoordinate(-33.8688, 151.2093)
    assert estimate_sunrise(day, coord, 11.0) == estimate_sunrise(day, coord, 11.0)


@pytest.mark.parametrize("day", [date(2024, 12, 21), date(2024, 6, 21)])
def test_polar_sunrise_undefined(day):
    with pytest.raises(UndefinedSunriseError) as exc:
        estimate_sunrise(day, GeoCoordinate(80.0, 15.0))
    assert exc.value.code == "undefined_sunrise"


@pytest.mark.parametrize("lat,lon", [
    (90.5, 0.0), (-91.0, 0.0), (0.0, 180.01), (float("nan"), 0.0),
    (0.0, float("inf")), ("27.7", 85.3), (True, 0.0),
])
def test_geo_coordinate_rejects_invalid(lat, lon):
    with pytest.raises(InvalidCoordinateError):
        GeoCoordinate(lat, lon)


# ---------------------------------------------------------------------------
# Vedic time converter
# ---------------------------------------------------------------------------

def test_zero_duration():
    d = seconds_to_vedic(0)
    assert (d.ghadi, d.pala, d.vighati) == (0, 0, 0)


def test_unit_boundaries():
    assert (seconds_to_vedic(1440).ghadi, seconds_to_vedic(1440).pala) == (1, 0)
    assert seconds_to_vedic(1439).ghadi == 0
    assert seconds_to_vedic(1439).pala == 59
    assert seconds_to_vedic(1439).vighati == 57          # 23 s → 57.5 → 57
    assert seconds_to_vedic(24).pala == 1
    assert seconds_to_vedic(2).vighati == 5              # exactly 5 × 0.4


def test_full_day_is_sixty_ghadi():
    d = seconds_to_vedic(86400)
    assert (d.ghadi, d.pala, d.vighati) == (60, 0, 0)


def test_decomposition_bound_over_full_day():
    for total in range(0, 86401):
        d = seconds_to_vedic(total)
        assert 0 <= d.pala <= 59
        assert 0 <= d.vighati <= 59
        reconstructed = vedic_to_seconds(d)
        assert total - VIGHATI_SECONDS <= reconstructed <= total


def test_float_arithmetic_mode():
    d = seconds_to_vedic(1, arithmetic="float")
    assert d.vighati == 2
    assert seconds_to_vedic(23, arithmetic="float").vighati == 57


def test_unknown_arithmetic_mode():
    with pytest.raises(ValueError):
        seconds_to_vedic(10, arithmetic="rounded")


def test_elapsed_truncates_fractional_seconds():
    sunrise = datetime(2025, 1, 1, 6, 0, 0, 600000)
    birth = datetime(2025, 1, 1, 6, 0, 25)
    d = elapsed_to_vedic(birth, sunrise)
    assert d.total_seconds == 24
    assert (d.ghadi, d.pala, d.vighati) == (0, 1, 0)


def test_negative_duration_rejected():
    sunrise = datetime(2025, 1, 1, 6, 30, 0)
    for seconds_before in (1, 60, 3600, 6 * 3600):
        with pytest.raises(NegativeDurationError) as exc:
            elapsed_to_vedic(sunrise - timedelta(seconds=seconds_before), sunrise)
        assert exc.value.code == "negative_duration"
    with pytest.raises(NegativeDurationError):
        seconds_to_vedic(-1)


def test_sub_second_before_sunrise_is_negative():
    sunrise = datetime(2025, 1, 1, 6, 30, 0, 500000)
    with pytest.raises(NegativeDurationError):
        elapsed_to_vedic(datetime(2025, 1, 1, 6, 30, 0), sunrise)


def test_monotonic_in_birth_time():
    sunrise = datetime(2025, 1, 1, 6, 0, 0)
    previous = -1
    for minute in range(0, 18 * 60, 7):
        d = elapsed_to_vedic(sunrise + timedelta(minutes=minute), sunrise)
        assert d.ghadi >= previous
        previous = d.ghadi


def test_format_elapsed():
    assert format_elapsed(0) == "0h 0m"
    assert format_elapsed(59) == "0h 0m"
    assert format_elapsed(37800) == "10h 30m"
    assert format_elapsed(90061) == "25h 1m"


def test_calculation_steps_text():
    steps = calculation_steps(seconds_to_vedic(37810))
    assert steps["total_seconds"] == 37810
    assert steps["ghadi_calculation"] == "37810 ÷ 1440 = 26 Ghadi (remainder: 370s)"
    assert steps["pala_calculation"] == "370 ÷ 24 = 15 Pala (remainder: 10s)"
    assert steps["vighati_calculation"] == "10 ÷ 0.4 = 25 Vighati"


# ---------------------------------------------------------------------------
# Calculator input handling
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("kwargs", [
    {"birth_date": "", "birth_time": "10:00", "manual_sunrise": "06:00"},
    {"birth_date": "2025-01-01", "birth_time": None, "manual_sunrise": "06:00"},
    {"birth_date": "2025-01-01", "birth_time": "10:00"},
    {"birth_date": "2025-01-01", "birth_time": "10:00", "latitude": "27.7"},
    {"birth_date": "2025-01-01", "birth_time": "10:00", "latitude": "27.7",
     "longitude": "  ", "manual_sunrise": ""},
])
def test_missing_input(kwargs):
    with pytest.raises(MissingInputError) as exc:
        calculate_ghadi_pala(**kwargs)
    assert exc.value.code == "missing_input"


@pytest.mark.parametrize("lat,lon", [
    ("abc", "85.3"), ("27.7", "east"), ("nan", "85.3"), ("27.7", "inf"), ("95", "10"),
])
def test_invalid_coordinates(lat, lon):
    with pytest.raises(InvalidCoordinateError) as exc:
        calculate_ghadi_pala("2025-01-01", "10:00", latitude=lat, longitude=lon)
    assert exc.value.code == "invalid_coordinate"


@pytest.mark.parametrize("kwargs", [
    {"birth_date": "2025-13-01", "birth_time": "10:00", "manual_sunrise": "06:00"},
    {"birth_date": "31/07/2025", "birth_time": "10:00", "manual_sunrise": "06:00"},
    {"birth_date": "2025-01-01", "birth_time": "25:00", "manual_sunrise": "06:00"},
    {"birth_date": "2025-01-01", "birth_time": "10:00", "manual_sunrise": "dawn"},
    {"birth_date": "2025-01-01", "birth_time": "10:00", "manual_sunrise": "2025-01-01T99:00"},
])
def test_invalid_date_time(kwargs):
    with pytest.raises(InvalidDateTimeError) as exc:
        calculate_ghadi_pala(**kwargs)
    assert exc.value.code == "invalid_datetime"


def test_manual_sunrise_takes_precedence():
    result = calculate_ghadi_pala("2025-07-31", "16:00:00", latitude="abc",
                                  longitude="xyz", manual_sunrise="05:30:00")
    assert result.sunrise_source == "manual"
    assert result.coordinate is None


def test_birth_before_estimated_sunrise():
    with pytest.raises(NegativeDurationError):
        calculate_ghadi_pala("2023-11-05", "05:59:59", latitude=0, longitude=0)


def test_typed_inputs_accepted():
    result = calculate_ghadi_pala(date(2023, 11, 5), datetime(2023, 11, 5, 18).time(),
                                  latitude=0, longitude=0)
    assert result.ghadi == 30


def test_errors_are_value_errors():
    for cls in (MissingInputError, InvalidCoordinateError, InvalidDateTimeError,
                NegativeDurationError, UndefinedSunriseError):
        assert issubclass(cls, GhadiPalaError)
        assert issubclass(cls, ValueError)


def test_result_as_dict():
    result = calculate_ghadi_pala(
        "2025-07-31", "16:00:00", city_name=" Kathmandu ", manual_sunrise="05:30:00",
    )
    data = result.as_dict()
    assert data["ghadi"] == 26
    assert data["pala"] == 15
    assert data["vighati"] == 0
    assert data["sunrise_time"] == "05:30:00"
    assert data["birth_time_formatted"] == "16:00:00"
    assert data["time_difference_minutes"] == 630
    assert data["vedic_time"] == "26 Ghadi 15 Pala 0 Vighati"
    assert data["calculations"]["total_seconds"] == 37800
    assert data["meta"]["city_name"] == "Kathmandu"
    assert data["meta"]["sunrise_source"] == "manual"
