"""
ghadi_pala.py
=============
Main Ghadi-Pala calculator.

Takes raw caller inputs (strings from a form or JSON body, or already-typed
date/time values), picks the sunrise source, and runs the sunrise estimator
and Vedic time converter to produce a CalculationResult.

Usage:
    from ghadi_engine.tools.ghadi_pala import calculate_ghadi_pala

    result = calculate_ghadi_pala(
        birth_date="2025-07-31",
        birth_time="16:00:00",
        latitude="27.7172",         # or a float
        longitude="85.3240",
        city_name="Kathmandu, Nepal",
        utc_offset_hours=5.75,      # optional clock offset
    )

    # or with a sunrise read from a printed panchang
    result = calculate_ghadi_pala("2025-07-31", "16:00:00", manual_sunrise="05:24:10")
"""

import math
from datetime import date, datetime, time
from typing import Optional, Union

import structlog

from ..core.errors import (
    MissingInputError, InvalidCoordinateError, InvalidDateTimeError,
)
from ..core.models import GeoCoordinate, CalculationResult
from ..core.sunrise import estimate_sunrise
from ..core.vedic_time import elapsed_to_vedic, calculation_steps

log = structlog.get_logger(__name__)

DateLike = Union[date, str, None]
TimeLike = Union[time, str, None]
Number = Union[float, int, str, None]


# ---------------------------------------------------------------------------
# Input parsing
# ---------------------------------------------------------------------------

def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_date(value: DateLike, label: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value.strip())
    except (TypeError, ValueError, AttributeError):
        raise InvalidDateTimeError(f"Invalid {label}: {value!r} (expected YYYY-MM-DD)")


def _parse_time(value: TimeLike, label: str) -> time:
    if isinstance(value, time):
        parsed = value
    else:
        try:
            parsed = time.fromisoformat(value.strip())
        except (TypeError, ValueError, AttributeError):
            raise InvalidDateTimeError(f"Invalid {label}: {value!r} (expected HH:MM or HH:MM:SS)")
    if parsed.tzinfo is not None:
        raise InvalidDateTimeError(f"{label} must be a local clock time without offset")
    return parsed


def _parse_manual_sunrise(value: Union[datetime, time, str], birth_day: date) -> datetime:
    """A bare clock time is read on the birth date; a full datetime keeps its own date."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and "T" in value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            raise InvalidDateTimeError(f"Invalid manual sunrise: {value!r}")
    else:
        return datetime.combine(birth_day, _parse_time(value, "manual sunrise"))
    if parsed.tzinfo is not None:
        raise InvalidDateTimeError("manual sunrise must be a local clock time without offset")
    return parsed


def _parse_coordinate(value: Number, label: str) -> float:
    if isinstance(value, bool):
        raise InvalidCoordinateError(f"Invalid coordinates: {label} {value!r}")
    try:
        number = float(value.strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        raise InvalidCoordinateError(f"Invalid coordinates: {label} {value!r} is not a number")
    if not math.isfinite(number):
        raise InvalidCoordinateError(f"Invalid coordinates: {label} must be finite")
    return number


# ---------------------------------------------------------------------------
# Main calculator
# ---------------------------------------------------------------------------

def calculate_ghadi_pala(
    birth_date: DateLike,
    birth_time: TimeLike,
    latitude: Number = None,
    longitude: Number = None,
    manual_sunrise: Union[datetime, time, str, None] = None,
    city_name: Optional[str] = None,
    utc_offset_hours: Optional[float] = None,
    arithmetic: str = "exact",
) -> CalculationResult:
    """
    Compute the Ghadi / Pala / Vighati elapsed from sunrise to birth.

    Args:
        birth_date: date or 'YYYY-MM-DD'
        birth_time: time or 'HH:MM[:SS]', local 24-hour clock
        latitude, longitude: degrees (numbers or numeric strings); required
            unless manual_sunrise is given
        manual_sunrise: clock time on the birth date, or a full datetime;
            takes precedence over coordinates
        city_name: free-text label, echoed in the result
        utc_offset_hours: clock offset for the estimated sunrise (None → 0)
        arithmetic: 'exact' or 'float' Vighati division

    Returns:
        CalculationResult

    Raises:
        MissingInputError, InvalidDateTimeError, InvalidCoordinateError,
        UndefinedSunriseError, NegativeDurationError
    """
    if _is_blank(birth_date) or _is_blank(birth_time):
        raise MissingInputError("Birth date and time are required")

    has_manual = not _is_blank(manual_sunrise)
    if not has_manual and (_is_blank(latitude) or _is_blank(longitude)):
        raise MissingInputError("Either coordinates or manual sunrise time is required")

    birth_day = _parse_date(birth_date, "birth date")
    birth = datetime.combine(birth_day, _parse_time(birth_time, "birth time"))

    coord = None
    if has_manual:
        sunrise = _parse_manual_sunrise(manual_sunrise, birth_day)
        source = "manual"
        utc_offset_hours = None
    else:
        coord = GeoCoordinate(
            latitude=_parse_coordinate(latitude, "latitude"),
            longitude=_parse_coordinate(longitude, "longitude"),
        )
        sunrise = estimate_sunrise(birth_day, coord, utc_offset_hours or 0.0)
        source = "coordinates"

    log.debug("sunrise_resolved", source=source,
              sunrise=sunrise.isoformat(timespec="seconds"),
              birth=birth.isoformat(timespec="seconds"))

    duration = elapsed_to_vedic(birth, sunrise, arithmetic)

    result = CalculationResult(
        sunrise=sunrise,
        birth=birth,
        duration=duration,
        sunrise_source=source,
        coordinate=coord,
        city_name=city_name.strip() if city_name and city_name.strip() else None,
        utc_offset_hours=utc_offset_hours,
        calculations=calculation_steps(duration),
    )
    log.debug("ghadi_pala_calculated", ghadi=duration.ghadi, pala=duration.pala,
              vighati=duration.vighati, total_seconds=duration.total_seconds)
    return result
