"""
sunrise.py
==========
Approximate local sunrise from date and geographic position.

Simplified solar model:
  declination  δ = 23.45° · sin(360° · (284 + N) / 365)      (Cooper, 1969)
  hour angle   H = acos(−tan φ · tan δ)
  solar noon     = 720 − 4·λ   minutes from midnight
  sunrise        = solar noon − 4·H

No equation of time, refraction or altitude correction. Longitude is read on
the caller's own clock: with no clock offset, solar noon is mean solar noon at
the given meridian.
"""

import math
from datetime import date, datetime, time, timedelta

from .errors import UndefinedSunriseError
from .models import GeoCoordinate

DEG_TO_RAD = math.pi / 180.0
RAD_TO_DEG = 180.0 / math.pi

MAX_DECLINATION = 23.45     # degrees
MINUTES_PER_DEGREE = 4.0    # Earth turns 1° every 4 minutes
NOON_MINUTES = 720.0


def day_of_year(day: date) -> int:
    """Whole days since Dec 31 of the previous year (Jan 1 → 1)."""
    return (day - date(day.year - 1, 12, 31)).days


def solar_declination(n: int) -> float:
    """Solar declination in degrees for day-of-year ``n``."""
    return MAX_DECLINATION * math.sin(360.0 * (284 + n) / 365.0 * DEG_TO_RAD)


def hour_angle(latitude: float, declination: float) -> float:
    """
    Sunrise hour angle in degrees.
    Raises UndefinedSunriseError at polar latitudes where the sun never rises
    or never sets on that date.
    """
    cos_h = -math.tan(latitude * DEG_TO_RAD) * math.tan(declination * DEG_TO_RAD)
    if not -1.0 <= cos_h <= 1.0:
        if math.isnan(cos_h):
            kind = "undefined"
        else:
            kind = "polar night" if cos_h > 1.0 else "polar day"
        raise UndefinedSunriseError(
            f"No sunrise at latitude {latitude}° for declination "
            f"{declination:.4f}° ({kind})"
        )
    return math.acos(cos_h) * RAD_TO_DEG


def sunrise_minutes(day: date, coord: GeoCoordinate,
                    utc_offset_hours: float = 0.0) -> float:
    """
    Sunrise in minutes from local midnight of ``day``.
    May be negative (previous evening) or beyond 1440 for far-off meridians.
    """
    declination = solar_declination(day_of_year(day))
    h = hour_angle(coord.latitude, declination)
    solar_noon = NOON_MINUTES - MINUTES_PER_DEGREE * coord.longitude + 60.0 * utc_offset_hours
    return solar_noon - MINUTES_PER_DEGREE * h


def estimate_sunrise(day: date, coord: GeoCoordinate,
                     utc_offset_hours: float = 0.0) -> datetime:
    """
    Estimated sunrise as a naive local datetime.

    Args:
        day: calendar date
        coord: observer position
        utc_offset_hours: optional clock offset added to solar noon
                          (e.g. 5.75 for Nepal); 0 keeps the bare model

    Fractional minutes carry into seconds; out-of-day values roll into the
    adjacent date.
    """
    minutes = sunrise_minutes(day, coord, utc_offset_hours)
    return datetime.combine(day, time.min) + timedelta(minutes=minutes)
