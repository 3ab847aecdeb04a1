"""
models.py
=========
Value objects passed between the sunrise estimator, the Vedic time converter
and callers.

Calendar dates are plain ``datetime.date`` values and local instants are naive
``datetime.datetime`` values (no tzinfo): birth place and computation share one
local clock.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from .errors import InvalidCoordinateError


CLOCK_FORMAT = "%H:%M:%S"


@dataclass(frozen=True)
class GeoCoordinate:
    latitude:  float    # degrees, positive = North
    longitude: float    # degrees, positive = East

    def __post_init__(self):
        for label, value, limit in (("latitude", self.latitude, 90.0),
                                    ("longitude", self.longitude, 180.0)):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidCoordinateError(f"{label} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise InvalidCoordinateError(f"{label} must be finite, got {value!r}")
            if not -limit <= value <= limit:
                raise InvalidCoordinateError(
                    f"{label} must lie within ±{limit:g}°, got {value}"
                )

    def as_dict(self) -> dict:
        return {"latitude": self.latitude, "longitude": self.longitude}


@dataclass(frozen=True)
class VedicDuration:
    """
    Elapsed time as Ghadi / Pala / Vighati.

    Each unit is the floor of the successive remainder, so
    ghadi*1440 + pala*24 + vighati*0.4 <= total_seconds, short by < 0.4 s.
    """
    ghadi:                 int
    pala:                  int      # 0–59
    vighati:               int      # 0–59
    total_seconds:         int
    remainder_after_ghadi: int      # seconds, 0–1439
    remainder_after_pala:  int      # seconds, 0–23

    @property
    def total_minutes(self) -> int:
        return self.total_seconds // 60

    def __str__(self):
        return f"{self.ghadi} Ghadi {self.pala} Pala {self.vighati} Vighati"


@dataclass(frozen=True)
class CalculationResult:
    sunrise:         datetime
    birth:           datetime
    duration:        VedicDuration
    sunrise_source:  str                        # "coordinates" | "manual"
    coordinate:      Optional[GeoCoordinate] = None
    city_name:       Optional[str] = None
    utc_offset_hours: Optional[float] = None
    calculations:    dict = field(default_factory=dict)

    # ---- display fields ----

    @property
    def sunrise_time(self) -> str:
        return self.sunrise.strftime(CLOCK_FORMAT)

    @property
    def birth_time_formatted(self) -> str:
        return self.birth.strftime(CLOCK_FORMAT)

    @property
    def time_difference_minutes(self) -> int:
        return self.duration.total_minutes

    @property
    def time_difference_formatted(self) -> str:
        from .vedic_time import format_elapsed
        return format_elapsed(self.duration.total_seconds)

    @property
    def ghadi(self) -> int:
        return self.duration.ghadi

    @property
    def pala(self) -> int:
        return self.duration.pala

    @property
    def vighati(self) -> int:
        return self.duration.vighati

    def as_dict(self) -> dict:
        return {
            "sunrise_time": self.sunrise_time,
            "sunrise_datetime": self.sunrise.isoformat(timespec="seconds"),
            "birth_time_formatted": self.birth_time_formatted,
            "birth_datetime": self.birth.isoformat(timespec="seconds"),
            "time_difference_minutes": self.time_difference_minutes,
            "time_difference_formatted": self.time_difference_formatted,
            "ghadi": self.ghadi,
            "pala": self.pala,
            "vighati": self.vighati,
            "vedic_time": str(self.duration),
            "calculations": dict(self.calculations),
            "meta": {
                "sunrise_source": self.sunrise_source,
                "coordinate": self.coordinate.as_dict() if self.coordinate else None,
                "city_name": self.city_name,
                "utc_offset_hours": self.utc_offset_hours,
            },
        }
