# Ghadi Engine - Core modules
from .errors import (
    GhadiPalaError, MissingInputError, InvalidCoordinateError,
    InvalidDateTimeError, NegativeDurationError, UndefinedSunriseError,
)
from .models import GeoCoordinate, VedicDuration, CalculationResult
from .sunrise import estimate_sunrise
from .vedic_time import (
    elapsed_to_vedic, seconds_to_vedic, vedic_to_seconds,
    format_elapsed, calculation_steps,
)

__all__ = [
    "GhadiPalaError", "MissingInputError", "InvalidCoordinateError",
    "InvalidDateTimeError", "NegativeDurationError", "UndefinedSunriseError",
    "GeoCoordinate", "VedicDuration", "CalculationResult",
    "estimate_sunrise",
    "elapsed_to_vedic", "seconds_to_vedic", "vedic_to_seconds",
    "format_elapsed", "calculation_steps",
]
