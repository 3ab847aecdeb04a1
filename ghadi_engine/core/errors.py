"""
errors.py
=========
Error taxonomy for the Ghadi-Pala calculation.

Every error carries a stable ``code`` so callers (the HTTP layer, the PDF
endpoint, scripts) can branch on the kind of failure without matching on
message text.

    missing_input       — birth date/time absent, or no sunrise source given
    invalid_coordinate  — latitude/longitude not finite numbers or out of range
    invalid_datetime    — date/time strings that do not parse
    negative_duration   — birth instant precedes the sunrise instant
    undefined_sunrise   — polar day/night, hour angle has no solution
"""


class GhadiPalaError(ValueError):
    """Base class for every error raised by the engine."""

    code = "ghadi_pala_error"

    def to_dict(self) -> dict:
        return {"code": self.code, "message": str(self)}


class MissingInputError(GhadiPalaError):
    code = "missing_input"


class InvalidCoordinateError(GhadiPalaError):
    code = "invalid_coordinate"


class InvalidDateTimeError(GhadiPalaError):
    code = "invalid_datetime"


class NegativeDurationError(GhadiPalaError):
    code = "negative_duration"


class UndefinedSunriseError(GhadiPalaError):
    """
    The sun does not rise on this date at this latitude (or never sets), so
    the hour-angle equation has no real solution.
    """

    code = "undefined_sunrise"
