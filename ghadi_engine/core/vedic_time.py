"""
vedic_time.py
=============
Elapsed time since sunrise → Ghadi / Pala / Vighati.

    1 Ghadi   = 24 minutes = 1440 seconds   (60 Ghadi = 1 day)
    1 Pala    = 24 seconds                  (60 Pala  = 1 Ghadi)
    1 Vighati = 0.4 seconds                 (60 Vighati = 1 Pala)

Every unit is the floor of the running remainder (truncation, never rounding).
"""

import math
from datetime import datetime
from fractions import Fraction

from .errors import NegativeDurationError
from .models import VedicDuration

SECONDS_PER_GHADI = 1440
SECONDS_PER_PALA = 24
SECONDS_PER_VIGHATI = 0.4

ARITHMETIC_MODES = ("exact", "float")


def _vighati(remainder: int, arithmetic: str) -> int:
    if arithmetic == "exact":
        # r / 0.4 == r * 5 / 2, kept in integers
        return (remainder * 5) // 2
    if arithmetic == "float":
        return math.floor(remainder / SECONDS_PER_VIGHATI)
    raise ValueError(f"Unknown arithmetic mode: {arithmetic!r}. "
                     f"Choose from {list(ARITHMETIC_MODES)}")


def seconds_to_vedic(total_seconds: int, arithmetic: str = "exact") -> VedicDuration:
    """Decompose a non-negative whole number of seconds."""
    if total_seconds < 0:
        raise NegativeDurationError(
            f"Elapsed time cannot be negative ({total_seconds}s)"
        )
    ghadi, after_ghadi = divmod(total_seconds, SECONDS_PER_GHADI)
    pala, after_pala = divmod(after_ghadi, SECONDS_PER_PALA)
    return VedicDuration(
        ghadi=ghadi,
        pala=pala,
        vighati=_vighati(after_pala, arithmetic),
        total_seconds=total_seconds,
        remainder_after_ghadi=after_ghadi,
        remainder_after_pala=after_pala,
    )


def elapsed_to_vedic(birth: datetime, sunrise: datetime,
                     arithmetic: str = "exact") -> VedicDuration:
    """
    Time from ``sunrise`` to ``birth`` as a VedicDuration.
    Raises NegativeDurationError when birth precedes sunrise.
    """
    diff_seconds = math.floor((birth - sunrise).total_seconds())
    if diff_seconds < 0:
        raise NegativeDurationError(
            f"Birth time {birth.isoformat(timespec='seconds')} cannot be before "
            f"sunrise {sunrise.isoformat(timespec='seconds')}"
        )
    return seconds_to_vedic(diff_seconds, arithmetic)


def vedic_to_seconds(duration: VedicDuration) -> Fraction:
    """Exact seconds represented by the Ghadi/Pala/Vighati triple."""
    return (duration.ghadi * SECONDS_PER_GHADI
            + duration.pala * SECONDS_PER_PALA
            + Fraction(duration.vighati * 2, 5))


def format_elapsed(total_seconds: int) -> str:
    """'{H}h {M}m' from whole elapsed minutes."""
    hours, minutes = divmod(total_seconds // 60, 60)
    return f"{hours}h {minutes}m"


def calculation_steps(duration: VedicDuration) -> dict:
    """Human-readable breakdown of each division step."""
    return {
        "total_seconds": duration.total_seconds,
        "ghadi_calculation": (
            f"{duration.total_seconds} ÷ {SECONDS_PER_GHADI} = {duration.ghadi} Ghadi "
            f"(remainder: {duration.remainder_after_ghadi}s)"
        ),
        "pala_calculation": (
            f"{duration.remainder_after_ghadi} ÷ {SECONDS_PER_PALA} = {duration.pala} Pala "
            f"(remainder: {duration.remainder_after_pala}s)"
        ),
        "vighati_calculation": (
            f"{duration.remainder_after_pala} ÷ {SECONDS_PER_VIGHATI} = "
            f"{duration.vighati} Vighati"
        ),
    }
