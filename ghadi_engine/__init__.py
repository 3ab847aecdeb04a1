"""
Ghadi Engine
============
Vedic time-of-birth calculator: elapsed time since sunrise in Ghadi, Pala
and Vighati.

Quick start:
    from ghadi_engine import calculate_ghadi_pala

    result = calculate_ghadi_pala(
        birth_date="2025-07-31", birth_time="16:00:00",
        latitude=27.7172, longitude=85.3240,
        utc_offset_hours=5.75,
    )
    print(result.ghadi, result.pala, result.vighati)
"""

from .tools.ghadi_pala import calculate_ghadi_pala

__version__ = "1.0.0"
__all__ = ["calculate_ghadi_pala"]
