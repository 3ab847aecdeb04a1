"""
demo.py
=======
Demonstration of the Ghadi Engine.
Run: python demo.py

Computes the Ghadi-Pala for a sample Kathmandu birth, first with estimated
sunrise and then with a manually entered sunrise, and prints a report.
"""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))
from ghadi_engine import calculate_ghadi_pala


def print_section(title: str):
    print(f"\n{'─'*60}")
    print(f"  {title}")
    print(f"{'─'*60}")


def print_result(result):
    print(f"  Sunrise        : {result.sunrise_time}  ({result.sunrise.date()}, {result.sunrise_source})")
    print(f"  Birth          : {result.birth_time_formatted}  ({result.birth.date()})")
    print(f"  Time difference: {result.time_difference_formatted}")
    print(f"  Result         : {result.ghadi} Ghadi {result.pala} Pala {result.vighati} Vighati")
    calc = result.calculations
    print(f"\n  Total seconds  : {calc['total_seconds']}s")
    print(f"  {calc['ghadi_calculation']}")
    print(f"  {calc['pala_calculation']}")
    print(f"  {calc['vighati_calculation']}")


def run_demo():
    print("=" * 60)
    print("   GHADI ENGINE — SAMPLE CALCULATION")
    print("=" * 60)

    params = {
        "birth_date": "2025-07-31",
        "birth_time": "16:00:00",
        "city_name": "Kathmandu, Nepal",
        "latitude": 27.7172,
        "longitude": 85.3240,
    }

    print_section("Estimated sunrise (Nepal clock, UTC+5:45)")
    print_result(calculate_ghadi_pala(**params, utc_offset_hours=5.75))

    print_section("Manual sunrise 05:30:00")
    print_result(calculate_ghadi_pala(
        params["birth_date"], params["birth_time"], manual_sunrise="05:30:00",
    ))

    print("\n  1 Ghadi = 24 minutes · 1 Pala = 24 seconds · 1 Vighati = 0.4 seconds\n")


if __name__ == "__main__":
    run_demo()
