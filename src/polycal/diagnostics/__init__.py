"""Diagnostics package.

- round_trip: random conversion round trips, no extras needed
- year_lengths: year-length statistics (requires numpy, "polycal[diagnostics]")
"""

__all__ = ["round_trip", "year_lengths"]
