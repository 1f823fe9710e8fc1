"""Diagnostics package.

Light-weight command-line checks over the whole registry: round-trip sweeps,
new-year tables and month grids.
"""

__all__ = ["pretty_month", "new_years_table", "round_trip"]
