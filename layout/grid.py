"""
Grid configuration handed to every layout pass.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GridConfig:
    """Visible hours of the day grid and all-day arrangement."""
    min_hour: int = 0   # First visible hour, also the start-of-day cutoff
    max_hour: int = 24  # Hour at which the visible day ends
    arrange_all_day_vertically: bool = False  # One all-day entity per row, full width
