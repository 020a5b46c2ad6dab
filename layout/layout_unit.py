"""
Layout units: the day-scoped pieces of an entity that get drawn.
"""

from dataclasses import dataclass
from datetime import datetime, date
from typing import Optional

from .entity import Entity


@dataclass(eq=False)
class LayoutUnit:
    """
    The visible part of an entity on one specific day.

    For example, an entity "Sat 17:00 - Sun 04:00" creates two units:
    - Saturday: 17:00-23:59:59.999, ends_on_later_day
    - Sunday: 00:00-04:00, starts_on_earlier_day

    Units are compared by identity. Two units of different entities may
    carry identical field values and must still be told apart.

    relative_start and relative_width are fractions of the day column,
    filled in by the column packer. minutes_from_start_hour is only set
    for timed units.
    """
    entity: Entity
    part_index: int
    unit_start: datetime
    unit_end: datetime
    starts_on_earlier_day: bool = False
    ends_on_later_day: bool = False
    relative_start: float = 0.0
    relative_width: float = 0.0
    minutes_from_start_hour: Optional[int] = None

    @property
    def is_all_day(self) -> bool:
        return self.entity.all_day

    @property
    def day(self) -> date:
        """The day bucket this unit is drawn in."""
        if self.is_all_day:
            return self.entity.start.date()
        return self.unit_start.date()

    def collides_with(self, other: 'LayoutUnit') -> bool:
        """
        Check if two units overlap in time.

        Timed units use their own per-day [unit_start, unit_end) range.
        All-day units only care about the day they are drawn on.
        """
        if self.is_all_day != other.is_all_day:
            return False
        if self.is_all_day:
            return self.day == other.day
        return self.unit_start < other.unit_end and other.unit_start < self.unit_end

    def __repr__(self):
        return (
            f"LayoutUnit(entity={self.entity.id!r}, part={self.part_index}, "
            f"{self.unit_start:%Y-%m-%d %H:%M}-{self.unit_end:%H:%M}, "
            f"start={self.relative_start:.3f}, width={self.relative_width:.3f})"
        )
