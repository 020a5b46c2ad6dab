"""
Entities laid out on the week grid.

An Entity is the caller's view of an event or a blocked time slot: an id,
a time range and an all-day flag, plus an opaque payload the engine never
looks at.
"""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Hashable


@dataclass(frozen=True)
class Entity:
    """
    Immutable time-interval record.

    start and end are naive local datetimes with start < end. For all-day
    entities only the start date matters for layout.
    """
    id: Hashable
    start: datetime
    end: datetime
    all_day: bool = False
    data: Any = None

    def __post_init__(self):
        validate_entity(self)

    @property
    def is_multi_day(self) -> bool:
        """Check if the entity touches more than one calendar day."""
        return self.start.date() != self.end.date()

    def collides_with(self, other: 'Entity') -> bool:
        """
        Check if two entities overlap in time.

        Ranges are half-open, so an entity ending at 10:00 does not collide
        with one starting at 10:00. All-day entities only collide with other
        all-day entities starting on the same day.
        """
        if self.all_day != other.all_day:
            return False
        if self.all_day:
            return self.start.date() == other.start.date()
        return self.start < other.end and other.start < self.end

    def with_end(self, end: datetime) -> 'Entity':
        """Return a copy of this entity ending at the given instant."""
        return replace(self, end=end)


def validate_entity(entity) -> None:
    """
    Reject entities the engine cannot lay out.

    Raises:
        ValueError: if the entity has a zero or negative duration.
    """
    if entity.end <= entity.start:
        raise ValueError(
            f"Entity {entity.id!r} ends at {entity.end} which is not after its start {entity.start}"
        )
