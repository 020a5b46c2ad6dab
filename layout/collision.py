"""
Grouping of layout units that overlap in time.

Units of one day are split into collision groups: sets in which every unit
overlaps at least one other member, directly or through a chain of
overlaps. Groups never influence each other's column layout.
"""

from typing import Iterable

from .layout_unit import LayoutUnit


class CollisionGroup:
    """Units that collide with each other, in processing order."""

    def __init__(self, unit: LayoutUnit):
        self.units: list[LayoutUnit] = [unit]

    def collides_with(self, unit: LayoutUnit) -> bool:
        """Check if the unit collides with any unit already in the group."""
        return any(member.collides_with(unit) for member in self.units)

    def add(self, unit: LayoutUnit):
        self.units.append(unit)

    def __len__(self):
        return len(self.units)

    def __iter__(self):
        return iter(self.units)

    def __repr__(self):
        return f"CollisionGroup({self.units!r})"


def group_collisions(units: Iterable[LayoutUnit]) -> list[CollisionGroup]:
    """
    Build collision groups online, in the order the units are given.

    A unit joins the first group it collides with. If it also collides with
    later groups, it bridges them and those groups are folded into the
    first one. Members keep their input order, which the column packer
    relies on.

    Bridging only happens for input that is not sorted by start: in sorted
    input two members that both overlap the new unit also overlap each
    other, so they already share a group.
    """
    order: dict[LayoutUnit, int] = {}
    groups: list[CollisionGroup] = []

    for position, unit in enumerate(units):
        order[unit] = position
        colliding = [group for group in groups if group.collides_with(unit)]

        if not colliding:
            groups.append(CollisionGroup(unit))
            continue

        target = colliding[0]
        target.add(unit)
        if len(colliding) > 1:
            for other in colliding[1:]:
                target.units.extend(other.units)
                groups.remove(other)
            target.units.sort(key=order.__getitem__)

    return groups


def single_column_groups(units: Iterable[LayoutUnit]) -> list[CollisionGroup]:
    """One group per unit, used when all-day units are stacked vertically."""
    return [CollisionGroup(unit) for unit in units]
