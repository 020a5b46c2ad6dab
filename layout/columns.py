"""
Column packing and width expansion for one collision group.

Packing places every unit into one or more vertical lanes ("columns").
Expansion then turns lane membership into fractional start/width values:
a unit that was placed into several adjacent lanes spans all of them.
"""

from .collision import CollisionGroup
from .layout_unit import LayoutUnit


class Column:
    """Units drawn in the same lane of a collision group."""

    def __init__(self, index: int, units: list[LayoutUnit] = None):
        self.index = index
        self.units: list[LayoutUnit] = list(units) if units else []

    @property
    def is_empty(self) -> bool:
        return not self.units

    def add(self, unit: LayoutUnit):
        self.units.append(unit)

    def fits(self, unit: LayoutUnit) -> bool:
        """A unit fits if the lane is empty or its last unit is over before it."""
        return self.is_empty or not self.units[-1].collides_with(unit)

    def __repr__(self):
        return f"Column({self.index}, {self.units!r})"


def _is_continuous(indices: list[int]) -> bool:
    ordered = sorted(indices)
    return all(a + 1 == b for a, b in zip(ordered, ordered[1:]))


def pack_columns(group: CollisionGroup) -> list[Column]:
    """
    Greedily assign the group's units to columns, in group order.

    - No fitting column: open a new one.
    - One fitting column: use it.
    - Several fitting columns: use all of them if they are adjacent,
      otherwise only the leftmost one. A unit never jumps over a lane it
      does not occupy.
    """
    columns = [Column(0)]

    for unit in group:
        fitting = [column for column in columns if column.fits(unit)]

        if not fitting:
            columns.append(Column(len(columns), [unit]))
        elif len(fitting) == 1:
            fitting[0].add(unit)
        elif _is_continuous([column.index for column in fitting]):
            for column in fitting:
                column.add(unit)
        else:
            min(fitting, key=lambda column: column.index).add(unit)

    return columns


def column_membership(columns: list[Column]) -> dict[LayoutUnit, tuple[int, ...]]:
    """
    Map every unit to the indices of the columns it was placed in.

    Keys are the units themselves, which hash by identity.
    """
    membership: dict[LayoutUnit, list[int]] = {}
    for column in columns:
        for unit in column.units:
            membership.setdefault(unit, []).append(column.index)
    return {unit: tuple(indices) for unit, indices in membership.items()}


def expand_to_max_width(columns: list[Column]) -> None:
    """
    Set relative_start and relative_width of every unit in the columns.

    Every column is 1 / len(columns) wide. A unit starts at its leftmost
    column and is as wide as the number of columns it occupies.
    """
    count = len(columns)
    for unit, indices in column_membership(columns).items():
        unit.relative_start = min(indices) / count
        unit.relative_width = len(indices) / count


def layout_group(group: CollisionGroup) -> list[Column]:
    """Pack one collision group and assign the final horizontal positions."""
    columns = pack_columns(group)
    expand_to_max_width(columns)
    return columns
