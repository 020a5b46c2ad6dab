from __future__ import annotations

from datetime import datetime

import pytest

from layout.collision import CollisionGroup
from layout.columns import column_membership, expand_to_max_width, layout_group, pack_columns
from layout.entity import Entity
from layout.layout_unit import LayoutUnit
from tests.helpers import at


def unit(start: datetime, end: datetime, name: str) -> LayoutUnit:
    entity = Entity(id=name, start=start, end=end)
    return LayoutUnit(entity, 0, start, end)


def group_of(*units: LayoutUnit) -> CollisionGroup:
    group = CollisionGroup(units[0])
    for u in units[1:]:
        group.add(u)
    return group


def test_single_unit_takes_full_width() -> None:
    a = unit(at(0, 9), at(0, 10), "a")

    columns = layout_group(group_of(a))

    assert len(columns) == 1
    assert (a.relative_start, a.relative_width) == (0.0, 1.0)


def test_overlapping_pair_is_split_in_half() -> None:
    b = unit(at(0, 11), at(0, 14), "b")
    a = unit(at(0, 12), at(0, 13), "a")

    layout_group(group_of(b, a))

    assert (b.relative_start, b.relative_width) == (0.0, 0.5)
    assert (a.relative_start, a.relative_width) == (0.5, 0.5)


def test_unit_spans_adjacent_free_columns() -> None:
    a = unit(at(0, 9), at(0, 10), "a")
    b = unit(at(0, 9), at(0, 10), "b")
    c = unit(at(0, 10), at(0, 11), "c")

    columns = pack_columns(group_of(a, b, c))

    assert [col.units for col in columns] == [[a, c], [b, c]]
    assert column_membership(columns)[c] == (0, 1)

    expand_to_max_width(columns)
    assert (c.relative_start, c.relative_width) == (0.0, 1.0)
    assert (b.relative_start, b.relative_width) == (0.5, 0.5)


def test_unit_spans_only_the_free_adjacent_columns() -> None:
    a = unit(at(0, 9), at(0, 10), "a")
    c = unit(at(0, 9), at(0, 10), "c")
    b = unit(at(0, 9), at(0, 11), "b")
    d = unit(at(0, 10), at(0, 12), "d")

    columns = layout_group(group_of(a, c, b, d))

    assert len(columns) == 3
    assert column_membership(columns)[d] == (0, 1)
    assert d.relative_start == 0.0
    assert d.relative_width == pytest.approx(2 / 3)
    assert b.relative_start == pytest.approx(2 / 3)


def test_non_adjacent_fitting_columns_use_leftmost_only() -> None:
    a = unit(at(0, 9), at(0, 10), "a")
    b = unit(at(0, 9), at(0, 12), "b")
    c = unit(at(0, 9, 30), at(0, 10), "c")
    d = unit(at(0, 10), at(0, 11), "d")

    columns = layout_group(group_of(a, b, c, d))

    assert [col.units for col in columns] == [[a, d], [b], [c]]
    assert d.relative_start == 0.0
    assert d.relative_width == pytest.approx(1 / 3)
    assert c.relative_start == pytest.approx(2 / 3)


def test_width_is_multiple_of_column_width_and_fills_the_row() -> None:
    a = unit(at(0, 9), at(0, 10), "a")
    c = unit(at(0, 9), at(0, 10), "c")
    b = unit(at(0, 9), at(0, 11), "b")
    d = unit(at(0, 10), at(0, 12), "d")
    group = group_of(a, c, b, d)

    columns = layout_group(group)

    count = len(columns)
    for u in group:
        assert (u.relative_width * count) == pytest.approx(round(u.relative_width * count))
    assert max(u.relative_start + u.relative_width for u in group) == pytest.approx(1.0)


def test_columns_are_not_capped() -> None:
    units = [unit(at(0, 9), at(0, 10), f"u{i}") for i in range(50)]

    columns = layout_group(group_of(*units))

    assert len(columns) == 50
    for index, u in enumerate(units):
        assert u.relative_start == pytest.approx(index / 50)
        assert u.relative_width == pytest.approx(1 / 50)
