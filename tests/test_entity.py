from __future__ import annotations

from datetime import timedelta

import pytest

from layout.entity import Entity, validate_entity
from tests.helpers import at


def test_entity_rejects_end_before_start() -> None:
    with pytest.raises(ValueError, match="not after its start"):
        Entity(id="bad", start=at(0, 10), end=at(0, 9))


def test_entity_rejects_zero_duration() -> None:
    with pytest.raises(ValueError):
        Entity(id="empty", start=at(0, 10), end=at(0, 10))


def test_validate_entity_accepts_duck_typed_objects() -> None:
    class Plain:
        id = "plain"
        start = at(0, 10)
        end = at(0, 9)

    with pytest.raises(ValueError, match="plain"):
        validate_entity(Plain())


def test_non_colliding_entities() -> None:
    first = Entity(id=1, start=at(0, 12), end=at(0, 13))
    second = Entity(id=2, start=at(0, 14), end=at(0, 15))

    assert not first.collides_with(second)
    assert not second.collides_with(first)


def test_overlapping_entities_collide() -> None:
    first = Entity(id=1, start=at(0, 12), end=at(0, 13))
    second = Entity(id=2, start=at(0, 11), end=at(0, 14))

    assert first.collides_with(second)
    assert second.collides_with(first)


def test_partly_overlapping_entities_collide() -> None:
    first = Entity(id=1, start=at(0, 12), end=at(0, 13))
    second = Entity(id=2, start=at(0, 12, 30), end=at(0, 13, 30))

    assert first.collides_with(second)


def test_touching_entities_do_not_collide() -> None:
    first = Entity(id=1, start=at(0, 12), end=at(0, 13))
    second = Entity(id=2, start=at(0, 13), end=at(0, 14))

    assert not first.collides_with(second)


def test_all_day_entities_collide_by_start_day_only() -> None:
    monday = Entity(id=1, start=at(0, 0), end=at(1, 0), all_day=True)
    also_monday = Entity(id=2, start=at(0, 0), end=at(3, 0), all_day=True)
    tuesday = Entity(id=3, start=at(1, 0), end=at(2, 0), all_day=True)
    timed = Entity(id=4, start=at(0, 9), end=at(0, 10))

    assert monday.collides_with(also_monday)
    assert not monday.collides_with(tuesday)
    assert not monday.collides_with(timed)


def test_with_end_returns_copy() -> None:
    entity = Entity(id=1, start=at(0, 12), end=at(1, 0), data="payload")
    trimmed = entity.with_end(at(1, 0) - timedelta(milliseconds=1))

    assert entity.end == at(1, 0)
    assert trimmed.end == at(0, 23, 59) + timedelta(seconds=59, milliseconds=999)
    assert trimmed.data == "payload"
    assert not trimmed.is_multi_day
    assert entity.is_multi_day
