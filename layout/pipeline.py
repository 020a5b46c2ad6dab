"""
Layout pass for the week grid.

layout() turns a list of entities into positioned layout units:

    entities -> sort -> sanitize -> split -> bucket by day
             -> (per day, timed and all-day apart) collision groups
             -> columns -> relative start/width -> minutes from start hour

Each pass creates new units and keeps no state between calls, so the same
input always produces the same output.
"""

from typing import Iterable, Optional

from .collision import group_collisions, single_column_groups
from .columns import layout_group
from .dates import minutes_until, with_time_at_start_of_period
from .debug import debug_print
from .entity import Entity, validate_entity
from .grid import GridConfig
from .layout_unit import LayoutUnit
from .splitter import sanitize, split


def sort_entities(entities: Iterable[Entity]) -> list[Entity]:
    """Sort by start, then end. The order decides column assignment."""
    return sorted(entities, key=lambda e: (e.start, e.end))


def bucket_by_day(units: Iterable[LayoutUnit]) -> dict:
    """
    Group units by the day they are drawn on, in first-seen day order.

    Within a bucket units stay in production order, stably re-sorted by
    unit_start so lanes are always filled from the top of the day.
    """
    buckets: dict = {}
    for unit in units:
        buckets.setdefault(unit.day, []).append(unit)
    for day_units in buckets.values():
        day_units.sort(key=lambda u: u.unit_start)
    return buckets


def finalize_position(unit: LayoutUnit, grid_config: GridConfig):
    """Store the minutes between the grid's start hour and the unit's start."""
    if unit.is_all_day:
        return
    grid_start = with_time_at_start_of_period(unit.unit_start, grid_config.min_hour)
    unit.minutes_from_start_hour = minutes_until(unit.unit_start, grid_start)


def _layout_day(units: list[LayoutUnit], grid_config: GridConfig) -> tuple[list[LayoutUnit], int]:
    """Lay out the units of one day bucket. Returns (units, group count)."""
    timed = [u for u in units if not u.is_all_day]
    all_day = [u for u in units if u.is_all_day]

    groups = group_collisions(timed)
    if grid_config.arrange_all_day_vertically:
        groups += single_column_groups(all_day)
    else:
        groups += group_collisions(all_day)

    result = []
    for group in groups:
        layout_group(group)
        for unit in group:
            finalize_position(unit, grid_config)
            result.append(unit)
    return result, len(groups)


def layout(entities: Iterable[Entity], grid_config: Optional[GridConfig] = None) -> list[LayoutUnit]:
    """
    Compute the horizontal layout of all entities.

    Args:
        entities: The entities to lay out. They are not modified.
        grid_config: Visible hours and all-day arrangement. Defaults to a
            full 0-24 grid with all-day entities side by side.

    Returns:
        Positioned layout units, grouped by day in first-seen order, timed
        units before all-day units of the same day.

    Raises:
        ValueError: if an entity does not end after it starts.
    """
    if grid_config is None:
        grid_config = GridConfig()

    entities = list(entities)
    for entity in entities:
        validate_entity(entity)

    units: list[LayoutUnit] = []
    for entity in sort_entities(entities):
        units.extend(split(sanitize(entity, grid_config), grid_config))

    buckets = bucket_by_day(units)
    result: list[LayoutUnit] = []
    group_count = 0
    for day_units in buckets.values():
        day_result, day_groups = _layout_day(day_units, grid_config)
        result.extend(day_result)
        group_count += day_groups

    debug_print(
        f"Layout: {len(entities)} entities -> {len(result)} units "
        f"in {len(buckets)} days, {group_count} collision groups"
    )
    return result
