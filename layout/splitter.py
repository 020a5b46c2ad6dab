"""
Sanitizing and splitting entities into per-day layout units.
"""

from .dates import (
    ONE_MILLISECOND, day_start, days_between, is_at_start_of_period, with_time_at_end_of_period,
)
from .entity import Entity
from .grid import GridConfig
from .layout_unit import LayoutUnit


def sanitize(entity: Entity, grid_config: GridConfig) -> Entity:
    """
    Pull an end that sits exactly on the start of the visible day back by
    one millisecond.

    An entity ending at 00:00 (or at min_hour) would otherwise touch the
    following day and produce an empty day part there.
    """
    end = entity.end
    if not is_at_start_of_period(end, grid_config.min_hour):
        return entity
    trimmed = end - ONE_MILLISECOND
    if trimmed <= entity.start:
        return entity
    return entity.with_end(trimmed)


def split(entity: Entity, grid_config: GridConfig) -> list[LayoutUnit]:
    """
    Create one layout unit for every calendar day the entity touches.

    Inner parts cover whole days; the first part starts at the entity's
    start and the last part ends at its end. Parts are never dropped, even
    when they fall outside the grid's visible hours.
    """
    if entity.all_day or not entity.is_multi_day:
        return [LayoutUnit(entity, 0, entity.start, entity.end)]

    days = days_between(entity.start, entity.end)
    last = len(days) - 1
    units = []
    for index, day in enumerate(days):
        midnight = day_start(day, entity.start.tzinfo)
        units.append(LayoutUnit(
            entity=entity,
            part_index=index,
            unit_start=entity.start if index == 0 else midnight,
            unit_end=entity.end if index == last else with_time_at_end_of_period(midnight, 24),
            starts_on_earlier_day=index > 0,
            ends_on_later_day=index < last,
        ))
    return units
