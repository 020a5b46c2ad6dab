"""
Import of iCalendar (ICS) data as layout entities.

Every VEVENT becomes one Entity: timed events keep their start and end
converted to local wall-clock time, DATE-valued events become all-day
entities. Recurrence rules are not expanded; only the first occurrence of a
recurring event is imported.
"""

import hashlib
from datetime import datetime, date, timedelta
from pathlib import Path
from typing import Union

from icalendar import Calendar as ICalCalendar, Event as ICalEvent

from layout.debug import debug_print
from layout.entity import Entity
from .timezone_utils import utc_to_local_naive


DEFAULT_EVENT_DURATION = timedelta(hours=1)


def parse_icalendar(ical_text: str) -> ICalCalendar:
    """
    Parse iCalendar text into an icalendar.Calendar object.

    Raises:
        ValueError: if the text is not valid iCalendar data.
    """
    return ICalCalendar.from_ical(ical_text)


def _is_date_only(value) -> bool:
    return isinstance(value, date) and not isinstance(value, datetime)


def _to_local(value: Union[date, datetime]) -> datetime:
    if _is_date_only(value):
        return datetime.combine(value, datetime.min.time())
    return utc_to_local_naive(value)


def _fallback_id(event: ICalEvent) -> str:
    """Stable id for events without a UID."""
    summary = str(event.get('SUMMARY', ''))
    dtstart = event.get('DTSTART')
    start = dtstart.to_ical().decode('utf-8') if dtstart is not None else ''
    return hashlib.md5(f"{summary}|{start}".encode()).hexdigest()[:12]


def entity_from_vevent(event: ICalEvent) -> Entity:
    """
    Create an Entity from an icalendar VEVENT.

    The entity id is the UID, the payload is the SUMMARY.

    Raises:
        ValueError: if DTSTART is missing or the event has no positive duration.
    """
    dtstart = event.get('DTSTART')
    if dtstart is None:
        raise ValueError("VEVENT has no DTSTART")

    uid = event.get('UID')
    entity_id = str(uid) if uid else _fallback_id(event)
    summary = str(event.get('SUMMARY', 'Untitled'))

    start_value = dtstart.dt
    all_day = _is_date_only(start_value)
    start = _to_local(start_value)

    dtend = event.get('DTEND')
    duration = event.get('DURATION')
    if dtend is not None:
        end = _to_local(dtend.dt)
    elif duration is not None:
        end = start + duration.dt
    elif all_day:
        end = start + timedelta(days=1)
    else:
        end = start + DEFAULT_EVENT_DURATION

    # Some producers write DTEND equal to DTSTART for single all-day events
    if all_day and end <= start:
        end = start + timedelta(days=1)

    return Entity(id=entity_id, start=start, end=end, all_day=all_day, data=summary)


def load_entities(ical_text: str) -> list[Entity]:
    """
    Convert all VEVENTs of a calendar into entities.

    VEVENTs that cannot be laid out are skipped.
    """
    calendar = parse_icalendar(ical_text)
    entities = []
    for component in calendar.walk('VEVENT'):
        try:
            entity = entity_from_vevent(component)
        except ValueError as e:
            debug_print(f"Skipping VEVENT {component.get('UID', '?')}: {e}")
            continue
        if component.get('RRULE') is not None:
            debug_print(f"VEVENT {entity.id}: recurrence not expanded")
        entities.append(entity)
    debug_print(f"Imported {len(entities)} entities")
    return entities


def read_ics_file(path: Path) -> list[Entity]:
    """Read an .ics file and convert its VEVENTs into entities."""
    with open(path, 'r', encoding='utf-8') as f:
        return load_entities(f.read())
