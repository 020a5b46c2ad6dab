#!/usr/bin/env python3
"""
Weekgrid - lay out calendar events on a day/week grid.

This is the command line entry point: it reads an ICS file, runs the layout
engine and prints where every event part goes.
"""

import sys
import json
import argparse
from dataclasses import asdict, replace
from pathlib import Path

import pytz

from calendar_data.config import Config, parse_grid_config
from calendar_data.ics_import import read_ics_file
from calendar_data.timezone_utils import set_timezone
from layout import layout
from layout.debug import set_debug, debug_print


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Weekgrid - compute side-by-side positions of overlapping calendar events"
    )
    parser.add_argument(
        "ics_file",
        type=Path,
        help="iCalendar file to lay out"
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="Path to configuration file (default: auto-detect)"
    )
    parser.add_argument(
        "--min-hour",
        type=int,
        help="First visible hour of the grid (overrides config)"
    )
    parser.add_argument(
        "--max-hour",
        type=int,
        help="Hour at which the visible day ends (overrides config)"
    )
    parser.add_argument(
        "--stack-all-day",
        action="store_true",
        help="Give every all-day event its own full-width row"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the layout as JSON"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output"
    )
    return parser.parse_args(argv)


def load_config(config_path) -> Config:
    """Load the given config, or the default one if it exists."""
    if config_path is not None:
        return Config.load(config_path)
    if Config.get_default_config_path().exists():
        return Config.load()
    return Config()


def apply_overrides(config: Config, args) -> Config:
    """Apply grid options given on the command line, validated like the config file."""
    grid_data = asdict(config.grid)
    if args.min_hour is not None:
        grid_data['min_hour'] = args.min_hour
    if args.max_hour is not None:
        grid_data['max_hour'] = args.max_hour
    if args.stack_all_day:
        grid_data['arrange_all_day_vertically'] = True
    return replace(config, grid=parse_grid_config(grid_data))


def unit_to_dict(unit) -> dict:
    """JSON-friendly view of a layout unit, limited to what renderers read."""
    return {
        "id": str(unit.entity.id),
        "title": unit.entity.data,
        "day": unit.day.isoformat(),
        "all_day": unit.is_all_day,
        "start": unit.unit_start.isoformat(),
        "end": unit.unit_end.isoformat(),
        "starts_on_earlier_day": unit.starts_on_earlier_day,
        "ends_on_later_day": unit.ends_on_later_day,
        "relative_start": unit.relative_start,
        "relative_width": unit.relative_width,
        "minutes_from_start_hour": unit.minutes_from_start_hour,
    }


def format_unit(unit) -> str:
    """One line of the plain text report."""
    if unit.is_all_day:
        time_range = "all day    "
    else:
        time_range = f"{unit.unit_start:%H:%M}-{unit.unit_end:%H:%M}"
    flags = ("<" if unit.starts_on_earlier_day else " ") + (">" if unit.ends_on_later_day else " ")
    return (
        f"{unit.day.isoformat()}  {time_range}  "
        f"start={unit.relative_start:.3f} width={unit.relative_width:.3f} {flags} "
        f"{unit.entity.data or unit.entity.id}"
    )


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    if args.debug:
        set_debug(True)

    try:
        config = apply_overrides(load_config(args.config), args)
    except FileNotFoundError as e:
        print(f"Error: {e}")
        print(f"\nDefault configuration location: {Config.get_default_config_path()}")
        print("\nExample configuration:")
        print("""
[General]
timezone = "Europe/Amsterdam"

[Grid]
min_hour = 0
max_hour = 24
arrange_all_day_vertically = false
""")
        return 1
    except (ValueError, OSError) as e:
        print(f"Error loading configuration: {e}")
        return 1

    if config.debug:
        set_debug(True)

    try:
        set_timezone(config.timezone)
    except pytz.UnknownTimeZoneError:
        print(f"Error: unknown timezone '{config.timezone}'")
        return 1

    debug_print(f"Grid: {config.grid}")

    try:
        entities = read_ics_file(args.ics_file)
    except FileNotFoundError:
        print(f"Error: file not found: {args.ics_file}")
        return 1
    except ValueError as e:
        print(f"Error reading {args.ics_file}: {e}")
        return 1

    units = layout(entities, config.grid)

    if args.json:
        print(json.dumps([unit_to_dict(u) for u in units], indent=2))
    else:
        for unit in units:
            print(format_unit(unit))
    return 0


if __name__ == "__main__":
    sys.exit(main())
