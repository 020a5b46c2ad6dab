"""
Configuration parser for weekgrid.

Handles TOML file parsing for the grid and general settings.
"""

import tomllib
import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional

from layout.debug import debug_print
from layout.grid import GridConfig


DEFAULT_TIMEZONE = "Europe/Amsterdam"


@dataclass
class Config:
    """Main configuration container for weekgrid."""

    grid: GridConfig = field(default_factory=GridConfig)
    timezone: str = DEFAULT_TIMEZONE  # Local timezone for converting ICS times
    debug: bool = False

    @classmethod
    def get_default_config_path(cls) -> Path:
        """Get the default configuration file path."""
        xdg_config = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
        return Path(xdg_config) / 'weekgrid' / 'weekgrid.toml'

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> 'Config':
        """
        Load configuration from TOML file.

        Raises:
            FileNotFoundError: if the file does not exist.
            ValueError: if the grid hours are out of range.
        """
        if config_path is None:
            config_path = cls.get_default_config_path()

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'rb') as f:
            data = tomllib.load(f)

        debug_print(f"Config sections in {config_path}: {list(data.keys())}")

        # Parse General section
        general = data.get('General', {})
        timezone = general.get('timezone', DEFAULT_TIMEZONE)
        debug = bool(general.get('debug', False))

        # Parse Grid section
        grid_data = data.get('Grid', {})
        grid = parse_grid_config(grid_data)

        return cls(grid=grid, timezone=timezone, debug=debug)


def parse_grid_config(grid_data: dict) -> GridConfig:
    """Build a GridConfig from a [Grid] table, checking the hour range."""
    min_hour = grid_data.get('min_hour', GridConfig.min_hour)
    max_hour = grid_data.get('max_hour', GridConfig.max_hour)
    arrange_vertically = grid_data.get(
        'arrange_all_day_vertically', GridConfig.arrange_all_day_vertically
    )

    for name, value in (('min_hour', min_hour), ('max_hour', max_hour)):
        if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 24:
            raise ValueError(f"[Grid] {name} must be an integer between 0 and 24, got {value!r}")
    if min_hour > max_hour:
        raise ValueError(f"[Grid] min_hour ({min_hour}) is after max_hour ({max_hour})")

    return GridConfig(
        min_hour=min_hour,
        max_hour=max_hour,
        arrange_all_day_vertically=bool(arrange_vertically),
    )
