"""
Weekgrid Calendar Data Module

Everything around the layout engine that deals with the outside world:
- Configuration parsing (config.py)
- Timezone conversion (timezone_utils.py)
- ICS import into layout entities (ics_import.py)
"""

from .config import Config
from .ics_import import load_entities, read_ics_file

__all__ = [
    'Config',
    'load_entities',
    'read_ics_file',
]
