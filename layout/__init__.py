"""
Weekgrid Layout Engine

This module computes where entities go on a day/week grid:
- Entities and validation (entity.py)
- Per-day layout units (layout_unit.py)
- Sanitizing and splitting multi-day entities (splitter.py)
- Collision groups (collision.py)
- Column packing and width expansion (columns.py)
- The layout pass itself (pipeline.py)
"""

from .entity import Entity
from .grid import GridConfig
from .layout_unit import LayoutUnit
from .pipeline import layout

__all__ = [
    'Entity',
    'GridConfig',
    'LayoutUnit',
    'layout',
]
