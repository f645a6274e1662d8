"""Enumerate closed slant-segment loops of a given area on a 7x7 grid.

This package exposes the public API surface via:

- ``acreage.engine.generator.LoopGenerator``: runs the backtracking search.
- ``acreage.engine.grid.SlantGrid``: holds a board and measures enclosed area.
- ``acreage.core.models.Area``: exact area in whole and half units.
"""

from .core.models import Area
from .engine.generator import LoopGenerator, SearchConfig, SearchResult
from .engine.grid import SlantGrid

__all__ = [
    "Area",
    "LoopGenerator",
    "SearchConfig",
    "SearchResult",
    "SlantGrid",
]

__version__ = "0.1.0"
