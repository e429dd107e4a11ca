"""
lifegrid: Conway's Game of Life on a bounded grid

Grid is the cell container with bounds-checked access and geometric
transforms; World is the double-buffered engine that advances a grid one
generation at a time, optionally on a toroidal topology.

Diagnostics are emitted through the standard ``logging`` module under the
``lifegrid`` logger; the library never configures handlers itself.
"""

from .core.cell import Cell, ALIVE, DEAD
from .core.errors import (
    LifeGridError,
    ConstructionError,
    OutOfRangeError,
    InvalidDimensionsError,
    InvalidArgumentError,
    CellValueError,
    ReadOnlyGridError,
    FileFormatError,
)
from .core.grid import Grid, CellRef
from .core.rules import LifeRule
from .core.world import World
from .config import SimulationConfig

__version__ = "0.1.0"

__all__ = [
    'Cell',
    'ALIVE',
    'DEAD',
    'Grid',
    'CellRef',
    'World',
    'LifeRule',
    'SimulationConfig',
    'LifeGridError',
    'ConstructionError',
    'OutOfRangeError',
    'InvalidDimensionsError',
    'InvalidArgumentError',
    'CellValueError',
    'ReadOnlyGridError',
    'FileFormatError',
]
