"""Core grid state management for Conway's Game of Life.

This module implements the bounded 2D cell container that every other part of
lifegrid builds on. The grid stores its cells in a numpy boolean array of shape
(height, width); in C order that is the flat row-major layout
``cells[x + width * y]``.

Coordinates are always given as (x, y) with x the column and y the row.
Accessing a coordinate outside the grid is an error, never clamped.
"""

import logging
import operator
from typing import Iterable, List, Optional, Tuple, Union

import numpy as np

from .cell import Cell
from .errors import (
    ConstructionError,
    InvalidArgumentError,
    OutOfRangeError,
    ReadOnlyGridError,
)

logger = logging.getLogger(__name__)

CellLike = Union[Cell, bool, str]

# Clockwise gather table, one row per quarter turn:
# (x<-x, x<-y, y<-x, y<-y, x offset in units of width-1, y offset in units of height-1)
_ROTATIONS = (
    (1, 0, 0, 1, 0, 0),
    (0, 1, -1, 0, 0, 1),
    (-1, 0, 0, -1, 1, 1),
    (0, -1, 1, 0, 1, 0),
)


def _dimension(value: int, name: str) -> int:
    try:
        size = operator.index(value)
    except TypeError as exc:
        raise ConstructionError(f"Grid {name} must be an integer, got {value!r}") from exc
    if size < 0:
        raise ConstructionError(f"Grid {name} must be non-negative, got {size}")
    return size


def _dimensions(width: int, height: Optional[int]) -> Tuple[int, int]:
    if height is None:
        height = width
    return _dimension(width, "width"), _dimension(height, "height")


class CellRef:
    """Mutable handle to a single grid cell.

    The coordinate is bounds-checked once when the handle is created; reads and
    writes afterwards go straight to the cell. A handle refers to the storage the
    grid had when it was created, so it must not be used after ``resize``.
    """

    __slots__ = ('x', 'y', '_grid', '_cell')

    def __init__(self, grid: 'Grid', x: int, y: int):
        self.x = x
        self.y = y
        self._grid = grid
        self._cell = grid.state[y:y + 1, x:x + 1]

    def get(self) -> Cell:
        return Cell.from_bool(bool(self._cell[0, 0]))

    def set(self, value: CellLike) -> None:
        alive = Cell.coerce(value).alive
        self._grid._check_writable()
        self._cell[0, 0] = alive

    value = property(get, set)

    def __repr__(self) -> str:
        return f"CellRef(x={self.x}, y={self.y}, value={self.get().name})"


class Grid:
    """2D grid of Game of Life cells.

    ``Grid()`` is 0x0, ``Grid(n)`` is n x n and ``Grid(width, height)`` is
    width x height. New grids are entirely DEAD.

    Attributes:
        state: 2D numpy boolean array indexed [y, x] (True=alive, False=dead)
    """

    def __init__(self, width: int = 0, height: Optional[int] = None):
        """Initialize a dead grid with the given dimensions.

        Args:
            width: Grid width (cells)
            height: Grid height (cells), defaults to width

        Raises:
            ConstructionError: If either dimension is negative
        """
        self._width, self._height = _dimensions(width, height)
        self.state = np.zeros((self._height, self._width), dtype=bool)
        self._read_only = False

        logger.debug(f"Created grid {self._width}x{self._height}")

    @classmethod
    def from_array(cls, array) -> 'Grid':
        """Create a grid from a 2D array-like indexed [y, x].

        Any truthy element becomes ALIVE. The data is copied.

        Raises:
            ConstructionError: If the array is not two dimensional
        """
        array = np.asarray(array)
        if array.ndim != 2:
            raise ConstructionError(f"Expected a 2D array, got {array.ndim} dimensions")

        height, width = array.shape
        grid = cls(width, height)
        grid.state[...] = array.astype(bool)
        return grid

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> 'Grid':
        """Create a grid from rows of '#' (alive) and ' ' (dead) characters.

        Raises:
            ConstructionError: If the rows have different lengths
            CellValueError: If a row contains any other character
        """
        rows = list(rows)
        width = len(rows[0]) if rows else 0
        grid = cls(width, len(rows))

        for y, row in enumerate(rows):
            if len(row) != width:
                raise ConstructionError(f"Row {y} has length {len(row)}, expected {width}")
            for x, char in enumerate(row):
                grid.state[y, x] = Cell.from_char(char).alive

        return grid

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def read_only(self) -> bool:
        return self._read_only

    def get_width(self) -> int:
        return self._width

    def get_height(self) -> int:
        return self._height

    def get_total_cells(self) -> int:
        return self._width * self._height

    def get_alive_cells(self) -> int:
        """Count cells that are alive."""
        return int(np.count_nonzero(self.state))

    def get_dead_cells(self) -> int:
        """Count cells that are dead."""
        return self.get_total_cells() - self.get_alive_cells()

    def valid_coordinate(self, x: int, y: int) -> bool:
        """Check whether (x, y) lies inside the grid."""
        return 0 <= x < self._width and 0 <= y < self._height

    def _check_coordinate(self, x: int, y: int) -> None:
        if not self.valid_coordinate(x, y):
            raise OutOfRangeError(
                f"Coordinates ({x}, {y}) out of bounds for {self._width}x{self._height} grid")

    def _check_writable(self) -> None:
        if self._read_only:
            raise ReadOnlyGridError("Grid view is read-only")

    def get(self, x: int, y: int) -> Cell:
        """Get cell state at coordinates.

        Args:
            x: X coordinate (column)
            y: Y coordinate (row)

        Returns:
            Cell.ALIVE or Cell.DEAD

        Raises:
            OutOfRangeError: If coordinates are out of bounds
        """
        self._check_coordinate(x, y)
        return Cell.from_bool(bool(self.state[y, x]))

    def set(self, x: int, y: int, value: CellLike) -> None:
        """Set cell state at coordinates.

        Args:
            x: X coordinate (column)
            y: Y coordinate (row)
            value: Cell, bool, or rendering character

        Raises:
            OutOfRangeError: If coordinates are out of bounds
            CellValueError: If value is not a legal cell value
        """
        self._check_coordinate(x, y)
        alive = Cell.coerce(value).alive
        self._check_writable()
        self.state[y, x] = alive

    def cell(self, x: int, y: int) -> CellRef:
        """Get a mutable handle to the cell at (x, y).

        Raises:
            OutOfRangeError: If coordinates are out of bounds
        """
        self._check_coordinate(x, y)
        return CellRef(self, x, y)

    def clear(self) -> None:
        """Reset all cells to dead state."""
        self._check_writable()
        self.state.fill(False)

    def resize(self, new_width: int, new_height: Optional[int] = None) -> None:
        """Resize the grid, keeping the content of the overlapping region.

        Cells added by growing are DEAD; cells outside a shrunk extent are lost.

        Args:
            new_width: New width (cells)
            new_height: New height (cells), defaults to new_width

        Raises:
            ConstructionError: If either dimension is negative
        """
        new_width, new_height = _dimensions(new_width, new_height)
        self._check_writable()

        resized = np.zeros((new_height, new_width), dtype=bool)
        keep_height = min(self._height, new_height)
        keep_width = min(self._width, new_width)
        resized[:keep_height, :keep_width] = self.state[:keep_height, :keep_width]

        logger.debug(f"Resized grid {self._width}x{self._height} -> {new_width}x{new_height}")

        self.state = resized
        self._width = new_width
        self._height = new_height

    def crop(self, x0: int, y0: int, x1: int, y1: int) -> 'Grid':
        """Copy the half-open window [x0, x1) x [y0, y1) into a new grid.

        Raises:
            OutOfRangeError: If the window leaves the grid or has negative size
        """
        if x0 < 0 or y0 < 0 or x1 > self._width or y1 > self._height or x1 < x0 or y1 < y0:
            raise OutOfRangeError(
                f"Crop window ({x0}, {y0})-({x1}, {y1}) invalid for "
                f"{self._width}x{self._height} grid")

        return Grid.from_array(self.state[y0:y1, x0:x1])

    def merge(self, other: 'Grid', x0: int, y0: int, alive_only: bool = False) -> None:
        """Overlay another grid with its top left corner at (x0, y0).

        With alive_only the dead cells of other leave this grid untouched, so a
        merge can only ever bring cells to life.

        Raises:
            OutOfRangeError: If other does not fit entirely inside this grid
        """
        if not isinstance(other, Grid):
            raise TypeError(f"Can only merge a Grid, got {type(other).__name__}")

        if (x0 < 0 or y0 < 0 or x0 + other.width > self._width
                or y0 + other.height > self._height):
            raise OutOfRangeError(
                f"{other.width}x{other.height} grid placed at ({x0}, {y0}) does not fit "
                f"in {self._width}x{self._height} grid")
        self._check_writable()

        region = self.state[y0:y0 + other.height, x0:x0 + other.width]
        if alive_only:
            np.logical_or(region, other.state, out=region)
        else:
            region[...] = other.state

    def rotate(self, quarter_turns: int) -> 'Grid':
        """Return a copy rotated clockwise by quarter_turns * 90 degrees.

        Negative counts rotate counter-clockwise and only quarter_turns % 4
        matters. Odd counts swap width and height. Every call gathers every
        destination cell through the same index arithmetic, so the cost does
        not depend on the rotation.
        """
        try:
            turns = operator.index(quarter_turns) % 4
        except TypeError as exc:
            raise InvalidArgumentError(f"Rotation must be an integer, got {quarter_turns!r}") from exc

        ax, bx, ay, by, ox, oy = _ROTATIONS[turns]
        new_width, new_height = ((self._width, self._height),
                                 (self._height, self._width))[turns % 2]

        ys, xs = np.indices((new_height, new_width))
        source_x = ax * xs + bx * ys + ox * (self._width - 1)
        source_y = ay * xs + by * ys + oy * (self._height - 1)

        rotated = Grid(new_width, new_height)
        rotated.state[...] = self.state[source_y, source_x]
        return rotated

    def copy(self) -> 'Grid':
        """Create a deep, writable copy of the grid."""
        return Grid.from_array(self.state)

    def view(self) -> 'Grid':
        """Create a read-only grid sharing this grid's storage."""
        view = Grid.__new__(Grid)
        view._width = self._width
        view._height = self._height
        view.state = self.state.view()
        view.state.flags.writeable = False
        view._read_only = True
        return view

    def alive_coordinates(self) -> List[Tuple[int, int]]:
        """List (x, y) of every alive cell in row-major order."""
        rows, cols = np.nonzero(self.state)
        return [(int(x), int(y)) for y, x in zip(rows, cols)]

    def to_rows(self) -> List[str]:
        """Render the cells without a border, one string per row."""
        chars = np.where(self.state, Cell.ALIVE.char, Cell.DEAD.char)
        return [''.join(row) for row in chars]

    def to_string(self) -> str:
        """Render the grid framed by a border of '+', '-' and '|'.

        A 3x3 grid with its centre alive renders as::

            +---+
            |   |
            | # |
            |   |
            +---+
        """
        border = '+' + '-' * self._width + '+'
        lines = [border] + ['|' + row + '|' for row in self.to_rows()] + [border]
        return '\n'.join(lines) + '\n'

    def __getitem__(self, key: Tuple[int, int]) -> Cell:
        """Access cell state using grid[x, y] syntax."""
        x, y = key
        return self.get(x, y)

    def __setitem__(self, key: Tuple[int, int], value: CellLike) -> None:
        """Set cell state using grid[x, y] = value syntax."""
        x, y = key
        self.set(x, y, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (self._width == other._width and
                self._height == other._height and
                np.array_equal(self.state, other.state))

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        mode = ", read_only" if self._read_only else ""
        return f"Grid({self._width}x{self._height}, alive={self.get_alive_cells()}{mode})"
