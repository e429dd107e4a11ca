"""ASCII (.gol) grid file format.

A file is a header line holding the width and height separated by a space,
followed by exactly height lines of exactly width characters, each terminated
by a newline. '#' is an alive cell and ' ' a dead cell::

    4 3
     #
      #
    ###
"""

import logging
from pathlib import Path
from typing import Union

from ..core.cell import Cell
from ..core.errors import CellValueError, FileFormatError
from ..core.grid import Grid

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def dumps_ascii(grid: Grid) -> str:
    """Serialize a grid to ASCII file content."""
    header = f"{grid.get_width()} {grid.get_height()}\n"
    return header + ''.join(row + '\n' for row in grid.to_rows())


def _parse_header(line: str):
    parts = line.split()
    if len(parts) != 2:
        raise FileFormatError(f"Header must be '<width> <height>', got {line!r}")

    try:
        width, height = int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise FileFormatError(f"Header dimensions must be integers, got {line!r}") from exc

    if width <= 0 or height <= 0:
        raise FileFormatError(f"Width and height must be positive, got {width}x{height}")
    return width, height


def loads_ascii(text: str) -> Grid:
    """Parse ASCII file content into a grid.

    Raises:
        FileFormatError: If the header, a row or a cell character is invalid,
            rows are missing, or non-blank content follows the last row
    """
    lines = text.split('\n')
    if lines[-1] == '':
        lines.pop()
    width, height = _parse_header(lines[0] if lines else '')

    rows = [line.rstrip('\r') for line in lines[1:1 + height]]
    if len(rows) < height:
        raise FileFormatError(f"File ends unexpectedly after {len(rows)} of {height} rows")

    grid = Grid(width, height)
    for y, row in enumerate(rows):
        if len(row) != width:
            raise FileFormatError(f"Row {y} has {len(row)} cells, expected {width}")
        for x, char in enumerate(row):
            try:
                grid.set(x, y, Cell.from_char(char))
            except CellValueError as exc:
                raise FileFormatError(f"Invalid cell {char!r} at ({x}, {y})") from exc

    if ''.join(lines[1 + height:]).strip():
        raise FileFormatError(f"Unexpected content after row {height - 1}")

    return grid


def save_ascii(path: PathLike, grid: Grid) -> None:
    """Save a grid as an ASCII file.

    Raises:
        OSError: If the file cannot be opened for writing
    """
    content = dumps_ascii(grid)
    with open(path, 'w', encoding='ascii', newline='\n') as f:
        f.write(content)

    logger.debug(f"Saved {grid.get_width()}x{grid.get_height()} grid to {path}")


def load_ascii(path: PathLike) -> Grid:
    """Load a grid from an ASCII file.

    Raises:
        OSError: If the file cannot be opened
        FileFormatError: If the content is malformed
    """
    with open(path, 'r', encoding='utf-8', newline='') as f:
        content = f.read()

    grid = loads_ascii(content)
    logger.debug(f"Loaded {grid.get_width()}x{grid.get_height()} grid from {path}")
    return grid
