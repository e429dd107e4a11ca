"""Two-valued cell state for Conway's Game of Life."""

from enum import Enum
from typing import Union

import numpy as np

from .errors import CellValueError


class Cell(Enum):
    """A cell is either ALIVE or DEAD.

    The enum values are the characters used by the ASCII rendering and file
    format, so ``Cell('#')`` is ALIVE and ``Cell(' ')`` is DEAD.
    """
    DEAD = ' '
    ALIVE = '#'

    @property
    def char(self) -> str:
        return self.value

    @property
    def alive(self) -> bool:
        return self is Cell.ALIVE

    def __bool__(self) -> bool:
        return self is Cell.ALIVE

    @classmethod
    def from_bool(cls, alive: bool) -> 'Cell':
        return cls.ALIVE if alive else cls.DEAD

    @classmethod
    def from_char(cls, char: str) -> 'Cell':
        """Parse a single rendering character.

        Raises:
            CellValueError: If char is not '#' or ' '
        """
        try:
            return cls(char)
        except ValueError as exc:
            raise CellValueError(f"Invalid cell character {char!r}") from exc

    @classmethod
    def coerce(cls, value: Union['Cell', bool, str]) -> 'Cell':
        """Convert a Cell, bool or rendering character to a Cell.

        Integers other than bools are rejected so that a stray 2 or -1 is
        reported rather than silently treated as alive.

        Raises:
            CellValueError: If value is not a legal cell representation
        """
        if isinstance(value, Cell):
            return value
        if isinstance(value, (bool, np.bool_)):
            return cls.from_bool(bool(value))
        if isinstance(value, str):
            return cls.from_char(value)
        raise CellValueError(f"Invalid cell value {value!r}")


ALIVE = Cell.ALIVE
DEAD = Cell.DEAD
