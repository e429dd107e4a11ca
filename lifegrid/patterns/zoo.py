"""Creature definitions for Conway's Game of Life.

Each builder returns a new Grid the size of the creature's bounding box, drawn
in its canonical orientation. Place creatures into a larger grid with
Grid.merge and turn them with Grid.rotate.
"""

from typing import Callable, Dict, List

from ..core.grid import Grid


# Canonical drawings, '#' alive, ' ' dead, one string per row
GLIDER_ROWS: List[str] = [
    " # ",
    "  #",
    "###",
]

R_PENTOMINO_ROWS: List[str] = [
    " ##",
    "## ",
    " # ",
]

LIGHT_WEIGHT_SPACESHIP_ROWS: List[str] = [
    " #  #",
    "#    ",
    "#   #",
    "#### ",
]


def glider() -> Grid:
    """Construct a 3x3 grid containing a glider.

    The glider travels towards +x, +y (down and to the right), moving one cell
    diagonally every 4 generations::

        +---+
        | # |
        |  #|
        |###|
        +---+
    """
    return Grid.from_rows(GLIDER_ROWS)


def r_pentomino() -> Grid:
    """Construct a 3x3 grid containing an r-pentomino."""
    return Grid.from_rows(R_PENTOMINO_ROWS)


def light_weight_spaceship() -> Grid:
    """Construct a 5x4 grid containing a light weight spaceship.

    ::

        +-----+
        | #  #|
        |#    |
        |#   #|
        |#### |
        +-----+
    """
    return Grid.from_rows(LIGHT_WEIGHT_SPACESHIP_ROWS)


CREATURES: Dict[str, Callable[[], Grid]] = {
    'glider': glider,
    'r_pentomino': r_pentomino,
    'light_weight_spaceship': light_weight_spaceship,
}


def get_creature(name: str) -> Grid:
    """Construct a creature by name.

    Raises:
        KeyError: If no creature has that name
    """
    try:
        builder = CREATURES[name]
    except KeyError:
        raise KeyError(f"Unknown creature {name!r}, expected one of {sorted(CREATURES)}") from None
    return builder()
