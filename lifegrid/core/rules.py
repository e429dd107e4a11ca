"""
Conway's Game of Life Rules

Birth/survival rule parameters and neighbor counting for the Moore
neighborhood. The per-cell helpers mirror the vectorised ones and exist for
inspection and testing; World.step uses the vectorised path.
"""

import re
from typing import Iterable, Optional, Set

import numpy as np

from .errors import InvalidArgumentError


# Standard Conway rules - B3/S23
SURVIVAL_SET: Set[int] = {2, 3}  # Live cells survive with 2-3 neighbors
BIRTH_SET: Set[int] = {3}        # Dead cells born with exactly 3 neighbors

NEIGHBOR_OFFSETS = tuple(
    (dx, dy)
    for dy in (-1, 0, 1)
    for dx in (-1, 0, 1)
    if not (dx == 0 and dy == 0)
)

_RULESTRING = re.compile(r"^B([0-8]*)/S([0-8]*)$", re.IGNORECASE)


def update_cell(alive: bool, live_neighbors: int) -> bool:
    """Apply standard Conway rules to determine next cell state.

    Args:
        alive: Current cell state (True=alive, False=dead)
        live_neighbors: Number of live neighbors (0-8)

    Returns:
        Next cell state (True=alive, False=dead)
    """
    if alive:
        return live_neighbors in SURVIVAL_SET
    else:
        return live_neighbors in BIRTH_SET


def count_live_neighbors(state: np.ndarray, x: int, y: int, toroidal: bool = False) -> int:
    """Count live neighbors of cell at (x, y) using Moore neighborhood.

    Off-grid neighbors do not exist unless toroidal, in which case every
    neighbor coordinate wraps modulo the grid size. On a 1-wide or 1-tall
    grid the wrapped neighbors may be the cell itself and are counted as such.

    Args:
        state: 2D boolean numpy array indexed [y, x]
        x: Cell x-coordinate
        y: Cell y-coordinate
        toroidal: Wrap neighbors around the edges

    Returns:
        Number of live neighbors (0-8)
    """
    height, width = state.shape
    count = 0

    for dx, dy in NEIGHBOR_OFFSETS:
        nx, ny = x + dx, y + dy

        if toroidal:
            nx = nx % width
            ny = ny % height
        elif not (0 <= nx < width and 0 <= ny < height):
            continue

        if state[ny, nx]:
            count += 1

    return count


def neighbor_counts(state: np.ndarray, toroidal: bool = False) -> np.ndarray:
    """Compute 8-neighbor counts for every cell of a 2D boolean array.

    Args:
        state: 2D array of shape (height, width)
        toroidal: If True, wrap around the edges; otherwise zero-padded edges

    Returns:
        uint8 array of shape (height, width) with counts in [0, 8]
    """
    cells = state.astype(np.uint8)
    height, width = cells.shape
    counts = np.zeros((height, width), dtype=np.uint8)

    if toroidal:
        for dx, dy in NEIGHBOR_OFFSETS:
            counts += np.roll(cells, (-dy, -dx), axis=(0, 1))
    else:
        padded = np.pad(cells, 1, mode="constant")
        for dx, dy in NEIGHBOR_OFFSETS:
            counts += padded[1 + dy:1 + dy + height, 1 + dx:1 + dx + width]

    return counts


def _neighbor_set(counts: Optional[Iterable[int]], default: Set[int], name: str) -> Set[int]:
    if counts is None:
        return default.copy()

    result = set()
    for count in counts:
        if not isinstance(count, (int, np.integer)) or isinstance(count, bool) or not 0 <= count <= 8:
            raise InvalidArgumentError(f"{name} neighbor counts must be integers in 0..8, got {count!r}")
        result.add(int(count))
    return result


class LifeRule:
    """Outer-totalistic rule over the Moore neighborhood.

    Defaults to standard Conway rules (B3/S23).
    """

    def __init__(self,
                 survival_set: Optional[Iterable[int]] = None,
                 birth_set: Optional[Iterable[int]] = None):
        """Initialize rule parameters.

        Args:
            survival_set: Neighbor counts for live cell survival (default {2,3})
            birth_set: Neighbor counts for dead cell birth (default {3})

        Raises:
            InvalidArgumentError: If a count is not an integer in 0..8
        """
        self.survival_set: Set[int] = _neighbor_set(survival_set, SURVIVAL_SET, "Survival")
        self.birth_set: Set[int] = _neighbor_set(birth_set, BIRTH_SET, "Birth")

        self._survival_table = np.zeros(9, dtype=bool)
        self._survival_table[sorted(self.survival_set)] = True
        self._birth_table = np.zeros(9, dtype=bool)
        self._birth_table[sorted(self.birth_set)] = True

    @classmethod
    def standard(cls) -> 'LifeRule':
        """Create standard Conway rules."""
        return cls(SURVIVAL_SET, BIRTH_SET)

    @classmethod
    def from_rulestring(cls, rulestring: str) -> 'LifeRule':
        """Parse B/S notation such as "B3/S23" or "B36/S23".

        Raises:
            InvalidArgumentError: If the string is not in B/S notation
        """
        match = _RULESTRING.match(rulestring.strip())
        if match is None:
            raise InvalidArgumentError(f"Invalid rulestring {rulestring!r}, expected e.g. 'B3/S23'")

        birth, survival = match.groups()
        return cls(survival_set=[int(d) for d in survival], birth_set=[int(d) for d in birth])

    @property
    def rulestring(self) -> str:
        birth = ''.join(str(n) for n in sorted(self.birth_set))
        survival = ''.join(str(n) for n in sorted(self.survival_set))
        return f"B{birth}/S{survival}"

    def next_state(self, alive: bool, live_neighbors: int) -> bool:
        """Apply these rule parameters to a single cell.

        Raises:
            InvalidArgumentError: If live_neighbors is outside 0..8
        """
        if not 0 <= live_neighbors <= 8:
            raise InvalidArgumentError(f"Neighbor count must be in 0..8, got {live_neighbors}")
        if alive:
            return live_neighbors in self.survival_set
        else:
            return live_neighbors in self.birth_set

    def apply(self, state: np.ndarray, counts: np.ndarray) -> np.ndarray:
        """Compute the next state of every cell from current state and neighbor counts."""
        return np.where(state, self._survival_table[counts], self._birth_table[counts])

    def copy(self) -> 'LifeRule':
        return LifeRule(self.survival_set, self.birth_set)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LifeRule):
            return NotImplemented
        return self.survival_set == other.survival_set and self.birth_set == other.birth_set

    def __repr__(self) -> str:
        return f"LifeRule({self.rulestring})"
