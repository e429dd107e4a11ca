"""Double-buffered Game of Life world.

A World owns two grids of identical size. Each step reads only the current
grid, writes every cell of the next grid, then the two exchange roles so the
old current grid becomes scratch space for the following step.
"""

import logging
import operator
from typing import List, Optional, Union

from ..config import SimulationConfig
from .errors import InvalidArgumentError, InvalidDimensionsError, OutOfRangeError
from .grid import Grid
from .rules import count_live_neighbors, neighbor_counts

logger = logging.getLogger(__name__)


class World:
    """Game of Life stepping engine.

    ``World()``, ``World(n)`` and ``World(width, height)`` start all dead;
    ``World(grid)`` starts from a copy of grid.
    """

    def __init__(self,
                 width: Union[int, Grid] = 0,
                 height: Optional[int] = None,
                 config: Optional[SimulationConfig] = None):
        """Initialize world buffers.

        Args:
            width: World width (cells), or a Grid to seed the current state
            height: World height (cells), defaults to width
            config: Simulation defaults (standard non-toroidal Conway if None)

        Raises:
            ConstructionError: If either dimension is negative
        """
        self.config = config.copy() if config is not None else SimulationConfig()

        if isinstance(width, Grid):
            if height is not None:
                raise InvalidArgumentError("height cannot be given when seeding from a Grid")
            self._current_state = width.copy()
        else:
            self._current_state = Grid(width, height)
        self._next_state = Grid(self._current_state.width, self._current_state.height)
        self._generation = 0

        logger.debug(f"Created world {self.get_width()}x{self.get_height()} "
                     f"with rule {self.config.rule.rulestring}")

    @classmethod
    def from_grid(cls, grid: Grid, config: Optional[SimulationConfig] = None) -> 'World':
        """Create a world whose current state is a copy of grid."""
        if not isinstance(grid, Grid):
            raise TypeError(f"Expected a Grid, got {type(grid).__name__}")
        return cls(grid, config=config)

    @property
    def generation(self) -> int:
        """Number of steps taken since construction."""
        return self._generation

    def get_width(self) -> int:
        return self._current_state.get_width()

    def get_height(self) -> int:
        return self._current_state.get_height()

    def get_total_cells(self) -> int:
        return self._current_state.get_total_cells()

    def get_alive_cells(self) -> int:
        return self._current_state.get_alive_cells()

    def get_dead_cells(self) -> int:
        return self._current_state.get_dead_cells()

    def get_state(self) -> Grid:
        """Get a read-only view of the current state.

        The view shares storage with the world and is recycled as scratch space
        by the next step, so it must not be kept across calls to step.
        """
        return self._current_state.view()

    def resize(self, new_width: int, new_height: Optional[int] = None) -> None:
        """Resize both buffers, keeping the content of the overlapping region.

        Raises:
            ConstructionError: If either dimension is negative
        """
        self._current_state.resize(new_width, new_height)
        self._next_state.resize(new_width, new_height)

    def _check_buffers(self) -> None:
        current, following = self._current_state, self._next_state
        if current.width != following.width or current.height != following.height:
            raise InvalidDimensionsError(
                f"World buffers differ in size: {current.width}x{current.height} "
                f"vs {following.width}x{following.height}")

    def count_neighbours(self, x: int, y: int, toroidal: Optional[bool] = None) -> int:
        """Count live neighbours of the current cell at (x, y).

        Raises:
            OutOfRangeError: If coordinates are out of bounds
        """
        if toroidal is None:
            toroidal = self.config.toroidal
        if not self._current_state.valid_coordinate(x, y):
            raise OutOfRangeError(
                f"Coordinates ({x}, {y}) out of bounds for "
                f"{self.get_width()}x{self.get_height()} world")
        return count_live_neighbors(self._current_state.state, x, y, toroidal)

    def step(self, toroidal: Optional[bool] = None) -> int:
        """Advance the world by one generation.

        Args:
            toroidal: Wrap neighbours around the edges (configured default if None)

        Returns:
            Number of live cells in the new generation

        Raises:
            InvalidDimensionsError: If the buffers no longer match in size
        """
        if toroidal is None:
            toroidal = self.config.toroidal
        self._check_buffers()

        current = self._current_state.state
        counts = neighbor_counts(current, toroidal)
        self._next_state.state[...] = self.config.rule.apply(current, counts)

        self._current_state, self._next_state = self._next_state, self._current_state
        self._generation += 1

        return self._current_state.get_alive_cells()

    def advance(self, steps: int, toroidal: Optional[bool] = None) -> List[int]:
        """Advance the world by several generations.

        Args:
            steps: Number of generations, 0 is a no-op
            toroidal: Wrap neighbours around the edges (configured default if None)

        Returns:
            Live cell count after each step

        Raises:
            InvalidArgumentError: If steps is negative or not an integer
        """
        try:
            steps = operator.index(steps)
        except TypeError as exc:
            raise InvalidArgumentError(f"steps must be an integer, got {steps!r}") from exc
        if steps < 0:
            raise InvalidArgumentError(f"Cannot advance by a negative number of steps ({steps})")

        log_interval = self.config.log_interval
        live_counts = []

        for step_num in range(steps):
            live_counts.append(self.step(toroidal))

            if log_interval is not None and (step_num + 1) % log_interval == 0:
                logger.debug(f"Generation {self._generation}: {live_counts[-1]} alive")

        if log_interval is not None and steps:
            logger.info(f"Advanced {steps} generations to generation {self._generation}, "
                        f"{live_counts[-1]} alive")

        return live_counts

    def __str__(self) -> str:
        return self._current_state.to_string()

    def __repr__(self) -> str:
        return (f"World({self.get_width()}x{self.get_height()}, generation={self._generation}, "
                f"alive={self.get_alive_cells()})")
