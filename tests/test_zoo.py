"""Tests for creature builders and the cell type."""

import pytest
from lifegrid.core.cell import Cell, ALIVE, DEAD
from lifegrid.core.errors import CellValueError
from lifegrid.core.grid import Grid
from lifegrid.core.world import World
from lifegrid.patterns.zoo import (
    CREATURES,
    get_creature,
    glider,
    light_weight_spaceship,
    r_pentomino,
)


class TestCell:
    """Test the two-valued cell type."""

    def test_characters(self):
        """Cells render as '#' and ' '."""
        assert ALIVE.char == '#'
        assert DEAD.char == ' '
        assert Cell.from_char('#') is ALIVE
        assert Cell.from_char(' ') is DEAD

    def test_truthiness(self):
        """Only ALIVE is truthy."""
        assert ALIVE
        assert not DEAD
        assert Cell.from_bool(True) is ALIVE
        assert Cell.from_bool(False) is DEAD

    @pytest.mark.parametrize("char", ['.', 'O', '', '##', '\n'])
    def test_invalid_character(self, char):
        """Any other character is a corruption error."""
        with pytest.raises(CellValueError):
            Cell.from_char(char)


class TestCreatures:
    """Test creature bounding boxes and drawings."""

    def test_glider(self):
        """Glider is 3x3 with 5 cells."""
        grid = glider()

        assert (grid.width, grid.height) == (3, 3)
        assert grid.to_string() == ("+---+\n"
                                    "| # |\n"
                                    "|  #|\n"
                                    "|###|\n"
                                    "+---+\n")

    def test_r_pentomino(self):
        """R-pentomino is 3x3 with 5 cells."""
        grid = r_pentomino()

        assert (grid.width, grid.height) == (3, 3)
        assert grid.get_alive_cells() == 5
        assert grid.to_rows() == [" ##",
                                  "## ",
                                  " # "]

    def test_light_weight_spaceship(self):
        """Light weight spaceship is 5x4 with 9 cells."""
        grid = light_weight_spaceship()

        assert (grid.width, grid.height) == (5, 4)
        assert grid.get_alive_cells() == 9
        assert grid.to_rows() == [" #  #",
                                  "#    ",
                                  "#   #",
                                  "#### "]

    def test_builders_return_new_grids(self):
        """Each call returns an independent grid."""
        first = glider()
        first[0, 0] = ALIVE

        assert glider()[0, 0] is DEAD

    def test_get_creature_by_name(self):
        """Creatures can be looked up by name."""
        for name, builder in CREATURES.items():
            assert get_creature(name) == builder()

    def test_unknown_creature(self):
        """Unknown names raise KeyError."""
        with pytest.raises(KeyError, match="Unknown creature"):
            get_creature('pulsar')


class TestCreatureDynamics:
    """Test that creatures behave as expected in a world."""

    def test_glider_moves_diagonally(self):
        """The zoo glider moves one cell down and right every 4 generations."""
        seed = Grid(10, 10)
        seed.merge(glider(), 2, 2)
        world = World(seed)
        start = set(world.get_state().alive_coordinates())

        world.advance(8)
        assert set(world.get_state().alive_coordinates()) == {(x + 2, y + 2) for x, y in start}

    def test_rotated_glider_changes_direction(self):
        """A glider rotated a half turn moves up and left."""
        seed = Grid(10, 10)
        seed.merge(glider().rotate(2), 5, 5)
        world = World(seed)
        start = set(world.get_state().alive_coordinates())

        world.advance(4)
        assert set(world.get_state().alive_coordinates()) == {(x - 1, y - 1) for x, y in start}

    def test_spaceship_moves_horizontally(self):
        """The spaceship shifts two cells sideways every 4 generations."""
        seed = Grid(16, 10)
        seed.merge(light_weight_spaceship(), 6, 3)
        world = World(seed)
        start = world.get_state().alive_coordinates()

        counts = world.advance(4)
        end = world.get_state().alive_coordinates()

        assert counts[-1] == 9
        shift = min(x for x, _ in end) - min(x for x, _ in start)
        assert abs(shift) == 2
        assert set(end) == {(x + shift, y) for x, y in start}

    def test_r_pentomino_grows(self):
        """The r-pentomino does not settle quickly."""
        seed = Grid(40, 40)
        seed.merge(r_pentomino(), 18, 18)
        world = World(seed)

        world.advance(10)
        assert world.get_alive_cells() > 5
