"""Creature builders for the Game of Life."""

from .zoo import glider, r_pentomino, light_weight_spaceship, get_creature, CREATURES

__all__ = [
    'glider',
    'r_pentomino',
    'light_weight_spaceship',
    'get_creature',
    'CREATURES',
]
