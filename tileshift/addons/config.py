# -*- coding: utf-8 -*-
"""
Set of config for the tile engine.
"""
from dataclasses import dataclass
from typing import Optional

from .exceptions import InvalidConfiguration

# ##: Value of every spawned tile.
SPAWN_VALUE = 2

# ##: Number of tiles placed on an empty board.
INITIAL_TILES = 2


def is_power_of_two(value: int) -> bool:
    """Check that a value is a power of two greater or equal to 2."""
    return value >= 2 and value & (value - 1) == 0


@dataclass(frozen=True)
class GameConfig:
    """
    Game configuration.

    Attributes
    ----------
    size : int
        Side of the square grid.
    initial_tiles : int
        Number of tiles placed at setup.
    spawn_value : int
        Value of every spawned tile.
    spawn_when_unchanged : bool
        Spawn a tile after every accepted command, even when nothing moved.
    seed : int, optional
        Seed of the shared random generator.
    """

    size: int = 4
    initial_tiles: int = INITIAL_TILES
    spawn_value: int = SPAWN_VALUE
    spawn_when_unchanged: bool = False
    seed: Optional[int] = None

    def __post_init__(self):
        if self.size < 2:
            raise InvalidConfiguration(f"grid size must be at least 2, got {self.size}")
        if not 0 <= self.initial_tiles <= self.size * self.size:
            raise InvalidConfiguration(
                f"initial_tiles must be between 0 and {self.size * self.size}, got {self.initial_tiles}"
            )
        if not is_power_of_two(self.spawn_value):
            raise InvalidConfiguration(f"spawn_value must be a power of two >= 2, got {self.spawn_value}")
