# -*- coding: utf-8 -*-
"""
Turn-based tile-grid engine for a 2048-style puzzle.

The engine resolves directional commands into a new set of tiles by sliding and merging,
then introduces a new tile on an empty cell.
"""

from .addons import GameConfig, Position, Tile, TurnResult
from .core import Direction, Grid, create_grid, resolve_move, spawn_tile
from .envs import TurnController

__all__ = [
    "GameConfig",
    "Position",
    "Tile",
    "TurnResult",
    "Direction",
    "Grid",
    "create_grid",
    "resolve_move",
    "spawn_tile",
    "TurnController",
]
