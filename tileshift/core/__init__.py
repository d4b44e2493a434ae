# -*- coding: utf-8 -*-
"""
This module provides the rules of the tile grid.

It includes the grid description, the move resolver sliding and merging tiles toward an edge,
and the spawner placing new tiles on empty cells.
"""

from .grid import Grid, check_tiles, create_grid
from .resolver import Direction, can_move, legal_directions, resolve_move
from .spawner import empty_cells, populate, spawn_tile

__all__ = [
    "Grid",
    "create_grid",
    "check_tiles",
    "Direction",
    "resolve_move",
    "can_move",
    "legal_directions",
    "empty_cells",
    "spawn_tile",
    "populate",
]
