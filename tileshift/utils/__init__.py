# -*- coding: utf-8 -*-
"""
This module provides helpers for presenting the tiles.

It includes the conversion of tiles to a board array, the screen geometry of the playground, and a
`WindowBoard` class drawing the game with Matplotlib.
"""

from .board import format_board, to_board
from .layout import TILE_SIZE, TILE_SPACER, playground_size, tile_center, tile_offset
from .windows import WindowBoard, release_keys

__all__ = [
    "format_board",
    "to_board",
    "TILE_SIZE",
    "TILE_SPACER",
    "playground_size",
    "tile_center",
    "tile_offset",
    "WindowBoard",
    "release_keys",
]
