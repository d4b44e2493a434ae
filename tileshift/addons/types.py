# -*- coding: utf-8 -*-
"""
New types for the tile engine.
"""
from typing import NamedTuple, Optional, Tuple


class Position(NamedTuple):
    """
    Cell coordinates. ``x`` grows to the right, ``y`` grows upward.
    """

    x: int
    y: int


class Tile(NamedTuple):
    """
    A numbered tile on the grid.
    """

    identity: int
    value: int
    position: Position

    @property
    def x(self) -> int:
        return self.position.x

    @property
    def y(self) -> int:
        return self.position.y


class TurnResult(NamedTuple):
    """
    Tiles after a turn, whether the move changed anything and the tile spawned afterward, if any.
    """

    tiles: Tuple[Tile, ...]
    changed: bool
    spawned: Optional[Tile] = None
