"""
Tile spawning: pick empty cells uniformly at random and place new tiles there.
"""

import logging
from typing import Iterable, Iterator, Optional

from numpy.random import Generator

from tileshift.addons.config import SPAWN_VALUE
from tileshift.addons.exceptions import InvalidConfiguration
from tileshift.addons.types import Position, Tile
from tileshift.core.grid import Grid

_logger = logging.getLogger(__name__)


def empty_cells(grid: Grid, occupied: Iterable[Position]) -> list[Position]:
    """
    List the cells holding no tile.

    Parameters
    ----------
    grid : Grid
        The grid.
    occupied : Iterable[Position]
        Positions of the current tiles.

    Returns
    -------
    list[Position]
        Empty positions, in cell index order.

    Raises
    ------
    InvariantViolation
        If an occupied position is off the grid.
    """
    taken = {grid.cell_index(*position) for position in occupied}
    return [grid.position(index) for index in range(grid.size * grid.size) if index not in taken]


def spawn_tile(
    grid: Grid, occupied: Iterable[Position], rng: Generator, identity: int, value: int = SPAWN_VALUE
) -> Optional[Tile]:
    """
    Create a tile on a random empty cell.

    Parameters
    ----------
    grid : Grid
        The grid.
    occupied : Iterable[Position]
        Positions of the current tiles.
    rng : Generator
        Shared random generator.
    identity : int
        Identity of the new tile.
    value : int, optional
        Value of the new tile (default is 2).

    Returns
    -------
    Tile, optional
        The new tile, or None if the board is full.
    """
    available = empty_cells(grid, occupied)
    if not available:
        _logger.debug("No empty cell left on a grid of size %d", grid.size)
        return None

    cell = available[int(rng.integers(len(available)))]
    return Tile(identity=identity, value=value, position=cell)


def populate(
    grid: Grid, rng: Generator, identities: Iterator[int], count: int = 2, value: int = SPAWN_VALUE
) -> list[Tile]:
    """
    Place the first tiles of a game on an empty board.

    Parameters
    ----------
    grid : Grid
        The grid.
    rng : Generator
        Shared random generator.
    identities : Iterator[int]
        Source of tile identities.
    count : int, optional
        Number of tiles to place (default is 2).
    value : int, optional
        Value of every placed tile (default is 2).

    Returns
    -------
    list[Tile]
        New tiles, at distinct positions chosen without replacement.

    Raises
    ------
    InvalidConfiguration
        If the grid has fewer cells than ``count``.
    """
    cells = grid.cells()
    if not 0 <= count <= len(cells):
        raise InvalidConfiguration(f"cannot place {count} tiles on {len(cells)} cells")

    chosen = rng.choice(len(cells), size=count, replace=False)
    return [Tile(identity=next(identities), value=value, position=cells[int(index)]) for index in chosen]
