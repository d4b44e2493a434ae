"""
Convert tiles into a board array, the representation renderers and agents read.
"""

from typing import Iterable

from numpy import int64, ndarray, zeros

from tileshift.addons.types import Tile
from tileshift.core.grid import Grid


def to_board(grid: Grid, tiles: Iterable[Tile]) -> ndarray:
    """
    Build the board array of a tile set.

    Parameters
    ----------
    grid : Grid
        The grid the tiles live on.
    tiles : Iterable[Tile]
        Tiles to place.

    Returns
    -------
    ndarray
        Array of shape (size, size) holding each tile's value, zero for empty cells.

    Notes
    -----
    Tile coordinates grow upward, so the tile at ``y = size - 1`` lands on row 0 of the array.
    """
    board = zeros((grid.size, grid.size), dtype=int64)
    for tile in tiles:
        board[grid.size - 1 - tile.y, tile.x] = tile.value
    return board


def format_board(board: ndarray) -> str:
    """Format a board array as tab separated rows, empty cells shown as 0."""
    return "\n".join(" \t".join(map(str, row)) for row in board.tolist())
