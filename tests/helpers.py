"""
Builders shared by the tests.
"""
from typing import Iterable

from numpy import ndarray

from tileshift.addons.types import Position, Tile


def make_tiles(cells: Iterable[tuple[int, int, int]]) -> tuple[Tile, ...]:
    """Build tiles from (x, y, value) triples, identities numbered in order."""
    return tuple(Tile(identity=i, value=value, position=Position(x, y)) for i, (x, y, value) in enumerate(cells))


def tiles_from_board(board: ndarray) -> tuple[Tile, ...]:
    """Build tiles from a board array whose row 0 is the top of the grid."""
    size = len(board)
    cells = [
        (x, size - 1 - row, int(board[row][x])) for row in range(size) for x in range(size) if board[row][x] != 0
    ]
    return make_tiles(cells)


def by_position(tiles: Iterable[Tile]) -> dict[tuple[int, int], int]:
    """Map each occupied (x, y) to its value."""
    return {tuple(tile.position): tile.value for tile in tiles}
