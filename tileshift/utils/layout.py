"""
Screen geometry of the playground, in pixels, centred on the origin.
"""

from tileshift.addons.types import Position
from tileshift.core.grid import Grid

# ##: Side of a tile.
TILE_SIZE = 100.0

# ##: Gap between two tiles, and between the outer tiles and the border.
TILE_SPACER = 10.0


def playground_size(grid: Grid) -> float:
    """Side of the square playground holding every cell and its spacing."""
    return grid.size * TILE_SIZE + (grid.size + 1) * TILE_SPACER


def tile_offset(grid: Grid, index: int) -> float:
    """
    Centre of a cell along one axis.

    Parameters
    ----------
    grid : Grid
        The grid.
    index : int
        Column or row of the cell.

    Returns
    -------
    float
        Coordinate of the cell centre, the playground being centred on 0.
    """
    offset = -playground_size(grid) / 2.0 + 0.5 * TILE_SIZE
    return offset + index * TILE_SIZE + (index + 1) * TILE_SPACER


def tile_center(grid: Grid, position: Position) -> tuple[float, float]:
    """Centre of a cell on screen; y grows upward like the grid."""
    return tile_offset(grid, position.x), tile_offset(grid, position.y)
