"""
Coordinate space of the game: grid size, bounds and cell indexing.
"""

from dataclasses import dataclass
from typing import Iterable

from tileshift.addons.config import is_power_of_two
from tileshift.addons.exceptions import InvalidConfiguration, InvariantViolation
from tileshift.addons.types import Position, Tile


@dataclass(frozen=True)
class Grid:
    """
    Immutable description of a square grid.

    The grid holds no tiles, it only tells which coordinates exist and how to index them.
    """

    size: int

    def __post_init__(self):
        if self.size < 2:
            raise InvalidConfiguration(f"grid size must be at least 2, got {self.size}")

    def is_in_bounds(self, x: int, y: int) -> bool:
        """
        Check if a coordinate lies on the grid.

        Parameters
        ----------
        x : int
            Column, from the left edge.
        y : int
            Row, from the bottom edge.

        Returns
        -------
        bool
            True if ``0 <= x, y < size``.
        """
        return 0 <= x < self.size and 0 <= y < self.size

    def cell_index(self, x: int, y: int) -> int:
        """
        Row-major index of a cell.

        Raises
        ------
        InvariantViolation
            If the coordinate is off the grid.
        """
        if not self.is_in_bounds(x, y):
            raise InvariantViolation(f"cell ({x}, {y}) is outside a grid of size {self.size}")
        return y * self.size + x

    def position(self, index: int) -> Position:
        """Inverse of ``cell_index``."""
        if not 0 <= index < self.size * self.size:
            raise InvariantViolation(f"cell index {index} is outside a grid of size {self.size}")
        return Position(index % self.size, index // self.size)

    def cells(self) -> list[Position]:
        """All positions of the grid, in cell index order."""
        return [self.position(index) for index in range(self.size * self.size)]


def create_grid(size: int) -> Grid:
    """
    Create a grid descriptor.

    Parameters
    ----------
    size : int
        Side of the square grid.

    Returns
    -------
    Grid
        The immutable grid.

    Raises
    ------
    InvalidConfiguration
        If ``size`` is lower than 2.
    """
    return Grid(size=size)


def check_tiles(grid: Grid, tiles: Iterable[Tile]) -> None:
    """
    Fail fast if a tile set breaks the grid contract.

    Parameters
    ----------
    grid : Grid
        The grid the tiles live on.
    tiles : Iterable[Tile]
        Tiles to check.

    Raises
    ------
    InvariantViolation
        On an out-of-bounds tile, a shared position, a shared identity or a value that is not a power of two.
    """
    positions = set()
    identities = set()
    for tile in tiles:
        if not grid.is_in_bounds(tile.x, tile.y):
            raise InvariantViolation(f"tile {tile.identity} at {tuple(tile.position)} is out of bounds")
        if tile.position in positions:
            raise InvariantViolation(f"two tiles share position {tuple(tile.position)}")
        if tile.identity in identities:
            raise InvariantViolation(f"two tiles share identity {tile.identity}")
        if not is_power_of_two(tile.value):
            raise InvariantViolation(f"tile {tile.identity} has invalid value {tile.value}")
        positions.add(tile.position)
        identities.add(tile.identity)
