"""
Move resolution: sort tiles into lanes, compact them toward an edge and merge equal neighbours.
"""

from enum import Enum
from typing import Iterable

from tileshift.addons.types import Position, Tile, TurnResult
from tileshift.core.grid import Grid, check_tiles


class Direction(Enum):
    """
    Directional move command.

    The value is the key name the command is usually bound to.
    """

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    def traversal_key(self, tile: Tile) -> tuple[int, int]:
        """
        Sort key grouping tiles by lane, then by distance to the destination edge.

        Parameters
        ----------
        tile : Tile
            The tile to order.

        Returns
        -------
        tuple[int, int]
            ``(lane, distance)``, both compared ascending.
        """
        x, y = tile.position
        if self is Direction.LEFT:
            return y, x
        if self is Direction.RIGHT:
            return -y, -x
        if self is Direction.UP:
            return -x, -y
        return x, y

    def lane(self, position: Position) -> int:
        """Coordinate left untouched by the move: the row for left/right, the column for up/down."""
        if self in (Direction.LEFT, Direction.RIGHT):
            return position.y
        return position.x

    def place(self, size: int, position: Position, column: int) -> Position:
        """
        Convert a compacted column index back to an absolute position.

        Parameters
        ----------
        size : int
            Side of the grid.
        position : Position
            Position before the move; its lane coordinate is kept.
        column : int
            Index of the tile within its lane, counted from the destination edge.

        Returns
        -------
        Position
            The new position.
        """
        if self is Direction.LEFT:
            return Position(column, position.y)
        if self is Direction.RIGHT:
            return Position(size - 1 - column, position.y)
        if self is Direction.UP:
            return Position(position.x, size - 1 - column)
        return Position(position.x, column)


def slide_and_merge(grid: Grid, tiles: Iterable[Tile], direction: Direction) -> tuple[int, list[Tile]]:
    """
    Slide every tile toward the edge pointed by ``direction`` and merge equal neighbours.

    Parameters
    ----------
    grid : Grid
        The grid the tiles live on.
    tiles : Iterable[Tile]
        Current tiles, at unique in-bounds positions.
    direction : Direction
        The move to apply.

    Returns
    -------
    score : int
        Sum of the values created by merges.
    moved : list[Tile]
        The tiles after the move, in traversal order.

    Notes
    -----
    - Tiles are swept in traversal order; the column index restarts at 0 on each new lane.
    - When two consecutive tiles of the same lane hold the same value, the first one doubles and keeps
      its identity, the second one disappears.
    - A merged tile is never compared with the following tile, so each tile merges at most once per move.
    """
    moved: list[Tile] = []
    score = 0
    column = 0
    lane = None
    mergeable = False

    for tile in sorted(tiles, key=direction.traversal_key):
        tile_lane = direction.lane(tile.position)
        if tile_lane != lane:
            lane, column, mergeable = tile_lane, 0, False

        # ##: Merge into the last placed tile.
        if mergeable and moved[-1].value == tile.value:
            merged = moved[-1]._replace(value=tile.value * 2)
            moved[-1] = merged
            score += merged.value
            mergeable = False
            continue

        moved.append(tile._replace(position=direction.place(grid.size, tile.position, column)))
        column += 1
        mergeable = True

    return score, moved


def scored_move(grid: Grid, tiles: Iterable[Tile], direction: Direction) -> tuple[int, TurnResult]:
    """
    Resolve one directional command and report the value created by merges.

    Parameters
    ----------
    grid : Grid
        The grid the tiles live on.
    tiles : Iterable[Tile]
        Current tiles.
    direction : Direction
        The move to apply.

    Returns
    -------
    score : int
        Sum of the values created by merges.
    result : TurnResult
        The tiles after the move and whether any tile changed position or value. When nothing changed,
        the input tiles are returned in their original order.

    Raises
    ------
    InvariantViolation
        If the input tiles break the grid contract.
    """
    before = tuple(tiles)
    check_tiles(grid, before)
    score, moved = slide_and_merge(grid, before, direction)
    if set(moved) == set(before):
        return score, TurnResult(tiles=before, changed=False)
    return score, TurnResult(tiles=tuple(moved), changed=True)


def resolve_move(grid: Grid, tiles: Iterable[Tile], direction: Direction) -> TurnResult:
    """
    Resolve one directional command.

    Parameters
    ----------
    grid : Grid
        The grid the tiles live on.
    tiles : Iterable[Tile]
        Current tiles.
    direction : Direction
        The move to apply.

    Returns
    -------
    TurnResult
        The tiles after the move and whether any tile changed position or value.

    Raises
    ------
    InvariantViolation
        If the input tiles break the grid contract.
    """
    _, result = scored_move(grid, tiles, direction)
    return result


def can_move(grid: Grid, tiles: Iterable[Tile], direction: Direction) -> bool:
    """Check if a move in the given direction would change the tiles."""
    return resolve_move(grid, tiles, direction).changed


def legal_directions(grid: Grid, tiles: Iterable[Tile]) -> list[Direction]:
    """
    Determine the directions that change the tiles.

    Returns
    -------
    list[Direction]
        Directions in priority order (left, right, up, down).
    """
    tiles = tuple(tiles)
    return [direction for direction in Direction if can_move(grid, tiles, direction)]
