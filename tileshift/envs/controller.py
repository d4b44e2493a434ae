"""Turn controller sequencing input, move resolution and tile spawning."""

import logging
from enum import Enum
from itertools import count
from typing import Any, Iterable, Optional

from numpy import ndarray
from numpy.random import PCG64DXSM, Generator, default_rng

from tileshift.addons.config import GameConfig
from tileshift.addons.types import Tile, TurnResult
from tileshift.core.grid import Grid, check_tiles, create_grid
from tileshift.core.resolver import Direction, legal_directions, scored_move
from tileshift.core.spawner import populate, spawn_tile
from tileshift.envs.inputs import parse_key, select_command
from tileshift.utils.board import format_board, to_board

_logger = logging.getLogger(__name__)


class Phase(Enum):
    """States of the turn controller."""

    AWAITING_INPUT = "awaiting_input"
    RESOLVING = "resolving"


class TurnController:
    """
    Tile game.

    This class owns the tiles and the shared random generator. Each turn it reads one command, resolves the
    move and, if the board changed, spawns a new tile. Readers only ever see the post-turn snapshot.
    """

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[Generator] = None):
        """
        Initialize the game.

        Parameters
        ----------
        config : GameConfig, optional
            Game configuration (default is a 4x4 grid).
        rng : Generator, optional
            Shared random generator. Built from ``config.seed`` when omitted.
        """
        self.config = config or GameConfig()
        self.grid: Grid = create_grid(self.config.size)
        self.phase = Phase.AWAITING_INPUT

        self._rng = rng if rng is not None else default_rng(PCG64DXSM(self.config.seed))
        self._identities = count()
        self._tiles: tuple[Tile, ...] = ()
        self._score = 0

        self.reset()

    @property
    def tiles(self) -> tuple[Tile, ...]:
        """
        Current tiles, as (identity, value, position) records.

        Returns
        -------
        tuple[Tile, ...]
            Immutable snapshot of the board after the last turn.
        """
        return self._tiles

    @property
    def board(self) -> ndarray:
        """
        Current tiles as a 2D array, row 0 being the top of the grid.

        Returns
        -------
        ndarray
            Board of shape (size, size), zero for empty cells.
        """
        return to_board(self.grid, self._tiles)

    @property
    def score(self) -> int:
        """Sum of the values created by merges since the last reset."""
        return self._score

    def legal_directions(self) -> list[Direction]:
        """Directions that would change the board."""
        return legal_directions(self.grid, self._tiles)

    def reset(self, seed: Optional[int] = None) -> tuple[Tile, ...]:
        """
        Clear the board and place the initial tiles.

        Parameters
        ----------
        seed : int, optional
            Reseed the shared random generator.

        Returns
        -------
        tuple[Tile, ...]
            The initial tiles.
        """
        if seed is not None:
            self._rng = default_rng(PCG64DXSM(seed))
        self._identities = count()
        self._score = 0
        self._tiles = tuple(
            populate(
                self.grid,
                self._rng,
                self._identities,
                count=self.config.initial_tiles,
                value=self.config.spawn_value,
            )
        )
        self.phase = Phase.AWAITING_INPUT
        _logger.debug("New game on a %dx%d grid with %d tiles", self.grid.size, self.grid.size, len(self._tiles))
        return self._tiles

    def load(self, tiles: Iterable[Tile]) -> tuple[Tile, ...]:
        """
        Replace the tiles, for instance to resume a given position.

        Parameters
        ----------
        tiles : Iterable[Tile]
            Tiles to play with.

        Returns
        -------
        tuple[Tile, ...]
            The loaded tiles.

        Raises
        ------
        InvariantViolation
            If the tiles break the grid contract.
        """
        tiles = tuple(tiles)
        check_tiles(self.grid, tiles)
        self._tiles = tiles
        self._identities = count(max((tile.identity for tile in tiles), default=-1) + 1)
        return self._tiles

    def step(self, command: Any) -> TurnResult:
        """
        Play one turn.

        Parameters
        ----------
        command : Any
            A Direction or a key name. Unrecognized input is ignored.

        Returns
        -------
        TurnResult
            The tiles after the turn, whether the move changed them and the spawned tile, if any.

        Notes
        -----
        - Unrecognized input leaves the board untouched and reports ``changed=False``.
        - A tile is spawned only when the move changed the board, unless ``spawn_when_unchanged`` is set.
        """
        direction = parse_key(command)
        if direction is None:
            _logger.debug("Ignoring input %r", command)
            return TurnResult(tiles=self._tiles, changed=False)

        self.phase = Phase.RESOLVING
        try:
            reward, resolved = scored_move(self.grid, self._tiles, direction)
            changed = resolved.changed
            moved = list(resolved.tiles)
            self._score += reward

            spawned = None
            if changed or self.config.spawn_when_unchanged:
                spawned = spawn_tile(
                    self.grid,
                    [tile.position for tile in moved],
                    self._rng,
                    next(self._identities),
                    value=self.config.spawn_value,
                )
                if spawned is None:
                    _logger.info("Board is full, no tile spawned")
                else:
                    moved.append(spawned)

            # ##: An unchanged move without spawn keeps the snapshot as it was.
            if changed or spawned is not None:
                self._tiles = tuple(moved)
        finally:
            self.phase = Phase.AWAITING_INPUT

        _logger.debug(
            "Moved %s: changed=%s, gained=%d, spawned=%s", direction.value, changed, reward, spawned
        )
        return TurnResult(tiles=self._tiles, changed=changed, spawned=spawned)

    def handle_keys(self, keys: Iterable[Any]) -> TurnResult:
        """
        Play one turn from every key pressed since the last turn.

        Parameters
        ----------
        keys : Iterable[Any]
            Pressed keys; the first command by priority (left, right, up, down) is honoured.

        Returns
        -------
        TurnResult
            Outcome of the turn.
        """
        return self.step(select_command(keys))

    def render(self) -> None:
        """
        Render the game board. This method prints the current state of the game board to the console.
        """
        print(format_board(self.board))
