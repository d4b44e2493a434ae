"""
Tests for the turn controller.

Tests cover game setup, turn sequencing, conditional spawning, ignored input and the snapshot
exposed to renderers.
"""

from unittest import TestCase, main

import numpy as np

from tileshift.addons import GameConfig, InvalidConfiguration, InvariantViolation
from tileshift.addons.types import Position
from tileshift.core.resolver import Direction
from tileshift.envs.controller import Phase, TurnController

from tests.helpers import by_position, make_tiles


def checkerboard(size: int):
    """Full board where no two neighbours hold the same value."""
    return make_tiles([(x, y, 2 if (x + y) % 2 == 0 else 4) for y in range(size) for x in range(size)])


class TestSetup(TestCase):
    """Test the initial board."""

    def test_two_initial_tiles(self):
        """Setup places two tiles of value 2 at distinct positions."""
        env = TurnController(GameConfig(seed=42))

        # ##>: Exactly 2 tiles, both 2.
        self.assertEqual(len(env.tiles), 2)
        self.assertTrue(all(tile.value == 2 for tile in env.tiles))

        # ##>: Distinct positions on the grid.
        self.assertNotEqual(env.tiles[0].position, env.tiles[1].position)
        self.assertTrue(all(env.grid.is_in_bounds(*tile.position) for tile in env.tiles))

        # ##>: Waiting for a command, nothing scored yet.
        self.assertIs(env.phase, Phase.AWAITING_INPUT)
        self.assertEqual(env.score, 0)

    def test_seed_reproducibility(self):
        """Same seed produces identical initial tiles."""
        first = TurnController(GameConfig(seed=3)).tiles
        second = TurnController(GameConfig(seed=3)).tiles
        self.assertEqual(first, second)

    def test_reset_with_seed(self):
        """Reset with a seed reseeds the shared generator."""
        env = TurnController()
        self.assertEqual(env.reset(seed=11), TurnController(GameConfig(seed=11)).tiles)

    def test_invalid_size(self):
        """A grid below 2 cells wide fails at setup."""
        with self.assertRaises(InvalidConfiguration):
            TurnController(GameConfig(size=1))


class TestTurns(TestCase):
    """Test move resolution and spawning within a turn."""

    def setUp(self):
        self.env = TurnController(GameConfig(seed=0))

    def test_merge_then_spawn(self):
        """Two 2s merge on the left and a new 2 appears elsewhere."""
        self.env.load(make_tiles([(0, 0, 2), (1, 0, 2)]))
        result = self.env.step(Direction.LEFT)

        self.assertTrue(result.changed)
        self.assertEqual(len(result.tiles), 2)
        self.assertEqual(by_position(t for t in result.tiles if t is not result.spawned), {(0, 0): 4})

        # ##>: The new tile landed on an empty cell with a fresh identity.
        self.assertEqual(result.spawned.value, 2)
        self.assertNotEqual(result.spawned.position, Position(0, 0))
        self.assertEqual(result.spawned.identity, 2)
        self.assertEqual(self.env.score, 4)

    def test_no_chain_merge(self):
        """Three 2s in a row leave a 4 and a 2."""
        self.env.load(make_tiles([(0, 0, 2), (1, 0, 2), (2, 0, 2)]))
        result = self.env.step("left")
        moved = by_position(t for t in result.tiles if t is not result.spawned)
        self.assertEqual(moved, {(0, 0): 4, (1, 0): 2})

    def test_unchanged_move_spawns_nothing(self):
        """A move that changes nothing spawns no tile."""
        tiles = self.env.load(make_tiles([(0, 0, 2)]))
        result = self.env.step(Direction.LEFT)
        self.assertFalse(result.changed)
        self.assertIsNone(result.spawned)
        self.assertEqual(self.env.tiles, tiles)

    def test_always_spawn(self):
        """The unconditional spawn option adds a tile even when nothing moved."""
        env = TurnController(GameConfig(seed=0, spawn_when_unchanged=True))
        env.load(make_tiles([(0, 0, 2)]))
        result = env.step(Direction.LEFT)
        self.assertFalse(result.changed)
        self.assertIsNotNone(result.spawned)
        self.assertEqual(len(env.tiles), 2)

    def test_full_board_without_pairs(self):
        """Every direction leaves a locked board unchanged and spawns nothing."""
        tiles = self.env.load(checkerboard(4))
        for direction in Direction:
            result = self.env.step(direction)
            self.assertFalse(result.changed)
            self.assertIsNone(result.spawned)
            self.assertEqual(self.env.tiles, tiles)

    def test_full_board_always_spawn(self):
        """With no empty cell, the spawn is skipped."""
        env = TurnController(GameConfig(seed=0, spawn_when_unchanged=True))
        env.load(checkerboard(4))
        result = env.step(Direction.UP)
        self.assertIsNone(result.spawned)
        self.assertEqual(len(env.tiles), 16)

    def test_ignored_input(self):
        """Unrecognized input is a no-op turn."""
        tiles = self.env.tiles
        for command in ("space", None, 42):
            result = self.env.step(command)
            self.assertFalse(result.changed)
            self.assertIsNone(result.spawned)
            self.assertEqual(self.env.tiles, tiles)

    def test_unchanged_move_keeps_snapshot(self):
        """Renderers see the same tile order after a turn that changed nothing."""
        tiles = self.env.load(make_tiles([(0, 1, 4), (0, 0, 2), (0, 3, 8)]))
        result = self.env.step(Direction.LEFT)
        self.assertFalse(result.changed)
        self.assertEqual(result.tiles, tiles)
        self.assertEqual(self.env.tiles, tiles)

    def test_handle_single_key(self):
        """A single key name is one key, not a sequence of letters."""
        self.env.load(make_tiles([(1, 1, 2)]))
        self.env.handle_keys("down")
        tile = [tile for tile in self.env.tiles if tile.identity == 0][0]
        self.assertEqual(tile.position, Position(1, 0))

    def test_handle_keys_priority(self):
        """Only the highest priority command of a turn is played."""
        self.env.load(make_tiles([(1, 1, 2)]))
        self.env.handle_keys(["down", "left"])
        tile = [tile for tile in self.env.tiles if tile.identity == 0][0]
        self.assertEqual(tile.position, Position(0, 1))

    def test_sum_grows_by_spawn(self):
        """The sum of values only grows by 2 per spawned tile."""
        directions = list(Direction)
        for turn in range(100):
            before = sum(tile.value for tile in self.env.tiles)
            result = self.env.handle_keys([directions[turn % 4]])
            after = sum(tile.value for tile in self.env.tiles)
            self.assertEqual(after - before, 0 if result.spawned is None else 2)

            # ##>: One tile per cell, all on the grid.
            positions = [tile.position for tile in self.env.tiles]
            self.assertEqual(len(positions), len(set(positions)))
            self.assertTrue(all(self.env.grid.is_in_bounds(*position) for position in positions))

    def test_broken_tiles_fail_fast(self):
        """A corrupted tile set is a contract failure."""
        with self.assertRaises(InvariantViolation):
            self.env.load(make_tiles([(0, 0, 2), (0, 0, 4)]))

        self.env._tiles = make_tiles([(5, 0, 2)])
        with self.assertRaises(InvariantViolation):
            self.env.step(Direction.LEFT)
        self.assertIs(self.env.phase, Phase.AWAITING_INPUT)


class TestSnapshot(TestCase):
    """Test what renderers read after a turn."""

    def test_board(self):
        """The board array puts the top row of the grid first."""
        env = TurnController(GameConfig(size=3, seed=0))
        env.load(make_tiles([(0, 2, 2), (2, 0, 8)]))
        expected = np.array([[2, 0, 0], [0, 0, 0], [0, 0, 8]])
        np.testing.assert_array_equal(env.board, expected)

    def test_legal_directions(self):
        """Directions that would change the board are listed in priority order."""
        env = TurnController(GameConfig(seed=0))
        env.load(make_tiles([(0, 0, 2)]))
        self.assertEqual(env.legal_directions(), [Direction.RIGHT, Direction.UP])


if __name__ == "__main__":
    main()
