# -*- coding: utf-8 -*-
"""
Play the tile game with the keyboard.
"""
import logging
from argparse import ArgumentParser
from typing import Any

from tileshift.addons import GameConfig
from tileshift.envs import KEY_BINDINGS, TurnController
from tileshift.utils import WindowBoard

_logger = logging.getLogger(__name__)


def redraw(window: WindowBoard, game: TurnController):
    """
    Redraw the tiles.

    Parameters
    ----------
    window: WindowBoard
        Class to draw the game

    game: TurnController
        The game
    """
    window.show_tiles(game.tiles)


def reset(game: TurnController, window: WindowBoard):
    """
    Reset and redraw the game.

    Parameters
    ----------
    game: TurnController
        The game

    window: WindowBoard
        Class to draw the game
    """
    game.reset()
    redraw(window, game)


def key_handler(game: TurnController, window: WindowBoard, event: Any):
    """
    Handle the keyboard.

    Parameters
    ----------
    game: TurnController
        The game

    window: WindowBoard
        Class to draw the game

    event: Any
        event to handle
    """
    _logger.debug("pressed %s", event.key)

    if event.key == "escape":
        window.close()
        return None

    if event.key == "backspace":
        reset(game, window)
        return None

    result = game.step(event.key)
    if result.changed or result.spawned is not None:
        redraw(window, game)
    return None


def play_text(game: TurnController):
    """
    Play in the terminal, one command per line.

    Parameters
    ----------
    game: TurnController
        The game
    """
    game.render()
    while True:
        try:
            line = input("move (left/right/up/down, a/d/w/s, q to quit)> ")
        except EOFError:
            break
        keys = line.split()
        if "q" in keys:
            break

        result = game.handle_keys(keys)
        if not result.changed:
            print(f"nothing moved, try one of: {', '.join(d.value for d in game.legal_directions())}")
        game.render()
        print(f"score={game.score}")


if __name__ == "__main__":
    parser = ArgumentParser(description="Play the tile game")
    parser.add_argument("--size", type=int, default=4, help="side of the grid")
    parser.add_argument("--seed", type=int, default=None, help="seed of the random generator")
    parser.add_argument("--always-spawn", action="store_true", help="spawn a tile even when nothing moved")
    parser.add_argument("--text", action="store_true", help="play in the terminal instead of a window")
    parser.add_argument("--log-level", default="WARNING", help="logging level")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    env = TurnController(GameConfig(size=args.size, seed=args.seed, spawn_when_unchanged=args.always_spawn))

    if args.text:
        play_text(env)
    else:
        window_board = WindowBoard(title="2048", grid=env.grid, bound_keys=KEY_BINDINGS)
        window_board.register_key_handler(lambda event: key_handler(env, window_board, event))

        redraw(window_board, env)

        # Blocking event loop
        window_board.show(block=True)
