# -*- coding: utf-8 -*-
"""
Display the game in a window.
"""
from typing import Any, Callable, Iterable

import matplotlib
from matplotlib import pyplot as plt
from matplotlib.patches import Rectangle

from tileshift.addons.types import Position, Tile
from tileshift.core.grid import Grid
from tileshift.utils.layout import TILE_SIZE, playground_size, tile_center


def release_keys(keys: Iterable[str]):
    """
    Remove keys from every Matplotlib shortcut (save, back, forward, ...).

    Parameters
    ----------
    keys: Iterable[str]
        Keys to free
    """
    keys = set(keys)
    for name in list(matplotlib.rcParams):
        if name.startswith("keymap."):
            matplotlib.rcParams[name] = [key for key in matplotlib.rcParams[name] if key not in keys]


class WindowBoard:
    """
    Window to draw the playground and its tiles using Matplotlib.
    """

    # ##: Colors
    PLAYGROUND_COLOR = "#e4b4b7"
    CELL_COLOR = "#ffffff"
    TILE_COLOR = "#ffffff"
    TEXT_COLOR = "#c35048"

    def __init__(self, title: str, grid: Grid, bound_keys: Iterable[str] = ()):
        self.grid = grid

        # ## ----> Keys played by the game no longer trigger Matplotlib shortcuts.
        release_keys(bound_keys)

        # ## ----> Create support.
        self.fig, self.axe = plt.subplots()
        self.fig.subplots_adjust(left=0, bottom=0, right=1, top=1)
        self.fig.canvas.manager.set_window_title(title)

        half = playground_size(grid) / 2.0
        self.axe.set_xlim(-half, half)
        self.axe.set_ylim(-half, half)
        self.axe.set_aspect("equal")
        self.axe.set_axis_off()

        # ## ----> Draw the playground and its empty cells.
        self.axe.add_patch(Rectangle((-half, -half), 2 * half, 2 * half, color=self.PLAYGROUND_COLOR, zorder=0))
        for cell in grid.cells():
            self.axe.add_patch(self._square(cell, self.CELL_COLOR, zorder=0.1))

        # ## ----> Artists of the tiles currently drawn.
        self._artists: list[Any] = []

        # ## ----> Flag indicating that the window was closed.
        self.closed = False

        def close_handler(evt):
            self.closed = True

        self.fig.canvas.mpl_connect("close_event", close_handler)

    def _square(self, position: Position, color: str, zorder: float) -> Rectangle:
        center_x, center_y = tile_center(self.grid, position)
        corner = (center_x - TILE_SIZE / 2.0, center_y - TILE_SIZE / 2.0)
        return Rectangle(corner, TILE_SIZE, TILE_SIZE, color=color, zorder=zorder)

    def show_tiles(self, tiles: Iterable[Tile]):
        """
        Redraw every tile from the post-turn snapshot.

        Parameters
        ----------
        tiles: Iterable[Tile]
            Tiles to show
        """
        # ## ----> Drop the previous tiles.
        for artist in self._artists:
            artist.remove()
        self._artists = []

        # ## ----> Draw each tile with its value.
        for tile in tiles:
            square = self._square(tile.position, self.TILE_COLOR, zorder=2.0)
            self.axe.add_patch(square)
            text = self.axe.text(
                *tile_center(self.grid, tile.position),
                str(tile.value),
                color=self.TEXT_COLOR,
                horizontalalignment="center",
                verticalalignment="center",
                fontsize="xx-large",
                fontweight="demibold",
                zorder=3.0,
            )
            self._artists.extend([square, text])

        # ## ---> Request the window to be redrawn
        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()

        # ## ----> Let Matplotlib process UI events
        plt.pause(0.001)

    def register_key_handler(self, key_handler: Callable[[Any], None]):
        """
        Register a keyboard event handler.

        Parameters
        ----------
        key_handler: Callable
            Key handler
        """
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    def show(self, block: bool = True):
        """
        Show the window, and start an event loop.

        Parameters
        ----------
        block: bool
            Activate or not the interactive mode
        """
        if not block:
            plt.ion()
        plt.show()

    def close(self):
        """
        Close the window.
        """
        plt.close(self.fig)
        self.closed = True
