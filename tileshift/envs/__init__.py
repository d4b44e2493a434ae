# -*- coding: utf-8 -*-
"""
Turn sequencing for the tile game.

This module provides the `TurnController` class, which owns the tiles and runs each turn, and the input
adapter translating key names into move commands.
"""

from .controller import Phase, TurnController
from .inputs import KEY_BINDINGS, parse_key, select_command

__all__ = ["Phase", "TurnController", "KEY_BINDINGS", "parse_key", "select_command"]
