# -*- coding: utf-8 -*-
"""
Shared types, configuration and exceptions.
"""

from .config import GameConfig
from .exceptions import InvalidConfiguration, InvariantViolation
from .types import Position, Tile, TurnResult

__all__ = ["GameConfig", "InvalidConfiguration", "InvariantViolation", "Position", "Tile", "TurnResult"]
