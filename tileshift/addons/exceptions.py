# -*- coding: utf-8 -*-
"""
Errors raised by the tile engine.
"""


class InvalidConfiguration(ValueError):
    """
    The game cannot be set up with the requested parameters.
    """


class InvariantViolation(AssertionError):
    """
    A tile set broke the grid contract: out-of-bounds tile, shared position or invalid value.
    """
