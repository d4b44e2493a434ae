"""
Translate raw key names into move commands.
"""

from typing import Any, Iterable, Optional

from tileshift.core.resolver import Direction

# ##: Key names, as reported by matplotlib, bound to each command.
KEY_BINDINGS: dict[str, Direction] = {
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
    "up": Direction.UP,
    "down": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
    "w": Direction.UP,
    "s": Direction.DOWN,
}

# ##: When several commands arrive in the same turn, only the first of this order is kept.
PRIORITY = (Direction.LEFT, Direction.RIGHT, Direction.UP, Direction.DOWN)


def parse_key(key: Any) -> Optional[Direction]:
    """
    Map a key name to a command.

    Parameters
    ----------
    key : Any
        Key name; anything that is not a bound string yields no command.

    Returns
    -------
    Direction, optional
        The bound command, or None.
    """
    if isinstance(key, Direction):
        return key
    if not isinstance(key, str):
        return None
    return KEY_BINDINGS.get(key.lower())


def select_command(keys: Iterable[Any]) -> Optional[Direction]:
    """
    Pick the single command honoured this turn among all pressed keys.

    Parameters
    ----------
    keys : Iterable[Any]
        Keys pressed during the turn.

    Returns
    -------
    Direction, optional
        The highest priority command (left, right, up, down), or None if no key is bound.
    """
    if isinstance(keys, (str, Direction)):
        keys = [keys]
    commands = {parse_key(key) for key in keys}
    for direction in PRIORITY:
        if direction in commands:
            return direction
    return None
