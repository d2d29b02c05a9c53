"""
Mapping raw input events to direction intents.
"""

from typing import Any, Optional

from .constants import KEY_BINDINGS, REVERSE


def direction_from_input(event: Any) -> Optional[str]:
    """
    Translate a key token into a direction.

    Args:
        event: Key token from the shell (a single character or a curses key
               name such as "KEY_UP"), or None when no key was pressed.

    Returns:
        One of UP/DOWN/LEFT/RIGHT, or None if the event is not a movement key.
    """
    if not isinstance(event, str):
        return None
    return KEY_BINDINGS.get(event)


def is_reverse(current: str, new: str) -> bool:
    return REVERSE.get(current) == new
