"""Player actions and text parsing for the office controls."""
from __future__ import annotations

import re
from enum import Enum


class Action(Enum):
    """One player action per tick; the value is the typed command."""

    LEFT_DOOR = "left door"
    RIGHT_DOOR = "right door"
    LEFT_LIGHT = "left light"
    RIGHT_LIGHT = "right light"
    CAMERA = "camera"
    SIT = "sit"


# Actions still accepted once the battery is offline.
OFFLINE_ACTIONS = frozenset({Action.SIT})

MAX_DIFFICULTY_INPUT = 255
_DIFFICULTY_TEXT = re.compile(r"\+?[0-9]+")


def parse_action(text: str) -> Action | None:
    """Map typed input to an :class:`Action`, or None if it is not a command.

    >>> parse_action("  left door ")
    <Action.LEFT_DOOR: 'left door'>
    """
    try:
        return Action(text.strip())
    except ValueError:
        return None


def parse_difficulty(text: str, default: int) -> int:
    """Parse a custom-night difficulty, falling back to *default*.

    Only plain decimal digits with an optional leading ``+`` in ``0..255``
    are accepted; anything else yields *default*. Clamping to the playable
    range is left to :class:`~tick_nightwatch.agents.Animatronic`.
    """
    text = text.strip()
    if not _DIFFICULTY_TEXT.fullmatch(text):
        return default
    value = int(text)
    if value > MAX_DIFFICULTY_INPUT:
        return default
    return value
