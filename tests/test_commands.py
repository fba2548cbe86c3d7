"""Tests for action and difficulty parsing."""
from __future__ import annotations

import pytest

from tick_nightwatch.commands import OFFLINE_ACTIONS, Action, parse_action, parse_difficulty


@pytest.mark.parametrize("text, expected", [
    ("left door", Action.LEFT_DOOR),
    ("right door", Action.RIGHT_DOOR),
    ("left light", Action.LEFT_LIGHT),
    ("right light", Action.RIGHT_LIGHT),
    ("camera", Action.CAMERA),
    ("sit", Action.SIT),
    ("  sit\n", Action.SIT),
])
def test_parse_action(text, expected):
    assert parse_action(text) is expected


@pytest.mark.parametrize("text", ["", "door", "Left Door", "leftdoor", "exit"])
def test_parse_action_rejects(text):
    assert parse_action(text) is None


def test_only_sit_works_offline():
    assert OFFLINE_ACTIONS == {Action.SIT}


@pytest.mark.parametrize("text, expected", [
    ("7", 7),
    (" 12 ", 12),
    ("0", 0),
    ("255", 255),
    ("-1", 4),
    ("abc", 4),
    ("", 4),
    ("3.5", 4),
    ("256", 4),
    ("1_0", 4),
    ("+2", 2),
    ("½", 4),
    ("٣", 4),
])
def test_parse_difficulty(text, expected):
    assert parse_difficulty(text, default=4) == expected
