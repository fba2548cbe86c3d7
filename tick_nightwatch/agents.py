"""Animatronic agents and their per-tick movement AI."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Mapping

from tick_nightwatch.config import CHICA, FREDDY
from tick_nightwatch.graph import LocationGraph, STATIC_OFFICES
from tick_nightwatch.types import Room, Tell

logger = logging.getLogger(__name__)

MAX_DIFFICULTY = 20
MOVEMENT_SIDES = 20

_TELL_ROLLS: tuple[Tell, ...] = (
    Tell.LAUGHING,
    Tell.NOISE,
    Tell.FOOTSTEPS,
    Tell.STATIC,
    Tell.VISUAL,
)

# Static office room -> hallway it is pushed back into when its door shuts.
_EJECT_TO: dict[Room, Room] = {
    Room.SECURITY_OFFICE_STATIC_L: Room.HALLWAY_L,
    Room.SECURITY_OFFICE_STATIC_R: Room.HALLWAY_R,
}


def clamp_difficulty(difficulty: int, ceiling: int = MAX_DIFFICULTY) -> int:
    return max(0, min(difficulty, ceiling))


@dataclass
class Animatronic:
    """One roaming character.

    ``name`` is the identity key; Freddy and Chica have character-specific
    tell rules. ``difficulty`` is clamped to ``[0, 20]`` on construction and
    whenever it is raised through :meth:`raise_difficulty`.
    """

    name: str
    location: Room = Room.SHOW_STAGE
    difficulty: int = 0
    current_tell: Tell = Tell.VISUAL

    def __post_init__(self) -> None:
        self.difficulty = clamp_difficulty(self.difficulty)

    @property
    def glyph(self) -> str:
        return self.name[:1]

    def raise_difficulty(self, amount: int) -> None:
        self.difficulty = clamp_difficulty(self.difficulty + amount)

    def reset(self) -> None:
        self.location = Room.SHOW_STAGE
        self.current_tell = Tell.VISUAL

    def move_tick(
        self,
        graph: LocationGraph,
        left_door_closed: bool,
        right_door_closed: bool,
        rng: random.Random,
    ) -> bool:
        """Run one tick of movement. Returns True if the agent relocated."""
        ejected = self._eject(left_door_closed, right_door_closed)

        roll = rng.randrange(MOVEMENT_SIDES)
        if roll > self.difficulty:
            return ejected

        neighbors = graph.neighbors(self.location)
        candidate = neighbors[rng.randrange(len(neighbors))]
        if _door_blocks(candidate, left_door_closed, right_door_closed):
            logger.debug("%s blocked at %s", self.name, candidate.value)
            return ejected

        self.location = candidate
        self.current_tell = self.roll_tell(rng)
        logger.debug(
            "%s -> %s (%s)", self.name, candidate.value, self.current_tell.name
        )
        return True

    def roll_tell(self, rng: random.Random) -> Tell:
        raw = rng.randrange(len(_TELL_ROLLS))
        tell = _TELL_ROLLS[raw] if raw < len(_TELL_ROLLS) else Tell.VISUAL

        if self.name == FREDDY and tell is Tell.NOISE:
            tell = Tell.LAUGHING
        elif tell is Tell.LAUGHING:
            tell = Tell.NOISE

        if self.name == CHICA and self.location is Room.KITCHEN and raw > 2:
            tell = Tell.STATIC

        if self.location in STATIC_OFFICES:
            tell = Tell.BREATHING
        return tell

    def _eject(self, left_door_closed: bool, right_door_closed: bool) -> bool:
        hallway = _EJECT_TO.get(self.location)
        if hallway is None:
            return False
        if not _door_blocks(self.location, left_door_closed, right_door_closed):
            return False
        logger.debug("%s pushed back to %s", self.name, hallway.value)
        self.location = hallway
        return True


def _door_blocks(room: Room, left_door_closed: bool, right_door_closed: bool) -> bool:
    if room is Room.SECURITY_OFFICE_STATIC_L:
        return left_door_closed
    if room is Room.SECURITY_OFFICE_STATIC_R:
        return right_door_closed
    return False


def make_roster(difficulties: Mapping[str, int]) -> list[Animatronic]:
    """Build animatronics at the stage, in mapping order."""
    return [
        Animatronic(name=name, location=Room.SHOW_STAGE, difficulty=difficulty)
        for name, difficulty in difficulties.items()
    ]
