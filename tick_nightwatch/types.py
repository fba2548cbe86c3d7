"""Shared enums, tick context and errors for the night simulation."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable


class Room(Enum):
    SHOW_STAGE = "Show Stage"
    DINING_AREA_L = "Dining Area L"
    DINING_AREA_R = "Dining Area R"
    DINING_AREA_C = "Dining Area C"
    RESTROOMS = "Restrooms"
    KITCHEN = "Kitchen"
    ARCADE = "Arcade"
    SECURITY_OFFICE_STATIC_R = "Security Office Static R"
    SECURITY_OFFICE_STATIC_L = "Security Office Static L"
    SECURITY_OFFICE_ATTACK = "Security Office Attack"
    HALLWAY_L = "Hallway L"
    HALLWAY_R = "Hallway R"


class Tell(Enum):
    """Hint an animatronic leaves behind; the value is its map glyph."""

    LAUGHING = "l"
    NOISE = "n"
    FOOTSTEPS = "f"
    STATIC = "s"
    VISUAL = "v"
    BREATHING = "b"


class PowerDraw(Enum):
    """Office systems that pull from the battery.

    Each member carries ``(ordinal, magnitude)``. The ordinal counts from 1
    and doubles as the drain threshold base: ``weight == ordinal * 2``, so
    the thresholds are 2/4/6. Counting from 1 is deliberate: a zero-based
    variant index gives 0/2/4, and the camera would then drain on every roll.
    """

    CAMERA = (1, 2)
    LIGHTS = (2, 4)
    DOORS = (3, 7)

    @property
    def ordinal(self) -> int:
        return self.value[0]

    @property
    def magnitude(self) -> int:
        return self.value[1]

    @property
    def weight(self) -> int:
        return self.ordinal * 2


class NightOutcome(Enum):
    SURVIVED = "survived"
    DEAD = "dead"


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    minutes: int
    request_stop: Callable[[NightOutcome], None]
    random: _random.Random


class UnknownAgentError(KeyError):
    """Raised when looking up an animatronic that is not on the roster."""

    def __init__(self, name: str, message: str) -> None:
        self.name = name
        super().__init__(message)


if TYPE_CHECKING:
    from tick_nightwatch.simulation import Simulation

System = Callable[["Simulation", TickContext], None]
