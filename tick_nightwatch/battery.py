"""Battery - stochastic power reserve for the office."""
from __future__ import annotations

import logging
import random

from tick_nightwatch.types import PowerDraw

logger = logging.getLogger(__name__)

OFFLINE = -1


class Battery:
    """Depleting power reserve with a set of active draws.

    Each tick every active draw rolls ``randrange(*drain_roll)`` and costs its
    magnitude when ``weight <= roll``. Power never drops below zero while
    online; :meth:`shutdown` parks it at :data:`OFFLINE` for the rest of the
    night.
    """

    def __init__(self, capacity: int = 100, drain_roll: tuple[int, int] = (1, 20)) -> None:
        self._power = capacity
        self._capacity = capacity
        self._drain_roll = drain_roll
        self._draws: set[PowerDraw] = set()
        self._online = True

    @property
    def power(self) -> int:
        return self._power

    @property
    def percent(self) -> int:
        return max(0, self._power) * 100 // self._capacity

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def online(self) -> bool:
        return self._online

    @property
    def depleted(self) -> bool:
        return self._online and self._power == 0

    @property
    def active_draws(self) -> frozenset[PowerDraw]:
        return frozenset(self._draws)

    def add_power_draw(self, draw: PowerDraw) -> None:
        if not self._online:
            return
        self._draws.add(draw)

    def remove_power_draw(self, draw: PowerDraw) -> None:
        if not self._online:
            return
        self._draws.discard(draw)

    def update_power(self, rng: random.Random) -> int:
        """Apply one tick of drain. Returns the power actually lost."""
        if not self._online:
            return 0
        lost = 0
        for draw in PowerDraw:
            if draw not in self._draws:
                continue
            roll = rng.randrange(*self._drain_roll)
            if draw.weight <= roll:
                before = self._power
                self._power = max(0, self._power - draw.magnitude)
                lost += before - self._power
                logger.debug("%s drained %d (roll %d)", draw.name, before - self._power, roll)
        return lost

    def shutdown(self) -> None:
        logger.debug("battery offline")
        self._power = OFFLINE
        self._draws.clear()
        self._online = False
