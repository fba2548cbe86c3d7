"""Session - night lifecycle across a campaign or a single custom night."""
from __future__ import annotations

import logging
import os
import random
from typing import Callable, Mapping

from tick_nightwatch.agents import make_roster
from tick_nightwatch.commands import MAX_DIFFICULTY_INPUT, Action, parse_difficulty
from tick_nightwatch.config import NightConfig
from tick_nightwatch.signals import DUSK, WON, SignalBus
from tick_nightwatch.simulation import Simulation
from tick_nightwatch.types import NightOutcome

logger = logging.getLogger(__name__)

# Called once per tick with the live simulation; returns the player's action.
ActionSource = Callable[[Simulation], Action | None]


class Session:
    """Owns the cross-night state: night number, mode and the roster.

    ``new_game`` starts the five-night campaign with the default roster;
    ``custom_night`` plays one night with player-chosen difficulties. Each
    night runs Dusk (reset) -> Active (ticks) -> Survived | Dead.
    """

    def __init__(
        self,
        config: NightConfig | None = None,
        seed: int | None = None,
        rng: random.Random | None = None,
        bus: SignalBus | None = None,
    ) -> None:
        self._config = config if config is not None else NightConfig()
        if rng is None:
            if seed is None:
                seed = int.from_bytes(os.urandom(8))
            rng = random.Random(seed)
        self._seed = seed
        self._rng = rng
        self._bus = bus if bus is not None else SignalBus()
        self._simulation: Simulation | None = None
        self._night = 1
        self._custom = False
        self._won = False
        self._history: list[NightOutcome] = []

    @property
    def config(self) -> NightConfig:
        return self._config

    @property
    def bus(self) -> SignalBus:
        return self._bus

    @property
    def seed(self) -> int | None:
        return self._seed

    @property
    def night(self) -> int:
        return self._night

    @property
    def custom(self) -> bool:
        return self._custom

    @property
    def won(self) -> bool:
        return self._won

    @property
    def history(self) -> list[NightOutcome]:
        return list(self._history)

    @property
    def simulation(self) -> Simulation:
        if self._simulation is None:
            raise RuntimeError("no game started; call new_game() or custom_night()")
        return self._simulation

    def new_game(self) -> Simulation:
        self._start(dict(self._config.default_difficulties), custom=False)
        return self.simulation

    def custom_night(self, difficulties: Mapping[str, int | str]) -> Simulation:
        """Start a one-night game. Missing or invalid entries use the defaults."""
        chosen: dict[str, int] = {}
        for name, default in self._config.default_difficulties.items():
            value = difficulties.get(name, default)
            if isinstance(value, str):
                value = parse_difficulty(value, default)
            elif not 0 <= value <= MAX_DIFFICULTY_INPUT:
                value = default
            chosen[name] = value
        self._start(chosen, custom=True)
        return self.simulation

    def _start(self, difficulties: dict[str, int], custom: bool) -> None:
        self._night = 1
        self._custom = custom
        self._won = False
        self._history = []
        self._simulation = Simulation(
            make_roster(difficulties),
            config=self._config,
            rng=self._rng,
            bus=self._bus,
        )
        logger.debug("%s started: %s", "custom night" if custom else "new game", difficulties)

    def begin_night(self) -> Simulation:
        sim = self.simulation
        sim.night_reset()
        self._bus.publish(DUSK, night=self._night, custom=self._custom)
        self._bus.flush()
        return sim

    def end_night(self, outcome: NightOutcome) -> None:
        """Record *outcome* and carry the roster into the next night."""
        self._history.append(outcome)
        logger.info("night %d: %s", self._night, outcome.value)
        if outcome is not NightOutcome.SURVIVED or self._custom:
            return

        self._night += 1
        if self._night > self._config.nights_to_win:
            self._won = True
            self._bus.publish(WON, nights=self._config.nights_to_win)
            self._bus.flush()
            self._night = 1
            return

        for agent in self.simulation.roster:
            bump = self._rng.randrange(*self._config.difficulty_bump)
            agent.raise_difficulty(bump)
            logger.debug("%s difficulty -> %d", agent.name, agent.difficulty)

    def play_night(self, next_action: ActionSource) -> NightOutcome:
        sim = self.begin_night()
        outcome: NightOutcome | None = None
        while outcome is None:
            outcome = sim.step(next_action(sim))
        self.end_night(outcome)
        return outcome

    @property
    def over(self) -> bool:
        if not self._history:
            return False
        return self._custom or self._won or self._history[-1] is NightOutcome.DEAD

    def play(self, next_action: ActionSource) -> list[NightOutcome]:
        """Play nights until death, victory, or the end of a custom night."""
        while True:
            self.play_night(next_action)
            if self.over:
                return self.history
