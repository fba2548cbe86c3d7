"""Simulation - office state, roster and the per-tick loop for one night."""
from __future__ import annotations

import logging
import os
import random
from typing import Callable, Iterable

from tick_nightwatch.agents import Animatronic, make_roster
from tick_nightwatch.battery import Battery
from tick_nightwatch.blackout import BlackoutEscalation
from tick_nightwatch.clock import NightClock
from tick_nightwatch.commands import OFFLINE_ACTIONS, Action
from tick_nightwatch.config import FREDDY, NightConfig
from tick_nightwatch.graph import LOCATION_GRAPH, LocationGraph
from tick_nightwatch.signals import POWER_OUT, SIGHTING, SignalBus
from tick_nightwatch.systems import default_systems
from tick_nightwatch.types import (
    NightOutcome,
    PowerDraw,
    Room,
    System,
    UnknownAgentError,
)

logger = logging.getLogger(__name__)

NO_KILLER = "MissingNo."


class Simulation:
    """The pizzeria during one night: doors, lights, battery and animatronics.

    A single mutator, :meth:`step`, advances the night by one tick. Player
    controls (doors, lights, camera) go through the ``toggle_*`` methods or
    :meth:`apply_action`; everything else is read-only for observers.
    """

    def __init__(
        self,
        roster: Iterable[Animatronic] | None = None,
        config: NightConfig | None = None,
        seed: int | None = None,
        rng: random.Random | None = None,
        bus: SignalBus | None = None,
        graph: LocationGraph = LOCATION_GRAPH,
        systems: Iterable[System] | None = None,
    ) -> None:
        self._config = config if config is not None else NightConfig()
        if roster is None:
            roster = make_roster(self._config.default_difficulties)
        self._roster: list[Animatronic] = list(roster)

        if rng is None:
            if seed is None:
                seed = int.from_bytes(os.urandom(8))
            rng = random.Random(seed)
        self._seed = seed
        self._rng = rng

        self._graph = graph
        self._bus = bus if bus is not None else SignalBus()
        self._clock = NightClock(
            self._config.start_time, self._config.end_time, self._config.tick_rate
        )
        self._battery = self._fresh_battery()
        self._escalation = BlackoutEscalation()
        self._systems: list[System] = (
            list(systems) if systems is not None else default_systems()
        )
        self._outcome: NightOutcome | None = None

        self.left_door_closed = False
        self.right_door_closed = False
        self.left_light_on = False
        self.right_light_on = False
        self.is_dead = False
        self.killer = NO_KILLER

        self._handlers: dict[Action, Callable[[], bool]] = {
            Action.LEFT_DOOR: self.toggle_left_door,
            Action.RIGHT_DOOR: self.toggle_right_door,
            Action.LEFT_LIGHT: self.toggle_left_light,
            Action.RIGHT_LIGHT: self.toggle_right_light,
            Action.CAMERA: self.view_camera,
            Action.SIT: self.sit,
        }

    # -- Accessors --

    @property
    def config(self) -> NightConfig:
        return self._config

    @property
    def graph(self) -> LocationGraph:
        return self._graph

    @property
    def clock(self) -> NightClock:
        return self._clock

    @property
    def battery(self) -> Battery:
        return self._battery

    @property
    def escalation(self) -> BlackoutEscalation:
        return self._escalation

    @property
    def bus(self) -> SignalBus:
        return self._bus

    @property
    def seed(self) -> int | None:
        return self._seed

    @property
    def random(self) -> random.Random:
        return self._rng

    @property
    def roster(self) -> list[Animatronic]:
        return list(self._roster)

    @property
    def outcome(self) -> NightOutcome | None:
        return self._outcome

    def find_agent(self, name: str) -> Animatronic | None:
        for agent in self._roster:
            if agent.name == name:
                return agent
        return None

    def agent(self, name: str) -> Animatronic:
        found = self.find_agent(name)
        if found is None:
            raise UnknownAgentError(name, f"No animatronic named {name!r} on the roster")
        return found

    def agents_at(self, room: Room) -> list[Animatronic]:
        return [agent for agent in self._roster if agent.location is room]

    def occupancy(self) -> dict[Room, Animatronic]:
        """First animatronic in roster order for every occupied room."""
        occupied: dict[Room, Animatronic] = {}
        for agent in self._roster:
            occupied.setdefault(agent.location, agent)
        return occupied

    # -- Player controls --

    def accepts(self, action: Action) -> bool:
        return self._battery.online or action in OFFLINE_ACTIONS

    def apply_action(self, action: Action) -> bool:
        if not self.accepts(action):
            logger.debug("rejected %s while offline", action.value)
            return False
        return self._handlers[action]()

    def toggle_left_door(self) -> bool:
        if not self._battery.online:
            return False
        self.left_door_closed = not self.left_door_closed
        self._sync_draw(PowerDraw.DOORS, self.left_door_closed or self.right_door_closed)
        return True

    def toggle_right_door(self) -> bool:
        if not self._battery.online:
            return False
        self.right_door_closed = not self.right_door_closed
        self._sync_draw(PowerDraw.DOORS, self.left_door_closed or self.right_door_closed)
        return True

    def toggle_left_light(self) -> bool:
        if not self._battery.online:
            return False
        self.left_light_on = not self.left_light_on
        self._sync_draw(PowerDraw.LIGHTS, self.left_light_on or self.right_light_on)
        return True

    def toggle_right_light(self) -> bool:
        if not self._battery.online:
            return False
        self.right_light_on = not self.right_light_on
        self._sync_draw(PowerDraw.LIGHTS, self.left_light_on or self.right_light_on)
        return True

    def view_camera(self) -> bool:
        if not self._battery.online:
            return False
        self._battery.add_power_draw(PowerDraw.CAMERA)
        return True

    def sit(self) -> bool:
        return True

    def _sync_draw(self, draw: PowerDraw, active: bool) -> None:
        if active:
            self._battery.add_power_draw(draw)
        else:
            self._battery.remove_power_draw(draw)

    # -- State transitions --

    def power_out(self) -> None:
        """Shut the battery down and open the office to the lead animatronic."""
        logger.debug("power out at %s", self._clock.label())
        self._bus.publish(POWER_OUT, minutes=self._clock.minutes)
        self._battery.shutdown()
        self.left_door_closed = False
        self.right_door_closed = False
        self.left_light_on = False
        self.right_light_on = False
        freddy = self.find_agent(FREDDY)
        if freddy is not None:
            freddy.location = Room.HALLWAY_R

    def record_death(self, agent: Animatronic) -> bool:
        """Mark the player dead. The first animatronic recorded keeps the kill."""
        if self.is_dead:
            return False
        self.is_dead = True
        self.killer = agent.name
        return True

    def map_tick(self, rng: random.Random | None = None) -> None:
        """Move every animatronic once, in roster order."""
        rng = rng if rng is not None else self._rng
        for agent in self._roster:
            agent.move_tick(
                self._graph, self.left_door_closed, self.right_door_closed, rng
            )

            if agent.location is Room.SECURITY_OFFICE_ATTACK:
                self.record_death(agent)

            if agent.location is Room.HALLWAY_L and self.left_light_on:
                self._bus.publish(SIGHTING, name=agent.name, side="left")
            if agent.location is Room.HALLWAY_R and self.right_light_on:
                self._bus.publish(SIGHTING, name=agent.name, side="right")

    def night_reset(self) -> None:
        self.left_door_closed = False
        self.right_door_closed = False
        self.left_light_on = False
        self.right_light_on = False
        self.is_dead = False
        self.killer = NO_KILLER
        self._battery = self._fresh_battery()
        self._clock.reset()
        self._escalation.reset()
        self._outcome = None
        self._bus.clear()
        for agent in self._roster:
            agent.reset()

    def step(self, action: Action | None = None) -> NightOutcome | None:
        """Run one tick. Returns the night's outcome once it has ended."""
        if self._outcome is not None:
            raise RuntimeError("night is over; call night_reset() first")
        if action is not None:
            self.apply_action(action)

        ctx = self._clock.context(self._request_stop, self._rng)
        try:
            for system in self._systems:
                system(self, ctx)
                if self._outcome is not None:
                    break
        finally:
            self._bus.flush()
        return self._outcome

    def _request_stop(self, outcome: NightOutcome) -> None:
        self._outcome = outcome

    def _fresh_battery(self) -> Battery:
        return Battery(self._config.battery_capacity, self._config.drain_roll)
