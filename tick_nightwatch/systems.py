"""System factories for the phases of one night tick.

Phases run in the order returned by :func:`default_systems`. A phase that
ends the night calls ``ctx.request_stop(outcome)`` and the remaining phases
are skipped for that tick.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tick_nightwatch.config import FREDDY
from tick_nightwatch.signals import BLACKOUT_WARNING, DEATH, SURVIVED
from tick_nightwatch.types import NightOutcome, PowerDraw, Room, System

if TYPE_CHECKING:
    from tick_nightwatch.simulation import Simulation
    from tick_nightwatch.types import TickContext

logger = logging.getLogger(__name__)


def make_power_system() -> System:
    """Drain the battery, drop the one-tick camera draw, detect power-out."""

    def power_system(sim: Simulation, ctx: TickContext) -> None:
        battery = sim.battery
        battery.update_power(ctx.random)
        battery.remove_power_draw(PowerDraw.CAMERA)
        if battery.depleted:
            sim.power_out()

    return power_system


def make_blackout_system(lead: str = FREDDY, lurk_room: Room = Room.HALLWAY_R) -> System:
    """Advance the escalation while the power is out and *lead* lurks."""

    def blackout_system(sim: Simulation, ctx: TickContext) -> None:
        if sim.battery.online:
            return
        agent = sim.find_agent(lead)
        if agent is None or agent.location is not lurk_room:
            return
        step = sim.escalation.advance()
        sim.bus.publish(BLACKOUT_WARNING, stage=step.stage, message=step.message)
        if step.terminal:
            agent.location = Room.SECURITY_OFFICE_ATTACK
            sim.record_death(agent)

    return blackout_system


def make_death_system() -> System:
    def death_system(sim: Simulation, ctx: TickContext) -> None:
        if not sim.is_dead:
            return
        logger.info("attacked by %s at %s", sim.killer, sim.clock.label())
        sim.bus.publish(DEATH, killer=sim.killer, minutes=ctx.minutes)
        ctx.request_stop(NightOutcome.DEAD)

    return death_system


def make_clock_system() -> System:
    def clock_system(sim: Simulation, ctx: TickContext) -> None:
        sim.clock.advance()
        if sim.clock.finished:
            logger.info("survived until %s", sim.clock.label())
            sim.bus.publish(SURVIVED, minutes=sim.clock.minutes)
            ctx.request_stop(NightOutcome.SURVIVED)

    return clock_system


def make_movement_system() -> System:
    def movement_system(sim: Simulation, ctx: TickContext) -> None:
        sim.map_tick(ctx.random)

    return movement_system


def default_systems() -> list[System]:
    return [
        make_power_system(),
        make_blackout_system(),
        make_death_system(),
        make_clock_system(),
        make_movement_system(),
    ]
