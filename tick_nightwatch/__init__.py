"""tick-nightwatch - Turn-based night-shift survival simulation."""

from tick_nightwatch.agents import Animatronic, make_roster
from tick_nightwatch.battery import Battery
from tick_nightwatch.blackout import BlackoutEscalation
from tick_nightwatch.clock import NightClock
from tick_nightwatch.commands import Action, parse_action, parse_difficulty
from tick_nightwatch.config import NightConfig
from tick_nightwatch.graph import LOCATION_GRAPH, LocationGraph
from tick_nightwatch.session import Session
from tick_nightwatch.signals import SignalBus
from tick_nightwatch.simulation import Simulation
from tick_nightwatch.types import (
    NightOutcome,
    PowerDraw,
    Room,
    Tell,
    TickContext,
    UnknownAgentError,
)

__all__ = [
    "Action",
    "Animatronic",
    "Battery",
    "BlackoutEscalation",
    "LOCATION_GRAPH",
    "LocationGraph",
    "NightClock",
    "NightConfig",
    "NightOutcome",
    "PowerDraw",
    "Room",
    "Session",
    "SignalBus",
    "Simulation",
    "Tell",
    "TickContext",
    "UnknownAgentError",
    "make_roster",
    "parse_action",
    "parse_difficulty",
]
