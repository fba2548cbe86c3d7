"""Text rendering of the camera map and the office status panel."""
from __future__ import annotations

from typing import TYPE_CHECKING

from tick_nightwatch.types import Room, Tell

if TYPE_CHECKING:
    from tick_nightwatch.agents import Animatronic
    from tick_nightwatch.simulation import Simulation

MAP_TEMPLATE = """
        [{ss}]
        | |
[{a}]==[{dal}--{dac}--{dar}]==[{k}]
| |     | |     | |
[{rr}-------{rr}]     | |
| |             | |
[{hl}]==[{sosl}--{soa}--{sosr}]==[{hr}]
"""

_SLOTS: dict[Room, str] = {
    Room.SHOW_STAGE: "ss",
    Room.ARCADE: "a",
    Room.DINING_AREA_L: "dal",
    Room.DINING_AREA_C: "dac",
    Room.DINING_AREA_R: "dar",
    Room.KITCHEN: "k",
    Room.RESTROOMS: "rr",
    Room.HALLWAY_L: "hl",
    Room.HALLWAY_R: "hr",
    Room.SECURITY_OFFICE_STATIC_L: "sosl",
    Room.SECURITY_OFFICE_ATTACK: "soa",
    Room.SECURITY_OFFICE_STATIC_R: "sosr",
}

EXPLAIN_TEXT = """\
You are the night guard at the pizzeria. Survive until 06:00 by managing
your power and keeping the animatronics out of the office. They roam the
building and try to reach you; use the cameras, lights and doors to keep
them away. If the power runs out, the doors open and Freddy comes for you.

Commands:
    left door   -- open/close left door
    right door  -- open/close right door
    left light  -- turn on/off left light
    right light -- turn on/off right light
    camera      -- check cameras
    sit         -- do nothing

Tells:
    l -- laughing
    n -- noise
    f -- footsteps
    s -- static
    v -- visual (shown as the animatronic's initial)
    b -- breathing

Animatronics:
    F -- Freddy
    B -- Bonnie
    C -- Chica
"""


def glyph_for(agent: Animatronic) -> str:
    """Initial when the animatronic is in plain sight, otherwise its tell."""
    if agent.location is Room.SECURITY_OFFICE_ATTACK or agent.current_tell is Tell.VISUAL:
        return agent.glyph
    return agent.current_tell.value


def render_map(sim: Simulation) -> str:
    occupancy = sim.occupancy()
    cells = {
        slot: glyph_for(occupancy[room]) if room in occupancy else " "
        for room, slot in _SLOTS.items()
    }
    return MAP_TEMPLATE.format(**cells)


def render_status(sim: Simulation) -> str:
    lines = [
        f"Time: {sim.clock.label()}",
        f"Battery: {sim.battery.percent}%",
        "Office State: ",
        f"\tLeft Door: {'Closed' if sim.left_door_closed else 'Open'}",
        f"\tRight Door: {'Closed' if sim.right_door_closed else 'Open'}",
        f"\tLeft Light: {'On' if sim.left_light_on else 'Off'}",
        f"\tRight Light: {'On' if sim.right_light_on else 'Off'}",
    ]
    return "\n".join(lines)
