"""Tests for the camera map and status panel."""
from __future__ import annotations

from scripted import ScriptedRandom
from tick_nightwatch.agents import Animatronic
from tick_nightwatch.render import glyph_for, render_map, render_status
from tick_nightwatch.simulation import Simulation
from tick_nightwatch.types import Room, Tell


def test_glyph_for_visual_is_initial():
    assert glyph_for(Animatronic("Chica")) == "C"


def test_glyph_for_tell():
    agent = Animatronic("Bonnie", location=Room.KITCHEN, current_tell=Tell.FOOTSTEPS)
    assert glyph_for(agent) == "f"


def test_glyph_in_attack_room_is_initial():
    agent = Animatronic("Freddy", location=Room.SECURITY_OFFICE_ATTACK,
                        current_tell=Tell.BREATHING)
    assert glyph_for(agent) == "F"


def test_map_shows_first_agent_on_stage():
    sim = Simulation(rng=ScriptedRandom())
    rendered = render_map(sim)
    assert "[F]" in rendered
    assert "[B]" not in rendered
    assert "[ ]==[ -- -- ]==[ ]" in rendered


def test_map_shows_tells_in_rooms():
    roster = [
        Animatronic("Bonnie", location=Room.HALLWAY_L, current_tell=Tell.NOISE),
        Animatronic("Chica", location=Room.KITCHEN, current_tell=Tell.STATIC),
    ]
    rendered = render_map(Simulation(roster, rng=ScriptedRandom()))
    assert "[n]==[ -- -- ]==[ ]" in rendered
    assert "]==[s]" in rendered


def test_status_panel():
    sim = Simulation(rng=ScriptedRandom())
    sim.toggle_left_door()
    sim.toggle_right_light()
    assert render_status(sim).splitlines() == [
        "Time: 00:00",
        "Battery: 100%",
        "Office State: ",
        "\tLeft Door: Closed",
        "\tRight Door: Open",
        "\tLeft Light: Off",
        "\tRight Light: On",
    ]


def test_status_panel_offline():
    sim = Simulation(rng=ScriptedRandom())
    sim.power_out()
    assert "Battery: 0%" in render_status(sim)
