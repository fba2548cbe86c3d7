"""Tests for the fixed location graph."""
from __future__ import annotations

import pytest

from tick_nightwatch.graph import HALLWAYS, LOCATION_GRAPH, STATIC_OFFICES, LocationGraph
from tick_nightwatch.types import Room


@pytest.fixture
def graph() -> LocationGraph:
    return LocationGraph()


# --- Totality ---

def test_every_room_has_neighbors(graph):
    assert set(graph.rooms()) == set(Room)
    for room in Room:
        assert len(graph.neighbors(room)) > 0


def test_attack_room_is_a_self_loop(graph):
    assert graph.neighbors(Room.SECURITY_OFFICE_ATTACK) == (Room.SECURITY_OFFICE_ATTACK,)


def test_attack_room_only_reachable_from_office(graph):
    sources = {
        room for room in Room
        if Room.SECURITY_OFFICE_ATTACK in graph.neighbors(room)
    }
    assert sources == STATIC_OFFICES | {Room.SECURITY_OFFICE_ATTACK}


# --- Adjacency ---

def test_neighbor_order_is_preserved(graph):
    assert graph.neighbors(Room.DINING_AREA_C) == (
        Room.DINING_AREA_L,
        Room.DINING_AREA_R,
        Room.SHOW_STAGE,
        Room.RESTROOMS,
    )


def test_edges_are_directional(graph):
    assert Room.SECURITY_OFFICE_STATIC_L in graph.neighbors(Room.HALLWAY_L)
    assert Room.HALLWAY_L not in graph.neighbors(Room.SECURITY_OFFICE_STATIC_L)


def test_hallways_lead_to_their_own_office_side(graph):
    assert Room.SECURITY_OFFICE_STATIC_L in graph.neighbors(Room.HALLWAY_L)
    assert Room.SECURITY_OFFICE_STATIC_R not in graph.neighbors(Room.HALLWAY_L)
    assert Room.SECURITY_OFFICE_STATIC_R in graph.neighbors(Room.HALLWAY_R)
    assert HALLWAYS == {Room.HALLWAY_L, Room.HALLWAY_R}


# --- Coordinates and distance ---

def test_multi_cell_rooms_use_first_cell(graph):
    assert graph.position_of(Room.SHOW_STAGE) == (0, 3)
    assert graph.position_of(Room.RESTROOMS) == (2, 2)
    assert graph.position_of(Room.HALLWAY_R) == (2, 6)
    assert graph.position_of(Room.HALLWAY_L) == (3, 2)


def test_static_offices_flank_the_attack_room(graph):
    assert graph.position_of(Room.SECURITY_OFFICE_STATIC_L) == (4, 3)
    assert graph.position_of(Room.SECURITY_OFFICE_ATTACK) == (4, 4)
    assert graph.position_of(Room.SECURITY_OFFICE_STATIC_R) == (4, 5)


@pytest.mark.parametrize("room, expected", [
    (Room.SECURITY_OFFICE_ATTACK, 0),
    (Room.SECURITY_OFFICE_STATIC_L, 1),
    (Room.HALLWAY_R, 2),      # sqrt(8) = 2.83
    (Room.KITCHEN, 3),        # sqrt(13) = 3.61
    (Room.SHOW_STAGE, 4),     # sqrt(17) = 4.12
])
def test_distance_to_attack_truncates(graph, room, expected):
    assert graph.distance_to_attack(room) == expected


def test_distance_is_symmetric(graph):
    assert graph.distance(Room.ARCADE, Room.KITCHEN) == graph.distance(Room.KITCHEN, Room.ARCADE) == 4


# --- Shortest path ---

def test_shortest_path_from_stage_to_attack(graph):
    assert graph.shortest_path(Room.SHOW_STAGE, Room.SECURITY_OFFICE_ATTACK) == [
        Room.SHOW_STAGE,
        Room.DINING_AREA_C,
        Room.RESTROOMS,
        Room.HALLWAY_L,
        Room.SECURITY_OFFICE_STATIC_L,
        Room.SECURITY_OFFICE_ATTACK,
    ]
    assert graph.path_length(Room.SHOW_STAGE, Room.SECURITY_OFFICE_ATTACK) == 5


def test_no_way_out_of_the_attack_room(graph):
    assert graph.shortest_path(Room.SECURITY_OFFICE_ATTACK, Room.SHOW_STAGE) is None
    assert graph.path_length(Room.SECURITY_OFFICE_ATTACK, Room.SHOW_STAGE) is None


def test_path_to_self_is_empty(graph):
    assert graph.shortest_path(Room.KITCHEN, Room.KITCHEN) == [Room.KITCHEN]
    assert graph.path_length(Room.KITCHEN, Room.KITCHEN) == 0


def test_shared_instance_matches_fresh_graph(graph):
    for room in Room:
        assert LOCATION_GRAPH.neighbors(room) == graph.neighbors(room)
