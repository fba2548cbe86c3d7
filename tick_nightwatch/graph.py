"""LocationGraph - the fixed pizzeria floor plan."""
from __future__ import annotations

import heapq
import math

from tick_nightwatch.types import Room

_ADJACENCY: dict[Room, tuple[Room, ...]] = {
    Room.HALLWAY_L: (Room.RESTROOMS, Room.SECURITY_OFFICE_STATIC_L),
    Room.HALLWAY_R: (Room.KITCHEN, Room.SECURITY_OFFICE_STATIC_R),
    Room.SHOW_STAGE: (Room.DINING_AREA_C,),
    Room.DINING_AREA_L: (Room.ARCADE, Room.DINING_AREA_C),
    Room.DINING_AREA_C: (
        Room.DINING_AREA_L,
        Room.DINING_AREA_R,
        Room.SHOW_STAGE,
        Room.RESTROOMS,
    ),
    Room.DINING_AREA_R: (Room.DINING_AREA_C, Room.KITCHEN),
    Room.RESTROOMS: (Room.DINING_AREA_C, Room.HALLWAY_L, Room.ARCADE),
    Room.KITCHEN: (Room.DINING_AREA_R, Room.HALLWAY_R),
    Room.ARCADE: (Room.RESTROOMS, Room.DINING_AREA_L, Room.HALLWAY_L),
    Room.SECURITY_OFFICE_STATIC_R: (Room.SECURITY_OFFICE_ATTACK,),
    Room.SECURITY_OFFICE_STATIC_L: (Room.SECURITY_OFFICE_ATTACK,),
    Room.SECURITY_OFFICE_ATTACK: (Room.SECURITY_OFFICE_ATTACK,),
}

#                        [Show Stage]
#   [Arcade] [Dining L] [Dining C] [Dining R] [Kitchen]
#   [Restrooms ----------------------------] [Hallway R]
#   [Hallway L]                              [Hallway R]
#   [Hallway L] [Static L] [Attack] [Static R] [Hallway R]
_GRID: tuple[tuple[Room | None, ...], ...] = (
    (None, None, None, Room.SHOW_STAGE, Room.SHOW_STAGE, Room.SHOW_STAGE, None, None, None),
    (None, None, Room.ARCADE, Room.DINING_AREA_L, Room.DINING_AREA_C,
     Room.DINING_AREA_R, Room.KITCHEN, None, None),
    (None, None, Room.RESTROOMS, Room.RESTROOMS, Room.RESTROOMS, Room.RESTROOMS,
     Room.HALLWAY_R, None, None),
    (None, None, Room.HALLWAY_L, None, None, None, Room.HALLWAY_R, None, None),
    (None, None, Room.HALLWAY_L, Room.SECURITY_OFFICE_STATIC_L,
     Room.SECURITY_OFFICE_ATTACK, Room.SECURITY_OFFICE_STATIC_R,
     Room.HALLWAY_R, None, None),
)

STATIC_OFFICES = frozenset({Room.SECURITY_OFFICE_STATIC_L, Room.SECURITY_OFFICE_STATIC_R})
HALLWAYS = frozenset({Room.HALLWAY_L, Room.HALLWAY_R})


def _first_cells() -> dict[Room, tuple[int, int]]:
    cells: dict[Room, tuple[int, int]] = {}
    for row, line in enumerate(_GRID):
        for col, room in enumerate(line):
            if room is not None and room not in cells:
                cells[room] = (row, col)
    return cells


class LocationGraph:
    """Read-only adjacency and coordinate lookups over :class:`Room`.

    Edges are directional and hand-authored. Every room has at least one
    neighbor; the attack room only leads back to itself.
    """

    def __init__(self) -> None:
        self._adjacency = _ADJACENCY
        self._cells = _first_cells()

    def rooms(self) -> list[Room]:
        return list(self._adjacency)

    def neighbors(self, room: Room) -> tuple[Room, ...]:
        return self._adjacency[room]

    def position_of(self, room: Room) -> tuple[int, int]:
        return self._cells[room]

    def distance(self, a: Room, b: Room) -> int:
        r1, c1 = self.position_of(a)
        r2, c2 = self.position_of(b)
        return int(math.sqrt((float(r1) - r2) ** 2 + (float(c1) - c2) ** 2))

    def distance_to_attack(self, room: Room) -> int:
        return self.distance(Room.SECURITY_OFFICE_ATTACK, room)

    def shortest_path(self, start: Room, goal: Room) -> list[Room] | None:
        """Uniform-cost search along the directional edges.

        Returns the rooms visited from *start* to *goal* inclusive, or None
        when *goal* cannot be reached.
        """
        open_set: list[tuple[int, int, Room]] = [(0, 0, start)]
        came_from: dict[Room, Room] = {}
        g_score: dict[Room, int] = {start: 0}
        counter = 1
        closed: set[Room] = set()

        while open_set:
            _, _, current = heapq.heappop(open_set)
            if current in closed:
                continue
            closed.add(current)
            if current == goal:
                path: list[Room] = [current]
                while current in came_from:
                    current = came_from[current]
                    path.append(current)
                path.reverse()
                return path

            for neighbor in self.neighbors(current):
                tentative = g_score[current] + 1
                if tentative < g_score.get(neighbor, math.inf):
                    came_from[neighbor] = current
                    g_score[neighbor] = tentative
                    heapq.heappush(open_set, (tentative, counter, neighbor))
                    counter += 1

        return None

    def path_length(self, start: Room, goal: Room) -> int | None:
        path = self.shortest_path(start, goal)
        if path is None:
            return None
        return len(path) - 1


LOCATION_GRAPH = LocationGraph()
