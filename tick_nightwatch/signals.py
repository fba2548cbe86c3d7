"""Per-tick notification bus between the simulation and its observers."""
from __future__ import annotations

from typing import Any, Callable

SIGHTING = "sighting"
POWER_OUT = "power_out"
BLACKOUT_WARNING = "blackout_warning"
DEATH = "death"
DUSK = "dusk"
SURVIVED = "survived"
WON = "won"

_Handler = Callable[[str, dict[str, Any]], None]


class SignalBus:
    """Queues signals during a tick and delivers them on :meth:`flush`.

    ``subscribe("*", handler)`` receives every signal.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[_Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: _Handler) -> None:
        self._subscribers.setdefault(signal_name, []).append(handler)

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data))

    def flush(self) -> None:
        snapshot = self._queue
        self._queue = []
        for signal_name, data in snapshot:
            for handler in self._subscribers.get(signal_name, []):
                handler(signal_name, data)
            for handler in self._subscribers.get("*", []):
                handler(signal_name, data)

    def clear(self) -> None:
        self._queue.clear()
