"""Tests for the per-tick signal bus."""
from __future__ import annotations

import pytest

from tick_nightwatch.signals import DEATH, SIGHTING, SignalBus


@pytest.fixture
def bus() -> SignalBus:
    return SignalBus()


def _recorder(log: list):
    return lambda signal, data: log.append((signal, data))


def test_publish_waits_for_flush(bus):
    log: list = []
    bus.subscribe(SIGHTING, _recorder(log))
    bus.publish(SIGHTING, name="Bonnie", side="left")
    assert log == []
    bus.flush()
    assert log == [(SIGHTING, {"name": "Bonnie", "side": "left"})]


def test_flush_delivers_in_publish_order(bus):
    log: list = []
    bus.subscribe("*", _recorder(log))
    bus.publish(SIGHTING, name="Chica", side="right")
    bus.publish(DEATH, killer="Chica", minutes=90)
    bus.flush()
    assert [signal for signal, _ in log] == [SIGHTING, DEATH]


def test_named_handler_runs_before_wildcard(bus):
    order: list[str] = []
    bus.subscribe("*", lambda s, d: order.append("any"))
    bus.subscribe(DEATH, lambda s, d: order.append("death"))
    bus.publish(DEATH, killer="Freddy", minutes=0)
    bus.flush()
    assert order == ["death", "any"]


def test_other_signals_are_not_delivered(bus):
    log: list = []
    bus.subscribe(DEATH, _recorder(log))
    bus.publish(SIGHTING, name="Bonnie", side="left")
    bus.flush()
    assert log == []


def test_flush_empties_the_queue(bus):
    log: list = []
    bus.subscribe(DEATH, _recorder(log))
    bus.publish(DEATH, killer="Freddy", minutes=0)
    bus.flush()
    bus.flush()
    assert len(log) == 1


def test_signals_published_during_flush_wait_for_next_flush(bus):
    log: list = []
    bus.subscribe(SIGHTING, lambda s, d: bus.publish(DEATH, killer=d["name"], minutes=0))
    bus.subscribe(DEATH, _recorder(log))
    bus.publish(SIGHTING, name="Bonnie", side="left")
    bus.flush()
    assert log == []
    bus.flush()
    assert log == [(DEATH, {"killer": "Bonnie", "minutes": 0})]


def test_clear_drops_pending(bus):
    log: list = []
    bus.subscribe("*", _recorder(log))
    bus.publish(DEATH, killer="Freddy", minutes=0)
    bus.clear()
    bus.flush()
    assert log == []
