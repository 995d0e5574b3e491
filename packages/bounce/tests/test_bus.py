"""Unit tests for SignalBus."""
from __future__ import annotations

from bounce.bus import SignalBus


def test_publish_is_deferred_until_flush():
    bus = SignalBus()
    received = []
    bus.subscribe("bounce", lambda name, data: received.append((name, data)))

    bus.publish("bounce", position=20.0)
    assert received == []
    assert bus.pending == 1

    bus.flush()
    assert received == [("bounce", {"position": 20.0})]
    assert bus.pending == 0


def test_handlers_called_in_subscription_order():
    bus = SignalBus()
    order = []
    bus.subscribe("playback", lambda n, d: order.append("a"))
    bus.subscribe("playback", lambda n, d: order.append("b"))
    bus.publish("playback", playing=True)
    bus.flush()
    assert order == ["a", "b"]


def test_signals_delivered_in_publish_order():
    bus = SignalBus()
    seen = []
    bus.subscribe("x", lambda n, d: seen.append(d["i"]))
    for i in range(3):
        bus.publish("x", i=i)
    bus.flush()
    assert seen == [0, 1, 2]


def test_publish_during_flush_waits_for_next_flush():
    bus = SignalBus()
    seen = []

    def chain(name, data):
        seen.append(name)
        bus.publish("second")

    bus.subscribe("first", chain)
    bus.subscribe("second", lambda n, d: seen.append(n))
    bus.publish("first")
    bus.flush()
    assert seen == ["first"]
    bus.flush()
    assert seen == ["first", "second"]


def test_unsubscribe():
    bus = SignalBus()
    seen = []

    def handler(name, data):
        seen.append(name)

    bus.subscribe("x", handler)
    bus.unsubscribe("x", handler)
    bus.unsubscribe("x", handler)  # no error when already gone
    bus.unsubscribe("never", handler)
    bus.publish("x")
    bus.flush()
    assert seen == []


def test_clear_drops_pending():
    bus = SignalBus()
    seen = []
    bus.subscribe("x", lambda n, d: seen.append(n))
    bus.publish("x")
    bus.clear()
    bus.flush()
    assert seen == []
