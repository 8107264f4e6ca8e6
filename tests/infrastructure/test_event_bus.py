"""Tests for emitkit.infrastructure.events.bus."""

from dataclasses import dataclass

import pytest

from emitkit.infrastructure.events.bus import InMemoryEventBus
from emitkit.infrastructure.events.emitter import EventEmitter


@dataclass(frozen=True)
class DataReceived:
    payload: str


@dataclass(frozen=True)
class ServerClosed:
    name: str


@dataclass(frozen=True)
class UrgentDataReceived(DataReceived):
    priority: int = 1


class TestInMemoryEventBus:
    def test_publish_calls_handler(self):
        bus = InMemoryEventBus()
        received = []
        bus.subscribe(DataReceived, lambda e: received.append(e))

        assert bus.publish(DataReceived(payload="hello")) is True

        assert len(received) == 1
        assert received[0].payload == "hello"

    def test_multiple_handlers(self):
        bus = InMemoryEventBus()
        results_1 = []
        results_2 = []
        bus.subscribe(DataReceived, lambda e: results_1.append(e.payload))
        bus.subscribe(DataReceived, lambda e: results_2.append(e.payload.upper()))

        bus.publish(DataReceived(payload="test"))

        assert results_1 == ["test"]
        assert results_2 == ["TEST"]

    def test_different_event_types(self):
        bus = InMemoryEventBus()
        data_events = []
        close_events = []
        bus.subscribe(DataReceived, lambda e: data_events.append(e))
        bus.subscribe(ServerClosed, lambda e: close_events.append(e))

        bus.publish(DataReceived(payload="a"))
        bus.publish(ServerClosed(name="API Server"))

        assert len(data_events) == 1
        assert len(close_events) == 1
        assert close_events[0].name == "API Server"

    def test_exact_type_only(self):
        bus = InMemoryEventBus()
        received = []
        bus.subscribe(DataReceived, received.append)

        bus.publish(UrgentDataReceived(payload="x"))

        assert received == []

    def test_no_handler_is_noop(self):
        bus = InMemoryEventBus()
        assert bus.publish(DataReceived(payload="ignored")) is False

    def test_handler_order_preserved(self):
        bus = InMemoryEventBus()
        order = []
        bus.subscribe(DataReceived, lambda e: order.append(1))
        bus.subscribe(DataReceived, lambda e: order.append(2))
        bus.subscribe(DataReceived, lambda e: order.append(3))

        bus.publish(DataReceived(payload="x"))

        assert order == [1, 2, 3]

    def test_unsubscribe_and_handle(self):
        bus = InMemoryEventBus()
        received = []
        handle = bus.subscribe(DataReceived, received.append)
        bus.subscribe(ServerClosed, received.append)

        handle.cancel()
        bus.unsubscribe(ServerClosed, received.append)
        bus.publish(DataReceived(payload="x"))
        bus.publish(ServerClosed(name="s"))

        assert received == []

    def test_rejects_non_type_key(self):
        bus = InMemoryEventBus()
        with pytest.raises(TypeError):
            bus.subscribe("DataReceived", print)

    def test_shares_given_emitter(self):
        emitter = EventEmitter()
        bus = InMemoryEventBus(emitter)
        bus.subscribe(DataReceived, print)
        assert emitter.event_names() == [DataReceived]
