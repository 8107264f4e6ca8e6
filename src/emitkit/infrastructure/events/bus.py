"""In-memory event bus.

Typed publish/subscribe for events that are plain (usually frozen)
dataclasses.  Handlers are keyed by the exact event type and called
synchronously in registration order, with the same snapshot and fail-fast
rules as ``EventEmitter``, which does the actual dispatch.
"""

from __future__ import annotations

from typing import Any, Callable

from emitkit.domain.entities import SubscriptionHandle
from emitkit.infrastructure.events.emitter import EventEmitter


class InMemoryEventBus:
    """Synchronous in-memory event bus."""

    def __init__(self, emitter: EventEmitter | None = None) -> None:
        self._emitter = emitter if emitter is not None else EventEmitter()

    def subscribe(self, event_type: type, handler: Callable[..., Any]) -> SubscriptionHandle:
        """Register *handler* to be called when *event_type* is published."""
        if not isinstance(event_type, type):
            raise TypeError(f"event_type must be a class, got {event_type!r}")
        return self._emitter.subscribe(event_type, handler)

    def unsubscribe(self, event_type: type, handler: Callable[..., Any]) -> None:
        self._emitter.unsubscribe(event_type, handler)

    def publish(self, event: Any) -> bool:
        """Dispatch *event* to all registered handlers for its type."""
        return self._emitter.emit(type(event), event)
