"""Base class for domain objects that emit notifications.

A ``Notifier`` owns an ``EventEmitter`` and exposes its public contract by
delegation, keeping the owner's own state separate from the registry.
Subclasses call ``self.emit`` as a side effect of their domain work and
never know who is listening.
"""

from __future__ import annotations

from typing import Any, Hashable

from emitkit.domain.entities import Listener, SubscriptionHandle
from emitkit.infrastructure.events.emitter import EventEmitter


class Notifier:
    """Owns an emitter and forwards the subscribe/emit contract to it."""

    def __init__(self, emitter: EventEmitter | None = None) -> None:
        self._events = emitter if emitter is not None else EventEmitter()

    @property
    def events(self) -> EventEmitter:
        return self._events

    def subscribe(self, event_name: Hashable, callback: Listener) -> SubscriptionHandle:
        return self._events.subscribe(event_name, callback)

    def subscribe_once(self, event_name: Hashable, callback: Listener) -> SubscriptionHandle:
        return self._events.subscribe_once(event_name, callback)

    def unsubscribe(self, event_name: Hashable, callback: Listener) -> None:
        self._events.unsubscribe(event_name, callback)

    def remove_all_listeners(self, event_name: Hashable | None = None) -> None:
        self._events.remove_all_listeners(event_name)

    def emit(self, event_name: Hashable, *args: Any, **kwargs: Any) -> bool:
        return self._events.emit(event_name, *args, **kwargs)

    def listener_count(self, event_name: Hashable) -> int:
        return self._events.listener_count(event_name)

    def listeners(self, event_name: Hashable) -> list[Listener]:
        return self._events.listeners(event_name)

    def event_names(self) -> list[Hashable]:
        return self._events.event_names()

    def set_max_listeners(self, n: int) -> Notifier:
        self._events.set_max_listeners(n)
        return self

    def get_max_listeners(self) -> int:
        return self._events.get_max_listeners()

    on = subscribe
    add_listener = subscribe
    once = subscribe_once
    off = unsubscribe
    remove_listener = unsubscribe
