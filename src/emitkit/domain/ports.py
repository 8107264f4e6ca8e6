"""Port definitions.

``NotificationSource`` is the capability every emitter-like object offers to
outside callers.  Domain types that compose an emitter satisfy it by
delegation, so they can be used wherever an emitter is expected.
"""

from __future__ import annotations

from typing import Any, Hashable, Protocol, runtime_checkable

from emitkit.domain.entities import Listener, Subscription, SubscriptionHandle


@runtime_checkable
class NotificationSource(Protocol):
    """Subscribe/emit contract shared by emitters and their owners."""

    def subscribe(self, event_name: Hashable, callback: Listener) -> SubscriptionHandle: ...
    def subscribe_once(self, event_name: Hashable, callback: Listener) -> SubscriptionHandle: ...
    def unsubscribe(self, event_name: Hashable, callback: Listener) -> None: ...
    def emit(self, event_name: Hashable, *args: Any, **kwargs: Any) -> bool: ...
    def listener_count(self, event_name: Hashable) -> int: ...
    def event_names(self) -> list[Hashable]: ...


@runtime_checkable
class SubscriptionRegistry(Protocol):
    """What a ``SubscriptionHandle`` needs from the emitter that issued it."""

    def has_subscription(self, subscription: Subscription) -> bool: ...
    def discard_subscription(self, subscription: Subscription) -> bool: ...
