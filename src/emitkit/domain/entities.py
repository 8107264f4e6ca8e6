"""Domain entities for emitkit.

A ``Subscription`` is one registered (event name, callback, persistence mode)
triple.  Subscriptions compare by identity: two registrations of the same
callback are distinct entries, each removable on its own.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Hashable

if TYPE_CHECKING:
    from emitkit.domain.ports import SubscriptionRegistry


Listener = Callable[..., Any]


@dataclass(eq=False)
class Subscription:
    """A single listener registration on an emitter."""

    event_name: Hashable
    callback: Listener
    once: bool = False

    def matches(self, callback: Listener) -> bool:
        # Bound methods are rebuilt on every attribute access, so equality
        # rather than identity is what finds ``obj.method`` again.
        return self.callback == callback


@dataclass(eq=False)
class SubscriptionHandle:
    """Returned from ``subscribe``; cancels exactly the entry it was issued for."""

    subscription: Subscription
    _registry: SubscriptionRegistry = field(repr=False)

    @property
    def event_name(self) -> Hashable:
        return self.subscription.event_name

    @property
    def active(self) -> bool:
        return self._registry.has_subscription(self.subscription)

    def cancel(self) -> bool:
        """Remove the subscription.  Returns False if it was already gone."""
        return self._registry.discard_subscription(self.subscription)
