"""In-process event emitter.

A registry from event name to an ordered list of subscriptions.  ``emit``
snapshots the list for the given name and calls each subscriber in
registration order on the calling thread; a nested ``emit`` from inside a
subscriber completes before the outer fan-out moves on.

Subscriber exceptions are not caught: they leave ``emit`` and the rest of
that fan-out is skipped.
"""

from __future__ import annotations

import threading
from typing import Any, Hashable

from emitkit.config.logging import get_logger
from emitkit.config.settings import get_settings
from emitkit.domain.entities import Listener, Subscription, SubscriptionHandle
from emitkit.domain.enums import ErrorPolicy
from emitkit.domain.exceptions import UnhandledErrorEvent

logger = get_logger(__name__)

ERROR_EVENT = "error"


def _check_max_listeners(n: int) -> int:
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise ValueError(f"max_listeners must be a non-negative integer, got {n!r}")
    return n


class EventEmitter:
    """Synchronous publish/subscribe registry keyed by event name.

    Args:
        max_listeners: Advisory per-name threshold; ``0`` disables the
            warning.  Defaults to ``default_max_listeners`` from settings.
        error_policy: What to do when ``"error"`` is emitted with no
            listener.  Defaults to ``error_policy`` from settings.
    """

    def __init__(
        self,
        *,
        max_listeners: int | None = None,
        error_policy: ErrorPolicy | str | None = None,
    ) -> None:
        settings = get_settings()
        self._subscriptions: dict[Hashable, list[Subscription]] = {}
        self._warned: set[Hashable] = set()
        self._max_listeners = (
            settings.default_max_listeners
            if max_listeners is None
            else _check_max_listeners(max_listeners)
        )
        self._error_policy = (
            settings.error_policy if error_policy is None else ErrorPolicy(error_policy)
        )
        # Re-entrant so a subscriber can emit on the same emitter; other
        # threads wait until the whole fan-out is done.
        self._lock = threading.RLock()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(events={len(self._subscriptions)}, "
            f"max_listeners={self._max_listeners})"
        )

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def subscribe(self, event_name: Hashable, callback: Listener) -> SubscriptionHandle:
        """Register *callback* to run on every emission of *event_name*."""
        return self._add(event_name, callback, once=False)

    def subscribe_once(self, event_name: Hashable, callback: Listener) -> SubscriptionHandle:
        """Register *callback* to run on the next emission of *event_name* only."""
        return self._add(event_name, callback, once=True)

    def unsubscribe(self, event_name: Hashable, callback: Listener) -> None:
        """Remove the first subscription of *callback* for *event_name*, if any."""
        with self._lock:
            entries = self._subscriptions.get(event_name)
            if not entries:
                return
            for index, subscription in enumerate(entries):
                if subscription.matches(callback):
                    del entries[index]
                    break
            if not entries:
                self._drop(event_name)

    def remove_all_listeners(self, event_name: Hashable | None = None) -> None:
        """Drop every subscription for *event_name*, or for all names."""
        with self._lock:
            if event_name is None:
                self._subscriptions.clear()
                self._warned.clear()
            elif event_name in self._subscriptions:
                self._drop(event_name)

    on = subscribe
    add_listener = subscribe
    once = subscribe_once
    off = unsubscribe
    remove_listener = unsubscribe

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def emit(self, event_name: Hashable, *args: Any, **kwargs: Any) -> bool:
        """Call every current subscriber of *event_name* with the given args.

        Returns True if there was at least one subscriber.
        """
        with self._lock:
            snapshot = list(self._subscriptions.get(event_name, ()))
            if not snapshot:
                if event_name == ERROR_EVENT:
                    self._handle_unhandled_error(args, kwargs)
                return False

            for subscription in snapshot:
                # A nested emit may already have consumed this one-shot entry.
                if subscription.once and not self.discard_subscription(subscription):
                    continue
                subscription.callback(*args, **kwargs)
        return True

    def _handle_unhandled_error(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        if self._error_policy is ErrorPolicy.RAISE:
            if args and isinstance(args[0], BaseException):
                raise args[0]
            raise UnhandledErrorEvent(*args, **kwargs)
        if self._error_policy is ErrorPolicy.LOG:
            logger.error(
                "unhandled_error_event",
                error=repr(args[0]) if args else None,
                extra_args=len(args[1:]),
                kwargs=sorted(kwargs),
            )

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def listener_count(self, event_name: Hashable) -> int:
        with self._lock:
            return len(self._subscriptions.get(event_name, ()))

    def listeners(self, event_name: Hashable) -> list[Listener]:
        """Copy of the callbacks registered for *event_name*, in order."""
        with self._lock:
            return [s.callback for s in self._subscriptions.get(event_name, ())]

    def event_names(self) -> list[Hashable]:
        with self._lock:
            return list(self._subscriptions)

    def set_max_listeners(self, n: int) -> EventEmitter:
        self._max_listeners = _check_max_listeners(n)
        return self

    def get_max_listeners(self) -> int:
        return self._max_listeners

    @property
    def error_policy(self) -> ErrorPolicy:
        return self._error_policy

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _add(self, event_name: Hashable, callback: Listener, *, once: bool) -> SubscriptionHandle:
        if not callable(callback):
            raise TypeError(
                f"listener must be callable, got {type(callback).__name__}"
            )
        subscription = Subscription(event_name=event_name, callback=callback, once=once)
        with self._lock:
            entries = self._subscriptions.setdefault(event_name, [])
            entries.append(subscription)
            self._warn_if_over_limit(event_name, len(entries))
        return SubscriptionHandle(subscription, self)

    def _warn_if_over_limit(self, event_name: Hashable, count: int) -> None:
        limit = self._max_listeners
        if limit <= 0 or count <= limit or event_name in self._warned:
            return
        self._warned.add(event_name)
        logger.warning(
            "max_listeners_exceeded",
            event_name=str(event_name),
            count=count,
            max_listeners=limit,
            hint="use set_max_listeners() to raise the limit",
        )

    def has_subscription(self, subscription: Subscription) -> bool:
        """True while *subscription* is still registered on this emitter."""
        with self._lock:
            return subscription in self._subscriptions.get(subscription.event_name, ())

    def discard_subscription(self, subscription: Subscription) -> bool:
        """Remove exactly *subscription*.  Returns False if it was already gone."""
        with self._lock:
            entries = self._subscriptions.get(subscription.event_name)
            if not entries or subscription not in entries:
                return False
            entries.remove(subscription)
            if not entries:
                self._drop(subscription.event_name)
            return True

    def _drop(self, event_name: Hashable) -> None:
        del self._subscriptions[event_name]
        self._warned.discard(event_name)
