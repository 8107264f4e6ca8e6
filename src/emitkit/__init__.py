"""emitkit — synchronous in-process event notification."""

from emitkit.domain.entities import Subscription, SubscriptionHandle
from emitkit.domain.enums import ErrorPolicy
from emitkit.domain.exceptions import EmitkitError, UnhandledErrorEvent
from emitkit.domain.ports import NotificationSource
from emitkit.infrastructure.events.emitter import ERROR_EVENT, EventEmitter

__version__ = "1.0.0"

__all__ = [
    "ERROR_EVENT",
    "EmitkitError",
    "ErrorPolicy",
    "EventEmitter",
    "NotificationSource",
    "Subscription",
    "SubscriptionHandle",
    "UnhandledErrorEvent",
]
