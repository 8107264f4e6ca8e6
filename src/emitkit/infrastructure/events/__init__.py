"""Event dispatch adapters."""

from emitkit.infrastructure.events.bus import InMemoryEventBus
from emitkit.infrastructure.events.emitter import ERROR_EVENT, EventEmitter

__all__ = ["ERROR_EVENT", "EventEmitter", "InMemoryEventBus"]
