"""Server-like notification source.

``DataServer`` keeps a private name and tells listeners when it has
received data (``"data"``) or is shutting down (``"close"``).  Its own
announcement is always written before any listener runs.
"""

from __future__ import annotations

from typing import Any, Callable

from emitkit.application.notifier import Notifier
from emitkit.config.logging import get_logger
from emitkit.infrastructure.events.emitter import EventEmitter

logger = get_logger(__name__)

DATA_EVENT = "data"
CLOSE_EVENT = "close"


class DataServer(Notifier):
    """A named server that emits ``data`` and ``close`` events.

    Args:
        name: Display name, e.g. ``"API Server"``.
        emitter: Emitter to own; a fresh one is created when omitted.
        output: Sink for the server's own announcements.  Defaults to an
            info-level log line.
    """

    def __init__(
        self,
        name: str,
        *,
        emitter: EventEmitter | None = None,
        output: Callable[[str], Any] | None = None,
    ) -> None:
        super().__init__(emitter)
        if not name or not name.strip():
            raise ValueError("name must be a non-empty string")
        self._name = name
        self._output = output if output is not None else self._log_announcement

    @property
    def name(self) -> str:
        return self._name

    def receive_data(self, data: Any) -> bool:
        """Process incoming *data* and notify ``data`` listeners."""
        self._output(f"[{self._name}] Data processing...")
        logger.debug("server_data_received", server=self._name)
        return self.emit(DATA_EVENT, data)

    def shutdown(self) -> bool:
        """Notify ``close`` listeners that the server is going away."""
        self._output(f"[{self._name}] Server shutting down...")
        logger.debug("server_shutdown", server=self._name)
        return self.emit(CLOSE_EVENT)

    def __repr__(self) -> str:
        return f"DataServer(name={self._name!r})"

    @staticmethod
    def _log_announcement(message: str) -> None:
        logger.info("server_announcement", message=message)
