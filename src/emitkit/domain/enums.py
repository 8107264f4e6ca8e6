"""Domain enumerations for emitkit."""

from __future__ import annotations

from enum import Enum


class ErrorPolicy(str, Enum):
    """What an emitter does when ``"error"`` is emitted with no listeners.

    - RAISE: raise the error (or ``UnhandledErrorEvent`` wrapping the args).
    - LOG: log it at error level and carry on.
    - IGNORE: drop it.
    """

    RAISE = "raise"
    LOG = "log"
    IGNORE = "ignore"
