"""Shared fixtures."""

from __future__ import annotations

import pytest
import structlog

from emitkit.config.settings import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings_and_logging(monkeypatch):
    """Isolate each test from EMITKIT_* env vars and global structlog state."""
    for key in [
        "EMITKIT_LOG_LEVEL",
        "EMITKIT_LOG_JSON",
        "EMITKIT_DEFAULT_MAX_LISTENERS",
        "EMITKIT_ERROR_POLICY",
    ]:
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
