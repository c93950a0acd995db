"""Shared fixtures: loguru capture and env isolation."""

import pytest
from loguru import logger

_CONFIG_ENV_VARS = [
    "RENAMER_SOURCE", "RENAMER_DEST", "RENAMER_PREFIX", "RENAMER_REPLACEMENT",
    "RENAMER_SUFFIX", "RENAMER_SEASON", "RENAMER_OFFSET", "RENAMER_TV_MODE",
    "RENAMER_WORKFLOW", "RENAMER_COPY_MODE", "RENAMER_DRY_RUN", "RENAMER_FORCE",
    "RENAMER_INCLUDE_DOT_FILES", "RENAMER_RECURSE", "RENAMER_LOG_LEVEL",
    "RENAMER_CHDMAN", "RENAMER_WINRAR",
]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Remove renamer env vars so tests see actual defaults."""
    for var in _CONFIG_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def _reset_logger():
    """Drop sinks added during a test (they may point at captured streams)."""
    yield
    logger.remove()


@pytest.fixture
def log_messages():
    """Collect formatted loguru messages emitted during the test."""
    messages: list[str] = []
    handler_id = logger.add(
        lambda m: messages.append(m.record["message"]), format="{message}", level="DEBUG"
    )
    yield messages
    logger.remove(handler_id)
