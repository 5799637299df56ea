"""Pytest configuration and shared fixtures for weft tests."""

import logging

import pytest
import weft._config
from weft._logging import LOGGER_NAME, clear_log_hooks


@pytest.fixture
def fresh_config(monkeypatch: pytest.MonkeyPatch):
    """Clear the global config and weft env vars; restored after the test."""
    monkeypatch.delenv('WEFT_CURRY_OPTIMIZED', raising=False)
    monkeypatch.delenv('WEFT_LOG_LEVEL', raising=False)
    monkeypatch.setattr(weft._config, '_config', None)
    yield


@pytest.fixture
def clean_logging():
    """Clear hooks and handlers on the weft logger before and after a test."""
    weft_logger = logging.getLogger(LOGGER_NAME)
    clear_log_hooks()
    yield weft_logger
    clear_log_hooks()
    weft_logger.handlers.clear()
    weft_logger.setLevel(logging.NOTSET)
    weft_logger.propagate = True


@pytest.fixture
def triple():
    """A three-argument function that records its arguments."""

    def triple(a, b, c):
        return [a, b, c]

    return triple
