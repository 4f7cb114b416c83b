"""Pytest configuration and shared fixtures for errstatus tests."""

from __future__ import annotations

import logging
from typing import Generator

import pytest

from errstatus.config import settings


@pytest.fixture
def identity():
    """Translate function that returns the key unchanged."""
    return lambda key: key


@pytest.fixture
def upper():
    """Translate function that makes its output distinguishable from the key."""
    return lambda key: key.upper()


@pytest.fixture
def classify_logger() -> logging.Logger:
    """Logger injected into the classifier in tests."""
    return logging.getLogger("errstatus.tests")


@pytest.fixture(autouse=True)
def reset_errstatus_logging() -> Generator[None, None, None]:
    """Undo CLI logging setup so caplog sees errstatus records."""
    yield
    logger = logging.getLogger("errstatus")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch) -> Generator[None, None, None]:
    """Point config at an empty temp directory and reset the singleton."""
    monkeypatch.setenv("ERRSTATUS_CONFIG_DIR", str(tmp_path / "config"))
    monkeypatch.delenv("ERRSTATUS_LOCALE", raising=False)
    monkeypatch.delenv("ERRSTATUS_LOG_LEVEL", raising=False)
    monkeypatch.setattr(settings, "_config", None)
    yield
