"""Tests for amnotify/core/logging.py — level resolution and handler wiring."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import structlog

from amnotify.core.config import reset_settings
from amnotify.core.logging import setup_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Put the root logger and structlog back the way the test found them."""
    reset_settings()
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    reset_settings()


class TestSetupLogging:
    def test_explicit_level(self) -> None:
        setup_logging(level="debug", fmt="console")
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self) -> None:
        setup_logging(level="LOUD", fmt="json")
        assert logging.getLogger().level == logging.INFO

    def test_single_stderr_handler(self) -> None:
        setup_logging(level="WARNING")
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_aiohttp_not_below_info(self) -> None:
        setup_logging(level="DEBUG")
        assert logging.getLogger("aiohttp").level == logging.INFO
