"""Tests for logging helpers."""

import asyncio
import logging
from collections.abc import Iterator

import pytest

from async_permits.exceptions import AcquireCancelledError
from async_permits.logging import DEFAULT_FORMAT, configure_logging, get_logger
from async_permits.semaphore import Semaphore


@pytest.fixture
def clean_logger() -> Iterator[logging.Logger]:
    """Restore the package logger after each test."""
    logger = logging.getLogger("async_permits")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


@pytest.mark.unit
class TestLogging:
    """Test the namespaced logger helpers."""

    def test_get_logger_adds_namespace(self):
        """Test that names outside the namespace are prefixed."""
        assert get_logger("custom").name == "async_permits.custom"

    def test_get_logger_keeps_namespaced_names(self):
        """Test that module names are used as-is."""
        assert get_logger("async_permits.semaphore").name == "async_permits.semaphore"
        assert get_logger("async_permits").name == "async_permits"

    def test_configure_logging_adds_single_handler(self, clean_logger):
        """Test that repeated configuration does not stack handlers."""
        clean_logger.handlers = []

        configure_logging(logging.DEBUG)
        configure_logging(logging.DEBUG)

        assert clean_logger.level == logging.DEBUG
        assert len(clean_logger.handlers) == 1
        assert clean_logger.handlers[0].formatter._fmt == DEFAULT_FORMAT

    def test_configure_logging_custom_handler(self, clean_logger):
        """Test that a custom handler is attached and formatted."""
        clean_logger.handlers = []
        handler = logging.NullHandler()

        configure_logging(logging.WARNING, handler=handler)

        assert clean_logger.handlers == [handler]
        assert clean_logger.level == logging.WARNING


@pytest.mark.unit
@pytest.mark.asyncio
async def test_semaphore_logs_flush(caplog):
    """Test that flushing waiters is logged at DEBUG level."""
    semaphore = Semaphore(permits=1)
    await semaphore.acquire()
    waiting = asyncio.create_task(semaphore.acquire())
    await asyncio.sleep(0)

    with caplog.at_level(logging.DEBUG, logger="async_permits"):
        semaphore.flush()

    assert "Flushed 1 pending acquire(s)" in caplog.text
    with pytest.raises(AcquireCancelledError):
        await waiting
