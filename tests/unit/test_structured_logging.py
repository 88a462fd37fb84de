"""Tests for structured logging context."""

import pytest
import structlog
from structlog.testing import CapturingLogger

from src.app.core.logging import (
    bind_request_context,
    bind_user_context,
    clear_request_context,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def capturing_logger():
    """Create a capturing logger for tests."""
    cap_logger = CapturingLogger()

    # Save original configuration to restore later
    old_config = structlog.get_config()

    # Use *args, **kwargs to accept any arguments passed by structlog
    structlog.configure(
        processors=[structlog.contextvars.merge_contextvars],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=lambda *args, **kwargs: cap_logger,
        cache_logger_on_first_use=False,
    )

    clear_request_context()
    yield cap_logger
    clear_request_context()
    structlog.configure(**old_config)


def test_bind_request_context(capturing_logger):
    """Test binding request_id to log context."""
    request_id = "test-request-123"

    bind_request_context(request_id)
    logger = structlog.get_logger()
    logger.info("test message")

    entries = capturing_logger.calls
    assert len(entries) == 1
    assert entries[0].kwargs["request_id"] == request_id


def test_bind_request_context_with_none(capturing_logger):
    """Test that None request_id is not bound."""
    bind_request_context(None)
    logger = structlog.get_logger()
    logger.info("test message")

    entries = capturing_logger.calls
    assert len(entries) == 1
    assert "request_id" not in entries[0].kwargs


def test_bind_user_context(capturing_logger):
    """Only the opaque user id is bound, never an email."""
    bind_user_context("0b5c6f2e-user")
    logger = structlog.get_logger()
    logger.info("test message")

    entries = capturing_logger.calls
    assert len(entries) == 1
    assert entries[0].kwargs["user_id"] == "0b5c6f2e-user"
    assert "user_email" not in entries[0].kwargs


def test_request_and_user_context_combined(capturing_logger):
    bind_request_context("req-1")
    bind_user_context("user-1")
    structlog.get_logger().info("Project created", project_id=3)

    kwargs = capturing_logger.calls[0].kwargs
    assert kwargs["request_id"] == "req-1"
    assert kwargs["user_id"] == "user-1"
    assert kwargs["project_id"] == 3


def test_clear_request_context(capturing_logger):
    """Test that context is cleared properly."""
    bind_request_context("req-1")
    bind_user_context("user-1")
    clear_request_context()

    structlog.get_logger().info("test message")

    kwargs = capturing_logger.calls[0].kwargs
    assert "request_id" not in kwargs
    assert "user_id" not in kwargs
