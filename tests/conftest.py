from __future__ import annotations

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logger():
    """Let the package log during the test, then drop any sinks it installed."""
    logger.enable("dial_password")
    yield
    logger.remove()
    logger.disable("dial_password")


@pytest.fixture
def warnings_logged() -> list[str]:
    """Messages logged at WARNING or above while the test runs."""
    messages: list[str] = []
    handler_id = logger.add(
        lambda message: messages.append(message.record["message"]),
        level="WARNING",
    )
    yield messages
    logger.remove(handler_id)
