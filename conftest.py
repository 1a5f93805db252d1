"""Shared pytest fixtures: fake drivers and a captured monitoring logger."""
import logging

import pytest

from monitoring.feature import MonitoringFeature


class RecordingDriver:
    """Fake driver remembering every call it receives."""

    def __init__(self, name: str = "recording"):
        self.name = name
        self.calls = []

    def set_position(self, x, y):
        self.calls.append(("set_position", x, y))

    def operate_to(self, x, y):
        self.calls.append(("operate_to", x, y))

    def __str__(self):
        return f"Recording driver {self.name}"


class FailingDriver:
    """Fake driver whose every call raises."""

    def set_position(self, x, y):
        raise RuntimeError("pen jammed")

    def operate_to(self, x, y):
        raise RuntimeError("pen jammed")


@pytest.fixture
def monitor_logger(request, caplog):
    """A logger unique to the test, captured at INFO."""
    logger = logging.getLogger(f"tests.monitoring.{request.node.name}")
    caplog.set_level(logging.INFO, logger=logger.name)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


@pytest.fixture
def feature(monitor_logger):
    return MonitoringFeature(monitor_logger)


@pytest.fixture
def messages(caplog, monitor_logger):
    """Returns the messages logged so far through the monitoring logger."""
    def _messages():
        return [r.getMessage() for r in caplog.records if r.name == monitor_logger.name]
    return _messages
