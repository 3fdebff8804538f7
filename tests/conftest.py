import logging

import pytest
import structlog
from mcp_core.common.telemetry import RecordingActivity
from mcp_core.domain.command_context import CommandContext
from mcp_core.domain.command_response import CommandResponse


@pytest.fixture
def command_response() -> CommandResponse:
    """A fresh response, as an orchestrator would create per invocation."""
    return CommandResponse()


@pytest.fixture
def recording_activity() -> RecordingActivity:
    return RecordingActivity(name="test-invocation")


@pytest.fixture
def command_context(recording_activity: RecordingActivity) -> CommandContext:
    return CommandContext(activity=recording_activity)


@pytest.fixture
def restore_logging():
    """Restore global logging and structlog configuration after a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    try:
        yield
    finally:
        for handler in list(root.handlers):
            if handler not in handlers:
                root.removeHandler(handler)
                handler.close()
        for handler in handlers:
            if handler not in root.handlers:
                root.addHandler(handler)
        root.setLevel(level)
        structlog.reset_defaults()
