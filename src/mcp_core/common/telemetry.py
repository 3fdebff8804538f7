"""
Telemetry primitives used by commands.

The command core does not ship a tracing backend. It only needs a status
code vocabulary, the tag names it writes, and a no-op activity for callers
that do not trace.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ActivityStatusCode(str, Enum):
    """Outcome recorded on an activity."""

    UNSET = "unset"
    OK = "ok"
    ERROR = "error"


class TagName:
    """Tag keys written onto activities."""

    ERROR_DETAILS = "ErrorDetails"
    TOOL_NAME = "ToolName"


class NullActivity:
    """Activity that records nothing."""

    def set_status(
        self, code: ActivityStatusCode, description: str | None = None
    ) -> NullActivity:
        return self

    def add_tag(self, key: str, value: Any) -> NullActivity:
        return self


class RecordingActivity:
    """In-memory activity that keeps the last status and every tag.

    Useful for embedding callers that forward tags to their own tracer after
    the invocation completes.
    """

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.status: ActivityStatusCode = ActivityStatusCode.UNSET
        self.status_description: str | None = None
        self.tags: dict[str, Any] = {}

    def set_status(
        self, code: ActivityStatusCode, description: str | None = None
    ) -> RecordingActivity:
        self.status = code
        self.status_description = description
        return self

    def add_tag(self, key: str, value: Any) -> RecordingActivity:
        self.tags[key] = value
        return self


NULL_ACTIVITY = NullActivity()
