from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from mcp_core.common.telemetry import ActivityStatusCode


@runtime_checkable
class IActivity(Protocol):
    """Tracing handle for one command invocation.

    Both methods return the activity itself so calls can be chained.
    """

    def set_status(
        self, code: ActivityStatusCode, description: str | None = None
    ) -> IActivity: ...

    def add_tag(self, key: str, value: Any) -> IActivity: ...
