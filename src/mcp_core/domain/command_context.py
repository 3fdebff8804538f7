from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from mcp_core.domain.command_response import CommandResponse
from mcp_core.interfaces.activity_interface import IActivity


@dataclass(slots=True)
class CommandContext:
    """Per-invocation state handed to a command.

    The context owns the response for exactly one invocation; it must not be
    shared between concurrent invocations.
    """

    response: CommandResponse = field(default_factory=CommandResponse)
    activity: IActivity | None = None
    services: Mapping[str, Any] = field(default_factory=dict)

    def get_service(self, name: str) -> Any:
        """Return a registered service or raise ``KeyError``."""
        try:
            return self.services[name]
        except KeyError:
            raise KeyError(f"Service '{name}' is not available in this context") from None
