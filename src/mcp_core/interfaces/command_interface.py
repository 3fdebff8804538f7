from __future__ import annotations

from abc import ABC, abstractmethod

from mcp_core.domain.command_context import CommandContext
from mcp_core.domain.command_definition import CommandDefinition
from mcp_core.domain.command_response import CommandResponse, ValidationResult
from mcp_core.domain.parse_result import ParseResult
from mcp_core.domain.tool_metadata import ToolMetadata


class IBaseCommand(ABC):
    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        pass

    @property
    @abstractmethod
    def title(self) -> str:
        pass

    @property
    @abstractmethod
    def metadata(self) -> ToolMetadata:
        pass

    @abstractmethod
    def get_command(self) -> CommandDefinition:
        pass

    @abstractmethod
    def validate(
        self,
        parse_result: ParseResult,
        command_response: CommandResponse | None = None,
    ) -> ValidationResult:
        pass

    @abstractmethod
    async def execute(
        self, context: CommandContext, parse_result: ParseResult
    ) -> CommandResponse:
        pass

    @abstractmethod
    def handle_exception(self, context: CommandContext, exc: Exception) -> None:
        pass
