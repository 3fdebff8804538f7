"""
Base command implementation.

Every concrete command derives from :class:`BaseCommand`. The base class
owns the command's option declaration, validates parse results before
execution and turns faults raised by ``execute`` into structured responses.

Concrete commands customise fault presentation by overriding
``get_status_code`` and ``get_error_message``; ``handle_exception`` itself
is not meant to be overridden.
"""

from __future__ import annotations

import logging
import traceback
from abc import abstractmethod
from typing import final

from mcp_core.common.telemetry import ActivityStatusCode, TagName
from mcp_core.config.app_config import CommandConfig
from mcp_core.constants import (
    DEFAULT_FAULT_STATUS_CODE,
    MISSING_REQUIRED_OPTIONS_PREFIX,
    TROUBLESHOOTING_GUIDANCE,
    VALIDATION_ERROR_STATUS_CODE,
)
from mcp_core.domain.command_context import CommandContext
from mcp_core.domain.command_definition import CommandDefinition
from mcp_core.domain.command_response import (
    CommandResponse,
    ExceptionResult,
    ResponseResult,
    ValidationResult,
)
from mcp_core.domain.option_definitions import OptionDefinitions
from mcp_core.domain.parse_result import ParseResult
from mcp_core.domain.tool_metadata import ToolMetadata
from mcp_core.interfaces.command_interface import IBaseCommand

logger = logging.getLogger(__name__)


class BaseCommand(IBaseCommand):
    """
    Base class for all commands.

    Options are registered once, from the constructor, through
    :meth:`register_options`. Subclasses whose ``name`` or ``description``
    depend on instance attributes must set them before calling
    ``super().__init__()``.
    """

    def __init__(self, config: CommandConfig | None = None) -> None:
        self._config = config or CommandConfig()
        self._uses_resource_group = False
        self._requires_resource_group = False
        self._command = CommandDefinition(self.name, self.description)
        self.register_options(self._command)

    @property
    def metadata(self) -> ToolMetadata:
        return ToolMetadata()

    @property
    def config(self) -> CommandConfig:
        return self._config

    @property
    def uses_resource_group(self) -> bool:
        return self._uses_resource_group

    @property
    def requires_resource_group(self) -> bool:
        return self._requires_resource_group

    def get_command(self) -> CommandDefinition:
        return self._command

    def register_options(self, command: CommandDefinition) -> None:
        """Declare the options this command accepts. Default: none."""

    @final
    def use_resource_group(self) -> None:
        """Accept ``--resource-group``. Safe to call more than once."""
        if self._uses_resource_group:
            return
        self._uses_resource_group = True
        self._command.add_option(OptionDefinitions.Common.RESOURCE_GROUP)

    @final
    def require_resource_group(self) -> None:
        """Accept ``--resource-group`` and reject invocations that omit it."""
        self.use_resource_group()
        self._requires_resource_group = True

    def get_resource_group(self, parse_result: ParseResult) -> str | None:
        if not self._uses_resource_group:
            return None
        return parse_result.get_value(OptionDefinitions.Common.RESOURCE_GROUP)

    @abstractmethod
    async def execute(
        self, context: CommandContext, parse_result: ParseResult
    ) -> CommandResponse:
        """
        Execute the command.

        Called only after :meth:`validate` succeeded. Faults propagate to the
        caller, which hands them to :meth:`handle_exception`.
        """

    def validate(
        self,
        parse_result: ParseResult,
        command_response: CommandResponse | None = None,
    ) -> ValidationResult:
        """
        Check that every required option was bound.

        Args:
            parse_result: The parsed invocation
            command_response: Optional response that receives status 400 and
                the error message on failure

        Returns:
            The validation result; at most one error message is produced
        """
        result = ValidationResult(is_valid=True)

        missing_options = [
            option.flag
            for option in parse_result.command.options
            if option.required
            and not any(r.option is option for r in parse_result.option_results)
        ]

        if missing_options:
            result.is_valid = False
            result.error_message = (
                f"{MISSING_REQUIRED_OPTIONS_PREFIX}{', '.join(missing_options)}"
            )
            _set_validation_error(command_response, result.error_message)
        elif self._requires_resource_group:
            resource_group = OptionDefinitions.Common.RESOURCE_GROUP
            if not any(r.option is resource_group for r in parse_result.option_results):
                result.is_valid = False
                result.error_message = (
                    f"{MISSING_REQUIRED_OPTIONS_PREFIX}{resource_group.flag}"
                )
                _set_validation_error(command_response, result.error_message)

        if not result.is_valid:
            logger.debug(f"Validation failed for '{self.name}': {result.error_message}")

        return result

    @final
    def handle_exception(self, context: CommandContext, exc: Exception) -> None:
        """Write a structured error for ``exc`` into the context response."""
        if context.activity is not None:
            context.activity.set_status(ActivityStatusCode.ERROR).add_tag(
                TagName.ERROR_DETAILS, str(exc)
            )

        response = context.response
        result = ExceptionResult(
            message=str(exc),
            stack_trace=self._format_stack_trace(exc),
            type=type(exc).__name__,
        )

        response.status = self.get_status_code(exc)
        response.message = self.get_error_message(exc) + TROUBLESHOOTING_GUIDANCE
        response.results = ResponseResult.create(result)

        logger.error(
            f"Command '{self.name}' failed with {type(exc).__name__} "
            f"(status {response.status}): {exc}",
            exc_info=exc,
        )

    def get_error_message(self, exc: Exception) -> str:
        return str(exc)

    def get_status_code(self, exc: Exception) -> int:
        return DEFAULT_FAULT_STATUS_CODE

    def _format_stack_trace(self, exc: Exception) -> str | None:
        if not self._config.include_stack_traces or exc.__traceback__ is None:
            return None
        return "".join(traceback.format_tb(exc.__traceback__))

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name}>"


def _set_validation_error(response: CommandResponse | None, error_message: str) -> None:
    if response is not None:
        response.status = VALIDATION_ERROR_STATUS_CODE
        response.message = error_message
