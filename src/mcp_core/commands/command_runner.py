"""
Runs one command invocation end to end.

The runner parses raw tokens, validates the parse result, awaits the
command's ``execute`` and, when execution raises, hands the fault to the
command's ``handle_exception`` exactly once. Execution never starts when
parsing or validation fails.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence
from typing import Any

from mcp_core.common.exceptions import CommandParseError
from mcp_core.common.logging_utils import get_logger
from mcp_core.common.telemetry import ActivityStatusCode, TagName
from mcp_core.commands.parser import CommandLineParser
from mcp_core.constants import (
    UNRECOGNIZED_ARGUMENTS_ERROR,
    VALIDATION_ERROR_STATUS_CODE,
)
from mcp_core.domain.command_context import CommandContext
from mcp_core.domain.command_definition import CommandDefinition
from mcp_core.domain.command_response import CommandResponse
from mcp_core.interfaces.activity_interface import IActivity
from mcp_core.interfaces.command_interface import IBaseCommand

logger = get_logger(__name__)


class CommandRunner:
    """Orchestrates parse, validate, execute and fault mapping."""

    def __init__(
        self,
        parser_factory: Callable[[CommandDefinition], CommandLineParser] = CommandLineParser,
    ) -> None:
        self._parser_factory = parser_factory

    async def run(
        self,
        command: IBaseCommand,
        args: Sequence[str],
        *,
        activity: IActivity | None = None,
        context: CommandContext | None = None,
    ) -> CommandResponse:
        """
        Run ``command`` with raw ``args``.

        Args:
            command: The command to invoke
            args: Raw tokens, without the command name
            activity: Optional tracing handle for this invocation
            context: Optional pre-built context; a fresh one is created otherwise

        Returns:
            The response for this invocation
        """
        if context is None:
            context = CommandContext(activity=activity)
        elif activity is not None:
            context.activity = activity

        if context.activity is not None:
            context.activity.add_tag(TagName.TOOL_NAME, command.name)

        log = logger.bind(command=command.name)
        started = time.perf_counter()
        try:
            response = await self._invoke(command, args, context, log)
        finally:
            context.response.duration = (time.perf_counter() - started) * 1000

        log.info(
            "Command finished",
            status=response.status,
            duration_ms=context.response.duration,
        )
        return response

    async def _invoke(
        self,
        command: IBaseCommand,
        args: Sequence[str],
        context: CommandContext,
        log: Any,
    ) -> CommandResponse:
        response = context.response

        try:
            parse_result = self._parser_factory(command.get_command()).parse(args)
        except CommandParseError as exc:
            log.info("Command rejected by parser", **exc.to_dict())
            response.status = VALIDATION_ERROR_STATUS_CODE
            response.message = exc.message
            return response

        if parse_result.unmatched_tokens:
            response.status = VALIDATION_ERROR_STATUS_CODE
            response.message = UNRECOGNIZED_ARGUMENTS_ERROR.format(
                arguments=" ".join(parse_result.unmatched_tokens)
            )
            log.info("Command rejected by parser", error=response.message)
            return response

        validation = command.validate(parse_result, response)
        if not validation.is_valid:
            log.info("Command rejected by validation", error=validation.error_message)
            return response

        try:
            result = await command.execute(context, parse_result)
        except Exception as exc:
            command.handle_exception(context, exc)
            return response

        if result is not response:
            # Keep the context response as the single record of this invocation
            response.status = result.status
            response.message = result.message
            response.results = result.results

        if context.activity is not None and response.is_success:
            context.activity.set_status(ActivityStatusCode.OK)

        return response
