"""
Tests for CommandRunner orchestration.
"""

import asyncio

import pytest
from mcp_core.commands.base_command import BaseCommand
from mcp_core.commands.command_runner import CommandRunner
from mcp_core.commands.parser import CommandLineParser
from mcp_core.common.exceptions import ResourceNotFoundError
from mcp_core.common.telemetry import ActivityStatusCode, TagName
from mcp_core.domain.command_context import CommandContext
from mcp_core.domain.command_response import CommandResponse, ResponseResult
from mcp_core.domain.options import OptionDescriptor
from structlog.testing import capture_logs

NAME = OptionDescriptor("name", "Account name.", required=True)
COUNT = OptionDescriptor("count", "Number of items.", value_type=int)


class AccountCommand(BaseCommand):
    def __init__(self, fault: Exception | None = None, require_rg: bool = True):
        self.fault = fault
        self.require_rg = require_rg
        self.executions = 0
        super().__init__()

    @property
    def name(self) -> str:
        return "show"

    @property
    def description(self) -> str:
        return "Show an account"

    @property
    def title(self) -> str:
        return "Show Account"

    def register_options(self, command):
        command.add_option(NAME)
        command.add_option(COUNT)
        if self.require_rg:
            self.require_resource_group()

    async def execute(self, context, parse_result):
        self.executions += 1
        await asyncio.sleep(0)
        if self.fault is not None:
            raise self.fault
        context.response.results = ResponseResult.create(
            {
                "name": parse_result.get_value(NAME),
                "resourceGroup": self.get_resource_group(parse_result),
            }
        )
        return context.response


class FreshResponseCommand(AccountCommand):
    """Returns its own response object instead of the context's."""

    async def execute(self, context, parse_result):
        self.executions += 1
        return CommandResponse(status=201, message="Created")


@pytest.fixture
def runner() -> CommandRunner:
    return CommandRunner()


@pytest.mark.asyncio
async def test_successful_run_returns_results(runner):
    command = AccountCommand()

    response = await runner.run(
        command, ["--name", "acct", "--resource-group", "rg1"]
    )

    assert response.status == 200
    assert response.results.value == {"name": "acct", "resourceGroup": "rg1"}
    assert response.duration is not None
    assert command.executions == 1


@pytest.mark.asyncio
async def test_validation_failure_short_circuits_execution(runner):
    command = AccountCommand()

    response = await runner.run(command, ["--name", "acct"])

    assert response.status == 400
    assert response.message == "Missing Required options: --resource-group"
    assert response.results is None
    assert command.executions == 0


@pytest.mark.asyncio
async def test_missing_required_options_are_reported(runner):
    command = AccountCommand()

    response = await runner.run(command, [])

    assert response.message == "Missing Required options: --name"
    assert command.executions == 0


@pytest.mark.asyncio
async def test_parse_error_short_circuits_execution(runner):
    command = AccountCommand(require_rg=False)

    response = await runner.run(command, ["--name", "acct", "--count", "lots"])

    assert response.status == 400
    assert "--count" in response.message
    assert command.executions == 0


@pytest.mark.asyncio
async def test_parse_error_is_logged_with_error_details(runner):
    command = AccountCommand(require_rg=False)

    with capture_logs() as logs:
        await runner.run(command, ["--name", "acct", "--count", "lots"])

    rejected = [e for e in logs if e["event"] == "Command rejected by parser"]
    assert len(rejected) == 1
    assert rejected[0]["command"] == "show"
    assert rejected[0]["error"]["type"] == "CommandParseError"
    assert rejected[0]["error"]["command_name"] == "show"


@pytest.mark.asyncio
async def test_unrecognized_arguments_are_rejected(runner):
    command = AccountCommand(require_rg=False)

    response = await runner.run(command, ["--name", "acct", "--bogus"])

    assert response.status == 400
    assert response.message == "Unrecognized arguments: --bogus"
    assert command.executions == 0


@pytest.mark.asyncio
async def test_fault_is_mapped_once(runner, recording_activity):
    command = AccountCommand(fault=ResourceNotFoundError("Account acct not found"))

    response = await runner.run(
        command,
        ["--name", "acct", "--resource-group", "rg1"],
        activity=recording_activity,
    )

    assert command.executions == 1
    assert response.status == 500
    assert response.message.startswith("Account acct not found. To mitigate")
    assert response.results.value.type == "ResourceNotFoundError"
    assert recording_activity.status is ActivityStatusCode.ERROR
    assert recording_activity.tags[TagName.ERROR_DETAILS] == "Account acct not found"
    assert recording_activity.tags[TagName.TOOL_NAME] == "show"


@pytest.mark.asyncio
async def test_success_marks_activity_ok(runner, recording_activity):
    await runner.run(
        AccountCommand(),
        ["--name", "acct", "--resource-group", "rg1"],
        activity=recording_activity,
    )

    assert recording_activity.status is ActivityStatusCode.OK


@pytest.mark.asyncio
async def test_supplied_context_response_is_used(runner):
    context = CommandContext()

    response = await runner.run(
        AccountCommand(), ["--name", "acct"], context=context
    )

    assert response is context.response
    assert context.response.status == 400


@pytest.mark.asyncio
async def test_result_from_execute_is_copied_into_context_response(runner):
    context = CommandContext()

    response = await runner.run(
        FreshResponseCommand(require_rg=False), ["--name", "acct"], context=context
    )

    assert response is context.response
    assert response.status == 201
    assert response.message == "Created"


@pytest.mark.asyncio
async def test_concurrent_invocations_use_separate_responses(runner):
    command = AccountCommand()

    ok, rejected = await asyncio.gather(
        runner.run(command, ["--name", "a", "--resource-group", "rg"]),
        runner.run(command, ["--name", "b"]),
    )

    assert ok is not rejected
    assert ok.status == 200
    assert rejected.status == 400
    assert command.executions == 1


@pytest.mark.asyncio
async def test_custom_parser_factory_is_used():
    seen = []

    class SpyParser:
        def __init__(self, definition):
            seen.append(definition)
            self._inner = CommandLineParser(definition)

        def parse(self, tokens):
            return self._inner.parse(tokens)

    command = AccountCommand(require_rg=False)
    response = await CommandRunner(parser_factory=SpyParser).run(command, ["--name", "x"])

    assert seen == [command.get_command()]
    assert response.status == 200
