"""
Parses command-line tokens into a :class:`ParseResult`.

The parser binds only the options that were supplied. It never enforces
required options itself; that is left to ``BaseCommand.validate`` so that
missing options are reported with the command's own error shape.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from typing import Any, NoReturn

from mcp_core.common.exceptions import CommandParseError
from mcp_core.constants import COMMAND_PARSING_ERROR
from mcp_core.domain.command_definition import CommandDefinition
from mcp_core.domain.options import OptionDescriptor
from mcp_core.domain.parse_result import OptionResult, ParseResult

logger = logging.getLogger(__name__)


class _RaisingArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing usage and exiting."""

    def error(self, message: str) -> NoReturn:
        raise CommandParseError(
            COMMAND_PARSING_ERROR.format(command=self.prog, error=message),
            command_name=self.prog,
        )


class CommandLineParser:
    """Parses invocations of a single command definition."""

    def __init__(self, definition: CommandDefinition) -> None:
        self._definition = definition
        self._dest_to_option: dict[str, OptionDescriptor] = {}
        self._parser = self._build_parser()

    @property
    def definition(self) -> CommandDefinition:
        return self._definition

    def _build_parser(self) -> argparse.ArgumentParser:
        parser = _RaisingArgumentParser(
            prog=self._definition.name,
            description=self._definition.description,
            add_help=False,
            allow_abbrev=False,
        )
        for index, option in enumerate(self._definition.options):
            dest = f"option_{index}"
            self._dest_to_option[dest] = option
            kwargs: dict[str, Any] = {
                "dest": dest,
                "default": argparse.SUPPRESS,
                "help": option.description,
            }
            if option.value_type is bool:
                kwargs["action"] = "store_true"
            else:
                kwargs["type"] = option.value_type
            parser.add_argument(option.flag, **kwargs)
        return parser

    def parse(self, tokens: Sequence[str]) -> ParseResult:
        """
        Parse ``tokens`` for this command.

        Args:
            tokens: Raw arguments, without the command name

        Returns:
            The parse result; unknown tokens are kept in ``unmatched_tokens``

        Raises:
            CommandParseError: If a supplied option cannot be converted or is
                missing its value
        """
        namespace, unmatched = self._parser.parse_known_args(list(tokens))
        bound = vars(namespace)

        # Declaration order, not command-line order
        option_results = tuple(
            OptionResult(option=option, value=bound[dest])
            for dest, option in self._dest_to_option.items()
            if dest in bound
        )

        if unmatched:
            logger.debug(
                f"Unmatched tokens for '{self._definition.name}': {unmatched}"
            )

        return ParseResult(
            command=self._definition,
            option_results=option_results,
            unmatched_tokens=tuple(unmatched),
        )
