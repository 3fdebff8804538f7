"""
Parse result model.

A parse result is produced once per invocation by the parser and is only
read by commands. It exposes the declared options of the parsed command and
the options that were actually bound to a value.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from mcp_core.domain.command_definition import CommandDefinition
from mcp_core.domain.options import OptionDescriptor
from mcp_core.interfaces.model_bases import InternalDTO


@dataclass(frozen=True)
class OptionResult(InternalDTO):
    """One option bound during parsing.

    Attributes:
        option: The descriptor this result was bound from.
        value: The converted value.
    """

    option: OptionDescriptor
    value: Any = None


@dataclass(frozen=True)
class ParseResult(InternalDTO):
    """Outcome of parsing one invocation of ``command``."""

    command: CommandDefinition
    option_results: Sequence[OptionResult] = field(default_factory=tuple)
    unmatched_tokens: Sequence[str] = field(default_factory=tuple)

    def find_result(self, option: OptionDescriptor) -> OptionResult | None:
        """Return the bound result for ``option`` (by identity), if any."""
        for result in self.option_results:
            if result.option is option:
                return result
        return None

    def has_option(self, option: OptionDescriptor) -> bool:
        return self.find_result(option) is not None

    def get_value(self, option: OptionDescriptor, default: Any = None) -> Any:
        result = self.find_result(option)
        return default if result is None else result.value
