"""
Option descriptors.

A descriptor is the declared identity of one accepted command option. The
same descriptor object may be shared by many commands, so descriptors compare
by identity: two descriptors with the same name are still different options.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from mcp_core.interfaces.model_bases import InternalDTO


@dataclass(frozen=True, eq=False)
class OptionDescriptor(InternalDTO):
    """
    Declared option of a command.

    Attributes:
        name: Option name without the leading dashes (``resource-group``).
        description: Help text.
        required: Whether the option must be bound in every invocation.
        shared: Whether this is a common option reused across commands.
        value_type: Type used to convert the raw token (``bool`` means a flag).
    """

    name: str
    description: str = ""
    required: bool = False
    shared: bool = False
    value_type: type[Any] = str

    def __post_init__(self) -> None:
        if not self.name or self.name.startswith("-"):
            raise ValueError(
                f"Option name must be non-empty and given without dashes: {self.name!r}"
            )

    @property
    def flag(self) -> str:
        """External form used on the command line."""
        return f"--{self.name}"

    def __repr__(self) -> str:
        return f"<OptionDescriptor {self.flag} required={self.required}>"
