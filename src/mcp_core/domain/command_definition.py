from __future__ import annotations

from mcp_core.domain.options import OptionDescriptor


class CommandDefinition:
    """Name, description and ordered accepted options of one command.

    Options keep their registration order, which is also the order in which
    missing options are reported.
    """

    def __init__(self, name: str, description: str = "") -> None:
        if not name:
            raise ValueError("Command name must be a non-empty string.")
        self.name = name
        self.description = description
        self._options: list[OptionDescriptor] = []

    @property
    def options(self) -> tuple[OptionDescriptor, ...]:
        return tuple(self._options)

    def add_option(self, option: OptionDescriptor) -> None:
        """Register an option; adding the same descriptor twice is a no-op."""
        if self.has_option(option):
            return
        if any(existing.name == option.name for existing in self._options):
            raise ValueError(
                f"Command '{self.name}' already declares a different option named {option.flag}"
            )
        self._options.append(option)

    def has_option(self, option: OptionDescriptor) -> bool:
        return any(existing is option for existing in self._options)

    def __repr__(self) -> str:
        flags = ", ".join(o.flag for o in self._options)
        return f"<CommandDefinition {self.name} [{flags}]>"
