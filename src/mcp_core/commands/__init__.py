from mcp_core.commands.base_command import BaseCommand
from mcp_core.commands.command_runner import CommandRunner
from mcp_core.commands.parser import CommandLineParser

__all__ = ["BaseCommand", "CommandLineParser", "CommandRunner"]
