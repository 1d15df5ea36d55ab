"""Terminal front end for taskpad."""

from taskpad.cli.app import SlashCommandCompleter, TaskpadApp
from taskpad.cli.commands import (
    Command,
    CommandCategory,
    CommandRegistry,
    ParsedArgs,
)

__all__ = [
    "Command",
    "CommandCategory",
    "CommandRegistry",
    "ParsedArgs",
    "SlashCommandCompleter",
    "TaskpadApp",
]
