"""Slash command registry and base command class.

Example of creating a custom command:

    from taskpad.cli.commands import Command, CommandCategory

    class CountCommand(Command):
        '''Show how many tasks are in the store.'''

        def __init__(self):
            super().__init__(
                name="count",
                description="Show the number of tasks",
                usage="/count",
                category=CommandCategory.TASKS,
            )

        async def execute(self, args: str, app: Any) -> None:
            app.add_message(f"{len(app.store)} task(s)")
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, TypeVar

from rich.markup import escape

T = TypeVar("T")


class CommandCategory(Enum):
    """Categories for organizing commands."""

    GENERAL = "general"
    TASKS = "tasks"
    FORM = "form"


@dataclass
class ParsedArgs:
    """Parsed command arguments.

    Provides easy access to positional arguments and options.
    """

    positional: str
    """Positional arguments (everything not an option)."""

    options: dict[str, str] = field(default_factory=dict)
    """Named options (--key=value or --flag)."""

    def get_option(
        self,
        name: str,
        default: T = None,
        type_converter: Callable[[str], T] = str,
    ) -> T:
        """Get an option value with type conversion.

        Args:
            name: Option name (without --)
            default: Default value if option not provided
            type_converter: Function to convert string value to desired type

        Returns:
            Option value converted to specified type, or default
        """
        value = self.options.get(name)
        if value is None:
            return default
        try:
            return type_converter(value)
        except (ValueError, TypeError):
            return default


class Command(ABC):
    """Base class for slash commands.

    Subclass this and override execute() to implement command behavior.
    """

    def __init__(
        self,
        name: str,
        description: str,
        aliases: list[str] | None = None,
        usage: str | None = None,
        examples: list[str] | None = None,
        category: CommandCategory = CommandCategory.GENERAL,
    ) -> None:
        """Initialize the command.

        Args:
            name: Command name (used as /name)
            description: Short description of what the command does
            aliases: Alternative names for the command
            usage: Usage string showing syntax (e.g., "/cmd <arg> [--opt]")
            examples: List of example usages
            category: Category for organizing in help
        """
        self.name = name
        self.description = description
        self.aliases = aliases or []
        self.usage = usage or f"/{name}"
        self.examples = examples or []
        self.category = category

    @abstractmethod
    async def execute(self, args: str, app: Any) -> None:
        """Execute the command with given arguments.

        Args:
            args: Command arguments string (everything after the command name)
            app: The CLI application instance
        """
        pass

    def parse_args(self, args: str) -> ParsedArgs:
        """Parse command arguments into structured form.

        Parses options in the forms:
        - --key=value
        - --key value
        - --flag (boolean flag)
        - -k value (k must be a letter)

        Everything else is treated as positional arguments, so "-5" is
        kept as text.
        """
        options: dict[str, str] = {}
        positional_parts: list[str] = []

        parts = self._tokenize(args)

        i = 0
        while i < len(parts):
            part = parts[i]

            if part.startswith("--"):
                key = part[2:]

                if "=" in key:
                    key, value = key.split("=", 1)
                    options[key] = value
                elif i + 1 < len(parts) and not parts[i + 1].startswith("-"):
                    options[key] = parts[i + 1]
                    i += 1
                else:
                    options[key] = "true"
            elif part.startswith("-") and len(part) == 2 and part[1].isalpha():
                key = part[1]
                if i + 1 < len(parts) and not parts[i + 1].startswith("-"):
                    options[key] = parts[i + 1]
                    i += 1
                else:
                    options[key] = "true"
            else:
                positional_parts.append(part)

            i += 1

        return ParsedArgs(
            positional=" ".join(positional_parts),
            options=options,
        )

    def _tokenize(self, args: str) -> list[str]:
        """Tokenize argument string respecting quotes.

        Quoted runs may sit inside a token (--description="two words").
        An unmatched quote is kept as a literal character.
        """
        pattern = r'(?:"[^"]*"|\'[^\']*\'|[^\s"\']|["\'])+'
        tokens = re.findall(pattern, args)

        def strip_quotes(token: str) -> str:
            return re.sub(
                r'"([^"]*)"|\'([^\']*)\'',
                lambda m: m.group(1) if m.group(1) is not None else m.group(2),
                token,
            )

        return [strip_quotes(token) for token in tokens]

    def get_help(self) -> str:
        """Get detailed help text for this command, as rich markup."""
        lines = [
            f"[bold]/{self.name}[/bold]",
            f"  {escape(self.description)}",
            "",
            f"[bold]Usage:[/bold] {escape(self.usage)}",
        ]

        if self.aliases:
            lines.append(f"[bold]Aliases:[/bold] {', '.join(f'/{a}' for a in self.aliases)}")

        if self.examples:
            lines.append("")
            lines.append("[bold]Examples:[/bold]")
            for example in self.examples:
                lines.append(f"  {escape(example)}")

        return "\n".join(lines)


class CommandRegistry:
    """Registry for managing slash commands."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}
        self._categories: dict[CommandCategory, list[Command]] = {
            cat: [] for cat in CommandCategory
        }

    def register(self, command: Command) -> None:
        """Register a command and its aliases.

        A command registered under an existing name replaces the old one,
        aliases and help entry included.
        """
        existing = self._commands.get(command.name)
        if existing is not None and existing is not command:
            for alias in existing.aliases:
                if self._commands.get(alias) is existing:
                    del self._commands[alias]
            if existing in self._categories[existing.category]:
                self._categories[existing.category].remove(existing)

        self._commands[command.name] = command
        for alias in command.aliases:
            self._commands[alias] = command

        if command not in self._categories[command.category]:
            self._categories[command.category].append(command)

    def get(self, name: str) -> Command | None:
        """Get a command by name or alias."""
        return self._commands.get(name)

    def by_category(self, category: CommandCategory) -> list[Command]:
        """Get commands in a specific category."""
        return self._categories.get(category, [])

    def get_completions(self) -> list[str]:
        """Get all command names and aliases for auto-completion."""
        return list(self._commands.keys())
