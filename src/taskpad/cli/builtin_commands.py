"""Built-in slash commands for the CLI."""

from typing import Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from taskpad.cli.commands import Command, CommandCategory


class HelpCommand(Command):
    """Display help information about available commands."""

    def __init__(self) -> None:
        super().__init__(
            name="help",
            description="Show available commands and usage information",
            aliases=["h"],
            usage="/help [command]",
            examples=["/help", "/help add"],
            category=CommandCategory.GENERAL,
        )

    async def execute(self, args: str, app: Any) -> None:
        """Display help for one command, or a table of all of them."""
        name = args.strip().lstrip("/")
        if name:
            command = app.command_registry.get(name)
            if command is None:
                app.add_error(f"Unknown command: /{name}")
                return
            app.add_rich(Panel(command.get_help(), border_style="cyan"))
            return

        table = Table(show_header=False, box=None, padding=(0, 2, 0, 0))
        table.add_column("Command", style="bold cyan", no_wrap=True)
        table.add_column("Aliases", style="dim", no_wrap=True)
        table.add_column("Description")

        for category in CommandCategory:
            commands = sorted(
                app.command_registry.by_category(category), key=lambda c: c.name
            )
            for cmd in commands:
                aliases = ", ".join(f"/{a}" for a in cmd.aliases) if cmd.aliases else ""
                table.add_row(Text(cmd.usage), aliases, Text(cmd.description))

        panel = Panel(table, title="[bold]Available Commands[/bold]", border_style="cyan")
        app.add_rich(panel)
        app.add_message("Text without a leading / sets the form title.")


class ClearCommand(Command):
    """Clear the screen."""

    def __init__(self) -> None:
        super().__init__(
            name="clear",
            description="Clear the screen",
            category=CommandCategory.GENERAL,
        )

    async def execute(self, args: str, app: Any) -> None:
        app.clear()


class ExitCommand(Command):
    """Exit the application."""

    def __init__(self) -> None:
        super().__init__(
            name="exit",
            description="Exit the application",
            aliases=["quit", "q"],
            category=CommandCategory.GENERAL,
        )

    async def execute(self, args: str, app: Any) -> None:
        app.add_message("Exiting...")
        app.stop()
