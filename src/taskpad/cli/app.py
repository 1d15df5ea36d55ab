"""Terminal application for taskpad.

This module provides the REPL that:
1. Reads input with a prompt_toolkit session (slash command completion)
2. Routes slash commands through the CommandRegistry
3. Renders the task list and form with rich
"""

from __future__ import annotations

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document
from prompt_toolkit.history import InMemoryHistory
from rich.console import Console, RenderableType
from rich.panel import Panel
from rich.text import Text

from taskpad import __version__
from taskpad.cli.builtin_commands import ClearCommand, ExitCommand, HelpCommand
from taskpad.cli.commands import CommandRegistry
from taskpad.cli.rendering import form_panel, task_table
from taskpad.cli.task_commands import TASK_COMMANDS
from taskpad.config import Settings, get_settings
from taskpad.editor.view import TaskEditorView
from taskpad.logging import Loggers, bind_context, configure_logging
from taskpad.tasks.store import TaskStore

logger = Loggers.cli()


# === Slash Command Completer ===


class SlashCommandCompleter(Completer):
    """Completer that only triggers for slash commands."""

    def __init__(self, commands: list[str]) -> None:
        """Initialize with a list of command names (without leading slash).

        Args:
            commands: List of command names, e.g., ["help", "add", "exit"]
        """
        self.commands = sorted(commands)

    def get_completions(self, document: Document, complete_event):
        """Yield completions only when text starts with / and has no argument yet."""
        text = document.text_before_cursor

        if not text.startswith("/") or " " in text:
            return

        partial = text[1:].lower()

        for cmd in self.commands:
            if cmd.lower().startswith(partial):
                yield Completion(
                    text=f"/{cmd}",
                    start_position=-len(text),
                    display=f"/{cmd}",
                )


# === Application ===


class TaskpadApp:
    """Interactive task editor.

    The app builds one TaskStore and hands it to the TaskEditorView; the
    commands only ever reach the store through that view.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        store: TaskStore | None = None,
        console: Console | None = None,
    ) -> None:
        """Initialize the application.

        Args:
            settings: Optional settings override
            store: Optional pre-populated store
            console: Optional rich console (tests pass a recording one)
        """
        self._settings = settings or get_settings()
        configure_logging(self._settings)

        logger.info("app_starting", app_name=self._settings.app_name)

        self.store = store if store is not None else TaskStore()
        self.view = TaskEditorView(self.store)
        self.console = console or Console()

        self.command_registry = CommandRegistry()
        self._register_builtin_commands()
        self.register_commands()

        self._prompt_session: PromptSession | None = None
        self.should_exit = False

    @property
    def settings(self) -> Settings:
        """Get the application settings."""
        return self._settings

    def register_commands(self) -> None:
        """Register the task and form commands.

        Override to add or replace commands.
        """
        for command_cls in TASK_COMMANDS:
            self.command_registry.register(command_cls())

    def _register_builtin_commands(self) -> None:
        self.command_registry.register(HelpCommand())
        self.command_registry.register(ClearCommand())
        self.command_registry.register(ExitCommand())

    # === Output ===

    def add_message(self, text: str) -> None:
        self.console.print(Text(text, style="dim italic"))

    def add_success(self, text: str) -> None:
        self.console.print(Text(text, style="green"))

    def add_warning(self, text: str) -> None:
        self.console.print(Text(text, style="yellow"))

    def add_error(self, text: str) -> None:
        self.console.print(Text(text, style="bold red"))

    def add_rich(self, renderable: RenderableType) -> None:
        self.console.print(renderable)

    def clear(self) -> None:
        self.console.clear()

    def show_tasks(self) -> None:
        """Render the view's current snapshot."""
        self.add_rich(task_table(self.view.visible_tasks, self.view.editing_id))

    def show_form(self) -> None:
        self.add_rich(form_panel(self.view))

    def stop(self) -> None:
        """Stop the application after the current command."""
        self.should_exit = True

    # === Input ===

    async def process_input(self, user_input: str) -> None:
        """Process one line of user input.

        Args:
            user_input: The raw user input string
        """
        user_input = user_input.strip()

        if not user_input:
            return

        if user_input.startswith("/"):
            await self._handle_command(user_input)
        else:
            self._handle_text(user_input)

    async def _handle_command(self, user_input: str) -> None:
        """Handle slash command execution.

        Args:
            user_input: The command string starting with /
        """
        parts = user_input[1:].split(maxsplit=1)
        command_name = parts[0].lower() if parts else ""
        args = parts[1] if len(parts) > 1 else ""

        command = self.command_registry.get(command_name)
        if command is None:
            self.add_error(f"Unknown command: /{command_name}")
            self.add_message("Type /help to see available commands")
            return

        logger.debug("executing_command", command=command.name, args=args)
        try:
            await command.execute(args, self)
            logger.debug("command_completed", command=command.name)
        except Exception as e:
            logger.error("command_failed", command=command.name, error=str(e))
            self.add_error(f"Error executing command: {e}")

    def _handle_text(self, text: str) -> None:
        """Treat free text as the form title."""
        self.view.update_form(title=text)
        self.show_form()

    def _bottom_toolbar(self) -> str:
        if self.view.editing:
            mode = f"Editing #{self.view.editing_id}"
        else:
            mode = "New task"
        return f" {mode} | /submit: {self.view.submit_label} | /help: commands | Ctrl+D: exit"

    def _create_prompt_session(self) -> PromptSession:
        completer = SlashCommandCompleter(self.command_registry.get_completions())
        return PromptSession(
            history=InMemoryHistory(),
            completer=completer,
            complete_while_typing=True,
            bottom_toolbar=self._bottom_toolbar,
        )

    def _welcome(self) -> Panel:
        return Panel(
            Text.assemble(
                (f"{self._settings.app_name} ", "bold cyan"),
                (f"v{__version__}\n", "dim"),
                "Type text to set the title, /submit to save, /help for all commands.",
            ),
            border_style="cyan",
        )

    async def run(self) -> None:
        """Run the main application loop."""
        logger.info("repl_starting")
        bind_context(app_name=self._settings.app_name)

        if self._prompt_session is None:
            self._prompt_session = self._create_prompt_session()

        self.add_rich(self._welcome())
        self.show_tasks()

        while not self.should_exit:
            try:
                text = await self._prompt_session.prompt_async(self._settings.prompt)
            except KeyboardInterrupt:
                # Ctrl+C drops the current line only
                continue
            except EOFError:
                break
            await self.process_input(text)

        logger.info("app_ending", tasks=len(self.store))
        self.add_message("Goodbye!")
