"""taskpad - a form-driven task editor for the terminal.

The package is split into:

- tasks: the Task record and the in-memory TaskStore that owns them
- editor: TaskEditorView, the form state machine that drives the store
- cli: the prompt_toolkit REPL, slash commands and rich rendering
- config / logging: pydantic-settings configuration and structlog setup

Example:
    store = TaskStore()
    view = TaskEditorView(store)
    view.update_form(title="Write report", priority="High")
    view.submit()
"""

__version__ = "0.1.0"

from taskpad.config import Settings, SettingsContext, get_settings, reload_settings, set_settings
from taskpad.editor.view import TaskEditorView, TaskForm
from taskpad.tasks.models import Task, TaskInput, TaskPriority
from taskpad.tasks.store import TaskStore
from taskpad.cli.app import TaskpadApp

__all__ = [
    # Tasks
    "Task",
    "TaskInput",
    "TaskPriority",
    "TaskStore",
    # Editor
    "TaskEditorView",
    "TaskForm",
    # CLI
    "TaskpadApp",
    # Settings
    "Settings",
    "SettingsContext",
    "get_settings",
    "set_settings",
    "reload_settings",
]
