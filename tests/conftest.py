"""Shared test fixtures for taskpad tests.

Provides:
- MockContext for isolating tests from global settings and env vars
- Store, view and app fixtures
- A recording rich console for asserting on rendered output
"""

import io
import os
from typing import Generator
from unittest.mock import patch

import pytest
from rich.console import Console

from taskpad.cli.app import TaskpadApp
from taskpad.config import Settings, reload_settings, set_settings
from taskpad.editor.view import TaskEditorView
from taskpad.tasks.models import TaskPriority
from taskpad.tasks.store import TaskStore
from tests.helpers import make_input


class MockContext:
    """Context manager for isolating tests from global state.

    Handles:
    - Removing TASKPAD_* environment variables
    - Installing a fresh Settings instance as the global default
    - Resetting the global settings afterwards

    Usage:
        with MockContext(log_level="debug") as ctx:
            settings = ctx.settings
    """

    def __init__(self, **settings_kwargs):
        self._settings_kwargs = settings_kwargs
        self._settings: Settings | None = None
        self._env_patch = None

    def __enter__(self) -> "MockContext":
        clean_env = {k: v for k, v in os.environ.items() if not k.startswith("TASKPAD_")}
        self._env_patch = patch.dict(os.environ, clean_env, clear=True)
        self._env_patch.start()

        self._settings = Settings(**self._settings_kwargs)
        set_settings(self._settings)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._env_patch is not None:
            self._env_patch.stop()
        reload_settings()

    @property
    def settings(self) -> Settings:
        """Get the test settings instance."""
        if self._settings is None:
            raise RuntimeError("MockContext not entered")
        return self._settings


@pytest.fixture
def mock_context() -> Generator[MockContext, None, None]:
    """Fixture providing an isolated settings context."""
    with MockContext() as ctx:
        yield ctx


@pytest.fixture
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture
def populated_store() -> TaskStore:
    """Store holding tasks 1, 2 and 3."""
    store = TaskStore()
    store.add(make_input(title="Task 1", priority=TaskPriority.LOW))
    store.add(make_input(title="Task 2", priority=TaskPriority.MEDIUM))
    store.add(make_input(title="Task 3", priority=TaskPriority.HIGH))
    return store


@pytest.fixture
def view(store: TaskStore) -> TaskEditorView:
    return TaskEditorView(store)


@pytest.fixture
def console() -> Console:
    """Console that records output instead of writing to the terminal."""
    return Console(file=io.StringIO(), record=True, width=160, color_system=None)


@pytest.fixture
def app(mock_context: MockContext, console: Console) -> TaskpadApp:
    """App wired to a fresh store and the recording console."""
    return TaskpadApp(settings=mock_context.settings, console=console)

