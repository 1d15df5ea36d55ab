"""Builders and assertion helpers shared by the test modules."""

from __future__ import annotations

from rich.console import Console

from taskpad.tasks.models import Task, TaskInput, TaskPriority


def make_input(
    title: str = "Test Task",
    description: str = "Test Description",
    priority: TaskPriority = TaskPriority.MEDIUM,
) -> TaskInput:
    """Build a TaskInput with test defaults."""
    return TaskInput(title=title, description=description, priority=priority)


def make_task(task_id: int = 1, **overrides) -> Task:
    """Build a Task with test defaults."""
    fields = {
        "title": "Test Task",
        "description": "Test Description",
        "priority": TaskPriority.MEDIUM,
    }
    fields.update(overrides)
    return Task(id=task_id, **fields)


def ids_of(tasks: list[Task]) -> list[int]:
    return [task.id for task in tasks]


def output_of(console: Console) -> str:
    """Get everything printed to a recording console so far."""
    return console.export_text(clear=False)
