"""Task records and the in-memory store that owns them.

Example:
    >>> store = TaskStore()
    >>> store.add(TaskInput(title="Write report", priority=TaskPriority.HIGH))
    >>> store.list()[0].id
    1
"""

from taskpad.tasks.models import Task, TaskInput, TaskPriority
from taskpad.tasks.store import TaskStore

__all__ = ["Task", "TaskInput", "TaskPriority", "TaskStore"]
