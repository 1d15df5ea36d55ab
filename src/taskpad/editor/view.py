"""Form-driven editor that turns user actions into store calls.

The view holds three pieces of state: the form contents, whether the
form is creating a new task or editing an existing one, and the most
recent snapshot of the store for display. It never changes a task
itself; every change goes through the TaskStore it was given.
"""

from dataclasses import dataclass, fields
from typing import Any

from taskpad.logging import Loggers
from taskpad.tasks.models import Task, TaskInput, TaskPriority
from taskpad.tasks.store import TaskStore

logger = Loggers.editor()

ADD_LABEL = "Add"
UPDATE_LABEL = "Update"


@dataclass
class TaskForm:
    """Editable form fields."""

    title: str = ""
    description: str = ""
    priority: TaskPriority = TaskPriority.LOW

    def to_input(self) -> TaskInput:
        return TaskInput(
            title=self.title,
            description=self.description,
            priority=self.priority,
        )


_FORM_FIELDS = frozenset(f.name for f in fields(TaskForm))


class TaskEditorView:
    """Bridge between the form and the task store.

    Two modes: creating (the default) and editing. begin_edit() loads a
    task into the form and switches to editing; submit() either adds a
    new task or replaces the one being edited, then returns to creating.
    After every change to the store the visible list is re-read.

    Example:
        >>> view = TaskEditorView(TaskStore())
        >>> view.update_form(title="Write report", priority="high")
        >>> view.submit()
        >>> view.visible_tasks[0].title
        'Write report'
    """

    def __init__(self, store: TaskStore) -> None:
        self._store = store
        self.form = TaskForm()
        self.editing_id: int | None = None
        self.visible_tasks: list[Task] = store.list()

    @property
    def store(self) -> TaskStore:
        return self._store

    @property
    def editing(self) -> bool:
        """True while the form holds a task loaded by begin_edit()."""
        return self.editing_id is not None

    @property
    def submit_label(self) -> str:
        return UPDATE_LABEL if self.editing else ADD_LABEL

    def begin_edit(self, task: Task) -> None:
        """Load task into the form and switch to editing.

        Calling this while already editing retargets the form to task.
        The store is not touched.
        """
        self.form = TaskForm(
            title=task.title,
            description=task.description,
            priority=task.priority,
        )
        self.editing_id = task.id
        logger.debug("edit_started", task_id=task.id)

    def update_form(self, **values: Any) -> None:
        """Set one or more form fields.

        Args:
            **values: title, description and/or priority. Priority may be
                a TaskPriority or its name in any letter case.

        Raises:
            TypeError: If a keyword is not a form field.
            ValueError: If priority is not Low, Medium or High.
        """
        unknown = set(values) - _FORM_FIELDS
        if unknown:
            raise TypeError(f"Unknown form field(s): {', '.join(sorted(unknown))}")
        if "priority" in values:
            values["priority"] = TaskPriority.parse(values["priority"])
        for name, value in values.items():
            setattr(self.form, name, value)

    def submit(self) -> None:
        """Send the form to the store and reset it.

        While editing, the task being edited is replaced (its id is kept)
        and the view goes back to creating. Otherwise a new task is added.
        """
        if self.editing_id is not None:
            task_input = self.form.to_input()
            task = Task.from_input(self.editing_id, task_input)
            self._store.update(task)
            logger.info("form_submitted", mode="update", task_id=task.id)
            self.editing_id = None
        else:
            self._store.add(self.form.to_input())
            logger.info("form_submitted", mode="add")
        self.form = TaskForm()
        self.refresh()

    def remove(self, task: Task) -> None:
        """Delete task from the store and refresh the visible list."""
        self._store.delete(task.id)
        self.refresh()

    def refresh(self) -> None:
        """Re-read the visible list from the store."""
        self.visible_tasks = self._store.list()

    def find_visible(self, task_id: int) -> Task | None:
        """Get a task from the current snapshot by id."""
        for task in self.visible_tasks:
            if task.id == task_id:
                return task
        return None
