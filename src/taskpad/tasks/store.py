"""In-memory task store.

The store is the only owner of the task collection and the only place
ids are handed out. Every operation is total: deleting or updating an
id that is not present is a silent no-op, never an error.
"""

from taskpad.logging import Loggers
from taskpad.tasks.models import Task, TaskInput

logger = Loggers.tasks()


class TaskStore:
    """Ordered, in-memory collection of tasks.

    Ids come from a counter that only moves forward, so the next id is
    always one greater than the highest id this store has ever assigned.
    Deleting the newest task does not make its id available again.

    Example:
        >>> from taskpad.tasks.models import TaskInput, TaskPriority
        >>> store = TaskStore()
        >>> store.add(TaskInput(title="Write report", priority=TaskPriority.HIGH))
        >>> [t.id for t in store.list()]
        [1]
        >>> store.delete(1)
        >>> store.is_empty()
        True
    """

    def __init__(self) -> None:
        self._items: list[Task] = []
        self._last_id = 0

    def add(self, task_input: TaskInput) -> None:
        """Create a task from task_input and append it to the collection.

        Args:
            task_input: Title, description and priority for the new task.
        """
        self._last_id += 1
        task = Task.from_input(self._last_id, task_input)
        self._items.append(task)
        logger.info("task_added", task=task.to_dict())

    def list(self) -> list[Task]:
        """Get all tasks in insertion order.

        Returns:
            A new list on every call. Tasks are immutable, so changing the
            returned list never reaches the store.
        """
        return list(self._items)

    def delete(self, task_id: int) -> None:
        """Remove the task with task_id, if there is one.

        Args:
            task_id: Id of the task to remove.
        """
        index = self._index_of(task_id)
        if index is None:
            logger.debug("task_delete_missing", task_id=task_id)
            return
        del self._items[index]
        logger.info("task_deleted", task_id=task_id)

    def update(self, task: Task) -> None:
        """Replace the stored task that has task.id with task.

        The replacement keeps the original position. Nothing happens when
        no stored task has that id.

        Args:
            task: Complete new record; its id selects the task to replace.
        """
        index = self._index_of(task.id)
        if index is None:
            logger.debug("task_update_missing", task_id=task.id)
            return
        self._items[index] = task
        logger.info("task_updated", task=task.to_dict())

    def get(self, task_id: int) -> Task | None:
        """Get a task by ID."""
        index = self._index_of(task_id)
        return None if index is None else self._items[index]

    def is_empty(self) -> bool:
        """Check if the task store has any items."""
        return not self._items

    def _index_of(self, task_id: int) -> int | None:
        for index, task in enumerate(self._items):
            if task.id == task_id:
                return index
        return None

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, task_id: object) -> bool:
        return any(task.id == task_id for task in self._items)
