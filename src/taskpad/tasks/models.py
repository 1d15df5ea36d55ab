"""Task records and the fixed priority levels."""

from dataclasses import asdict, dataclass, replace
from enum import Enum
from typing import Any


class TaskPriority(str, Enum):
    """Valid task priorities."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @classmethod
    def parse(cls, value: "TaskPriority | str") -> "TaskPriority":
        """Convert a member or a case-insensitive name to a priority.

        Raises:
            ValueError: If value is not one of Low, Medium, High.
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for member in cls:
            if member.value.lower() == text:
                return member
        choices = ", ".join(m.value for m in cls)
        raise ValueError(f"Invalid priority {value!r}; expected one of: {choices}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TaskInput:
    """Fields supplied when creating a task; the store assigns the id."""

    title: str = ""
    description: str = ""
    priority: TaskPriority = TaskPriority.LOW


@dataclass(frozen=True)
class Task:
    """A single task entry.

    Records are immutable: an update swaps the whole record in the
    store rather than editing it in place.
    """

    id: int
    title: str
    description: str
    priority: TaskPriority = TaskPriority.LOW

    @classmethod
    def from_input(cls, task_id: int, task_input: TaskInput) -> "Task":
        return cls(
            id=task_id,
            title=task_input.title,
            description=task_input.description,
            priority=task_input.priority,
        )

    def replace(self, **fields: Any) -> "Task":
        """Return a copy with the given fields changed (id included)."""
        return replace(self, **fields)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["priority"] = self.priority.value
        return data
