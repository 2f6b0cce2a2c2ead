"""
Data models for the Task Tracker.

This module defines the Task record owned by the TaskStore and the
TaskEvent record delivered to store observers. Both are plain
dataclasses; the store hands out copies so callers never hold a
reference to a live record.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Mapping

from tracker.errors import InvalidInput


class EventKind(str, Enum):
    """Enumeration of the changes a TaskStore reports to observers."""

    ADDED = "added"
    REMOVED = "removed"
    TOGGLED = "toggled"
    SEEDED = "seeded"


def validate_text(text: Any) -> str:
    """
    Check that a task text is a non-empty string.

    Args:
        text: Candidate task text.

    Returns:
        The text unchanged.

    Raises:
        InvalidInput: If text is not a string or is blank.
    """
    if not isinstance(text, str) or not text.strip():
        raise InvalidInput("'text' is required")
    return text


@dataclass
class Task:
    """
    A single to-do record.

    Attributes:
        id: Unique identifier among the tasks of one store.
        text: Task description, never empty.
        day: Free-form schedule label such as "Feb 5th at 2:30pm".
        reminder: Whether a reminder is set for the task.
    """

    id: int
    text: str
    day: str = ""
    reminder: bool = False

    def copy(self) -> "Task":
        """Return a detached copy of this task."""
        return replace(self)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the task to a dictionary representation.

        Returns:
            Dictionary containing all task fields.
        """
        return {
            "id": self.id,
            "text": self.text,
            "day": self.day,
            "reminder": self.reminder,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Task":
        """
        Build a task from a mapping in the shape produced by to_dict().

        Args:
            data: Mapping with "id" and "text", and optionally "day"
                  and "reminder".

        Returns:
            New Task instance.

        Raises:
            InvalidInput: If the mapping is not a valid task record.
        """
        if not isinstance(data, Mapping):
            raise InvalidInput("Task record must be an object")

        task_id = data.get("id")
        # bool is an int subclass; True is not a valid id
        if not isinstance(task_id, int) or isinstance(task_id, bool):
            raise InvalidInput("'id' must be an integer")

        text = validate_text(data.get("text"))

        day = data.get("day", "")
        if day is None:
            day = ""
        if not isinstance(day, str):
            raise InvalidInput("'day' must be a string")

        reminder = data.get("reminder", False)
        if not isinstance(reminder, bool):
            raise InvalidInput("'reminder' must be a boolean")

        return cls(id=task_id, text=text, day=day, reminder=reminder)

    def __repr__(self) -> str:
        """Return string representation of the task."""
        return f"<Task {self.id}: {self.text}>"


@dataclass(frozen=True)
class TaskEvent:
    """
    Change notification passed to store observers.

    Attributes:
        kind: What happened.
        task: Copy of the affected task, None for a seed.
        tasks: Copy of the whole collection after the change.
    """

    kind: EventKind
    task: Task | None = None
    tasks: tuple[Task, ...] = field(default_factory=tuple)
