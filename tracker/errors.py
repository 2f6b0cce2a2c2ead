"""
Error taxonomy for the Task Tracker.

Every error raised on purpose by the store, the models or the seed
sources derives from ``TaskTrackerError`` so callers can catch the
whole family at once.
"""


class TaskTrackerError(Exception):
    """Base class for all Task Tracker errors."""


class InvalidInput(TaskTrackerError, ValueError):
    """Raised when task data is rejected (e.g. empty text)."""


class NotFound(TaskTrackerError, LookupError):
    """Raised when a task lookup by id finds nothing."""

    def __init__(self, task_id: int):
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


class StoreStateError(TaskTrackerError):
    """Raised when an operation is not valid in the store's current state."""


class SeedSourceError(TaskTrackerError):
    """Raised when a seed source cannot be read or fetched."""
