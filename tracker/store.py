"""
In-memory task store.

TaskStore owns the ordered collection of Task records and is the only
place they are mutated. It is synchronous and not thread-safe; wrap it
in LockedTaskStore when several threads share one instance (the Flask
application factory does this).
"""

import itertools
import logging
import threading
from typing import Any, Callable, Iterable, Mapping

from tracker.errors import InvalidInput, NotFound, StoreStateError
from tracker.models import EventKind, Task, TaskEvent, validate_text

logger = logging.getLogger(__name__)

Observer = Callable[[TaskEvent], None]


class TaskStore:
    """
    Ordered, in-memory collection of tasks with change notification.

    Tasks keep insertion order. Ids come from a monotonic counter, so
    an id is never reused within the lifetime of a store. Observers are
    called synchronously, on the caller's thread, right after each
    effective mutation.
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._ids = itertools.count(1)
        self._observers: list[Observer] = []
        self._mutated = False

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        return self._find(task_id) is not None

    # -------------------------------------------------------------------------
    # Observers
    # -------------------------------------------------------------------------

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """
        Register a callable to be notified of every change.

        Args:
            observer: Callable taking a TaskEvent.

        Returns:
            Function that unsubscribes the observer when called.
        """
        self._observers.append(observer)
        return lambda: self.unsubscribe(observer)

    def unsubscribe(self, observer: Observer) -> None:
        """Remove a previously registered observer, if present."""
        try:
            self._observers.remove(observer)
        except ValueError:
            pass

    def _notify(self, kind: EventKind, task: Task | None = None) -> None:
        event = TaskEvent(kind=kind, task=task, tasks=tuple(self.list()))
        # Snapshot so observers may unsubscribe while being notified
        for observer in list(self._observers):
            try:
                observer(event)
            except Exception:
                logger.exception(f"Observer {observer!r} failed on {kind.value} event")

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def _find(self, task_id: object) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def list(self) -> list[Task]:
        """Return copies of the current tasks in insertion order."""
        return [task.copy() for task in self._tasks]

    def get(self, task_id: int) -> Task:
        """
        Return a copy of the task with the given id.

        Raises:
            NotFound: If no task has that id.
        """
        task = self._find(task_id)
        if task is None:
            raise NotFound(task_id)
        return task.copy()

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def add(self, text: str, day: str = "", reminder: bool = False) -> Task:
        """
        Create a task and append it to the end of the collection.

        Args:
            text: Task description; must not be blank.
            day: Schedule label.
            reminder: Initial reminder flag.

        Returns:
            Copy of the created task.

        Raises:
            InvalidInput: If text is blank. The store is left unchanged.
        """
        validate_text(text)
        task = Task(id=next(self._ids), text=text, day=day or "", reminder=bool(reminder))
        self._tasks.append(task)
        self._mutated = True
        logger.debug(f"Added task {task.id}")
        self._notify(EventKind.ADDED, task.copy())
        return task.copy()

    def remove(self, task_id: int) -> bool:
        """
        Delete the task with the given id.

        A missing id is not an error: nothing changes and no observer
        is notified.

        Returns:
            True if a task was removed.
        """
        task = self._find(task_id)
        if task is None:
            logger.debug(f"Remove ignored, task {task_id} not present")
            return False
        self._tasks.remove(task)
        self._mutated = True
        logger.debug(f"Removed task {task_id}")
        self._notify(EventKind.REMOVED, task.copy())
        return True

    def toggle(self, task_id: int) -> Task | None:
        """
        Flip the reminder flag of the task with the given id.

        A missing id is not an error: nothing changes and no observer
        is notified.

        Returns:
            Copy of the task as it was right after the flip, or None
            if no task has that id.
        """
        task = self._find(task_id)
        if task is None:
            logger.debug(f"Toggle ignored, task {task_id} not present")
            return None
        task.reminder = not task.reminder
        self._mutated = True
        logger.debug(f"Toggled task {task_id} reminder to {task.reminder}")
        toggled = task.copy()
        self._notify(EventKind.TOGGLED, task.copy())
        return toggled

    def seed(self, initial: Iterable[Task | Mapping[str, Any]]) -> None:
        """
        Replace the whole collection with an initial set of tasks.

        Only valid before add/remove/toggle has changed the store. The
        id counter continues above the largest seeded id.

        Args:
            initial: Tasks or task-shaped mappings, in display order.

        Raises:
            StoreStateError: If the store was already mutated.
            InvalidInput: If a record is malformed or ids repeat.
        """
        if self._mutated:
            raise StoreStateError("Cannot seed a store after it has been modified")

        tasks = [
            Task.from_dict(item.to_dict() if isinstance(item, Task) else item)
            for item in initial
        ]

        ids = [task.id for task in tasks]
        if len(set(ids)) != len(ids):
            raise InvalidInput("Seeded task ids must be unique")

        self._tasks = tasks
        self._ids = itertools.count(max(ids, default=0) + 1)
        logger.debug(f"Seeded store with {len(tasks)} tasks")
        self._notify(EventKind.SEEDED)


class LockedTaskStore:
    """
    Thread-safe facade over a TaskStore.

    Every call runs under one reentrant lock, so observers running
    inside a mutation may call back into the store.
    """

    def __init__(self, store: TaskStore | None = None) -> None:
        self._store = store if store is not None else TaskStore()
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def __contains__(self, task_id: object) -> bool:
        with self._lock:
            return task_id in self._store

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        with self._lock:
            self._store.subscribe(observer)
        return lambda: self.unsubscribe(observer)

    def unsubscribe(self, observer: Observer) -> None:
        with self._lock:
            self._store.unsubscribe(observer)

    def list(self) -> list[Task]:
        with self._lock:
            return self._store.list()

    def get(self, task_id: int) -> Task:
        with self._lock:
            return self._store.get(task_id)

    def add(self, text: str, day: str = "", reminder: bool = False) -> Task:
        with self._lock:
            return self._store.add(text, day, reminder)

    def remove(self, task_id: int) -> bool:
        with self._lock:
            return self._store.remove(task_id)

    def toggle(self, task_id: int) -> Task | None:
        with self._lock:
            return self._store.toggle(task_id)

    def seed(self, initial: Iterable[Task | Mapping[str, Any]]) -> None:
        with self._lock:
            self._store.seed(initial)
