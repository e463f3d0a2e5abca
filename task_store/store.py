"""
In-memory task storage.

``TaskStore`` owns the ordered task collection and the id counter. One
instance is created per application by ``create_app`` and shared by the
request handlers. A re-entrant lock guards both the list and the counter,
so the store can sit behind a threaded WSGI server.

Operations return ``(value, error)`` pairs rather than raising. The error
is a ``TaskError`` the HTTP layer maps to a status code.
"""

import logging
import threading
from collections.abc import Iterable, Mapping
from typing import Any

from task_store.errors import TaskError
from task_store.models import SEED_TASKS, Task
from task_store.schemas import TaskCreate, TaskUpdate, parse_task_id

logger = logging.getLogger(__name__)


class TaskStore:
    """Thread-safe in-memory collection of tasks."""

    def __init__(self, seed: Iterable[Task] = ()) -> None:
        """
        Initialize the store.

        Args:
            seed: Tasks to load initially. Their ids must be distinct.
        """
        self._lock = threading.RLock()
        self._seed = tuple(task.copy() for task in seed)
        self._tasks: list[Task] = []
        self._next_id = 1
        self.reset()

    @classmethod
    def seeded(cls) -> "TaskStore":
        """Build a store holding the three starter tasks."""
        return cls(SEED_TASKS)

    @property
    def next_id(self) -> int:
        with self._lock:
            return self._next_id

    def reset(self) -> None:
        """Restore the initial contents and restart the id counter."""
        with self._lock:
            self._tasks = [task.copy() for task in self._seed]
            self._next_id = max((task.id for task in self._seed), default=0) + 1

    def _find(self, task_id: int) -> Task | None:
        # Caller must hold the lock.
        return next((task for task in self._tasks if task.id == task_id), None)

    def _lookup(self, raw_id: Any) -> tuple[Task | None, TaskError | None]:
        # Caller must hold the lock.
        task_id, error = parse_task_id(raw_id)
        if error:
            return None, error
        task = self._find(task_id)
        if task is None:
            return None, TaskError.not_found()
        return task, None

    def list_all(self, completed: bool | None = None) -> list[Task]:
        """
        Return all tasks in insertion order.

        Args:
            completed: When given, only tasks with this completion state.

        Returns:
            Copies of the matching tasks.
        """
        with self._lock:
            return [
                task.copy()
                for task in self._tasks
                if completed is None or task.completed == completed
            ]

    def get(self, raw_id: Any) -> tuple[Task | None, TaskError | None]:
        """Return a copy of the task with the given id."""
        with self._lock:
            task, error = self._lookup(raw_id)
            if error:
                return None, error
            return task.copy(), None

    def create(self, data: Mapping[str, Any]) -> tuple[Task | None, TaskError | None]:
        """
        Validate a create payload and append a new task.

        Args:
            data: Request body with ``title``, ``description`` and an
                optional ``completed``.

        Returns:
            Tuple of (created task, error).
        """
        payload, error = TaskCreate.from_payload(data)
        if error:
            return None, error

        with self._lock:
            task = Task(
                id=self._next_id,
                title=payload.title,
                description=payload.description,
                completed=payload.completed,
            )
            self._next_id += 1
            self._tasks.append(task)

        logger.info("Created task with ID: %s", task.id)
        return task.copy(), None

    def update(
        self, raw_id: Any, data: Mapping[str, Any]
    ) -> tuple[Task | None, TaskError | None]:
        """
        Apply a partial update to an existing task.

        The id is checked before the payload, so an unknown task reports
        ``NotFound`` even when the body is also invalid. Nothing is changed
        unless every supplied field is valid.

        Args:
            raw_id: Task id as taken from the URL.
            data: Request body with any of ``title``, ``description``,
                ``completed``.

        Returns:
            Tuple of (updated task, error).
        """
        with self._lock:
            task, error = self._lookup(raw_id)
            if error:
                return None, error

            changes, error = TaskUpdate.from_payload(data)
            if error:
                return None, error

            if changes.title is not None:
                task.title = changes.title
            if changes.description is not None:
                task.description = changes.description
            if changes.completed is not None:
                task.completed = changes.completed
            updated = task.copy()

        logger.info("Updated task %s", updated.id)
        return updated, None

    def delete(self, raw_id: Any) -> tuple[str | None, TaskError | None]:
        """
        Remove a task from the collection.

        Returns:
            Tuple of (acknowledgment message, error).
        """
        with self._lock:
            task, error = self._lookup(raw_id)
            if error:
                return None, error
            self._tasks.remove(task)

        logger.info("Deleted task %s", task.id)
        return "Task deleted successfully", None

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)
