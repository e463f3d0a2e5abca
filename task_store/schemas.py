"""
Input schemas for task requests.

Request payloads arrive as loosely typed JSON or form data. The helpers in
this module check them against the fields each operation accepts and
coerce them into small typed objects before the store touches its
collection. Every parser returns a ``(value, error)`` pair; exactly one of
the two is ``None``.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from task_store.errors import TaskError

_TASK_ID_PATTERN = re.compile(r"[+-]?[0-9]+")

UPDATABLE_FIELDS = ("title", "description", "completed")


def _is_non_empty_string(value: Any) -> bool:
    """Check that a value is a string with non-whitespace content."""
    return isinstance(value, str) and bool(value.strip())


def coerce_flag(value: Any) -> bool:
    """
    Coerce a loosely typed ``completed`` value to a boolean.

    Follows JavaScript truthiness: every list or object is true, even when
    empty, and NaN is false. Everything else uses Python truthiness.
    """
    if isinstance(value, (list, dict)):
        return True
    if isinstance(value, float) and value != value:
        return False
    return bool(value)


def parse_task_id(raw: Any) -> tuple[int | None, TaskError | None]:
    """
    Parse a task identifier taken from the URL.

    Args:
        raw: The path segment (or an int passed directly by callers).

    Returns:
        Tuple of (task_id, error).
    """
    if isinstance(raw, bool):
        return None, TaskError.invalid_id()
    if isinstance(raw, int):
        return raw, None
    if isinstance(raw, str):
        candidate = raw.strip()
        if _TASK_ID_PATTERN.fullmatch(candidate):
            try:
                return int(candidate), None
            except ValueError:
                # Too many digits to convert; no stored id is that large.
                return None, TaskError.not_found()
    return None, TaskError.invalid_id()


def parse_completed_filter(raw: str | None) -> bool | None:
    """
    Interpret the ``completed`` query parameter.

    Only the literal string ``"true"`` selects completed tasks; any other
    supplied value selects open ones. ``None`` means no filter.
    """
    if raw is None:
        return None
    return raw == "true"


@dataclass(frozen=True)
class TaskCreate:
    """Validated payload for creating a task."""

    title: str
    description: str
    completed: bool = False

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> tuple["TaskCreate | None", TaskError | None]:
        """
        Validate a create payload.

        ``title`` and ``description`` are required non-empty strings and are
        trimmed. ``completed`` is optional and coerced to a boolean.

        Args:
            data: Dictionary containing the request body.

        Returns:
            Tuple of (schema, error).
        """
        title = data.get("title")
        if not _is_non_empty_string(title):
            return None, TaskError.validation(
                "Title is required and must be a non-empty string"
            )

        description = data.get("description")
        if not _is_non_empty_string(description):
            return None, TaskError.validation(
                "Description is required and must be a non-empty string"
            )

        return cls(
            title=title.strip(),
            description=description.strip(),
            completed=coerce_flag(data.get("completed", False)),
        ), None


@dataclass(frozen=True)
class TaskUpdate:
    """
    Validated partial payload for updating a task.

    A field left as ``None`` was not supplied and must not be touched.
    """

    title: str | None = None
    description: str | None = None
    completed: bool | None = None

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> tuple["TaskUpdate | None", TaskError | None]:
        """
        Validate an update payload.

        A key that is present counts as supplied, even when its value is
        ``null``. Unknown keys are ignored.

        Args:
            data: Dictionary containing the request body.

        Returns:
            Tuple of (schema, error).
        """
        if not any(field in data for field in UPDATABLE_FIELDS):
            return None, TaskError.validation(
                "At least one field (title, description, or completed) must be provided"
            )

        if "title" in data and not _is_non_empty_string(data["title"]):
            return None, TaskError.validation("Title must be a non-empty string")

        if "description" in data and not _is_non_empty_string(data["description"]):
            return None, TaskError.validation("Description must be a non-empty string")

        if "completed" in data and not isinstance(data["completed"], bool):
            return None, TaskError.validation("Completed must be a boolean")

        return cls(
            title=data["title"].strip() if "title" in data else None,
            description=data["description"].strip() if "description" in data else None,
            completed=data.get("completed"),
        ), None
