"""
Typed error values returned by store operations.

Store operations do not raise for expected failures. They return a
``TaskError`` describing what went wrong, and the HTTP layer turns its
kind into a status code.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    """Enumeration of the failure categories a request can hit."""

    VALIDATION = "validation_error"
    INVALID_ARGUMENT = "invalid_argument"
    NOT_FOUND = "not_found"
    INTERNAL = "internal_error"


STATUS_CODES: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.INVALID_ARGUMENT: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INTERNAL: 500,
}


@dataclass(frozen=True)
class TaskError:
    """An expected failure with a client-facing message."""

    kind: ErrorKind
    message: str

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self.kind]

    def to_dict(self) -> dict[str, str]:
        return {"error": self.message}

    @classmethod
    def validation(cls, message: str) -> "TaskError":
        return cls(ErrorKind.VALIDATION, message)

    @classmethod
    def invalid_id(cls) -> "TaskError":
        return cls(ErrorKind.INVALID_ARGUMENT, "Invalid task ID")

    @classmethod
    def not_found(cls) -> "TaskError":
        return cls(ErrorKind.NOT_FOUND, "Task not found")
