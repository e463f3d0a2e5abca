"""
Data model for the Task Store service.

This module defines the Task record held by the in-memory store and the
starter tasks loaded when the store is seeded.
"""

from dataclasses import dataclass, replace
from typing import Any


@dataclass
class Task:
    """
    Task record representing a to-do item.

    Attributes:
        id: Unique identifier, assigned by the store and never reused.
        title: Short title describing the task (trimmed, non-empty).
        description: Detailed description of the task (trimmed, non-empty).
        completed: Whether the task has been done.
    """

    id: int
    title: str
    description: str
    completed: bool = False

    def copy(self) -> "Task":
        """Return a detached copy that can be handed out of the store."""
        return replace(self)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the task to a dictionary representation.

        Returns:
            Dictionary containing all task fields.
        """
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "completed": self.completed,
        }

    def __repr__(self) -> str:
        """Return string representation of the task."""
        return f"<Task {self.id}: {self.title}>"


SEED_TASKS: tuple[Task, ...] = (
    Task(
        id=1,
        title="Set up environment",
        description="Install Node.js, npm, and git",
        completed=True,
    ),
    Task(
        id=2,
        title="Create a new project",
        description="Create a new project using the Express application generator",
        completed=True,
    ),
    Task(
        id=3,
        title="Install nodemon",
        description="Install nodemon as a development dependency",
        completed=True,
    ),
)
