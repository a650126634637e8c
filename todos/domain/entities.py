"""
Domain entities for stories and tasks.

These are the values handed across the service boundary. They carry no
database state; `todos.db.repositories.todos` maps table rows onto them.
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass
from enum import Enum


class Status(str, Enum):
    """Completion state of a task, stored as lowercase text."""

    INCOMPLETE = "incomplete"
    COMPLETE = "complete"

    def to_string(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, value: str) -> "Status":
        """Parse stored text into a Status.

        Matching ignores case and surrounding whitespace. Anything else,
        including the empty string, raises ``ValueError``.
        """
        normalized = (value or "").strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"invalid status string: {normalized}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Story:
    story_id: uuid.UUID
    name: str
    owner: str


@dataclass(frozen=True)
class Task:
    task_id: uuid.UUID
    story_id: uuid.UUID
    name: str
    status: Status

    @property
    def complete(self) -> bool:
        return self.status is Status.COMPLETE
