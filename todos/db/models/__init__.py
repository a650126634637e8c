"""
SQLAlchemy table models.

Exposes `Base`, `now_utc`, and the ORM classes for the two tables.
"""

from .base import Base, now_utc  # re-export
from .todos import Story, Task

__all__ = [
    "Base",
    "now_utc",
    "Story",
    "Task",
]
