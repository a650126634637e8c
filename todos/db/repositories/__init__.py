"""
Repository modules for database access.

`TodoRepository` owns every statement issued against the stories and tasks
tables.
"""

from .todos import TodoRepository

__all__ = ["TodoRepository"]
