"""
Service layer package.

`TodoService` is the business entry point used by the HTTP routers.
"""

from .todo_service import TodoService

__all__ = ["TodoService"]
