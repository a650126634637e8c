"""
Error kinds raised by the todos core.

The taxonomy is intentionally flat: callers only ever need to distinguish
bad input, a missing target, and a store failure. Translation to transport
status codes happens once, in `todos.api.errors`.
"""


class TodosError(Exception):
    """Base class for every error the core raises."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InvalidArgument(TodosError):
    """Caller-supplied input failed validation."""

    def __str__(self) -> str:
        return f"invalid argument: {self.message}"


class NotFoundError(TodosError):
    """The targeted row does not exist or has been soft-deleted."""

    def __str__(self) -> str:
        return f"not found: {self.message}"


class InternalError(TodosError):
    """Unexpected failure below the service layer."""

    def __str__(self) -> str:
        return f"internal error: {self.message}"


class StoreError(InternalError):
    """A database operation failed or returned a row that could not be decoded."""
