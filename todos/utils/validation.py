"""Input normalization helpers shared by the service layer."""

import uuid

from todos.errors import InvalidArgument


def non_empty(value: str, field_name: str) -> str:
    """Return ``value`` trimmed, or raise if nothing is left."""
    trimmed = (value or "").strip()
    if not trimmed:
        raise InvalidArgument(f"empty string: {field_name}")
    return trimmed


def validate_identifier(value: str) -> uuid.UUID:
    """Parse a caller-supplied identifier into a UUID.

    Surrounding whitespace and letter case are ignored. The parser's own
    diagnostic is carried in the error message.
    """
    if not isinstance(value, str):
        raise InvalidArgument(f"identifier must be a string, got {type(value).__name__}")
    normalized = value.strip().lower()
    try:
        return uuid.UUID(normalized)
    except ValueError as exc:
        raise InvalidArgument(f"invalid identifier {normalized!r}: {exc}") from exc
