"""Custom exception hierarchy for groupql.

All public errors inherit from GroupQLError so callers can catch the base
class for any groupql-specific failure.  None of them subclass ``ValueError``,
so raising one inside a pydantic validator propagates it unchanged instead of
folding it into a ``pydantic.ValidationError``.
"""
from __future__ import annotations


class GroupQLError(Exception):
    """Base exception for all groupql errors."""


class ConfigurationError(GroupQLError):
    """Raised when a statement is built without its mandatory parts.

    Args:
        message: Human-readable description.
        missing: Names of the builder settings that were not provided
            (``"select"``, ``"from"``).
    """

    def __init__(self, message: str, missing: list[str] | None = None) -> None:
        super().__init__(message)
        self.missing = missing or []


class InvalidFilterError(GroupQLError):
    """Raised when a filter cannot produce a meaningful condition.

    Args:
        message: Human-readable description.
        filter_kind: Discriminator of the offending filter (e.g. ``member``).
    """

    def __init__(self, message: str, filter_kind: str | None = None) -> None:
        super().__init__(message)
        self.filter_kind = filter_kind


class InvalidPaginationError(GroupQLError):
    """Raised when a page number or page size is smaller than 1.

    Args:
        message: Human-readable description.
        page: The rejected page number.
        size: The rejected page size.
    """

    def __init__(self, message: str, page: int | None = None, size: int | None = None) -> None:
        super().__init__(message)
        self.page = page
        self.size = size


class ParseError(GroupQLError):
    """Raised when a search document cannot be parsed.

    Args:
        message: Human-readable description.
        raw: The raw string that failed to parse.
    """

    def __init__(self, message: str, raw: str | None = None) -> None:
        super().__init__(message)
        self.raw = raw


class CompilationError(GroupQLError):
    """Raised when SQL rendering meets an object it does not know.

    Args:
        message: Human-readable description.
        clause: The clause being rendered when the error occurred.
    """

    def __init__(self, message: str, clause: str | None = None) -> None:
        super().__init__(message)
        self.clause = clause


class SchemaError(GroupQLError):
    """Raised when a reflected table does not match the expected layout.

    Args:
        message: Human-readable description.
        table: Name of the reflected table.
        missing_columns: Layout columns absent from the table.
    """

    def __init__(
        self,
        message: str,
        table: str | None = None,
        missing_columns: list[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.table = table
        self.missing_columns = missing_columns or []
