"""PostgreSQL dialect compiler."""

from __future__ import annotations

import re
from collections.abc import Sequence
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from groupql.compile.base import SQLCompiler
from groupql.errors import CompilationError


class PostgresCompiler(SQLCompiler):
    """Compiles group queries to PostgreSQL-flavoured SQL.

    Parameter style: ``%(name)s`` – compatible with ``psycopg2`` and
    ``psycopg`` named-parameter execution.
    """

    placeholder_pattern = re.compile(r"%\((\w+)\)s")

    @property
    def dialect_name(self) -> str:
        return "postgres"

    def param_placeholder(self, name: str) -> str:
        return f"%({name})s"

    def literal(self, value: Any) -> str:
        # Text is quoted verbatim: inlined statements are not escaped.
        # Execute the compiled form with its params when values are untrusted.
        if value is None:
            return "NULL"
        if isinstance(value, bool):
            return "TRUE" if value else "FALSE"
        if isinstance(value, Enum):
            return f"'{value.value}'"
        if isinstance(value, str):
            return f"'{value}'"
        if isinstance(value, datetime):
            return f"'{format_instant(value)}'"
        if isinstance(value, (int, float)):
            return str(value)
        if isinstance(value, Sequence):
            return "ARRAY[" + ", ".join(self.literal(v) for v in value) + "]"
        raise CompilationError(
            f"Cannot render {type(value).__name__} as a SQL literal.", clause="literal"
        )


def format_instant(value: datetime) -> str:
    """Render ``value`` as an ISO-8601 UTC instant (``2024-05-01T09:30:00Z``).

    Naive datetimes are taken to be UTC already.  Fractional seconds are only
    written when present, as 3 digits for whole milliseconds and 6 otherwise
    (``...:26.123Z``, ``...:26.123456Z``).
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    if value.microsecond == 0:
        timespec = "seconds"
    elif value.microsecond % 1000 == 0:
        timespec = "milliseconds"
    else:
        timespec = "microseconds"
    return value.replace(tzinfo=None).isoformat(timespec=timespec) + "Z"
