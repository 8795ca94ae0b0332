"""groupql – composable SELECT statements over JSONB group documents.

Public API
----------
``QueryBuilder``
    Fluent builder: ``select`` → ``from_`` → ``where`` → ``order_by`` →
    ``paginate``, then ``build()`` for a literal statement or ``compile()``
    for SQL with named placeholders and its params.

``compile_search`` / ``build_search``
    Parse a JSON search document and render it in one call.

Re-exported types
-----------------
Filter models (``GroupNameFilter``, ``StartDateFilter``, ``MemberFilter``),
sorting models (``StartDaySorting``, ``MentorSorting``), ``Pagination``,
``TableLayout``, ``GroupSearch``, ``CompiledSQL`` and all error classes.
"""

from __future__ import annotations

import json

from pydantic import ValidationError

from groupql.compile.base import CompiledSQL, SQLCompiler
from groupql.compile.builder import QueryBuilder, normalize_whitespace, render_fragment
from groupql.compile.postgres import PostgresCompiler
from groupql.errors import (
    CompilationError,
    ConfigurationError,
    GroupQLError,
    InvalidFilterError,
    InvalidPaginationError,
    ParseError,
    SchemaError,
)
from groupql.schema.converters import layout_from_sqlalchemy
from groupql.schema.enums import DateExpression, MemberRole, SortDirection
from groupql.schema.filters import Filter, GroupNameFilter, MemberFilter, StartDateFilter
from groupql.schema.layout import DEFAULT_LAYOUT, TableLayout
from groupql.schema.pagination import Pagination
from groupql.schema.search import GroupSearch
from groupql.schema.sorting import MentorSorting, Sorting, StartDaySorting

__all__ = [
    # Core pipeline
    "compile_search",
    "build_search",
    "parse_search",
    # Building
    "QueryBuilder",
    "CompiledSQL",
    "SQLCompiler",
    "PostgresCompiler",
    "normalize_whitespace",
    "render_fragment",
    # Models
    "Filter",
    "GroupNameFilter",
    "StartDateFilter",
    "MemberFilter",
    "Sorting",
    "StartDaySorting",
    "MentorSorting",
    "Pagination",
    "GroupSearch",
    "DateExpression",
    "MemberRole",
    "SortDirection",
    # Configuration
    "TableLayout",
    "DEFAULT_LAYOUT",
    "layout_from_sqlalchemy",
    # Errors
    "GroupQLError",
    "ConfigurationError",
    "InvalidFilterError",
    "InvalidPaginationError",
    "ParseError",
    "CompilationError",
    "SchemaError",
]


def parse_search(search_json: str) -> GroupSearch:
    """Parse a JSON search document.

    Args:
        search_json: Raw JSON string.

    Returns:
        The validated :class:`GroupSearch`.

    Raises:
        ParseError: If ``search_json`` is not valid JSON or not a valid search.
        InvalidFilterError: If a member filter has no guids.
        InvalidPaginationError: If page or size is smaller than 1.
    """
    try:
        raw = json.loads(search_json)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Invalid JSON: {exc}", raw=search_json) from exc

    try:
        return GroupSearch.model_validate(raw)
    except ValidationError as exc:
        raise ParseError(f"Search structure is invalid: {exc}", raw=search_json) from exc


def compile_search(search_json: str, layout: TableLayout | None = None) -> CompiledSQL:
    """Parse a JSON search document and compile it with placeholders::

        compiled = groupql.compile_search(request_body)
        cursor.execute(compiled.sql, compiled.params)

    Args:
        search_json: Raw JSON string.
        layout: Optional table layout; defaults to the canonical one.

    Returns:
        ``CompiledSQL`` with ``sql``, ``params`` and ``dialect``.

    Raises:
        ParseError: If the document cannot be parsed.
        ConfigurationError: If ``fields`` or ``table`` is blank.
    """
    return parse_search(search_json).to_builder(layout=layout).compile()


def build_search(search_json: str, layout: TableLayout | None = None) -> str:
    """Parse a JSON search document and build the literal statement.

    Raises:
        ParseError: If the document cannot be parsed.
        ConfigurationError: If ``fields`` or ``table`` is blank.
    """
    return parse_search(search_json).to_builder(layout=layout).build()
