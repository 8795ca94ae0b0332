"""Fluent statement builder.

``QueryBuilder`` accumulates the parts of one SELECT statement and renders
them through focused clause-level sub-builders::

    sql = (
        QueryBuilder.create()
        .select("*")
        .from_("groups")
        .where([GroupNameFilter(search_term="java")])
        .order_by(MentorSorting(direction=SortDirection.DESC))
        .paginate(Pagination(page=2, size=25))
        .build()
    )

Sub-builder hierarchy
---------------------
QueryBuilder
  ├── SelectClauseBuilder   (clause_builders.py)
  ├── WhereClauseBuilder    (clause_builders.py)
  │     └── FilterBuilder   (fragment_builders.py)
  ├── OrderByClauseBuilder  (clause_builders.py)
  │     └── SortingBuilder  (fragment_builders.py)
  └── LimitClauseBuilder    (clause_builders.py)

Rendering
---------
``compile()`` renders with placeholders and returns the bound values next
to the statement.  ``build()`` compiles first, inlines the values in a
single pass and then normalises the whole statement to one line, so the
literal form never spans lines even when a value contains whitespace.

A builder is single-owner state: create one per statement.  Both terminals
leave it untouched, so repeated calls return identical results.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import Any

from groupql.compile.base import CompiledSQL, SQLCompiler
from groupql.compile.clause_builders import (
    LimitClauseBuilder,
    OrderByClauseBuilder,
    SelectClauseBuilder,
    WhereClauseBuilder,
)
from groupql.compile.context import CompilationContext
from groupql.compile.fragment_builders import FilterBuilder, RuntimeContext, SortingBuilder
from groupql.compile.postgres import PostgresCompiler
from groupql.errors import ConfigurationError
from groupql.schema.filters import FILTER_TYPES, Filter, to_filter
from groupql.schema.layout import DEFAULT_LAYOUT, TableLayout
from groupql.schema.pagination import Pagination
from groupql.schema.sorting import SORTING_TYPES, Sorting, to_sorting

logger = logging.getLogger("groupql")

_WHITESPACE = re.compile(r"\s+")


def normalize_whitespace(sql: str) -> str:
    """Collapse every whitespace run to one space and trim the ends."""
    return _WHITESPACE.sub(" ", sql).strip()


class QueryBuilder:
    """Accumulates and renders one SELECT statement over the group table.

    Args:
        compiler: Dialect-specific compiler.  Defaults to
            :class:`~groupql.compile.postgres.PostgresCompiler`.
        layout: Column and JSON key names.  Defaults to the canonical layout.
    """

    def __init__(
        self,
        compiler: SQLCompiler | None = None,
        layout: TableLayout | None = None,
    ) -> None:
        self._ctx = CompilationContext(
            compiler=compiler or PostgresCompiler(),
            layout=layout or DEFAULT_LAYOUT,
        )
        self._fields: str | None = None
        self._table: str | None = None
        self._filters: list[Filter] = []
        self._sorting: Sorting | None = None
        self._pagination: Pagination | None = None

    @classmethod
    def create(
        cls,
        compiler: SQLCompiler | None = None,
        layout: TableLayout | None = None,
    ) -> QueryBuilder:
        """Return a fresh builder."""
        return cls(compiler, layout)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def select(self, fields: str) -> QueryBuilder:
        """Set the select list (e.g. ``"*"`` or ``"name, scheduled_for"``)."""
        self._fields = fields
        return self

    def from_(self, table: str) -> QueryBuilder:
        """Set the source table."""
        self._table = table
        return self

    def where(self, filters: Iterable[Filter | dict[str, Any]]) -> QueryBuilder:
        """Append filters; they are AND-ed in the order supplied.

        Raw dicts such as ``{"kind": "group_name", "search_term": "java"}``
        are parsed into filter models first.

        Raises:
            TypeError: If a single filter or dict is passed instead of an
                iterable of them.
            pydantic.ValidationError: If a raw dict is not a valid filter.
        """
        # pydantic models and dicts are iterable, so a lone one would not fail here.
        if isinstance(filters, (dict, *FILTER_TYPES)):
            raise TypeError(
                f"where() takes an iterable of filters; got a single {type(filters).__name__}"
            )
        parsed = [to_filter(f) for f in filters]
        self._filters.extend(parsed)
        return self

    def order_by(self, sorting: Sorting | dict[str, Any]) -> QueryBuilder:
        """Set the sorting, replacing any sorting set before.

        Raises:
            pydantic.ValidationError: If a raw dict is not a valid sorting.
        """
        sorting = to_sorting(sorting)
        if self._sorting is not None:
            logger.debug("Replacing sorting %r with %r", self._sorting, sorting)
        self._sorting = sorting
        return self

    def paginate(self, pagination: Pagination) -> QueryBuilder:
        """Set the page window."""
        self._pagination = pagination
        return self

    # ------------------------------------------------------------------
    # Terminals
    # ------------------------------------------------------------------

    def compile(self) -> CompiledSQL:
        """Render the statement with placeholders.

        Returns:
            :class:`~groupql.compile.base.CompiledSQL` with the normalised
            ``sql`` string and the bound ``params``.

        Raises:
            ConfigurationError: If the select list or the table is not set.
        """
        self._check_configured()
        runtime = RuntimeContext()
        sql = normalize_whitespace(self._build_statement(runtime))
        logger.debug("Compiled statement: %s", sql)
        return CompiledSQL(
            sql=sql,
            params=runtime.params,
            dialect=self._ctx.compiler.dialect_name,
        )

    def build(self) -> str:
        """Render the statement with values inlined as literals.

        Raises:
            ConfigurationError: If the select list or the table is not set.
            CompilationError: If the statement text names a placeholder with
                no bound value (e.g. ``%(x)s`` typed into the select list).
        """
        compiled = self.compile()
        sql = self._ctx.compiler.inline_params(compiled.sql, compiled.params)
        return normalize_whitespace(sql)

    # ------------------------------------------------------------------
    # Assembly
    # ------------------------------------------------------------------

    def _check_configured(self) -> None:
        missing = [
            name
            for name, value in (("select", self._fields), ("from", self._table))
            if value is None or not value.strip()
        ]
        if missing:
            raise ConfigurationError(
                f"Cannot build a statement without: {', '.join(missing)}.",
                missing=missing,
            )

    def _build_statement(self, runtime: RuntimeContext) -> str:
        parts: list[str] = [SelectClauseBuilder().build(self._fields, self._table)]

        if self._filters:
            where = WhereClauseBuilder(FilterBuilder(self._ctx, runtime))
            parts.append(where.build(self._filters))

        if self._sorting is not None:
            order_by = OrderByClauseBuilder(SortingBuilder(self._ctx))
            parts.append(order_by.build(self._sorting))

        if self._pagination is not None:
            parts.append(LimitClauseBuilder().build(self._pagination))

        return "\n".join(parts)


def render_fragment(
    node: Filter | Sorting,
    compiler: SQLCompiler | None = None,
    layout: TableLayout | None = None,
) -> str:
    """Render a single filter or sorting as normalised, inlined SQL text.

    Args:
        node: A filter or sorting model.
        compiler: Compiler used for literals.  Defaults to Postgres.
        layout: Column and JSON key names.  Defaults to the canonical layout.

    Returns:
        The fragment as it appears inside a built statement.

    Raises:
        CompilationError: If ``node`` is neither a filter nor a sorting.
    """
    ctx = CompilationContext(
        compiler=compiler or PostgresCompiler(),
        layout=layout or DEFAULT_LAYOUT,
    )
    runtime = RuntimeContext()
    if isinstance(node, SORTING_TYPES):
        sql = SortingBuilder(ctx).build(node)
    else:
        sql = FilterBuilder(ctx, runtime).build(node)
    return normalize_whitespace(ctx.compiler.inline_params(sql, runtime.params))
