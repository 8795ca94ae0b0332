"""Pydantic model for a complete group search.

A search document bundles everything one statement needs.  It is the shape
an HTTP layer or a job definition hands over as JSON::

    {
        "table": "learning_groups",
        "filters": [
            {"kind": "group_name", "search_term": "java"},
            {"kind": "member", "guids": ["8d3f..."], "role": "TEACHER"}
        ],
        "sorting": {"kind": "start_day", "direction": "DESC"},
        "pagination": {"page": 1, "size": 20}
    }
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from groupql.compile.base import SQLCompiler
from groupql.compile.builder import QueryBuilder
from groupql.schema.filters import Filter
from groupql.schema.layout import TableLayout
from groupql.schema.pagination import Pagination
from groupql.schema.sorting import Sorting


class GroupSearch(BaseModel):
    """Fields, table, filters, sorting and page of one statement.

    Attributes:
        fields: Select list; defaults to ``*``.
        table: Source table.
        filters: Filters AND-ed in order.
        sorting: Optional single sorting.
        pagination: Optional page window.
    """

    model_config = ConfigDict(extra="forbid")

    fields: str = "*"
    table: str
    filters: list[Filter] = Field(default_factory=list)
    sorting: Sorting | None = None
    pagination: Pagination | None = None

    def to_builder(
        self,
        compiler: SQLCompiler | None = None,
        layout: TableLayout | None = None,
    ) -> QueryBuilder:
        """Return a :class:`QueryBuilder` configured from this search."""
        builder = QueryBuilder.create(compiler, layout).select(self.fields).from_(self.table)
        builder.where(self.filters)
        if self.sorting is not None:
            builder.order_by(self.sorting)
        if self.pagination is not None:
            builder.paginate(self.pagination)
        return builder
