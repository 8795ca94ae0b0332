"""Clause-level SQL builders.

Each class handles exactly one SQL clause.  Filter and sorting rendering is
delegated to the fragment builders, which share the statement's
:class:`~groupql.compile.fragment_builders.RuntimeContext`.

Classes
-------
SelectClauseBuilder  : ``SELECT <fields> FROM <table>``
WhereClauseBuilder   : ``WHERE <filter> AND <filter> …``
OrderByClauseBuilder : ``ORDER BY <sorting>``
LimitClauseBuilder   : ``LIMIT <limit> OFFSET <offset>``
"""
from __future__ import annotations

from collections.abc import Sequence

from groupql.compile.fragment_builders import FilterBuilder, SortingBuilder
from groupql.schema.filters import Filter
from groupql.schema.pagination import Pagination
from groupql.schema.sorting import Sorting


class SelectClauseBuilder:
    """Builds the ``SELECT … FROM …`` head of the statement.

    Fields and table are emitted as given; they are trusted configuration,
    not caller input.
    """

    def build(self, fields: str, table: str) -> str:
        return f"SELECT {fields} FROM {table}"


class WhereClauseBuilder:
    """Builds the ``WHERE`` clause by AND-ing filter fragments in order."""

    def __init__(self, filter_builder: FilterBuilder) -> None:
        self._filter = filter_builder

    def build(self, filters: Sequence[Filter]) -> str:
        conditions = [self._filter.build(f) for f in filters]
        return "WHERE " + "\nAND ".join(conditions)


class OrderByClauseBuilder:
    """Builds the ``ORDER BY`` clause for the single active sorting."""

    def __init__(self, sorting_builder: SortingBuilder) -> None:
        self._sorting = sorting_builder

    def build(self, sorting: Sorting) -> str:
        return f"ORDER BY\n    {self._sorting.build(sorting)}"


class LimitClauseBuilder:
    """Builds the ``LIMIT … OFFSET …`` window."""

    def build(self, pagination: Pagination) -> str:
        return f"LIMIT {pagination.limit} OFFSET {pagination.offset}"
