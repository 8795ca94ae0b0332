"""groupql schema models: filters, sortings, pagination, layout."""
from groupql.schema.enums import DateExpression, MemberRole, SortDirection
from groupql.schema.filters import (
    Filter,
    GroupNameFilter,
    MemberFilter,
    StartDateFilter,
)
from groupql.schema.layout import DEFAULT_LAYOUT, TableLayout
from groupql.schema.pagination import Pagination
from groupql.schema.sorting import MentorSorting, Sorting, StartDaySorting

__all__ = [
    "DateExpression",
    "MemberRole",
    "SortDirection",
    "Filter",
    "GroupNameFilter",
    "MemberFilter",
    "StartDateFilter",
    "DEFAULT_LAYOUT",
    "TableLayout",
    "Pagination",
    "MentorSorting",
    "Sorting",
    "StartDaySorting",
]
