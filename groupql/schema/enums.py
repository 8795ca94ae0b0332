"""Enumerations shared by the filter and sorting models."""
from __future__ import annotations

from enum import Enum


class MemberRole(str, Enum):
    """Role of a member inside a group document."""

    TEACHER = "TEACHER"
    MENTOR = "MENTOR"
    INTERN = "INTERN"


class DateExpression(str, Enum):
    """Comparison applied by a start-date filter."""

    FROM = "FROM"
    TO = "TO"
    EQUAL = "EQUAL"

    @property
    def operator(self) -> str:
        return _DATE_OPERATORS[self]


_DATE_OPERATORS: dict[DateExpression, str] = {
    DateExpression.FROM: ">=",
    DateExpression.TO: "<=",
    DateExpression.EQUAL: "=",
}


class SortDirection(str, Enum):
    """ORDER BY direction."""

    ASC = "ASC"
    DESC = "DESC"
