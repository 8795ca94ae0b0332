"""Sorting models.

Exactly one sorting can be attached to a statement.  Like filters, the set is
closed and parsed through the ``kind`` discriminator.
"""
from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from groupql.schema.enums import SortDirection

_FROZEN = ConfigDict(extra="forbid", frozen=True)


class StartDaySorting(BaseModel):
    """Order groups by their scheduled start."""

    model_config = _FROZEN

    kind: Literal["start_day"] = "start_day"
    direction: SortDirection = SortDirection.ASC


class MentorSorting(BaseModel):
    """Order groups by the last name of their teacher.

    The value is read from the group document with a JSON path query, so
    groups without a teacher sort as NULL.
    """

    model_config = _FROZEN

    kind: Literal["mentor"] = "mentor"
    direction: SortDirection = SortDirection.ASC


Sorting = Annotated[
    Union[StartDaySorting, MentorSorting],
    Field(discriminator="kind"),
]

SORTING_TYPES: tuple[type[BaseModel], ...] = (StartDaySorting, MentorSorting)

SORTING_ADAPTER: TypeAdapter[Sorting] = TypeAdapter(Sorting)


def to_sorting(v: dict[str, Any] | Sorting) -> Sorting:
    """Convert a raw sorting dict to a typed ``Sorting``, or return it as-is."""
    if isinstance(v, SORTING_TYPES):
        return v
    return SORTING_ADAPTER.validate_python(v)
