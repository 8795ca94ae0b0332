"""Filter models.

A filter is one independent predicate over the group table.  The set of
filters is closed: :data:`Filter` is a pydantic discriminated union over the
``kind`` field, so raw JSON such as ``{"kind": "group_name", "search_term":
"java"}`` parses straight into the matching model.

Filters are pure data.  Rendering them to SQL is the job of
:class:`~groupql.compile.fragment_builders.FilterBuilder`.
"""
from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from groupql.errors import InvalidFilterError
from groupql.schema.enums import DateExpression, MemberRole

_FROZEN = ConfigDict(extra="forbid", frozen=True)


class GroupNameFilter(BaseModel):
    """Case-insensitive substring match on the group name.

    Attributes:
        search_term: Text that must appear somewhere in the name.
    """

    model_config = _FROZEN

    kind: Literal["group_name"] = "group_name"
    search_term: str


class StartDateFilter(BaseModel):
    """Compare the scheduled start of a group with an instant.

    Attributes:
        instant: The instant to compare with.
        expression: ``FROM`` (``>=``), ``TO`` (``<=``) or ``EQUAL`` (``=``).
    """

    model_config = _FROZEN

    kind: Literal["start_date"] = "start_date"
    instant: datetime
    expression: DateExpression


class MemberFilter(BaseModel):
    """Require a member with one of ``guids`` holding ``role``.

    Attributes:
        guids: Candidate member identifiers; at least one is required.
        role: Role the matching member must hold.
    """

    model_config = _FROZEN

    kind: Literal["member"] = "member"
    guids: tuple[str, ...]
    role: MemberRole

    @field_validator("guids")
    @classmethod
    def _require_guids(cls, guids: tuple[str, ...]) -> tuple[str, ...]:
        if not guids:
            raise InvalidFilterError(
                "MemberFilter requires at least one member guid.", filter_kind="member"
            )
        return guids


Filter = Annotated[
    Union[GroupNameFilter, StartDateFilter, MemberFilter],
    Field(discriminator="kind"),
]

FILTER_TYPES: tuple[type[BaseModel], ...] = (GroupNameFilter, StartDateFilter, MemberFilter)

#: Parse a raw dict into a typed Filter.
FILTER_ADAPTER: TypeAdapter[Filter] = TypeAdapter(Filter)


def to_filter(v: dict[str, Any] | Filter) -> Filter:
    """Convert a raw filter dict to a typed ``Filter``, or return it as-is."""
    if isinstance(v, FILTER_TYPES):
        return v
    return FILTER_ADAPTER.validate_python(v)
