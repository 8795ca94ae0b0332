"""Filter and sorting fragment compilers.

``FilterBuilder`` renders one boolean condition per filter and
``SortingBuilder`` renders one ORDER BY expression per sorting.  Both dispatch
on the closed set of model types and receive a
:class:`~groupql.compile.context.CompilationContext` (static config) and a
:class:`RuntimeContext` (per-statement parameter state).

Caller-supplied values never appear in the fragment text; they are stored in
the runtime context and referenced through the compiler's placeholder.
Column names and JSON keys come from the layout, which only admits plain
identifiers.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from groupql.compile.context import CompilationContext
from groupql.errors import CompilationError
from groupql.schema.enums import MemberRole
from groupql.schema.filters import Filter, GroupNameFilter, MemberFilter, StartDateFilter
from groupql.schema.sorting import MentorSorting, Sorting, StartDaySorting

_MEMBER_EXISTS = """
EXISTS (SELECT * FROM jsonb_array_elements({document}->'{members}') AS member
        WHERE member->>'{guid_key}' = ANY({guids})
        AND member->>'{role_key}' = {role})
"""

_TEACHER_LAST_NAME = """
(SELECT jsonb_path_query_first({document},'$.{members}[*] ? (@.{role} == "{teacher}").{last_name}')::text)
"""


# ---------------------------------------------------------------------------
# Runtime parameter accumulator (shared by all sub-builders in one run)
# ---------------------------------------------------------------------------


@dataclass
class RuntimeContext:
    """Accumulates named parameters during a single compilation run.

    A single instance is threaded through every sub-builder so that
    placeholder names are unique for the entire statement and numbered in
    render order.
    """

    params: dict[str, Any] = field(default_factory=dict)
    _counter: int = 0

    def add_value(self, value: Any) -> str:
        """Store a literal value and return its placeholder name."""
        name = f"param_{self._counter}"
        self._counter += 1
        self.params[name] = value
        return name


# ---------------------------------------------------------------------------
# Filter builder
# ---------------------------------------------------------------------------


class FilterBuilder:
    """Compiles :data:`~groupql.schema.filters.Filter` models to conditions.

    Args:
        ctx: Static compilation context (compiler + layout).
        runtime: Shared parameter accumulator for this statement.
    """

    def __init__(self, ctx: CompilationContext, runtime: RuntimeContext) -> None:
        self._ctx = ctx
        self._runtime = runtime

    def build(self, flt: Filter) -> str:
        """Compile one filter to a boolean SQL fragment."""
        if isinstance(flt, GroupNameFilter):
            return self._build_group_name(flt)
        if isinstance(flt, StartDateFilter):
            return self._build_start_date(flt)
        if isinstance(flt, MemberFilter):
            return self._build_member(flt)
        raise CompilationError(
            f"Unknown filter type: {type(flt).__name__}", clause="WHERE"
        )

    def _bind(self, value: Any) -> str:
        name = self._runtime.add_value(value)
        return self._ctx.compiler.param_placeholder(name)

    def _build_group_name(self, flt: GroupNameFilter) -> str:
        pattern = self._bind(f"%{flt.search_term}%")
        return f"{self._ctx.layout.name_column} ILIKE {pattern}"

    def _build_start_date(self, flt: StartDateFilter) -> str:
        instant = self._bind(flt.instant)
        return f"{self._ctx.layout.schedule_column} {flt.expression.operator} {instant}"

    def _build_member(self, flt: MemberFilter) -> str:
        layout = self._ctx.layout
        # Bind in template order so param numbering follows the text.
        guids = self._bind(list(flt.guids))
        role = self._bind(flt.role.value)
        return _MEMBER_EXISTS.format(
            document=layout.document_column,
            members=layout.members_key,
            guid_key=layout.guid_key,
            role_key=layout.role_key,
            guids=guids,
            role=role,
        )


# ---------------------------------------------------------------------------
# Sorting builder
# ---------------------------------------------------------------------------


class SortingBuilder:
    """Compiles :data:`~groupql.schema.sorting.Sorting` models to ORDER BY items.

    Sorting fragments contain no caller values, so no parameters are bound.
    """

    def __init__(self, ctx: CompilationContext) -> None:
        self._ctx = ctx

    def build(self, sorting: Sorting) -> str:
        """Compile one sorting to ``<expression> <direction>``."""
        if isinstance(sorting, StartDaySorting):
            expr = self._ctx.layout.schedule_column
        elif isinstance(sorting, MentorSorting):
            expr = self._build_teacher_last_name()
        else:
            raise CompilationError(
                f"Unknown sorting type: {type(sorting).__name__}", clause="ORDER BY"
            )
        return f"{expr.strip()} {sorting.direction.value}"

    def _build_teacher_last_name(self) -> str:
        layout = self._ctx.layout
        return _TEACHER_LAST_NAME.format(
            document=layout.document_column,
            members=layout.members_key,
            role=layout.role_key,
            teacher=MemberRole.TEACHER.value,
            last_name=layout.last_name_key,
        )
