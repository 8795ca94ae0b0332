"""Compilation context value object.

Packages the ``(compiler, layout)`` pair shared by ``QueryBuilder`` and all
clause- and fragment-level sub-builders into a single object.
"""
from __future__ import annotations

from dataclasses import dataclass

from groupql.compile.base import SQLCompiler
from groupql.schema.layout import TableLayout


@dataclass(frozen=True)
class CompilationContext:
    """Immutable context for a single compilation run.

    Attributes:
        compiler: Dialect-specific SQL compiler instance.
        layout: Column and JSON key names of the group table.
    """

    compiler: SQLCompiler
    layout: TableLayout
