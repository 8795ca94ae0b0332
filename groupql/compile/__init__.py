"""groupql compilation layer: filter/sorting/pagination models → SQL."""
from groupql.compile.base import CompiledSQL, SQLCompiler
from groupql.compile.builder import QueryBuilder, normalize_whitespace, render_fragment
from groupql.compile.postgres import PostgresCompiler

__all__ = [
    "CompiledSQL",
    "SQLCompiler",
    "QueryBuilder",
    "PostgresCompiler",
    "normalize_whitespace",
    "render_fragment",
]
