"""Compiler abstractions: CompiledSQL and the SQLCompiler ABC.

The Template Method pattern is used:
- ``SQLCompiler`` defines how bound values are referenced in statement text
  and how they are turned back into literals.
- ``PostgresCompiler`` overrides the dialect-specific steps (placeholder
  style, literal formatting).
"""
from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from groupql.errors import CompilationError


@dataclass
class CompiledSQL:
    """The output of a successful compilation.

    Attributes:
        sql: Single-line SQL string with named placeholders.
        params: Values for the placeholders, keyed by placeholder name.
        dialect: The target dialect (``'postgres'``).
    """

    sql: str
    params: dict[str, Any]
    dialect: str


class SQLCompiler(ABC):
    """Abstract base for dialect-specific SQL compilers.

    Subclasses implement the dialect-specific methods; the ``QueryBuilder``
    and the fragment builders use this interface via the Strategy pattern.
    """

    #: Regex matching one placeholder; group 1 must capture the param name.
    placeholder_pattern: re.Pattern[str]

    @property
    @abstractmethod
    def dialect_name(self) -> str:
        """Return the canonical dialect name."""

    @abstractmethod
    def param_placeholder(self, name: str) -> str:
        """Return the SQL placeholder string for a named parameter.

        Args:
            name: Parameter name (e.g. ``'param_0'``).

        Returns:
            Dialect-specific placeholder string.
        """

    @abstractmethod
    def literal(self, value: Any) -> str:
        """Render ``value`` as inline SQL literal text.

        Args:
            value: A bound parameter value.

        Returns:
            SQL literal text.
        """

    def inline_params(self, sql: str, params: dict[str, Any]) -> str:
        """Replace every placeholder in ``sql`` with its literal value.

        Substitution is a single pass over ``sql``; inserted literals are
        never scanned for further placeholders.

        Args:
            sql: Statement text containing placeholders.
            params: Values keyed by placeholder name.

        Returns:
            Statement text with literals in place of placeholders.

        Raises:
            CompilationError: If a placeholder in ``sql`` has no entry in
                ``params``.
        """

        def _replace(match: re.Match[str]) -> str:
            name = match.group(1)
            if name not in params:
                raise CompilationError(
                    f"Placeholder '{match.group(0)}' has no bound value.",
                    clause="literal",
                )
            return self.literal(params[name])

        return self.placeholder_pattern.sub(_replace, sql)
