"""Utilities for building a TableLayout from an external source.

SQLAlchemy converter
--------------------
:func:`layout_from_sqlalchemy` reflects one table through a SQLAlchemy
engine, checks that the columns the statements rely on exist, and returns
the matching :class:`~groupql.schema.layout.TableLayout`.

Install the optional dependency before using this module::

    pip install "groupql[sqlalchemy]"

Example::

    from sqlalchemy import create_engine
    from groupql.schema.converters import layout_from_sqlalchemy

    engine = create_engine("postgresql+psycopg://user:pw@host/db")
    layout = layout_from_sqlalchemy(engine, "learning_groups", schema="public")
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from groupql.errors import SchemaError
from groupql.schema.layout import TableLayout

if TYPE_CHECKING:
    from sqlalchemy import Engine, Table

logger = logging.getLogger("groupql")


def layout_from_sqlalchemy(
    engine: Engine,
    table: str,
    *,
    schema: str | None = None,
    **names: str,
) -> TableLayout:
    """Build a :class:`TableLayout` for ``table`` and verify it by reflection.

    Only the three relational columns (name, schedule, document) are checked.
    The JSON keys inside the document cannot be verified from the catalogue
    and are taken from ``names`` or the defaults.  A document column whose
    reflected type is not JSON-like is reported with a warning rather than
    rejected, since some drivers reflect JSONB as a generic type.

    Args:
        engine: A connected :class:`sqlalchemy.engine.Engine` instance.
        table: Name of the group table.
        schema: Optional database schema name (e.g. ``"public"``).
        **names: Overrides for :class:`TableLayout` fields
            (e.g. ``schedule_column="starts_at"``).

    Returns:
        The verified layout.

    Raises:
        ImportError: If ``sqlalchemy`` is not installed.
        SchemaError: If the table does not exist or lacks a layout column.
    """
    try:
        from sqlalchemy import MetaData as _MetaData
        from sqlalchemy import Table as _Table
        from sqlalchemy.exc import NoSuchTableError
    except ImportError as exc:
        raise ImportError(
            "SQLAlchemy is required for layout_from_sqlalchemy(). "
            'Install it with: pip install "groupql[sqlalchemy]"'
        ) from exc

    layout = TableLayout(**names)
    logger.info("Reflecting table %s for layout", table)
    try:
        with engine.connect() as conn:
            reflected = _Table(table, _MetaData(), autoload_with=conn, schema=schema)
    except NoSuchTableError as exc:
        raise SchemaError(f"Table '{table}' does not exist.", table=table) from exc

    _check_columns(reflected, layout)
    return layout


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _check_columns(reflected: Table, layout: TableLayout) -> None:
    from sqlalchemy import JSON

    required = [layout.name_column, layout.schedule_column, layout.document_column]
    missing = [name for name in required if name not in reflected.columns]
    if missing:
        raise SchemaError(
            f"Table '{reflected.name}' is missing column(s): {', '.join(missing)}.",
            table=reflected.name,
            missing_columns=missing,
        )

    document = reflected.columns[layout.document_column]
    if not isinstance(document.type, JSON):
        logger.warning(
            "Column %s.%s is reflected as %s, not JSON; JSONB functions may fail",
            reflected.name,
            document.name,
            document.type,
        )
