"""Test fixtures: sample group table DDL and seed rows."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Literal

from groupql.compile.postgres import format_instant

_FIXTURES_DIR = Path(__file__).parent

TABLE_NAME = "learning_groups"

#: Table and select list used by the unit tests, which never touch a database.
UNIT_TABLE = "test_table"
SELECTED_FIELDS = "*"

TEACHER_SMITH = "0f6f1f7a-6a32-4bd6-9a59-0b8c7f0f6a11"
TEACHER_ADAMS = "3c1d2e44-8f3b-4c55-bb0e-2a9a1c7d9e22"
MENTOR_LEE = "7a2b9c10-1d4e-4f6a-8b3c-5d6e7f8a9b33"
INTERN_KIM = "9e8d7c6b-5a4f-4e3d-2c1b-0a9f8e7d6c44"
INTERN_ROSS = "a1b2c3d4-e5f6-4a7b-8c9d-0e1f2a3b4c55"


def load_ddl(target: Literal["sqlite", "postgres"] = "postgres") -> str:
    """Return the sample DDL SQL string for the given backend."""
    return (_FIXTURES_DIR / f"ddl_{target}.sql").read_text()


def _member(guid: str, role: str, last_name: str) -> dict[str, str]:
    return {"guid": guid, "role": role, "lastName": last_name}


def sample_groups() -> list[tuple[int, str, datetime, str]]:
    """Seed rows ``(group_id, name, scheduled_for, group_data_json)``."""
    return [
        (
            1,
            "Java Backend Group",
            datetime(2025, 3, 1, 9, 0, tzinfo=timezone.utc),
            json.dumps({"members": [
                _member(TEACHER_SMITH, "TEACHER", "Smith"),
                _member(INTERN_KIM, "INTERN", "Kim"),
            ]}),
        ),
        (
            2,
            "Python Data Group",
            datetime(2025, 4, 1, 9, 0, tzinfo=timezone.utc),
            json.dumps({"members": [
                _member(TEACHER_ADAMS, "TEACHER", "Adams"),
                _member(MENTOR_LEE, "MENTOR", "Lee"),
                _member(INTERN_ROSS, "INTERN", "Ross"),
            ]}),
        ),
        (
            3,
            "Java Frontend group",
            datetime(2025, 5, 1, 9, 0, tzinfo=timezone.utc),
            json.dumps({"members": [
                _member(MENTOR_LEE, "MENTOR", "Lee"),
                _member(INTERN_KIM, "INTERN", "Kim"),
            ]}),
        ),
    ]


def quoted(guids: list[str]) -> str:
    """Render guids the way they appear inside an ARRAY literal."""
    return ", ".join(f"'{g}'" for g in guids)


def ts(value: datetime) -> str:
    """Render an instant the way it appears in a built statement."""
    return format_instant(value)
