"""Table layout configuration.

A :class:`TableLayout` names the columns and JSON keys of the group table the
statements are rendered against.  The defaults describe the canonical table::

    CREATE TABLE groups (
        name          TEXT,
        scheduled_for TIMESTAMPTZ,
        group_data    JSONB      -- {"members": [{"guid", "role", "lastName"}, ...]}
    );

Names are interpolated into SQL and JSON path text, so every one of them must
be a plain identifier.
"""
from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints

#: A bare SQL identifier / JSON key.
Identifier = Annotated[str, StringConstraints(pattern=r"^[A-Za-z_][A-Za-z0-9_]*$")]


class TableLayout(BaseModel):
    """Column and JSON key names of the group table.

    Attributes:
        name_column: Text column holding the group name.
        schedule_column: Timestamp column holding the group start.
        document_column: JSONB column holding the group document.
        members_key: Key of the member array inside the document.
        guid_key: Member identifier key.
        role_key: Member role key.
        last_name_key: Member last-name key (used for mentor sorting).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name_column: Identifier = "name"
    schedule_column: Identifier = "scheduled_for"
    document_column: Identifier = "group_data"
    members_key: Identifier = "members"
    guid_key: Identifier = "guid"
    role_key: Identifier = "role"
    last_name_key: Identifier = "lastName"


DEFAULT_LAYOUT = TableLayout()
