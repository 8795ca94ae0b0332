"""Offset-based pagination."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator

from groupql.errors import InvalidPaginationError


class Pagination(BaseModel):
    """A 1-based page of ``size`` rows.

    Attributes:
        page: Page number, starting at 1.
        size: Rows per page.

    Raises:
        InvalidPaginationError: If ``page`` or ``size`` is smaller than 1.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    page: int
    size: int

    @model_validator(mode="after")
    def _check_bounds(self) -> Pagination:
        if self.page < 1 or self.size < 1:
            raise InvalidPaginationError(
                f"Page and size must both be at least 1 (got page={self.page}, size={self.size}).",
                page=self.page,
                size=self.size,
            )
        return self

    @classmethod
    def of(cls, page: int, size: int) -> Pagination:
        return cls(page=page, size=size)

    @property
    def limit(self) -> int:
        return self.size

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size
