"""Pagination value objects."""

import math
from typing import Generic, TypeVar

from pydantic import Field

from bunko.domain.value.common import ValueObject

T = TypeVar("T")


def normalize_page(page: int | None) -> int:
    """Clamp a requested page number to a minimum of 1.

    There is no upper clamp: a page past the end simply yields no items.
    """
    if page is None or page < 1:
        return 1
    return page


def page_offset(page: int, per_page: int) -> int:
    """Row offset of the first item on ``page``."""
    return (page - 1) * per_page


class PaginationMeta(ValueObject):
    """Pagination metadata handed to the presentation layer.

    Field names are part of the public contract.
    """

    current_page: int = Field(ge=1)
    per_page: int = Field(ge=1)
    total_count: int = Field(ge=0)
    total_pages: int = Field(ge=0)
    prev_page: int | None
    next_page: int | None

    @classmethod
    def compute(cls, page: int, per_page: int, total_count: int) -> "PaginationMeta":
        """Derive metadata for ``page`` given the unpaginated total."""
        total_pages = math.ceil(total_count / per_page) if total_count else 0
        return cls(
            current_page=page,
            per_page=per_page,
            total_count=total_count,
            total_pages=total_pages,
            prev_page=page - 1 if page > 1 else None,
            next_page=page + 1 if page < total_pages else None,
        )


class Page(ValueObject, Generic[T]):
    """A page of items plus its metadata."""

    items: list[T]
    pagination: PaginationMeta
