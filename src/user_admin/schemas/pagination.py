"""Pagination parameters and paginated result containers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

from pydantic import BaseModel, Field

ItemType = TypeVar("ItemType")

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10


class PaginationParams(BaseModel):
    """One-based page request."""

    page: int = Field(default=DEFAULT_PAGE, ge=1)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)

    @property
    def offset(self) -> int:
        return offset_for(self.page, self.page_size)


@dataclass(slots=True)
class Page(Generic[ItemType]):
    """A single page of items together with the totals of the full result set."""

    items: list[ItemType]
    total_items: int
    total_pages: int
    current_page: int


def offset_for(page: int, page_size: int) -> int:
    """Number of rows preceding ``page``."""
    return (page - 1) * page_size


def total_pages(total_items: int, page_size: int) -> int:
    """Return ``ceil(total_items / page_size)``."""
    if page_size < 1:
        raise ValueError("page_size must be at least 1")
    return math.ceil(total_items / page_size)


def build_page(items: Sequence[ItemType], total_items: int, params: PaginationParams) -> Page[ItemType]:
    """Assemble a ``Page`` from a fetched slice and the total row count."""
    return Page(
        items=list(items),
        total_items=total_items,
        total_pages=total_pages(total_items, params.page_size),
        current_page=params.page,
    )


__all__ = [
    "DEFAULT_PAGE",
    "DEFAULT_PAGE_SIZE",
    "Page",
    "PaginationParams",
    "build_page",
    "offset_for",
    "total_pages",
]
