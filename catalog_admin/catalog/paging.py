"""Paged result container returned by catalog services.

Page indexes are 0-based at this level; the admin layer converts
1-based page numbers before calling into services.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

# Page size used when callers want everything in one page
MAX_PAGE_SIZE = 2_147_483_647


@dataclass
class PagedList(Generic[T]):
    """One page of items plus the total match count.

    Attributes:
        items: Items on this page.
        page_index: 0-based page index.
        page_size: Items per page.
        total_count: Number of items across all pages.
    """

    items: list[T]
    page_index: int
    page_size: int
    total_count: int

    @classmethod
    def from_sequence(
        cls,
        source: Sequence[T],
        page_index: int,
        page_size: int,
    ) -> "PagedList[T]":
        """Slice a fully materialised, ordered sequence into one page.

        Args:
            source: Ordered items matching the query.
            page_index: 0-based page index.
            page_size: Items per page (values below 1 are treated as 1).

        Returns:
            Page of items.
        """
        page_index = max(page_index, 0)
        page_size = max(page_size, 1)
        start = page_index * page_size
        end = start + page_size
        return cls(
            items=list(source[start:end]),
            page_index=page_index,
            page_size=page_size,
            total_count=len(source),
        )

    @property
    def total_pages(self) -> int:
        """Calculate total pages."""
        return (self.total_count + self.page_size - 1) // self.page_size

    @property
    def has_next_page(self) -> bool:
        """Check if there's a next page."""
        return self.page_index + 1 < self.total_pages

    @property
    def has_previous_page(self) -> bool:
        """Check if there's a previous page."""
        return self.page_index > 0

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
