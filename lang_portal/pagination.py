"""
Page selection and page metadata for list endpoints.

Query strings are untrusted, so pages are built with Pagination.from_query:
anything that is not a positive integer falls back to page 1 or to the
endpoint's default size, and oversized pages are clamped to MAX_PAGE_SIZE.
A repository then fetches one window of rows plus the total row count, and
PaginatedResult.meta describes that window to the client.

Example:
    pagination = Pagination.from_query("2", "500", default_page_size=10)
    # Pagination(page=2, page_size=100)
    items = word_repository.list_with_stats(pagination.offset, pagination.limit)
    result = PaginatedResult(items, word_repository.count(), pagination)
    result.meta.total_pages
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

MAX_PAGE_SIZE = 100
DEFAULT_PAGE_SIZE = 10


def _positive_int(raw: str | None) -> int | None:
    if raw is None:
        return None
    try:
        value = int(raw)
    except ValueError:
        return None
    return value if value >= 1 else None


def count_pages(total_items: int, page_size: int) -> int:
    """ceil(total_items / page_size); an empty listing has zero pages."""
    return -(-total_items // page_size)


@dataclass(frozen=True)
class Pagination:
    """A validated page window: 1-indexed page, 1 to MAX_PAGE_SIZE rows."""

    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("Page must be at least 1")
        if not 1 <= self.page_size <= MAX_PAGE_SIZE:
            raise ValueError(f"Page size must be between 1 and {MAX_PAGE_SIZE}")

    @classmethod
    def from_query(
        cls,
        page: str | None,
        page_size: str | None,
        default_page_size: int = DEFAULT_PAGE_SIZE,
    ) -> "Pagination":
        """Build a page from raw query values, never rejecting them."""
        size = _positive_int(page_size) or default_page_size
        return cls(page=_positive_int(page) or 1, page_size=min(size, MAX_PAGE_SIZE))

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


@dataclass(frozen=True)
class PageMeta:
    """Position of one page inside a listing, as reported to clients."""

    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    """One page of items together with the size of the whole listing."""

    items: list[T]
    total: int
    pagination: Pagination

    @property
    def meta(self) -> PageMeta:
        return PageMeta(
            current_page=self.pagination.page,
            total_pages=count_pages(self.total, self.pagination.page_size),
            total_items=self.total,
            items_per_page=self.pagination.page_size,
        )
