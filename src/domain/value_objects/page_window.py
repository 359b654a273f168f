"""Page window value object.

Resolved pagination state for a listing: which page is actually served,
how large it is, and how many items/pages exist in total.

Clamping Rules:
    - Requested pages below 1 are served as page 1
    - Requested pages past the last page are served as the last page
    - An empty result set is served as page 1 with zero total pages

Usage:
    from src.domain.value_objects import PageWindow

    window = PageWindow.resolve(requested_page=9, page_size=10, total_items=25)
    window.page_number  # 3
    window.offset       # 20
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class PageWindow:
    """Effective pagination window (value object).

    Attributes:
        page_number: Effective (clamped) 1-indexed page number.
        page_size: Maximum items on the page.
        total_items: Items matching the filter before pagination.

    Raises:
        ValueError: If page_size < 1, page_number < 1 or total_items < 0.
    """

    page_number: int
    page_size: int
    total_items: int

    def __post_init__(self) -> None:
        """Validate window bounds.

        Raises:
            ValueError: If any bound is violated.
        """
        if self.page_size < 1:
            raise ValueError("page_size must be at least 1")
        if self.page_number < 1:
            raise ValueError("page_number must be at least 1")
        if self.total_items < 0:
            raise ValueError("total_items cannot be negative")

    @classmethod
    def resolve(
        cls, *, requested_page: int, page_size: int, total_items: int
    ) -> "PageWindow":
        """Clamp a requested page into the available range.

        Args:
            requested_page: Page number sent by the client (may be out of range).
            page_size: Items per page (must be >= 1).
            total_items: Items matching the filter.

        Returns:
            PageWindow: Window for the page that will actually be served.

        Example:
            >>> PageWindow.resolve(requested_page=0, page_size=10, total_items=5).page_number
            1
            >>> PageWindow.resolve(requested_page=4, page_size=10, total_items=0).page_number
            1
        """
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        total_pages = math.ceil(total_items / page_size)
        page_number = max(1, min(requested_page, total_pages))
        return cls(page_number=page_number, page_size=page_size, total_items=total_items)

    @property
    def total_pages(self) -> int:
        """Number of pages needed to hold every matching item."""
        return math.ceil(self.total_items / self.page_size)

    @property
    def offset(self) -> int:
        """Number of items to skip before the page starts."""
        return (self.page_number - 1) * self.page_size

    @property
    def limit(self) -> int:
        """Number of items to take (the page size)."""
        return self.page_size
