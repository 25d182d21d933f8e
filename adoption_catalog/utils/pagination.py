"""Pagination helpers for catalog slicing and the page-button window."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple, Union

START = "start"
END = "end"


@dataclass(frozen=True)
class Page:
    """A numbered page button."""

    number: int
    is_current: bool = False

    @property
    def kind(self) -> str:
        return "page"


@dataclass(frozen=True)
class EllipsisMarker:
    """Placeholder for one or more elided page numbers."""

    direction: str
    number: int

    @property
    def kind(self) -> str:
        return f"{self.direction}-ellipsis"


PageItem = Union[Page, EllipsisMarker]
PageChangeCallback = Callable[[int], None]


def compute_total_pages(total_rows: int, page_size: int) -> int:
    """Compute the total number of pages for the provided page size."""
    if page_size <= 0:
        return 1
    return max(1, math.ceil(total_rows / page_size))


def clamp_page_number(page_number: int, total_pages: int) -> int:
    """Clamp page number to valid bounds."""
    return min(max(page_number, 1), max(total_pages, 1))


def page_slice(page_number: int, page_size: int) -> Tuple[int, int]:
    """Return start/end row offsets for the selected page."""
    start = (page_number - 1) * page_size
    end = start + page_size
    return start, end


def _is_retained(page: int, current_page: int, total_pages: int) -> bool:
    return page in (1, total_pages, current_page, current_page - 1, current_page + 1)


def build_page_items(
    current_page: int,
    page_size: int,
    total_items: int,
    with_ellipsis: bool = False,
) -> List[PageItem]:
    """Build the ordered page buttons, eliding distant pages when requested.

    Page 1, the last page, the current page and its immediate neighbours keep
    explicit buttons. Every other page becomes a start marker when it sits
    before the current page, an end marker otherwise, and each contiguous run
    of markers collapses to a single one.
    """
    total_pages = compute_total_pages(total_items, page_size)
    items: List[PageItem] = [
        Page(number=page, is_current=page == current_page) for page in range(1, total_pages + 1)
    ]
    if not with_ellipsis:
        return items

    marked: List[PageItem] = []
    for item in items:
        if _is_retained(item.number, current_page, total_pages):
            marked.append(item)
        elif item.number < current_page:
            marked.append(EllipsisMarker(direction=START, number=item.number))
        else:
            marked.append(EllipsisMarker(direction=END, number=item.number))

    collapsed: List[PageItem] = []
    for index, item in enumerate(marked):
        if isinstance(item, EllipsisMarker):
            if item.direction == START:
                following = marked[index + 1] if index + 1 < len(marked) else None
                if isinstance(following, EllipsisMarker) and following.direction == START:
                    continue
            else:
                preceding = marked[index - 1] if index > 0 else None
                if isinstance(preceding, EllipsisMarker) and preceding.direction == END:
                    continue
        collapsed.append(item)
    return collapsed


@dataclass
class PaginationWindow:
    """Rendered pagination state with bound navigation handlers."""

    current_page: int
    total_pages: int
    items: List[PageItem]
    on_change: Optional[PageChangeCallback] = field(default=None, repr=False, compare=False)

    def _go_to(self, page: int) -> int:
        if self.on_change is not None:
            self.on_change(page)
        return page

    def handle_next(self) -> int:
        """Advance one page, staying on the last page at the boundary."""
        return self._go_to(min(self.current_page + 1, self.total_pages))

    def handle_prev(self) -> int:
        """Go back one page, staying on page 1 at the boundary."""
        return self._go_to(max(self.current_page - 1, 1))

    def select(self, item: PageItem) -> Optional[int]:
        """Navigate to a clicked page button; markers are not navigable."""
        if not isinstance(item, Page):
            return None
        return self._go_to(item.number)

    @property
    def has_prev(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages


def paginate(
    current_page: int,
    page_size: int,
    total_items: int,
    with_ellipsis: bool = False,
    on_change: Optional[PageChangeCallback] = None,
) -> PaginationWindow:
    """Compute the page-button window for the current catalog view."""
    return PaginationWindow(
        current_page=current_page,
        total_pages=compute_total_pages(total_items, page_size),
        items=build_page_items(current_page, page_size, total_items, with_ellipsis),
        on_change=on_change,
    )
