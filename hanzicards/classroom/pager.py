"""
ReviewSlider - Paged view over the review or mastered characters.

Page arithmetic is in plain functions; ReviewSlider holds the view state:
closed, or open on a source set at a page index.
"""

import math
from enum import Enum
from typing import Optional, Sequence, TypeVar


T = TypeVar("T")

DEFAULT_PAGE_SIZE = 4


class SliderSource(str, Enum):
    """Status set shown in the slider."""
    REVIEW = "review"
    MASTERED = "mastered"


def page_count(items: Sequence, page_size: int = DEFAULT_PAGE_SIZE) -> int:
    """Number of pages needed for items; 0 when there are none."""
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    return math.ceil(len(items) / page_size)


def page(items: Sequence[T], page_index: int, page_size: int = DEFAULT_PAGE_SIZE) -> list[T]:
    """
    Items on one page.

    page_index must already be within [0, page_count - 1].
    """
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    start = page_index * page_size
    end = min(start + page_size, len(items))
    return list(items[start:end])


class ReviewSlider:
    """
    Slider state machine.

    closed -> open(source, 0) on open(); open -> closed on close();
    page moves are clamped and never wrap.
    """

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE):
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self.page_size = page_size
        self.source: Optional[SliderSource] = None
        self.page_index = 0

    @property
    def is_open(self) -> bool:
        return self.source is not None

    def open(self, source: SliderSource | str):
        """Show a source set from its first page."""
        self.source = SliderSource(source)
        self.page_index = 0

    def close(self):
        self.source = None
        self.page_index = 0

    def page_count(self, items: Sequence) -> int:
        return page_count(items, self.page_size)

    def _clamped_index(self, items: Sequence) -> int:
        count = self.page_count(items)
        if count == 0:
            return 0
        return max(0, min(self.page_index, count - 1))

    def visible(self, items: Sequence[T]) -> list[T]:
        """Items on the current page; empty while closed."""
        if not self.is_open:
            return []
        # the source set may have shrunk since the page was chosen
        self.page_index = self._clamped_index(items)
        return page(items, self.page_index, self.page_size)

    def has_next_page(self, items: Sequence) -> bool:
        return self.is_open and self.page_index < self.page_count(items) - 1

    def has_prev_page(self) -> bool:
        return self.is_open and self.page_index > 0

    def next_page(self, items: Sequence) -> bool:
        if not self.has_next_page(items):
            return False
        self.page_index += 1
        return True

    def prev_page(self) -> bool:
        if not self.has_prev_page():
            return False
        self.page_index -= 1
        return True

    def page_label(self, items: Sequence) -> str:
        """Page indicator such as "1/2"; "0/0" when there is nothing to show."""
        count = self.page_count(items)
        if count == 0:
            return "0/0"
        return f"{self._clamped_index(items) + 1}/{count}"
