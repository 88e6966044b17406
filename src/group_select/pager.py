"""Scroll window that keeps the cursor row on screen."""

from __future__ import annotations

from dataclasses import dataclass


def compute_capacity(terminal_rows: int, max_length: int | None = None) -> int:
    """Return how many rows fit on a page.

    The configured cap wins over tall terminals. Never less than one row.
    ``terminal_rows`` is the space left for list rows: callers that draw a
    prompt line above the list subtract it before calling (GroupMultiSelect
    passes ``rows - 1``).
    """
    capacity = terminal_rows if max_length is None else min(max_length, terminal_rows)
    return max(1, capacity)


@dataclass
class Pager:
    """Page window over the flat row sequence.

    Attributes:
        total_rows: Length of the flat sequence.
        capacity: Number of rows visible at once.
        offset: First visible flat index.
    """

    total_rows: int
    capacity: int
    offset: int = 0

    @property
    def paginated(self) -> bool:
        return self.capacity < self.total_rows

    def follow(self, flat: int) -> int:
        """Scroll just enough for ``flat`` to be visible and return the offset."""
        if not self.paginated:
            self.offset = 0
        elif flat < self.offset:
            self.offset = flat
        elif flat >= self.offset + self.capacity:
            self.offset = flat - self.capacity + 1
        return self.offset

    def visible_range(self) -> range:
        return range(self.offset, min(self.offset + self.capacity, self.total_rows))

    def page_info(self) -> tuple[int, int] | None:
        """Return (current_page, total_pages), or None when everything fits."""
        if not self.paginated:
            return None
        total_pages = -(-self.total_rows // self.capacity)
        current_page = self.offset // self.capacity + 1
        return current_page, total_pages
