"""Cursor model for walking a two-level list as one sequence.

Every group contributes one header row followed by one row per item. A
``Cursor`` names a row by (group, item); the flat index names the same row by
its position in that sequence. ``GroupLayout`` converts between the two and
moves the cursor, skipping disabled items.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .components import Group, is_disabled


@dataclass(frozen=True)
class Cursor:
    """Focused row.

    Attributes:
        group_idx: Index of the group.
        item_idx: Index of the item in the group, or None for the header row.
    """

    group_idx: int = 0
    item_idx: int | None = None

    @property
    def is_header(self) -> bool:
        return self.item_idx is None


class GroupLayout:
    """Row arithmetic over an ordered list of groups."""

    def __init__(self, groups: Sequence[Group]):
        self.groups = groups

    @property
    def total_rows(self) -> int:
        return sum(1 + len(group) for group in self.groups)

    def flatten(self, cursor: Cursor) -> int:
        """Return the flat index of the row the cursor points at."""
        flat = sum(1 + len(group) for group in self.groups[: cursor.group_idx])
        if cursor.item_idx is not None:
            flat += 1 + cursor.item_idx
        return flat

    def unflatten(self, flat: int) -> Cursor:
        """Return the cursor for a flat index.

        Out-of-range indices map to the first header.
        """
        remaining = flat
        if remaining < 0:
            return Cursor()
        for group_idx, group in enumerate(self.groups):
            if remaining == 0:
                return Cursor(group_idx)
            remaining -= 1
            if remaining < len(group):
                return Cursor(group_idx, remaining)
            remaining -= len(group)
        return Cursor()

    def is_item_disabled(self, cursor: Cursor) -> bool:
        if cursor.item_idx is None:
            return False
        states = self.groups[cursor.group_idx].states
        if cursor.item_idx >= len(states):
            return False
        return is_disabled(states[cursor.item_idx])

    def move_down(self, cursor: Cursor) -> Cursor:
        """Move to the next focusable row; stay put at the end of the list."""
        return self._move(cursor, +1)

    def move_up(self, cursor: Cursor) -> Cursor:
        """Move to the previous focusable row; stay put at the top."""
        return self._move(cursor, -1)

    def _move(self, cursor: Cursor, delta: int) -> Cursor:
        total = self.total_rows
        flat = self.flatten(cursor) + delta

        # No wraparound
        while 0 <= flat < total:
            candidate = self.unflatten(flat)
            if not self.is_item_disabled(candidate):
                return candidate
            flat += delta

        return cursor

    def rows(self, start: int, stop: int) -> list[Cursor]:
        """Cursors for the flat range [start, stop)."""
        return [self.unflatten(flat) for flat in range(start, min(stop, self.total_rows))]
