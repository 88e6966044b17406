"""Checked-state bookkeeping for grouped multi-select prompts."""

from __future__ import annotations

import logging
from typing import Sequence

from .components import Group, GroupState, group_state, is_disabled
from .cursor import Cursor

logger = logging.getLogger(__name__)


class SelectionState:
    """Per-item checkbox flags, one row per group.

    The shape mirrors the group list and never changes after construction.
    Disabled items keep whatever value they were seeded with.

    Args:
        groups: Groups being selected from.
        defaults: Optional per-group lists of initial flags. Missing groups,
            missing items and extra entries are ignored (treated as unchecked).
    """

    def __init__(self, groups: Sequence[Group], defaults: Sequence[Sequence[bool]] | None = None):
        self.groups = groups
        defaults = defaults or []
        self.checked: list[list[bool]] = []
        for group_idx, group in enumerate(groups):
            seeds = defaults[group_idx] if group_idx < len(defaults) else []
            self.checked.append(
                [bool(seeds[i]) if i < len(seeds) else False for i in range(len(group))]
            )

    def toggle(self, cursor: Cursor) -> None:
        """Toggle the row under the cursor.

        On a header row, all selectable items of the group are switched
        together: if every one of them is checked they are all unchecked,
        otherwise they are all checked. On an item row, the item flips unless
        it is disabled.
        """
        group = self.groups[cursor.group_idx]
        row = self.checked[cursor.group_idx]

        if cursor.item_idx is None:
            if not group.items:
                return
            selectable = group.selectable_indices()
            new_value = not all(row[i] for i in selectable)
            for i in selectable:
                row[i] = new_value
            return

        if not is_disabled(group.states[cursor.item_idx]):
            row[cursor.item_idx] = not row[cursor.item_idx]

    def toggle_all(self) -> bool:
        """Check every selectable item, or uncheck them all if all are checked.

        Returns:
            The value written to the selectable items.
        """
        pairs = [
            (group_idx, i)
            for group_idx, group in enumerate(self.groups)
            for i in group.selectable_indices()
        ]
        new_value = not all(self.checked[g][i] for g, i in pairs)
        for g, i in pairs:
            self.checked[g][i] = new_value
        logger.debug("%s %d selectable item(s)", "Checked" if new_value else "Unchecked", len(pairs))
        return new_value

    def is_checked(self, group_idx: int, item_idx: int) -> bool:
        return self.checked[group_idx][item_idx]

    def group_state(self, group_idx: int) -> GroupState:
        return group_state(self.checked[group_idx])

    def selected_indices(self) -> list[list[int]]:
        """Return, per group, the ascending indices of checked items."""
        return [[i for i, flag in enumerate(row) if flag] for row in self.checked]

    def selected_texts(self) -> list[str]:
        """Display texts of all checked items, in group order."""
        return [
            group.item_text(i)
            for group, row in zip(self.groups, self.checked)
            for i, flag in enumerate(row)
            if flag
        ]
