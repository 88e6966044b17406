"""Building blocks for grouped multi-select prompts.

This module provides the static description of a prompt:
- ItemState: NormalItem, DisabledItem(reason) or WarningItem(message)
- Group: a label plus its items and their states
- GroupState: tri-state summary of a group's checkboxes
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Sequence

from .errors import InvalidGroupError


@dataclass(frozen=True)
class ItemState:
    """Base class for per-item states. Use one of its subclasses."""

    def __post_init__(self):
        if type(self) is ItemState:
            raise TypeError("ItemState is abstract; use NormalItem, DisabledItem or WarningItem")


@dataclass(frozen=True)
class NormalItem(ItemState):
    """Item can be focused and selected."""


@dataclass(frozen=True)
class DisabledItem(ItemState):
    """Item is shown but the cursor skips it and it cannot be selected.

    Attributes:
        reason: Why the item is unavailable, shown next to it.
    """

    reason: str = ""


@dataclass(frozen=True)
class WarningItem(ItemState):
    """Item can be focused and selected but carries a warning.

    Attributes:
        message: Warning text shown next to the item.
    """

    message: str = ""


NORMAL = NormalItem()


def is_disabled(state: ItemState) -> bool:
    """Check if an item state blocks focus and toggling."""
    if isinstance(state, DisabledItem):
        return True
    if isinstance(state, (NormalItem, WarningItem)):
        return False
    raise TypeError(f"Unknown item state: {state!r}")


class GroupState(str, Enum):
    """How many items of a group are checked."""

    NONE = "none"
    PARTIAL = "partial"
    ALL = "all"

    def __str__(self) -> str:
        return self.value


def group_state(checked: Sequence[bool]) -> GroupState:
    """Summarize a row of checkbox flags.

    Item states are not consulted: a disabled item seeded as checked still
    counts toward ALL.
    """
    selected = sum(1 for flag in checked if flag)
    if not checked or selected == 0:
        return GroupState.NONE
    if selected == len(checked):
        return GroupState.ALL
    return GroupState.PARTIAL


@dataclass
class Group:
    """A labeled collection of selectable items.

    Items can be any object; they are displayed with ``str()``.

    Attributes:
        label: Header text for the group.
        items: Items in display order.
        states: One ItemState per item (defaults to NormalItem for all).
    """

    label: str
    items: list[Any] = field(default_factory=list)
    states: list[ItemState] | None = None

    def __post_init__(self):
        self.items = list(self.items)
        if self.states is None:
            self.states = [NORMAL] * len(self.items)
        else:
            self.states = list(self.states)
        if len(self.states) != len(self.items):
            raise InvalidGroupError(self.label, len(self.items), len(self.states))

    @classmethod
    def with_states(cls, label: str, pairs: Sequence[tuple[Any, ItemState]]) -> "Group":
        """Create a group from (item, state) pairs."""
        items = [item for item, _ in pairs]
        states = [state for _, state in pairs]
        return cls(label=label, items=items, states=states)

    def __len__(self) -> int:
        return len(self.items)

    def item_text(self, index: int) -> str:
        return str(self.items[index])

    def selectable_indices(self) -> list[int]:
        """Indices of items that are not disabled."""
        return [i for i, state in enumerate(self.states) if not is_disabled(state)]
