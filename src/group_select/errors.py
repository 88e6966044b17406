"""Error types raised by group_select."""

from __future__ import annotations


class GroupSelectError(RuntimeError):
    """Base error for group selection prompts."""


class NoGroupsError(GroupSelectError):
    """Raised when a prompt is run before any group was added."""

    def __init__(self):
        super().__init__("No groups added")


class InvalidGroupError(GroupSelectError, ValueError):
    """Raised when a group's items and states do not line up."""

    def __init__(self, label: str, item_count: int, state_count: int):
        self.label = label
        self.item_count = item_count
        self.state_count = state_count
        super().__init__(
            f"Group {label!r} has {item_count} item(s) but {state_count} state(s)"
        )


class GroupFileError(GroupSelectError, ValueError):
    """Raised when a group description file is malformed."""
