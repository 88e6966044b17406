"""Grouped multi-select prompts for the terminal.

Users move through labeled groups of items, toggle single items or whole
groups, and commit a selection that comes back as item indices per group.

Example:
    from group_select import DisabledItem, GroupMultiSelect, NormalItem

    selections = (
        GroupMultiSelect()
        .with_prompt("Select installation targets")
        .group("claude-code", ["work (active)", "personal"])
        .group_with_states(
            "goose",
            [("main", NormalItem()), ("legacy", DisabledItem("not installed"))],
        )
        .interact()
    )
    # e.g. [[0, 1], [0]]
"""

from .components import (
    DisabledItem,
    Group,
    GroupState,
    ItemState,
    NormalItem,
    WarningItem,
    group_state,
)
from .config import SelectConfig
from .cursor import Cursor, GroupLayout
from .errors import GroupSelectError, InvalidGroupError, NoGroupsError
from .keys import Key, classify_key
from .menu import GroupMultiSelect
from .pager import Pager
from .render import TermRenderer
from .selection import SelectionState
from .session import GroupSelectSession, SessionState
from .terminal import ConsoleTerminal, Terminal
from .themes import DEFAULT_THEME, SIMPLE_THEME, Theme, get_theme

__version__ = "0.1.0"

__all__ = [
    # Main classes
    "GroupMultiSelect",
    "SelectConfig",
    # Components
    "Group",
    "ItemState",
    "NormalItem",
    "DisabledItem",
    "WarningItem",
    "GroupState",
    "group_state",
    # Engine
    "Cursor",
    "GroupLayout",
    "SelectionState",
    "Pager",
    "GroupSelectSession",
    "SessionState",
    # Terminal and rendering
    "Terminal",
    "ConsoleTerminal",
    "TermRenderer",
    "Key",
    "classify_key",
    # Theming
    "Theme",
    "DEFAULT_THEME",
    "SIMPLE_THEME",
    "get_theme",
    # Errors
    "GroupSelectError",
    "NoGroupsError",
    "InvalidGroupError",
]
