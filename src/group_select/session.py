"""Key-driven state machine behind one prompt run.

A session owns the mutable state of a single interaction (checked flags,
cursor and page window). It knows nothing about terminals: the prompt loop
feeds it semantic keys and draws whatever it exposes.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Sequence

from .components import Group
from .cursor import Cursor, GroupLayout
from .keys import Key
from .pager import Pager
from .selection import SelectionState

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    """Lifecycle of a session. COMMITTED and CANCELLED are terminal."""

    RUNNING = "running"
    COMMITTED = "committed"
    CANCELLED = "cancelled"

    def __str__(self) -> str:
        return self.value


class GroupSelectSession:
    """Cursor, selection and page window for one prompt run.

    Keyboard controls:
        - Up/Down or k/j: Move, skipping disabled items (no wraparound)
        - Space: Toggle the item, or every selectable item of a group header
        - a: Check all selectable items, or uncheck them if all are checked
        - Enter: Commit
        - Esc/q: Cancel (only when allow_quit is set)

    Args:
        groups: Groups to select from.
        defaults: Optional per-group initial flags.
        capacity: Rows visible per page.
        allow_quit: Whether Esc/q end the session as cancelled.
    """

    def __init__(
        self,
        groups: Sequence[Group],
        defaults: Sequence[Sequence[bool]] | None = None,
        capacity: int = 1,
        allow_quit: bool = False,
    ):
        self.groups = groups
        self.layout = GroupLayout(groups)
        self.selection = SelectionState(groups, defaults)
        self.cursor = Cursor()
        self.pager = Pager(total_rows=self.layout.total_rows, capacity=capacity)
        self.allow_quit = allow_quit
        self.state = SessionState.RUNNING

    @property
    def finished(self) -> bool:
        return self.state is not SessionState.RUNNING

    def handle_key(self, key: Key) -> SessionState:
        """Apply one key press and return the resulting state."""
        if self.finished:
            return self.state

        if key in (Key.DOWN, Key.CHAR_J):
            self._move(self.layout.move_down(self.cursor))
        elif key in (Key.UP, Key.CHAR_K):
            self._move(self.layout.move_up(self.cursor))
        elif key is Key.SPACE:
            self.selection.toggle(self.cursor)
        elif key is Key.CHAR_A:
            self.selection.toggle_all()
        elif key is Key.ENTER:
            self.state = SessionState.COMMITTED
            logger.debug("Selection committed")
        elif key in (Key.ESCAPE, Key.CHAR_Q) and self.allow_quit:
            self.state = SessionState.CANCELLED
            logger.debug("Selection cancelled")

        return self.state

    def _move(self, cursor: Cursor) -> None:
        self.cursor = cursor
        self.pager.follow(self.layout.flatten(cursor))

    def visible_rows(self) -> list[Cursor]:
        """Rows of the current page window, in display order."""
        window = self.pager.visible_range()
        return self.layout.rows(window.start, window.stop)

    def result(self) -> list[list[int]]:
        return self.selection.selected_indices()
