"""Grouped multi-select prompt.

This module provides the GroupMultiSelect builder and the interactive loop
that drives a GroupSelectSession on a terminal.

Example:
    from group_select import GroupMultiSelect

    selections = (
        GroupMultiSelect()
        .with_prompt("Select installation targets")
        .group("claude-code", ["work (active)", "personal"])
        .group("opencode", ["default (active)", "experiments"])
        .group("goose", ["main"])
        .with_defaults([[True, False], [True, False], [False]])
        .interact()
    )
    # e.g. [[0], [0, 1], []]
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from .components import DisabledItem, Group, ItemState, NormalItem, WarningItem
from .config import SelectConfig
from .errors import NoGroupsError
from .pager import compute_capacity
from .render import TermRenderer
from .session import GroupSelectSession, SessionState
from .terminal import ConsoleTerminal, Terminal
from .themes import Theme

logger = logging.getLogger(__name__)


class GroupMultiSelect:
    """Interactive multi-select over labeled groups of items.

    The user moves through group headers and items as one list, toggles items
    (or whole groups from their header) and commits with Enter. The result is,
    for every group, the ascending indices of the checked items.

    Builder methods return the instance so calls can be chained.

    Args:
        theme: Optional Theme; when omitted it is picked from
            GROUP_SELECT_THEME at run time.
    """

    def __init__(self, theme: Theme | None = None):
        self.groups: list[Group] = []
        self.config = SelectConfig(theme=theme)

    # ── builder ───────────────────────────────────────────────────────────

    def group(self, label: str, items: Sequence[Any]) -> "GroupMultiSelect":
        """Add a group whose items are all selectable."""
        self.groups.append(Group(label=label, items=list(items)))
        return self

    def group_with_states(
        self, label: str, pairs: Sequence[tuple[Any, ItemState]]
    ) -> "GroupMultiSelect":
        """Add a group from (item, state) pairs."""
        self.groups.append(Group.with_states(label, pairs))
        return self

    def add_group(self, group: Group) -> "GroupMultiSelect":
        self.groups.append(group)
        return self

    def with_defaults(self, defaults: Sequence[Sequence[bool]]) -> "GroupMultiSelect":
        """Set initially checked items, one list of flags per group."""
        self.config.defaults = [list(row) for row in defaults]
        return self

    def with_prompt(self, prompt: str) -> "GroupMultiSelect":
        self.config.prompt = prompt
        return self

    def with_report(self, report: bool) -> "GroupMultiSelect":
        self.config.report = report
        return self

    def with_clear(self, clear: bool) -> "GroupMultiSelect":
        self.config.clear = clear
        return self

    def with_max_length(self, max_length: int) -> "GroupMultiSelect":
        """Cap the number of visible rows regardless of terminal height."""
        if max_length < 1:
            raise ValueError("max_length must be at least 1")
        self.config.max_length = max_length
        return self

    def with_theme(self, theme: Theme) -> "GroupMultiSelect":
        self.config.theme = theme
        return self

    # ── entry points ──────────────────────────────────────────────────────

    def interact(self, terminal: Terminal | None = None) -> list[list[int]]:
        """Run the prompt until the user presses Enter.

        Args:
            terminal: Terminal to run on (defaults to a stderr ConsoleTerminal).

        Returns:
            Selected item indices per group.

        Raises:
            NoGroupsError: If no group was added.
            OSError: If reading keys or writing output fails.
        """
        return self._interact(terminal, allow_quit=False)

    def interact_opt(self, terminal: Terminal | None = None) -> list[list[int]] | None:
        """Like interact(), but Esc/q cancel and return None."""
        return self._interact(terminal, allow_quit=True)

    # ── loop ──────────────────────────────────────────────────────────────

    def _interact(self, terminal: Terminal | None, allow_quit: bool) -> list[list[int]] | None:
        if not self.groups:
            raise NoGroupsError()

        # Nothing to select: every group is empty
        if all(len(group) == 0 for group in self.groups):
            return [[] for _ in self.groups]

        terminal = terminal or ConsoleTerminal()
        config = self.config
        # One row is taken by the prompt line
        capacity = compute_capacity(terminal.rows() - 1, config.resolve_max_length())
        session = GroupSelectSession(
            self.groups,
            defaults=config.defaults,
            capacity=capacity,
            allow_quit=allow_quit,
        )
        renderer = TermRenderer(terminal, config.resolve_theme())
        logger.debug(
            "Starting selection: %d group(s), %d row(s), %d per page",
            len(self.groups),
            session.pager.total_rows,
            capacity,
        )

        terminal.hide_cursor()
        try:
            while True:
                self._draw(renderer, session)
                state = session.handle_key(terminal.read_key())

                if state is SessionState.COMMITTED:
                    if config.clear:
                        renderer.clear()
                    if config.report:
                        renderer.report(config.prompt, session.selection.selected_texts())
                    return session.result()

                if state is SessionState.CANCELLED:
                    if config.clear:
                        renderer.clear()
                    return None

                renderer.clear()
        finally:
            terminal.show_cursor()
            terminal.flush()

    def _draw(self, renderer: TermRenderer, session: GroupSelectSession) -> None:
        """Draw the prompt line and every row of the current page."""
        renderer.prompt(self.config.prompt, session.pager.page_info())

        for pos in session.visible_rows():
            group = self.groups[pos.group_idx]
            active = pos == session.cursor

            if pos.item_idx is None:
                renderer.group_header(
                    group.label, session.selection.group_state(pos.group_idx), active
                )
                continue

            text = group.item_text(pos.item_idx)
            checked = session.selection.is_checked(pos.group_idx, pos.item_idx)
            state = group.states[pos.item_idx]

            if isinstance(state, NormalItem):
                renderer.item(text, checked, active)
            elif isinstance(state, DisabledItem):
                renderer.item_disabled(text, state.reason, active)
            elif isinstance(state, WarningItem):
                renderer.item_warning(text, state.message, checked, active)
            else:
                raise TypeError(f"Unknown item state: {state!r}")
