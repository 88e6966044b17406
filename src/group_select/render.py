"""Theme-driven renderer for grouped multi-select prompts.

``TermRenderer`` turns the semantic facts of each row (label, checked,
disabled reason, warning message, focus) into Rich markup and writes it to a
terminal, counting the lines it drew so the frame can be erased afterwards.
"""

from __future__ import annotations

from typing import Sequence

from rich.markup import escape

from .components import GroupState
from .terminal import Terminal
from .themes import DEFAULT_THEME, Theme


class TermRenderer:
    """Draws prompt rows on a terminal using a theme.

    Args:
        terminal: Where lines are written.
        theme: Visual theme for styling.
    """

    def __init__(self, terminal: Terminal, theme: Theme = DEFAULT_THEME):
        self.terminal = terminal
        self.theme = theme
        self.height = 0

    def _write(self, markup: str) -> None:
        self.terminal.write_line(markup)
        self.height += 1

    def clear(self) -> None:
        """Erase every line drawn since the last clear."""
        self.terminal.clear_last_lines(self.height)
        self.height = 0

    def _prefix(self, active: bool) -> str:
        theme = self.theme
        if active:
            return theme.style(theme.active_color, escape(theme.cursor_icon))
        return " " * len(theme.cursor_icon)

    def _label(self, text: str, active: bool) -> str:
        if active:
            return self.theme.style(self.theme.active_color, escape(text))
        return escape(text)

    def _checkbox(self, checked: bool) -> str:
        theme = self.theme
        if checked:
            return theme.style(theme.checked_color, escape(theme.checked_icon))
        return theme.style(theme.unchecked_color, escape(theme.unchecked_icon))

    def prompt(self, prompt: str, paging: tuple[int, int] | None = None) -> None:
        """Draw the prompt line, with a page indicator when paginating."""
        theme = self.theme
        line = theme.style(theme.prompt_color, escape(prompt))
        if paging is not None:
            current, total = paging
            page = theme.style(theme.dim_color, f"(page {current}/{total})")
            line = f"{line} {page}" if prompt else page
        self._write(line)

    def group_header(self, label: str, state: GroupState, active: bool) -> None:
        theme = self.theme
        if state is GroupState.ALL:
            indicator = theme.style(theme.checked_color, escape(theme.group_all_icon))
        elif state is GroupState.PARTIAL:
            indicator = theme.style(theme.partial_color, escape(theme.group_partial_icon))
        else:
            indicator = theme.style(theme.unchecked_color, escape(theme.group_none_icon))
        name = self._label(label, active)
        self._write(f"{self._prefix(active)} {indicator} [bold]{name}[/bold]")

    def item(self, text: str, checked: bool, active: bool) -> None:
        indent = " " * self.theme.item_indent
        line = f"{self._prefix(active)}{indent} {self._checkbox(checked)} {self._label(text, active)}"
        self._write(line)

    def item_disabled(self, text: str, reason: str, active: bool) -> None:
        """Draw an item that cannot be selected (no checkbox)."""
        theme = self.theme
        indent = " " * theme.item_indent
        blank = " " * len(theme.unchecked_icon)
        detail = escape(text)
        if reason:
            detail = f"{detail} ({escape(reason)})"
        self._write(f"{self._prefix(active)}{indent} {blank} {theme.style(theme.dim_color, detail)}")

    def item_warning(self, text: str, message: str, checked: bool, active: bool) -> None:
        theme = self.theme
        indent = " " * theme.item_indent
        warning = theme.style(
            theme.warning_color, f"{escape(theme.warning_icon)} {escape(message)}"
        )
        line = (
            f"{self._prefix(active)}{indent} {self._checkbox(checked)} "
            f"{self._label(text, active)} {warning}"
        )
        self._write(line)

    def report(self, prompt: str, selections: Sequence[str]) -> None:
        """Draw the one-line summary shown after the user commits."""
        theme = self.theme
        if selections:
            chosen = theme.style(theme.checked_color, escape(", ".join(selections)))
        else:
            chosen = theme.style(theme.dim_color, "none")
        if prompt:
            self._write(f"{theme.style(theme.prompt_color, escape(prompt))}: {chosen}")
        else:
            self._write(chosen)
