"""Terminal handle used by the prompt loop.

The loop only needs a handful of primitives: read one key, know how many rows
are visible, toggle cursor visibility, write a line, erase lines it wrote and
flush. ``ConsoleTerminal`` implements them with readchar and a Rich Console.
"""

from __future__ import annotations

import re
from typing import Protocol

import readchar
from rich.console import Console
from rich.control import Control
from rich.segment import ControlType

from .keys import Key, classify_key

_LINE_BREAKS = re.compile(r"\r\n|[\r\n\v\f\x85\u2028\u2029]")


class Terminal(Protocol):
    """Primitives the prompt loop needs from a terminal."""

    def read_key(self) -> Key: ...

    def rows(self) -> int: ...

    def hide_cursor(self) -> None: ...

    def show_cursor(self) -> None: ...

    def write_line(self, markup: str) -> None: ...

    def clear_last_lines(self, count: int) -> None: ...

    def flush(self) -> None: ...


class ConsoleTerminal:
    """Terminal backed by readchar for input and a Rich Console for output.

    Args:
        console: Console to draw on. Defaults to one writing to stderr, so
            stdout stays free for the caller's results.
    """

    def __init__(self, console: Console | None = None):
        self.console = console or Console(stderr=True, highlight=False)

    def read_key(self) -> Key:
        return classify_key(readchar.readkey())

    def rows(self) -> int:
        return self.console.size.height

    def hide_cursor(self) -> None:
        self.console.show_cursor(False)

    def show_cursor(self) -> None:
        self.console.show_cursor(True)

    def write_line(self, markup: str) -> None:
        # One terminal row per line so clear_last_lines() can count them
        markup = _LINE_BREAKS.sub(" ", markup)
        self.console.print(markup, highlight=False, no_wrap=True, overflow="crop", crop=True)

    def clear_last_lines(self, count: int) -> None:
        if count <= 0:
            return
        codes = [(ControlType.CURSOR_UP, 1), (ControlType.ERASE_IN_LINE, 2)] * count
        self.console.control(Control(ControlType.CARRIAGE_RETURN, *codes))

    def flush(self) -> None:
        self.console.file.flush()
