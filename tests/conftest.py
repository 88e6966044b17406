"""Pytest fixtures for group_select tests."""

from __future__ import annotations

import pytest

from group_select import DisabledItem, Group, Key, NormalItem, WarningItem
from group_select.themes import THEME_ENV_VAR
from group_select.config import MAX_ROWS_ENV_VAR


class FakeTerminal:
    """Scripted terminal: replays queued keys and records everything drawn."""

    def __init__(self, keys=(), rows=24):
        self.keys = list(keys)
        self._rows = rows
        self.lines: list[str] = []
        self.frames: list[list[str]] = []
        self.cursor_visible = True
        self.hide_calls = 0
        self.show_calls = 0
        self.flushes = 0
        self.cleared: list[int] = []
        self.reads = 0

    def read_key(self) -> Key:
        self.reads += 1
        if not self.keys:
            raise OSError("no more keys")
        key = self.keys.pop(0)
        if isinstance(key, BaseException):
            raise key
        # Each read ends a frame
        self.frames.append(list(self.lines))
        return key

    def rows(self) -> int:
        return self._rows

    def hide_cursor(self) -> None:
        self.hide_calls += 1
        self.cursor_visible = False

    def show_cursor(self) -> None:
        self.show_calls += 1
        self.cursor_visible = True

    def write_line(self, markup: str) -> None:
        self.lines.append(markup)

    def clear_last_lines(self, count: int) -> None:
        self.cleared.append(count)
        if count:
            del self.lines[-count:]

    def flush(self) -> None:
        self.flushes += 1


@pytest.fixture
def fake_terminal():
    """Factory for FakeTerminal instances."""
    return FakeTerminal


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep user environment overrides out of tests."""
    monkeypatch.delenv(THEME_ENV_VAR, raising=False)
    monkeypatch.delenv(MAX_ROWS_ENV_VAR, raising=False)


@pytest.fixture
def two_groups():
    return [Group("A", ["a1", "a2"]), Group("B", ["b1"])]


@pytest.fixture
def mixed_group():
    return Group.with_states(
        "A",
        [
            ("a1", NormalItem()),
            ("a2", DisabledItem("x")),
            ("a3", NormalItem()),
        ],
    )


@pytest.fixture
def warning_group():
    return Group.with_states("W", [("w1", WarningItem("careful")), ("w2", NormalItem())])
