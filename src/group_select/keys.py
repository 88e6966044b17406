"""Keyboard input helpers for group_select.

Raw key strings from ``readchar.readkey()`` are classified into a small,
closed set of semantic keys so the prompt loop never compares escape
sequences itself.
"""

from __future__ import annotations

from enum import Enum

import readchar


class Key(str, Enum):
    """Semantic keys understood by the prompt."""

    UP = "up"
    DOWN = "down"
    SPACE = "space"
    ENTER = "enter"
    ESCAPE = "escape"
    CHAR_A = "a"
    CHAR_J = "j"
    CHAR_K = "k"
    CHAR_Q = "q"
    OTHER = "other"

    def __str__(self) -> str:
        return self.value


# Terminals disagree on what Enter and Escape send
_KEYMAP = {
    readchar.key.UP: Key.UP,
    readchar.key.DOWN: Key.DOWN,
    " ": Key.SPACE,
    readchar.key.ENTER: Key.ENTER,
    "\r": Key.ENTER,
    "\n": Key.ENTER,
    readchar.key.ESC: Key.ESCAPE,
    "\x1b\x1b": Key.ESCAPE,
    "a": Key.CHAR_A,
    "j": Key.CHAR_J,
    "k": Key.CHAR_K,
    "q": Key.CHAR_Q,
}


def classify_key(key: str) -> Key:
    """Map a raw key string to a semantic Key.

    Letters are case-sensitive: only lowercase a/j/k/q are bound.
    """
    return _KEYMAP.get(key, Key.OTHER)
