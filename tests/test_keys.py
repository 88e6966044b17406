"""Tests for raw key classification."""

import pytest
import readchar

from group_select import Key, classify_key


@pytest.mark.parametrize(
    "raw, expected",
    [
        (readchar.key.UP, Key.UP),
        (readchar.key.DOWN, Key.DOWN),
        (" ", Key.SPACE),
        (readchar.key.ENTER, Key.ENTER),
        ("\r", Key.ENTER),
        ("\n", Key.ENTER),
        (readchar.key.ESC, Key.ESCAPE),
        ("\x1b\x1b", Key.ESCAPE),
        ("a", Key.CHAR_A),
        ("j", Key.CHAR_J),
        ("k", Key.CHAR_K),
        ("q", Key.CHAR_Q),
        ("x", Key.OTHER),
        ("A", Key.OTHER),
        (readchar.key.LEFT, Key.OTHER),
    ],
)
def test_classify_key(raw, expected):
    assert classify_key(raw) is expected
