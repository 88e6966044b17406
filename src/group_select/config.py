"""Prompt configuration and environment overrides."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from .themes import Theme, get_theme

logger = logging.getLogger(__name__)

MAX_ROWS_ENV_VAR = "GROUP_SELECT_MAX_ROWS"


@dataclass
class SelectConfig:
    """Settings accumulated by the GroupMultiSelect builder.

    Attributes:
        prompt: Text shown above the list.
        report: Print a one-line summary of the selection after commit.
        clear: Erase the widget from the terminal when done.
        max_length: Cap on visible rows regardless of terminal height.
        defaults: Per-group lists of initially checked flags.
        theme: Explicit theme; None means "resolve from the environment".
    """

    prompt: str = ""
    report: bool = True
    clear: bool = True
    max_length: int | None = None
    defaults: list[list[bool]] = field(default_factory=list)
    theme: Theme | None = None

    def resolve_theme(self) -> Theme:
        return self.theme if self.theme is not None else get_theme()

    def resolve_max_length(self) -> int | None:
        """Return the builder's row cap, or GROUP_SELECT_MAX_ROWS when unset.

        Non-integer or non-positive environment values are ignored.
        """
        if self.max_length is not None:
            return self.max_length

        raw = (os.environ.get(MAX_ROWS_ENV_VAR) or "").strip()
        if not raw:
            return None
        try:
            value = int(raw)
        except ValueError:
            logger.debug("Ignoring %s=%r: not an integer", MAX_ROWS_ENV_VAR, raw)
            return None
        if value < 1:
            logger.debug("Ignoring %s=%r: must be at least 1", MAX_ROWS_ENV_VAR, raw)
            return None
        return value
