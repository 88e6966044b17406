"""Configurable themes for group_select prompts.

The Theme dataclass holds every visual token the renderer uses (colors,
icons, indentation). Two themes ship with the package: a colorful default and
a plain ASCII one for terminals without color or unicode support.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

THEME_ENV_VAR = "GROUP_SELECT_THEME"


@dataclass(frozen=True)
class Theme:
    """Visual theme for grouped multi-select prompts.

    All colors use Rich markup format (e.g., "green", "bold cyan", "dim").
    An empty color means "no styling".

    Attributes:
        name: Theme identifier used by get_theme().
        prompt_color: Color for the prompt text.
        active_color: Color for the focused row.
        checked_color: Color for checked boxes and the all-selected indicator.
        partial_color: Color for the partially-selected group indicator.
        unchecked_color: Color for unchecked boxes.
        dim_color: Color for disabled rows and secondary text.
        warning_color: Color for warning messages.

        cursor_icon: Prefix for the focused row.
        checked_icon: Checkbox for a checked item.
        unchecked_icon: Checkbox for an unchecked item.
        group_all_icon: Header indicator when every item is checked.
        group_partial_icon: Header indicator when some items are checked.
        group_none_icon: Header indicator when no item is checked.
        warning_icon: Marker in front of warning messages.
        item_indent: Spaces between the cursor column and an item row.
    """

    name: str = "colorful"

    # Colors
    prompt_color: str = "bold"
    active_color: str = "cyan"
    checked_color: str = "green"
    partial_color: str = "yellow"
    unchecked_color: str = "dim"
    dim_color: str = "dim"
    warning_color: str = "yellow"

    # Icons
    cursor_icon: str = "›"
    checked_icon: str = "✔"
    unchecked_icon: str = "⬚"
    group_all_icon: str = "■"
    group_partial_icon: str = "◧"
    group_none_icon: str = "□"
    warning_icon: str = "⚠"

    # Layout
    item_indent: int = 2

    def style(self, color: str, text: str) -> str:
        """Wrap already-escaped text in a Rich markup tag."""
        if not color:
            return text
        return f"[{color}]{text}[/{color}]"


DEFAULT_THEME = Theme()

SIMPLE_THEME = Theme(
    name="simple",
    prompt_color="",
    active_color="",
    checked_color="",
    partial_color="",
    unchecked_color="",
    dim_color="",
    warning_color="",
    cursor_icon=">",
    checked_icon="[x]",
    unchecked_icon="[ ]",
    group_all_icon="[x]",
    group_partial_icon="[-]",
    group_none_icon="[ ]",
    warning_icon="!",
)

_THEMES: dict[str, Theme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    SIMPLE_THEME.name: SIMPLE_THEME,
}


def _normalize_theme_key(value: str) -> str:
    return value.strip().lower().replace("_", "-")


def get_theme(name: str | None = None) -> Theme:
    """Look up a theme by name, falling back to GROUP_SELECT_THEME then the default.

    Unknown names resolve to DEFAULT_THEME.
    """
    if name is None:
        name = os.environ.get(THEME_ENV_VAR)
    if not name:
        return DEFAULT_THEME
    return _THEMES.get(_normalize_theme_key(name), DEFAULT_THEME)


def theme_names() -> list[str]:
    return sorted(_THEMES)
