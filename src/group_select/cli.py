"""Command line front end: pick items from groups described in a YAML file.

File format::

    - label: claude-code
      items:
        - work (active)
        - text: personal
          checked: true
    - label: goose
      items:
        - text: legacy
          disabled: not installed
        - text: main
          warning: config is outdated
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import termios
from pathlib import Path
from typing import Any

import yaml

from . import __version__
from .components import DisabledItem, Group, ItemState, NormalItem, WarningItem
from .errors import GroupFileError, GroupSelectError
from .menu import GroupMultiSelect
from .themes import get_theme, theme_names

logger = logging.getLogger(__name__)

EXIT_CANCELLED = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130


def _parse_item(raw: Any, where: str) -> tuple[str, ItemState, bool]:
    """Return (text, state, checked) for one item entry."""
    if isinstance(raw, (str, int, float)):
        return str(raw), NormalItem(), False
    if not isinstance(raw, dict):
        raise GroupFileError(f"{where}: expected a string or a mapping")

    if "text" not in raw:
        raise GroupFileError(f"{where}: missing 'text'")
    text = str(raw["text"])

    if "disabled" in raw and "warning" in raw:
        raise GroupFileError(f"{where}: 'disabled' and 'warning' are mutually exclusive")
    if "disabled" in raw:
        state: ItemState = DisabledItem(reason=str(raw["disabled"] or ""))
    elif "warning" in raw:
        state = WarningItem(message=str(raw["warning"] or ""))
    else:
        state = NormalItem()

    return text, state, bool(raw.get("checked", False))


def parse_groups(data: Any) -> tuple[list[Group], list[list[bool]]]:
    """Build groups and default flags from parsed YAML data.

    Raises:
        GroupFileError: If the structure does not match the file format.
    """
    if not isinstance(data, list) or not data:
        raise GroupFileError("expected a non-empty list of groups")

    groups: list[Group] = []
    defaults: list[list[bool]] = []
    for gi, entry in enumerate(data):
        where = f"group {gi + 1}"
        if not isinstance(entry, dict) or "label" not in entry:
            raise GroupFileError(f"{where}: expected a mapping with a 'label'")
        raw_items = entry.get("items") or []
        if not isinstance(raw_items, list):
            raise GroupFileError(f"{where}: 'items' must be a list")

        pairs: list[tuple[str, ItemState]] = []
        checked: list[bool] = []
        for ii, raw in enumerate(raw_items):
            text, state, flag = _parse_item(raw, f"{where}, item {ii + 1}")
            pairs.append((text, state))
            checked.append(flag)

        groups.append(Group.with_states(str(entry["label"]), pairs))
        defaults.append(checked)

    return groups, defaults


def load_groups(source: str) -> tuple[list[Group], list[list[bool]]]:
    """Read a group file from a path, or stdin when ``source`` is "-"."""
    try:
        content = sys.stdin.read() if source == "-" else Path(source).read_text()
    except OSError as e:
        raise GroupFileError(f"cannot read {source}: {e}") from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise GroupFileError(f"invalid YAML in {source}: {e}") from e

    return parse_groups(data)


def format_selection(groups: list[Group], selections: list[list[int]]) -> list[str]:
    """Return one "label: item, item" line per group with a selection."""
    lines = []
    for group, indices in zip(groups, selections):
        if indices:
            names = ", ".join(group.item_text(i) for i in indices)
            lines.append(f"{group.label}: {names}")
    return lines


def ensure_tty_stdin() -> bool:
    """Make sure key presses can be read.

    readchar reads from stdin, so when stdin is a pipe (for example the group
    file itself) it is swapped for the controlling terminal.

    Returns:
        False if no terminal is available.
    """
    if sys.stdin is not None and sys.stdin.isatty():
        return True
    try:
        sys.stdin = open("/dev/tty")
    except OSError as e:
        logger.debug("No controlling terminal: %s", e)
        return False
    return True


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="group-select",
        description="Interactively select items from labeled groups",
        epilog=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"group-select {__version__}")
    parser.add_argument("file", help="YAML file describing the groups ('-' for stdin)")
    parser.add_argument("--prompt", default="", help="Prompt text shown above the list")
    parser.add_argument("--max-rows", type=int, help="Maximum number of visible rows")
    parser.add_argument("--allow-cancel", action="store_true", help="Let Esc/q cancel the prompt")
    parser.add_argument("--no-clear", dest="clear", action="store_false",
                        help="Leave the list on screen when done")
    parser.add_argument("--no-report", dest="report", action="store_false",
                        help="Do not print a summary line after selecting")
    parser.add_argument("--theme", choices=theme_names(), help="Visual theme")
    parser.add_argument("--json", action="store_true", help="Print selected indices as JSON")
    parser.add_argument("--log-file", help="Write debug logs to this file")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

    if args.max_rows is not None and args.max_rows < 1:
        parser.error("--max-rows must be at least 1")

    try:
        groups, defaults = load_groups(args.file)
    except GroupFileError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE

    prompt = GroupMultiSelect().with_prompt(args.prompt).with_defaults(defaults)
    prompt.with_clear(args.clear).with_report(args.report)
    for group in groups:
        prompt.add_group(group)
    if args.max_rows is not None:
        prompt.with_max_length(args.max_rows)
    if args.theme:
        prompt.with_theme(get_theme(args.theme))

    if not ensure_tty_stdin():
        print("Error: no terminal available to read key presses from", file=sys.stderr)
        return EXIT_USAGE

    try:
        if args.allow_cancel:
            selections = prompt.interact_opt()
        else:
            selections = prompt.interact()
    except KeyboardInterrupt:
        print(file=sys.stderr)
        return EXIT_INTERRUPTED
    except GroupSelectError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE
    except (termios.error, OSError) as e:
        print(f"Error: terminal I/O failed: {e}", file=sys.stderr)
        return EXIT_USAGE

    if selections is None:
        logger.debug("Prompt cancelled")
        return EXIT_CANCELLED

    if args.json:
        print(json.dumps(selections))
    else:
        for line in format_selection(groups, selections):
            print(line)
    return 0
