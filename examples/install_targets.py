#!/usr/bin/env python3
"""Pick installation targets grouped by tool."""

from group_select import DisabledItem, GroupMultiSelect, NormalItem, WarningItem

GROUP_NAMES = ["claude-code", "opencode", "goose"]
ITEMS = [
    ["work (active)", "personal"],
    ["default (active)", "experiments"],
    ["main", "legacy"],
]


def main():
    selections = (
        GroupMultiSelect()
        .with_prompt("Select installation targets")
        .group(GROUP_NAMES[0], ITEMS[0])
        .group_with_states(
            GROUP_NAMES[1],
            [(ITEMS[1][0], NormalItem()), (ITEMS[1][1], WarningItem("unstable"))],
        )
        .group_with_states(
            GROUP_NAMES[2],
            [(ITEMS[2][0], NormalItem()), (ITEMS[2][1], DisabledItem("not installed"))],
        )
        .with_defaults([[True, False], [True, False], [False]])
        .interact_opt()
    )

    if selections is None:
        print("Cancelled")
        return

    print(f"\nSelected indices per group: {selections}")
    for name, items, indices in zip(GROUP_NAMES, ITEMS, selections):
        if indices:
            print(f"{name}: {[items[i] for i in indices]}")


if __name__ == "__main__":
    main()
