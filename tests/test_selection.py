"""Tests for checked-state seeding, toggling and result building."""

from group_select import Cursor, DisabledItem, Group, GroupState, NormalItem, SelectionState


class TestSeeding:
    def test_missing_defaults_are_unchecked(self, two_groups):
        state = SelectionState(two_groups)
        assert state.checked == [[False, False], [False]]

    def test_partial_and_extra_defaults(self, two_groups):
        state = SelectionState(two_groups, [[True], [False, True, True], [True]])
        assert state.checked == [[True, False], [False]]

    def test_shape_mirrors_groups(self, two_groups):
        state = SelectionState(two_groups + [Group("E", [])], [[True, True]])
        assert [len(row) for row in state.checked] == [2, 1, 0]


class TestToggle:
    def test_header_toggles_whole_group(self, two_groups):
        state = SelectionState(two_groups)
        state.toggle(Cursor(0))
        assert state.checked == [[True, True], [False]]
        state.toggle(Cursor(0))
        assert state.checked == [[False, False], [False]]

    def test_header_checks_all_when_partial(self, two_groups):
        state = SelectionState(two_groups, [[True, False]])
        state.toggle(Cursor(0))
        assert state.checked[0] == [True, True]

    def test_header_skips_disabled(self, mixed_group):
        state = SelectionState([mixed_group])
        state.toggle(Cursor(0))
        assert state.checked == [[True, False, True]]

    def test_header_leaves_seeded_disabled_item(self, mixed_group):
        state = SelectionState([mixed_group], [[False, True, False]])
        state.toggle(Cursor(0))
        assert state.checked == [[True, True, True]]
        state.toggle(Cursor(0))
        assert state.checked == [[False, True, False]]

    def test_header_on_empty_group_is_noop(self):
        state = SelectionState([Group("E", [])])
        state.toggle(Cursor(0))
        assert state.checked == [[]]

    def test_header_on_all_disabled_group_is_noop(self):
        group = Group.with_states("D", [("d1", DisabledItem("x"))])
        state = SelectionState([group])
        state.toggle(Cursor(0))
        assert state.checked == [[False]]

    def test_item_toggle_is_isolated(self, two_groups):
        state = SelectionState(two_groups)
        state.toggle(Cursor(0, 1))
        assert state.checked == [[False, True], [False]]

    def test_disabled_item_cannot_toggle(self):
        group = Group.with_states("A", [("a1", NormalItem()), ("a2", DisabledItem("test"))])
        state = SelectionState([group], [[False, True]])
        state.toggle(Cursor(0, 1))
        assert state.checked == [[False, True]]

    def test_header_toggle_twice_restores_selectable_items(self, mixed_group):
        state = SelectionState([mixed_group], [[True, False, True]])
        before = [row[:] for row in state.checked]
        state.toggle(Cursor(0))
        state.toggle(Cursor(0))
        assert state.checked == before


class TestToggleAll:
    def test_checks_then_unchecks_everything(self):
        groups = [Group("A", ["a1", "a2"]), Group("B", ["b1", "b2"])]
        state = SelectionState(groups, [[True, False], [False, False]])
        assert state.toggle_all() is True
        assert state.checked == [[True, True], [True, True]]
        assert state.toggle_all() is False
        assert state.checked == [[False, False], [False, False]]

    def test_disabled_items_untouched(self, mixed_group):
        state = SelectionState([mixed_group, Group("B", ["b1"])])
        state.toggle_all()
        assert state.checked == [[True, False, True], [True]]
        state.toggle_all()
        assert state.checked == [[False, False, False], [False]]


class TestResults:
    def test_selected_indices(self, two_groups):
        state = SelectionState(two_groups, [[False, True], [True]])
        assert state.selected_indices() == [[1], [0]]

    def test_selected_texts_in_order(self, two_groups):
        state = SelectionState(two_groups, [[True, True], [True]])
        assert state.selected_texts() == ["a1", "a2", "b1"]

    def test_group_state(self, two_groups):
        state = SelectionState(two_groups, [[True, False], [True]])
        assert state.group_state(0) is GroupState.PARTIAL
        assert state.group_state(1) is GroupState.ALL
