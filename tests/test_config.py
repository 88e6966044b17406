"""Tests for configuration defaults, themes and environment overrides."""

import pytest

from group_select import DEFAULT_THEME, SIMPLE_THEME, SelectConfig, get_theme


class TestSelectConfig:
    def test_defaults(self):
        config = SelectConfig()
        assert config.prompt == ""
        assert config.report is True
        assert config.clear is True
        assert config.max_length is None
        assert config.defaults == []

    def test_explicit_max_length_wins_over_env(self, monkeypatch):
        monkeypatch.setenv("GROUP_SELECT_MAX_ROWS", "3")
        assert SelectConfig(max_length=9).resolve_max_length() == 9

    def test_env_max_rows(self, monkeypatch):
        monkeypatch.setenv("GROUP_SELECT_MAX_ROWS", " 12 ")
        assert SelectConfig().resolve_max_length() == 12

    @pytest.mark.parametrize("raw", ["", "abc", "0", "-4"])
    def test_invalid_env_max_rows_ignored(self, monkeypatch, raw):
        monkeypatch.setenv("GROUP_SELECT_MAX_ROWS", raw)
        assert SelectConfig().resolve_max_length() is None

    def test_explicit_theme_wins_over_env(self, monkeypatch):
        monkeypatch.setenv("GROUP_SELECT_THEME", "simple")
        assert SelectConfig(theme=DEFAULT_THEME).resolve_theme() is DEFAULT_THEME

    def test_env_theme(self, monkeypatch):
        monkeypatch.setenv("GROUP_SELECT_THEME", "simple")
        assert SelectConfig().resolve_theme() is SIMPLE_THEME


class TestThemes:
    def test_lookup_by_name(self):
        assert get_theme("simple") is SIMPLE_THEME
        assert get_theme(" Colorful ") is DEFAULT_THEME

    def test_unknown_name_falls_back(self):
        assert get_theme("neon") is DEFAULT_THEME

    def test_no_name_no_env(self):
        assert get_theme() is DEFAULT_THEME

    def test_style_skips_empty_color(self):
        assert SIMPLE_THEME.style("", "x") == "x"
        assert DEFAULT_THEME.style("green", "x") == "[green]x[/green]"
