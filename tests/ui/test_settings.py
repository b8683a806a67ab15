"""Tests for AppSettings and logging bootstrap."""

import logging

import pytest

from duochess.ui.bootstrap import configure_logging
from duochess.ui.settings import AppSettings
from duochess.ui.styles.theme import BoardTheme, theme_by_name


class TestAppSettings:
    def test_defaults(self) -> None:
        s = AppSettings()
        assert s.board_theme == "Classic"
        assert s.show_legal_moves is True
        assert s.show_labels is True
        assert s.log_level == "WARNING"

    def test_from_empty_env(self) -> None:
        assert AppSettings.from_env({}) == AppSettings()

    def test_from_env(self) -> None:
        s = AppSettings.from_env(
            {
                "DUOCHESS_THEME": "Wood",
                "DUOCHESS_SHOW_MOVES": "off",
                "DUOCHESS_LOG_LEVEL": "debug",
            }
        )
        assert s.board_theme == "Wood"
        assert s.show_legal_moves is False
        assert s.log_level == "DEBUG"

    @pytest.mark.parametrize("raw", ["1", "TRUE", "yes", " On "])
    def test_truthy_values(self, raw: str) -> None:
        assert AppSettings.from_env({"DUOCHESS_SHOW_MOVES": raw}).show_legal_moves

    def test_invalid_bool_keeps_default(self, caplog: pytest.LogCaptureFixture) -> None:
        s = AppSettings.from_env({"DUOCHESS_SHOW_MOVES": "maybe"})
        assert s.show_legal_moves is True
        assert "DUOCHESS_SHOW_MOVES" in caplog.text


class TestThemes:
    def test_lookup(self) -> None:
        assert theme_by_name("Classic") == BoardTheme.default()
        assert theme_by_name("Wood") == BoardTheme.wood()
        assert theme_by_name("Neon") is None

    def test_classic_colors(self) -> None:
        theme = BoardTheme.default()
        assert theme.light_square.name() == "#ffffff"
        assert theme.dark_square.name() == "#000000"
        assert theme.highlight_to.green() == 255
        assert theme.highlight_to.alpha() == 77
        assert theme.selection_outline.red() == 255
        assert theme.outline_width == 3.0


class TestConfigureLogging:
    def test_unknown_level_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            configure_logging("chatty")
        assert "Unknown log level" in caplog.text

    @pytest.mark.parametrize("name", ["debug", "Info", "WARNING", "critical"])
    def test_level_names_case_insensitive(
        self, name: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING):
            configure_logging(name)
        assert "Unknown log level" not in caplog.text

    def test_known_level_is_silent(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            configure_logging("info")
        assert caplog.text == ""
