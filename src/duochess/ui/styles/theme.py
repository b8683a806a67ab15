"""Visual theme constants and QSS styles for duochess."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_to: QColor  # legal destination overlay
    selection_outline: QColor  # selected piece origin
    label_on_light: QColor  # piece label text on light squares
    label_on_dark: QColor  # piece label text on dark squares
    outline_width: float = 3.0

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(255, 255, 255),
            dark_square=QColor(0, 0, 0),
            highlight_to=QColor(0, 255, 0, 77),  # green, 30 % alpha
            selection_outline=QColor(255, 0, 0),
            label_on_light=QColor(0, 0, 0),
            label_on_dark=QColor(255, 255, 255),
        )

    @classmethod
    def wood(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_to=QColor(0, 255, 0, 77),
            selection_outline=QColor(255, 0, 0),
            label_on_light=QColor(60, 40, 20),
            label_on_dark=QColor(250, 240, 225),
        )


THEMES = {
    "Classic": BoardTheme.default,
    "Wood": BoardTheme.wood,
}


def theme_by_name(name: str) -> BoardTheme | None:
    """Look up a theme by its settings name; ``None`` when unknown."""
    factory = THEMES.get(name)
    return factory() if factory is not None else None


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QStatusBar {
    background: #2b2b2b;
    color: #e0e0e0;
    font-size: 13px;
}
"""
