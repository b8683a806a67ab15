"""MainWindow — top-level window hosting the board and a status line."""

from __future__ import annotations

import logging

from PyQt6.QtWidgets import QLabel, QMainWindow, QStatusBar

from duochess.core.enums import Color
from duochess.core.piece import Piece
from duochess.core.types import Square
from duochess.game.controller import GameController
from duochess.ui.board.board_view import BoardView
from duochess.ui.settings import AppSettings
from duochess.ui.styles.theme import BoardTheme, theme_by_name

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window for duochess."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        controller: GameController | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("duochess")

        self._controller = controller if controller is not None else GameController()
        self._settings = settings if settings is not None else AppSettings()
        self._last_move_text = ""

        self._setup_ui()
        self._connect_game_events()
        self._apply_settings()
        self._update_status()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        self._board_view = BoardView(self._controller)
        self.setCentralWidget(self._board_view)
        self.resize(660, 690)

        self._status_label = QLabel()
        status = QStatusBar()
        status.addWidget(self._status_label, stretch=1)
        self.setStatusBar(status)

    def _connect_game_events(self) -> None:
        events = self._controller.events
        events.on_move.append(self._on_move)
        events.on_turn_changed.append(self._on_turn_changed)

    def _apply_settings(self) -> None:
        s = self._settings
        scene = self._board_view.board_scene

        theme = theme_by_name(s.board_theme)
        if theme is None:
            _LOGGER.warning("Unknown board theme %r, using Classic", s.board_theme)
            theme = BoardTheme.default()
        scene.set_theme(theme)
        scene.set_show_legal_moves(s.show_legal_moves)
        scene.set_show_labels(s.show_labels)

    # ── Game event handlers ──────────────────────────────────────────────

    def _on_move(
        self, origin: Square, destination: Square, piece: Piece, captured: Piece | None
    ) -> None:
        sep = "x" if captured is not None else "-"
        self._last_move_text = f"{piece.label} {origin}{sep}{destination}"

    def _on_turn_changed(self, _color: Color) -> None:
        self._update_status()

    def _update_status(self) -> None:
        side = self._controller.side_to_move
        text = f"{str(side).capitalize()} to move"
        if self._last_move_text:
            text += f"  ·  last: {self._last_move_text}"
        self._status_label.setText(text)

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def status_text(self) -> str:
        return self._status_label.text()
