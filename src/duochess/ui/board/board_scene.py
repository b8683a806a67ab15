"""BoardScene — QGraphicsScene that draws the board and forwards clicks."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from duochess.core.types import BOARD_SIZE, Square, all_squares
from duochess.game.controller import GameController
from duochess.ui.geometry import TILE, pixel_to_square, square_to_pixel
from duochess.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders squares, legal-destination overlays, piece labels and the
    selection outline from a :class:`GameController`'s read-only views.

    Left-button presses on the board are forwarded to the controller.
    """

    TILE = TILE
    LABEL_OFFSET = 20  # px from the square's top-left corner

    def __init__(
        self, controller: GameController, parent: QObject | None = None
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._theme = BoardTheme.default()
        self._show_legal_moves = True
        self._show_labels = True

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._legal_dot_items: list[QGraphicsRectItem] = []
        self._label_items: dict[Square, QGraphicsSimpleTextItem] = {}
        self._selection_item: QGraphicsRectItem | None = None

        self._draw_board()
        self.refresh()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self.refresh()

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-destination overlays."""
        self._show_legal_moves = visible
        self.refresh()

    def set_show_labels(self, visible: bool) -> None:
        """Show or hide the two-letter piece labels."""
        self._show_labels = visible
        for item in self._label_items.values():
            item.setVisible(visible)

    def refresh(self) -> None:
        """Redraw every layer that depends on game state."""
        self._sync_labels()
        self._sync_highlights()

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()

        t = self.TILE
        for sq in all_squares():
            x, y = square_to_pixel(sq, t)
            rect = QGraphicsRectItem(x, y, t, t)
            rect.setBrush(QBrush(self._square_color(sq)))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    def _square_color(self, sq: Square) -> QColor:
        if (sq.row + sq.col) % 2 == 0:
            return self._theme.light_square
        return self._theme.dark_square

    def _sync_labels(self) -> None:
        """Re-create all label items from the current board view."""
        for item in self._label_items.values():
            self.removeItem(item)
        self._label_items.clear()

        t = self.TILE
        font = QFont()
        font.setPixelSize(max(10, t // 4))
        font.setBold(True)

        for row_idx, row in enumerate(self._controller.current_board_view()):
            for col_idx, piece in enumerate(row):
                if piece is None:
                    continue
                sq = Square(row_idx, col_idx)
                txt = QGraphicsSimpleTextItem(piece.label)
                txt.setFont(font)
                is_light = (row_idx + col_idx) % 2 == 0
                txt.setBrush(
                    QBrush(
                        self._theme.label_on_light
                        if is_light
                        else self._theme.label_on_dark
                    )
                )
                x, y = square_to_pixel(sq, t)
                txt.setPos(x + self.LABEL_OFFSET, y + self.LABEL_OFFSET)
                txt.setZValue(1)
                txt.setVisible(self._show_labels)
                self.addItem(txt)
                self._label_items[sq] = txt

    # ── Selection / highlights ───────────────────────────────────────────

    def _sync_highlights(self) -> None:
        self._clear_highlights()

        if self._show_legal_moves:
            for sq in self._controller.current_legal_destinations():
                dot = self._make_highlight(sq, self._theme.highlight_to)
                self._legal_dot_items.append(dot)

        selected = self._controller.current_selection()
        if selected is not None:
            x, y = square_to_pixel(selected, self.TILE)
            outline = QGraphicsRectItem(x, y, self.TILE, self.TILE)
            outline.setBrush(QBrush(Qt.BrushStyle.NoBrush))
            outline.setPen(
                QPen(self._theme.selection_outline, self._theme.outline_width)
            )
            outline.setZValue(2)
            self.addItem(outline)
            self._selection_item = outline

    def _clear_highlights(self) -> None:
        for item in self._legal_dot_items:
            self.removeItem(item)
        self._legal_dot_items.clear()
        if self._selection_item is not None:
            self.removeItem(self._selection_item)
            self._selection_item = None

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        x, y = square_to_pixel(sq, t)
        rect = QGraphicsRectItem(x, y, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.5)
        self.addItem(rect)
        return rect

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is not None and self._handle_press(event.button(), event.scenePos()):
            event.accept()
            return
        super().mousePressEvent(event)

    def _handle_press(self, button: Qt.MouseButton, pos: QPointF) -> bool:
        """Forward a primary-button press on the board; report if handled."""
        if button != Qt.MouseButton.LeftButton:
            return False
        sq = pixel_to_square(pos.x(), pos.y(), self.TILE)
        if sq is None:
            return False
        self._controller.handle_square_clicked(sq)
        self.refresh()
        return True
