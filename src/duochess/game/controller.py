"""GameController — turns square clicks into selections and moves.

Owns the :class:`GameState` exclusively; renderers read it through the
``current_*`` views and subscribe to :class:`GameEvents`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from duochess.core.board import BoardRows
from duochess.core.enums import Color
from duochess.core.piece import Piece
from duochess.core.types import Square
from duochess.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

SelectionCallback = Callable[[Square | None, tuple[Square, ...]], None]
# origin, destination, moved piece, captured piece
MoveCallback = Callable[[Square, Square, Piece, Piece | None], None]
TurnCallback = Callable[[Color], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)
    on_turn_changed: list[TurnCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Click-driven selection / move state machine.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread); each click is handled to completion.
    """

    __slots__ = ("_state", "events")

    def __init__(self, state: GameState | None = None) -> None:
        self._state = state if state is not None else GameState()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return self._state.side_to_move

    # ── Read-only views ──────────────────────────────────────────────────

    def current_board_view(self) -> BoardRows:
        return self._state.board.rows()

    def current_selection(self) -> Square | None:
        return self._state.selected_square

    def current_legal_destinations(self) -> tuple[Square, ...]:
        return self._state.legal_destinations

    # ── Input ────────────────────────────────────────────────────────────

    def handle_square_clicked(self, sq: Square) -> None:
        """Advance the state machine for a click on *sq*."""
        state = self._state
        selection = state.selection

        if selection is not None and selection.allows(sq):
            self._execute_move(selection.origin, sq)
            return

        if state.owns(sq):
            new_selection = state.select(sq)
            _LOGGER.debug(
                "Selected %s: %d destination(s)", sq, len(new_selection.destinations)
            )
            self._emit_selection()
            return

        if selection is not None:
            state.clear_selection()
            _LOGGER.debug("Selection %s cleared by click on %s", selection.origin, sq)
            self._emit_selection()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _execute_move(self, origin: Square, destination: Square) -> None:
        state = self._state
        piece = state.board[origin]
        if piece is None:
            raise RuntimeError(f"Selected square {origin} is empty")

        captured = state.apply_move(origin, destination)
        if captured is not None:
            _LOGGER.debug(
                "%s captured %s on %s", piece.label, captured.label, destination
            )
        _LOGGER.debug("Moved %s %s-%s", piece.label, origin, destination)

        for cb in self.events.on_move:
            cb(origin, destination, piece, captured)
        self._emit_selection()
        for turn_cb in self.events.on_turn_changed:
            turn_cb(state.side_to_move)

    def _emit_selection(self) -> None:
        selected = self._state.selected_square
        destinations = self._state.legal_destinations
        for cb in self.events.on_selection_changed:
            cb(selected, destinations)
