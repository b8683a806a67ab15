"""Game state — board contents, side to move, and the current selection."""

from __future__ import annotations

from dataclasses import dataclass, field

from duochess.core.board import Board
from duochess.core.enums import Color
from duochess.core.move_rules import legal_destinations
from duochess.core.piece import Piece
from duochess.core.types import Square


@dataclass(frozen=True, slots=True)
class Selection:
    """A selected origin square together with its cached destinations."""

    origin: Square
    destinations: tuple[Square, ...]

    def allows(self, sq: Square) -> bool:
        return sq in self.destinations


@dataclass
class GameState:
    """Mutable game data owned by a single controller.

    This is a pure data/logic class — no threading, no UI. A ``None``
    selection is the no-selection state.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE
    selection: Selection | None = None

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def selected_square(self) -> Square | None:
        return self.selection.origin if self.selection is not None else None

    @property
    def legal_destinations(self) -> tuple[Square, ...]:
        return self.selection.destinations if self.selection is not None else ()

    def owns(self, sq: Square) -> bool:
        """Whether *sq* holds a piece of the side to move."""
        piece = self.board[sq]
        return piece is not None and piece.color == self.side_to_move

    # ── Mutation ─────────────────────────────────────────────────────────

    def select(self, sq: Square) -> Selection:
        """Select the piece on *sq*, recomputing its destinations in full.

        Caller is responsible for checking the piece belongs to the side to move.
        """
        piece = self.board[sq]
        if piece is None:
            raise ValueError(f"No piece to select on {sq}")
        self.selection = Selection(sq, tuple(legal_destinations(self.board, sq, piece)))
        return self.selection

    def clear_selection(self) -> None:
        self.selection = None

    def apply_move(self, origin: Square, destination: Square) -> Piece | None:
        """Move the piece on *origin* to *destination* and pass the turn.

        Whatever stood on *destination* is overwritten and returned.
        Caller is responsible for the legality check.
        """
        board = self.board
        captured = board[destination]
        board[destination] = board[origin]
        board[origin] = None
        self.selection = None
        self.side_to_move = self.side_to_move.opposite
        return captured
