"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from duochess.core import Board, Square, legal_destinations

    board = Board.initial()
    pawn = board.piece_at(Square(6, 4))
    print(legal_destinations(board, Square(6, 4), pawn))
"""

from duochess.core.board import BACK_RANK, Board, BoardRows
from duochess.core.enums import Color, PieceType
from duochess.core.move_rules import legal_destinations
from duochess.core.piece import Piece
from duochess.core.types import (
    BOARD_SIZE,
    Square,
    all_squares,
    parse_square,
    try_square,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "BOARD_SIZE",
    "Square",
    "all_squares",
    "parse_square",
    "try_square",
    # Domain objects
    "BACK_RANK",
    "Board",
    "BoardRows",
    "Piece",
    # Rules
    "legal_destinations",
]
