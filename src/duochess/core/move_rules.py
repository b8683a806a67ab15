"""Destination-square generation per piece kind.

Movement is geometric only: board edges and same-color blocking are
respected, but moves are never filtered for king safety.
"""

from __future__ import annotations

from collections.abc import Callable

from duochess.core.board import Board
from duochess.core.enums import Color, PieceType
from duochess.core.piece import Piece
from duochess.core.types import Square

Offsets = tuple[tuple[int, int], ...]

# (d_row, d_col) tables; their order fixes the order of generated squares.
ROOK_DIRS: Offsets = ((0, 1), (1, 0), (0, -1), (-1, 0))
BISHOP_DIRS: Offsets = ((-1, -1), (-1, 1), (1, -1), (1, 1))

KNIGHT_OFFSETS: Offsets = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: Offsets = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

_PAWN_CAPTURE_COLS: tuple[int, ...] = (-1, 1)


# -- Pattern generators ----------------------------------------------------


def _gen_pawn(board: Board, sq: Square, color: Color, moves: list[Square]) -> None:
    step = color.pawn_direction

    one_step = sq.offset(step, 0)
    if one_step is not None and board.is_empty(one_step):
        moves.append(one_step)
        if sq.row == color.pawn_start_row:
            two_step = one_step.offset(step, 0)
            if two_step is not None and board.is_empty(two_step):
                moves.append(two_step)

    for d_col in _PAWN_CAPTURE_COLS:
        cap_sq = sq.offset(step, d_col)
        if cap_sq is None:
            continue
        target = board[cap_sq]
        if target is not None and target.color != color:
            moves.append(cap_sq)


def _gen_sliding(
    board: Board,
    sq: Square,
    color: Color,
    directions: Offsets,
    moves: list[Square],
) -> None:
    for d_row, d_col in directions:
        to_sq = sq.offset(d_row, d_col)
        while to_sq is not None:
            target = board[to_sq]
            if target is None:
                moves.append(to_sq)
                to_sq = to_sq.offset(d_row, d_col)
                continue
            if target.color != color:
                moves.append(to_sq)
            break


def _gen_jumps(
    board: Board,
    sq: Square,
    color: Color,
    offsets: Offsets,
    moves: list[Square],
) -> None:
    for d_row, d_col in offsets:
        to_sq = sq.offset(d_row, d_col)
        if to_sq is None:
            continue
        target = board[to_sq]
        if target is None or target.color != color:
            moves.append(to_sq)


# -- Dispatch ----------------------------------------------------------------

_Generator = Callable[[Board, Square, Color, list[Square]], None]


def _gen_rook(board: Board, sq: Square, color: Color, moves: list[Square]) -> None:
    _gen_sliding(board, sq, color, ROOK_DIRS, moves)


def _gen_bishop(board: Board, sq: Square, color: Color, moves: list[Square]) -> None:
    _gen_sliding(board, sq, color, BISHOP_DIRS, moves)


def _gen_queen(board: Board, sq: Square, color: Color, moves: list[Square]) -> None:
    _gen_sliding(board, sq, color, ROOK_DIRS, moves)
    _gen_sliding(board, sq, color, BISHOP_DIRS, moves)


def _gen_knight(board: Board, sq: Square, color: Color, moves: list[Square]) -> None:
    _gen_jumps(board, sq, color, KNIGHT_OFFSETS, moves)


def _gen_king(board: Board, sq: Square, color: Color, moves: list[Square]) -> None:
    _gen_jumps(board, sq, color, KING_OFFSETS, moves)


_GENERATORS: dict[PieceType, _Generator] = {
    PieceType.PAWN: _gen_pawn,
    PieceType.ROOK: _gen_rook,
    PieceType.KNIGHT: _gen_knight,
    PieceType.BISHOP: _gen_bishop,
    PieceType.QUEEN: _gen_queen,
    PieceType.KING: _gen_king,
}


def legal_destinations(board: Board, origin: Square, piece: Piece) -> list[Square]:
    """Squares *piece* standing on *origin* may reach on *board*.

    The board is only read; *piece* need not actually stand on *origin*.
    """
    moves: list[Square] = []
    _GENERATORS[piece.piece_type](board, origin, piece.color, moves)
    return moves
