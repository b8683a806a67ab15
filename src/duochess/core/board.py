"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from duochess.core.enums import Color, PieceType
from duochess.core.piece import Piece
from duochess.core.types import BOARD_SIZE, Square

BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

BoardRows = tuple[tuple[Piece | None, ...], ...]


class Board:
    """Mutable 8x8 grid; each cell is empty (``None``) or holds a :class:`Piece`."""

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def piece_at(self, sq: Square) -> Piece | None:
        return self._grid[sq.row][sq.col]

    def place(self, sq: Square, piece: Piece | None) -> None:
        """Overwrite *sq* unconditionally (``None`` empties it)."""
        self._grid[sq.row][sq.col] = piece

    __getitem__ = piece_at
    __setitem__ = place

    def is_empty(self, sq: Square) -> bool:
        return self._grid[sq.row][sq.col] is None

    def rows(self) -> BoardRows:
        """Read-only snapshot of the grid, row 0 first."""
        return tuple(tuple(row) for row in self._grid)

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        """Independent grid copy; used to compare boards before and after a read."""
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        return b

    def clear(self) -> None:
        self._grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    def initial_setup(self) -> None:
        """Reset to the standard starting arrangement."""
        self.clear()
        for col in range(BOARD_SIZE):
            self._grid[1][col] = Piece(Color.BLACK, PieceType.PAWN)
            self._grid[6][col] = Piece(Color.WHITE, PieceType.PAWN)

        for col, pt in enumerate(BACK_RANK):
            self._grid[0][col] = Piece(Color.BLACK, pt)
            self._grid[7][col] = Piece(Color.WHITE, pt)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        b.initial_setup()
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        """Cell-by-cell comparison, mainly for test assertions."""
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        return "\n".join(
            " ".join(str(p) if p else "." for p in row) for row in self._grid
        )
