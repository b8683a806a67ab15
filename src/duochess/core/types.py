"""Square value type and coordinate helpers.

Board layout (row-major, as seen from White's side):
    row 0 = Black's back rank (a8 … h8)
    row 7 = White's back rank (a1 … h1)
    column 0 = file a, column 7 = file h
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8

_FILES = "abcdefgh"


def _on_board(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


@dataclass(frozen=True, slots=True)
class Square:
    """Immutable (row, column) coordinate on the 8×8 grid."""

    row: int
    col: int

    def __post_init__(self) -> None:
        if not _on_board(self.row, self.col):
            raise ValueError(f"Square out of range: ({self.row}, {self.col})")

    def offset(self, d_row: int, d_col: int) -> Square | None:
        """Neighbouring square shifted by (*d_row*, *d_col*), or ``None`` off-board."""
        return try_square(self.row + d_row, self.col + d_col)

    @property
    def name(self) -> str:
        """Algebraic name, e.g. ``Square(6, 4).name == 'e2'``."""
        return f"{_FILES[self.col]}{BOARD_SIZE - self.row}"

    def __str__(self) -> str:
        return self.name


def try_square(row: int, col: int) -> Square | None:
    """Build a square at the input boundary; ``None`` when out of range."""
    if not _on_board(row, col):
        return None
    return Square(row, col)


def parse_square(name: str) -> Square:
    """Parse an algebraic square name, e.g. ``'e2'`` → ``Square(6, 4)``."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(BOARD_SIZE - int(name[1]), _FILES.index(name[0]))


def all_squares() -> list[Square]:
    """All 64 squares in row-major order."""
    return [Square(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)]
