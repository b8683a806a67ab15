"""Tests for Square and coordinate helpers."""

import pytest

from duochess.core.types import Square, all_squares, parse_square, try_square


class TestSquare:
    def test_equality_by_coordinates(self) -> None:
        assert Square(3, 5) == Square(3, 5)
        assert Square(3, 5) != Square(5, 3)

    def test_hashable(self) -> None:
        assert len({Square(0, 0), Square(0, 0), Square(7, 7)}) == 2

    @pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (8, 0), (0, 8)])
    def test_out_of_range_rejected(self, row: int, col: int) -> None:
        with pytest.raises(ValueError):
            Square(row, col)

    def test_offset_on_board(self) -> None:
        assert Square(4, 4).offset(-1, 2) == Square(3, 6)

    def test_offset_off_board(self) -> None:
        assert Square(0, 0).offset(-1, 0) is None
        assert Square(7, 7).offset(0, 1) is None

    def test_name(self) -> None:
        assert Square(6, 4).name == "e2"
        assert Square(0, 0).name == "a8"
        assert Square(7, 7).name == "h1"
        assert str(Square(4, 4)) == "e4"


class TestHelpers:
    def test_try_square(self) -> None:
        assert try_square(2, 3) == Square(2, 3)
        assert try_square(8, 3) is None
        assert try_square(2, -1) is None

    def test_parse_square(self) -> None:
        assert parse_square("e2") == Square(6, 4)
        assert parse_square("a8") == Square(0, 0)

    @pytest.mark.parametrize("name", ["", "e", "e9", "i1", "e22"])
    def test_parse_square_invalid(self, name: str) -> None:
        with pytest.raises(ValueError):
            parse_square(name)

    def test_parse_inverts_name(self) -> None:
        for sq in all_squares():
            assert parse_square(sq.name) == sq

    def test_all_squares_row_major(self) -> None:
        squares = all_squares()
        assert len(squares) == 64
        assert squares[0] == Square(0, 0)
        assert squares[9] == Square(1, 1)
