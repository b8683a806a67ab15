"""Tests for pixel/square mapping."""

import pytest

from duochess.core.types import Square
from duochess.ui.geometry import TILE, pixel_to_square, square_to_pixel


def test_tile_size() -> None:
    assert TILE == 80


@pytest.mark.parametrize(
    "x,y,expected",
    [
        (0, 0, Square(0, 0)),
        (79.9, 79.9, Square(0, 0)),
        (80, 0, Square(0, 1)),
        (330, 500, Square(6, 4)),
        (639, 639, Square(7, 7)),
    ],
)
def test_pixel_to_square(x: float, y: float, expected: Square) -> None:
    assert pixel_to_square(x, y) == expected


@pytest.mark.parametrize("x,y", [(640, 10), (10, 640), (-0.5, 10), (10, -1)])
def test_pixel_outside_board(x: float, y: float) -> None:
    assert pixel_to_square(x, y) is None


def test_square_to_pixel_round_trip() -> None:
    sq = Square(3, 5)
    x, y = square_to_pixel(sq)
    assert (x, y) == (400.0, 240.0)
    assert pixel_to_square(x + TILE / 2, y + TILE / 2) == sq


def test_custom_tile() -> None:
    assert pixel_to_square(50, 50, tile=40) == Square(1, 1)
