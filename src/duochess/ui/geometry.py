"""Pixel ↔ square mapping for a uniform 8x8 grid."""

from __future__ import annotations

import math

from duochess.core.types import Square, try_square

TILE = 80  # px per square


def pixel_to_square(x: float, y: float, tile: int = TILE) -> Square | None:
    """Scene position → board square, ``None`` outside the board."""
    return try_square(math.floor(y / tile), math.floor(x / tile))


def square_to_pixel(sq: Square, tile: int = TILE) -> tuple[float, float]:
    """Top-left corner of *sq* in scene coordinates."""
    return float(sq.col * tile), float(sq.row * tile)
