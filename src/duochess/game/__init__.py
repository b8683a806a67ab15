"""Game management layer — state and the click-driven controller.

Quick start::

    from duochess.core import Square
    from duochess.game import GameController

    ctrl = GameController()
    ctrl.handle_square_clicked(Square(6, 4))  # select the e2 pawn
    ctrl.handle_square_clicked(Square(4, 4))  # push it to e4
"""

from duochess.game.controller import GameController, GameEvents
from duochess.game.state import GameState, Selection

__all__ = [
    "GameController",
    "GameEvents",
    "GameState",
    "Selection",
]
