"""Game management layer - the turn-alternating session over a board.

Quick start::

    from hexchess.core import Coord
    from hexchess.game import Game

    game = Game()
    game.move_piece(Coord(0, -1), Coord(0, 0))
    print(game)
"""

from hexchess.game.errors import (
    GameError,
    GameOverError,
    IllegalMoveError,
    PieceError,
    TurnError,
)
from hexchess.game.game import Game

__all__ = [
    "Game",
    # Errors
    "GameError",
    "GameOverError",
    "IllegalMoveError",
    "PieceError",
    "TurnError",
]
