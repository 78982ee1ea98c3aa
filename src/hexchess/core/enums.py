"""Core enumerations for the hex chess domain."""

from __future__ import annotations

from enum import IntEnum


class Team(IntEnum):
    """Side of the board."""

    WHITE = 0
    BLACK = 1

    def flip(self) -> Team:
        return Team(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class Name(IntEnum):
    """Piece kinds."""

    KING = 0
    QUEEN = 1
    BISHOP = 2
    KNIGHT = 3
    ROOK = 4
    PAWN = 5

    def __str__(self) -> str:
        return self.name.lower()


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3
