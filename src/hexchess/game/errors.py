"""Game-session exceptions.  Board errors are chained as ``__cause__``."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hexchess.core.errors import HexChessError

if TYPE_CHECKING:
    from hexchess.core.coord import Coord
    from hexchess.core.enums import Team
    from hexchess.core.errors import MoveError


class GameError(HexChessError):
    """Base class for errors raised by :class:`~hexchess.game.Game`."""


class PieceError(GameError):
    """The requested source cell is empty."""

    def __init__(self, coord: Coord) -> None:
        super().__init__(f"No Piece at position {coord}")
        self.coord = coord


class TurnError(GameError):
    """A piece of the side not to move was asked to move."""

    def __init__(self, given: Team, real: Team) -> None:
        super().__init__(f"wrong turn - expected {real!s} but was given {given!s}")
        self.given = given
        self.real = real


class IllegalMoveError(GameError):
    """The board rejected the move."""

    def __init__(self, move_error: MoveError) -> None:
        super().__init__(str(move_error))
        self.move_error = move_error


class GameOverError(GameError):
    """A move was submitted after the game finished."""

    def __init__(self) -> None:
        super().__init__("game is already finished")
