"""Board-level exceptions."""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hexchess.core.coord import Coord
    from hexchess.core.piece import Piece


class HexChessError(Exception):
    """Base class for every error raised by the engine."""


class NoPieceError(HexChessError, LookupError):
    """Lookup on an empty cell."""

    def __init__(self, coord: Coord) -> None:
        super().__init__(f"No Piece at position {coord}")
        self.coord = coord


class MoveErrorType(IntEnum):
    NO_PIECE = 0
    INVALID_MOVE = 1
    COLLISION_ON_PATH = 2


class MoveError(HexChessError):
    """A rejected move, carrying the attempted endpoints.

    ``piece`` is the moving piece, or ``None`` when there was nothing at
    ``from_coord``.
    """

    def __init__(
        self,
        err_type: MoveErrorType,
        from_coord: Coord,
        to_coord: Coord,
        piece: Piece | None = None,
    ) -> None:
        self.err_type = err_type
        self.from_coord = from_coord
        self.to_coord = to_coord
        self.piece = piece
        super().__init__(f"{self.reason} moving from {from_coord} to {to_coord}")

    @property
    def reason(self) -> str:
        if self.err_type == MoveErrorType.NO_PIECE:
            return f"No Piece at position {self.from_coord}"
        if self.err_type == MoveErrorType.INVALID_MOVE:
            return f"Invalid Move for {self.piece}"
        return f"{self.piece} collided with a piece on its path"

