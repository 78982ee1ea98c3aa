"""Legal move enumeration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hexchess.core.coord import BOARD_CELLS, Coord
from hexchess.core.move import Move

if TYPE_CHECKING:
    from hexchess.core.board import HexBoard
    from hexchess.core.enums import Team


class MoveGenerator:
    """Enumerates legal moves by testing every board cell as a destination.

    The board has 91 cells and at most 18 pieces per side, so a brute-force
    scan through :meth:`HexBoard.is_legal` is fast enough.
    """

    __slots__ = ("_board",)

    def __init__(self, board: HexBoard) -> None:
        self._board = board

    def legal_destinations(self, f: Coord) -> list[Coord]:
        """Cells the piece on *f* may legally move to (empty if none)."""
        if f not in self._board:
            return []
        return [t for t in BOARD_CELLS if self._board.is_legal(f, t)]

    def generate_legal_moves(self, team: Team) -> list[Move]:
        moves: list[Move] = []
        for f in self._board.pieces(team):
            moves.extend(Move(f, t) for t in self.legal_destinations(f))
        return moves

    def has_legal_move(self, team: Team) -> bool:
        """Whether *team* has at least one legal move (stops at the first)."""
        board = self._board
        return any(
            board.is_legal(f, t) for f in board.pieces(team) for t in BOARD_CELLS
        )
