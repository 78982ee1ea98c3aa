"""Core domain layer: pure hex chess rules with no external dependencies.

Quick start::

    from hexchess.core import Coord, HexBoard, MoveGenerator, Team

    board = HexBoard.initial()
    board.move_piece(Coord(0, -1), Coord(0, 1))
    for move in MoveGenerator(board).generate_legal_moves(Team.BLACK):
        print(move)
"""

from hexchess.core.board import STARTING_PIECES, HexBoard
from hexchess.core.coord import (
    BOARD_CELLS,
    BOARD_RADIUS,
    DIAGONAL_DIRECTIONS,
    ORIGIN,
    Coord,
    in_bounds,
)
from hexchess.core.enums import GameResult, Name, Team
from hexchess.core.errors import HexChessError, MoveError, MoveErrorType, NoPieceError
from hexchess.core.move import Move
from hexchess.core.move_generator import MoveGenerator
from hexchess.core.piece import PAWN_HOMES, MovesPossible, Piece
from hexchess.core.rules import Rules

__all__ = [
    # Enums
    "GameResult",
    "Name",
    "Team",
    # Coordinates
    "BOARD_CELLS",
    "BOARD_RADIUS",
    "DIAGONAL_DIRECTIONS",
    "ORIGIN",
    "Coord",
    "in_bounds",
    # Domain objects
    "HexBoard",
    "Move",
    "MoveGenerator",
    "MovesPossible",
    "PAWN_HOMES",
    "Piece",
    "Rules",
    "STARTING_PIECES",
    # Errors
    "HexChessError",
    "MoveError",
    "MoveErrorType",
    "NoPieceError",
]
