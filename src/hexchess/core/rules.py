"""High-level rules: check, checkmate, stalemate."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hexchess.core.enums import GameResult, Team
from hexchess.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from hexchess.core.board import HexBoard


class Rules:
    """Static rule-checker that operates on a :class:`HexBoard`."""

    @staticmethod
    def is_in_check(board: HexBoard, team: Team) -> bool:
        return board.in_check(team)

    @staticmethod
    def is_checkmate(board: HexBoard, team: Team) -> bool:
        if not board.in_check(team):
            return False
        return not MoveGenerator(board).has_legal_move(team)

    @staticmethod
    def is_stalemate(board: HexBoard, team: Team) -> bool:
        if board.in_check(team):
            return False
        return not MoveGenerator(board).has_legal_move(team)

    @staticmethod
    def game_result(board: HexBoard, side_to_move: Team) -> GameResult:
        """Result with *side_to_move* about to play."""
        if MoveGenerator(board).has_legal_move(side_to_move):
            return GameResult.IN_PROGRESS
        if board.in_check(side_to_move):
            return (
                GameResult.BLACK_WINS
                if side_to_move == Team.WHITE
                else GameResult.WHITE_WINS
            )
        return GameResult.DRAW  # stalemate
