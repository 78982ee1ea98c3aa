"""Game session - turn alternation and terminal state over a HexBoard."""

from __future__ import annotations

import logging

from hexchess.core.board import HexBoard
from hexchess.core.coord import Coord
from hexchess.core.enums import GameResult, Team
from hexchess.core.errors import MoveError, NoPieceError
from hexchess.core.move import Move
from hexchess.core.move_generator import MoveGenerator
from hexchess.core.rules import Rules
from hexchess.game.errors import GameOverError, IllegalMoveError, PieceError, TurnError

_LOGGER = logging.getLogger(__name__)


class Game:
    """A single match: White moves first, turns strictly alternate.

    :meth:`move_piece` is the only mutating entry point.  A rejected move
    leaves both the board and the turn untouched.  Once the side to move is
    checkmated the game is finished.  A stalemate ends it too (as a draw)
    without setting :attr:`finished`; either way further moves raise
    :class:`GameOverError`.

    Not thread-safe; callers serialise access.
    """

    __slots__ = ("_turn", "_board", "_result")

    def __init__(self, board: HexBoard | None = None, turn: Team = Team.WHITE) -> None:
        self._board = board if board is not None else HexBoard.initial()
        self._turn = turn
        self._result = Rules.game_result(self._board, turn)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def turn(self) -> Team:
        return self._turn

    @property
    def board(self) -> HexBoard:
        return self._board

    @property
    def finished(self) -> bool:
        """Whether the side to move is checkmated."""
        return self._result in (GameResult.WHITE_WINS, GameResult.BLACK_WINS)

    @property
    def is_over(self) -> bool:
        """Checkmate or stalemate: no further moves are accepted."""
        return self._result != GameResult.IN_PROGRESS

    @property
    def winner(self) -> Team | None:
        """The side that delivered checkmate, if the game is over."""
        return self._turn.flip() if self.finished else None

    @property
    def result(self) -> GameResult:
        return self._result

    def legal_moves(self) -> list[Move]:
        """Legal moves for the side to move."""
        if self.is_over:
            return []
        return MoveGenerator(self._board).generate_legal_moves(self._turn)

    # ── Moves ────────────────────────────────────────────────────────────

    def move_piece(self, f: Coord, t: Coord) -> None:
        """Move the piece on *f* to *t* for the side to move.

        Raises:
            GameOverError: the game already ended (checkmate or stalemate).
            PieceError: *f* is empty.
            TurnError: the piece on *f* belongs to the other side.
            IllegalMoveError: the board rejected the move.
        """
        if self.is_over:
            raise GameOverError()

        try:
            piece = self._board.get(f)
        except NoPieceError as err:
            raise PieceError(f) from err

        if piece.team != self._turn:
            raise TurnError(given=piece.team, real=self._turn)

        try:
            self._board.move_piece(f, t)
        except MoveError as err:
            _LOGGER.debug("Rejected %s: %s", Move(f, t), err)
            raise IllegalMoveError(err) from err

        opponent = self._turn.flip()
        self._result = Rules.game_result(self._board, opponent)
        if self._result == GameResult.DRAW:
            _LOGGER.info("Stalemate: %s cannot move", opponent)
        elif self._result != GameResult.IN_PROGRESS:
            _LOGGER.info("Checkmate: %s wins", self._turn)
        self._turn = opponent

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{self._turn!s}'s turn\n{self._board}"
