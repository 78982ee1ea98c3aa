"""HexBoard - piece placement and move legality on the Glinski board."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator

from hexchess.core.coord import BOARD_RADIUS, Coord, in_bounds
from hexchess.core.enums import Name, Team
from hexchess.core.errors import MoveError, MoveErrorType, NoPieceError
from hexchess.core.piece import Piece

_LOGGER = logging.getLogger(__name__)
_TEAM_COUNT = 2

# White's half of the opening position; Black's is its q-axis reflection.
STARTING_PIECES: tuple[tuple[Coord, Piece], ...] = (
    (Coord(0, -5), Piece(Name.BISHOP, Team.WHITE)),
    (Coord(0, -4), Piece(Name.BISHOP, Team.WHITE)),
    (Coord(0, -3), Piece(Name.BISHOP, Team.WHITE)),
    (Coord(1, -5), Piece(Name.KING, Team.WHITE)),
    (Coord(-1, -4), Piece(Name.QUEEN, Team.WHITE)),
    (Coord(-2, -3), Piece(Name.KNIGHT, Team.WHITE)),
    (Coord(2, -5), Piece(Name.KNIGHT, Team.WHITE)),
    (Coord(-3, -2), Piece(Name.ROOK, Team.WHITE)),
    (Coord(3, -5), Piece(Name.ROOK, Team.WHITE)),
    (Coord(4, -5), Piece(Name.PAWN, Team.WHITE)),
    (Coord(3, -4), Piece(Name.PAWN, Team.WHITE)),
    (Coord(2, -3), Piece(Name.PAWN, Team.WHITE)),
    (Coord(1, -2), Piece(Name.PAWN, Team.WHITE)),
    (Coord(0, -1), Piece(Name.PAWN, Team.WHITE)),
    (Coord(-1, -1), Piece(Name.PAWN, Team.WHITE)),
    (Coord(-2, -1), Piece(Name.PAWN, Team.WHITE)),
    (Coord(-3, -1), Piece(Name.PAWN, Team.WHITE)),
    (Coord(-4, -1), Piece(Name.PAWN, Team.WHITE)),
)


class HexBoard:
    """Mutable position: at most one piece per cell, plus per-team checkers.

    ``checkers(team)`` lists the coordinates of enemy pieces currently
    attacking *team*'s king; it is non-empty exactly when *team* is in check.
    """

    __slots__ = ("_pieces", "_checkers")

    N = BOARD_RADIUS

    def __init__(self) -> None:
        self._pieces: dict[Coord, Piece] = {}
        # [team] -> coordinates of pieces giving check to that team.
        self._checkers: list[tuple[Coord, ...]] = [()] * _TEAM_COUNT

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> HexBoard:
        """Standard Glinski starting position, 18 pieces per side."""
        b = cls()
        for c, piece in STARTING_PIECES:
            b._pieces[c] = piece
            b._pieces[c.reflect_q()] = piece.flip_team()
        b.update_checkers()
        return b

    # -- Element access -----------------------------------------------------

    def get(self, c: Coord) -> Piece:
        """Piece at *c*; raises :class:`NoPieceError` when the cell is empty."""
        try:
            return self._pieces[c]
        except KeyError:
            raise NoPieceError(c) from None

    def __getitem__(self, c: Coord) -> Piece | None:
        return self._pieces.get(c)

    def __contains__(self, c: object) -> bool:
        return c in self._pieces

    def __len__(self) -> int:
        return len(self._pieces)

    def items(self) -> Iterator[tuple[Coord, Piece]]:
        return iter(list(self._pieces.items()))

    def place(self, c: Coord, piece: Piece) -> None:
        """Put *piece* on *c* (replacing any occupant). Setup helper."""
        self._pieces[c] = piece
        self.update_checkers()

    # -- Query helpers ------------------------------------------------------

    def pieces(self, team: Team) -> list[Coord]:
        """Cells occupied by *team*."""
        return [c for c, p in self._pieces.items() if p.team == team]

    def king_positions(self, team: Team) -> list[Coord]:
        return [
            c
            for c, p in self._pieces.items()
            if p.team == team and p.name == Name.KING
        ]

    def checkers(self, team: Team) -> tuple[Coord, ...]:
        return self._checkers[int(team)]

    def in_check(self, team: Team) -> bool:
        return bool(self._checkers[int(team)])

    # -- Geometry -----------------------------------------------------------

    def collides(self, f: Coord, t: Coord) -> bool:
        """Whether any cell strictly between *f* and *t* is occupied.

        The displacement must be an axial or diagonal line; knight jumps are
        never passed here.
        """
        v = t - f
        if v.is_axis():
            steps = v.length()
        else:
            steps = math.isqrt(v.norm_squared() // 3)
        if steps <= 1:
            return False
        unit = v // steps
        return any(f + unit * n in self._pieces for n in range(1, steps))

    # -- Legality -----------------------------------------------------------

    def unchecked_can_move(self, piece: Piece, f: Coord, t: Coord) -> None:
        """Bounds, shape, occupancy and collision checks, ignoring check.

        Raises :class:`MoveError` on the first failing rule.
        """
        if not in_bounds(t, self.N):
            raise MoveError(MoveErrorType.INVALID_MOVE, f, t, piece)

        possible = piece.verify_move(f, t)
        if possible is None:
            raise MoveError(MoveErrorType.INVALID_MOVE, f, t, piece)

        target = self._pieces.get(t)
        if (
            (not possible.capture and target is not None)
            or (possible.capture and target is not None and target.team == piece.team)
            or (not possible.move and target is None)
        ):
            raise MoveError(MoveErrorType.INVALID_MOVE, f, t, piece)

        if piece.name != Name.KNIGHT and self.collides(f, t):
            raise MoveError(MoveErrorType.COLLISION_ON_PATH, f, t, piece)

    def can_move(self, f: Coord, t: Coord) -> None:
        """Full legality of moving the piece on *f* to *t*.

        On top of :meth:`unchecked_can_move`, the move is simulated on a
        scratch board and rejected if the mover's king would be attacked
        afterwards.  While in check this admits only moves that resolve it;
        outside check it also rejects moving into check.
        """
        try:
            piece = self.get(f)
        except NoPieceError as err:
            raise MoveError(MoveErrorType.NO_PIECE, f, t) from err

        self.unchecked_can_move(piece, f, t)

        projected = self.copy()
        projected._teleport(f, t)
        projected.update_checkers()
        if projected.in_check(piece.team):
            raise MoveError(MoveErrorType.INVALID_MOVE, f, t, piece)

    def is_legal(self, f: Coord, t: Coord) -> bool:
        try:
            self.can_move(f, t)
        except MoveError:
            return False
        return True

    # -- Mutation / copying -------------------------------------------------

    def move_piece(self, f: Coord, t: Coord) -> None:
        """Validate and apply a move, capturing whatever stands on *t*."""
        self.can_move(f, t)
        captured = self._pieces.get(t)
        self._teleport(f, t)
        self.update_checkers()
        _LOGGER.debug(
            "Moved %s %s -> %s%s",
            self._pieces[t].name,
            f,
            t,
            f" capturing {captured.name}" if captured is not None else "",
        )

    def _teleport(self, f: Coord, t: Coord) -> None:
        self._pieces[t] = self._pieces.pop(f)

    def update_checkers(self) -> None:
        """Recompute, for every king, the enemy pieces attacking it."""
        checkers: list[list[Coord]] = [[] for _ in range(_TEAM_COUNT)]
        for team in Team:
            found = checkers[int(team)]
            enemies = [(c, self._pieces[c]) for c in self.pieces(team.flip())]
            for king_pos in self.king_positions(team):
                for enemy_pos, enemy_piece in enemies:
                    if enemy_pos in found:
                        continue
                    try:
                        self.unchecked_can_move(enemy_piece, enemy_pos, king_pos)
                    except MoveError:
                        continue
                    found.append(enemy_pos)
        self._checkers = [tuple(found) for found in checkers]

    def copy(self) -> HexBoard:
        b = HexBoard()
        b._pieces = self._pieces.copy()
        b._checkers = self._checkers.copy()
        return b

    def clear(self) -> None:
        self._pieces = {}
        self._checkers = [()] * _TEAM_COUNT

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HexBoard):
            return NotImplemented
        return self._pieces == other._pieces

    def __str__(self) -> str:
        n = self.N
        border = " " * (n + 1) + "# " * (n + 2)
        lines = [border]
        for r in range(-n, n + 1):
            row = [" " * abs(r) + "#"]
            for q in range(max(-n, -n - r), min(n, n - r) + 1):
                p = self._pieces.get(Coord(q, r))
                row.append(f" {p}" if p is not None else " .")
            row.append(" #")
            lines.append("".join(row))
        lines.append(border)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"HexBoard({len(self._pieces)} pieces)"
