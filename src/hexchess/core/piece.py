"""Piece value object and per-kind movement shapes.

Every shape rule is written once, in White's frame.  Black pieces have both
endpoints reflected across the q axis before the rule is evaluated, which
maps Black's "forward" onto White's.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from hexchess.core.coord import DIAGONAL_DIRECTIONS, Coord
from hexchess.core.enums import Name, Team

_UNICODE: dict[tuple[Team, Name], str] = {
    (Team.WHITE, Name.PAWN): "♙",
    (Team.WHITE, Name.KNIGHT): "♘",
    (Team.WHITE, Name.BISHOP): "♗",
    (Team.WHITE, Name.ROOK): "♖",
    (Team.WHITE, Name.QUEEN): "♕",
    (Team.WHITE, Name.KING): "♔",
    (Team.BLACK, Name.PAWN): "♟",
    (Team.BLACK, Name.KNIGHT): "♞",
    (Team.BLACK, Name.BISHOP): "♝",
    (Team.BLACK, Name.ROOK): "♜",
    (Team.BLACK, Name.QUEEN): "♛",
    (Team.BLACK, Name.KING): "♚",
}

# White pawn starting cells.  A pawn standing on one of these may advance
# two cells; the set is shared by Black through reflection.
PAWN_HOMES: frozenset[Coord] = frozenset(
    {
        Coord(4, -5),
        Coord(3, -4),
        Coord(2, -3),
        Coord(1, -2),
        Coord(0, -1),
        Coord(-1, -1),
        Coord(-2, -1),
        Coord(-3, -1),
        Coord(-4, -1),
    }
)


@dataclass(frozen=True, slots=True)
class MovesPossible:
    """What a matched shape allows: a quiet move, a capture, or both."""

    move: bool
    capture: bool


_MOVE_ONLY = MovesPossible(move=True, capture=False)
_CAPTURE_ONLY = MovesPossible(move=False, capture=True)
_BOTH = MovesPossible(move=True, capture=True)


# ── Shape rules (White frame) ────────────────────────────────────────────────


def _verify_pawn(f: Coord, t: Coord) -> MovesPossible | None:
    if f.q == t.q and (t.r == f.r + 1 or (t.r == f.r + 2 and f in PAWN_HOMES)):
        return _MOVE_ONLY
    if (t.q == f.q + 1 and t.r == f.r) or (t.q == f.q - 1 and t.r == f.r + 1):
        return _CAPTURE_ONLY
    return None


def is_diagonal(v: Coord) -> bool:
    """Whether *v* is a positive multiple of one of the diagonal directions."""
    for m in DIAGONAL_DIRECTIONS:
        if v.q % m.q:
            continue
        k = v.q // m.q
        if k > 0 and m * k == v:
            return True
    return False


def _verify_bishop(f: Coord, t: Coord) -> MovesPossible | None:
    return _BOTH if is_diagonal(t - f) else None


def _verify_rook(f: Coord, t: Coord) -> MovesPossible | None:
    if f.q == t.q or f.r == t.r or f.s == t.s:
        return _BOTH
    return None


def _verify_knight(f: Coord, t: Coord) -> MovesPossible | None:
    v = t - f
    return _BOTH if abs(v.q * v.r * v.s) == 6 else None


def _verify_queen(f: Coord, t: Coord) -> MovesPossible | None:
    return _verify_rook(f, t) or _verify_bishop(f, t)


def _verify_king(f: Coord, t: Coord) -> MovesPossible | None:
    v = t - f
    if v.length() == 1 or v.norm_squared() == 3:
        return _BOTH
    return None


_SHAPES: dict[Name, Callable[[Coord, Coord], MovesPossible | None]] = {
    Name.PAWN: _verify_pawn,
    Name.BISHOP: _verify_bishop,
    Name.ROOK: _verify_rook,
    Name.KNIGHT: _verify_knight,
    Name.QUEEN: _verify_queen,
    Name.KING: _verify_king,
}


# ── Piece ────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a hex chess piece."""

    name: Name
    team: Team

    def __str__(self) -> str:
        return self.symbol

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.team, self.name)]

    def flip_team(self) -> Piece:
        return Piece(self.name, self.team.flip())

    def verify_move(self, f: Coord, t: Coord) -> MovesPossible | None:
        """Match the displacement ``t - f`` against this piece's shape.

        Returns ``None`` when the shape is illegal.  Occupancy is not
        considered; the board decides which of move/capture applies.
        """
        if f == t:
            return None
        if self.team == Team.BLACK:
            f = f.reflect_q()
            t = t.reflect_q()
        return _SHAPES[self.name](f, t)
