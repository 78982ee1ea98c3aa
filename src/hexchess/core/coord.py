"""Cube coordinates for a hexagonal board.

Only ``q`` and ``r`` are stored; ``s`` is derived so that ``q + r + s == 0``
always holds.  The board is the 91-cell Glinski hexagon of radius 5
centred on ``(0, 0)``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Coord:
    """Immutable cube coordinate of one hex cell (or a displacement)."""

    q: int
    r: int

    @property
    def s(self) -> int:
        return -self.q - self.r

    # ── Metrics ──────────────────────────────────────────────────────────

    def length(self) -> int:
        """Hex distance from the origin."""
        return max(abs(self.q), abs(self.r), abs(self.s))

    def norm_squared(self) -> int:
        """Squared euclidean norm, in units where an axial step is 1."""
        return self.q * self.q + self.r * self.r + self.q * self.r

    def reflect_q(self) -> Coord:
        """Mirror across the q axis: ``(q, r, s) -> (q, s, r)``."""
        return Coord(self.q, self.s)

    def is_axis(self) -> bool:
        """Whether the vector lies along exactly one of the three cube axes."""
        q, r, s = self.q, self.r, self.s
        return (
            (q == 0 and r != 0 and s != 0)
            or (r == 0 and q != 0 and s != 0)
            or (s == 0 and q != 0 and r != 0)
        )

    # ── Arithmetic ───────────────────────────────────────────────────────

    def __add__(self, other: Coord) -> Coord:
        return Coord(self.q + other.q, self.r + other.r)

    def __sub__(self, other: Coord) -> Coord:
        return Coord(self.q - other.q, self.r - other.r)

    def __neg__(self) -> Coord:
        return Coord(-self.q, -self.r)

    def __mul__(self, k: int) -> Coord:
        return Coord(self.q * k, self.r * k)

    __rmul__ = __mul__

    def __floordiv__(self, k: int) -> Coord:
        return Coord(self.q // k, self.r // k)

    def __str__(self) -> str:
        return f"({self.q}, {self.r}, {self.s})"


ORIGIN = Coord(0, 0)

BOARD_RADIUS = 5

# Unit "short diagonal" steps; a bishop line skips every other cell.
DIAGONAL_DIRECTIONS: tuple[Coord, ...] = (
    Coord(1, -2),
    Coord(2, -1),
    Coord(1, 1),
    Coord(-1, 2),
    Coord(-2, 1),
    Coord(-1, -1),
)


def in_bounds(c: Coord, radius: int = BOARD_RADIUS) -> bool:
    """Whether *c* lies on a hexagonal board of the given radius."""
    return abs(c.q) <= radius and abs(c.r) <= radius and abs(c.s) <= radius


def _build_cells(radius: int) -> tuple[Coord, ...]:
    cells: list[Coord] = []
    for r in range(-radius, radius + 1):
        for q in range(-radius, radius + 1):
            c = Coord(q, r)
            if in_bounds(c, radius):
                cells.append(c)
    return tuple(cells)


BOARD_CELLS: tuple[Coord, ...] = _build_cells(BOARD_RADIUS)
