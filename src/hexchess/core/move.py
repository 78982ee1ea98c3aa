"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from hexchess.core.coord import Coord


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single move request."""

    from_coord: Coord
    to_coord: Coord

    def __str__(self) -> str:
        f, t = self.from_coord, self.to_coord
        return f"{f.q}, {f.r} -> {t.q}, {t.r}"
