"""Flat-top hexagon projection between board cells and pixels.

Used by rendering front-ends only; the rules engine never needs it.  The
origin cell ``(0, 0)`` maps to pixel ``(0, 0)`` and *size* is the hexagon's
circumradius.
"""

from __future__ import annotations

import math

from hexchess.core.coord import Coord

_SQRT_3 = math.sqrt(3)


def hex_to_pixel(c: Coord, size: float) -> tuple[float, float]:
    """Centre of cell *c* in pixel space."""
    x = size * 1.5 * c.q
    y = size * (_SQRT_3 / 2 * c.q + _SQRT_3 * c.r)
    return x, y


def pixel_to_hex(x: float, y: float, size: float) -> Coord:
    """Cell containing the pixel ``(x, y)``."""
    q = (2 / 3 * x) / size
    r = (-1 / 3 * x + _SQRT_3 / 3 * y) / size
    return _cube_round(q, r)


def _round_half_away(x: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def _cube_round(q: float, r: float) -> Coord:
    s = -q - r
    rq, rr, rs = _round_half_away(q), _round_half_away(r), _round_half_away(s)
    dq, dr, ds = abs(rq - q), abs(rr - r), abs(rs - s)
    # Fix up the component with the largest rounding error.
    if dq > dr and dq > ds:
        rq = -rr - rs
    elif dr > ds:
        rr = -rq - rs
    return Coord(rq, rr)
