"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from hexchess.core.board import HexBoard
from hexchess.core.coord import Coord
from hexchess.core.enums import Name, Team
from hexchess.core.piece import Piece

MakeBoard = Callable[..., HexBoard]


@pytest.fixture
def empty_board() -> HexBoard:
    return HexBoard()


@pytest.fixture
def initial_board() -> HexBoard:
    return HexBoard.initial()


@pytest.fixture
def make_board() -> MakeBoard:
    """Build a board from ``(q, r, name, team)`` tuples."""

    def _make(*placements: tuple[int, int, Name, Team]) -> HexBoard:
        board = HexBoard()
        for q, r, name, team in placements:
            board.place(Coord(q, r), Piece(name, team))
        return board

    return _make
