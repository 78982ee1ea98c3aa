"""Rules engine for Glinski hexagonal chess."""

from hexchess.core import Coord, HexBoard, Name, Piece, Team
from hexchess.game import Game, GameError

__all__ = ["Coord", "Game", "GameError", "HexBoard", "Name", "Piece", "Team"]

__version__ = "0.1.0"
