"""State core for rows x cols sliding tile puzzles."""

from slidestate.engine.puzzlestate import PuzzleState
from slidestate.models import EMPTY_VALUE, Board, Direction, Tile

__all__ = ["EMPTY_VALUE", "Board", "Direction", "PuzzleState", "Tile"]
