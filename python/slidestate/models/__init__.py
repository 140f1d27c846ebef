from slidestate.models.board import Board, Direction
from slidestate.models.tile import EMPTY_VALUE, Tile

__all__ = ["EMPTY_VALUE", "Board", "Direction", "Tile"]
