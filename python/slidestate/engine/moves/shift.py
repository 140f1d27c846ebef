"""Move application: click-driven swaps and block shifts."""

from __future__ import annotations

import logging

from slidestate.models.board import Board, Direction
from slidestate.models.tile import EMPTY_VALUE

logger = logging.getLogger(__name__)

# Offset from the blank to the tile that slides in *direction*.
# UP    → tile at (br+1, bc) moves up
# DOWN  → tile at (br-1, bc) moves down
# LEFT  → tile at (br, bc+1) moves left
# RIGHT → tile at (br, bc-1) moves right
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


class Mover:
    """Stateless move logic. Every method returns a board."""

    @staticmethod
    def apply(board: Board, row: int, col: int) -> Board:
        """Slide the tile at (row, col) toward the blank.

        Returns *board* itself when the tile shares neither row nor column
        with the blank, or is the blank. Raises ``ValueError`` when the
        position is not on the board.
        """
        clicked = board.tile_at(row, col)
        empty = board.empty_tile()

        if clicked.is_empty:
            return board

        if empty.row == row:
            span = [(row, c) for c in Mover._between(col, empty.col)]
        elif empty.col == col:
            span = [(r, col) for r in Mover._between(row, empty.row)]
        else:
            return board

        if len(span) <= 2:
            logger.debug("Swap %s with blank at %s", clicked.position, empty.position)
            return Mover._swap(board, clicked.position, empty.position)

        logger.debug("Block shift over %s", span)
        return Mover._shift(board, span)

    @staticmethod
    def tile_for_direction(board: Board, direction: Direction) -> tuple[int, int] | None:
        """Return the position of the tile that would slide in *direction*."""
        empty = board.empty_tile()
        dr, dc = _OFFSETS[direction]
        tr, tc = empty.row + dr, empty.col + dc
        if not (0 <= tr < board.rows and 0 <= tc < board.cols):
            return None
        return (tr, tc)

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _between(start: int, stop: int) -> list[int]:
        """Indices from *start* to *stop*, both inclusive, in walking order."""
        step = 1 if stop > start else -1
        return list(range(start, stop + step, step))

    @staticmethod
    def _swap(board: Board, target: tuple[int, int], blank: tuple[int, int]) -> Board:
        values = board.values()
        ti = board.index_of(*target)
        bi = board.index_of(*blank)
        values[bi], values[ti] = values[ti], EMPTY_VALUE
        return Board.from_flat(board.rows, board.cols, values)

    @staticmethod
    def _shift(board: Board, span: list[tuple[int, int]]) -> Board:
        """Move every value in *span* one step toward its end.

        The last span position holds the blank and is overwritten; the first
        becomes the new blank.
        """
        values = board.values()
        indices = [board.index_of(r, c) for r, c in span]
        moving = [values[i] for i in indices]
        for k in range(len(moving) - 1, 0, -1):
            moving[k] = moving[k - 1]
        moving[0] = EMPTY_VALUE
        for i, v in zip(indices, moving):
            values[i] = v
        return Board.from_flat(board.rows, board.cols, values)
