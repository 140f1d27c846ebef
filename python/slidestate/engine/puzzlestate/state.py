"""Tracks the board of a puzzle in progress."""

from __future__ import annotations

import logging
import random
import threading
from collections.abc import Callable

from slidestate.engine.moves import Mover
from slidestate.engine.shuffler import Shuffler
from slidestate.models.board import Board, Direction
from slidestate.models.tile import Tile

logger = logging.getLogger(__name__)

Observer = Callable[[Board], None]


class PuzzleState:
    """Owns the current board and exposes initialize, shuffle and move.

    Every change replaces the board with a new one; observers registered
    through :meth:`subscribe` receive each committed board.
    """

    def __init__(self, rows: int = 4, cols: int = 4, rng: random.Random | None = None) -> None:
        self.rows = rows
        self.cols = cols
        self._rng = rng or random.Random()
        self._lock = threading.RLock()
        self._observers: list[Observer] = []
        self._board = Board.solved(rows, cols)

    @classmethod
    def create(cls, rows: int, cols: int, rng: random.Random | None = None) -> PuzzleState:
        """Create a puzzle with the board in solved order."""
        return cls(rows, cols, rng=rng)

    @classmethod
    def from_board(cls, board: Board, rng: random.Random | None = None) -> PuzzleState:
        """Create a puzzle from an existing board (e.g. a saved arrangement)."""
        obj = cls(board.rows, board.cols, rng=rng)
        obj._board = board
        return obj

    # -- queries --------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self._board

    def current_board(self) -> tuple[Tile, ...]:
        return self._board.tiles

    def is_solved(self) -> bool:
        return self._board.is_solved()

    # -- lifecycle ------------------------------------------------------------

    def initialize(self) -> None:
        """Reset to the solved board."""
        with self._lock:
            logger.debug("Reset %d×%d board", self.rows, self.cols)
            self._commit(Board.solved(self.rows, self.cols))

    def shuffle(self) -> None:
        with self._lock:
            self._commit(Shuffler.shuffle(self._board, self._rng))

    # -- moves ----------------------------------------------------------------

    def move(self, tile: Tile) -> None:
        """Slide the tile at *tile*'s position toward the blank.

        Tiles outside the blank's row and column are ignored.
        """
        with self._lock:
            board = Mover.apply(self._board, tile.row, tile.col)
            if board is not self._board:
                self._commit(board)

    def move_direction(self, direction: Direction) -> bool:
        """Slide the tile next to the blank in *direction*.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns True if such a tile exists.
        """
        with self._lock:
            target = Mover.tile_for_direction(self._board, direction)
            if target is None:
                return False
            self.move(self._board.tile_at(*target))
            return True

    # -- observers ------------------------------------------------------------

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Call *observer* with every committed board. Returns an unsubscriber."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    # -- helpers --------------------------------------------------------------

    def _commit(self, board: Board) -> None:
        self._board = board
        for observer in list(self._observers):
            observer(board)
