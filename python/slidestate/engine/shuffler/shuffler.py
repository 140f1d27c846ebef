"""Generates solvable random arrangements."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from slidestate.engine.solvability import is_solvable
from slidestate.models.board import Board

logger = logging.getLogger(__name__)


class Shuffler:
    """Creates solvable puzzles by permuting tile values at random."""

    @staticmethod
    def permute(values: list[int], rng: random.Random) -> None:
        """Shuffle *values* in-place with a backward Fisher-Yates pass."""
        for i in range(len(values) - 1, 0, -1):
            j = rng.randrange(i + 1)
            values[i], values[j] = values[j], values[i]

    @staticmethod
    def solvable_values(
        values: Sequence[int], rows: int, cols: int, rng: random.Random
    ) -> list[int]:
        """Permute a copy of *values* until the result is solvable."""
        shuffled = list(values)
        attempts = 0
        while True:
            attempts += 1
            Shuffler.permute(shuffled, rng)
            if is_solvable(shuffled, rows, cols):
                break
        logger.debug("Shuffled %d×%d board in %d attempt(s)", rows, cols, attempts)
        return shuffled

    @staticmethod
    def shuffle(board: Board, rng: random.Random | None = None) -> Board:
        """Return a new random *solvable* board with the same dimensions."""
        rng = rng or random.Random()
        values = Shuffler.solvable_values(board.values(), board.rows, board.cols, rng)
        return Board.from_flat(board.rows, board.cols, values)
