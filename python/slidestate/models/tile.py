"""Tile value type."""

from __future__ import annotations

from dataclasses import dataclass

EMPTY_VALUE = 0


@dataclass(frozen=True)
class Tile:
    """One slot of the board.

    ``value`` 0 marks the empty slot.
    """

    value: int
    row: int
    col: int

    @property
    def is_empty(self) -> bool:
        return self.value == EMPTY_VALUE

    @property
    def position(self) -> tuple[int, int]:
        return (self.row, self.col)
