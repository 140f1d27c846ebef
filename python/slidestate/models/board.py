"""Board model for the sliding puzzle state core."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from slidestate.models.tile import EMPTY_VALUE, Tile


class Direction(StrEnum):
    """Where a *tile* slides, not where the empty slot goes."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Board:
    """Represents the sliding puzzle board.

    Tiles are stored flat in row-major order, so the tile at ``(row, col)``
    lives at index ``row * cols + col`` and carries those coordinates.
    0 represents the blank space.
    """

    rows: int
    cols: int
    tiles: tuple[Tile, ...]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls, rows: int, cols: int) -> Board:
        """Return the goal-state board (tiles in order, blank bottom-right)."""
        _check_dimensions(rows, cols)
        count = rows * cols
        values = [idx + 1 for idx in range(count - 1)] + [EMPTY_VALUE]
        return cls.from_flat(rows, cols, values)

    @classmethod
    def from_flat(cls, rows: int, cols: int, values: Sequence[int]) -> Board:
        """Create a board from a flat row-major value list.

        Example::

            Board.from_flat(3, 3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        _check_dimensions(rows, cols)
        count = rows * cols
        if len(values) != count:
            raise ValueError(
                f"Expected {count} tiles for a {rows}×{cols} board, "
                f"got {len(values)}."
            )
        if sorted(values) != list(range(count)):
            raise ValueError(
                f"Tile values must be exactly 0..{count - 1} with no "
                f"duplicates, got {list(values)}."
            )
        tiles = tuple(
            Tile(value=v, row=idx // cols, col=idx % cols)
            for idx, v in enumerate(values)
        )
        return cls(rows=rows, cols=cols, tiles=tiles)

    # -- queries --------------------------------------------------------------

    @property
    def size(self) -> int:
        return self.rows * self.cols

    def index_of(self, row: int, col: int) -> int:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise ValueError(
                f"Position ({row}, {col}) is outside the "
                f"{self.rows}×{self.cols} board."
            )
        return row * self.cols + col

    def tile_at(self, row: int, col: int) -> Tile:
        tile = self.tiles[self.index_of(row, col)]
        # Storage order and coordinates are kept in lockstep.
        assert tile.position == (row, col), f"{tile} stored at ({row}, {col})"
        return tile

    def get_tile(self, row: int, col: int) -> int:
        return self.tile_at(row, col).value

    def empty_tile(self) -> Tile:
        for tile in self.tiles:
            if tile.value == EMPTY_VALUE:
                return tile
        raise AssertionError("Board has no empty tile.")

    def values(self) -> list[int]:
        """Return the flat row-major value list."""
        return [t.value for t in self.tiles]

    def grid(self) -> list[list[int]]:
        """Return values as a list of rows (for rendering)."""
        flat = self.values()
        return [flat[r * self.cols : (r + 1) * self.cols] for r in range(self.rows)]

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        last = len(self.tiles) - 1
        for idx, tile in enumerate(self.tiles):
            if idx == last:
                return tile.value == EMPTY_VALUE
            if tile.value != idx + 1:
                return False
        return True

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.get_tile(row, col)
        if val == EMPTY_VALUE:
            return row == self.rows - 1 and col == self.cols - 1
        expected_row = (val - 1) // self.cols
        expected_col = (val - 1) % self.cols
        return row == expected_row and col == expected_col


def _check_dimensions(rows: int, cols: int) -> None:
    if rows < 1 or cols < 1 or rows * cols < 2:
        raise ValueError(
            f"A board needs positive dimensions and at least two slots, "
            f"got {rows}×{cols}."
        )
