"""Solvability test for a flat arrangement of tile values."""

from __future__ import annotations

from collections.abc import Sequence

from slidestate.models.tile import EMPTY_VALUE


def count_inversions(values: Sequence[int]) -> int:
    """Count pairs ``i < j`` with ``values[i] > values[j]``, ignoring the blank."""
    flat = [v for v in values if v != EMPTY_VALUE]
    inversions = 0
    for i in range(len(flat)):
        for j in range(i + 1, len(flat)):
            if flat[i] > flat[j]:
                inversions += 1
    return inversions


def is_solvable(values: Sequence[int], rows: int, cols: int) -> bool:
    """Return True if *values* (row-major) is a reachable arrangement.

    The parity rule keys on the number of **rows**: with an odd row count
    only the inversion parity matters, with an even row count the blank's
    row counted from the bottom is taken into account as well.

    Note: the classical rule for rectangular boards keys on the column
    count instead. The row-based rule is kept because shuffles depend on
    it; on boards with odd rows and even columns it rejects some reachable
    arrangements.
    """
    inversions = count_inversions(values)
    if rows % 2 == 0:
        empty_index = list(values).index(EMPTY_VALUE)
        empty_row_from_top = empty_index // cols
        empty_row_from_bottom = rows - empty_row_from_top
        return (empty_row_from_bottom % 2 == 0 and inversions % 2 == 1) or (
            empty_row_from_bottom % 2 == 1 and inversions % 2 == 0
        )
    return inversions % 2 == 0
