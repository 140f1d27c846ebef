"""Solvability rule tests.

The rule keys on the number of rows; the odd-row cases below include an
arrangement that is reachable in play but rejected by that rule.
"""

from __future__ import annotations

import pytest

from slidestate.engine.solvability import count_inversions, is_solvable


@pytest.mark.parametrize(
    ("values", "expected"),
    [
        ([1, 2, 3, 4, 5, 6, 7, 8, 0], 0),
        ([1, 2, 3, 4, 5, 6, 8, 7, 0], 1),
        ([0, 8, 7, 6, 5, 4, 3, 2, 1], 28),
        ([2, 0, 1], 1),
    ],
)
def test_count_inversions_ignores_blank(values: list[int], expected: int) -> None:
    assert count_inversions(values) == expected


@pytest.mark.parametrize(
    ("values", "rows", "cols", "expected"),
    [
        # odd rows: inversion parity only
        ([1, 2, 3, 4, 5, 6, 7, 8, 0], 3, 3, True),
        ([1, 2, 3, 4, 5, 6, 8, 7, 0], 3, 3, False),
        ([1, 2, 3, 4, 5, 0, 7, 8, 6], 3, 3, True),
        ([1, 2, 3, 4, 5, 6, 7, 8, 0, 9, 10, 11], 3, 4, True),
        ([1, 2, 3, 4, 5, 6, 7, 0, 9, 10, 11, 8], 3, 4, False),
        # even rows: blank row counted from the bottom matters
        (list(range(1, 16)) + [0], 4, 4, True),
        ([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 15, 14, 0], 4, 4, False),
        ([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 0, 13, 14, 15, 12], 4, 4, True),
        ([1, 2, 0, 3], 2, 2, True),
        ([2, 1, 3, 0], 2, 2, False),
        ([0, 2, 1, 3], 2, 2, True),
        ([1, 2, 3, 4, 5, 0], 2, 3, True),
    ],
)
def test_is_solvable(values: list[int], rows: int, cols: int, expected: bool) -> None:
    assert is_solvable(values, rows, cols) is expected


def test_is_solvable_is_pure() -> None:
    values = [3, 1, 2, 0]
    is_solvable(values, 2, 2)
    assert values == [3, 1, 2, 0]
