"""PuzzleState lifecycle and observer tests."""

from __future__ import annotations

import random
import threading

import pytest

from slidestate import Board, PuzzleState, Tile
from slidestate.engine.solvability import is_solvable


@pytest.mark.parametrize(("rows", "cols"), [(2, 2), (3, 3), (4, 4), (2, 7), (8, 3)])
def test_create_is_solved(rows: int, cols: int) -> None:
    state = PuzzleState.create(rows, cols)

    assert state.is_solved()
    assert len(state.current_board()) == rows * cols


def test_default_size_is_4x4() -> None:
    state = PuzzleState()
    assert (state.rows, state.cols) == (4, 4)


def test_create_rejects_single_slot() -> None:
    with pytest.raises(ValueError):
        PuzzleState.create(1, 1)


def test_current_board_is_snapshot() -> None:
    state = PuzzleState.create(3, 3)
    before = state.current_board()
    state.move(Tile(value=6, row=1, col=2))

    assert isinstance(before, tuple)
    assert [t.value for t in before] == [1, 2, 3, 4, 5, 6, 7, 8, 0]
    assert [t.value for t in state.current_board()] == [1, 2, 3, 4, 5, 0, 7, 8, 6]


def test_shuffle_then_initialize() -> None:
    state = PuzzleState.create(4, 4, rng=random.Random(3))
    state.shuffle()
    values = state.board.values()

    assert sorted(values) == list(range(16))
    assert is_solvable(values, 4, 4)

    state.initialize()
    assert state.is_solved()


def test_move_to_solved() -> None:
    board = Board.from_flat(3, 3, [1, 2, 3, 4, 5, 6, 0, 7, 8])
    state = PuzzleState.from_board(board)
    assert not state.is_solved()

    state.move(state.board.tile_at(2, 2))
    assert state.is_solved()


def test_move_unknown_position_raises() -> None:
    state = PuzzleState.create(3, 3)
    with pytest.raises(ValueError):
        state.move(Tile(value=1, row=5, col=5))


def test_observers_see_committed_boards() -> None:
    state = PuzzleState.create(3, 3, rng=random.Random(1))
    seen: list[Board] = []
    unsubscribe = state.subscribe(seen.append)

    state.move(state.board.tile_at(1, 2))
    assert seen == [state.board]

    state.move(state.board.tile_at(0, 0))  # diagonal, no-op
    assert len(seen) == 1

    state.shuffle()
    state.initialize()
    assert len(seen) == 3
    assert seen[-1].is_solved()

    unsubscribe()
    state.shuffle()
    assert len(seen) == 3


def test_observer_reads_new_board() -> None:
    state = PuzzleState.create(2, 2)
    reads: list[list[int]] = []
    state.subscribe(lambda board: reads.append(state.board.values()))

    state.move(state.board.tile_at(1, 0))
    assert reads == [[1, 2, 0, 3]]


def test_concurrent_moves_keep_invariants() -> None:
    state = PuzzleState.create(4, 4, rng=random.Random(9))
    state.shuffle()

    def worker(seed: int) -> None:
        rng = random.Random(seed)
        for _ in range(200):
            state.move(state.board.tile_at(rng.randrange(4), rng.randrange(4)))

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    values = state.board.values()
    assert sorted(values) == list(range(16))
    assert is_solvable(values, 4, 4)
