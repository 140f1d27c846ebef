#!/usr/bin/env python3
"""Sliding Puzzle.

Usage::

    python main.py play                 # Rich terminal, 4×4
    python main.py play -r 3 -c 5       # 3 rows, 5 columns
    python main.py deal --seed 7        # print one shuffled board
    python main.py check 1 2 3 4 5 6 8 7 0 -r 3 -c 3
"""

import logging
import random
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from slidestate import Board, PuzzleState  # noqa: E402
from slidestate.engine.solvability import count_inversions, is_solvable  # noqa: E402

DEFAULT_ROWS = 4
DEFAULT_COLS = 4
MIN_DIM = 2
MAX_DIM = 8

console = Console()


# -- helpers ------------------------------------------------------------------


def _format_rows(board: Board) -> list[str]:
    width = len(str(board.size - 1))
    return [" ".join(f"{v:>{width}}" for v in row) for row in board.grid()]


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log shuffles and moves.",
    ),
) -> None:
    """Sliding Puzzle."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command()
def play(
    rows: int = typer.Option(
        DEFAULT_ROWS, "-r", "--rows",
        min=MIN_DIM, max=MAX_DIM,
        help=f"Board rows ({MIN_DIM}-{MAX_DIM}).",
    ),
    cols: int = typer.Option(
        DEFAULT_COLS, "-c", "--cols",
        min=MIN_DIM, max=MAX_DIM,
        help=f"Board columns ({MIN_DIM}-{MAX_DIM}).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for the shuffle; omit for a random board.",
    ),
) -> None:
    """Play in the terminal."""
    from slideview.cli.rich.app import run

    run(rows=rows, cols=cols, seed=seed)


@app.command()
def deal(
    rows: int = typer.Option(
        DEFAULT_ROWS, "-r", "--rows",
        min=MIN_DIM, max=MAX_DIM,
        help=f"Board rows ({MIN_DIM}-{MAX_DIM}).",
    ),
    cols: int = typer.Option(
        DEFAULT_COLS, "-c", "--cols",
        min=MIN_DIM, max=MAX_DIM,
        help=f"Board columns ({MIN_DIM}-{MAX_DIM}).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for the shuffle; omit for a random board.",
    ),
) -> None:
    """Print one shuffled, solvable board."""
    state = PuzzleState.create(rows, cols, rng=random.Random(seed))
    state.shuffle()
    for line in _format_rows(state.board):
        console.print(line, highlight=False)


@app.command()
def check(
    values: list[int] = typer.Argument(..., help="Tile values, row-major, 0 = blank."),
    rows: int = typer.Option(
        DEFAULT_ROWS, "-r", "--rows",
        min=MIN_DIM, max=MAX_DIM,
        help=f"Board rows ({MIN_DIM}-{MAX_DIM}).",
    ),
    cols: int = typer.Option(
        DEFAULT_COLS, "-c", "--cols",
        min=MIN_DIM, max=MAX_DIM,
        help=f"Board columns ({MIN_DIM}-{MAX_DIM}).",
    ),
) -> None:
    """Report whether an arrangement is solvable."""
    try:
        board = Board.from_flat(rows, cols, values)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="VALUES") from exc

    flat = board.values()
    inversions = count_inversions(flat)
    if is_solvable(flat, rows, cols):
        console.print(f"[green]Solvable[/green] ({inversions} inversions)")
    else:
        console.print(f"[red]Not solvable[/red] ({inversions} inversions)")


if __name__ == "__main__":
    app()
