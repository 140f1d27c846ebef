"""Rich terminal view: the board as a table with a selection cursor.

The view only reads ``PuzzleState.board`` and calls its operations. A
change subscription tells a click that moved tiles from one that did not.
"""

from __future__ import annotations

import random

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from slidestate import Board, Direction, PuzzleState
from slideview.cli.input_handler import get_key

console = Console()

_CURSOR_STEPS: dict[str, tuple[int, int]] = {
    "cursor_up": (-1, 0),
    "cursor_down": (1, 0),
    "cursor_left": (0, -1),
    "cursor_right": (0, 1),
}

_SLIDES: dict[str, Direction] = {
    "slide_up": Direction.UP,
    "slide_down": Direction.DOWN,
    "slide_left": Direction.LEFT,
    "slide_right": Direction.RIGHT,
}


# -- board rendering ----------------------------------------------------------


def render_board(board: Board, cursor: tuple[int, int] | None = None) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.cols):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.grid()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cell = f"[dim]{'·':>{width}}[/dim]"
            elif board.is_tile_correct(r, c):
                cell = f"[bold green]{val:>{width}}[/bold green]"
            else:
                cell = f"[bold white]{val:>{width}}[/bold white]"
            if (r, c) == cursor:
                cell = f"[reverse]{cell}[/reverse]"
            cells.append(cell)
        table.add_row(*cells)

    return table


def step_cursor(cursor: tuple[int, int], action: str, rows: int, cols: int) -> tuple[int, int]:
    """Move *cursor* one cell for a cursor action, clamped to the board."""
    dr, dc = _CURSOR_STEPS[action]
    r, c = cursor
    return (min(max(r + dr, 0), rows - 1), min(max(c + dc, 0), cols - 1))


# -- screens ------------------------------------------------------------------


def _draw(state: PuzzleState, cursor: tuple[int, int], status: str = "") -> None:
    console.clear()

    board_table = render_board(state.board, cursor)

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append("  select   ", style="dim")
    controls.append("Enter", style="bold cyan")
    controls.append("  click   ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  slide   ", style="dim")
    controls.append("R", style="bold yellow")
    controls.append("  shuffle   ", style="dim")
    controls.append("I", style="bold cyan")
    controls.append("  reset   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    parts: list[Align] = [Align.center(board_table)]
    if state.is_solved():
        congrats = Text()
        congrats.append("\n  ★ ", style="bold yellow")
        congrats.append("SOLVED", style="bold green")
        congrats.append(" ★", style="bold yellow")
        parts.append(Align.center(congrats))

    border = "bold green" if state.is_solved() else "bright_blue"
    panel = Panel(
        Group(*parts),
        title=f"[bold cyan]Sliding Puzzle  {state.rows}×{state.cols}[/bold cyan]",
        border_style=border,
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


# -- game loop ----------------------------------------------------------------


def _play(state: PuzzleState) -> None:
    cursor = (state.rows - 1, state.cols - 1)
    status = ""
    changed = False

    def on_change(board: Board) -> None:
        nonlocal changed
        changed = True

    unsubscribe = state.subscribe(on_change)
    try:
        while True:
            _draw(state, cursor, status)
            status = ""
            changed = False
            key = get_key()

            if key in _CURSOR_STEPS:
                cursor = step_cursor(cursor, key, state.rows, state.cols)
            elif key == "click":
                state.move(state.board.tile_at(*cursor))
                if not changed:
                    status = "[dim]That tile cannot slide.[/dim]"
            elif key in _SLIDES:
                if not state.move_direction(_SLIDES[key]):
                    status = "[dim]Nothing to slide that way.[/dim]"
            elif key == "shuffle":
                state.shuffle()
                status = "[yellow]Shuffled![/yellow]"
            elif key == "reset":
                state.initialize()
            elif key == "quit":
                return
    finally:
        unsubscribe()


# -- public entry point -------------------------------------------------------


def run(rows: int, cols: int, seed: int | None = None) -> None:
    """Launch the Rich view on a freshly shuffled board."""
    state = PuzzleState.create(rows, cols, rng=random.Random(seed))
    state.shuffle()
    _play(state)
    console.clear()
    console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
