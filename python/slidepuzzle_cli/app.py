"""Rich terminal front end. Renders the board and drives the engine.

Holds no puzzle logic: every move, shuffle and solve goes through
:class:`~slidepuzzle.engine.gameplay.GamePlay`.
"""

from __future__ import annotations

import sys
import time
from collections.abc import Sequence

import rich.box
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from slidepuzzle.engine.gameplay import GamePlay
from slidepuzzle.models.board import Board, Direction
from slidepuzzle_cli.input_handler import get_key

console = Console()

#: Delay between two moves of an auto-solve playback, in seconds.
PLAYBACK_DELAY = 0.25

_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


# -- board rendering ----------------------------------------------------------


def render_board(board: Board, goal: Sequence[int]) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.dim * board.dim - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.dim):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r * board.dim + c, goal):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


# -- solver helpers -----------------------------------------------------------


def _apply_hint(game: GamePlay) -> str:
    if game.is_won:
        return "[green]Already solved![/green]"
    index = game.hint()
    if index is None:
        return "[yellow]No hint available.[/yellow]"
    tile = game.state.board.tiles[index]
    game.move_tile(tile)
    return f"[cyan]Hint:[/cyan] moved tile [bold]{tile}[/bold]"


def _auto_solve(game: GamePlay) -> str:
    if game.is_won:
        return "[green]Already solved![/green]"

    _draw(game, "[cyan]Solving…[/cyan]")
    moves = game.solve()
    if moves is None:
        return "[red]Failed to resolve the puzzle.[/red]"

    done = 0
    while game.step() is not None:
        done += 1
        _draw(game, f"[cyan]Solving… move {done}/{len(moves)}[/cyan]")
        time.sleep(PLAYBACK_DELAY)

    return f"[bold green]Solved in {len(moves)} moves![/bold green]"


# -- screen -------------------------------------------------------------------


def _draw(game: GamePlay, status: str = "") -> None:
    console.clear()

    dim = game.dim
    solved = game.is_won
    board_table = render_board(game.state.board, game.goal)

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("R", style="bold yellow")
    controls.append("  shuffle   ", style="dim")
    controls.append("N", style="bold cyan")
    controls.append("  hint   ", style="dim")
    controls.append("V", style="bold cyan")
    controls.append("  solve   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    panel = Panel(
        Align.center(board_table),
        title=f"[bold cyan]Sliding Puzzle  {dim}×{dim}[/bold cyan]",
        border_style="bold green" if solved else "bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(stats))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))
    sys.stdout.flush()


# -- game loop ----------------------------------------------------------------


def run(size: int) -> None:
    """Launch the interactive board."""
    game = GamePlay(size)
    status = ""

    while True:
        if not status and game.is_won:
            status = "[bold green]★ Solved! ★[/bold green]"
        _draw(game, status)
        status = ""
        key = get_key()

        if key in _DIRECTIONS:
            game.move(_DIRECTIONS[key])
        elif key == "shuffle":
            game.shuffle()
            status = "[yellow]Shuffled![/yellow]"
        elif key == "hint":
            status = _apply_hint(game)
        elif key == "solve":
            status = _auto_solve(game)
        elif key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
