"""Sliding Puzzle command line.

Usage::

    slidepuzzle play -s 4                     # interactive Rich board, 4×4
    slidepuzzle shuffle -s 3 --seed 7         # print a shuffled board
    slidepuzzle moves 1,2,3,4,5,6,7,0,8       # legal move indices
    slidepuzzle -v solve 1,2,3,4,5,6,7,0,8    # solve, with phase logging
"""

from __future__ import annotations

import logging
import random
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from slidepuzzle.engine.gamegenerator import Shuffler
from slidepuzzle.engine.gamemoves import MoveGenerator
from slidepuzzle.engine.gamesolver import Solver
from slidepuzzle.models.board import (
    DEFAULT_DIM,
    MAX_DIM,
    MIN_DIM,
    Board,
    board_dim,
    create_goal,
    require_dim,
    validate,
)
from slidepuzzle.models.errors import PuzzleError

console = Console()

app = typer.Typer(add_completion=False, help="Sliding Puzzle.")


# -- helpers ------------------------------------------------------------------


def _parse_board(raw: str) -> list[int]:
    """Parse ``"1,2,3,..."`` into a validated flat board."""
    try:
        tiles = [int(part) for part in raw.replace(" ", "").split(",") if part]
    except ValueError as exc:
        raise typer.BadParameter(f"Not a comma-separated list of ints: {raw!r}") from exc
    try:
        validate(require_dim(board_dim(tiles)), tiles)
    except PuzzleError as exc:
        raise typer.BadParameter(str(exc)) from exc
    return tiles


def _format(tiles: list[int]) -> str:
    return ",".join(str(t) for t in tiles)


def _print_board(tiles: list[int], goal: list[int]) -> None:
    from slidepuzzle_cli.app import render_board

    console.print(render_board(Board.from_flat(board_dim(tiles), tiles), goal))


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


# -- commands -----------------------------------------------------------------


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log solver progress.",
    ),
) -> None:
    """Sliding Puzzle."""
    _setup_logging(verbose)


@app.command()
def play(
    size: int = typer.Option(
        DEFAULT_DIM, "-s", "--size",
        min=MIN_DIM, max=MAX_DIM,
        help=f"Grid size ({MIN_DIM}-{MAX_DIM}).",
    ),
) -> None:
    """Play on an interactive board."""
    from slidepuzzle_cli.app import run

    run(size=size)


@app.command()
def shuffle(
    size: int = typer.Option(
        DEFAULT_DIM, "-s", "--size",
        min=MIN_DIM, max=MAX_DIM,
        help=f"Grid size ({MIN_DIM}-{MAX_DIM}).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for a reproducible shuffle.",
    ),
    show: bool = typer.Option(
        False, "--show",
        help="Also draw the board.",
    ),
) -> None:
    """Print a shuffled, solvable board."""
    rng = random.Random(seed) if seed is not None else None
    tiles = Shuffler.generate(size, rng)
    typer.echo(_format(tiles))
    if show:
        _print_board(tiles, create_goal(size))


@app.command()
def moves(
    board: str = typer.Argument(..., help="Comma-separated tiles, 0 is the blank."),
) -> None:
    """Print the indices of the tiles that can slide into the blank."""
    tiles = _parse_board(board)
    typer.echo(_format(MoveGenerator.legal_moves(tiles, board_dim(tiles))))


@app.command()
def solve(
    board: str = typer.Argument(..., help="Comma-separated tiles, 0 is the blank."),
    goal: Optional[str] = typer.Option(
        None, "-g", "--goal",
        help="Target layout; defaults to the ordered goal.",
    ),
    max_depth: int = typer.Option(
        Solver.MAX_DEPTH, "-d", "--max-depth",
        min=0, max=Solver.DEPTH_LIMIT,
        help="Moves a single phase may take.",
    ),
) -> None:
    """Print a move sequence (board indices) that solves BOARD."""
    tiles = _parse_board(board)
    dim = board_dim(tiles)
    target = _parse_board(goal) if goal is not None else create_goal(dim)
    if len(target) != len(tiles):
        raise typer.BadParameter("Goal and board must have the same size.")

    solution = Solver.solve(tiles, target, max_depth=max_depth)
    if solution is None:
        typer.echo("Failed to resolve the puzzle.", err=True)
        raise typer.Exit(code=1)

    typer.echo(_format(solution))


if __name__ == "__main__":
    app()
