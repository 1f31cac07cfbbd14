"""Sliding-tile puzzle engine.

Function-style API over flat, caller-owned boards::

    from slidepuzzle import create_goal, shuffle, solve, play

    goal = create_goal(3)
    board = shuffle(goal, 3)
    moves = solve(board, goal)
    if moves is not None:
        assert play(board, moves) == goal
"""

from slidepuzzle.engine import (
    Applier,
    GamePlay,
    GameState,
    MoveGenerator,
    Shuffler,
    Solver,
)
from slidepuzzle.models import (
    Board,
    DimensionError,
    Direction,
    DuplicateValueError,
    InvalidMoveError,
    PuzzleError,
    RangeError,
    ShapeError,
    create_goal,
    is_solved,
    validate,
)

legal_moves = MoveGenerator.legal_moves
apply_move = MoveGenerator.apply_move
play = Applier.play
shuffle = Shuffler.shuffle
solve = Solver.solve
is_solvable = Solver.is_solvable

__all__ = [
    "Applier",
    "Board",
    "DimensionError",
    "Direction",
    "DuplicateValueError",
    "GamePlay",
    "GameState",
    "InvalidMoveError",
    "MoveGenerator",
    "PuzzleError",
    "RangeError",
    "ShapeError",
    "Shuffler",
    "Solver",
    "apply_move",
    "create_goal",
    "is_solvable",
    "is_solved",
    "legal_moves",
    "play",
    "shuffle",
    "solve",
    "validate",
]
