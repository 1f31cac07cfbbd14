from slidepuzzle.models.board import (
    DEFAULT_DIM,
    MAX_DIM,
    MIN_DIM,
    Board,
    Direction,
    create_goal,
    is_solved,
    validate,
)
from slidepuzzle.models.errors import (
    DimensionError,
    DuplicateValueError,
    InvalidMoveError,
    PuzzleError,
    RangeError,
    ShapeError,
)

__all__ = [
    "DEFAULT_DIM",
    "MAX_DIM",
    "MIN_DIM",
    "Board",
    "DimensionError",
    "Direction",
    "DuplicateValueError",
    "InvalidMoveError",
    "PuzzleError",
    "RangeError",
    "ShapeError",
    "create_goal",
    "is_solved",
    "validate",
]
