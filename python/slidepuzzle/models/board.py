"""Board model for the sliding puzzle.

A board is a flat, row-major permutation of ``0 .. dim*dim - 1`` where
``0`` is the blank.  The functional API works on plain ``list[int]``
values owned by the caller; :class:`Board` wraps a validated list for
game sessions.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from slidepuzzle.models.errors import (
    DimensionError,
    DuplicateValueError,
    RangeError,
    ShapeError,
)

MIN_DIM = 3
MAX_DIM = 15
DEFAULT_DIM = 3

BLANK = 0


class Direction(StrEnum):
    """Direction a *tile* slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# -- coordinates ---------------------------------------------------------------


def row_of(index: int, dim: int) -> int:
    return index // dim


def col_of(index: int, dim: int) -> int:
    return index % dim


def board_dim(board: Sequence[int]) -> int:
    """Return the dimension of a square board, or raise ``ShapeError``."""
    dim = math.isqrt(len(board))
    if dim * dim != len(board):
        raise ShapeError(f"Board of length {len(board)} is not square.")
    return dim


# -- construction & validation -------------------------------------------------


def require_dim(dim: int) -> int:
    if isinstance(dim, bool) or not isinstance(dim, int):
        raise DimensionError(f"dim must be an int, got {dim!r}.")
    if not MIN_DIM <= dim <= MAX_DIM:
        raise DimensionError(
            f"dim must be between {MIN_DIM} and {MAX_DIM}, got {dim}."
        )
    return dim


def create_goal(dim: int) -> list[int]:
    """Return the canonical goal: ``1 .. dim*dim - 1`` then the blank.

    Example::

        create_goal(3)  # [1, 2, 3, 4, 5, 6, 7, 8, 0]
    """
    size = require_dim(dim) ** 2
    return [*range(1, size), BLANK]


def validate(dim: int, board: Sequence[int]) -> Sequence[int]:
    """Check that *board* is a permutation of ``0 .. dim*dim - 1``.

    Returns *board* itself; copying is up to the caller.
    """
    size = dim * dim
    if len(board) != size:
        raise ShapeError(f"Board has length {len(board)}, should be {size}.")

    seen = [False] * size
    for i, tile in enumerate(board):
        if isinstance(tile, bool) or not isinstance(tile, int):
            raise TypeError(f"board[{i}] must be an int, got {tile!r}.")
        if not 0 <= tile < size:
            raise RangeError(
                f"board[{i}] is {tile}, must be between 0 and {size - 1}."
            )
        if seen[tile]:
            raise DuplicateValueError(
                f"Repeated value found at index [{i}]: {tile}"
            )
        seen[tile] = True
    return board


def is_solved(board: Sequence[int], goal: Sequence[int]) -> bool:
    """Return True if the leading ``len(goal)`` tiles of *board* match *goal*."""
    if len(board) < len(goal):
        return False
    return all(board[i] == tile for i, tile in enumerate(goal))


# -- session board -------------------------------------------------------------


@dataclass
class Board:
    """A validated board with its dimension and tracked blank index."""

    dim: int
    tiles: list[int]
    blank: int

    @classmethod
    def from_flat(cls, dim: int, flat: Sequence[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        tiles = list(validate(dim, flat))
        return cls(dim=dim, tiles=tiles, blank=tiles.index(BLANK))

    # -- queries --------------------------------------------------------------

    def rows(self) -> list[list[int]]:
        d = self.dim
        return [self.tiles[r * d : (r + 1) * d] for r in range(d)]

    def is_tile_correct(self, index: int, goal: Sequence[int]) -> bool:
        """Check if the tile at *index* sits where *goal* wants it."""
        return self.tiles[index] == goal[index]
