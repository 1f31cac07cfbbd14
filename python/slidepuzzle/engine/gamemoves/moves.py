"""Legal-move generation and move application."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache

from slidepuzzle.models.board import BLANK, Direction, board_dim, col_of, row_of
from slidepuzzle.models.errors import InvalidMoveError

# The offset points to the tile that will slide into the blank.
# UP   → tile below the blank moves up
# DOWN → tile above the blank moves down
# LEFT → tile right of the blank moves left
# RIGHT→ tile left of the blank moves right
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


@lru_cache(maxsize=None)
def _adjacency(dim: int) -> tuple[tuple[int, ...], ...]:
    adj: list[tuple[int, ...]] = []
    last = dim - 1
    for i in range(dim * dim):
        r, c = row_of(i, dim), col_of(i, dim)
        nb: list[int] = []
        if r > 0:    nb.append(i - dim)
        if r < last: nb.append(i + dim)
        if c > 0:    nb.append(i - 1)
        if c < last: nb.append(i + 1)
        adj.append(tuple(nb))
    return tuple(adj)


class MoveGenerator:
    """Stateless helpers over flat boards; all methods are static."""

    @staticmethod
    def neighbors(index: int, dim: int) -> tuple[int, ...]:
        """Indices 4-adjacent to *index*, ordered up, down, left, right."""
        return _adjacency(dim)[index]

    @staticmethod
    def legal_moves(board: Sequence[int], dim: int) -> list[int]:
        """Return the indices of the tiles that can slide into the blank."""
        return list(_adjacency(dim)[board.index(BLANK)])

    @staticmethod
    def apply_move(
        board: list[int], index: int, blank: int | None = None
    ) -> list[int]:
        """Slide the tile at *index* into the blank, in place.

        *blank* is the blank's index when the caller already tracks it;
        otherwise it is looked up.  Raises ``InvalidMoveError`` (leaving
        *board* untouched) when the tile is not next to the blank.
        """
        dim = board_dim(board)
        if blank is None:
            blank = board.index(BLANK)
        if index not in _adjacency(dim)[blank]:
            raise InvalidMoveError(
                f"Index {index} is not adjacent to the blank at {blank}."
            )
        board[blank], board[index] = board[index], BLANK
        return board

    @staticmethod
    def index_for(
        board: Sequence[int],
        dim: int,
        direction: Direction,
        blank: int | None = None,
    ) -> int | None:
        """Index of the tile that would slide in *direction*, or ``None``."""
        if blank is None:
            blank = board.index(BLANK)
        dr, dc = _OFFSETS[direction]
        tr, tc = row_of(blank, dim) + dr, col_of(blank, dim) + dc
        if not (0 <= tr < dim and 0 <= tc < dim):
            return None
        return tr * dim + tc


class Applier:
    """Replays move sequences."""

    @staticmethod
    def play(board: Sequence[int], moves: Sequence[int]) -> list[int]:
        """Return a new board with *moves* applied in order.

        The blank index is carried from one move to the next rather than
        searched for again.  *board* itself is never modified.
        """
        new_board = list(board)
        adj = _adjacency(board_dim(new_board))
        free = new_board.index(BLANK)

        for i, index in enumerate(moves):
            if index not in adj[free]:
                raise InvalidMoveError(
                    f"Move {i} ({index}) is not adjacent to the blank at {free}."
                )
            new_board[free] = new_board[index]
            new_board[index] = BLANK
            free = index

        return new_board
