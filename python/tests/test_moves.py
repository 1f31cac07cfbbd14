"""Legal moves, single-move application and sequence replay."""

from __future__ import annotations

import pytest

from slidepuzzle.engine.gamemoves import Applier, MoveGenerator
from slidepuzzle.models.board import Direction, create_goal
from slidepuzzle.models.errors import InvalidMoveError, ShapeError

GOAL_3 = [1, 2, 3, 4, 5, 6, 7, 8, 0]


def _with_blank_at(index: int, dim: int = 3) -> list[int]:
    board = create_goal(dim)
    board[-1], board[index] = board[index], board[-1]
    return board


# -- legal_moves --------------------------------------------------------------


@pytest.mark.parametrize(
    ("blank", "expected"),
    [
        (0, [3, 1]),          # corner
        (2, [5, 1]),          # corner
        (8, [5, 7]),          # corner
        (1, [4, 0, 2]),       # edge
        (3, [0, 6, 4]),       # edge
        (7, [4, 6, 8]),       # edge
        (4, [1, 7, 3, 5]),    # interior
    ],
)
def test_legal_moves_order_up_down_left_right(blank: int, expected: list[int]) -> None:
    assert MoveGenerator.legal_moves(_with_blank_at(blank), 3) == expected


@pytest.mark.parametrize("dim", [3, 4, 7, 15])
def test_legal_moves_count(dim: int) -> None:
    size = dim * dim
    for blank in range(size):
        count = len(MoveGenerator.legal_moves(_with_blank_at(blank, dim), dim))
        r, c = divmod(blank, dim)
        edges = (r in (0, dim - 1)) + (c in (0, dim - 1))
        assert count == 4 - edges


def test_legal_moves_scenario_a() -> None:
    board = [1, 2, 3, 4, 5, 6, 7, 0, 8]
    moves = MoveGenerator.legal_moves(board, 3)

    assert 8 in moves and board[8] == 8
    assert 6 in moves
    assert moves == [4, 6, 8]


def test_neighbors_matches_legal_moves() -> None:
    for blank in range(9):
        assert list(MoveGenerator.neighbors(blank, 3)) == MoveGenerator.legal_moves(
            _with_blank_at(blank), 3
        )


# -- apply_move ---------------------------------------------------------------


def test_apply_move_in_place() -> None:
    board = [1, 2, 3, 4, 5, 6, 7, 0, 8]
    result = MoveGenerator.apply_move(board, 8)

    assert result is board
    assert board == GOAL_3


@pytest.mark.parametrize("index", [0, 2, 4, 8, -1, 9, 100])
def test_apply_move_illegal_leaves_board_untouched(index: int) -> None:
    board = [1, 2, 3, 4, 5, 6, 7, 8, 0]
    with pytest.raises(InvalidMoveError):
        MoveGenerator.apply_move(board, index)
    assert board == GOAL_3


def test_apply_move_rejects_non_square_board() -> None:
    with pytest.raises(ShapeError):
        MoveGenerator.apply_move([1, 0, 2], 0)


def test_apply_move_with_known_blank() -> None:
    board = [1, 2, 3, 4, 5, 6, 7, 0, 8]
    assert MoveGenerator.apply_move(board, 4, blank=7) == [1, 2, 3, 4, 0, 6, 7, 5, 8]

    with pytest.raises(InvalidMoveError):
        MoveGenerator.apply_move(board, 8, blank=4)
    assert board == [1, 2, 3, 4, 0, 6, 7, 5, 8]


# -- index_for ----------------------------------------------------------------


@pytest.mark.parametrize(
    ("direction", "expected"),
    [
        (Direction.UP, 7),     # tile below the blank moves up
        (Direction.DOWN, 1),   # tile above the blank moves down
        (Direction.LEFT, 5),   # tile right of the blank moves left
        (Direction.RIGHT, 3),  # tile left of the blank moves right
    ],
)
def test_index_for_interior(direction: Direction, expected: int) -> None:
    assert MoveGenerator.index_for(_with_blank_at(4), 3, direction) == expected


def test_index_for_edge() -> None:
    board = GOAL_3  # blank bottom-right
    assert MoveGenerator.index_for(board, 3, Direction.UP) is None
    assert MoveGenerator.index_for(board, 3, Direction.LEFT) is None
    assert MoveGenerator.index_for(board, 3, Direction.DOWN) == 5
    assert MoveGenerator.index_for(board, 3, Direction.RIGHT) == 7


def test_index_for_with_known_blank() -> None:
    board = _with_blank_at(0)
    assert MoveGenerator.index_for(board, 3, Direction.UP, blank=0) == 3
    assert MoveGenerator.index_for(board, 3, Direction.RIGHT, blank=0) is None


# -- play ---------------------------------------------------------------------


def test_play_sequence() -> None:
    board = [1, 2, 3, 4, 0, 5, 7, 8, 6]
    result = Applier.play(board, [5, 8])

    assert result == GOAL_3
    assert board == [1, 2, 3, 4, 0, 5, 7, 8, 6]


def test_play_empty_sequence_copies() -> None:
    result = Applier.play(GOAL_3, [])
    assert result == GOAL_3
    assert result is not GOAL_3


def test_play_intermediate_boards_stay_permutations() -> None:
    board = GOAL_3
    for index in [5, 4, 3, 0, 1, 4, 7, 8]:
        board = Applier.play(board, [index])
        assert sorted(board) == list(range(9))


def test_play_rejects_illegal_move_midway() -> None:
    board = [1, 2, 3, 4, 0, 5, 7, 8, 6]
    with pytest.raises(InvalidMoveError, match="Move 1"):
        Applier.play(board, [5, 0])
    assert board == [1, 2, 3, 4, 0, 5, 7, 8, 6]


def test_play_then_reverse_restores_board() -> None:
    moves = [5, 4, 1, 0, 3]
    # The blank walks 8 → 5 → 4 → 1 → 0 → 3; walk it back to 8.
    back = [0, 1, 4, 5, 8]
    assert Applier.play(Applier.play(GOAL_3, moves), back) == GOAL_3
