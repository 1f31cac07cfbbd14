"""Board model: goals, validation, prefix matching."""

from __future__ import annotations

import pytest

from slidepuzzle.models.board import (
    MAX_DIM,
    MIN_DIM,
    Board,
    board_dim,
    create_goal,
    is_solved,
    validate,
)
from slidepuzzle.models.errors import (
    DimensionError,
    DuplicateValueError,
    PuzzleError,
    RangeError,
    ShapeError,
)

GOAL_3 = [1, 2, 3, 4, 5, 6, 7, 8, 0]


# -- create_goal --------------------------------------------------------------


@pytest.mark.parametrize("dim", range(MIN_DIM, MAX_DIM + 1))
def test_goal_is_permutation_with_blank_last(dim: int) -> None:
    goal = create_goal(dim)

    assert len(goal) == dim * dim
    assert sorted(goal) == list(range(dim * dim))
    assert goal[-1] == 0
    assert goal[:-1] == list(range(1, dim * dim))


def test_goal_3x3() -> None:
    assert create_goal(3) == GOAL_3


@pytest.mark.parametrize("dim", [0, 2, 16, 100])
def test_goal_rejects_unsupported_dimension(dim: int) -> None:
    with pytest.raises(DimensionError):
        create_goal(dim)


def test_goal_rejects_non_int_dimension() -> None:
    with pytest.raises(DimensionError):
        create_goal(3.0)  # type: ignore[arg-type]


# -- validate -----------------------------------------------------------------


def test_validate_returns_same_board() -> None:
    board = [8, 1, 2, 7, 0, 3, 6, 5, 4]
    assert validate(3, board) is board
    assert board == [8, 1, 2, 7, 0, 3, 6, 5, 4]


@pytest.mark.parametrize(
    "board",
    [
        [1, 2, 3, 4, 5, 6, 7, 0],
        [1, 2, 3, 4, 5, 6, 7, 8, 0, 9],
        [],
    ],
)
def test_validate_wrong_length(board: list[int]) -> None:
    with pytest.raises(ShapeError):
        validate(3, board)


@pytest.mark.parametrize(
    "board",
    [
        [1, 2, 3, 4, 5, 6, 7, 9, 0],
        [1, 2, 3, 4, 5, 6, 7, -1, 0],
    ],
)
def test_validate_out_of_range(board: list[int]) -> None:
    with pytest.raises(RangeError):
        validate(3, board)


def test_validate_duplicate() -> None:
    with pytest.raises(DuplicateValueError, match="index \\[8\\]: 1"):
        validate(3, [1, 2, 3, 4, 5, 6, 7, 8, 1])


def test_validate_rejects_non_int_tiles() -> None:
    with pytest.raises(TypeError):
        validate(3, [1, 2, 3, 4, 5, 6, 7, 8, "0"])  # type: ignore[list-item]
    with pytest.raises(TypeError):
        validate(3, [1, 2, 3, 4, 5, 6, 7, 8, False])


def test_errors_share_a_base() -> None:
    for exc in (ShapeError, RangeError, DuplicateValueError, DimensionError):
        assert issubclass(exc, PuzzleError)
        assert issubclass(exc, ValueError)


# -- is_solved ----------------------------------------------------------------


def test_is_solved_full_goal() -> None:
    assert is_solved(GOAL_3, GOAL_3)
    assert not is_solved([1, 2, 3, 4, 5, 6, 7, 0, 8], GOAL_3)


@pytest.mark.parametrize("g", range(1, 8))
def test_is_solved_prefix(g: int) -> None:
    board = [1, 2, 3, 4, 5, 6, 7, 0, 8]
    assert is_solved(board, GOAL_3[:g])


def test_is_solved_prefix_mismatch() -> None:
    board = [1, 3, 2, 4, 5, 6, 7, 8, 0]
    assert is_solved(board, [1])
    assert not is_solved(board, [1, 2])


def test_is_solved_empty_goal_and_short_board() -> None:
    assert is_solved(GOAL_3, [])
    assert not is_solved([1, 2], GOAL_3)


# -- Board --------------------------------------------------------------------


def test_board_from_flat() -> None:
    board = Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])

    assert board.blank == 7
    assert board.rows() == [[1, 2, 3], [4, 5, 6], [7, 0, 8]]
    assert board.is_tile_correct(0, GOAL_3)
    assert not board.is_tile_correct(8, GOAL_3)


def test_board_from_flat_copies_and_validates() -> None:
    flat = [1, 2, 3, 4, 5, 6, 7, 0, 8]
    board = Board.from_flat(3, flat)
    board.tiles[0] = 99
    assert flat[0] == 1

    with pytest.raises(DuplicateValueError):
        Board.from_flat(3, [1, 1, 3, 4, 5, 6, 7, 0, 8])


def test_board_dim() -> None:
    assert board_dim(GOAL_3) == 3
    assert board_dim(create_goal(15)) == 15
    with pytest.raises(ShapeError):
        board_dim([1, 2, 0])
