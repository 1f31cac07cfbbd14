"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from slidepuzzle.engine.gamemoves import MoveGenerator
from slidepuzzle.models.board import BLANK, create_goal

_logger = logging.getLogger(__name__)


class Shuffler:
    """Creates solvable puzzles by random walks from the goal state."""

    @staticmethod
    def shuffle(
        goal: Sequence[int], dim: int, rng: random.Random | None = None
    ) -> list[int]:
        """Return a board reached from *goal* by ``2 * dim**2`` random moves.

        Every step is a legal move, so the result is always solvable.  The
        cell the blank just left is excluded from the next step's choices
        so the walk does not immediately undo itself.
        """
        choose = (rng or random).choice
        board = list(goal)
        free = board.index(BLANK)
        last = -1

        for _ in range(2 * dim * dim):
            movables = MoveGenerator.legal_moves(board, dim)
            if last in movables:
                movables.remove(last)
            target = choose(movables)
            board[free], board[target] = board[target], BLANK
            last, free = free, target

        return board

    @staticmethod
    def generate(dim: int, rng: random.Random | None = None) -> list[int]:
        """Return a shuffled board of the given size that is not already solved."""
        goal = create_goal(dim)
        board = Shuffler.shuffle(goal, dim, rng)
        while board == goal:
            _logger.debug("Shuffle landed on the goal, reshuffling")
            board = Shuffler.shuffle(goal, dim, rng)
        return board
