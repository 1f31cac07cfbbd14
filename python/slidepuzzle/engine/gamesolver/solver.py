"""Sliding puzzle solver: phased, exhaustive, depth-capped.

The goal is split into growing prefixes ``goal[:1], goal[:2], ...``.  Each
phase runs a depth-first search from the board left by the previous phase
until the board's leading cells match the prefix, keeping the shortest
winning sequence it met along the way.  Within a phase a board is expanded
at most once: later routes to an already visited board are cut, even when
they are shorter.  The search is therefore finite but not guaranteed to
find the shortest sequence.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from slidepuzzle.engine.gamemoves import Applier, MoveGenerator
from slidepuzzle.models.board import BLANK, board_dim, col_of, is_solved, row_of, validate
from slidepuzzle.models.errors import ShapeError

_logger = logging.getLogger(__name__)


class Solver:
    """Stateless solver — all methods are static."""

    #: Moves a single phase may take before a branch is abandoned.
    MAX_DEPTH = 50

    #: Upper bound accepted for ``max_depth``; keeps recursion well below
    #: the interpreter's limit.
    DEPTH_LIMIT = 500

    @staticmethod
    def solve(
        board: Sequence[int],
        goal: Sequence[int],
        max_depth: int = MAX_DEPTH,
    ) -> list[int] | None:
        """Return move indices turning *board* into *goal*, or ``None``.

        ``None`` means the bounded search found no way to complete some
        phase; it is an expected outcome, not an error.  An already solved
        board gives ``[]``.
        """
        if not 0 <= max_depth <= Solver.DEPTH_LIMIT:
            raise ValueError(
                f"max_depth must be between 0 and {Solver.DEPTH_LIMIT}, "
                f"got {max_depth}."
            )
        if len(board) != len(goal):
            raise ShapeError(
                f"Board has length {len(board)}, goal has {len(goal)}."
            )
        dim = board_dim(board)

        if not Solver.is_solvable(board, goal):
            _logger.info("Board cannot reach the goal, parity differs")
            return None

        current = list(board)
        solution: list[int] = []
        total = len(goal)

        for g in range(1, total + 1):
            wins = Solver._try_all(current, dim, list(goal[:g]), max_depth)
            win = Solver._most_efficient(wins)
            if win is None:
                _logger.warning(
                    "Step %d/%d: no solution within %d moves", g, total, max_depth
                )
                return None

            _logger.debug("Step %d/%d: %s", g, total, win)
            solution.extend(win)
            current = Applier.play(current, win)

        _logger.info("Solution has %d steps", len(solution))
        return solution

    @staticmethod
    def hint(board: Sequence[int], goal: Sequence[int]) -> int | None:
        """Return the next move index, or ``None`` if solved / unsolvable."""
        if is_solved(board, goal):
            return None

        moves = Solver.solve(board, goal)
        return moves[0] if moves else None

    @staticmethod
    def is_solvable(board: Sequence[int], goal: Sequence[int]) -> bool:
        """Return True if *board* can reach *goal* by legal moves.

        Every move swaps the blank with a neighbour, flipping both the
        parity of the board's permutation relative to the goal and the
        parity of the blank's distance from its goal cell.  The two must
        agree.  Both boards are validated first.
        """
        if len(board) != len(goal):
            raise ShapeError(
                f"Board has length {len(board)}, goal has {len(goal)}."
            )
        dim = board_dim(board)
        validate(dim, board)
        validate(dim, goal)
        size = len(board)

        where = [0] * size
        for i, tile in enumerate(goal):
            where[tile] = i
        perm = [where[tile] for tile in board]

        cycles = 0
        seen = [False] * size
        for start in range(size):
            if seen[start]:
                continue
            cycles += 1
            i = start
            while not seen[i]:
                seen[i] = True
                i = perm[i]

        b, t = board.index(BLANK), goal.index(BLANK)
        distance = abs(row_of(b, dim) - row_of(t, dim)) + abs(
            col_of(b, dim) - col_of(t, dim)
        )
        return (size - cycles) % 2 == distance % 2

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _try_all(
        board: list[int], dim: int, step: list[int], max_depth: int
    ) -> list[list[int]]:
        """Collect every winning action list met by one phase's search."""
        width = len(step)
        visited: set[tuple[int, ...]] = set()
        actions: list[int] = []
        wins: list[list[int]] = []

        def visit(current: list[int], free: int) -> None:
            if current[:width] == step:
                wins.append(actions[:])
                return

            if len(actions) > max_depth:
                return

            key = tuple(current)
            if key in visited:
                return  # prevent cycles
            visited.add(key)

            for index in MoveGenerator.neighbors(free, dim):
                moved = current[:]
                moved[free] = moved[index]
                moved[index] = BLANK
                actions.append(index)
                visit(moved, index)
                actions.pop()

        visit(board, board.index(BLANK))
        _logger.debug(
            "Prefix of %d: %d boards expanded, %d wins", width, len(visited), len(wins)
        )
        return wins

    @staticmethod
    def _most_efficient(wins: list[list[int]]) -> list[int] | None:
        """Shortest candidate; the earliest one wins a tie."""
        best: list[int] | None = None
        for win in wins:
            if best is None or len(win) < len(best):
                best = win
        return best
