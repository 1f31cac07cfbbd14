"""Core gameplay logic for one puzzle instance driven by a front end."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Sequence

from slidepuzzle.engine.gamegenerator import Shuffler
from slidepuzzle.engine.gamemoves import MoveGenerator
from slidepuzzle.engine.gamesolver import Solver
from slidepuzzle.engine.gamestate import GameState
from slidepuzzle.models.board import (
    DEFAULT_DIM,
    Board,
    Direction,
    board_dim,
    create_goal,
    is_solved,
    require_dim,
    validate,
)

_logger = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a single puzzle: goal, board, moves and solution playback.

    The front end renders ``state.board`` and calls :meth:`move`,
    :meth:`move_tile` or :meth:`step`.  A manual move drops any pending
    playback and notifies the listener set with :meth:`change`.
    """

    def __init__(self, dim: int = DEFAULT_DIM, rng: random.Random | None = None) -> None:
        self._rng = rng
        self._on_change: Callable[[int], None] | None = None
        self._dim = require_dim(dim)
        self._goal = tuple(create_goal(dim))
        self.state = GameState(Board.from_flat(dim, Shuffler.generate(dim, rng)))

    @classmethod
    def from_board(
        cls, board: Sequence[int], goal: Sequence[int] | None = None
    ) -> GamePlay:
        """Create a game session from an existing layout."""
        dim = require_dim(board_dim(board))
        obj = object.__new__(cls)
        obj._rng = None
        obj._on_change = None
        obj._dim = dim
        obj._goal = tuple(create_goal(dim) if goal is None else validate(dim, goal))
        obj.state = GameState(Board.from_flat(dim, board))
        return obj

    # -- configuration --------------------------------------------------------

    @property
    def dim(self) -> int:
        return self._dim

    @property
    def goal(self) -> tuple[int, ...]:
        return self._goal

    def set_goal(self, goal: Sequence[int]) -> None:
        """Replace the target layout; it must fit the current dimension."""
        self._goal = tuple(validate(self._dim, goal))

    def layout(self) -> list[int]:
        """Return a copy of the current tiles."""
        return self.state.board.tiles[:]

    def set_layout(self, board: Sequence[int]) -> None:
        """Replace the tiles with a copy of *board*; pending playback is dropped."""
        self.state.board = Board.from_flat(self._dim, board)
        self.state.playing.clear()

    def reset(self, dim: int | None = None) -> None:
        """Start over, optionally with a new dimension (and canonical goal)."""
        if dim is not None:
            self._dim = require_dim(dim)
            self._goal = tuple(create_goal(dim))
        self.state = GameState(
            Board.from_flat(self._dim, Shuffler.generate(self._dim, self._rng))
        )

    def shuffle(self) -> None:
        """Reshuffle from the current goal; counters start over."""
        board = Shuffler.shuffle(self._goal, self._dim, self._rng)
        while tuple(board) == self._goal:
            _logger.debug("Shuffle landed on the goal, reshuffling")
            board = Shuffler.shuffle(self._goal, self._dim, self._rng)
        self.state = GameState(Board.from_flat(self._dim, board))

    def change(self, callback: Callable[[int], None] | None) -> GamePlay:
        """Call *callback* with the moved index after every manual move.

        Solution playback through :meth:`step` does not notify.  Pass
        ``None`` to remove the listener.
        """
        if callback is not None and not callable(callback):
            raise TypeError("callback must be callable")
        self._on_change = callback
        return self

    # -- movement -------------------------------------------------------------

    def movable_tiles(self) -> dict[int, int]:
        """Map each tile id that may slide to its board index."""
        board = self.state.board
        return {
            board.tiles[i]: i for i in MoveGenerator.neighbors(board.blank, self._dim)
        }

    def move_tile(self, tile_id: int) -> bool:
        """Slide tile *tile_id* into the blank (click semantics).

        Returns True if the tile was adjacent to the blank and moved.
        """
        index = self.movable_tiles().get(tile_id)
        if index is None:
            return False
        self._user_move(index)
        return True

    def move(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the adjacent blank (keyboard semantics).

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns True if the move was valid.
        """
        board = self.state.board
        index = MoveGenerator.index_for(board.tiles, self._dim, direction, board.blank)
        if index is None:
            return False
        self._user_move(index)
        return True

    # -- solving --------------------------------------------------------------

    def solve(self) -> list[int] | None:
        """Compute a solution and queue it for :meth:`step`.

        A new solution replaces whatever playback was still pending.
        Returns ``None`` (and leaves the queue alone) when the solver gives up.
        """
        solution = Solver.solve(self.state.board.tiles, self._goal)
        if solution is None:
            _logger.info("Failed to resolve the puzzle")
            return None
        self.state.playing.clear()
        self.state.playing.extend(solution)
        return solution

    def step(self) -> int | None:
        """Play the next queued move; return its index, or ``None`` when idle."""
        if not self.state.playing:
            return None
        index = self.state.playing.popleft()
        self._apply(index)
        return index

    def hint(self) -> int | None:
        return Solver.hint(self.state.board.tiles, self._goal)

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return is_solved(self.state.board.tiles, self._goal)

    # -- helpers --------------------------------------------------------------

    def _user_move(self, index: int) -> None:
        self.state.playing.clear()
        self._apply(index)
        if self._on_change is not None:
            self._on_change(index)

    def _apply(self, index: int) -> None:
        board = self.state.board
        MoveGenerator.apply_move(board.tiles, index, board.blank)
        self.state.record_move(index)
