"""Errors raised by the puzzle engine.

All of them are raised before any board is touched, so a rejected call
leaves the caller's state as it was.
"""

from __future__ import annotations


class PuzzleError(ValueError):
    """Base class for invalid boards, goals, dimensions and moves."""


class ShapeError(PuzzleError):
    """Board length does not match ``dim * dim``."""


class RangeError(PuzzleError):
    """A tile id lies outside ``[0, dim * dim - 1]``."""


class DuplicateValueError(PuzzleError):
    """A tile id appears more than once."""


class InvalidMoveError(PuzzleError):
    """The index is not adjacent to the blank."""


class DimensionError(PuzzleError):
    """Dimension outside the supported range."""
