from slidepuzzle.engine.gamesolver.solver import Solver

__all__ = ["Solver"]
