from slidepuzzle.engine.gamemoves.moves import Applier, MoveGenerator

__all__ = ["Applier", "MoveGenerator"]
