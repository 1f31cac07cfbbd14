from slidepuzzle.engine.gamegenerator import Shuffler
from slidepuzzle.engine.gamemoves import Applier, MoveGenerator
from slidepuzzle.engine.gameplay import GamePlay
from slidepuzzle.engine.gamesolver import Solver
from slidepuzzle.engine.gamestate import GameState

__all__ = ["Applier", "GamePlay", "GameState", "MoveGenerator", "Shuffler", "Solver"]
