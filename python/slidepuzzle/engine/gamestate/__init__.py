from slidepuzzle.engine.gamestate.state import GameState

__all__ = ["GameState"]
