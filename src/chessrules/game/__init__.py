"""Game management layer."""

from chessrules.game.state import GameState

__all__ = ["GameState"]
