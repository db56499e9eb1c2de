"""Game management layer — state machine, controller, rule options.

Quick start::

    from atomic_chess.game import GameController

    ctrl = GameController()
    ctrl.events.on_game_over.append(print)
    ctrl.new_game()
    ctrl.submit_move("e2", "e4")
"""

from atomic_chess.game.controller import GameController, GameEvents
from atomic_chess.game.interfaces import GamePhase, RuleOptions
from atomic_chess.game.state import GameState

__all__ = [
    # Interfaces
    "GamePhase",
    "RuleOptions",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
]
