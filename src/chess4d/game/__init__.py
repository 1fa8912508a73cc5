"""Game management layer — controller, state machine, move history.

Quick start::

    from chess4d.game import GameController

    ctrl = GameController()
    ctrl.select_piece((0, 1, 0, 0))
    outcome = ctrl.make_move(ctrl.valid_moves_for_selected()[0])
"""

from chess4d.game.controller import PROMOTION_TYPES, GameController, GameEvents
from chess4d.game.interfaces import GamePhase, IGameController, MoveRejection
from chess4d.game.state import (
    GameSnapshot,
    GameState,
    MoveOutcome,
    MoveRecord,
    PromotionNotice,
)

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    "MoveRejection",
    # Concrete
    "GameController",
    "GameEvents",
    "GameSnapshot",
    "GameState",
    "MoveOutcome",
    "MoveRecord",
    "PROMOTION_TYPES",
    "PromotionNotice",
]
