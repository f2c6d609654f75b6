"""Game management layer: session, placement pipeline, observation, turns.

Quick start::

    from qgomoku.game import GameSession

    session = GameSession(service, renderer)
    session.start()
    session.click(0, 0)
"""

from qgomoku.game.interfaces import GamePhase, IBoardRenderer, IGameService
from qgomoku.game.messages import (
    Notification,
    TurnNotification,
    WinnerNotification,
    parse_notification,
)
from qgomoku.game.observation import ObservationEngine
from qgomoku.game.session import GameSession, SessionEvents
from qgomoku.game.submission import MoveSubmission, PlacementRequest, PlacementStatus
from qgomoku.game.turn import OPENING_TURN, TurnState

__all__ = [
    # Interfaces
    "GamePhase",
    "IBoardRenderer",
    "IGameService",
    # Messages
    "Notification",
    "TurnNotification",
    "WinnerNotification",
    "parse_notification",
    # Concrete
    "GameSession",
    "MoveSubmission",
    "OPENING_TURN",
    "ObservationEngine",
    "PlacementRequest",
    "PlacementStatus",
    "SessionEvents",
    "TurnState",
]
