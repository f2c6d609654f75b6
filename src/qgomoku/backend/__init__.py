"""Game service package: in-process authoritative game and Qt worker bridge."""

from qgomoku.backend.game import (
    DEFAULT_BOARD_SIZE,
    GameIsAlreadyOver,
    InvalidPosition,
    LocalGame,
    find_winners,
)
from qgomoku.backend.qt_bridge import ServiceWorker

__all__ = [
    "DEFAULT_BOARD_SIZE",
    "GameIsAlreadyOver",
    "InvalidPosition",
    "LocalGame",
    "ServiceWorker",
    "find_winners",
]
