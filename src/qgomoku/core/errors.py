"""Exception hierarchy shared by the client core and the backend."""

from __future__ import annotations


class GameError(Exception):
    """Base class for all game errors."""


class OutOfBounds(GameError, IndexError):
    """Board coordinates outside ``[0, size)``."""

    def __init__(self, row: int, col: int, size: int) -> None:
        super().__init__(f"({row}, {col}) is outside a {size}x{size} board")
        self.row = row
        self.col = col
        self.size = size


class CellOccupied(GameError):
    """A tier was written into a cell that is not empty."""

    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"Cell ({row}, {col}) is not empty")
        self.row = row
        self.col = col


class MoveRejected(GameError):
    """The service declined a placement, or answered with an unusable payload."""


class StaleObservationResponse(GameError):
    """A collapsed board arrived for an observation that is no longer active."""


class RequestFailed(GameError):
    """A service request failed in transport or timed out."""
