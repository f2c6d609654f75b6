"""Abstract boundaries of the game layer.

``GameSession`` depends on these, not on the Qt worker or the in-process
backend, so tests can drive it with scripted fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import IntEnum, auto
from typing import Protocol

from qgomoku.core.enums import StoneVisual

# Payloads stay untyped until the session validates them.
SuccessCallback = Callable[[object], None]
FailureCallback = Callable[[str], None]


class GamePhase(IntEnum):
    """Finite-state-machine states for one game."""

    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    DECIDED = auto()


class IGameService(ABC):
    """Client view of the authoritative game service.

    Every call except :meth:`get_board_size` is asynchronous: the result is
    delivered later, on the caller's thread, through exactly one of the two
    callbacks.
    """

    @abstractmethod
    def get_board_size(self) -> int:
        """Board dimension N."""

    @abstractmethod
    def init_game(self) -> None:
        """(Re)initialise server-side game state. Fire-and-forget."""

    @abstractmethod
    def place_stone(
        self,
        x: int,
        y: int,
        on_success: SuccessCallback,
        on_failure: FailureCallback,
    ) -> None:
        """Place a stone at column *x*, row *y*; success carries the tier."""

    @abstractmethod
    def observe(self, on_success: SuccessCallback, on_failure: FailureCallback) -> None:
        """Collapse the board; success carries an N x N grid (100/0/None)."""

    @abstractmethod
    def get_board(self, on_success: SuccessCallback, on_failure: FailureCallback) -> None:
        """Fetch the server's tiered board for diagnostics."""


class IBoardRenderer(Protocol):
    """Drawing surface used by the session. Owns no game logic."""

    def draw_empty_grid(self, size: int) -> None: ...

    def draw_stone(
        self,
        x: float,
        y: float,
        visual: StoneVisual,
        opacity: float = 1.0,
    ) -> None: ...
