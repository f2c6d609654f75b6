"""ObservationEngine - snapshot/restore around the observed board view."""

from __future__ import annotations

import logging

from qgomoku.core.board import Board
from qgomoku.core.enums import Player, Tier
from qgomoku.core.errors import StaleObservationResponse

_LOGGER = logging.getLogger(__name__)


class ObservationEngine:
    """Owns the snapshot of the live board while the observed view is shown.

    Each :meth:`enter` starts a new cycle. A collapsed board is only painted
    if it belongs to the cycle that is still active; anything else is stale.
    """

    __slots__ = ("_snapshot", "_cycle", "_active_cycle")

    def __init__(self) -> None:
        self._snapshot: Board | None = None
        self._cycle = 0
        self._active_cycle: int | None = None

    @property
    def is_active(self) -> bool:
        return self._active_cycle is not None

    @property
    def active_cycle(self) -> int | None:
        return self._active_cycle

    def live_board(self, displayed: Board) -> Board:
        """The tiered board: the snapshot while observing, else *displayed*."""
        return self._snapshot if self._snapshot is not None else displayed

    def enter(self, board: Board) -> int:
        """Snapshot *board* and start a new cycle. Returns the cycle id."""
        if self.is_active:
            raise RuntimeError("Observation is already active")
        self._snapshot = board.snapshot()
        self._cycle += 1
        self._active_cycle = self._cycle
        return self._cycle

    def exit(self, board: Board) -> None:
        """Restore *board* from the snapshot and discard it."""
        if self._snapshot is None:
            raise RuntimeError("Observation is not active")
        board.replace_with(self._snapshot)
        self._snapshot = None
        self._active_cycle = None

    def discard(self) -> None:
        """Drop the snapshot without restoring (the board is being reset)."""
        self._snapshot = None
        self._active_cycle = None

    def apply_collapsed(
        self,
        cycle: int,
        board: Board,
        grid: list[list[Player | None]],
    ) -> int:
        """Paint every non-null cell of *grid*; returns the painted count."""
        if cycle != self._active_cycle:
            raise StaleObservationResponse(
                f"Observation cycle {cycle} is no longer active"
            )
        painted = 0
        for r, row in enumerate(grid):
            for c, player in enumerate(row):
                if player is not None:
                    board.set_classical(r, c, player)
                    painted += 1
        _LOGGER.debug("Observation %d painted %d stones", cycle, painted)
        return painted

    def write_tier(self, row: int, col: int, tier: Tier) -> None:
        """Commit a placement answered while observing into the live board."""
        if self._snapshot is None:
            raise RuntimeError("Observation is not active")
        self._snapshot.set_tier(row, col, tier)
