"""MoveSubmission - click -> service request -> tier commit or resync."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum, auto

from qgomoku.core.board import Board
from qgomoku.core.cell import EmptyCell, TierCell
from qgomoku.core.enums import Tier
from qgomoku.core.errors import CellOccupied, MoveRejected
from qgomoku.game.interfaces import IGameService
from qgomoku.game.messages import parse_tier_grid

_LOGGER = logging.getLogger(__name__)

WriteTier = Callable[[int, int, Tier], None]
RejectedCallback = Callable[[int, int, str], None]  # row, col, reason


class PlacementStatus(IntEnum):
    PENDING = auto()
    APPLIED = auto()
    REJECTED = auto()
    ABANDONED = auto()  # the game was restarted before the answer arrived


@dataclass
class PlacementRequest:
    row: int
    col: int
    generation: int
    status: PlacementStatus = PlacementStatus.PENDING
    tier: Tier | None = None


class MoveSubmission:
    """Tracks in-flight placements and applies their authoritative answers.

    Args:
        service: Authoritative game service.
        live_board: Returns the tiered board (the observation snapshot while
            the observed view is shown).
        write_tier: Commits a tier into the live board; must raise
            :class:`CellOccupied` if the cell is taken.
    """

    __slots__ = (
        "_service",
        "_live_board",
        "_write_tier",
        "_pending",
        "_generation",
        "on_rejected",
    )

    def __init__(
        self,
        service: IGameService,
        *,
        live_board: Callable[[], Board],
        write_tier: WriteTier,
    ) -> None:
        self._service = service
        self._live_board = live_board
        self._write_tier = write_tier
        self._pending: dict[tuple[int, int], PlacementRequest] = {}
        self._generation = 0
        self.on_rejected: list[RejectedCallback] = []

    @property
    def pending_cells(self) -> frozenset[tuple[int, int]]:
        return frozenset(self._pending)

    def is_pending(self, row: int, col: int) -> bool:
        return (row, col) in self._pending

    def can_place(self, row: int, col: int) -> bool:
        board = self._live_board()
        return (
            board.in_bounds(row, col)
            and board.is_empty(row, col)
            and not self.is_pending(row, col)
        )

    def submit(self, row: int, col: int) -> PlacementRequest | None:
        """Issue a placement for ``(row, col)``; ``None`` if not placeable."""
        if not self.can_place(row, col):
            return None
        request = PlacementRequest(row, col, self._generation)
        self._pending[(row, col)] = request
        _LOGGER.debug("Placing stone at (%d, %d)", row, col)
        self._service.place_stone(
            col,
            row,
            lambda payload: self._on_success(request, payload),
            lambda message: self._on_failure(request, message),
        )
        return request

    def reset(self) -> None:
        """Abandon all in-flight placements (game restart)."""
        for request in self._pending.values():
            request.status = PlacementStatus.ABANDONED
        self._pending.clear()
        self._generation += 1

    # -- Responses ----------------------------------------------------------

    def _is_current(self, request: PlacementRequest) -> bool:
        return (
            request.generation == self._generation
            and self._pending.get((request.row, request.col)) is request
        )

    def _on_success(self, request: PlacementRequest, payload: object) -> None:
        if not self._is_current(request):
            _LOGGER.debug(
                "Ignoring placement answer for (%d, %d) from a previous game",
                request.row,
                request.col,
            )
            return
        del self._pending[(request.row, request.col)]

        try:
            tier = Tier.from_value(payload)
        except ValueError:
            self._reject(request, f"Unexpected placement payload: {payload!r}")
            return
        try:
            self._write_tier(request.row, request.col, tier)
        except CellOccupied as exc:
            self._reject(request, str(exc))
            return
        request.tier = tier
        request.status = PlacementStatus.APPLIED

    def _on_failure(self, request: PlacementRequest, message: str) -> None:
        if not self._is_current(request):
            return
        del self._pending[(request.row, request.col)]
        self._reject(request, message)

    def _reject(self, request: PlacementRequest, reason: str) -> None:
        request.status = PlacementStatus.REJECTED
        error = MoveRejected(reason)
        _LOGGER.warning(
            "Placement at (%d, %d) rejected: %s", request.row, request.col, error
        )
        for cb in self.on_rejected:
            cb(request.row, request.col, reason)
        self._request_resync()

    # -- Resync -------------------------------------------------------------

    def _request_resync(self) -> None:
        generation = self._generation
        self._service.get_board(
            lambda payload: self._on_board(generation, payload),
            lambda message: _LOGGER.warning("Board resync failed: %s", message),
        )

    def _on_board(self, generation: int, payload: object) -> None:
        if generation != self._generation:
            return
        board = self._live_board()
        try:
            remote = parse_tier_grid(payload, board.size)
        except ValueError as exc:
            _LOGGER.warning("Board resync returned an unusable payload: %s", exc)
            return
        mismatches = count_mismatches(board, remote)
        if mismatches:
            _LOGGER.warning(
                "Local board differs from the service in %d cells", mismatches
            )
        else:
            _LOGGER.info("Local board matches the service")


def count_mismatches(board: Board, remote: list[list[Tier | None]]) -> int:
    """Cells where the local tiered board disagrees with *remote*."""
    mismatches = 0
    for r, row in enumerate(remote):
        for c, tier in enumerate(row):
            cell = board.get(r, c)
            if tier is None:
                if not isinstance(cell, EmptyCell):
                    mismatches += 1
            elif cell != TierCell(tier):
                mismatches += 1
    return mismatches
