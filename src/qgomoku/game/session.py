"""GameSession - the single owner of one client's game state.

Coordinates: Board, TurnState, MoveSubmission, ObservationEngine.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field

from qgomoku.core.board import Board
from qgomoku.core.cell import Cell, visual_of
from qgomoku.core.coords import BOARD_MARGIN, GRID_SIZE, cell_to_pixel
from qgomoku.core.enums import Player, Tier
from qgomoku.game.interfaces import GamePhase, IBoardRenderer, IGameService
from qgomoku.game.messages import (
    Notification,
    TurnNotification,
    WinnerNotification,
    parse_collapsed_grid,
    parse_notification,
)
from qgomoku.game.observation import ObservationEngine
from qgomoku.game.submission import MoveSubmission, PlacementRequest
from qgomoku.game.turn import OPENING_TURN, TurnState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

TurnCallback = Callable[[TurnState], None]
PhaseCallback = Callable[[GamePhase], None]
GameOverCallback = Callable[[Player], None]  # winner
ObservationCallback = Callable[[bool], None]  # observing
RejectedCallback = Callable[[int, int, str], None]  # row, col, reason


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_turn_changed: list[TurnCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_observation_changed: list[ObservationCallback] = field(default_factory=list)
    on_move_rejected: list[RejectedCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession:
    """Client-side state of one game against the authoritative service.

    Thread-safety: every method, service callback and notification must run
    on one thread (the Qt main thread). Notifications go through
    :meth:`post` and are drained in arrival order, never re-entrantly.
    """

    __slots__ = (
        "_service",
        "_renderer",
        "_grid",
        "_margin",
        "_hover_opacity",
        "_board",
        "_turn",
        "_phase",
        "_winner",
        "_observation",
        "_submission",
        "_inbox",
        "_draining",
        "events",
    )

    def __init__(
        self,
        service: IGameService,
        renderer: IBoardRenderer | None = None,
        *,
        grid: int = GRID_SIZE,
        margin: int = BOARD_MARGIN,
        hover_opacity: float = 0.5,
    ) -> None:
        self._service = service
        self._renderer = renderer
        self._grid = grid
        self._margin = margin
        self._hover_opacity = hover_opacity

        self._board: Board | None = None
        self._turn = OPENING_TURN
        self._phase = GamePhase.NOT_STARTED
        self._winner: Player | None = None
        self._observation = ObservationEngine()
        self._submission = MoveSubmission(
            service,
            live_board=lambda: self._observation.live_board(self.board),
            write_tier=self._write_tier,
        )
        self._submission.on_rejected.append(self._emit_rejected)
        self._inbox: deque[Notification] = deque()
        self._draining = False
        self.events = SessionEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        """The displayed board (classical cells while observing)."""
        if self._board is None:
            raise RuntimeError("Session has not been started")
        return self._board

    @property
    def live_board(self) -> Board:
        """The tiered board, regardless of the observation view."""
        return self._observation.live_board(self.board)

    @property
    def turn(self) -> TurnState:
        return self._turn

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def winner(self) -> Player | None:
        return self._winner

    @property
    def is_observing(self) -> bool:
        return self._observation.is_active

    @property
    def is_input_enabled(self) -> bool:
        return self._phase == GamePhase.IN_PROGRESS and not self.is_observing

    @property
    def can_observe(self) -> bool:
        """Whether the observe toggle does anything right now."""
        if self.is_observing:
            return True
        return self._phase == GamePhase.IN_PROGRESS

    def set_renderer(self, renderer: IBoardRenderer | None) -> None:
        self._renderer = renderer
        if renderer is not None and self._board is not None:
            self.redraw()

    # ── Lifecycle ────────────────────────────────────────────────────────

    def start(self) -> None:
        """Begin the first game."""
        self._new_game()

    def restart(self) -> None:
        """Discard everything and start over as one atomic reset."""
        self._new_game()

    def _new_game(self) -> None:
        was_observing = self.is_observing
        self._submission.reset()
        self._observation.discard()
        self._inbox.clear()

        size = self._service.get_board_size()
        board = Board(size)
        board.on_cell_changed.append(self._on_cell_changed)
        self._board = board
        self._turn = OPENING_TURN
        self._winner = None
        self._phase = GamePhase.IN_PROGRESS
        _LOGGER.info("New %dx%d game", size, size)

        self.redraw()
        if was_observing:
            self._emit_observation(False)
        self._emit_turn()
        self._emit_phase()
        self._service.init_game()

    # ── Input ────────────────────────────────────────────────────────────

    def click(self, row: int, col: int) -> PlacementRequest | None:
        """Pointer click at board coordinates. ``None`` when it is a no-op."""
        if not self.is_input_enabled:
            return None
        return self._submission.submit(row, col)

    def hover(self, row: int, col: int) -> bool:
        """Draw a translucent preview at ``(row, col)``; never mutates state."""
        if not self.is_input_enabled or self._renderer is None:
            return False
        self.redraw()
        if not self._submission.can_place(row, col):
            return False
        x, y = self._pixel(row, col)
        self._renderer.draw_stone(x, y, self._turn.preview_visual, self._hover_opacity)
        return True

    # ── Observation ──────────────────────────────────────────────────────

    def toggle_observation(self) -> bool:
        if self.is_observing:
            return self.exit_observation()
        return self.enter_observation()

    def enter_observation(self) -> bool:
        if self._phase != GamePhase.IN_PROGRESS or self.is_observing:
            return False
        cycle = self._observation.enter(self.board)
        self.redraw()
        _LOGGER.info("Entering observation (cycle %d)", cycle)
        self._emit_observation(True)
        self._service.observe(
            lambda payload: self._on_observed(cycle, payload),
            lambda message: _LOGGER.warning("Observation failed: %s", message),
        )
        return True

    def exit_observation(self) -> bool:
        if not self.is_observing:
            return False
        self._observation.exit(self.board)
        _LOGGER.info("Leaving observation")
        self.redraw()
        self._emit_observation(False)
        return True

    def _on_observed(self, cycle: int, payload: object) -> None:
        if cycle != self._observation.active_cycle:
            _LOGGER.debug("Discarding stale observation response (cycle %d)", cycle)
            return
        try:
            grid = parse_collapsed_grid(payload, self.board.size)
        except ValueError as exc:
            _LOGGER.warning("Discarding malformed observation: %s", exc)
            return
        self._observation.apply_collapsed(cycle, self.board, grid)

    # ── Notifications ────────────────────────────────────────────────────

    def post(self, message: Notification) -> None:
        """Queue a notification and drain the inbox unless already draining."""
        self._inbox.append(message)
        if self._draining:
            return
        self._draining = True
        try:
            while self._inbox:
                self._dispatch(self._inbox.popleft())
        finally:
            self._draining = False

    def post_event(self, event: str, payload: object) -> None:
        """Parse a raw ``turn`` / ``winner`` push and post it."""
        try:
            message = parse_notification(event, payload)
        except ValueError as exc:
            _LOGGER.warning("Ignoring %s notification: %s", event, exc)
            return
        self.post(message)

    def _dispatch(self, message: Notification) -> None:
        if isinstance(message, TurnNotification):
            self._on_turn(message)
        elif isinstance(message, WinnerNotification):
            self._on_winner(message)

    def _on_turn(self, message: TurnNotification) -> None:
        self._turn = TurnState(message.player, message.tier)
        self._emit_turn()

    def _on_winner(self, message: WinnerNotification) -> None:
        if message.winner is None:
            return
        if self._phase != GamePhase.IN_PROGRESS:
            return
        self._winner = message.winner
        self._phase = GamePhase.DECIDED
        _LOGGER.info("Game decided: %s wins", message.winner)
        self.redraw()
        self._emit_phase()
        for cb in self.events.on_game_over:
            cb(message.winner)

    # ── Rendering ────────────────────────────────────────────────────────

    def redraw(self) -> None:
        """Draw the empty grid and every stone on the displayed board."""
        if self._renderer is None or self._board is None:
            return
        self._renderer.draw_empty_grid(self._board.size)
        for row, col, cell in self._board.stones():
            self._draw_cell(row, col, cell)

    def _on_cell_changed(self, row: int, col: int, cell: Cell) -> None:
        if self._renderer is not None:
            self._draw_cell(row, col, cell)

    def _draw_cell(self, row: int, col: int, cell: Cell) -> None:
        visual = visual_of(cell)
        if visual is None or self._renderer is None:
            return
        x, y = self._pixel(row, col)
        self._renderer.draw_stone(x, y, visual)

    def _pixel(self, row: int, col: int) -> tuple[int, int]:
        return cell_to_pixel(row, col, grid=self._grid, margin=self._margin)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _write_tier(self, row: int, col: int, tier: Tier) -> None:
        if self.is_observing:
            self._observation.write_tier(row, col, tier)
        else:
            self.board.set_tier(row, col, tier)

    def _emit_turn(self) -> None:
        for cb in self.events.on_turn_changed:
            cb(self._turn)

    def _emit_phase(self) -> None:
        for cb in self.events.on_phase_changed:
            cb(self._phase)

    def _emit_observation(self, observing: bool) -> None:
        for cb in self.events.on_observation_changed:
            cb(observing)

    def _emit_rejected(self, row: int, col: int, reason: str) -> None:
        for cb in self.events.on_move_rejected:
            cb(row, col, reason)
