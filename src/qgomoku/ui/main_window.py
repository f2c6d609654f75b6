"""MainWindow - top-level window assembling all UI components."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QMainWindow, QStatusBar, QWidget

from qgomoku.backend.game import LocalGame
from qgomoku.core.enums import Player
from qgomoku.game.interfaces import GamePhase
from qgomoku.game.session import GameSession
from qgomoku.game.turn import TurnState
from qgomoku.ui.board.board_scene import BoardScene
from qgomoku.ui.board.board_view import BoardView
from qgomoku.ui.i18n import t
from qgomoku.ui.panels.control_panel import ControlPanel
from qgomoku.ui.service_session import ServiceSession
from qgomoku.ui.settings import AppSettings, apply_settings

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window: one board, one session, one service."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        game: LocalGame | None = None,
    ) -> None:
        super().__init__()
        self._settings = settings or AppSettings()
        s = self._settings
        self.setMinimumSize(610, 700)

        self._game = game or LocalGame(s.board_size)
        self._service_session = ServiceSession(
            game=self._game,
            on_notification=self._on_service_notification,
            parent=self,
            request_timeout_ms=s.request_timeout_ms,
        )

        self._setup_ui()
        self._session = GameSession(
            self._service_session,
            self._board_view.board_scene,
            grid=s.grid_px,
            margin=s.margin_px,
            hover_opacity=s.hover_opacity,
        )
        self._connect_signals()
        self._connect_session_events()
        apply_settings(self)

        self._service_session.setup()
        self._session.start()
        self._board_view.fit_board()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        s = self._settings
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        scene = BoardScene(
            self,
            grid=s.grid_px,
            margin=s.margin_px,
            stone_radius=s.stone_radius_px,
        )
        self._board_view = BoardView(scene)
        root.addWidget(self._board_view, stretch=3)

        self._control_panel = ControlPanel()
        self._control_panel.setFixedWidth(220)
        root.addWidget(self._control_panel)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel(t().status_ready)
        self._status.addWidget(self._status_label)

    def retranslate_ui(self) -> None:
        self.setWindowTitle(t().window_title)
        self._control_panel.retranslate_ui()

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        """Connect Qt widget signals."""
        self._board_view.cell_clicked.connect(self._on_cell_clicked)
        self._board_view.cell_hovered.connect(self._on_cell_hovered)
        self._control_panel.observe_clicked.connect(self._on_observe)
        self._control_panel.restart_clicked.connect(self._on_restart)

    def _connect_session_events(self) -> None:
        events = self._session.events
        events.on_turn_changed.append(self._on_turn_changed)
        events.on_phase_changed.append(self._on_phase_changed)
        events.on_game_over.append(self._on_game_over)
        events.on_observation_changed.append(self._on_observation_changed)
        events.on_move_rejected.append(self._on_move_rejected)

    # ── User actions ─────────────────────────────────────────────────────

    def _on_cell_clicked(self, row: int, col: int) -> None:
        self._session.click(row, col)

    def _on_cell_hovered(self, row: int, col: int) -> None:
        self._session.hover(row, col)

    def _on_observe(self) -> None:
        self._session.toggle_observation()
        # A refused toggle must not leave the checkable button out of sync.
        self._control_panel.set_observing(self._session.is_observing)

    def _on_restart(self) -> None:
        self._session.restart()
        self._status_label.setText(t().status_ready)

    # ── Service / session callbacks ──────────────────────────────────────

    def _on_service_notification(self, event: str, payload: object) -> None:
        self._session.post_event(event, payload)

    def _on_turn_changed(self, turn: TurnState) -> None:
        self._control_panel.set_turn(turn)

    def _on_phase_changed(self, phase: GamePhase) -> None:
        if phase == GamePhase.IN_PROGRESS:
            self._control_panel.set_winner(None)
        self._control_panel.set_observe_enabled(self._session.can_observe)

    def _on_game_over(self, winner: Player) -> None:
        self._control_panel.set_winner(winner)
        # The observed board stays on screen as the final position.
        self._control_panel.set_observe_enabled(False)
        _LOGGER.info("Winner: %s", winner)

    def _on_observation_changed(self, observing: bool) -> None:
        self._control_panel.set_observing(observing)
        self._status_label.setText(t().status_observing if observing else t().status_ready)

    def _on_move_rejected(self, row: int, col: int, reason: str) -> None:
        self._status_label.setText(
            t().status_move_rejected.format(row=row, col=col, reason=reason)
        )

    # ── Lifecycle ────────────────────────────────────────────────────────

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._service_session.shutdown()
        super().closeEvent(event)
