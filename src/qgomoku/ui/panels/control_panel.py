"""ControlPanel - turn display, observe toggle and restart."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from qgomoku.core.enums import Player
from qgomoku.game.turn import TurnState
from qgomoku.ui.i18n import t


def _color_name(player: Player) -> str:
    s = t()
    return s.color_black if player == Player.BLACK else s.color_white


class ControlPanel(QWidget):
    """Shows whose turn it is and hosts the game action buttons."""

    observe_clicked = pyqtSignal()
    restart_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._turn: TurnState | None = None
        self._winner: Player | None = None
        self._observing = False
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        self._turn_label = QLabel()
        self._turn_label.setFont(QFont("Adwaita Sans", 13))
        self._turn_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._turn_label.setWordWrap(True)
        layout.addWidget(self._turn_label)

        btn_font = QFont("Adwaita Sans", 10)

        self._btn_observe = QPushButton()
        self._btn_observe.setFont(btn_font)
        self._btn_observe.setMinimumHeight(36)
        self._btn_observe.setCheckable(True)
        self._btn_observe.clicked.connect(self.observe_clicked)
        layout.addWidget(self._btn_observe)

        self._btn_restart = QPushButton()
        self._btn_restart.setFont(btn_font)
        self._btn_restart.setMinimumHeight(36)
        self._btn_restart.clicked.connect(self.restart_clicked)
        self._btn_restart.setVisible(False)
        layout.addWidget(self._btn_restart)

    def retranslate_ui(self) -> None:
        s = t()
        self._btn_observe.setText(s.btn_end_observe if self._observing else s.btn_observe)
        self._btn_restart.setText(s.btn_restart)
        self._refresh_label()

    # ── State display ────────────────────────────────────────────────────

    def set_turn(self, turn: TurnState) -> None:
        self._turn = turn
        self._refresh_label()

    def set_winner(self, winner: Player | None) -> None:
        """Show the result and the restart button; ``None`` hides them."""
        self._winner = winner
        self._btn_restart.setVisible(winner is not None)
        self._refresh_label()

    def set_observing(self, observing: bool) -> None:
        self._observing = observing
        self._btn_observe.setChecked(observing)
        s = t()
        self._btn_observe.setText(s.btn_end_observe if observing else s.btn_observe)

    def set_observe_enabled(self, enabled: bool) -> None:
        self._btn_observe.setEnabled(enabled)

    @property
    def turn_text(self) -> str:
        return self._turn_label.text()

    def _refresh_label(self) -> None:
        s = t()
        if self._winner is not None:
            self._turn_label.setText(s.winner_display.format(color=_color_name(self._winner)))
        elif self._turn is not None:
            self._turn_label.setText(
                s.turn_display.format(
                    color=_color_name(self._turn.player), tier=int(self._turn.tier)
                )
            )
        else:
            self._turn_label.setText("")
