"""Visual theme constants and QSS styles for the board window."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor

from qgomoku.core.enums import StoneVisual


@dataclass(frozen=True)
class StoneStyle:
    fill: QColor
    text: QColor
    label: str  # drawn on top of the stone; empty for classical stones


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the go board and stones."""

    background: QColor
    grid_line: QColor
    stones: dict[StoneVisual, StoneStyle]

    def stone(self, visual: StoneVisual) -> StoneStyle:
        return self.stones[visual]

    @classmethod
    def default(cls) -> BoardTheme:
        black = QColor(0, 0, 0)
        white = QColor(255, 255, 255)
        return cls(
            background=QColor(0xDC, 0xB3, 0x5C),  # kaya wood
            grid_line=black,
            stones={
                StoneVisual.TIER_10: StoneStyle(QColor(0xEE, 0xEE, 0xEE), black, "10"),
                StoneVisual.TIER_30: StoneStyle(QColor(0xCC, 0xCC, 0xCC), black, "30"),
                StoneVisual.TIER_70: StoneStyle(QColor(0x33, 0x33, 0x33), white, "70"),
                StoneVisual.TIER_90: StoneStyle(black, white, "90"),
                StoneVisual.BLACK: StoneStyle(black, white, ""),
                StoneVisual.WHITE: StoneStyle(white, black, ""),
            },
        )


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Adwaita Sans", "Helvetica Neue", sans-serif;
}

QPushButton {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #505050;
}
QPushButton:pressed {
    background: #264f78;
}
QPushButton:checked {
    background: #264f78;
}
QPushButton:disabled {
    color: #666;
    background: #2b2b2b;
}
"""
