"""BoardScene - QGraphicsScene that draws the grid and stones."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, QRectF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsEllipseItem,
    QGraphicsItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from qgomoku.core.coords import (
    BOARD_MARGIN,
    GRID_SIZE,
    STONE_RADIUS,
    board_extent,
    is_on_board,
    pixel_to_cell,
)
from qgomoku.core.enums import StoneVisual
from qgomoku.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Draws what the session tells it to and reports pointer positions.

    Holds no game state beyond the grid dimension it last drew.

    Signals:
        cell_clicked(row, col): Left click on an intersection.
        cell_hovered(row, col): Pointer moved over an intersection.
    """

    cell_clicked = pyqtSignal(int, int)
    cell_hovered = pyqtSignal(int, int)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        grid: int = GRID_SIZE,
        margin: int = BOARD_MARGIN,
        stone_radius: int = STONE_RADIUS,
    ) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._grid = grid
        self._margin = margin
        self._stone_radius = stone_radius
        self._size = 0
        self._stone_items: list[QGraphicsItem] = []

    # ── Renderer API ─────────────────────────────────────────────────────

    def draw_empty_grid(self, size: int) -> None:
        """Clear everything and draw a *size* x *size* grid."""
        self.clear()
        self._stone_items = []
        self._size = size

        extent = board_extent(size, grid=self._grid, margin=self._margin)
        self.setSceneRect(0, 0, extent, extent)
        background = self.addRect(
            QRectF(0, 0, extent, extent),
            QPen(Qt.PenStyle.NoPen),
            QBrush(self._theme.background),
        )
        assert background is not None
        background.setZValue(0)

        pen = QPen(self._theme.grid_line)
        pen.setWidth(1)
        first = self._margin
        last = self._margin + (size - 1) * self._grid
        for i in range(size):
            offset = self._margin + i * self._grid
            for line in (
                self.addLine(offset, first, offset, last, pen),
                self.addLine(first, offset, last, offset, pen),
            ):
                assert line is not None
                line.setZValue(0.5)

    def draw_stone(
        self,
        x: float,
        y: float,
        visual: StoneVisual,
        opacity: float = 1.0,
    ) -> None:
        """Draw a stone centred on the pixel ``(x, y)``."""
        style = self._theme.stone(visual)
        r = self._stone_radius
        disc = QGraphicsEllipseItem(x - r, y - r, 2 * r, 2 * r)
        disc.setBrush(QBrush(style.fill))
        disc.setPen(QPen(self._theme.grid_line))
        disc.setOpacity(opacity)
        disc.setZValue(1)
        self.addItem(disc)
        self._stone_items.append(disc)

        if style.label:
            text = QGraphicsSimpleTextItem(style.label)
            text.setFont(QFont("monospace", max(8, r - 3)))
            text.setBrush(QBrush(style.text))
            bounds = text.boundingRect()
            text.setPos(x - bounds.width() / 2, y - bounds.height() / 2)
            text.setOpacity(opacity)
            text.setZValue(2)
            self.addItem(text)
            self._stone_items.append(text)

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme

    @property
    def stone_items(self) -> list[QGraphicsItem]:
        return list(self._stone_items)

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is not None and event.button() == Qt.MouseButton.LeftButton:
            cell = self.cell_at(event.scenePos())
            if cell is not None:
                self.cell_clicked.emit(*cell)
                return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is not None:
            cell = self.cell_at(event.scenePos())
            if cell is not None:
                self.cell_hovered.emit(*cell)
        super().mouseMoveEvent(event)

    # ── Coordinate helpers ───────────────────────────────────────────────

    def cell_at(self, pos: QPointF) -> tuple[int, int] | None:
        """Scene position -> nearest ``(row, col)`` on the board, if any."""
        row, col = pixel_to_cell(pos.x(), pos.y(), grid=self._grid, margin=self._margin)
        if not is_on_board(row, col, self._size):
            return None
        return row, col
