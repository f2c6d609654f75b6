"""BoardView - QGraphicsView wrapper for the board scene."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QPainter, QResizeEvent
from PyQt6.QtWidgets import QGraphicsView, QSizePolicy, QWidget

from qgomoku.ui.board.board_scene import BoardScene


class BoardView(QGraphicsView):
    """Displays the board scene, handles scaling to fit the widget.

    Signals:
        cell_clicked(row, col), cell_hovered(row, col): Bubbled up from BoardScene.
    """

    cell_clicked = pyqtSignal(int, int)
    cell_hovered = pyqtSignal(int, int)

    def __init__(self, scene: BoardScene | None = None, parent: QWidget | None = None) -> None:
        self._scene = scene if scene is not None else BoardScene()
        super().__init__(self._scene, parent)

        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.setDragMode(QGraphicsView.DragMode.NoDrag)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(320, 320)
        # Hover previews need move events without a pressed button.
        self.setMouseTracking(True)

        # Bubble scene signals
        self._scene.cell_clicked.connect(self.cell_clicked.emit)
        self._scene.cell_hovered.connect(self.cell_hovered.emit)

    @property
    def board_scene(self) -> BoardScene:
        return self._scene

    def fit_board(self) -> None:
        self.fitInView(self._scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)

    def resizeEvent(self, event: QResizeEvent | None) -> None:
        super().resizeEvent(event)
        self.fit_board()
