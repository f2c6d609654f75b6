"""Tests for BoardScene drawing, coordinate helpers and pointer events."""

from __future__ import annotations

from PyQt6.QtCore import QEvent, QPointF, Qt
from PyQt6.QtTest import QSignalSpy, QTest
from PyQt6.QtWidgets import QGraphicsSceneMouseEvent

from qgomoku.core.enums import StoneVisual
from qgomoku.ui.board.board_scene import BoardScene
from qgomoku.ui.board.board_view import BoardView


def test_draw_empty_grid_sizes_scene_to_board() -> None:
    scene = BoardScene()
    scene.draw_empty_grid(18)
    rect = scene.sceneRect()
    assert rect.width() == rect.height() == 30 + 17 * 30 + 30


def test_draw_stone_labels_tiered_stones() -> None:
    scene = BoardScene()
    scene.draw_empty_grid(9)
    scene.draw_stone(30, 30, StoneVisual.TIER_70)
    # Disc plus its percentage label.
    assert len(scene.stone_items) == 2


def test_classical_stone_has_no_label() -> None:
    scene = BoardScene()
    scene.draw_empty_grid(9)
    scene.draw_stone(30, 30, StoneVisual.BLACK)
    assert len(scene.stone_items) == 1


def test_draw_stone_applies_opacity() -> None:
    scene = BoardScene()
    scene.draw_empty_grid(9)
    scene.draw_stone(60, 60, StoneVisual.TIER_10, opacity=0.5)
    assert all(item.opacity() == 0.5 for item in scene.stone_items)


def test_draw_empty_grid_removes_stones() -> None:
    scene = BoardScene()
    scene.draw_empty_grid(9)
    scene.draw_stone(30, 30, StoneVisual.WHITE)
    scene.draw_empty_grid(9)
    assert scene.stone_items == []


def test_cell_at_snaps_to_nearest_intersection() -> None:
    scene = BoardScene()
    scene.draw_empty_grid(18)
    assert scene.cell_at(QPointF(30, 30)) == (0, 0)
    assert scene.cell_at(QPointF(74, 41)) == (0, 1)
    assert scene.cell_at(QPointF(46, 89)) == (2, 1)


def test_cell_at_outside_board_is_none() -> None:
    scene = BoardScene()
    scene.draw_empty_grid(9)
    assert scene.cell_at(QPointF(20, 20)) == (0, 0)
    assert scene.cell_at(QPointF(0, 0)) is None
    assert scene.cell_at(QPointF(300, 30)) is None
    assert scene.cell_at(QPointF(30, -20)) is None


def test_cell_at_before_any_grid_is_none() -> None:
    scene = BoardScene()
    assert scene.cell_at(QPointF(30, 30)) is None


def test_custom_geometry() -> None:
    scene = BoardScene(grid=20, margin=10, stone_radius=8)
    scene.draw_empty_grid(5)
    assert scene.sceneRect().width() == 10 + 4 * 20 + 10
    assert scene.cell_at(QPointF(50, 30)) == (1, 2)


def _mouse_event(
    kind: QEvent.Type,
    pos: QPointF,
    button: Qt.MouseButton = Qt.MouseButton.NoButton,
) -> QGraphicsSceneMouseEvent:
    event = QGraphicsSceneMouseEvent(kind)
    event.setScenePos(pos)
    event.setButton(button)
    return event


def test_left_press_emits_clicked_cell() -> None:
    scene = BoardScene()
    scene.draw_empty_grid(9)
    clicked = QSignalSpy(scene.cell_clicked)

    scene.mousePressEvent(
        _mouse_event(
            QEvent.Type.GraphicsSceneMousePress,
            QPointF(88, 62),
            Qt.MouseButton.LeftButton,
        )
    )

    assert len(clicked) == 1
    assert clicked[0] == [1, 2]


def test_right_press_and_off_board_press_are_ignored() -> None:
    scene = BoardScene()
    scene.draw_empty_grid(9)
    clicked = QSignalSpy(scene.cell_clicked)

    scene.mousePressEvent(
        _mouse_event(
            QEvent.Type.GraphicsSceneMousePress,
            QPointF(30, 30),
            Qt.MouseButton.RightButton,
        )
    )
    scene.mousePressEvent(
        _mouse_event(
            QEvent.Type.GraphicsSceneMousePress,
            QPointF(400, 30),
            Qt.MouseButton.LeftButton,
        )
    )

    assert len(clicked) == 0


def test_mouse_move_emits_hovered_cell() -> None:
    scene = BoardScene()
    scene.draw_empty_grid(9)
    hovered = QSignalSpy(scene.cell_hovered)

    scene.mouseMoveEvent(
        _mouse_event(QEvent.Type.GraphicsSceneMouseMove, QPointF(150, 92))
    )

    assert len(hovered) == 1
    assert hovered[0] == [2, 4]


def test_view_click_reaches_cell_clicked() -> None:
    view = BoardView()
    view.board_scene.draw_empty_grid(9)
    view.resize(400, 400)
    view.show()
    view.fit_board()
    clicked = QSignalSpy(view.cell_clicked)

    target = view.mapFromScene(QPointF(30 + 3 * 30, 30 + 5 * 30))
    viewport = view.viewport()
    assert viewport is not None
    QTest.mouseClick(viewport, Qt.MouseButton.LeftButton, pos=target)

    assert len(clicked) == 1
    assert clicked[0] == [5, 3]
