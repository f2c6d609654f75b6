"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from qgomoku.core.enums import StoneVisual
from qgomoku.game.interfaces import FailureCallback, IGameService, SuccessCallback

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


# ── Scripted collaborators ───────────────────────────────────────────────────


@dataclass
class ServiceCall:
    """One outstanding request; the test decides when and how it resolves."""

    args: tuple[int, ...]
    on_success: SuccessCallback
    on_failure: FailureCallback

    def succeed(self, payload: object) -> None:
        self.on_success(payload)

    def fail(self, message: str = "rejected") -> None:
        self.on_failure(message)


@dataclass
class FakeService(IGameService):
    size: int = 18
    size_calls: int = 0
    init_calls: int = 0
    placements: list[ServiceCall] = field(default_factory=list)
    observations: list[ServiceCall] = field(default_factory=list)
    board_requests: list[ServiceCall] = field(default_factory=list)

    def get_board_size(self) -> int:
        self.size_calls += 1
        return self.size

    def init_game(self) -> None:
        self.init_calls += 1

    def place_stone(
        self,
        x: int,
        y: int,
        on_success: SuccessCallback,
        on_failure: FailureCallback,
    ) -> None:
        self.placements.append(ServiceCall((x, y), on_success, on_failure))

    def observe(self, on_success: SuccessCallback, on_failure: FailureCallback) -> None:
        self.observations.append(ServiceCall((), on_success, on_failure))

    def get_board(self, on_success: SuccessCallback, on_failure: FailureCallback) -> None:
        self.board_requests.append(ServiceCall((), on_success, on_failure))

    def empty_grid(self) -> list[list[int | None]]:
        return [[None] * self.size for _ in range(self.size)]


@dataclass
class RecordingRenderer:
    grids: list[int] = field(default_factory=list)
    stones: list[tuple[float, float, StoneVisual, float]] = field(default_factory=list)

    def draw_empty_grid(self, size: int) -> None:
        self.grids.append(size)
        self.stones.clear()

    def draw_stone(
        self,
        x: float,
        y: float,
        visual: StoneVisual,
        opacity: float = 1.0,
    ) -> None:
        self.stones.append((x, y, visual, opacity))


@pytest.fixture
def service() -> FakeService:
    return FakeService()


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


# ── Qt fixtures ──────────────────────────────────────────────────────────────


def _is_ui_test(request: pytest.FixtureRequest) -> bool:
    return "ui" in Path(str(request.node.fspath)).parts


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for UI tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _reset_language() -> Iterator[None]:
    """Reset shared i18n state between tests."""
    from qgomoku.ui.i18n import set_language

    set_language("English")
    yield
    set_language("English")


@pytest.fixture(autouse=True)
def _cleanup_qt_widgets(
    request: pytest.FixtureRequest,
) -> Iterator[None]:
    """Ensure UI tests do not leak top-level widgets into the next test."""
    if not _is_ui_test(request):
        yield
        return

    app = request.getfixturevalue("qapp")
    yield

    for widget in list(app.topLevelWidgets()):
        widget.close()
    app.processEvents()
