"""Game-service request orchestration for the main UI thread."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from PyQt6.QtCore import QObject, QThread, QTimer, pyqtSignal

from qgomoku.backend.game import LocalGame
from qgomoku.backend.qt_bridge import ServiceWorker
from qgomoku.core.errors import RequestFailed
from qgomoku.game.interfaces import FailureCallback, IGameService, SuccessCallback

_LOGGER = logging.getLogger(__name__)

NotificationCallback = Callable[[str, object], None]  # event name, payload


class _ServiceCommandBus(QObject):
    """Signal bridge for issuing worker commands with queued delivery."""

    init_requested = pyqtSignal()
    place_requested = pyqtSignal(int, int, int)  # request id, x, y
    observe_requested = pyqtSignal(int)
    board_requested = pyqtSignal(int)


@dataclass
class _PendingRequest:
    name: str
    on_success: SuccessCallback
    on_failure: FailureCallback
    timer: QTimer | None = None


class ServiceSession(IGameService):
    """Owns the worker-thread service and routes answers back by request id.

    All callbacks run on the thread that owns this session. With
    ``request_timeout_ms`` set, a request without an answer in time fails
    with :class:`RequestFailed`; a late answer for it is dropped.
    """

    __slots__ = (
        "_game",
        "_parent",
        "_command_bus",
        "_service_thread",
        "_service_worker",
        "_request_id",
        "_pending",
        "_request_timeout_ms",
        "_on_notification",
        "_is_shutting_down",
        "_is_started",
    )

    def __init__(
        self,
        *,
        game: LocalGame,
        on_notification: NotificationCallback,
        parent: QObject | None = None,
        request_timeout_ms: int | None = None,
    ) -> None:
        self._game = game
        self._parent = parent
        self._on_notification = on_notification
        self._request_timeout_ms = request_timeout_ms

        self._command_bus = _ServiceCommandBus(parent)
        self._service_thread = QThread(parent)
        self._service_worker = ServiceWorker(game)
        self._request_id = 0
        self._pending: dict[int, _PendingRequest] = {}
        self._is_shutting_down = False
        self._is_started = False

    def setup(self) -> None:
        """Start the service worker in a dedicated thread and connect callbacks."""
        if self._is_started:
            return
        self._is_shutting_down = False
        self._service_worker.moveToThread(self._service_thread)
        bus = self._command_bus
        bus.init_requested.connect(self._service_worker.init_game)
        bus.place_requested.connect(self._service_worker.place_stone)
        bus.observe_requested.connect(self._service_worker.observe)
        bus.board_requested.connect(self._service_worker.get_board)
        self._service_worker.request_succeeded.connect(self._on_request_succeeded)
        self._service_worker.request_failed.connect(self._on_request_failed)
        self._service_worker.notification.connect(self._on_worker_notification)
        self._service_thread.start()
        self._is_started = True

    def shutdown(self) -> None:
        """Drop outstanding requests and stop the worker thread."""
        if not self._is_started:
            return
        self._is_shutting_down = True
        for request in self._pending.values():
            _dispose_timer(request)
        self._pending.clear()
        self._service_thread.quit()
        self._service_thread.wait(2000)
        self._is_started = False

    def set_request_timeout(self, timeout_ms: int | None) -> None:
        """Applies to requests issued from now on."""
        self._request_timeout_ms = timeout_ms

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    # ── IGameService impl ────────────────────────────────────────────────

    def get_board_size(self) -> int:
        return self._game.get_board_size()

    def init_game(self) -> None:
        if self._is_shutting_down:
            return
        self._command_bus.init_requested.emit()

    def place_stone(
        self,
        x: int,
        y: int,
        on_success: SuccessCallback,
        on_failure: FailureCallback,
    ) -> None:
        request_id = self._register("place_stone", on_success, on_failure)
        if request_id is not None:
            self._command_bus.place_requested.emit(request_id, x, y)

    def observe(self, on_success: SuccessCallback, on_failure: FailureCallback) -> None:
        request_id = self._register("observe", on_success, on_failure)
        if request_id is not None:
            self._command_bus.observe_requested.emit(request_id)

    def get_board(self, on_success: SuccessCallback, on_failure: FailureCallback) -> None:
        request_id = self._register("get_board", on_success, on_failure)
        if request_id is not None:
            self._command_bus.board_requested.emit(request_id)

    # ── Worker callbacks ─────────────────────────────────────────────────

    def _on_request_succeeded(self, request_id: int, payload: object) -> None:
        request = self._take(request_id)
        if request is None:
            return
        request.on_success(payload)

    def _on_request_failed(self, request_id: int, message: str) -> None:
        request = self._take(request_id)
        if request is None:
            return
        request.on_failure(message)

    def _on_worker_notification(self, event: str, payload: object) -> None:
        if self._is_shutting_down:
            return
        self._on_notification(event, payload)

    def _on_timeout(self, request_id: int) -> None:
        request = self._take(request_id)
        if request is None:
            return
        error = RequestFailed(
            f"{request.name} timed out after {self._request_timeout_ms} ms"
        )
        _LOGGER.warning("%s", error)
        request.on_failure(str(error))

    # ── Internal helpers ─────────────────────────────────────────────────

    def _register(
        self,
        name: str,
        on_success: SuccessCallback,
        on_failure: FailureCallback,
    ) -> int | None:
        if self._is_shutting_down:
            return None
        self._request_id += 1
        request_id = self._request_id
        request = _PendingRequest(name, on_success, on_failure)
        if self._request_timeout_ms is not None:
            timer = QTimer(self._parent)
            timer.setSingleShot(True)
            timer.timeout.connect(lambda: self._on_timeout(request_id))
            timer.start(self._request_timeout_ms)
            request.timer = timer
        self._pending[request_id] = request
        return request_id

    def _take(self, request_id: int) -> _PendingRequest | None:
        if self._is_shutting_down:
            return None
        request = self._pending.pop(request_id, None)
        if request is None:
            _LOGGER.debug("Dropping answer for unknown request %d", request_id)
            return None
        _dispose_timer(request)
        return request


def _dispose_timer(request: _PendingRequest) -> None:
    if request.timer is None:
        return
    request.timer.stop()
    request.timer.deleteLater()
    request.timer = None
