"""Tests for ServiceSession request routing."""

from __future__ import annotations

from PyQt6.QtCore import QCoreApplication, QEvent
from PyQt6.QtTest import QSignalSpy

from qgomoku.backend.game import LocalGame
from qgomoku.ui.service_session import ServiceSession


def _session(**kwargs) -> tuple[ServiceSession, list[tuple[str, object]]]:
    notifications: list[tuple[str, object]] = []
    session = ServiceSession(
        game=LocalGame(9),
        on_notification=lambda event, payload: notifications.append((event, payload)),
        **kwargs,
    )
    return session, notifications


class TestServiceSession:
    def test_shutdown_before_setup_is_noop(self) -> None:
        session, _ = _session()
        session.shutdown()
        assert session._is_started is False

    def test_setup_twice_keeps_started_state(self) -> None:
        session, _ = _session()
        session.setup()
        session.setup()
        assert session._is_started is True
        session.shutdown()
        assert session._is_started is False

    def test_board_size_is_answered_directly(self) -> None:
        session, _ = _session()
        assert session.get_board_size() == 9

    def test_answers_are_routed_by_request_id(self) -> None:
        session, _ = _session()
        results: list[object] = []
        session.place_stone(0, 0, results.append, results.append)
        session.get_board(lambda payload: results.append(("board", payload)), results.append)
        assert session.pending_count == 2

        session._on_request_succeeded(2, [[None]])
        session._on_request_failed(1, "Invalid position")

        assert results == [("board", [[None]]), "Invalid position"]
        assert session.pending_count == 0

    def test_unknown_request_is_dropped(self) -> None:
        session, _ = _session()
        results: list[object] = []
        session.observe(results.append, results.append)
        session._on_request_succeeded(1, "first")
        session._on_request_succeeded(1, "duplicate")
        session._on_request_succeeded(42, "unknown")
        assert results == ["first"]

    def test_notifications_are_forwarded(self) -> None:
        session, notifications = _session()
        session._on_worker_notification("turn", {"player": "white", "p": 10})
        assert notifications == [("turn", {"player": "white", "p": 10})]

    def test_timeout_fails_request_and_drops_late_answer(self) -> None:
        session, _ = _session(request_timeout_ms=60_000)
        successes: list[object] = []
        failures: list[str] = []
        session.place_stone(1, 1, successes.append, failures.append)

        session._on_timeout(1)
        session._on_request_succeeded(1, 90)

        assert successes == []
        assert failures == ["place_stone timed out after 60000 ms"]

    def test_without_timeout_no_timer_is_armed(self) -> None:
        session, _ = _session()
        session.observe(lambda _p: None, lambda _m: None)
        assert session._pending[1].timer is None

        session.set_request_timeout(500)
        session.observe(lambda _p: None, lambda _m: None)
        timer = session._pending[2].timer
        assert timer is not None and timer.isActive()
        session._on_request_succeeded(2, [])
        assert not timer.isActive()

    def test_answered_request_releases_its_timer(self) -> None:
        session, _ = _session(request_timeout_ms=60_000)
        session.place_stone(0, 0, lambda _p: None, lambda _m: None)
        timer = session._pending[1].timer
        assert timer is not None
        destroyed = QSignalSpy(timer.destroyed)

        session._on_request_succeeded(1, 90)
        QCoreApplication.sendPostedEvents(None, QEvent.Type.DeferredDelete)

        assert len(destroyed) == 1

    def test_shutdown_releases_outstanding_timers(self) -> None:
        session, _ = _session(request_timeout_ms=60_000)
        session.setup()
        session.observe(lambda _p: None, lambda _m: None)
        destroyed = QSignalSpy(session._pending[1].timer.destroyed)

        session.shutdown()
        QCoreApplication.sendPostedEvents(None, QEvent.Type.DeferredDelete)

        assert len(destroyed) == 1
        assert session.pending_count == 0

    def test_requests_after_shutdown_are_not_registered(self) -> None:
        session, notifications = _session()
        session.setup()
        session.shutdown()

        session.place_stone(0, 0, lambda _p: None, lambda _m: None)
        session._on_worker_notification("winner", "black")

        assert session.pending_count == 0
        assert notifications == []
