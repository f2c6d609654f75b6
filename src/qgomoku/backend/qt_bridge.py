"""Qt bridge to run the game service in a worker thread."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from qgomoku.backend.game import LocalGame
from qgomoku.core.errors import GameError


class ServiceWorker(QObject):
    """Thread-affine worker that answers service requests by id.

    Push notifications from the game are forwarded through
    :attr:`notification` in the order the game emits them.
    """

    request_succeeded = pyqtSignal(int, object)
    request_failed = pyqtSignal(int, str)
    notification = pyqtSignal(str, object)

    __slots__ = ("_game",)

    def __init__(self, game: LocalGame) -> None:
        super().__init__()
        self._game = game
        self._game.set_emitter(self.notification.emit)

    @property
    def game(self) -> LocalGame:
        return self._game

    @pyqtSlot()
    def init_game(self) -> None:
        self._game.init_game()

    @pyqtSlot(int, int, int)
    def place_stone(self, request_id: int, x: int, y: int) -> None:
        try:
            tier = self._game.place_stone(x, y)
        except GameError as exc:
            self.request_failed.emit(request_id, str(exc))
            return
        self.request_succeeded.emit(request_id, tier)

    @pyqtSlot(int)
    def observe(self, request_id: int) -> None:
        try:
            grid = self._game.observe()
        except GameError as exc:
            self.request_failed.emit(request_id, str(exc))
            return
        self.request_succeeded.emit(request_id, grid)

    @pyqtSlot(int)
    def get_board(self, request_id: int) -> None:
        self.request_succeeded.emit(request_id, self._game.get_board())
