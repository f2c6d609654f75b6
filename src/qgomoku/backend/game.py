"""LocalGame - in-process authoritative game service.

Owns the rules the client never computes: stone strengths, turn order,
random collapse on observation and five-in-a-row detection. Safe to call
from a worker thread.
"""

from __future__ import annotations

import logging
import random
import threading
from collections.abc import Callable

from qgomoku.core.enums import Player, Tier
from qgomoku.core.errors import MoveRejected
from qgomoku.game.messages import OBSERVED_BLACK, OBSERVED_WHITE, TURN_EVENT, WINNER_EVENT

_LOGGER = logging.getLogger(__name__)

DEFAULT_BOARD_SIZE = 18
WIN_LENGTH = 5

EmitCallback = Callable[[str, object], None]  # event name, payload

_DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))

# (strong, weak) tiers per player; a player's stones alternate between them.
_STONES: dict[Player, tuple[Tier, Tier]] = {
    Player.BLACK: (Tier.P90, Tier.P70),
    Player.WHITE: (Tier.P10, Tier.P30),
}


class GameIsAlreadyOver(MoveRejected):
    def __init__(self) -> None:
        super().__init__("Game is already over")


class InvalidPosition(MoveRejected):
    def __init__(self, x: int, y: int, occupant: Tier | None = None) -> None:
        where = f"({x}, {y})"
        if occupant is None:
            super().__init__(f"Invalid position: {where}")
        else:
            super().__init__(f"Invalid position: {where} holds {int(occupant)}")


class _StoneSupply:
    """Alternates a player's stones between strong and weak."""

    __slots__ = ("_tiers", "_next")

    def __init__(self, player: Player) -> None:
        self._tiers = _STONES[player]
        self._next = 0

    def peek(self) -> Tier:
        return self._tiers[self._next]

    def consume(self) -> Tier:
        tier = self._tiers[self._next]
        self._next = 1 - self._next
        return tier


class LocalGame:
    """Server-side state for one game.

    Args:
        size: Board dimension.
        emit: Receives push notifications (``"turn"`` / ``"winner"``).
        rng: Source of collapse randomness; injectable for tests.
    """

    def __init__(
        self,
        size: int = DEFAULT_BOARD_SIZE,
        *,
        emit: EmitCallback | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._size = size
        self._emit = emit or (lambda _event, _payload: None)
        self._rng = rng or random.Random()
        self._lock = threading.Lock()
        self._reset()

    def set_emitter(self, emit: EmitCallback) -> None:
        self._emit = emit

    # ── Service operations ───────────────────────────────────────────────

    def get_board_size(self) -> int:
        return self._size

    def init_game(self) -> None:
        with self._lock:
            self._reset()
            turn = self._turn_payload()
        self._emit(TURN_EVENT, turn)

    def place_stone(self, x: int, y: int) -> int:
        """Place the current player's next stone at column *x*, row *y*."""
        with self._lock:
            if self._winner is not None:
                raise GameIsAlreadyOver()
            if not (0 <= x < self._size and 0 <= y < self._size):
                raise InvalidPosition(x, y)
            occupant = self._tiers[y][x]
            if occupant is not None:
                raise InvalidPosition(x, y, occupant)

            tier = self._supplies[self._turn].consume()
            self._tiers[y][x] = tier
            self._turn = self._turn.opposite
            turn = self._turn_payload()
        _LOGGER.debug("Stone %d placed at (%d, %d)", tier, x, y)
        self._emit(TURN_EVENT, turn)
        return int(tier)

    def observe(self) -> list[list[int | None]]:
        """Collapse every stone; emits the next turn and any winner."""
        with self._lock:
            collapsed = [
                [None if tier is None else self._collapse(tier) for tier in row]
                for row in self._tiers
            ]
            self._turn = self._turn.opposite
            turn = self._turn_payload()
            winners = find_winners(collapsed)
            winner: Player | None = None
            if len(winners) == 1:
                winner = next(iter(winners))
            elif len(winners) == 2:
                # Both lines appeared at once: the observer wins.
                winner = self._turn.opposite
            if winner is not None and self._winner is None:
                self._winner = winner

        self._emit(TURN_EVENT, turn)
        if winner is not None:
            self._emit(WINNER_EVENT, str(winner))
        return [
            [None if p is None else _observed_value(p) for p in row] for row in collapsed
        ]

    def get_board(self) -> list[list[int | None]]:
        with self._lock:
            return [[None if t is None else int(t) for t in row] for row in self._tiers]

    # ── Internal helpers ─────────────────────────────────────────────────

    def _reset(self) -> None:
        self._tiers: list[list[Tier | None]] = [
            [None] * self._size for _ in range(self._size)
        ]
        self._turn = Player.BLACK
        self._supplies = {p: _StoneSupply(p) for p in Player}
        self._winner: Player | None = None

    def _collapse(self, tier: Tier) -> Player:
        return Player.BLACK if self._rng.random() * 100 < int(tier) else Player.WHITE

    def _turn_payload(self) -> dict[str, object]:
        return {"player": str(self._turn), "p": int(self._supplies[self._turn].peek())}


def _observed_value(player: Player) -> int:
    return OBSERVED_BLACK if player == Player.BLACK else OBSERVED_WHITE


def find_winners(grid: list[list[Player | None]]) -> set[Player]:
    """Players with at least ``WIN_LENGTH`` stones in a line."""
    size = len(grid)
    winners: set[Player] = set()
    for y in range(size):
        for x in range(size):
            player = grid[y][x]
            if player is None or player in winners:
                continue
            for dy, dx in _DIRECTIONS:
                run = 1
                ny, nx = y + dy, x + dx
                while 0 <= ny < size and 0 <= nx < size and grid[ny][nx] == player:
                    run += 1
                    if run >= WIN_LENGTH:
                        break
                    ny, nx = ny + dy, nx + dx
                if run >= WIN_LENGTH:
                    winners.add(player)
                    break
    return winners
