"""Push notifications and service payload parsing.

Notifications are plain values posted into the session inbox; the session
consumes them one at a time in arrival order.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TypeAlias

from qgomoku.core.enums import Player, Tier

OBSERVED_BLACK = 100
OBSERVED_WHITE = 0

TURN_EVENT = "turn"
WINNER_EVENT = "winner"


@dataclass(frozen=True, slots=True)
class TurnNotification:
    player: Player
    tier: Tier


@dataclass(frozen=True, slots=True)
class WinnerNotification:
    """``winner`` is ``None`` when the service reports no winner yet."""

    winner: Player | None


Notification: TypeAlias = TurnNotification | WinnerNotification


def parse_turn_payload(payload: object) -> TurnNotification:
    """``{"player": "black"|"white", "p": int}`` -> :class:`TurnNotification`."""
    if not isinstance(payload, Mapping):
        raise ValueError(f"Turn payload must be a mapping, got {payload!r}")
    player = payload.get("player")
    if not isinstance(player, str):
        raise ValueError(f"Turn payload has no player: {payload!r}")
    return TurnNotification(Player.from_wire(player), Tier.from_value(payload.get("p")))


def parse_winner_payload(payload: object) -> WinnerNotification:
    """A player name, or empty/absent for "no winner yet"."""
    if payload is None or payload == "":
        return WinnerNotification(None)
    if not isinstance(payload, str):
        raise ValueError(f"Winner payload must be a string, got {payload!r}")
    return WinnerNotification(Player.from_wire(payload))


def parse_notification(event: str, payload: object) -> Notification:
    if event == TURN_EVENT:
        return parse_turn_payload(payload)
    if event == WINNER_EVENT:
        return parse_winner_payload(payload)
    raise ValueError(f"Unknown notification: {event!r}")


def _check_grid(payload: object, size: int) -> Sequence[Sequence[object]]:
    if not isinstance(payload, Sequence) or isinstance(payload, str):
        raise ValueError("Board payload must be a list of rows")
    if len(payload) != size:
        raise ValueError(f"Board payload has {len(payload)} rows, expected {size}")
    for row in payload:
        if not isinstance(row, Sequence) or isinstance(row, str) or len(row) != size:
            raise ValueError(f"Board payload row is not {size} cells long")
    return payload


def parse_collapsed_grid(payload: object, size: int) -> list[list[Player | None]]:
    """Observe response: 100 = Black, 0 = White, ``None`` = not collapsed."""
    result: list[list[Player | None]] = []
    for row in _check_grid(payload, size):
        parsed: list[Player | None] = []
        for value in row:
            if value is None:
                parsed.append(None)
            elif value == OBSERVED_BLACK and not isinstance(value, bool):
                parsed.append(Player.BLACK)
            elif value == OBSERVED_WHITE and not isinstance(value, bool):
                parsed.append(Player.WHITE)
            else:
                raise ValueError(f"Unknown observed value: {value!r}")
        result.append(parsed)
    return result


def parse_tier_grid(payload: object, size: int) -> list[list[Tier | None]]:
    """``get_board`` response: a tier or ``None`` per cell."""
    return [
        [None if value is None else Tier.from_value(value) for value in row]
        for row in _check_grid(payload, size)
    ]
