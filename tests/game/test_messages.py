"""Tests for notification and payload parsing."""

import pytest

from qgomoku.core.enums import Player, Tier
from qgomoku.game.messages import (
    TurnNotification,
    WinnerNotification,
    parse_collapsed_grid,
    parse_notification,
    parse_tier_grid,
    parse_turn_payload,
    parse_winner_payload,
)


class TestTurnPayload:
    def test_valid(self) -> None:
        assert parse_turn_payload({"player": "white", "p": 10}) == TurnNotification(
            Player.WHITE, Tier.P10
        )

    @pytest.mark.parametrize(
        "payload",
        ["black", {"player": "black"}, {"p": 90}, {"player": "black", "p": 55}, None],
    )
    def test_invalid(self, payload: object) -> None:
        with pytest.raises(ValueError):
            parse_turn_payload(payload)


class TestWinnerPayload:
    @pytest.mark.parametrize("payload", [None, ""])
    def test_empty_means_no_winner(self, payload: object) -> None:
        assert parse_winner_payload(payload) == WinnerNotification(None)

    def test_player(self) -> None:
        assert parse_winner_payload("black") == WinnerNotification(Player.BLACK)

    def test_non_string(self) -> None:
        with pytest.raises(ValueError):
            parse_winner_payload(1)


def test_parse_notification_dispatches_on_event_name() -> None:
    assert isinstance(parse_notification("turn", {"player": "black", "p": 90}), TurnNotification)
    assert isinstance(parse_notification("winner", "white"), WinnerNotification)
    with pytest.raises(ValueError):
        parse_notification("greet", "hello")


class TestGrids:
    def test_collapsed_grid(self) -> None:
        grid = parse_collapsed_grid([[100, None], [None, 0]], 2)
        assert grid == [[Player.BLACK, None], [None, Player.WHITE]]

    @pytest.mark.parametrize(
        "payload",
        [
            [[100, None]],  # too few rows
            [[100], [0]],  # short rows
            [[100, 50], [None, None]],  # unknown value
            [[True, None], [None, None]],  # bool is not a colour
            "nope",
        ],
    )
    def test_collapsed_grid_rejects_bad_shapes(self, payload: object) -> None:
        with pytest.raises(ValueError):
            parse_collapsed_grid(payload, 2)

    def test_tier_grid(self) -> None:
        assert parse_tier_grid([[90, None], [None, 30]], 2) == [
            [Tier.P90, None],
            [None, Tier.P30],
        ]

    def test_tier_grid_rejects_non_tiers(self) -> None:
        with pytest.raises(ValueError):
            parse_tier_grid([[100, None], [None, None]], 2)
