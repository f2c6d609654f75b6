"""Tests for ObservationEngine."""

import pytest

from qgomoku.core.board import Board
from qgomoku.core.cell import ClassicalCell, TierCell
from qgomoku.core.enums import Player, Tier
from qgomoku.core.errors import StaleObservationResponse
from qgomoku.game.observation import ObservationEngine


def _board() -> Board:
    b = Board(3)
    b.set_tier(0, 0, Tier.P90)
    b.set_tier(1, 1, Tier.P10)
    return b


class TestObservationEngine:
    def test_enter_exit_round_trip(self) -> None:
        board = _board()
        before = board.snapshot()
        engine = ObservationEngine()

        cycle = engine.enter(board)
        engine.apply_collapsed(
            cycle,
            board,
            [[Player.WHITE, None, None], [None, Player.BLACK, None], [None, None, None]],
        )
        assert board.get(0, 0) == ClassicalCell(Player.WHITE)

        engine.exit(board)
        assert board == before
        assert not engine.is_active

    def test_null_cells_are_left_as_is(self) -> None:
        board = _board()
        engine = ObservationEngine()
        cycle = engine.enter(board)
        painted = engine.apply_collapsed(
            cycle, board, [[None] * 3, [None, Player.BLACK, None], [None] * 3]
        )
        assert painted == 1
        assert board.get(0, 0) == TierCell(Tier.P90)
        assert board.get(1, 1) == ClassicalCell(Player.BLACK)

    def test_cycles_increase(self) -> None:
        board = _board()
        engine = ObservationEngine()
        first = engine.enter(board)
        engine.exit(board)
        second = engine.enter(board)
        assert second > first

    def test_stale_cycle_is_rejected(self) -> None:
        board = _board()
        before = board.snapshot()
        engine = ObservationEngine()
        first = engine.enter(board)
        engine.exit(board)
        engine.enter(board)
        with pytest.raises(StaleObservationResponse):
            engine.apply_collapsed(first, board, [[Player.BLACK] * 3] * 3)
        assert board == before

    def test_double_enter_fails(self) -> None:
        board = _board()
        engine = ObservationEngine()
        engine.enter(board)
        with pytest.raises(RuntimeError):
            engine.enter(board)

    def test_exit_without_enter_fails(self) -> None:
        with pytest.raises(RuntimeError):
            ObservationEngine().exit(_board())

    def test_live_board_is_snapshot_while_active(self) -> None:
        board = _board()
        engine = ObservationEngine()
        assert engine.live_board(board) is board
        engine.enter(board)
        live = engine.live_board(board)
        assert live is not board
        assert live == board

    def test_write_tier_lands_in_restored_board(self) -> None:
        board = _board()
        engine = ObservationEngine()
        engine.enter(board)
        engine.write_tier(2, 2, Tier.P70)
        assert board.is_empty(2, 2)
        engine.exit(board)
        assert board.get(2, 2) == TierCell(Tier.P70)

    def test_discard_drops_snapshot(self) -> None:
        board = _board()
        engine = ObservationEngine()
        engine.enter(board)
        engine.discard()
        assert not engine.is_active
        assert engine.live_board(board) is board
