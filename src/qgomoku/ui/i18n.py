"""Internationalisation strings for the UI.

Usage::

    from qgomoku.ui.i18n import t, set_language

    set_language("Japanese")
    print(t().btn_observe)          # "観測！"
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    window_title: str

    color_black: str
    color_white: str

    turn_display: str  # "{color} to move ({tier}%)"
    winner_display: str  # "{color} wins!"

    btn_observe: str
    btn_end_observe: str
    btn_restart: str

    status_ready: str
    status_observing: str
    status_move_rejected: str  # "Move at ({row}, {col}) rejected: {reason}"


_EN = Strings(
    window_title="Quantum Gomoku",
    color_black="Black",
    color_white="White",
    turn_display="Probably {color} to move ({tier}%)",
    winner_display="{color} wins!",
    btn_observe="Observe!",
    btn_end_observe="End observation",
    btn_restart="Play again",
    status_ready="Ready",
    status_observing="Observing the board. Placement is paused.",
    status_move_rejected="Move at ({row}, {col}) rejected: {reason}",
)

_JA = Strings(
    window_title="量子五目並べ",
    color_black="黒",
    color_white="白",
    turn_display="どちらかといえば{color}い方の番です（{tier}%）",
    winner_display="{color}の勝ちです！",
    btn_observe="観測！",
    btn_end_observe="観測を終わる",
    btn_restart="もう一度",
    status_ready="準備完了",
    status_observing="観測中です。石は置けません。",
    status_move_rejected="({row}, {col}) には置けません: {reason}",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Japanese": _JA,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
