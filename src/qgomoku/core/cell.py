"""Cell values: ``Empty | Tier(t) | Classical(player)``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from qgomoku.core.enums import Player, StoneVisual, Tier


@dataclass(frozen=True, slots=True)
class EmptyCell:
    """No stone."""

    def __str__(self) -> str:
        return "."


@dataclass(frozen=True, slots=True)
class TierCell:
    """A placed stone whose colour has not been observed."""

    tier: Tier

    def __str__(self) -> str:
        return str(int(self.tier))


@dataclass(frozen=True, slots=True)
class ClassicalCell:
    """A collapsed stone, as painted by an observation."""

    player: Player

    def __str__(self) -> str:
        return "B" if self.player == Player.BLACK else "W"


Cell: TypeAlias = EmptyCell | TierCell | ClassicalCell

EMPTY = EmptyCell()


def visual_of(cell: Cell) -> StoneVisual | None:
    """Renderer visual for *cell*, or ``None`` for an empty cell."""
    if isinstance(cell, TierCell):
        return StoneVisual.for_tier(cell.tier)
    if isinstance(cell, ClassicalCell):
        return StoneVisual.for_player(cell.player)
    return None
