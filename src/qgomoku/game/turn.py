"""Turn/player state: a passive cache of the service's turn notifications."""

from __future__ import annotations

from dataclasses import dataclass

from qgomoku.core.enums import Player, StoneVisual, Tier


@dataclass(frozen=True, slots=True)
class TurnState:
    """Whose turn it is and the tier of the stone they will place."""

    player: Player
    tier: Tier

    @property
    def preview_visual(self) -> StoneVisual:
        """Hover glyph: the active player's classical colour."""
        return StoneVisual.for_player(self.player)


OPENING_TURN = TurnState(Player.BLACK, Tier.P90)
