"""Core enumerations for the quantum gomoku domain."""

from __future__ import annotations

from enum import IntEnum


class Player(IntEnum):
    """Side colour. Also the classical value of a collapsed stone."""

    BLACK = 0
    WHITE = 1

    @property
    def opposite(self) -> Player:
        return Player(1 - self.value)

    @classmethod
    def from_wire(cls, name: str) -> Player:
        """Parse the service's ``"black"`` / ``"white"`` identifiers."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown player: {name!r}") from None

    def __str__(self) -> str:
        return self.name.lower()


class Tier(IntEnum):
    """Confidence tier of an unobserved stone (percent chance of Black)."""

    P10 = 10
    P30 = 30
    P70 = 70
    P90 = 90

    @classmethod
    def from_value(cls, value: object) -> Tier:
        """Strict conversion from a service payload value."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Tier must be an integer, got {value!r}")
        return cls(value)

    @property
    def owner(self) -> Player:
        """Player who places stones of this tier."""
        return Player.BLACK if self >= 50 else Player.WHITE


class StoneVisual(IntEnum):
    """What the renderer should draw for a cell."""

    TIER_10 = 10
    TIER_30 = 30
    TIER_70 = 70
    TIER_90 = 90
    BLACK = 100
    WHITE = 0

    @classmethod
    def for_tier(cls, tier: Tier) -> StoneVisual:
        return cls(int(tier))

    @classmethod
    def for_player(cls, player: Player) -> StoneVisual:
        return cls.BLACK if player == Player.BLACK else cls.WHITE
