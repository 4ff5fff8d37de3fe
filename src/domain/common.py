"""Value objects consumed by the matching core."""

from __future__ import annotations

from dataclasses import dataclass, field

from domain.protocol import SOLO_QUEUE_TYPE, Position, Region, Tier

MIN_DIVISION = 1
MAX_DIVISION = 5


@dataclass(frozen=True)
class CompetitiveStanding:
    """One ladder entry: queue type, tier and optional division (1 is best)."""

    tier: Tier
    division: int | None = None
    queue_type: str = SOLO_QUEUE_TYPE

    def __post_init__(self) -> None:
        if not isinstance(self.tier, Tier):
            raise ValueError(f"tier must be a Tier member, got {self.tier!r}")
        if self.division is None:
            return
        if isinstance(self.division, bool) or not isinstance(self.division, int):
            raise ValueError(f"division must be an int or None, got {self.division!r}")
        if not MIN_DIVISION <= self.division <= MAX_DIVISION:
            raise ValueError(
                f"division must be between {MIN_DIVISION} and {MAX_DIVISION}, got {self.division}"
            )

    def __str__(self) -> str:
        if self.division is None:
            return self.tier.value
        return f"{self.tier.value} {self.division}"


UNRANKED_STANDING = CompetitiveStanding(tier=Tier.UNRANKED)


@dataclass(frozen=True)
class Criteria:
    """What a player accepts in a prospective duo partner."""

    positions: frozenset[Position] = frozenset()
    voice: frozenset[bool] = frozenset()
    age_groups: frozenset[int] = frozenset()
    ignore_language: bool = False


@dataclass(frozen=True)
class Player:
    """Matching-relevant profile of one player."""

    id: int
    name: str
    region: Region
    voice: frozenset[bool]
    languages: frozenset[str]
    age_group: int
    positions: frozenset[Position]
    standing: CompetitiveStanding
    criteria: Criteria = field(default_factory=Criteria)
    comment: str | None = None


__all__ = [
    "CompetitiveStanding",
    "Criteria",
    "MAX_DIVISION",
    "MIN_DIVISION",
    "Player",
    "UNRANKED_STANDING",
]
