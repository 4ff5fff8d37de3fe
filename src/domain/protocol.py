"""Shared enums for duo-queue matching."""

from __future__ import annotations

from enum import Enum
from typing import Callable, TypeVar

SOLO_QUEUE_TYPE = "RANKED_SOLO_5x5"


class Tier(str, Enum):
    """Ranked ladder tiers a standing can carry."""

    UNRANKED = "UNRANKED"
    BRONZE = "BRONZE"
    SILVER = "SILVER"
    GOLD = "GOLD"
    PLATINUM = "PLATINUM"
    DIAMOND = "DIAMOND"
    MASTER = "MASTER"
    CHALLENGER = "CHALLENGER"


class Region(str, Enum):
    """Game server a player is registered on."""

    BR = "br"
    EUNE = "eune"
    EUW = "euw"
    JP = "jp"
    KR = "kr"
    LAN = "lan"
    LAS = "las"
    NA = "na"
    OCE = "oce"
    RU = "ru"
    TR = "tr"


class Position(str, Enum):
    """Role a player is willing to fill."""

    TOP = "top"
    JUNGLE = "jungle"
    MID = "mid"
    MARKSMAN = "marksman"
    SUPPORT = "support"


# Unranked players queue as silvers.
TIER_ORDINALS: dict[Tier, int] = {
    Tier.BRONZE: 1,
    Tier.UNRANKED: 2,
    Tier.SILVER: 2,
    Tier.GOLD: 3,
    Tier.PLATINUM: 4,
    Tier.DIAMOND: 5,
    Tier.MASTER: 6,
    Tier.CHALLENGER: 6,
}

_unmapped = set(Tier) - set(TIER_ORDINALS)
if _unmapped:
    raise RuntimeError(f"Tiers without an ordinal: {sorted(tier.value for tier in _unmapped)}")

LOOSE_TIERS: frozenset[Tier] = frozenset(
    {Tier.UNRANKED, Tier.BRONZE, Tier.SILVER, Tier.GOLD, Tier.PLATINUM}
)
APEX_TIERS: frozenset[Tier] = frozenset({Tier.MASTER, Tier.CHALLENGER})


E = TypeVar("E", bound=Enum)


def _parse_member(
    enum_cls: type[E],
    label: object,
    *,
    kind: str,
    normalize: Callable[[str], str],
) -> E:
    if isinstance(label, enum_cls):
        return label
    if not isinstance(label, str):
        raise ValueError(f"{kind} label must be a string, got {label!r}")
    try:
        return enum_cls(normalize(label.strip()))
    except ValueError as exc:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValueError(f"Unknown {kind} label {label!r}; expected one of: {allowed}") from exc


def parse_tier(label: object) -> Tier:
    """Parse a tier label case-insensitively, failing on anything unknown."""
    return _parse_member(Tier, label, kind="tier", normalize=str.upper)


def parse_region(label: object) -> Region:
    return _parse_member(Region, label, kind="region", normalize=str.lower)


def parse_position(label: object) -> Position:
    return _parse_member(Position, label, kind="position", normalize=str.lower)


__all__ = [
    "APEX_TIERS",
    "LOOSE_TIERS",
    "Position",
    "Region",
    "SOLO_QUEUE_TYPE",
    "TIER_ORDINALS",
    "Tier",
    "parse_position",
    "parse_region",
    "parse_tier",
]
