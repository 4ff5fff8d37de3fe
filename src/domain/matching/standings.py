"""Ordering helpers shared by the rank proximity checks."""

from __future__ import annotations

from collections.abc import Iterable

from domain.common import MAX_DIVISION, CompetitiveStanding
from domain.protocol import SOLO_QUEUE_TYPE, TIER_ORDINALS, Tier


def tier_ordinal(tier: Tier) -> int:
    """Return the ladder ordinal of a tier (UNRANKED counts as SILVER)."""
    try:
        return TIER_ORDINALS[tier]
    except KeyError as exc:
        raise ValueError(f"No ordinal defined for tier {tier!r}") from exc


def effective_division(standing: CompetitiveStanding) -> int:
    """Division used for all comparisons; a missing division counts as the worst one."""
    if standing.division is None:
        return MAX_DIVISION
    return standing.division


def tier_gap(high: CompetitiveStanding, low: CompetitiveStanding) -> int:
    return tier_ordinal(high.tier) - tier_ordinal(low.tier)


def order_standings(
    first: CompetitiveStanding,
    second: CompetitiveStanding,
) -> tuple[CompetitiveStanding, CompetitiveStanding]:
    """Return ``(high, low)``.

    Tier ordinal decides first, then the better (lower) effective division.
    A full tie keeps ``first`` as high.
    """
    first_ordinal = tier_ordinal(first.tier)
    second_ordinal = tier_ordinal(second.tier)
    if first_ordinal > second_ordinal:
        return first, second
    if second_ordinal > first_ordinal:
        return second, first
    if effective_division(first) <= effective_division(second):
        return first, second
    return second, first


def select_standing(
    standings: Iterable[CompetitiveStanding],
    *,
    queue_type: str = SOLO_QUEUE_TYPE,
) -> CompetitiveStanding:
    """Pick the entry for ``queue_type``; players without one queue as unranked."""
    for standing in standings:
        if standing.queue_type == queue_type:
            return standing
    return CompetitiveStanding(tier=Tier.UNRANKED, queue_type=queue_type)


__all__ = [
    "effective_division",
    "order_standings",
    "select_standing",
    "tier_gap",
    "tier_ordinal",
]
