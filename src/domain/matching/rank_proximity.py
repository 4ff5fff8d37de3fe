"""Ranked duo-queue eligibility between two standings.

Lower tiers may duo across a single tier gap freely. The top of DIAMOND and
the apex tiers (MASTER, CHALLENGER) only accept a narrow band of partners,
keyed by the division of the higher player.
"""

from __future__ import annotations

from domain.common import CompetitiveStanding
from domain.matching.standings import effective_division, order_standings, tier_gap
from domain.protocol import APEX_TIERS, LOOSE_TIERS, Tier

# Divisions of the lower player accepted by a DIAMOND player of each division.
# DIAMOND 1 additionally requires the partner to be DIAMOND as well.
DIAMOND_PARTNER_DIVISIONS: dict[int, frozenset[int]] = {
    1: frozenset({1, 2, 3, 4}),
    2: frozenset(),
    3: frozenset({1}),
    4: frozenset({1, 2}),
    5: frozenset({1, 2, 3}),
}

APEX_PARTNER_DIVISIONS: frozenset[int] = frozenset({1, 2, 3})


def _is_top_diamond(standing: CompetitiveStanding) -> bool:
    return standing.tier == Tier.DIAMOND and effective_division(standing) == 1


def queue_compatible(first: CompetitiveStanding, second: CompetitiveStanding) -> bool:
    """Return whether two standings may queue together."""
    high, low = order_standings(first, second)
    gap = tier_gap(high, low)

    # DIAMOND 1 cannot queue with its whole tier, so it skips the same-tier shortcut.
    if _is_top_diamond(high):
        return rank_compatible(high, low)
    if gap == 0:
        return True
    if gap == 1:
        if high.tier in LOOSE_TIERS:
            return True
        return rank_compatible(high, low)
    return False


def rank_compatible(high: CompetitiveStanding, low: CompetitiveStanding) -> bool:
    """Division-level check for pairs the tier gap alone cannot settle.

    ``high`` must outrank ``low`` by at most one tier and must not be a loose
    tier. A DIAMOND 1 ``high`` is accepted against any lower standing.
    """
    gap = tier_gap(high, low)
    if high.tier in LOOSE_TIERS or gap < 0 or (gap > 1 and not _is_top_diamond(high)):
        raise ValueError(f"rank_compatible called outside its domain: high={high}, low={low}")

    low_division = effective_division(low)
    if high.tier in APEX_TIERS:
        return low_division in APEX_PARTNER_DIVISIONS

    high_division = effective_division(high)
    accepted = DIAMOND_PARTNER_DIVISIONS[high_division]
    if high_division == 1 and low.tier != high.tier:
        return False
    return low_division in accepted


__all__ = [
    "APEX_PARTNER_DIVISIONS",
    "DIAMOND_PARTNER_DIVISIONS",
    "queue_compatible",
    "rank_compatible",
]
