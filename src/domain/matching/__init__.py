"""Duo-queue matching stages."""

from domain.matching.evaluator import can_queue, languages_compatible, match
from domain.matching.preferences import satisfies
from domain.matching.rank_proximity import queue_compatible, rank_compatible
from domain.matching.roster import MatchingSettings, load_player_roster
from domain.matching.standings import (
    effective_division,
    order_standings,
    select_standing,
    tier_ordinal,
)

__all__ = [
    "MatchingSettings",
    "can_queue",
    "effective_division",
    "languages_compatible",
    "load_player_roster",
    "match",
    "order_standings",
    "queue_compatible",
    "rank_compatible",
    "satisfies",
    "select_standing",
    "tier_ordinal",
]
