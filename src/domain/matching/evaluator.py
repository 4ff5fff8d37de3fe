"""Top-level duo matching decision."""

from __future__ import annotations

import logging

from domain.common import Player
from domain.matching.preferences import satisfies
from domain.matching.rank_proximity import queue_compatible

logger = logging.getLogger(__name__)


def languages_compatible(player: Player, candidate: Player) -> bool:
    """Shared language, or both sides agreed to ignore language."""
    if not player.languages.isdisjoint(candidate.languages):
        return True
    return player.criteria.ignore_language and candidate.criteria.ignore_language


def can_queue(player: Player, candidate: Player) -> bool:
    """Same server and standings close enough for ranked duo queue."""
    if player.region != candidate.region:
        return False
    return queue_compatible(player.standing, candidate.standing)


def match(player: Player, candidate: Player) -> bool:
    """Return whether two players can duo and accept each other's criteria."""
    if not languages_compatible(player, candidate):
        logger.debug("player=%s candidate=%s rejected: no shared language", player.id, candidate.id)
        return False
    if player.id == candidate.id:
        logger.debug("player=%s rejected: cannot match with self", player.id)
        return False
    if not can_queue(player, candidate):
        logger.debug(
            "player=%s candidate=%s rejected: cannot queue (%s/%s vs %s/%s)",
            player.id,
            candidate.id,
            player.region.value,
            player.standing,
            candidate.region.value,
            candidate.standing,
        )
        return False
    if not satisfies(player.criteria, candidate):
        logger.debug(
            "player=%s candidate=%s rejected: candidate fails player's criteria",
            player.id,
            candidate.id,
        )
        return False
    if not satisfies(candidate.criteria, player):
        logger.debug(
            "player=%s candidate=%s rejected: player fails candidate's criteria",
            player.id,
            candidate.id,
        )
        return False
    return True


__all__ = ["can_queue", "languages_compatible", "match"]
