"""One-directional criteria checks."""

from __future__ import annotations

from domain.common import Criteria, Player


def satisfies(criteria: Criteria, profile: Player) -> bool:
    """Return whether ``profile`` fits every constraint in ``criteria``."""
    return (
        not criteria.voice.isdisjoint(profile.voice)
        and not criteria.positions.isdisjoint(profile.positions)
        and profile.age_group in criteria.age_groups
    )


__all__ = ["satisfies"]
