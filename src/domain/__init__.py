"""Duo-queue matching domain modules."""

from domain.common import CompetitiveStanding, Criteria, Player
from domain.protocol import Position, Region, Tier

__all__ = ["CompetitiveStanding", "Criteria", "Player", "Position", "Region", "Tier"]
