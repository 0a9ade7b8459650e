"""Enemy definition vocabulary."""
from __future__ import annotations

from enum import Enum


class EnemyAttribute(Enum):
    """Creature tags consulted by equipment attributes."""

    DEMON = "Demon"
    RAID = "Raid"
    DRAGON = "Dragon"
    GOLEM = "Golem"
    VAMPYRE = "Vampyre"
    LEAFY = "Leafy"
    UNDEAD = "Undead"
