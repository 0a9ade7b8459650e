"""Skill level models shared by players and enemies."""
from __future__ import annotations

from dataclasses import dataclass

from dpscalc.core.numeric import Scalar


@dataclass(frozen=True, slots=True)
class Levels:
    """Current combat skill levels."""

    hitpoints: Scalar = Scalar(10)
    attack: Scalar = Scalar(1)
    strength: Scalar = Scalar(1)
    defence: Scalar = Scalar(1)
    ranged: Scalar = Scalar(1)
    magic: Scalar = Scalar(1)
    prayer: Scalar = Scalar(1)

    @classmethod
    def of(cls, **levels: int) -> Levels:
        """Build levels from plain integers; omitted skills keep their defaults."""
        return cls(**{skill: Scalar(value) for skill, value in levels.items()})
