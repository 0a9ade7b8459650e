"""Prayer definition structures."""
from __future__ import annotations

from dataclasses import dataclass, field, fields

from dpscalc.core.numeric import Percentage


@dataclass(frozen=True, slots=True)
class PrayerStats:
    """Percentage bonuses granted by active prayers; bonuses add up field-wise."""

    defence: Percentage = field(default_factory=Percentage)
    melee_accuracy: Percentage = field(default_factory=Percentage)
    melee_damage: Percentage = field(default_factory=Percentage)
    ranged_accuracy: Percentage = field(default_factory=Percentage)
    ranged_damage: Percentage = field(default_factory=Percentage)
    magic_accuracy: Percentage = field(default_factory=Percentage)
    magic_damage: Percentage = field(default_factory=Percentage)
    magic_defence: Percentage = field(default_factory=Percentage)

    def __add__(self, other: object) -> PrayerStats:
        if not isinstance(other, PrayerStats):
            return NotImplemented
        return PrayerStats(
            **{
                stat.name: getattr(self, stat.name) + getattr(other, stat.name)
                for stat in fields(self)
            }
        )


PRAYER_STAT_FIELDS = tuple(stat.name for stat in fields(PrayerStats))


@dataclass(frozen=True, slots=True)
class Prayer:
    """Named prayer definition."""

    name: str
    stats: PrayerStats = field(default_factory=PrayerStats)
