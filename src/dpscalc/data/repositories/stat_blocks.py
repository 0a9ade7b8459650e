"""Repository base for records carrying the stat blocks shared by equipment and enemies."""
from __future__ import annotations

from typing import TypeVar

from dpscalc.core.numeric import Percentage, Scalar
from dpscalc.domain.defs import DamageBonus, StatBonuses, Stats

from .base import RepositoryBase

T = TypeVar("T")

STAT_BONUS_FIELDS = {"stab", "slash", "crush", "ranged", "magic"}
DAMAGE_FIELDS = {"strength", "ranged", "magic"}


class StatBlockRepository(RepositoryBase[T]):
    """Adds parsing of attack/defence/damage/prayer_bonus blocks."""

    def _parse_stat_bonuses(self, value: object, context: str) -> StatBonuses:
        payload = self._require_mapping(value, context)
        self._assert_exact_fields(payload, set(), context, optional_fields=STAT_BONUS_FIELDS)
        return StatBonuses(
            **{key: Scalar(self._require_int(raw, f"{context} {key}")) for key, raw in payload.items()}
        )

    def _parse_damage(self, value: object, context: str) -> DamageBonus:
        payload = self._require_mapping(value, context)
        self._assert_exact_fields(payload, set(), context, optional_fields=DAMAGE_FIELDS)
        strength = self._require_int(payload.get("strength", 0), f"{context} strength")
        ranged = self._require_int(payload.get("ranged", 0), f"{context} ranged")
        magic = self._require_int(payload.get("magic", 0), f"{context} magic")
        return DamageBonus(strength=Scalar(strength), ranged=Scalar(ranged), magic=Percentage(magic))

    def _parse_stats(self, payload: dict[str, object], context: str) -> Stats:
        """Build ``Stats`` from the optional stat keys of a record."""
        stats = Stats.zero()
        if "attack" in payload:
            stats = stats + Stats(attack=self._parse_stat_bonuses(payload["attack"], f"{context} attack"))
        if "defence" in payload:
            stats = stats + Stats(defence=self._parse_stat_bonuses(payload["defence"], f"{context} defence"))
        if "damage" in payload:
            stats = stats + Stats(damage=self._parse_damage(payload["damage"], f"{context} damage"))
        if "prayer_bonus" in payload:
            prayer_bonus = self._require_int(payload["prayer_bonus"], f"{context} prayer_bonus")
            stats = stats + Stats(prayer_bonus=Scalar(prayer_bonus))
        return stats
