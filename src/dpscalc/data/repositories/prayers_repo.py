"""Prayers repository."""
from __future__ import annotations

from typing import Dict

from dpscalc.core.numeric import Percentage
from dpscalc.data.repositories.base import RepositoryBase
from dpscalc.domain.defs import PRAYER_STAT_FIELDS, Prayer, PrayerStats


class PrayersRepository(RepositoryBase[Prayer]):
    """Loads and validates prayer definitions."""

    kind = "prayer"

    def __init__(self, base_path=None) -> None:
        super().__init__("prayers.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, Prayer]:
        prayers: Dict[str, Prayer] = {}
        for name, payload in raw.items():
            context = f"prayer '{name}'"
            prayer_data = self._require_mapping(payload, context)
            self._assert_exact_fields(prayer_data, set(), context, optional_fields=set(PRAYER_STAT_FIELDS))
            stats = PrayerStats(
                **{
                    key: Percentage(self._require_int(value, f"{context} {key}"))
                    for key, value in prayer_data.items()
                }
            )
            prayers[name] = Prayer(name=name, stats=stats)
        return prayers
