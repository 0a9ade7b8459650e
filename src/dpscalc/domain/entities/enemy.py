"""Enemy runtime models."""
from __future__ import annotations

from dataclasses import dataclass, field

from dpscalc.core.numeric import Scalar, Tiles
from dpscalc.domain.combat_styles import StyleType
from dpscalc.domain.defs import EnemyAttribute, Stats

from .levels import Levels


@dataclass(frozen=True, slots=True)
class Enemy:
    """Opponent with levels, defensive stats, tags and size."""

    name: str
    levels: Levels = field(default_factory=Levels)
    stats: Stats = field(default_factory=Stats.zero)
    attributes: frozenset[EnemyAttribute] = frozenset()
    size: Tiles = Tiles(1)

    def has_attribute(self, attribute: EnemyAttribute) -> bool:
        return attribute in self.attributes

    def max_defence_roll(self, style_type: StyleType) -> Scalar:
        """Return the defence roll against an attack of ``style_type``.

        Magic attacks are defended with the magic level, everything else with
        the defence level. ``StyleType.NONE`` raises ``UnimplementedStyleError``.
        """
        style_defence = self.stats.defence.for_style(style_type)
        level = self.levels.magic if style_type is StyleType.MAGIC else self.levels.defence
        effective_defence = level + Scalar(9)
        return effective_defence * (style_defence + Scalar(64))
