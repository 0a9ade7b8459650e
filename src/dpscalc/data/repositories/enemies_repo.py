"""Enemies repository."""
from __future__ import annotations

from dataclasses import fields
from typing import Dict

from dpscalc.core.numeric import Scalar, Tiles
from dpscalc.data.errors import DataValidationError
from dpscalc.data.repositories.stat_blocks import StatBlockRepository
from dpscalc.domain.defs import EnemyAttribute
from dpscalc.domain.entities import Enemy, Levels

_LEVEL_FIELDS = {level.name for level in fields(Levels)}


class EnemiesRepository(StatBlockRepository[Enemy]):
    """Loads and validates enemy definitions."""

    kind = "enemy"

    def __init__(self, base_path=None) -> None:
        super().__init__("enemies.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, Enemy]:
        enemies: Dict[str, Enemy] = {}
        for name, payload in raw.items():
            context = f"enemy '{name}'"
            enemy_data = self._require_mapping(payload, context)
            self._assert_exact_fields(
                enemy_data,
                {"levels", "size"},
                context,
                optional_fields={"attack", "defence", "damage", "attributes"},
            )
            size = self._require_int(enemy_data["size"], f"{context} size")
            if size < 1:
                raise DataValidationError(f"{context} size must be at least 1.")
            enemies[name] = Enemy(
                name=name,
                levels=self._parse_levels(enemy_data["levels"], f"{context} levels"),
                stats=self._parse_stats(enemy_data, context),
                attributes=frozenset(
                    self._require_enum_list(
                        enemy_data.get("attributes", []), EnemyAttribute, f"{context} attributes"
                    )
                ),
                size=Tiles(size),
            )
        return enemies

    def _parse_levels(self, value: object, context: str) -> Levels:
        levels_data = self._require_mapping(value, context)
        self._assert_exact_fields(levels_data, set(), context, optional_fields=_LEVEL_FIELDS)
        return Levels(
            **{
                skill: Scalar(self._require_int(level, f"{context} {skill}"))
                for skill, level in levels_data.items()
            }
        )
