"""Service for building loadouts from named definitions and evaluating them."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from typing import Dict, List, Optional, Tuple

from dpscalc.core.numeric import Scalar, Ticks
from dpscalc.data.errors import MissingEntryError
from dpscalc.data.repositories import (
    EnemiesRepository,
    EquipmentRepository,
    PrayersRepository,
    SpellsRepository,
)
from dpscalc.domain import dps as dps_formula
from dpscalc.domain.combat_styles import CombatOption, StyleType
from dpscalc.domain.entities import Enemy, Extra, Levels, Player

from .errors import LoadoutError

logger = logging.getLogger(__name__)

_LEVEL_NAMES = {level.name for level in fields(Levels)}


@dataclass(slots=True)
class LoadoutRequest:
    """Names and numbers describing a player loadout."""

    items: Tuple[str, ...] = ()
    prayers: Tuple[str, ...] = ()
    spell: Optional[str] = None
    style_index: Optional[int] = None
    levels: Dict[str, int] = field(default_factory=dict)
    extra: Extra = field(default_factory=Extra)


@dataclass(frozen=True, slots=True)
class DpsReport:
    """Every intermediate figure of a single DPS evaluation."""

    combat_option: CombatOption
    style_type: StyleType
    accuracy_roll: Scalar
    defence_roll: Scalar
    max_hit: Scalar
    attack_speed: Ticks
    hit_rate: float
    dps: float


class LoadoutService:
    """Resolve loadout requests against the repositories and run the formulas."""

    def __init__(
        self,
        *,
        equipment_repo: EquipmentRepository,
        prayers_repo: PrayersRepository,
        spells_repo: SpellsRepository,
        enemies_repo: EnemiesRepository,
    ) -> None:
        self._equipment_repo = equipment_repo
        self._prayers_repo = prayers_repo
        self._spells_repo = spells_repo
        self._enemies_repo = enemies_repo

    def build_player(self, request: LoadoutRequest) -> Player:
        """Equip items in request order, then apply levels, prayers, spell and style."""
        unknown_levels = set(request.levels) - _LEVEL_NAMES
        if unknown_levels:
            raise LoadoutError(f"Unknown skills: {sorted(unknown_levels)}")
        try:
            player = Player().set_levels(Levels.of(**request.levels)).set_extra(request.extra)
            for item_name in request.items:
                player.equip(self._equipment_repo.get(item_name))
            for prayer_name in request.prayers:
                player.activate_prayer(self._prayers_repo.get(prayer_name))
            if request.spell is not None:
                player.select_spell(self._spells_repo.get(request.spell))
        except MissingEntryError as exc:
            raise LoadoutError(str(exc)) from exc
        if request.style_index is not None:
            player.change_combat_style(request.style_index)
        logger.debug(
            "Built player with %d items, %d prayers, style %s",
            len(request.items),
            len(request.prayers),
            player.combat_option.name,
        )
        return player

    def get_enemy(self, name: str) -> Enemy:
        try:
            return self._enemies_repo.get(name)
        except MissingEntryError as exc:
            raise LoadoutError(str(exc)) from exc

    def list_enemies(self) -> List[str]:
        return self._enemies_repo.names()

    def evaluate(self, player: Player, enemy: Enemy) -> DpsReport:
        """Compute the full DPS breakdown of ``player`` against ``enemy``."""
        style_type = player.combat_type()
        accuracy_roll = player.max_accuracy_roll(enemy)
        defence_roll = enemy.max_defence_roll(style_type)
        max_hit = player.max_hit(enemy)
        attack_speed = player.attack_speed(enemy)
        report = DpsReport(
            combat_option=player.combat_option,
            style_type=style_type,
            accuracy_roll=accuracy_roll,
            defence_roll=defence_roll,
            max_hit=max_hit,
            attack_speed=attack_speed,
            hit_rate=dps_formula.hit_rate(accuracy_roll, defence_roll),
            dps=dps_formula.dps(accuracy_roll, defence_roll, max_hit, attack_speed),
        )
        logger.debug("Evaluated %s vs %s: %.4f dps", player.combat_option.name, enemy.name, report.dps)
        return report


def describe_styles(player: Player) -> List[str]:
    """Return one line per selectable combat option of the wielded weapon."""
    lines: List[str] = []
    for index, option in enumerate(player.equipped.wielded.combat_options()):
        marker = "*" if index == player.style_index else " "
        lines.append(
            f"{marker} {index}: {option.name} ({option.style_type.value}, {option.weapon_style.value})"
        )
    return lines
