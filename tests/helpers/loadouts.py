from __future__ import annotations

from dpscalc.core.numeric import Percentage, Scalar, Ticks, Tiles
from dpscalc.data.repositories import (
    EnemiesRepository,
    EquipmentRepository,
    PrayersRepository,
    SpellsRepository,
)
from dpscalc.domain.combat_styles import WeaponType
from dpscalc.domain.defs import (
    Attribute,
    DamageBonus,
    EnemyAttribute,
    PoweredStaff,
    StatBonuses,
    Stats,
    WeaponOneHanded,
    WeaponStats,
    WeaponTwoHanded,
)
from dpscalc.domain.entities import Enemy, Levels

_equipment_repo = EquipmentRepository()
_prayers_repo = PrayersRepository()
_spells_repo = SpellsRepository()
_enemies_repo = EnemiesRepository()


def item(name: str):
    return _equipment_repo.get(name)


def prayer(name: str):
    return _prayers_repo.get(name)


def spell(name: str):
    return _spells_repo.get(name)


def enemy(name: str):
    return _enemies_repo.get(name)


def make_weapon(
    weapon_type: WeaponType,
    *,
    name: str = "Test weapon",
    attack_speed: int = 4,
    attributes: tuple[Attribute, ...] = (),
    powered_staff: PoweredStaff | None = None,
    two_handed: bool = False,
):
    weapon_class = WeaponTwoHanded if two_handed else WeaponOneHanded
    return weapon_class(
        name=name,
        attributes=attributes,
        weapon_stats=WeaponStats(weapon_type, Ticks(attack_speed), Tiles(1)),
        powered_staff=powered_staff,
    )


def make_enemy(
    *attributes: EnemyAttribute,
    name: str = "Dummy",
    size: int = 1,
    defence_level: int = 1,
    magic_level: int = 1,
    slash_defence: int = 0,
) -> Enemy:
    return Enemy(
        name=name,
        levels=Levels.of(defence=defence_level, magic=magic_level),
        stats=Stats(defence=StatBonuses(slash=Scalar(slash_defence))),
        attributes=frozenset(attributes),
        size=Tiles(size),
    )


def magic_damage(percent: int) -> Stats:
    return Stats(damage=DamageBonus(magic=Percentage(percent)))
