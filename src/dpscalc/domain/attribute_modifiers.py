"""Attribute modifier chain.

Every equipment ``Attribute`` maps to an ``AttributeModifiers`` record of three
pure callbacks ``f(value, player, enemy) -> value``: one for the accuracy roll,
one for the max hit and one for the attack speed. Attributes without a
registered effect use the identity for all three.

The chains fold the equipped attribute sets in slot order (head, cape, neck,
ammunition, wielded weapon, body, legs, hands, feet, ring). Truncating
multiplication is not associative, so this order is part of the result.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, TypeVar

from dpscalc.core.numeric import Fraction, Scalar, Ticks, Tiles
from dpscalc.domain.combat_styles import StyleType
from dpscalc.domain.defs import Attribute, EnemyAttribute

if TYPE_CHECKING:
    from dpscalc.domain.entities.enemy import Enemy
    from dpscalc.domain.entities.player import Player

T = TypeVar("T")

ScalarCallback = Callable[[Scalar, "Player", "Enemy"], Scalar]
TicksCallback = Callable[[Ticks, "Player", "Enemy"], Ticks]
Condition = Callable[["Player", "Enemy"], bool]

HARMONISED_SPELL_SPEED = Ticks(4)
COLOSSAL_BLADE_MAX_SIZE = Tiles(5)

_SALVE_MELEE_ONLY = (Attribute.SALVE_AMULET, Attribute.SALVE_AMULET_ENCHANTED)
_SALVE_IMBUED = (Attribute.SALVE_AMULET_IMBUED, Attribute.SALVE_AMULET_ENCHANTED_IMBUED)


def identity(value: T, _player: Player, _enemy: Enemy) -> T:
    return value


@dataclass(frozen=True, slots=True)
class AttributeModifiers:
    """Callbacks applied for one attribute."""

    accuracy: ScalarCallback = identity
    max_hit: ScalarCallback = identity
    attack_speed: TicksCallback = identity


def _scaled_when(fraction: Fraction, condition: Condition) -> ScalarCallback:
    def callback(value: Scalar, player: Player, enemy: Enemy) -> Scalar:
        if condition(player, enemy):
            return value * fraction
        return value

    return callback


def _uses(*style_checks: Callable[[StyleType], bool]) -> Condition:
    def condition(player: Player, _enemy: Enemy) -> bool:
        style_type = player.combat_type()
        return any(check(style_type) for check in style_checks)

    return condition


def _against(attribute: EnemyAttribute) -> Condition:
    return lambda _player, enemy: enemy.has_attribute(attribute)


def _all_of(*conditions: Condition) -> Condition:
    return lambda player, enemy: all(condition(player, enemy) for condition in conditions)


_melee = _uses(StyleType.is_melee)
_ranged = _uses(StyleType.is_ranged)
_magic = _uses(StyleType.is_magic)
_ranged_or_magic = _uses(StyleType.is_ranged, StyleType.is_magic)


def _in_wilderness(player: Player, _enemy: Enemy) -> bool:
    return player.extra.in_wilderness


def _on_slayer_task(player: Player, _enemy: Enemy) -> bool:
    return player.extra.on_slayer_task


def _salve_active(player: Player, enemy: Enemy) -> bool:
    """True when an equipped salve amulet variant applies to this attack."""
    if not enemy.has_attribute(EnemyAttribute.UNDEAD):
        return False
    equipped = player.equipped
    if any(equipped.has_attribute(salve) for salve in _SALVE_IMBUED):
        return True
    return player.combat_type().is_melee() and any(
        equipped.has_attribute(salve) for salve in _SALVE_MELEE_ONLY
    )


def _no_active_salve(player: Player, enemy: Enemy) -> bool:
    return not _salve_active(player, enemy)


def _salve(fraction: Fraction, *, imbued: bool) -> AttributeModifiers:
    condition = _against(EnemyAttribute.UNDEAD) if imbued else _all_of(_against(EnemyAttribute.UNDEAD), _melee)
    callback = _scaled_when(fraction, condition)
    return AttributeModifiers(accuracy=callback, max_hit=callback)


def _black_mask(*, imbued: bool) -> AttributeModifiers:
    melee_bonus = _scaled_when(Fraction(7, 6), _all_of(_on_slayer_task, _melee, _no_active_salve))
    if not imbued:
        return AttributeModifiers(accuracy=melee_bonus, max_hit=melee_bonus)
    distance_bonus = _scaled_when(Fraction(23, 20), _all_of(_on_slayer_task, _ranged_or_magic, _no_active_salve))

    def callback(value: Scalar, player: Player, enemy: Enemy) -> Scalar:
        return distance_bonus(melee_bonus(value, player, enemy), player, enemy)

    return AttributeModifiers(accuracy=callback, max_hit=callback)


def _both(fraction: Fraction, condition: Condition) -> AttributeModifiers:
    callback = _scaled_when(fraction, condition)
    return AttributeModifiers(accuracy=callback, max_hit=callback)


def _colossal_blade_max_hit(max_hit: Scalar, player: Player, enemy: Enemy) -> Scalar:
    if not player.combat_type().is_melee():
        return max_hit
    size = Scalar.from_tiles(min(enemy.size, COLOSSAL_BLADE_MAX_SIZE))
    return max_hit + Scalar(2) * size


def _harmonised_nightmare_staff_attack_speed(attack_speed: Ticks, player: Player, _enemy: Enemy) -> Ticks:
    if player.spell is not None:
        return HARMONISED_SPELL_SPEED
    return attack_speed


_vampyre_melee = _all_of(_against(EnemyAttribute.VAMPYRE), _melee)

_REGISTRY: dict[Attribute, AttributeModifiers] = {
    # The accuracy bonus is not style gated; see DESIGN.md (open questions).
    Attribute.DRAGON_HUNTER_CROSSBOW: AttributeModifiers(
        accuracy=_scaled_when(Fraction(13, 10), _against(EnemyAttribute.DRAGON)),
        max_hit=_scaled_when(Fraction(5, 4), _all_of(_against(EnemyAttribute.DRAGON), _ranged)),
    ),
    Attribute.SALVE_AMULET: _salve(Fraction(7, 6), imbued=False),
    Attribute.SALVE_AMULET_ENCHANTED: _salve(Fraction(6, 5), imbued=False),
    Attribute.SALVE_AMULET_IMBUED: _salve(Fraction(7, 6), imbued=True),
    Attribute.SALVE_AMULET_ENCHANTED_IMBUED: _salve(Fraction(6, 5), imbued=True),
    Attribute.BLACK_MASK: _black_mask(imbued=False),
    Attribute.BLACK_MASK_IMBUED: _black_mask(imbued=True),
    Attribute.WILDERNESS_MELEE_WEAPON: _both(Fraction(3, 2), _all_of(_in_wilderness, _melee)),
    Attribute.WILDERNESS_RANGED_WEAPON: _both(Fraction(3, 2), _all_of(_in_wilderness, _ranged)),
    Attribute.WILDERNESS_MAGIC_WEAPON: _both(Fraction(3, 2), _all_of(_in_wilderness, _magic)),
    Attribute.ARCLIGHT: _both(Fraction(17, 10), _all_of(_against(EnemyAttribute.DEMON), _melee)),
    Attribute.BLISTERWOOD_FLAIL: AttributeModifiers(
        accuracy=_scaled_when(Fraction(21, 20), _vampyre_melee),
        max_hit=_scaled_when(Fraction(5, 4), _vampyre_melee),
    ),
    Attribute.BLISTERWOOD_SICKLE: AttributeModifiers(
        accuracy=_scaled_when(Fraction(21, 20), _vampyre_melee),
        max_hit=_scaled_when(Fraction(23, 20), _vampyre_melee),
    ),
    Attribute.COLOSSAL_BLADE: AttributeModifiers(max_hit=_colossal_blade_max_hit),
    Attribute.HARMONISED_NIGHTMARE_STAFF: AttributeModifiers(
        attack_speed=_harmonised_nightmare_staff_attack_speed,
    ),
}

_IDENTITY = AttributeModifiers()


def modifiers_for(attribute: Attribute) -> AttributeModifiers:
    """Return the callbacks for ``attribute`` (identity when it has no effect)."""
    return _REGISTRY.get(attribute, _IDENTITY)


def fold_accuracy_roll(value: Scalar, player: Player, enemy: Enemy) -> Scalar:
    for group in player.equipped.attribute_groups():
        for attribute in group:
            value = modifiers_for(attribute).accuracy(value, player, enemy)
    return value


def fold_max_hit(value: Scalar, player: Player, enemy: Enemy) -> Scalar:
    for group in player.equipped.attribute_groups():
        for attribute in group:
            value = modifiers_for(attribute).max_hit(value, player, enemy)
    return value


def fold_attack_speed(value: Ticks, player: Player, enemy: Enemy) -> Ticks:
    for attribute in player.equipped.wielded.attributes():
        value = modifiers_for(attribute).attack_speed(value, player, enemy)
    return value


__all__ = [
    "AttributeModifiers",
    "fold_accuracy_roll",
    "fold_attack_speed",
    "fold_max_hit",
    "identity",
    "modifiers_for",
]
