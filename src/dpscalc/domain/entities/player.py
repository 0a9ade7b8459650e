"""Player aggregate: loadout, levels, prayers and the combat formulas."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from dpscalc.core.numeric import Percentage, Scalar, Ticks
from dpscalc.domain import attribute_modifiers, dps as dps_formula
from dpscalc.domain.combat_styles import CombatOption, StyleType
from dpscalc.domain.defs import Prayer, PrayerStats, Slot, SlotItem, Spell
from dpscalc.domain.errors import InvalidStyleIndexError, UnimplementedStyleError

from .enemy import Enemy
from .equipped import Equipped
from .levels import Levels

SPELL_CAST_SPEED = Ticks(5)


@dataclass(frozen=True, slots=True)
class Extra:
    """Situational flags consulted by some equipment attributes."""

    on_slayer_task: bool = True
    mining_level: int = 99
    in_wilderness: bool = True


@dataclass(slots=True)
class Player:
    """Mutable loadout builder; every setter returns the player for chaining."""

    levels: Levels = field(default_factory=Levels)
    equipped: Equipped = field(default_factory=Equipped)
    active_prayers: List[Prayer] = field(default_factory=list)
    combat_option: CombatOption = field(default_factory=CombatOption.default)
    style_index: int = 0
    spell: Optional[Spell] = None
    extra: Extra = field(default_factory=Extra)

    def equip(self, item: SlotItem) -> Player:
        if self.equipped.equip(item):
            self._reset_combat_option()
        return self

    def unequip(self, slot: Slot) -> Player:
        if self.equipped.unequip(slot):
            self._reset_combat_option()
        return self

    def set_levels(self, levels: Levels) -> Player:
        self.levels = levels
        return self

    def set_extra(self, extra: Extra) -> Player:
        self.extra = extra
        return self

    def activate_prayer(self, prayer: Prayer) -> Player:
        self.active_prayers.append(prayer)
        return self

    def deactivate_prayers(self) -> Player:
        self.active_prayers.clear()
        return self

    def select_spell(self, spell: Spell) -> Player:
        self.spell = spell
        return self

    def clear_spell(self) -> Player:
        self.spell = None
        return self

    def change_combat_style(self, index: int) -> Player:
        """Select option ``index`` of the wielded weapon's catalog entry."""
        options = self.equipped.wielded.combat_options()
        if not 0 <= index < len(options):
            raise InvalidStyleIndexError(
                f"Style index {index} is out of range for {len(options)} options."
            )
        self.combat_option = options[index]
        self.style_index = index
        return self

    def _reset_combat_option(self) -> None:
        self.combat_option = self.equipped.wielded.combat_options()[0]
        self.style_index = 0

    def prayer_stats(self) -> PrayerStats:
        total = PrayerStats()
        for prayer in self.active_prayers:
            total = total + prayer.stats
        return total

    def combat_type(self) -> StyleType:
        """Damage type of the next attack; a selected spell forces magic."""
        if self.spell is not None:
            return StyleType.MAGIC
        style_type = self.combat_option.style_type
        if style_type is StyleType.NONE:
            raise UnimplementedStyleError(
                f"Combat option {self.combat_option.name} has no damage type."
            )
        return style_type

    # Accuracy rolls

    def max_melee_accuracy_roll(self, enemy: Enemy) -> Scalar:
        style_type = self.combat_type()
        effective = (
            self.levels.attack * self.prayer_stats().melee_accuracy
            + self.combat_option.invisible_boost().attack
            + Scalar(8)
        )
        roll = effective * (self.equipped.total_stats().attack.for_style(style_type) + Scalar(64))
        return attribute_modifiers.fold_accuracy_roll(roll, self, enemy)

    def max_ranged_accuracy_roll(self, enemy: Enemy) -> Scalar:
        effective = (
            self.levels.ranged * self.prayer_stats().ranged_accuracy
            + self.combat_option.invisible_boost().ranged
            + Scalar(8)
        )
        roll = effective * (self.equipped.total_stats().attack.ranged + Scalar(64))
        return attribute_modifiers.fold_accuracy_roll(roll, self, enemy)

    def max_magic_accuracy_roll(self, enemy: Enemy) -> Scalar:
        effective = (
            self.levels.magic * self.prayer_stats().magic_accuracy
            + self.combat_option.invisible_boost().magic
            + Scalar(8)
        )
        if self.spell is not None:
            effective = effective + Scalar(1)
        roll = effective * (self.equipped.total_stats().attack.magic + Scalar(64))
        return attribute_modifiers.fold_accuracy_roll(roll, self, enemy)

    def max_accuracy_roll(self, enemy: Enemy) -> Scalar:
        style_type = self.combat_type()
        if style_type.is_melee():
            return self.max_melee_accuracy_roll(enemy)
        if style_type.is_ranged():
            return self.max_ranged_accuracy_roll(enemy)
        if style_type.is_magic():
            return self.max_magic_accuracy_roll(enemy)
        raise UnimplementedStyleError(f"No accuracy formula for {style_type.value}.")

    # Max hits

    def max_melee_hit(self, enemy: Enemy) -> Scalar:
        effective = (
            self.levels.strength * self.prayer_stats().melee_damage
            + self.combat_option.invisible_boost().strength
            + Scalar(8)
        )
        strength_bonus = self.equipped.total_stats().damage.strength
        max_hit = (effective * (strength_bonus + Scalar(64)) + Scalar(320)) // Scalar(640)
        return attribute_modifiers.fold_max_hit(max_hit, self, enemy)

    def max_ranged_hit(self, enemy: Enemy) -> Scalar:
        effective = (
            self.levels.ranged * self.prayer_stats().ranged_damage
            + self.combat_option.invisible_boost().ranged
            + Scalar(8)
        )
        ranged_strength = self.equipped.total_stats().damage.ranged
        max_hit = (effective * (ranged_strength + Scalar(64)) + Scalar(320)) // Scalar(640)
        return attribute_modifiers.fold_max_hit(max_hit, self, enemy)

    def max_magic_hit(self, enemy: Enemy) -> Scalar:
        powered_staff = self.equipped.wielded.powered_staff
        if powered_staff is not None:
            base = powered_staff.base_max_hit(self.levels.magic)
        elif self.spell is not None:
            base = self.spell.max_hit
        else:
            raise UnimplementedStyleError("Magic max hit needs a powered staff or a selected spell.")
        magic_damage = self.equipped.total_stats().damage.magic
        max_hit = base * Percentage(int(magic_damage) + int(self.prayer_stats().magic_damage))
        return attribute_modifiers.fold_max_hit(max_hit, self, enemy)

    def max_hit(self, enemy: Enemy) -> Scalar:
        style_type = self.combat_type()
        if style_type.is_melee():
            return self.max_melee_hit(enemy)
        if style_type.is_ranged():
            return self.max_ranged_hit(enemy)
        if style_type.is_magic():
            return self.max_magic_hit(enemy)
        raise UnimplementedStyleError(f"No max hit formula for {style_type.value}.")

    def attack_speed(self, enemy: Enemy) -> Ticks:
        if self.spell is not None:
            base = SPELL_CAST_SPEED
        else:
            base = self.equipped.wielded.attack_speed(self.combat_option)
        return attribute_modifiers.fold_attack_speed(base, self, enemy)

    def dps(self, enemy: Enemy) -> float:
        """Expected damage per second against ``enemy``."""
        defence_roll = enemy.max_defence_roll(self.combat_type())
        return dps_formula.dps(
            self.max_accuracy_roll(enemy),
            defence_roll,
            self.max_hit(enemy),
            self.attack_speed(enemy),
        )
