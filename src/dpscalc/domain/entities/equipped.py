"""Equipped loadout models: what is held in the hands and worn in each slot."""
from __future__ import annotations

from dataclasses import dataclass, field

from dpscalc.core.numeric import Ticks
from dpscalc.domain.combat_styles import CombatOption
from dpscalc.domain.defs import (
    Ammunition,
    Attribute,
    Body,
    Cape,
    Feet,
    Hands,
    Head,
    Legs,
    Neck,
    PoweredStaff,
    Ring,
    Shield,
    Slot,
    SlotItem,
    Stats,
    Weapon,
    WeaponOneHanded,
    WeaponStats,
    WeaponTwoHanded,
    sum_stats,
)


class Wielded:
    """Hands of a player: ``OneHanded`` (weapon plus shield) or ``TwoHanded``."""

    __slots__ = ()

    weapon: Weapon

    def stats(self) -> Stats:
        """Combined stats of everything held; ``OneHanded`` and ``TwoHanded`` override this."""
        raise NotImplementedError

    @property
    def weapon_stats(self) -> WeaponStats:
        return self.weapon.weapon_stats

    @property
    def powered_staff(self) -> PoweredStaff | None:
        return self.weapon.powered_staff

    def combat_options(self) -> list[CombatOption]:
        return self.weapon.weapon_stats.weapon_type.combat_boost()

    def attack_speed(self, combat_option: CombatOption) -> Ticks:
        """Base weapon speed shifted by the style's hidden speed delta."""
        return self.weapon.weapon_stats.attack_speed + combat_option.invisible_boost().attack_speed

    def attributes(self) -> tuple[Attribute, ...]:
        # Shields never carry attributes.
        return self.weapon.attributes

    def has_attribute(self, attribute: Attribute) -> bool:
        return attribute in self.attributes()


@dataclass(frozen=True, slots=True)
class OneHanded(Wielded):
    weapon: WeaponOneHanded = field(default_factory=WeaponOneHanded.empty)
    shield: Shield = field(default_factory=Shield.empty)

    def stats(self) -> Stats:
        return self.weapon.stats + self.shield.stats


@dataclass(frozen=True, slots=True)
class TwoHanded(Wielded):
    weapon: WeaponTwoHanded = field(default_factory=WeaponTwoHanded.empty)

    def stats(self) -> Stats:
        return self.weapon.stats


@dataclass(slots=True)
class Equipped:
    """Full loadout; empty slots hold their canonical "Empty" item."""

    head: Head = field(default_factory=Head.empty)
    cape: Cape = field(default_factory=Cape.empty)
    neck: Neck = field(default_factory=Neck.empty)
    ammunition: Ammunition = field(default_factory=Ammunition.empty)
    wielded: Wielded = field(default_factory=OneHanded)
    body: Body = field(default_factory=Body.empty)
    legs: Legs = field(default_factory=Legs.empty)
    hands: Hands = field(default_factory=Hands.empty)
    feet: Feet = field(default_factory=Feet.empty)
    ring: Ring = field(default_factory=Ring.empty)

    def total_stats(self) -> Stats:
        return sum_stats(
            (
                self.head.stats,
                self.cape.stats,
                self.neck.stats,
                self.ammunition.stats,
                self.wielded.stats(),
                self.body.stats,
                self.legs.stats,
                self.hands.stats,
                self.feet.stats,
                self.ring.stats,
            )
        )

    def attribute_groups(self) -> tuple[tuple[Attribute, ...], ...]:
        """Attribute sets in the order the modifier chains fold them."""
        return (
            self.head.attributes,
            self.cape.attributes,
            self.neck.attributes,
            self.ammunition.attributes,
            self.wielded.attributes(),
            self.body.attributes,
            self.legs.attributes,
            self.hands.attributes,
            self.feet.attributes,
            self.ring.attributes,
        )

    def has_attribute(self, attribute: Attribute) -> bool:
        return any(attribute in group for group in self.attribute_groups())

    def equip(self, item: SlotItem) -> bool:
        """Place ``item`` in its slot.

        Returns True when the hands changed, so callers can refresh the
        selected combat style.
        """
        if isinstance(item, WeaponOneHanded):
            shield = self.wielded.shield if isinstance(self.wielded, OneHanded) else Shield.empty()
            self.wielded = OneHanded(weapon=item, shield=shield)
            return True
        if isinstance(item, WeaponTwoHanded):
            self.wielded = TwoHanded(weapon=item)
            return True
        if isinstance(item, Shield):
            weapon = self.wielded.weapon if isinstance(self.wielded, OneHanded) else WeaponOneHanded.empty()
            self.wielded = OneHanded(weapon=weapon, shield=item)
            return True
        setattr(self, _WORN_SLOT_FIELDS[item.slot], item)
        return False

    def unequip(self, slot: Slot) -> bool:
        """Reset ``slot`` to its empty item; returns True when the hands changed."""
        if slot in (Slot.WEAPON_ONE_HANDED, Slot.WEAPON_TWO_HANDED):
            shield = self.wielded.shield if isinstance(self.wielded, OneHanded) else Shield.empty()
            self.wielded = OneHanded(shield=shield)
            return True
        if slot is Slot.SHIELD:
            if isinstance(self.wielded, OneHanded):
                self.wielded = OneHanded(weapon=self.wielded.weapon)
                return True
            return False
        field_name = _WORN_SLOT_FIELDS[slot]
        setattr(self, field_name, type(getattr(self, field_name)).empty())
        return False


_WORN_SLOT_FIELDS: dict[Slot, str] = {
    Slot.HEAD: "head",
    Slot.CAPE: "cape",
    Slot.NECK: "neck",
    Slot.AMMUNITION: "ammunition",
    Slot.BODY: "body",
    Slot.LEGS: "legs",
    Slot.HANDS: "hands",
    Slot.FEET: "feet",
    Slot.RING: "ring",
}
