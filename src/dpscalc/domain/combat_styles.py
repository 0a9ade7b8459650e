"""Combat style catalog: weapon categories, their styles and hidden style boosts."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from dpscalc.core.numeric import Scalar, Ticks, Tiles
from dpscalc.domain.errors import UnsupportedStyleCombinationError


class StyleType(Enum):
    """Damage type of a combat style."""

    SLASH = "Slash"
    CRUSH = "Crush"
    STAB = "Stab"
    RANGED = "Ranged"
    MAGIC = "Magic"
    NONE = "None"

    def is_melee(self) -> bool:
        return self in _MELEE_STYLE_TYPES

    def is_ranged(self) -> bool:
        return self is StyleType.RANGED

    def is_magic(self) -> bool:
        return self is StyleType.MAGIC


_MELEE_STYLE_TYPES = frozenset({StyleType.SLASH, StyleType.CRUSH, StyleType.STAB})


class WeaponStyle(Enum):
    """Stance of a combat style; decides the invisible boost."""

    ACCURATE = "Accurate"
    AGGRESSIVE = "Aggressive"
    DEFENSIVE = "Defensive"
    CONTROLLED = "Controlled"
    RAPID = "Rapid"
    LONGRANGE = "Longrange"
    SHORT_FUSE = "ShortFuse"
    MEDIUM_FUSE = "MediumFuse"
    LONG_FUSE = "LongFuse"
    AUTOCAST = "Autocast"
    DEFENSIVE_AUTOCAST = "DefensiveAutocast"
    NONE = "None"


@dataclass(frozen=True, slots=True)
class CombatOptionModifier:
    """Hidden stat boost granted by a combat style."""

    attack: Scalar = field(default_factory=Scalar)
    strength: Scalar = field(default_factory=Scalar)
    defence: Scalar = field(default_factory=Scalar)
    ranged: Scalar = field(default_factory=Scalar)
    magic: Scalar = field(default_factory=Scalar)
    attack_range: Tiles = field(default_factory=Tiles)
    attack_speed: Ticks = field(default_factory=Ticks)


def invisible_boost(style_type: StyleType, weapon_style: WeaponStyle) -> CombatOptionModifier:
    """Return the hidden boost for a style pairing.

    Arms are checked in order, so e.g. ``Magic``/``Defensive`` resolves through
    the generic defensive arm. Pairings that never occur in the catalog raise
    ``UnsupportedStyleCombinationError``.
    """
    if style_type.is_melee() and weapon_style is WeaponStyle.ACCURATE:
        return CombatOptionModifier(attack=Scalar(3))
    if style_type.is_melee() and weapon_style is WeaponStyle.AGGRESSIVE:
        return CombatOptionModifier(strength=Scalar(3))
    if weapon_style is WeaponStyle.DEFENSIVE:
        return CombatOptionModifier(defence=Scalar(3))
    if weapon_style is WeaponStyle.CONTROLLED:
        return CombatOptionModifier(attack=Scalar(1), strength=Scalar(1), defence=Scalar(1))
    if style_type is StyleType.RANGED:
        if weapon_style in (WeaponStyle.ACCURATE, WeaponStyle.SHORT_FUSE):
            return CombatOptionModifier(ranged=Scalar(3))
        if weapon_style in (WeaponStyle.RAPID, WeaponStyle.MEDIUM_FUSE):
            return CombatOptionModifier(attack_speed=Ticks(-1))
        if weapon_style is WeaponStyle.LONGRANGE:
            return CombatOptionModifier(defence=Scalar(3), attack_range=Tiles(2))
    if weapon_style is WeaponStyle.LONG_FUSE:
        return CombatOptionModifier(attack_range=Tiles(1))
    if style_type is StyleType.MAGIC:
        if weapon_style is WeaponStyle.ACCURATE:
            return CombatOptionModifier(magic=Scalar(3))
        if weapon_style is WeaponStyle.LONGRANGE:
            return CombatOptionModifier(magic=Scalar(1), defence=Scalar(3), attack_range=Tiles(2))
        if weapon_style in (WeaponStyle.AUTOCAST, WeaponStyle.DEFENSIVE_AUTOCAST):
            return CombatOptionModifier()
    if style_type is StyleType.NONE and weapon_style is WeaponStyle.NONE:
        return CombatOptionModifier()
    raise UnsupportedStyleCombinationError(
        f"No invisible boost for style type {style_type.value} with weapon style {weapon_style.value}."
    )


@dataclass(frozen=True, slots=True)
class CombatOption:
    """One selectable fighting style of a weapon."""

    name: str
    style_type: StyleType
    weapon_style: WeaponStyle

    @classmethod
    def default(cls) -> CombatOption:
        """Return the unarmed "Punch" style every empty-handed player starts with."""
        return cls("Punch", StyleType.CRUSH, WeaponStyle.ACCURATE)

    def invisible_boost(self) -> CombatOptionModifier:
        return invisible_boost(self.style_type, self.weapon_style)


class WeaponType(Enum):
    """Weapon category; determines the available combat options."""

    TWO_HANDED_SWORD = "TwoHandedSword"
    AXE = "Axe"
    BANNER = "Banner"
    BLUNT = "Blunt"
    BLUDGEON = "Bludgeon"
    BULWARK = "Bulwark"
    CLAW = "Claw"
    PARTISAN = "Partisan"
    PICKAXE = "Pickaxe"
    POLEARM = "Polearm"
    POLESTAFF = "Polestaff"
    SCYTHE = "Scythe"
    SLASH_SWORD = "SlashSword"
    SPEAR = "Spear"
    SPIKED = "Spiked"
    STAB_SWORD = "StabSword"
    UNARMED = "Unarmed"
    WHIP = "Whip"
    BOW = "Bow"
    CHINCHOMPA = "Chinchompa"
    CROSSBOW = "Crossbow"
    GUN = "Gun"
    THROWN = "Thrown"
    BLADED_STAFF = "BladedStaff"
    POWERED_STAFF = "PoweredStaff"
    POWERED_WAND = "PoweredWand"
    STAFF = "Staff"
    SALAMANDER = "Salamander"

    def combat_boost(self) -> list[CombatOption]:
        """Return the ordered combat options for this weapon category."""
        return list(_COMBAT_OPTIONS[self])


def _options(*rows: tuple[str, StyleType, WeaponStyle]) -> tuple[CombatOption, ...]:
    return tuple(CombatOption(name, style_type, weapon_style) for name, style_type, weapon_style in rows)


_S = StyleType
_W = WeaponStyle

_SLASH_SWORD_OPTIONS = _options(
    ("Chop", _S.SLASH, _W.ACCURATE),
    ("Slash", _S.SLASH, _W.AGGRESSIVE),
    ("Lunge", _S.STAB, _W.CONTROLLED),
    ("Block", _S.SLASH, _W.DEFENSIVE),
)
_RANGED_OPTIONS = _options(
    ("Accurate", _S.RANGED, _W.ACCURATE),
    ("Rapid", _S.RANGED, _W.RAPID),
    ("Longrange", _S.RANGED, _W.LONGRANGE),
)
_POWERED_OPTIONS = _options(
    ("Accurate", _S.MAGIC, _W.ACCURATE),
    ("Accurate", _S.MAGIC, _W.ACCURATE),
    ("Longrange", _S.MAGIC, _W.LONGRANGE),
)

_COMBAT_OPTIONS: dict[WeaponType, tuple[CombatOption, ...]] = {
    WeaponType.TWO_HANDED_SWORD: _options(
        ("Chop", _S.SLASH, _W.ACCURATE),
        ("Slash", _S.SLASH, _W.AGGRESSIVE),
        ("Smash", _S.CRUSH, _W.AGGRESSIVE),
        ("Block", _S.SLASH, _W.DEFENSIVE),
    ),
    WeaponType.AXE: _options(
        ("Chop", _S.SLASH, _W.ACCURATE),
        ("Hack", _S.SLASH, _W.AGGRESSIVE),
        ("Smash", _S.CRUSH, _W.AGGRESSIVE),
        ("Block", _S.SLASH, _W.DEFENSIVE),
    ),
    WeaponType.BANNER: _options(
        ("Lunge", _S.STAB, _W.ACCURATE),
        ("Swipe", _S.SLASH, _W.AGGRESSIVE),
        ("Pound", _S.CRUSH, _W.CONTROLLED),
        ("Block", _S.STAB, _W.DEFENSIVE),
    ),
    WeaponType.BLUNT: _options(
        ("Pound", _S.CRUSH, _W.ACCURATE),
        ("Pummel", _S.CRUSH, _W.AGGRESSIVE),
        ("Block", _S.CRUSH, _W.DEFENSIVE),
    ),
    WeaponType.BLUDGEON: _options(
        ("Pound", _S.CRUSH, _W.AGGRESSIVE),
        ("Pummel", _S.CRUSH, _W.AGGRESSIVE),
        ("Block", _S.CRUSH, _W.AGGRESSIVE),
    ),
    WeaponType.BULWARK: _options(
        ("Pummel", _S.CRUSH, _W.ACCURATE),
        ("Block", _S.NONE, _W.NONE),
    ),
    WeaponType.CLAW: _SLASH_SWORD_OPTIONS,
    WeaponType.PARTISAN: _options(
        ("Stab", _S.STAB, _W.ACCURATE),
        ("Lunge", _S.STAB, _W.AGGRESSIVE),
        ("Pound", _S.CRUSH, _W.AGGRESSIVE),
        ("Block", _S.STAB, _W.DEFENSIVE),
    ),
    WeaponType.PICKAXE: _options(
        ("Spike", _S.STAB, _W.ACCURATE),
        ("Impale", _S.STAB, _W.AGGRESSIVE),
        ("Smash", _S.CRUSH, _W.AGGRESSIVE),
        ("Block", _S.STAB, _W.DEFENSIVE),
    ),
    WeaponType.POLEARM: _options(
        ("Jab", _S.STAB, _W.CONTROLLED),
        ("Swipe", _S.SLASH, _W.AGGRESSIVE),
        ("Fend", _S.STAB, _W.DEFENSIVE),
    ),
    WeaponType.POLESTAFF: _options(
        ("Bash", _S.CRUSH, _W.ACCURATE),
        ("Pound", _S.CRUSH, _W.AGGRESSIVE),
        ("Block", _S.CRUSH, _W.DEFENSIVE),
    ),
    WeaponType.SCYTHE: _options(
        ("Reap", _S.SLASH, _W.ACCURATE),
        ("Chop", _S.SLASH, _W.AGGRESSIVE),
        ("Jab", _S.CRUSH, _W.AGGRESSIVE),
        ("Block", _S.SLASH, _W.DEFENSIVE),
    ),
    WeaponType.SLASH_SWORD: _SLASH_SWORD_OPTIONS,
    WeaponType.SPEAR: _options(
        ("Lunge", _S.STAB, _W.CONTROLLED),
        ("Swipe", _S.SLASH, _W.CONTROLLED),
        ("Pound", _S.CRUSH, _W.CONTROLLED),
        ("Block", _S.STAB, _W.DEFENSIVE),
    ),
    WeaponType.SPIKED: _options(
        ("Pound", _S.CRUSH, _W.ACCURATE),
        ("Pummel", _S.CRUSH, _W.AGGRESSIVE),
        ("Spike", _S.STAB, _W.CONTROLLED),
        ("Block", _S.CRUSH, _W.DEFENSIVE),
    ),
    WeaponType.STAB_SWORD: _options(
        ("Stab", _S.STAB, _W.ACCURATE),
        ("Lunge", _S.STAB, _W.AGGRESSIVE),
        ("Slash", _S.SLASH, _W.AGGRESSIVE),
        ("Block", _S.STAB, _W.DEFENSIVE),
    ),
    WeaponType.UNARMED: _options(
        ("Punch", _S.CRUSH, _W.ACCURATE),
        ("Kick", _S.CRUSH, _W.AGGRESSIVE),
        ("Block", _S.CRUSH, _W.DEFENSIVE),
    ),
    WeaponType.WHIP: _options(
        ("Flick", _S.SLASH, _W.ACCURATE),
        ("Lash", _S.SLASH, _W.CONTROLLED),
        ("Deflect", _S.SLASH, _W.DEFENSIVE),
    ),
    WeaponType.BOW: _RANGED_OPTIONS,
    WeaponType.CHINCHOMPA: _options(
        ("Short fuse", _S.RANGED, _W.SHORT_FUSE),
        ("Medium fuse", _S.RANGED, _W.MEDIUM_FUSE),
        ("Long fuse", _S.RANGED, _W.LONG_FUSE),
    ),
    WeaponType.CROSSBOW: _RANGED_OPTIONS,
    WeaponType.GUN: _options(
        ("Aim and Fire", _S.NONE, _W.NONE),
        ("Kick", _S.CRUSH, _W.AGGRESSIVE),
    ),
    WeaponType.THROWN: _RANGED_OPTIONS,
    WeaponType.BLADED_STAFF: _options(
        ("Jab", _S.STAB, _W.ACCURATE),
        ("Swipe", _S.SLASH, _W.AGGRESSIVE),
        ("Fend", _S.CRUSH, _W.DEFENSIVE),
        ("Spell", _S.MAGIC, _W.AUTOCAST),
        ("Spell", _S.MAGIC, _W.DEFENSIVE_AUTOCAST),
    ),
    WeaponType.POWERED_STAFF: _POWERED_OPTIONS,
    WeaponType.POWERED_WAND: _POWERED_OPTIONS,
    WeaponType.STAFF: _options(
        ("Bash", _S.CRUSH, _W.ACCURATE),
        ("Pound", _S.CRUSH, _W.AGGRESSIVE),
        ("Focus", _S.CRUSH, _W.DEFENSIVE),
        ("Spell", _S.MAGIC, _W.AUTOCAST),
        ("Spell", _S.MAGIC, _W.DEFENSIVE_AUTOCAST),
    ),
    WeaponType.SALAMANDER: _options(
        ("Scorch", _S.SLASH, _W.AGGRESSIVE),
        ("Flare", _S.RANGED, _W.ACCURATE),
        ("Blaze", _S.MAGIC, _W.DEFENSIVE),
    ),
}

__all__ = [
    "CombatOption",
    "CombatOptionModifier",
    "StyleType",
    "WeaponStyle",
    "WeaponType",
    "invisible_boost",
]
