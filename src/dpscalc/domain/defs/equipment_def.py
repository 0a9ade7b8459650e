"""Equipment definition structures: stat blocks, slots, weapons and attributes."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, ClassVar, Iterable, Union

from dpscalc.core.numeric import Percentage, Scalar, Ticks, Tiles
from dpscalc.domain.combat_styles import StyleType, WeaponType
from dpscalc.domain.errors import UnimplementedStyleError

EMPTY_ITEM_NAME = "Empty"


@dataclass(frozen=True, slots=True)
class StatBonuses:
    """Per damage type attack or defence bonuses."""

    stab: Scalar = field(default_factory=Scalar)
    slash: Scalar = field(default_factory=Scalar)
    crush: Scalar = field(default_factory=Scalar)
    ranged: Scalar = field(default_factory=Scalar)
    magic: Scalar = field(default_factory=Scalar)

    def for_style(self, style_type: StyleType) -> Scalar:
        """Return the bonus matching a damage type."""
        if style_type is StyleType.NONE:
            raise UnimplementedStyleError("Style type None has no stat bonus.")
        return getattr(self, style_type.value.lower())

    def __add__(self, other: object) -> StatBonuses:
        if not isinstance(other, StatBonuses):
            return NotImplemented
        return StatBonuses(
            stab=self.stab + other.stab,
            slash=self.slash + other.slash,
            crush=self.crush + other.crush,
            ranged=self.ranged + other.ranged,
            magic=self.magic + other.magic,
        )


@dataclass(frozen=True, slots=True)
class DamageBonus:
    """Melee strength, ranged strength and magic damage percentage."""

    strength: Scalar = field(default_factory=Scalar)
    ranged: Scalar = field(default_factory=Scalar)
    magic: Percentage = field(default_factory=Percentage)

    def __add__(self, other: object) -> DamageBonus:
        if not isinstance(other, DamageBonus):
            return NotImplemented
        return DamageBonus(
            strength=self.strength + other.strength,
            ranged=self.ranged + other.ranged,
            magic=self.magic + other.magic,
        )


@dataclass(frozen=True, slots=True)
class Stats:
    """Additive equipment stat block; ``Stats.zero()`` is the identity."""

    attack: StatBonuses = field(default_factory=StatBonuses)
    defence: StatBonuses = field(default_factory=StatBonuses)
    damage: DamageBonus = field(default_factory=DamageBonus)
    prayer_bonus: Scalar = field(default_factory=Scalar)

    @classmethod
    def zero(cls) -> Stats:
        return cls()

    def __add__(self, other: object) -> Stats:
        if not isinstance(other, Stats):
            return NotImplemented
        return Stats(
            attack=self.attack + other.attack,
            defence=self.defence + other.defence,
            damage=self.damage + other.damage,
            prayer_bonus=self.prayer_bonus + other.prayer_bonus,
        )


def sum_stats(blocks: Iterable[Stats]) -> Stats:
    """Add up stat blocks, starting from the zero block."""
    total = Stats.zero()
    for block in blocks:
        total = total + block
    return total


class Attribute(Enum):
    """Special equipment effects that rewrite accuracy, max hit or attack speed."""

    CRYSTAL_ARMOUR = "CrystalArmour"
    CRYSTAL_BOW = "CrystalBow"
    SALVE_AMULET = "SalveAmulet"
    SALVE_AMULET_ENCHANTED = "SalveAmuletEnchanted"
    SALVE_AMULET_IMBUED = "SalveAmuletImbued"
    SALVE_AMULET_ENCHANTED_IMBUED = "SalveAmuletEnchantedImbued"
    BLACK_MASK = "BlackMask"
    BLACK_MASK_IMBUED = "BlackMaskImbued"
    VOID_ARMOUR = "VoidArmour"
    VOID_HELM_MELEE = "VoidHelmMelee"
    VOID_HELM_RANGED = "VoidHelmRanged"
    VOID_HELM_MAGIC = "VoidHelmMagic"
    WILDERNESS_MELEE_WEAPON = "WildernessMeleeWeapon"
    WILDERNESS_RANGED_WEAPON = "WildernessRangedWeapon"
    WILDERNESS_MAGIC_WEAPON = "WildernessMagicWeapon"
    DRAGON_HUNTER_LANCE = "DragonHunterLance"
    ARCLIGHT = "Arclight"
    KERIS_PARTISAN = "KerisPartisan"
    BLISTERWOOD_FLAIL = "BlisterwoodFlail"
    BLISTERWOOD_SICKLE = "BlisterwoodSickle"
    TZHAAR_MELEE_WEAPON = "TzhaarMeleeWeapon"
    INQUISITOR_ARMOUR = "InquisitorArmour"
    BARRONITE_MACE = "BarroniteMace"
    SILVERLIGHT = "Silverlight"
    IVANDIS_FLAIL = "IvandisFlail"
    LEAD_BLADED_BATTLEAXE = "LeadBladedBattleaxe"
    COLOSSAL_BLADE = "ColossalBlade"
    TWISTED_BOW = "TwistedBow"
    DRAGON_HUNTER_CROSSBOW = "DragonHunterCrossbow"
    SMOKE_STAFF = "SmokeStaff"
    HARMONISED_NIGHTMARE_STAFF = "HarmonisedNightmareStaff"


class Slot(Enum):
    """Equip location of an item."""

    HEAD = "head"
    CAPE = "cape"
    NECK = "neck"
    AMMUNITION = "ammunition"
    WEAPON_ONE_HANDED = "weapon_one_handed"
    WEAPON_TWO_HANDED = "weapon_two_handed"
    SHIELD = "shield"
    BODY = "body"
    LEGS = "legs"
    HANDS = "hands"
    FEET = "feet"
    RING = "ring"


def _third_of(offset: int) -> Callable[[Scalar], Scalar]:
    return lambda magic: magic // Scalar(3) + Scalar(offset)


def _salamander(magic_strength: int) -> Callable[[Scalar], Scalar]:
    return lambda magic: (magic * Scalar(magic_strength + 64) + Scalar(320)) // Scalar(640)


class PoweredStaff(Enum):
    """Weapons whose magic max hit comes from the magic level instead of a spell."""

    STARTER_STAFF = "StarterStaff"
    TRIDENT_OF_THE_SEAS = "TridentOfTheSeas"
    THAMMARONS_SCEPTRE = "ThammaronsSceptre"
    ACCURSED_SCEPTRE = "AccursedSceptre"
    TRIDENT_OF_THE_SWAMP = "TridentOfTheSwamp"
    SANGUINESTI_STAFF = "SanguinestiStaff"
    DAWNBRINGER = "Dawnbringer"
    TUMEKENS_SHADOW = "TumekensShadow"
    CRYSTAL_STAFF_BASIC = "CrystalStaffBasic"
    CRYSTAL_STAFF_ATTUNED = "CrystalStaffAttuned"
    CRYSTAL_STAFF_PERFECTED = "CrystalStaffPerfected"
    SWAMP_LIZARD = "SwampLizard"
    ORANGE_SALAMANDER = "OrangeSalamander"
    RED_SALAMANDER = "RedSalamander"
    BLACK_SALAMANDER = "BlackSalamander"

    def base_max_hit(self, magic_level: Scalar) -> Scalar:
        """Return the max hit before magic damage bonuses, never below zero."""
        return max(_POWERED_STAFF_MAX_HITS[self](magic_level), Scalar(0))


_POWERED_STAFF_MAX_HITS: dict[PoweredStaff, Callable[[Scalar], Scalar]] = {
    PoweredStaff.STARTER_STAFF: lambda _magic: Scalar(8),
    PoweredStaff.TRIDENT_OF_THE_SEAS: _third_of(-5),
    PoweredStaff.THAMMARONS_SCEPTRE: _third_of(-8),
    PoweredStaff.ACCURSED_SCEPTRE: _third_of(-6),
    PoweredStaff.TRIDENT_OF_THE_SWAMP: _third_of(-2),
    PoweredStaff.SANGUINESTI_STAFF: _third_of(-1),
    PoweredStaff.DAWNBRINGER: lambda magic: magic // Scalar(6) - Scalar(1),
    PoweredStaff.TUMEKENS_SHADOW: _third_of(1),
    PoweredStaff.CRYSTAL_STAFF_BASIC: lambda _magic: Scalar(25),
    PoweredStaff.CRYSTAL_STAFF_ATTUNED: lambda _magic: Scalar(31),
    PoweredStaff.CRYSTAL_STAFF_PERFECTED: lambda _magic: Scalar(39),
    PoweredStaff.SWAMP_LIZARD: _salamander(56),
    PoweredStaff.ORANGE_SALAMANDER: _salamander(59),
    PoweredStaff.RED_SALAMANDER: _salamander(77),
    PoweredStaff.BLACK_SALAMANDER: _salamander(92),
}


@dataclass(frozen=True, slots=True)
class WeaponStats:
    """Weapon category, base attack speed and attack range."""

    weapon_type: WeaponType = WeaponType.UNARMED
    attack_speed: Ticks = field(default_factory=lambda: Ticks(4))
    range: Tiles = field(default_factory=lambda: Tiles(1))


@dataclass(frozen=True, slots=True)
class Equipment:
    """Static item definition; attributes keep their declared order."""

    name: str
    stats: Stats = field(default_factory=Stats.zero)
    attributes: tuple[Attribute, ...] = ()

    slot: ClassVar[Slot]

    @classmethod
    def empty(cls):
        """Return the canonical empty item for this slot."""
        return cls(name=EMPTY_ITEM_NAME)

    @property
    def is_empty(self) -> bool:
        return self.name == EMPTY_ITEM_NAME

    def has_attribute(self, attribute: Attribute) -> bool:
        return attribute in self.attributes


@dataclass(frozen=True, slots=True)
class Head(Equipment):
    slot: ClassVar[Slot] = Slot.HEAD


@dataclass(frozen=True, slots=True)
class Cape(Equipment):
    slot: ClassVar[Slot] = Slot.CAPE


@dataclass(frozen=True, slots=True)
class Neck(Equipment):
    slot: ClassVar[Slot] = Slot.NECK


@dataclass(frozen=True, slots=True)
class Ammunition(Equipment):
    slot: ClassVar[Slot] = Slot.AMMUNITION


@dataclass(frozen=True, slots=True)
class Shield(Equipment):
    slot: ClassVar[Slot] = Slot.SHIELD


@dataclass(frozen=True, slots=True)
class Body(Equipment):
    slot: ClassVar[Slot] = Slot.BODY


@dataclass(frozen=True, slots=True)
class Legs(Equipment):
    slot: ClassVar[Slot] = Slot.LEGS


@dataclass(frozen=True, slots=True)
class Hands(Equipment):
    slot: ClassVar[Slot] = Slot.HANDS


@dataclass(frozen=True, slots=True)
class Feet(Equipment):
    slot: ClassVar[Slot] = Slot.FEET


@dataclass(frozen=True, slots=True)
class Ring(Equipment):
    slot: ClassVar[Slot] = Slot.RING


@dataclass(frozen=True, slots=True)
class Weapon(Equipment):
    """Common shape of one- and two-handed weapons."""

    weapon_stats: WeaponStats = field(default_factory=WeaponStats)
    powered_staff: PoweredStaff | None = None


@dataclass(frozen=True, slots=True)
class WeaponOneHanded(Weapon):
    slot: ClassVar[Slot] = Slot.WEAPON_ONE_HANDED


@dataclass(frozen=True, slots=True)
class WeaponTwoHanded(Weapon):
    slot: ClassVar[Slot] = Slot.WEAPON_TWO_HANDED


SlotItem = Union[
    Head,
    Cape,
    Neck,
    Ammunition,
    WeaponOneHanded,
    WeaponTwoHanded,
    Shield,
    Body,
    Legs,
    Hands,
    Feet,
    Ring,
]

SLOT_TYPES: dict[Slot, type[Equipment]] = {
    Slot.HEAD: Head,
    Slot.CAPE: Cape,
    Slot.NECK: Neck,
    Slot.AMMUNITION: Ammunition,
    Slot.WEAPON_ONE_HANDED: WeaponOneHanded,
    Slot.WEAPON_TWO_HANDED: WeaponTwoHanded,
    Slot.SHIELD: Shield,
    Slot.BODY: Body,
    Slot.LEGS: Legs,
    Slot.HANDS: Hands,
    Slot.FEET: Feet,
    Slot.RING: Ring,
}
