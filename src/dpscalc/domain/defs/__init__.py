"""Domain definition exports."""

from .enemy_def import EnemyAttribute
from .equipment_def import (
    EMPTY_ITEM_NAME,
    SLOT_TYPES,
    Ammunition,
    Attribute,
    Body,
    Cape,
    DamageBonus,
    Equipment,
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
    StatBonuses,
    Stats,
    Weapon,
    WeaponOneHanded,
    WeaponStats,
    WeaponTwoHanded,
    sum_stats,
)
from .prayer_def import PRAYER_STAT_FIELDS, Prayer, PrayerStats
from .spell_def import Spell, SpellAttribute, Spellbook

__all__ = [
    "EMPTY_ITEM_NAME",
    "PRAYER_STAT_FIELDS",
    "SLOT_TYPES",
    "Ammunition",
    "Attribute",
    "Body",
    "Cape",
    "DamageBonus",
    "EnemyAttribute",
    "Equipment",
    "Feet",
    "Hands",
    "Head",
    "Legs",
    "Neck",
    "PoweredStaff",
    "Prayer",
    "PrayerStats",
    "Ring",
    "Shield",
    "Slot",
    "SlotItem",
    "Spell",
    "SpellAttribute",
    "Spellbook",
    "StatBonuses",
    "Stats",
    "Weapon",
    "WeaponOneHanded",
    "WeaponStats",
    "WeaponTwoHanded",
    "sum_stats",
]
