"""Equipment repository."""
from __future__ import annotations

from typing import Dict

from dpscalc.core.numeric import Ticks, Tiles
from dpscalc.data.errors import DataValidationError
from dpscalc.data.repositories.stat_blocks import StatBlockRepository
from dpscalc.domain.combat_styles import WeaponType
from dpscalc.domain.defs import (
    SLOT_TYPES,
    Attribute,
    Equipment,
    PoweredStaff,
    Slot,
    Weapon,
    WeaponStats,
)

_WEAPON_SLOTS = {Slot.WEAPON_ONE_HANDED, Slot.WEAPON_TWO_HANDED}
_COMMON_OPTIONAL_FIELDS = {"attack", "defence", "damage", "prayer_bonus", "attributes"}


class EquipmentRepository(StatBlockRepository[Equipment]):
    """Loads and validates equipment definitions for every slot."""

    kind = "equipment"

    def __init__(self, base_path=None) -> None:
        super().__init__("equipment.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, Equipment]:
        items: Dict[str, Equipment] = {}
        for name, payload in raw.items():
            context = f"equipment '{name}'"
            item_data = self._require_mapping(payload, context)
            slot = self._require_enum(item_data.get("slot"), Slot, f"{context} slot")

            if slot in _WEAPON_SLOTS:
                self._assert_exact_fields(
                    item_data,
                    {"slot", "weapon"},
                    context,
                    optional_fields=_COMMON_OPTIONAL_FIELDS | {"powered_staff"},
                )
            else:
                self._assert_exact_fields(item_data, {"slot"}, context, optional_fields=_COMMON_OPTIONAL_FIELDS)

            stats = self._parse_stats(item_data, context)
            attributes = tuple(
                self._require_enum_list(item_data.get("attributes", []), Attribute, f"{context} attributes")
            )
            item_type = SLOT_TYPES[slot]
            if issubclass(item_type, Weapon):
                items[name] = item_type(
                    name=name,
                    stats=stats,
                    attributes=attributes,
                    weapon_stats=self._parse_weapon_stats(item_data["weapon"], f"{context} weapon"),
                    powered_staff=self._parse_powered_staff(item_data.get("powered_staff"), context),
                )
            else:
                items[name] = item_type(name=name, stats=stats, attributes=attributes)
        return items

    def _parse_weapon_stats(self, value: object, context: str) -> WeaponStats:
        weapon_data = self._require_mapping(value, context)
        self._assert_exact_fields(weapon_data, {"weapon_type", "attack_speed", "range"}, context)
        attack_speed = self._require_int(weapon_data["attack_speed"], f"{context} attack_speed")
        if attack_speed <= 0:
            raise DataValidationError(f"{context} attack_speed must be positive.")
        return WeaponStats(
            weapon_type=self._require_enum(weapon_data["weapon_type"], WeaponType, f"{context} weapon_type"),
            attack_speed=Ticks(attack_speed),
            range=Tiles(self._require_int(weapon_data["range"], f"{context} range")),
        )

    def _parse_powered_staff(self, value: object, context: str) -> PoweredStaff | None:
        if value is None:
            return None
        return self._require_enum(value, PoweredStaff, f"{context} powered_staff")
