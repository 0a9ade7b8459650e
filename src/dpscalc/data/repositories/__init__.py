"""Repository exports."""

from .equipment_repo import EquipmentRepository
from .prayers_repo import PrayersRepository
from .spells_repo import SpellsRepository
from .enemies_repo import EnemiesRepository

__all__ = [
    "EquipmentRepository",
    "PrayersRepository",
    "SpellsRepository",
    "EnemiesRepository",
]
