"""Spell definition structures."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from dpscalc.core.numeric import Scalar


class Spellbook(Enum):
    STANDARD = "Standard"
    ANCIENT = "Ancient"
    LUNAR = "Lunar"
    ARCEUUS = "Arceuus"


class SpellAttribute(Enum):
    BOLT = "Bolt"
    BARRAGE = "Barrage"


@dataclass(frozen=True, slots=True)
class Spell:
    """Combat spell with a fixed base max hit."""

    name: str
    max_hit: Scalar
    spellbook: Spellbook = Spellbook.STANDARD
    attributes: tuple[SpellAttribute, ...] = ()
