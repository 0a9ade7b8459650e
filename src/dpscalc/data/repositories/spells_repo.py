"""Spells repository."""
from __future__ import annotations

from typing import Dict

from dpscalc.core.numeric import Scalar
from dpscalc.data.errors import DataValidationError
from dpscalc.data.repositories.base import RepositoryBase
from dpscalc.domain.defs import Spell, SpellAttribute, Spellbook


class SpellsRepository(RepositoryBase[Spell]):
    """Loads and validates combat spell definitions."""

    kind = "spell"

    def __init__(self, base_path=None) -> None:
        super().__init__("spells.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, Spell]:
        spells: Dict[str, Spell] = {}
        for name, payload in raw.items():
            context = f"spell '{name}'"
            spell_data = self._require_mapping(payload, context)
            self._assert_exact_fields(
                spell_data,
                {"max_hit", "spellbook"},
                context,
                optional_fields={"attributes"},
            )
            max_hit = self._require_int(spell_data["max_hit"], f"{context} max_hit")
            if max_hit < 0:
                raise DataValidationError(f"{context} max_hit must not be negative.")
            spells[name] = Spell(
                name=name,
                max_hit=Scalar(max_hit),
                spellbook=self._require_enum(spell_data["spellbook"], Spellbook, f"{context} spellbook"),
                attributes=tuple(
                    self._require_enum_list(
                        spell_data.get("attributes", []), SpellAttribute, f"{context} attributes"
                    )
                ),
            )
        return spells
