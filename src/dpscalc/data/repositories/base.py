"""Base repository implementation for JSON definition data."""
from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Dict, Generic, List, Type, TypeVar

from dpscalc.data import paths
from dpscalc.data.errors import DataValidationError, MissingEntryError
from dpscalc.data.json_loader import load_json

T = TypeVar("T")
E = TypeVar("E", bound=Enum)

logger = logging.getLogger(__name__)


class RepositoryBase(Generic[T]):
    """Common caching and loading behavior for repositories."""

    kind = "definition"

    def __init__(self, filename: str, base_path: Path | str | None = None) -> None:
        self._filename = filename
        self._base_path = Path(base_path) if base_path is not None else None
        self._definitions: Dict[str, T] | None = None

    def _get_file_path(self) -> Path:
        definitions_dir = paths.get_definitions_path(self._base_path)
        return definitions_dir / self._filename

    def _load_raw(self) -> dict[str, object]:
        file_path = self._get_file_path()
        raw = load_json(file_path)
        if not isinstance(raw, dict):
            raise DataValidationError(f"Expected top-level object in {file_path}")
        return raw

    def _build(self, raw: dict[str, object]) -> Dict[str, T]:
        """Convert a raw dict into typed definitions."""
        raise NotImplementedError

    def _ensure_loaded(self) -> None:
        if self._definitions is None:
            raw = self._load_raw()
            self._definitions = self._build(raw)
            logger.debug("Loaded %d %s entries from %s", len(self._definitions), self.kind, self._filename)

    def get(self, name: str) -> T:
        """Return a definition by name."""
        self._ensure_loaded()
        assert self._definitions is not None
        try:
            return self._definitions[name]
        except KeyError as exc:
            raise MissingEntryError(self.kind, name) from exc

    def all(self) -> list[T]:
        """Return all definitions sorted deterministically by name."""
        self._ensure_loaded()
        assert self._definitions is not None
        return [self._definitions[key] for key in sorted(self._definitions.keys())]

    def names(self) -> list[str]:
        self._ensure_loaded()
        assert self._definitions is not None
        return sorted(self._definitions.keys())

    @staticmethod
    def _require_mapping(value: object, context: str) -> dict[str, object]:
        if not isinstance(value, dict):
            raise DataValidationError(f"{context} must be an object/dict.")
        return value

    @staticmethod
    def _require_str(value: object, context: str) -> str:
        if not isinstance(value, str):
            raise DataValidationError(f"{context} must be a string.")
        return value

    @staticmethod
    def _require_int(value: object, context: str) -> int:
        # bool is an int subclass but never a valid stat.
        if not isinstance(value, int) or isinstance(value, bool):
            raise DataValidationError(f"{context} must be an integer.")
        return value

    @staticmethod
    def _require_str_list(value: object, context: str) -> List[str]:
        if not isinstance(value, list):
            raise DataValidationError(f"{context} must be a list.")
        result: List[str] = []
        for item in value:
            if not isinstance(item, str):
                raise DataValidationError(f"{context} entries must be strings.")
            result.append(item)
        return result

    @classmethod
    def _require_enum(cls, value: object, enum_type: Type[E], context: str) -> E:
        text = cls._require_str(value, context)
        try:
            return enum_type(text)
        except ValueError as exc:
            valid = ", ".join(member.value for member in enum_type)
            raise DataValidationError(f"{context} has unknown value '{text}' (expected one of: {valid}).") from exc

    @classmethod
    def _require_enum_list(cls, value: object, enum_type: Type[E], context: str) -> List[E]:
        return [cls._require_enum(item, enum_type, context) for item in cls._require_str_list(value, context)]

    @staticmethod
    def _assert_exact_fields(
        payload: dict[str, object],
        expected_keys: set[str],
        context: str,
        *,
        optional_fields: set[str] | None = None,
    ) -> None:
        actual_keys = set(payload.keys())
        optional = optional_fields or set()
        missing = expected_keys - actual_keys
        unknown = actual_keys - expected_keys - optional
        if missing or unknown:
            msg_parts = []
            if missing:
                msg_parts.append(f"missing fields: {sorted(missing)}")
            if unknown:
                msg_parts.append(f"unknown fields: {sorted(unknown)}")
            raise DataValidationError(f"{context} has schema issues ({'; '.join(msg_parts)}).")
