"""Data layer utilities for loading JSON definitions."""

from .errors import (
    DataError,
    DataLoadError,
    DataValidationError,
    MissingEntryError,
)
from .paths import get_definitions_path, get_repo_root

__all__ = [
    "DataError",
    "DataLoadError",
    "DataValidationError",
    "MissingEntryError",
    "get_definitions_path",
    "get_repo_root",
]
