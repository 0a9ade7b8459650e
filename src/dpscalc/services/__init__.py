"""Service layer exports."""

from .errors import LoadoutError
from .loadout_service import DpsReport, LoadoutRequest, LoadoutService, describe_styles

__all__ = [
    "DpsReport",
    "LoadoutError",
    "LoadoutRequest",
    "LoadoutService",
    "describe_styles",
]
