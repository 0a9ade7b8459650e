"""Runtime entity exports."""

from .enemy import Enemy
from .equipped import Equipped, OneHanded, TwoHanded, Wielded
from .levels import Levels
from .player import Extra, Player

__all__ = [
    "Enemy",
    "Equipped",
    "Extra",
    "Levels",
    "OneHanded",
    "Player",
    "TwoHanded",
    "Wielded",
]
