"""Hit chance and damage-per-second blend.

This is the only floating point step; every roll and max hit fed into it is
an integer computed upstream.
"""
from __future__ import annotations

from dpscalc.core.numeric import SECONDS_PER_TICK, Scalar, Ticks


def hit_rate(accuracy_roll: Scalar, defence_roll: Scalar) -> float:
    """Chance that an attack lands, using the +1 stabilised form."""
    accuracy = int(accuracy_roll)
    defence = int(defence_roll)
    if accuracy > defence:
        return 1.0 - (defence + 2) / (2.0 * (accuracy + 1))
    return accuracy / (2.0 * (defence + 1))


def expected_hit(chance: float, max_hit: Scalar) -> float:
    """Mean damage per attack; damage is uniform over ``[0, max_hit]``."""
    return chance * int(max_hit) / 2.0


def dps(accuracy_roll: Scalar, defence_roll: Scalar, max_hit: Scalar, attack_speed: Ticks) -> float:
    """Expected damage per second."""
    damage = expected_hit(hit_rate(accuracy_roll, defence_roll), max_hit)
    return damage / int(attack_speed) / SECONDS_PER_TICK
