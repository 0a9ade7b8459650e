"""Fixed-point integer quantities used by the combat formulas.

Every quantity wraps a plain ``int``. The wrappers are deliberately not
interchangeable: adding ``Ticks`` to a ``Scalar`` is a ``TypeError``.
Multiplication by a ``Fraction`` or ``Percentage`` and division between
scalars truncate toward zero, which is how the game itself rounds.
"""
from __future__ import annotations

from dataclasses import dataclass


def truncating_div(dividend: int, divisor: int) -> int:
    """Divide two integers, rounding the quotient toward zero."""
    if divisor == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        return -quotient
    return quotient


@dataclass(frozen=True, slots=True)
class Fraction:
    """Multiplicative modifier ``dividend / divisor``."""

    dividend: int
    divisor: int

    def __post_init__(self) -> None:
        if self.divisor == 0:
            raise ValueError("Fraction divisor must be non-zero.")

    def __mul__(self, other: object) -> Scalar:
        if isinstance(other, Scalar):
            return other * self
        return NotImplemented


@dataclass(frozen=True, slots=True, order=True)
class Percentage:
    """Additive percentage bonus; ``Percentage(25)`` scales a scalar by 125/100."""

    value: int = 0

    def __add__(self, other: object) -> Percentage:
        if isinstance(other, Percentage):
            return Percentage(self.value + other.value)
        return NotImplemented

    def __mul__(self, other: object) -> Scalar:
        if isinstance(other, Scalar):
            return other * self
        return NotImplemented

    def __int__(self) -> int:
        return self.value


@dataclass(frozen=True, slots=True, order=True)
class Scalar:
    """Combat stat magnitude (levels, bonuses, rolls, max hits)."""

    value: int = 0

    @classmethod
    def from_tiles(cls, tiles: Tiles) -> Scalar:
        return cls(int(tiles))

    def __add__(self, other: object) -> Scalar:
        if isinstance(other, Scalar):
            return Scalar(self.value + other.value)
        return NotImplemented

    def __sub__(self, other: object) -> Scalar:
        if isinstance(other, Scalar):
            return Scalar(self.value - other.value)
        return NotImplemented

    def __neg__(self) -> Scalar:
        return Scalar(-self.value)

    def __mul__(self, other: object) -> Scalar:
        if isinstance(other, Scalar):
            return Scalar(self.value * other.value)
        if isinstance(other, Fraction):
            return Scalar(truncating_div(self.value * other.dividend, other.divisor))
        if isinstance(other, Percentage):
            return Scalar(truncating_div(self.value * (100 + other.value), 100))
        return NotImplemented

    def __floordiv__(self, other: object) -> Scalar:
        # Truncates toward zero, unlike int.__floordiv__.
        if isinstance(other, Scalar):
            return Scalar(truncating_div(self.value, other.value))
        return NotImplemented

    def __int__(self) -> int:
        return self.value


@dataclass(frozen=True, slots=True, order=True)
class Tiles:
    """Map distance."""

    value: int = 0

    def __add__(self, other: object) -> Tiles:
        if isinstance(other, Tiles):
            return Tiles(self.value + other.value)
        return NotImplemented

    def __int__(self) -> int:
        return self.value


@dataclass(frozen=True, slots=True, order=True)
class Ticks:
    """Game time; one tick lasts ``SECONDS_PER_TICK`` seconds."""

    value: int = 0

    def __add__(self, other: object) -> Ticks:
        if isinstance(other, Ticks):
            return Ticks(self.value + other.value)
        return NotImplemented

    def __sub__(self, other: object) -> Ticks:
        if isinstance(other, Ticks):
            return Ticks(self.value - other.value)
        return NotImplemented

    def __int__(self) -> int:
        return self.value


SECONDS_PER_TICK = 0.6

__all__ = [
    "Fraction",
    "Percentage",
    "Scalar",
    "SECONDS_PER_TICK",
    "Ticks",
    "Tiles",
    "truncating_div",
]
