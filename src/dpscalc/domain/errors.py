"""Domain-level exceptions raised by the combat engine."""


class CombatError(Exception):
    """Base exception for the combat engine."""


class InvalidStyleIndexError(CombatError, IndexError):
    """Raised when a combat style index is out of range for the wielded weapon."""


class UnsupportedStyleCombinationError(CombatError, ValueError):
    """Raised when a style type and weapon style pairing has no invisible boost."""


class UnimplementedStyleError(CombatError):
    """Raised when a formula is dispatched for a style it cannot resolve."""
