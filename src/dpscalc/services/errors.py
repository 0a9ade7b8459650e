"""Service-layer exceptions."""


class LoadoutError(Exception):
    """Raised when a loadout request names definitions that cannot be resolved."""
