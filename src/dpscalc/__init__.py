"""OSRS-style combat damage-per-second calculator."""

__version__ = "0.1.0"
