"""Errors raised while building behavior trees.

All of them point at a defect in the pattern catalog or the tables that
back it, never at bad runtime input, so none are meant to be retried.
"""
from typing import Any


class FormulationError(Exception):
    """Base class for barrage errors."""


class UnhandledPattern(FormulationError):
    def __init__(self, pattern: Any) -> None:
        self.pattern = pattern
        super().__init__(f"Unhandled pattern: {pattern}")


class UnknownRudder(FormulationError):
    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Unknown rudder: {token}")


class CatalogError(FormulationError, ValueError):
    """Malformed pattern catalog data."""
