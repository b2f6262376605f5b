"""Procedural bullet-pattern formulation for a shooter's emitters."""

from .errors import CatalogError, FormulationError, UnhandledPattern, UnknownRudder
from .formulate import Formulation, Formulator, GenerationState, formulate

__all__ = [
    "CatalogError",
    "FormulationError",
    "Formulation",
    "Formulator",
    "GenerationState",
    "UnhandledPattern",
    "UnknownRudder",
    "formulate",
]
