"""Pattern catalog and selection."""

from .catalog import (
    PatternCatalog,
    PatternDescriptor,
    PatternEntry,
    default_catalog,
    load_catalog,
    select_pattern,
)

__all__ = [
    "PatternCatalog",
    "PatternDescriptor",
    "PatternEntry",
    "default_catalog",
    "load_catalog",
    "select_pattern",
]
