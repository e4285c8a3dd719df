"""Typed index families and their registry."""

from elasticlean.families.deprecate import Deprecate
from elasticlean.families.registry import (
    FamilyRegistry,
    IndexDocument,
    IndexFamily,
    default_registry,
)

__all__ = [
    "Deprecate",
    "FamilyRegistry",
    "IndexDocument",
    "IndexFamily",
    "default_registry",
]
