"""
Engine module - element resolution.
"""

from element_resolver.engine.aliases import AliasTable
from element_resolver.engine.element_resolver import (
    ElementResolver,
    FieldKind,
    ButtonStrategy,
    field_candidates,
)

__all__ = [
    "AliasTable",
    "ElementResolver",
    "FieldKind",
    "ButtonStrategy",
    "field_candidates",
]
