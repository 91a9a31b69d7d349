"""
Interfaces module - Abstract base classes for pluggable components.

This module defines the contract that driver adapters must implement
for the resolver to query a page through them.
"""

from element_resolver.interfaces.session import (
    IElement,
    ISession,
)

__all__ = [
    "IElement",
    "ISession",
]
