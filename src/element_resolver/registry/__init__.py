"""
Registry module - Driver adapter registration and discovery.
"""

from element_resolver.registry.registry import (
    SessionRegistry,
    register_session,
    get_session,
)

__all__ = [
    "SessionRegistry",
    "register_session",
    "get_session",
]
