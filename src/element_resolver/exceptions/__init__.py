"""
Exceptions module - Custom exception hierarchy.

This module defines all custom exceptions used throughout Element Resolver,
separating configuration mistakes, session query failures, and resolution
failures.
"""

from element_resolver.exceptions.base import (
    ElementResolverError,
    ConfigurationError,
)
from element_resolver.exceptions.session import (
    SessionError,
    QueryError,
)
from element_resolver.exceptions.resolution import (
    ResolutionError,
    ElementNotFoundError,
    ButtonNotFoundError,
    EmptySelectorListError,
)

__all__ = [
    # Base exceptions
    "ElementResolverError",
    "ConfigurationError",
    # Session exceptions
    "SessionError",
    "QueryError",
    # Resolution exceptions
    "ResolutionError",
    "ElementNotFoundError",
    "ButtonNotFoundError",
    "EmptySelectorListError",
]
