"""
Session-related exceptions.
"""

from element_resolver.exceptions.base import ElementResolverError


class SessionError(ElementResolverError):
    """Base exception for failures reported by the page session."""
    pass


class QueryError(SessionError):
    """
    A query could not be executed.
    
    Raised by session adapters when the driver rejects a selector as
    malformed, or when the session is no longer connected.
    """
    
    def __init__(self, message: str, selector: str | None = None):
        super().__init__(message, {"selector": selector})
        self.selector = selector
