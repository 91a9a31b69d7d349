"""
Base exceptions for Element Resolver.
"""


class ElementResolverError(Exception):
    """
    Base exception for all Element Resolver errors.
    
    All custom exceptions inherit from this class, making it easy
    to catch any error from the library.
    
    Attributes:
        message: Human-readable error message
        details: Optional additional error details
    """
    
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
    
    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ConfigurationError(ElementResolverError):
    """
    Error in configuration.
    
    Raised for invalid settings, unreadable config files, or malformed
    alias tables.
    """
    pass
