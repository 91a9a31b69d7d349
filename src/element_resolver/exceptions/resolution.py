"""
Resolution exceptions.

These are the hard failures a test step aborts on: the resolver exhausted
every candidate and found nothing.
"""

from typing import List, Optional, Sequence

from element_resolver.exceptions.base import ElementResolverError


class ResolutionError(ElementResolverError):
    """Base exception for element resolution failures."""
    pass


class ElementNotFoundError(ResolutionError):
    """
    Element not found on the page.
    
    Raised by sessions when a single-element query matches nothing, and by
    the resolver when every candidate selector for a field misses.
    
    Attributes:
        selector: The selector or field name that was being resolved
        attempted: Every formatted selector that was tried, in order
    """
    
    def __init__(
        self,
        message: str,
        selector: str,
        attempted: Optional[Sequence[str]] = None,
    ):
        self.selector = selector
        self.attempted: List[str] = [selector] if attempted is None else list(attempted)
        super().__init__(message, {"selector": selector, "attempted": self.attempted})


class ButtonNotFoundError(ResolutionError):
    """
    No strategy located the requested button.
    
    Attributes:
        button: The button name, selector, value or text that was searched for
        attempted: Selectors probed before the value and text scans
    """
    
    def __init__(self, button: str, attempted: Optional[Sequence[str]] = None):
        self.button = button
        self.attempted: List[str] = list(attempted or [])
        super().__init__(
            f"Unable to locate button [{button}].",
            {"attempted": self.attempted} if self.attempted else None,
        )


class EmptySelectorListError(ResolutionError, ValueError):
    """Raised when a candidate lookup is asked to try zero selectors."""
    
    def __init__(self, message: str = "No selectors were given to try."):
        super().__init__(message)
