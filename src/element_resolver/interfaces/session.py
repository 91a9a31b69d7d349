"""
Session Interface - Abstract base classes for the page query capability.

The resolver never talks to a browser driver directly. It queries the live
document through an ISession, and receives IElement wrappers back. Driver
adapters (Selenium, Playwright) live in ``element_resolver.sessions``.

Example:
    >>> from element_resolver.sessions import SeleniumSession
    >>> session = SeleniumSession(driver)
    >>> element = session.find_one("body input[name=email]")
    >>> element.get_attribute("value")
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional


class IElement(ABC):
    """
    Abstract interface for a located DOM element.
    
    Wraps a live driver element reference. Only the read-only capabilities
    the resolver needs are part of the contract; callers that want to click
    or type use ``raw`` to reach the driver's own element.
    """

    @property
    @abstractmethod
    def raw(self) -> Any:
        """The underlying driver element."""
        ...

    @abstractmethod
    def get_attribute(self, name: str) -> Optional[str]:
        """
        Get an attribute value from this element.
        
        Args:
            name: The attribute name
            
        Returns:
            The attribute value, or None if not present
        """
        ...

    @abstractmethod
    def text(self) -> str:
        """
        Get the visible text of this element.
        
        Returns:
            The rendered text, as the driver reports it (not trimmed)
        """
        ...


class ISession(ABC):
    """
    Abstract interface for querying a live document by CSS selector.
    
    Every call is a fresh, blocking query. Implementations must not cache
    results between calls.
    """

    @abstractmethod
    def find_one(self, selector: str) -> IElement:
        """
        Find the first element matching a CSS selector.
        
        Args:
            selector: CSS selector
            
        Returns:
            The first matching element
            
        Raises:
            ElementNotFoundError: If nothing matches
            QueryError: If the selector is malformed or the session is gone
        """
        ...

    @abstractmethod
    def find_all(self, selector: str) -> List[IElement]:
        """
        Find every element matching a CSS selector, in document order.
        
        Args:
            selector: CSS selector
            
        Returns:
            Matching elements (possibly empty)
            
        Raises:
            QueryError: If the selector is malformed or the session is gone
        """
        ...

    @abstractmethod
    def find_by_id(self, element_id: str) -> IElement:
        """
        Find an element by its id attribute.
        
        Args:
            element_id: The id, without a leading ``#``
            
        Returns:
            The element with that id
            
        Raises:
            ElementNotFoundError: If no element has that id
            QueryError: If the session is gone
        """
        ...
