"""
Playwright Session - ISession implementation over a Playwright sync Page.

Only the synchronous API is supported; resolution is blocking by contract.
"""

from typing import Any, List, Optional
import logging

from playwright.sync_api import Error as PlaywrightError

from element_resolver.exceptions import ElementNotFoundError, QueryError
from element_resolver.interfaces.session import IElement, ISession

logger = logging.getLogger(__name__)


def css_string(value: str) -> str:
    """
    Quote ``value`` as a CSS string literal.
    
    Quotes and backslashes are backslash-escaped; control characters use
    CSS hex escapes (``\\9 `` for a tab), since CSS reads ``\\t`` as ``t``.
    """
    escaped = []
    for char in value:
        if char in "\"\\":
            escaped.append("\\" + char)
        elif char < " " or char == "\x7f":
            escaped.append(f"\\{ord(char):x} ")
        else:
            escaped.append(char)
    return '"' + "".join(escaped) + '"'


class PlaywrightElement(IElement):
    """Playwright implementation of IElement."""
    
    def __init__(self, element: Any):
        self._element = element
    
    @property
    def raw(self) -> Any:
        return self._element
    
    def get_attribute(self, name: str) -> Optional[str]:
        return self._element.get_attribute(name)
    
    def text(self) -> str:
        return self._element.inner_text()
    
    def __repr__(self) -> str:
        return f"PlaywrightElement({self._element!r})"


class PlaywrightSession(ISession):
    """
    Playwright implementation of ISession.
    
    Example:
        >>> from playwright.sync_api import sync_playwright
        >>> with sync_playwright() as p:
        ...     page = p.chromium.launch().new_page()
        ...     session = PlaywrightSession(page)
        ...     session.find_one("body button")
    """
    
    def __init__(self, page: Any):
        self._page = page
    
    @property
    def page(self) -> Any:
        """The wrapped Page."""
        return self._page
    
    def find_one(self, selector: str) -> IElement:
        return self._find(selector, label=selector)
    
    def find_all(self, selector: str) -> List[IElement]:
        try:
            handles = self._page.query_selector_all(selector)
        except PlaywrightError as e:
            raise QueryError(f"Query failed: {e.message}", selector=selector) from e
        return [PlaywrightElement(handle) for handle in handles]
    
    def find_by_id(self, element_id: str) -> IElement:
        # Attribute form avoids CSS-escaping ids that start with a digit etc.
        return self._find(f"[id={css_string(element_id)}]", label=f"#{element_id}")
    
    def _find(self, selector: str, label: str) -> IElement:
        try:
            handle = self._page.query_selector(selector)
        except PlaywrightError as e:
            raise QueryError(f"Query failed: {e.message}", selector=label) from e
        if handle is None:
            raise ElementNotFoundError(f"No element matches [{label}].", selector=label)
        return PlaywrightElement(handle)
