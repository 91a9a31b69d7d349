"""
Element Resolver - find form fields and buttons the way a test author names them.

Given a human-friendly name such as ``"email"``, ``"@login"`` or
``"Save Changes"``, the resolver works out which element on the live page
is meant, using prioritized CSS selector strategies, a scoping prefix, and
an author-defined alias table.

Example:
    >>> from element_resolver import ElementResolver
    >>> from element_resolver.sessions.selenium_session import SeleniumSession
    >>> resolver = ElementResolver(SeleniumSession(driver))
    >>> resolver.resolve_for_typing("email").raw.send_keys("me@example.com")
"""

__version__ = "0.1.0"

# Public API exports
from element_resolver.engine.aliases import AliasTable
from element_resolver.engine.element_resolver import ElementResolver
from element_resolver.config.settings import Settings
from element_resolver.interfaces.session import IElement, ISession

__all__ = [
    "AliasTable",
    "ElementResolver",
    "Settings",
    "IElement",
    "ISession",
    "__version__",
]
