"""
Sessions module - Driver adapters implementing ISession.

Adapters are registered lazily: importing this module does not import
Selenium or Playwright.
"""

from typing import Any, Optional

from element_resolver.interfaces.session import ISession
from element_resolver.registry import SessionRegistry

__all__ = [
    "register_builtin_sessions",
    "wrap_driver",
]


def register_builtin_sessions() -> None:
    """Register the bundled driver adapters with the registry."""
    def selenium_factory():
        from element_resolver.sessions.selenium_session import SeleniumSession
        return SeleniumSession
    
    def playwright_factory():
        from element_resolver.sessions.playwright_session import PlaywrightSession
        return PlaywrightSession
    
    SessionRegistry.register_session_factory("selenium", selenium_factory)
    SessionRegistry.register_session_factory("playwright", playwright_factory)


def wrap_driver(driver: Any, engine: Optional[str] = None) -> ISession:
    """
    Wrap a driver object (WebDriver, Page) in the matching ISession.
    
    Args:
        driver: The live driver object; already an ISession is returned as-is
        engine: Registered engine name; defaults to the configured engine
        
    Returns:
        An ISession querying through ``driver``
    """
    if isinstance(driver, ISession):
        return driver
    
    if engine is None:
        from element_resolver.config import get_settings
        engine = get_settings().resolver.engine
    
    if engine not in SessionRegistry.list_sessions():
        register_builtin_sessions()
    
    return SessionRegistry.get_session(engine)(driver)


# Auto-register on import
register_builtin_sessions()
