"""
Pytest configuration and fixtures.
"""

import os
from typing import Dict, Iterable, List, Optional

import pytest

from element_resolver.exceptions import ElementNotFoundError, QueryError
from element_resolver.interfaces.session import IElement, ISession


class FakeElement(IElement):
    """In-memory element with attributes and visible text."""
    
    def __init__(self, name: str = "", attrs: Optional[dict] = None, text: str = ""):
        self.name = name
        self._attrs = attrs or {}
        self._text = text
    
    @property
    def raw(self):
        return self
    
    def get_attribute(self, name: str) -> Optional[str]:
        return self._attrs.get(name)
    
    def text(self) -> str:
        return self._text
    
    def __repr__(self) -> str:
        return f"FakeElement({self.name!r})"


class FakeSession(ISession):
    """
    In-memory session keyed by the exact (already formatted) selector.
    
    Every query is recorded in ``queries`` as ``(kind, selector)``.
    """
    
    def __init__(
        self,
        elements: Optional[Dict[str, List[FakeElement]]] = None,
        ids: Optional[Dict[str, FakeElement]] = None,
        invalid: Iterable[str] = (),
    ):
        self.elements: Dict[str, List[FakeElement]] = elements or {}
        self.ids: Dict[str, FakeElement] = ids or {}
        self.invalid = set(invalid)
        self.queries: List[tuple] = []
    
    def add(self, selector: str, *elements: FakeElement) -> None:
        self.elements.setdefault(selector, []).extend(elements)
    
    def find_one(self, selector: str) -> IElement:
        self.queries.append(("one", selector))
        self._check(selector)
        matches = self.elements.get(selector)
        if not matches:
            raise ElementNotFoundError(f"No element matches [{selector}].", selector=selector)
        return matches[0]
    
    def find_all(self, selector: str) -> List[IElement]:
        self.queries.append(("all", selector))
        self._check(selector)
        return list(self.elements.get(selector, []))
    
    def find_by_id(self, element_id: str) -> IElement:
        self.queries.append(("id", element_id))
        if element_id not in self.ids:
            raise ElementNotFoundError(
                f"No element matches [#{element_id}].", selector=f"#{element_id}"
            )
        return self.ids[element_id]
    
    def _check(self, selector: str) -> None:
        if selector in self.invalid:
            raise QueryError("Invalid selector", selector=selector)


@pytest.fixture
def session():
    """Provide an empty fake session."""
    return FakeSession()


@pytest.fixture
def resolver(session):
    """Provide a resolver over the fake session with the default prefix."""
    from element_resolver import ElementResolver
    
    return ElementResolver(session)


@pytest.fixture
def settings():
    """Provide test settings."""
    from element_resolver.config import Settings, ResolverSettings
    
    return Settings(
        resolver=ResolverSettings(
            prefix=" #app ",
            aliases={"@email": "input[name=email]", "@save": "#save-button"},
        ),
    )


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Keep the global settings singleton and env vars out of each test."""
    from element_resolver.config import reset_settings
    
    for name in list(os.environ):
        if name.upper().startswith("ELEMENT_RESOLVER__"):
            monkeypatch.delenv(name)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def make_element():
    """Provide the FakeElement constructor."""
    return FakeElement
