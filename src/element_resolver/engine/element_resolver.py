"""
Element Resolver - turn a field or button name into a live element.

Test steps name things the way a person would ("email", "Save", "@login")
and the resolver decides which element on the page is meant. Each kind of
form control has an ordered list of candidate selectors; the first one that
matches wins.

Strategies for fields (tried in order):
1. ID - ``#name`` is looked up by id, bypassing prefix and aliases
2. RAW - the name itself, treated as a selector
3. NAME - a kind-specific ``[name=...]`` selector

Strategies for buttons (tried in order):
1. ID - ``#name`` by id
2. SELECTOR - the name itself, treated as a selector
3. NAME - ``input[type=submit][name=...]`` then ``button[name=...]``
4. VALUE - first ``input[type=submit]`` whose value equals the name
5. TEXT - first ``button`` whose visible text contains the name

Every selector except the id lookup is scoped under the prefix after alias
substitution (see ``format``).
"""

from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple, TYPE_CHECKING
import logging

from element_resolver.engine.aliases import AliasSource, AliasTable
from element_resolver.exceptions import (
    ButtonNotFoundError,
    ElementNotFoundError,
    EmptySelectorListError,
    QueryError,
)
from element_resolver.interfaces.session import IElement, ISession
from element_resolver.sessions import wrap_driver

if TYPE_CHECKING:
    from element_resolver.config.settings import Settings

logger = logging.getLogger(__name__)

# Failures a probe may absorb. Anything else is a bug and propagates.
LOOKUP_FAILURES = (ElementNotFoundError, QueryError)


class FieldKind(Enum):
    """Form control kinds with their own candidate selectors."""
    TYPING = "typing"
    SELECTION = "selection"
    RADIO = "radio"
    CHECKING = "checking"
    ATTACHMENT = "attachment"


class ButtonStrategy(Enum):
    """Which strategy located a button."""
    ID = "id"
    SELECTOR = "selector"
    NAME = "name"
    VALUE = "value"
    TEXT = "text"


FIELD_CANDIDATES: Dict[FieldKind, Tuple[str, ...]] = {
    FieldKind.TYPING: ("{field}", "input[name={field}]", "textarea[name={field}]"),
    FieldKind.SELECTION: ("{field}", "select[name={field}]"),
    FieldKind.RADIO: ("{field}", "input[type=radio][name={field}][value={value}]"),
    FieldKind.CHECKING: ("{field}", "input[type=checkbox][name={field}]"),
    FieldKind.ATTACHMENT: ("{field}", "input[type=file][name={field}]"),
}


def field_candidates(kind: FieldKind, field: str, value: Optional[str] = None) -> List[str]:
    """
    Build the ordered candidate selectors for a field.
    
    Args:
        kind: The form control kind
        field: The field name as the test author wrote it
        value: Radio button value (only used by FieldKind.RADIO)
        
    Returns:
        Candidate selectors, most specific first
    """
    value = "" if value is None else value
    return [template.format(field=field, value=value) for template in FIELD_CANDIDATES[kind]]


class ElementResolver:
    """
    Resolve human-friendly field and button names to page elements.
    
    A resolver is built once per page context. Aliases are configured once
    with ``page_elements`` before any resolution; after that every call is a
    fresh query against the live document. Nothing is cached.
    
    Every ``resolve_for_*`` method rejects an empty name before probing.
    Formatting ``""`` would leave only the prefix, which matches the scope
    element itself (``<body>`` by default); older Dusk-style resolvers
    returned that element, this one raises instead.
    
    Attributes:
        session: The page query interface
        prefix: CSS scope for every formatted selector ("" for none)
        aliases: Ordered alias table applied before scoping
    
    Example:
        >>> resolver = ElementResolver(SeleniumSession(driver), prefix="#signup")
        >>> resolver.page_elements({"@email": "input[name=email]"})
        >>> resolver.resolve_for_typing("@email").raw.send_keys("me@example.com")
        >>> resolver.resolve_for_button_press("Create account").raw.click()
    """
    
    def __init__(self, session: Any, prefix: Optional[str] = "body"):
        """
        Initialize the resolver.
        
        Args:
            session: An ISession, or a raw driver to wrap with the configured engine
            prefix: CSS scope; surrounding whitespace is stripped
        """
        self.session: ISession = wrap_driver(session)
        self.prefix: str = (prefix or "").strip()
        self.aliases: AliasTable = AliasTable()
    
    @classmethod
    def from_settings(
        cls,
        session: Any,
        settings: Optional["Settings"] = None,
    ) -> "ElementResolver":
        """
        Build a resolver from the ``resolver`` settings block.
        
        Args:
            session: An ISession or raw driver
            settings: Settings to use; defaults to the global settings
            
        Returns:
            A resolver with prefix and aliases from configuration
        """
        if settings is None:
            from element_resolver.config import get_settings
            settings = get_settings()
        
        config = settings.resolver
        resolver = cls(wrap_driver(session, config.engine), prefix=config.prefix)
        return resolver.page_elements(config.aliases)
    
    def page_elements(self, aliases: AliasSource) -> "ElementResolver":
        """
        Set the shortcut names the resolver substitutes into selectors.
        
        Args:
            aliases: Mapping or (name, selector) pairs, in substitution order
            
        Returns:
            This resolver, for chaining
        """
        self.aliases = AliasTable(aliases)
        logger.debug(f"Configured {len(self.aliases)} page element aliases")
        return self
    
    # ==================== Field Resolution ====================
    
    def resolve_for_typing(self, field: str) -> IElement:
        """Resolve a text input or textarea."""
        return self._resolve_field(FieldKind.TYPING, field)
    
    def resolve_for_selection(self, field: str) -> IElement:
        """Resolve a select box."""
        return self._resolve_field(FieldKind.SELECTION, field)
    
    def resolve_for_radio_selection(self, field: str, value: Optional[str] = None) -> IElement:
        """Resolve the radio button of group ``field`` carrying ``value``."""
        return self._resolve_field(FieldKind.RADIO, field, value)
    
    def resolve_for_checking(self, field: str) -> IElement:
        """Resolve a checkbox."""
        return self._resolve_field(FieldKind.CHECKING, field)
    
    def resolve_for_attachment(self, field: str) -> IElement:
        """Resolve a file input."""
        return self._resolve_field(FieldKind.ATTACHMENT, field)
    
    def _resolve_field(
        self,
        kind: FieldKind,
        field: str,
        value: Optional[str] = None,
    ) -> IElement:
        """
        Resolve a field of ``kind`` by id shortcut or ordered candidates.
        
        Raises:
            ElementNotFoundError: If ``field`` is empty (deliberately, instead
                of matching the bare prefix) or every candidate missed
        """
        if not field:
            raise ElementNotFoundError(
                f"Unable to locate {kind.value} field: no field name given.",
                selector=field,
                attempted=[],
            )
        
        if field.startswith("#"):
            return self._find_by_id(field)
        
        try:
            return self.first_or_fail(field_candidates(kind, field, value))
        except ElementNotFoundError as e:
            raise ElementNotFoundError(
                f"Unable to locate {kind.value} field [{field}].",
                selector=field,
                attempted=e.attempted,
            ) from e
    
    def _find_by_id(self, field: str) -> IElement:
        # Raw session lookup: no prefix, no aliases
        element = self.session.find_by_id(field[1:])
        logger.debug(f"Resolved [{field}] by id")
        return element
    
    # ==================== Button Resolution ====================
    
    def resolve_for_button_press(self, button: str) -> IElement:
        """
        Resolve a button by selector, name, submit value, or visible text.
        
        Exact selector and name matches win over submit values, which win
        over free-text matches.
        
        Args:
            button: Selector, ``#id``, name, submit value, or text fragment
            
        Returns:
            The matching element
            
        Raises:
            ButtonNotFoundError: If no strategy matched, or ``button`` is
                empty. An empty name is rejected before probing on purpose:
                it would otherwise format to the bare prefix and return the
                scope element.
        """
        if not button:
            raise ButtonNotFoundError(button)
        
        if button.startswith("#"):
            return self._find_by_id(button)
        
        attempted: List[str] = []
        probes = (
            (ButtonStrategy.SELECTOR, button),
            (ButtonStrategy.NAME, f"input[type=submit][name={button}]"),
            (ButtonStrategy.NAME, f"button[name={button}]"),
        )
        for strategy, selector in probes:
            attempted.append(self.format(selector))
            element = self.find(selector)
            if element is not None:
                return self._button_found(button, strategy, element)
        
        attempted.append(self.format("input[type=submit]"))
        for element in self.all("input[type=submit]"):
            if element.get_attribute("value") == button:
                return self._button_found(button, ButtonStrategy.VALUE, element)
        
        attempted.append(self.format("button"))
        for element in self.all("button"):
            if button in element.text():
                return self._button_found(button, ButtonStrategy.TEXT, element)
        
        raise ButtonNotFoundError(button, attempted)
    
    def _button_found(self, button: str, strategy: ButtonStrategy, element: IElement) -> IElement:
        logger.debug(f"Resolved button [{button}] via {strategy.value}")
        return element
    
    # ==================== Probing Primitives ====================
    
    def find(self, selector: str) -> Optional[IElement]:
        """
        Find an element by the given selector or return None.
        
        Lookup failures (no match, malformed selector) are absorbed; use
        ``find_or_fail`` to see them.
        """
        try:
            return self.find_or_fail(selector)
        except LOOKUP_FAILURES as e:
            logger.debug(f"Probe missed [{selector}]: {e.message}")
            return None
    
    def first_or_fail(self, selectors: Iterable[str]) -> IElement:
        """
        Get the first element matching any of the given selectors.
        
        Args:
            selectors: Candidate selectors, tried in order
            
        Returns:
            The element matched by the earliest successful selector
            
        Raises:
            EmptySelectorListError: If no selectors were given
            ElementNotFoundError: If every selector missed; ``attempted``
                lists each formatted selector, and the last underlying
                failure is chained as ``__cause__``
        """
        selectors = list(selectors)
        if not selectors:
            raise EmptySelectorListError()
        
        attempted: List[str] = []
        last_error: Optional[Exception] = None
        for selector in selectors:
            attempted.append(self.format(selector))
            try:
                return self.find_or_fail(selector)
            except LOOKUP_FAILURES as e:
                logger.debug(f"Candidate missed [{selector}]: {e.message}")
                last_error = e
        
        raise ElementNotFoundError(
            f"Unable to locate element using any of {attempted}.",
            selector=selectors[0],
            attempted=attempted,
        ) from last_error
    
    def find_or_fail(self, selector: str) -> IElement:
        """
        Find an element by the given selector or raise.
        
        Raises:
            ElementNotFoundError: If nothing matches
            QueryError: If the session rejects the query
        """
        return self.session.find_one(self.format(selector))
    
    def all(self, selector: str) -> List[IElement]:
        """Find the elements by the given selector or return an empty list."""
        try:
            return self.session.find_all(self.format(selector))
        except LOOKUP_FAILURES as e:
            logger.debug(f"Scan failed [{selector}]: {e.message}")
            return []
    
    def format(self, selector: str) -> str:
        """
        Format the given selector with the current aliases and prefix.
        
        >>> ElementResolver(session, prefix="body").format("foo")
        'body foo'
        """
        return f"{self.prefix} {self.aliases.apply(selector)}".strip()
    
    def __repr__(self) -> str:
        return f"ElementResolver(prefix={self.prefix!r}, aliases={len(self.aliases)})"
