"""
Selenium Session - ISession implementation over a Selenium WebDriver.

The driver is owned by the caller; this adapter only issues queries.
"""

from typing import Any, List, Optional
import logging

from selenium.common.exceptions import (
    InvalidSelectorException,
    NoSuchElementException,
    WebDriverException,
)
from selenium.webdriver.common.by import By

from element_resolver.exceptions import ElementNotFoundError, QueryError
from element_resolver.interfaces.session import IElement, ISession

logger = logging.getLogger(__name__)


class SeleniumElement(IElement):
    """Selenium implementation of IElement."""
    
    def __init__(self, element: Any):
        self._element = element
    
    @property
    def raw(self) -> Any:
        return self._element
    
    def get_attribute(self, name: str) -> Optional[str]:
        return self._element.get_attribute(name)
    
    def text(self) -> str:
        return self._element.text or ""
    
    def __repr__(self) -> str:
        return f"SeleniumElement({self._element!r})"


class SeleniumSession(ISession):
    """
    Selenium implementation of ISession.
    
    Example:
        >>> from selenium import webdriver
        >>> driver = webdriver.Chrome()
        >>> session = SeleniumSession(driver)
        >>> session.find_one("body input[name=email]")
    """
    
    def __init__(self, driver: Any):
        self._driver = driver
    
    @property
    def driver(self) -> Any:
        """The wrapped WebDriver."""
        return self._driver
    
    def find_one(self, selector: str) -> IElement:
        return self._find(By.CSS_SELECTOR, selector)
    
    def find_all(self, selector: str) -> List[IElement]:
        try:
            elements = self._driver.find_elements(By.CSS_SELECTOR, selector)
        except WebDriverException as e:
            raise QueryError(f"Query failed: {e.msg or e}", selector=selector) from e
        return [SeleniumElement(element) for element in elements]
    
    def find_by_id(self, element_id: str) -> IElement:
        return self._find(By.ID, element_id, label=f"#{element_id}")
    
    def _find(self, by: str, value: str, label: Optional[str] = None) -> IElement:
        label = label or value
        try:
            element = self._driver.find_element(by, value)
        # InvalidSelectorException subclassed NoSuchElementException in older
        # Selenium releases, so it must be caught first.
        except InvalidSelectorException as e:
            raise QueryError(f"Invalid selector: {e.msg or e}", selector=label) from e
        except NoSuchElementException as e:
            raise ElementNotFoundError(
                f"No element matches [{label}].", selector=label,
            ) from e
        except WebDriverException as e:
            raise QueryError(f"Query failed: {e.msg or e}", selector=label) from e
        return SeleniumElement(element)
