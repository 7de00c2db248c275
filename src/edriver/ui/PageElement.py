# edriver/ui/PageElement.py
"""PageElement.py
==================
Locatable and waitable capability shared by every page object.

Page objects do not inherit from each other. Each element family (content
assist, context menu, tree section, status bar, the editor itself) holds one or
more `PageElement` instances, selected through the `ElementKind` tag whose value
names the CSS selector in the ``[selectors]`` configuration section.

Elements are looked up again on every access: the workbench re-renders freely,
so a held `WebElement` goes stale quickly.
"""

from enum import Enum
from typing import Any, Callable, Optional, Union

from selenium.common.exceptions import StaleElementReferenceException
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support.ui import WebDriverWait


class ElementKind(Enum):
    """Element families, valued by their key in ``config["selectors"]``."""

    EDITOR_GROUP = "editor_group"
    EDITOR = "editor"
    INPUT_AREA = "input_area"
    ACTIVE_TAB = "active_tab"
    STATUS_POSITION = "status_position"
    SUGGEST_WIDGET = "suggest_widget"
    CONTEXT_MENU = "context_menu"
    VIEW_PANE = "view_pane"
    TREE = "tree"


Parent = Union["PageElement", WebElement, None]


class PageElement:
    """Locates one element by CSS selector below a parent and waits on it.

    Args:
        driver: The Selenium driver; also the search root when `parent` is None.
        selector: CSS selector of the element.
        parent: A `PageElement` (re-located on each access), a `WebElement`,
            or None for a document-level lookup.
        timeout: Default explicit-wait timeout in seconds.
        poll_frequency: Polling interval of the explicit waits.
    """

    def __init__(
        self,
        driver: WebDriver,
        selector: str,
        parent: Parent = None,
        timeout: float = 10.0,
        poll_frequency: float = 0.2,
    ):
        self.driver = driver
        self.selector = selector
        self.parent = parent
        self.timeout = timeout
        self.poll_frequency = poll_frequency

    @classmethod
    def of(
        cls, kind: ElementKind, driver: WebDriver, config: dict[str, Any], parent: Parent = None
    ) -> "PageElement":
        """Builds the `PageElement` for `kind` from the configuration."""
        driver_cfg = config.get("driver", {})
        return cls(
            driver,
            config["selectors"][kind.value],
            parent=parent,
            timeout=driver_cfg.get("wait_timeout", 10.0),
            poll_frequency=driver_cfg.get("poll_frequency", 0.2),
        )

    def _search_root(self):
        if isinstance(self.parent, PageElement):
            return self.parent.element
        if self.parent is not None:
            return self.parent
        return self.driver

    @property
    def element(self) -> WebElement:
        """The located element; raises ``NoSuchElementException`` when absent."""
        return self._search_root().find_element(By.CSS_SELECTOR, self.selector)

    def find(self, selector: str) -> WebElement:
        return self.element.find_element(By.CSS_SELECTOR, selector)

    def find_all(self, selector: str) -> list[WebElement]:
        return list(self.element.find_elements(By.CSS_SELECTOR, selector))

    def child(self, selector: str) -> "PageElement":
        """A nested `PageElement` sharing this one's wait settings."""
        return PageElement(self.driver, selector, self, self.timeout, self.poll_frequency)

    # ----- Explicit waits -------
    def wait_until(self, condition: Callable[[Any], Any], timeout: Optional[float] = None) -> Any:
        """Waits until `condition(driver)` is truthy; raises ``TimeoutException``."""
        wait = WebDriverWait(
            self.driver, self.timeout if timeout is None else timeout,
            poll_frequency=self.poll_frequency,
        )
        return wait.until(condition)

    def wait_visible(self, timeout: Optional[float] = None) -> WebElement:
        """Waits until the element exists and is displayed, then returns it."""
        def _visible(_driver):
            element = self.element
            return element if element.is_displayed() else False

        return self.wait_until(_visible, timeout)

    def wait_not_visible(self, element: WebElement, timeout: Optional[float] = None) -> None:
        """Waits until `element` is hidden (or gone from the DOM)."""
        wait = WebDriverWait(
            self.driver, self.timeout if timeout is None else timeout,
            poll_frequency=self.poll_frequency,
            ignored_exceptions=(StaleElementReferenceException,),
        )
        wait.until_not(lambda _driver: element.is_displayed())

    @staticmethod
    def has_class(element: WebElement, name: str) -> bool:
        return name in (element.get_attribute("class") or "").split()
