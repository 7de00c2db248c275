# edriver/ui/TreeSection.py
"""TreeSection.py
==================
Page object for a tree view section of the side bar, such as the views
contributed by extensions. A section is a collapsible pane with a header and a
tree of rows; each row carries an ``aria-level`` (1 for top-level rows).
"""

import logging
from typing import Any, Optional

from selenium.common.exceptions import NoSuchElementException
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement

from edriver.ui.KeyBinder import KeyBinder
from edriver.ui.PageElement import ElementKind, PageElement


logger = logging.getLogger("edriver")


class TreeSection:
    """One collapsible tree pane.

    Args:
        driver: The Selenium driver.
        element: The pane element.
        config: Configuration holding the ``[selectors]`` section.
    """

    def __init__(self, driver: WebDriver, element: WebElement, config: dict[str, Any]):
        self.driver = driver
        self.element = element
        self.config = config
        self.selectors = config["selectors"]
        self.tree = PageElement.of(ElementKind.TREE, driver, config, parent=element)
        self.keys = KeyBinder(config)

    @classmethod
    def find_section(cls, driver: WebDriver, title: str, config: dict[str, Any]) -> "TreeSection":
        """Locates the pane whose header title is `title`.

        Raises:
            NoSuchElementException: No visible pane has that title.
        """
        selectors = config["selectors"]
        for pane in driver.find_elements(By.CSS_SELECTOR, selectors["view_pane"]):
            header = pane.find_element(By.CSS_SELECTOR, selectors["pane_title"])
            if header.text.strip().lower() == title.strip().lower():
                return cls(driver, pane, config)
        raise NoSuchElementException(f"No view section titled {title!r}")

    def _header(self) -> WebElement:
        return self.element.find_element(By.CSS_SELECTOR, self.selectors["pane_header"])

    def is_expanded(self) -> bool:
        return self._header().get_attribute("aria-expanded") == "true"

    def expand(self) -> None:
        """Opens the pane if collapsed and waits for its tree to show."""
        if not self.is_expanded():
            self._header().click()
            self.tree.wait_visible()

    def get_visible_items(self) -> list["TreeItem"]:
        """Items for every row currently rendered in the tree."""
        items = []
        for row in self.tree.find_all(self.selectors["tree_row"]):
            items.append(TreeItem.from_row(row, self.selectors["tree_label"]))
        return items

    def find_item(self, label: str, max_level: int = 0) -> Optional["TreeItem"]:
        """Finds the first row whose label contains `label`.

        Args:
            label: Text to look for in the row labels.
            max_level: When 1 or more, rows nested deeper than this level are
                ignored.

        Returns:
            The matching item, or None when no row qualifies.
        """
        self.expand()
        self.keys.press(self.tree.element, "tree_home")
        for row in self.tree.find_all(self.selectors["tree_row"]):
            item = TreeItem.from_row(row, self.selectors["tree_label"])
            if label not in item.label:
                continue
            if max_level < 1 or item.level <= max_level:
                return item
        logger.debug(f"Tree item {label!r} not found (max_level={max_level})")
        return None


class TreeItem:
    """One row of a tree section."""

    def __init__(self, label: str, level: int, element: WebElement):
        self.label = label
        self.level = level
        self.element = element

    @classmethod
    def from_row(cls, row: WebElement, label_selector: str) -> "TreeItem":
        label = row.find_element(By.CSS_SELECTOR, label_selector).text
        level = int(row.get_attribute("aria-level") or 1)
        return cls(label, level, row)

    def select(self) -> None:
        self.element.click()

    def __repr__(self) -> str:
        return f"TreeItem({self.label!r}, level={self.level})"
