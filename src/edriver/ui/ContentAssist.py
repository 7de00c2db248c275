# edriver/ui/ContentAssist.py
"""ContentAssist.py
====================
Page objects for the editor's suggestion popup ("content assist").

The popup first shows a transient loading message; rows are only meaningful
once that message is hidden, so every lookup waits for it first.
"""

import logging
from typing import TYPE_CHECKING

from selenium.common.exceptions import NoSuchElementException
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webelement import WebElement

from edriver.ui.PageElement import ElementKind, PageElement


if TYPE_CHECKING:
    from edriver.core.TextEditor import TextEditor


logger = logging.getLogger("edriver")


class ContentAssist:
    """The suggestion list of a `TextEditor`."""

    def __init__(self, editor: "TextEditor"):
        self.editor = editor
        self.selectors = editor.config["selectors"]
        self.root = PageElement.of(
            ElementKind.SUGGEST_WIDGET, editor.driver, editor.config, parent=editor.root
        )

    def wait(self) -> "ContentAssist":
        """Waits until the popup is displayed."""
        self.root.wait_visible()
        return self

    def is_displayed(self) -> bool:
        return self.root.element.is_displayed()

    def _wait_loaded(self) -> None:
        message = self.root.find(self.selectors["suggest_message"])
        self.root.wait_not_visible(message)

    def _rows(self) -> list[tuple[str, WebElement]]:
        rows = []
        for row in self.root.find_all(self.selectors["suggest_row"]):
            label = row.find_element(By.CSS_SELECTOR, self.selectors["suggest_label"]).text
            rows.append((label, row))
        return rows

    def get_item(self, name: str) -> "ContentAssistItem":
        """Returns the suggestion whose label is exactly `name`.

        Raises:
            NoSuchElementException: No suggestion carries that label.
            TimeoutException: The loading message never disappeared.
        """
        self._wait_loaded()
        for label, row in self._rows():
            if label == name:
                return ContentAssistItem(label, row, self)
        raise NoSuchElementException(f"No content assist item labelled {name!r}")

    def get_items(self) -> list["ContentAssistItem"]:
        """Returns every suggestion currently listed, in display order."""
        self._wait_loaded()
        items = [ContentAssistItem(label, row, self) for label, row in self._rows()]
        logger.debug("Content assist lists %d items", len(items))
        return items


class ContentAssistItem:
    """One row of the suggestion list."""

    def __init__(self, label: str, element: WebElement, parent: ContentAssist):
        self.label = label
        self.element = element
        self.parent = parent

    def select(self) -> None:
        """Clicks the row, inserting the suggestion into the editor."""
        self.element.click()

    def __repr__(self) -> str:
        return f"ContentAssistItem({self.label!r})"
