# edriver/ui/ContextMenu.py
"""ContextMenu.py
==================
Page object for the editor context menu, used to reach actions that have no
reliable default chord (e.g. "Format Document").
"""

import logging
from typing import TYPE_CHECKING

from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webelement import WebElement

from edriver.ui.PageElement import ElementKind, PageElement
from edriver.utils.errors import MenuItemNotFoundError


if TYPE_CHECKING:
    from edriver.core.TextEditor import TextEditor


logger = logging.getLogger("edriver")


class ContextMenu:
    """Context menu opened from a `TextEditor`."""

    def __init__(self, editor: "TextEditor"):
        self.editor = editor
        self.selectors = editor.config["selectors"]
        self.root = PageElement.of(ElementKind.CONTEXT_MENU, editor.driver, editor.config)

    def wait(self) -> "ContextMenu":
        self.root.wait_visible()
        return self

    def get_items(self) -> list["ContextMenuItem"]:
        items = []
        for row in self.root.find_all(self.selectors["menu_item"]):
            labels = row.find_elements(By.CSS_SELECTOR, self.selectors["menu_label"])
            # separators carry no label
            if labels:
                items.append(ContextMenuItem(labels[0].text, row))
        return items

    def get_item(self, label: str) -> "ContextMenuItem":
        for item in self.get_items():
            if item.label == label:
                return item
        raise MenuItemNotFoundError(label)

    def select(self, label: str) -> None:
        """Clicks the item labelled `label`.

        Raises:
            MenuItemNotFoundError: The menu has no such item.
        """
        self.get_item(label).select()
        logger.debug("Selected context menu item %r", label)

    def close(self) -> None:
        self.editor.keys.press(self.root.element, "close_menu")


class ContextMenuItem:
    def __init__(self, label: str, element: WebElement):
        self.label = label
        self.element = element

    def select(self) -> None:
        self.element.click()
