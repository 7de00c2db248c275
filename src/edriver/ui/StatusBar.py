# edriver/ui/StatusBar.py
"""StatusBar.py
==================
Page object for the workbench status bar. Only the cursor-position entry
("Ln 4, Col 2") is read; interpreting it is the job of `StatusReader`.
"""

from typing import Any

from selenium.webdriver.remote.webdriver import WebDriver

from edriver.ui.PageElement import ElementKind, PageElement


class StatusBar:
    """Status bar of the workbench window."""

    def __init__(self, driver: WebDriver, config: dict[str, Any]):
        self.position = PageElement.of(ElementKind.STATUS_POSITION, driver, config)

    def get_current_position(self) -> str:
        """Raw text of the cursor-position entry."""
        return self.position.element.text
