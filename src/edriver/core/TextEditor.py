# edriver/core/TextEditor.py
"""TextEditor Module
===================
Page object for the active text editor of a Monaco-based workbench (VS Code and
its relatives), driven through Selenium.

The editor widget offers no API for its contents or its cursor. `TextEditor`
composes the pieces that infer and change that state from the outside:

- `TextAccessor` – buffer contents through clipboard round-trips.
- `StatusReader` – cursor coordinates parsed from the status bar.
- `CursorNavigator` – arrow-key navigation with per-press verification.
- `ContentAssist` / `ContextMenu` – the suggestion popup and the context menu.

Concurrency:
    One logical thread per editor session. Every method is a sequential chain of
    "act, then observe" steps and relies on the system clipboard not being used
    by anything else meanwhile. Waits time out according to the ``[driver]``
    configuration; the resulting ``TimeoutException`` propagates unchanged.

Example:
    >>> editor = TextEditor(driver)
    >>> editor.set_text("def f():\\n    return 1\\n")
    >>> editor.type_text(2, 13, "0")
    >>> editor.get_text_at_line(2)
    '    return 10'
"""

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from selenium.webdriver.remote.webdriver import WebDriver

from edriver.core.CursorNavigator import CursorNavigator
from edriver.core.StatusReader import Coordinate, StatusReader
from edriver.core.TextAccessor import TextAccessor
from edriver.integrations.ClipboardBridge import ClipboardBridge
from edriver.ui.ContentAssist import ContentAssist
from edriver.ui.ContextMenu import ContextMenu
from edriver.ui.KeyBinder import KeyBinder
from edriver.ui.PageElement import ElementKind, PageElement
from edriver.ui.StatusBar import StatusBar
from edriver.utils.errors import MenuItemNotFoundError
from edriver.utils.utils import deep_merge, file_uri_to_path, load_config


logger = logging.getLogger("edriver")


# ==================== TextEditor Class ====================
class TextEditor:
    """Class TextEditor
    ====================
    The operation set offered to test authors.

    Attributes:
        driver (WebDriver): Selenium driver attached to the workbench window.
        config (dict): `load_config()` (defaults, user ``config.toml``, ``.env``,
            environment) with the `config` argument merged on top.
        group (PageElement): The active editor group (tabs and editor).
        root (PageElement): The Monaco editor element inside `group`.
        input_area (PageElement): The hidden textarea receiving key input.
        keys (KeyBinder): Chord decoding and key dispatch.
        clipboard (ClipboardBridge): System clipboard access.
        status (StatusReader): Cursor coordinates from the status bar.
        text (TextAccessor): Buffer reads and writes.
        navigator (CursorNavigator): Cursor moves.
    """

    def __init__(self, driver: WebDriver, config: Optional[dict[str, Any]] = None):
        self.driver = driver
        self.config: dict[str, Any] = deep_merge(load_config(), config or {})
        self.group = PageElement.of(ElementKind.EDITOR_GROUP, driver, self.config)
        self.root = PageElement.of(ElementKind.EDITOR, driver, self.config, parent=self.group)
        self.input_area = PageElement.of(ElementKind.INPUT_AREA, driver, self.config, parent=self.root)
        self.keys = KeyBinder(self.config)
        self.clipboard = ClipboardBridge()
        self.status = StatusReader(StatusBar(driver, self.config))
        self.text = TextAccessor(self)
        self.navigator = CursorNavigator(self)

    # ----- Buffer -------
    def get_text(self) -> str:
        """Get all text from the editor."""
        return self.text.get_full_text()

    def set_text(self, text: str, format_text: bool = False) -> None:
        """Replace the contents of the editor with `text`, optionally formatting it."""
        self.text.set_full_text(text, format_text)

    def clear_text(self) -> None:
        self.text.clear_text()

    def get_text_at_line(self, line: int) -> str:
        return self.text.get_line(line)

    def set_text_at_line(self, line: int, text: str) -> None:
        self.text.set_line(line, text)

    def get_number_of_lines(self) -> int:
        return self.text.get_line_count()

    # ----- Cursor -------
    def get_coordinates(self) -> Coordinate:
        return self.status.read()

    def move_cursor(self, line: int, column: int) -> None:
        """Move the cursor to the given 1-based coordinates.

        On failure the cursor stays wherever the last key press left it.
        """
        self.navigator.move_to(Coordinate(line, column))

    def type_text(self, line: int, column: int, text: str) -> None:
        """Add `text` at the given coordinates."""
        self.move_cursor(line, column)
        self.keys.send(self.input_area.element, text)

    @contextmanager
    def preserving_cursor(self) -> Iterator[Coordinate]:
        """Restores the cursor position after the block completes.

        Full-text reads move the cursor; wrap them in this block when the
        position matters::

            with editor.preserving_cursor():
                text = editor.get_text()
        """
        saved = self.get_coordinates()
        yield saved
        self.navigator.move_to(saved)

    # ----- Document -------
    def is_dirty(self) -> bool:
        """Whether the active editor has unsaved changes.

        Only the tab row of this editor's group is consulted; with split
        groups every group has its own active tab.
        """
        tab = PageElement.of(
            ElementKind.ACTIVE_TAB, self.driver, self.config, parent=self.group
        ).element
        return PageElement.has_class(tab, "dirty")

    def save(self) -> None:
        self.keys.press(self.input_area.element, "save")

    def get_file_path(self) -> str:
        """Local path of the file opened in the editor."""
        return file_uri_to_path(self.root.element.get_attribute("data-uri"))

    def format_document(self) -> None:
        """Use the built-in 'Format Document' action on the whole buffer.

        When the current language has no formatter the action is missing from
        the context menu; this is logged as a warning and the menu is closed.
        """
        label = self.config["editor"]["format_document_label"]
        self.keys.press(self.input_area.element, "context_menu")
        menu = ContextMenu(self).wait()
        try:
            menu.select(label)
        except MenuItemNotFoundError:
            logger.warning(f"'{label}' not available for the current language")
            menu.close()

    # ----- Content assist -------
    def toggle_content_assist(self, open: bool) -> Optional[ContentAssist]:
        """Open or close the suggestion popup.

        The chord is only sent when the popup is not already in the requested
        state.

        Returns:
            The displayed `ContentAssist` when opening, None when closing.
        """
        area = self.input_area.element
        assist = ContentAssist(self)
        widget = assist.root.element
        visible = PageElement.has_class(widget, "visible")
        hidden = widget.value_of_css_property("visibility") == "hidden"

        if open:
            if not visible or hidden:
                self.keys.press(area, "trigger_suggest")
            return assist.wait()
        if visible:
            self.keys.press(area, "close_suggest")
        return None
