# edriver/core/TextAccessor.py
"""TextAccessor Module
=====================
Full-buffer reads and writes for the text editor page object.

The editor widget exposes no "get/set contents" API, so text travels through
the system clipboard: select-all + copy to read, clipboard write + select-all +
paste to replace. Each read produces a fresh snapshot; nothing is cached.

Known approximation:
    A read leaves the whole buffer selected. It is collapsed with one
    ``collapse_selection`` key (UP by default), which does NOT restore the
    cursor to where it was before the read. Use
    `TextEditor.preserving_cursor()` when the position matters.
"""

import logging
from typing import TYPE_CHECKING

from edriver.utils.errors import LineOutOfRangeError


if TYPE_CHECKING:
    from edriver.core.TextEditor import TextEditor


logger = logging.getLogger("edriver")


## ==================== TextAccessor Class ====================
class TextAccessor:
    """Class TextAccessor
    =======================
    Retrieves and replaces the editor buffer through the clipboard.

    Attributes:
        editor (TextEditor): Supplies the input area, key binder and clipboard.

    Methods:
        get_full_text() -> str: Whole buffer, ``\\n``-separated.
        set_full_text(text, format_text=False): Replaces the whole buffer.
        clear_text(): Deletes the whole buffer.
        get_lines() -> list[str]: Snapshot split on ``\\n`` (at least one line).
        get_line_count() -> int
        get_line(line) -> str: 1-based line lookup.
        set_line(line, text): Replaces one line, rewriting the whole buffer.
    """

    def __init__(self, editor: "TextEditor"):
        self.editor = editor

    def get_full_text(self) -> str:
        """Copies the whole buffer through the clipboard and returns it.

        Side effect: the selection changes and the cursor ends up one line
        above the end of the buffer (see the module notes).
        """
        area = self.editor.input_area.element
        self.editor.keys.press(area, "select_all", "copy")
        text = self.editor.clipboard.read_text()
        self.editor.keys.press(area, "collapse_selection")
        return text.replace("\r\n", "\n")

    def set_full_text(self, text: str, format_text: bool = False) -> None:
        """Replaces the whole buffer with `text`.

        Args:
            text: New buffer contents.
            format_text: Run "Format Document" afterwards. A language without a
                formatter is logged, not raised.
        """
        area = self.editor.input_area.element
        self.editor.clipboard.write_text(text)
        self.editor.keys.press(area, "select_all", "paste")
        logger.debug("Buffer replaced with %d characters", len(text))
        if format_text:
            self.editor.format_document()

    def clear_text(self) -> None:
        area = self.editor.input_area.element
        self.editor.keys.press(area, "select_all", "copy")
        self.editor.keys.press(area, "delete_selection")

    def get_lines(self) -> list[str]:
        return self.get_full_text().split("\n")

    def get_line_count(self) -> int:
        return len(self.get_lines())

    def get_line(self, line: int) -> str:
        """Returns line `line` (1-based).

        Raises:
            LineOutOfRangeError: `line` is outside ``[1, line_count]``.
        """
        lines = self.get_lines()
        check_line(line, len(lines))
        return lines[line - 1]

    def set_line(self, line: int, text: str) -> None:
        """Replaces line `line` (1-based) with `text`, keeping every other line.

        Raises:
            LineOutOfRangeError: `line` is outside ``[1, line_count]``.
        """
        lines = self.get_lines()
        check_line(line, len(lines))
        lines[line - 1] = text
        self.set_full_text("\n".join(lines))


def check_line(line: int, line_count: int) -> None:
    if line < 1 or line > line_count:
        raise LineOutOfRangeError(line, line_count)
