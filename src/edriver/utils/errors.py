# edriver/utils/errors.py
"""errors.py
============
Failure taxonomy for the editor page objects.

Every failure detected by edriver itself derives from `EditorError`. Failures of
the automation layer (`selenium.common.exceptions.NoSuchElementException`,
`TimeoutException`) are never wrapped and reach the caller unchanged.
"""

from typing import Optional


class EditorError(Exception):
    """Base class for all failures raised by edriver."""


class LineOutOfRangeError(EditorError, IndexError):
    """Requested line is outside ``[1, line_count]``."""

    def __init__(self, line: int, line_count: int):
        self.line = line
        self.line_count = line_count
        super().__init__(f"Line number {line} does not exist (buffer has {line_count} lines)")


class ColumnOutOfRangeError(EditorError, IndexError):
    """Requested column is lower than 1."""

    def __init__(self, column: int):
        self.column = column
        super().__init__(f"Column number {column} does not exist")


class NavigationError(EditorError):
    """The cursor did not end up where the key presses should have put it."""


class ColumnUnreachableError(NavigationError):
    """The column does not exist on the target line.

    Detected when a horizontal key press wrapped the cursor onto another line.
    The cursor stays wherever the last press left it.
    """

    def __init__(self, line: int, column: int):
        self.line = line
        self.column = column
        super().__init__(f"Column number {column} is not accessible on line {line}")


class MalformedStatusError(EditorError, ValueError):
    """Status-bar text does not contain a line and a column number."""

    def __init__(self, text: Optional[str]):
        self.text = text
        super().__init__(f"Cannot read cursor position from status text {text!r}")


class ClipboardUnavailableError(EditorError):
    """The system clipboard cannot be read or written."""


class MenuItemNotFoundError(EditorError):
    """A context menu does not offer the requested item."""

    def __init__(self, label: str):
        self.label = label
        super().__init__(f"Menu item {label!r} not found")
