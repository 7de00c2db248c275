# edriver/core/StatusReader.py
"""StatusReader Module
=====================
The editor offers no query for the cursor position; the status bar text
("Ln 4, Col 2", "Zeile 4, Spalte 2", ...) is the only source of truth.
This module turns that text into a `Coordinate`.

Coordinates are 1-based like the editor gutter, and are never cached: every
`StatusReader.read()` goes back to the DOM.
"""

import logging
import re
from typing import NamedTuple, Optional

from edriver.ui.StatusBar import StatusBar
from edriver.utils.errors import MalformedStatusError


logger = logging.getLogger("edriver")

_DIGIT_RUN = re.compile(r"\d+")


class Coordinate(NamedTuple):
    """1-based cursor position."""

    line: int
    column: int

    def __str__(self) -> str:
        return f"Ln {self.line}, Col {self.column}"


def parse_coordinate(text: Optional[str]) -> Coordinate:
    """Extracts ``(line, column)`` from free-form status text.

    The first two maximal digit runs are taken, in order. Language-specific
    wording around them is irrelevant.

    Raises:
        MalformedStatusError: Fewer than two numbers in `text`.
    """
    numbers = _DIGIT_RUN.findall(text or "")
    if len(numbers) < 2:
        raise MalformedStatusError(text)
    return Coordinate(int(numbers[0]), int(numbers[1]))


class StatusReader:
    """Reads the current `Coordinate` off a `StatusBar`."""

    def __init__(self, status_bar: StatusBar):
        self.status_bar = status_bar

    def read(self) -> Coordinate:
        coordinate = parse_coordinate(self.status_bar.get_current_position())
        logger.debug("Cursor at %s", coordinate)
        return coordinate
