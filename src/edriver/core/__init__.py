# src/edriver/core/__init__.py
"""Public facade for edriver.core: re-export main classes from CamelCase modules.

Keeps Java-like file names (TextEditor.py, CursorNavigator.py, ...),
but provides flat imports for convenience and stability.
"""

# Re-export classes/symbols from CamelCase modules
from .CursorNavigator import CursorNavigator, Direction, NavigationPlan  # noqa: F401
from .StatusReader import Coordinate, StatusReader, parse_coordinate  # noqa: F401
from .TextAccessor import TextAccessor  # noqa: F401
from .TextEditor import TextEditor  # noqa: F401


__all__ = [
    "Coordinate",
    "CursorNavigator",
    "Direction",
    "NavigationPlan",
    "StatusReader",
    "TextAccessor",
    "TextEditor",
    "parse_coordinate",
]
