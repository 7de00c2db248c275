# edriver/core/CursorNavigator.py
"""CursorNavigator Module
========================
Moves the editor cursor to an absolute `Coordinate` using only arrow keys.

There is no "set cursor" primitive, so a move is a small state machine:

1. Bound-check the target against a fresh buffer snapshot.
2. Read the current coordinate from the status bar.
3. Press UP/DOWN ``|current.line - target.line|`` times, then re-read.
4. Press LEFT/RIGHT one key at a time, re-reading the status bar after
   each press and stopping as soon as the target is observed. If the line
   number changes, the press wrapped past the start or end of the line (or
   the cursor stops moving at the end of the buffer):
   the column does not exist there and `ColumnUnreachableError` is raised on
   the spot. The cursor is not moved back.
5. Verify the final coordinate equals the target.

A mismatch is reported once; key sequences are never re-driven.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterator

from edriver.core.StatusReader import Coordinate
from edriver.core.TextAccessor import check_line
from edriver.utils.errors import ColumnOutOfRangeError, ColumnUnreachableError, NavigationError


if TYPE_CHECKING:
    from edriver.core.TextEditor import TextEditor


logger = logging.getLogger("edriver")


class Direction(Enum):
    """Arrow keys, valued by their key-string name."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class NavigationPlan:
    """Key presses along one axis: `count` presses of `direction`."""

    direction: Direction
    count: int

    def keys(self) -> Iterator[Direction]:
        for _ in range(self.count):
            yield self.direction


def plan_line_move(current: Coordinate, target: Coordinate) -> NavigationPlan:
    delta = current.line - target.line
    return NavigationPlan(Direction.UP if delta >= 0 else Direction.DOWN, abs(delta))


def plan_column_move(current: Coordinate, target: Coordinate) -> NavigationPlan:
    delta = current.column - target.column
    return NavigationPlan(Direction.LEFT if delta >= 0 else Direction.RIGHT, abs(delta))


## ==================== CursorNavigator Class ====================
class CursorNavigator:
    """Drives the cursor of a `TextEditor` with verified arrow-key presses."""

    def __init__(self, editor: "TextEditor"):
        self.editor = editor

    def _press(self, direction: Direction) -> None:
        keys = self.editor.keys
        keys.send(self.editor.input_area.element, keys.decode(direction.value))

    def move_to(self, target: Coordinate) -> None:
        """Moves the cursor to `target`.

        Raises:
            LineOutOfRangeError: ``target.line`` is outside ``[1, line_count]``.
            ColumnOutOfRangeError: ``target.column`` is lower than 1.
            ColumnUnreachableError: ``target.column`` does not exist on the line.
            NavigationError: The cursor did not settle on `target`.
        """
        target = Coordinate(*target)
        check_line(target.line, self.editor.text.get_line_count())
        if target.column < 1:
            raise ColumnOutOfRangeError(target.column)

        status = self.editor.status
        current = status.read()
        vertical = plan_line_move(current, target)
        logger.debug(f"Moving {current} -> {target}: {vertical.count} x {vertical.direction.name}")
        for direction in vertical.keys():
            self._press(direction)

        current = status.read()
        if current.line != target.line:
            raise NavigationError(f"Cursor reached line {current.line} instead of line {target.line}")

        horizontal = plan_column_move(current, target)
        previous = current
        for direction in horizontal.keys():
            self._press(direction)
            observed = status.read()
            if observed.line != current.line:
                logger.debug(f"Column {target.column} wrapped off line {target.line}")
                raise ColumnUnreachableError(target.line, target.column)
            if observed == target:
                # one press may span several columns (tabs, surrogate pairs)
                break
            if observed == previous:
                # end of the last line: RIGHT has nowhere to wrap to
                raise ColumnUnreachableError(target.line, target.column)
            previous = observed

        reached = status.read()
        if reached != target:
            raise NavigationError(f"Cursor settled at {reached} instead of {target}")
