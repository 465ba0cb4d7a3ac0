"""Cursor: navigation state over the rendered grid (header, habit rows, spacer rows).

Rows and columns are independent axes. Up/down keep the column and step over exactly
one spacer row; left/right keep the row. Column 0 is the habit-name column.
"""
from enum import Enum
from typing import Optional, Tuple

from habits.domain.WeeklyGrid import WeeklyGrid
from habits.utilities.constants import DAYS


class Direction(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


class Cursor:
    def __init__(self, habit_count: int = 0):
        self.max_col = len(DAYS)
        self.row = 0
        self.col = 0
        self.max_row = 0
        self.reset(habit_count)

    def reset(self, habit_count: int):
        """Rebuild for a new geometry: first habit's name cell, or the header when empty."""
        self.max_row = max(0, 2 * habit_count - 1)
        if habit_count > 0:
            self.row, self.col = 1, 0
        else:
            self.row, self.col = 0, 0
        return self

    @property
    def position(self) -> Tuple[int, int]:
        return self.row, self.col

    def left(self):
        if self.col > 0:
            self.col -= 1

    def right(self):
        if self.col < self.max_col:
            self.col += 1

    def up(self):
        if self.row > 1:
            self.row = self.row - 1 if self.row % 2 == 0 else self.row - 2

    def down(self):
        if self.row < self.max_row:
            self.row = self.row + 1 if self.row % 2 == 0 else self.row + 2

    def move(self, direction: Direction):
        {
            Direction.LEFT: self.left,
            Direction.RIGHT: self.right,
            Direction.UP: self.up,
            Direction.DOWN: self.down,
        }[Direction(direction)]()

    def target(self) -> Optional[Tuple[int, str]]:
        """(habit_index, day) under the cursor, or None off a toggleable cell."""
        habit_index = WeeklyGrid.habit_for_row(self.row)
        if habit_index is None or self.col < 1:
            return None
        return habit_index, DAYS[self.col - 1]

    def __repr__(self) -> str:
        return f"Cursor(row={self.row}, col={self.col}, max_row={self.max_row})"
