"""WeeklyGrid: habits x the seven fixed day columns, each cell a completion flag.

Rendered geometry (used by the cursor and the render sink):
  row 0            header
  row 2*i + 1      habit i
  row 2*i + 2      spacer after habit i (never after the last habit)
"""
from typing import Dict, List, Optional

from habits.domain.Habit import Color, Habit
from habits.domain.HabitSet import HabitSet
from habits.domain.errors import IndexOutOfRange
from habits.utilities.constants import DAYS, DEFAULT_HABITS


class WeeklyGrid:
    def __init__(self, habits: Optional[HabitSet] = None):
        self.habits = habits if habits is not None else HabitSet()
        self.days = DAYS

    @classmethod
    def default(cls) -> "WeeklyGrid":
        """Fresh grid seeded with the built-in habit list, nothing completed."""
        return cls(HabitSet([Habit(name, Color.parse(color)) for name, color in DEFAULT_HABITS]))

    # --- Cells ----------------------------------------------------------------
    def _habit_at(self, habit_index: int) -> Habit:
        if not 0 <= habit_index < len(self.habits):
            raise IndexOutOfRange(habit_index, len(self.habits))
        return self.habits[habit_index]

    @staticmethod
    def _check_day(day: str):
        if day not in DAYS:
            raise ValueError(f"Unknown day: {day!r}")

    def toggle(self, habit_index: int, day: str) -> bool:
        """Flip one cell and return its new value."""
        habit = self._habit_at(habit_index)
        self._check_day(day)
        habit.days[day] = not habit.days.get(day, False)
        return habit.days[day]

    def is_complete(self, habit_index: int, day: str) -> bool:
        habit = self._habit_at(habit_index)
        self._check_day(day)
        return habit.is_done(day)

    def row_cells(self, habit_index: int) -> List[bool]:
        habit = self._habit_at(habit_index)
        return [habit.is_done(day) for day in DAYS]

    # --- Structure ------------------------------------------------------------
    def add_habit(self, name: str, color=Color.BLUE) -> Habit:
        return self.habits.add(name, color)

    def remove_habit(self, name: str) -> bool:
        return self.habits.remove(name)

    def habit_count(self) -> int:
        return len(self.habits)

    # --- Geometry -------------------------------------------------------------
    @staticmethod
    def row_for_habit(habit_index: int) -> int:
        return 2 * habit_index + 1

    @staticmethod
    def habit_for_row(row: int) -> Optional[int]:
        """Habit index shown on a rendered row, None for the header and spacers."""
        if row < 1 or row % 2 == 0:
            return None
        return (row - 1) // 2

    def spacer_rows(self) -> List[int]:
        return [2 * i + 2 for i in range(len(self.habits) - 1)]

    def rendered_row_count(self) -> int:
        """Rows below the header: habits plus the spacers between them."""
        return max(0, 2 * len(self.habits) - 1)

    # --- Persistence shape ----------------------------------------------------
    def to_records(self) -> List[Dict]:
        return [habit.to_dict() for habit in self.habits]

    @classmethod
    def from_records(cls, records) -> "WeeklyGrid":
        return cls(HabitSet([Habit.from_dict(r) for r in records]))

    def __eq__(self, other) -> bool:
        if not isinstance(other, WeeklyGrid):
            return NotImplemented
        return self._signature() == other._signature()

    def _signature(self):
        return [(h.name, h.color, [h.is_done(d) for d in DAYS]) for h in self.habits]

    def __str__(self) -> str:
        return f"WeeklyGrid({len(self.habits)} habits: {self.habits})"

    __repr__ = __str__
