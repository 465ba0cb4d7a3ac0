"""HabitSet aggregate: ordered, name-unique collection of Habit items."""
from typing import Iterator, List, Optional

from habits.domain.Habit import Color, Habit
from habits.domain.errors import DuplicateNameError


class HabitSet:
    def __init__(self, habits: Optional[List[Habit]] = None):
        self.items: List[Habit] = []
        for habit in habits or []:
            self._append(habit)

    def _append(self, habit: Habit):
        if not habit.name.strip():
            raise ValueError("Habit name cannot be empty")
        if habit.name in self:
            raise DuplicateNameError(habit.name)
        self.items.append(habit)
        return habit

    def add(self, name: str, color=Color.BLUE) -> Habit:
        '''
        Appends a new habit with an empty completion record.
        Surrounding whitespace is dropped from the name.
        Insertion order is display order; nothing is ever sorted.
        '''
        return self._append(Habit(name.strip(), Color.parse(color)))

    def remove(self, name: str) -> bool:
        '''
        Removes the habit with this name. Missing names are ignored.
        Returns True when a habit was removed.
        '''
        for i, habit in enumerate(self.items):
            if habit.name == name:
                del self.items[i]
                return True
        return False

    def get(self, name: str) -> Optional[Habit]:
        return next((h for h in self.items if h.name == name), None)

    def names(self) -> List[str]:
        return [h.name for h in self.items]

    def __contains__(self, name) -> bool:
        return any(h.name == name for h in self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Habit]:
        return iter(self.items)

    def __getitem__(self, index: int) -> Habit:
        return self.items[index]

    def __str__(self) -> str:
        return ", ".join(f"{h.name} ({h.color.value})" for h in self.items)

    __repr__ = __str__
