"""WeekKey value: the (ISO year, ISO week) pair identifying one persisted week."""
from datetime import date, datetime, timedelta
from typing import List, NamedTuple, Optional, Union

from habits.utilities.constants import DAYS


class WeekKey(NamedTuple):
    year: int
    week: int

    @classmethod
    def from_date(cls, moment: Union[date, datetime]) -> "WeekKey":
        """Key for the ISO week containing `moment` (weeks start Monday, week 1 holds the first Thursday)."""
        iso = moment.isocalendar()
        return cls(iso[0], iso[1])

    @classmethod
    def current(cls, today: Optional[date] = None) -> "WeekKey":
        return cls.from_date(today or date.today())

    @classmethod
    def parse(cls, text: str) -> "WeekKey":
        """Parse `2024-W10` (the label format) into a key."""
        try:
            year, week = text.strip().upper().split("-W")
            key = cls(int(year), int(week))
            key.monday()
        except ValueError:
            raise ValueError(f"Invalid week '{text}' (expected YYYY-Www)") from None
        return key

    def monday(self) -> date:
        return date.fromisocalendar(self.year, self.week, 1)

    def dates(self) -> List[date]:
        start = self.monday()
        return [start + timedelta(days=i) for i in range(len(DAYS))]

    def label(self) -> str:
        return f"{self.year}-W{self.week:02d}"

    def __str__(self) -> str:
        return self.label()
