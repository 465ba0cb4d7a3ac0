"""Habit domain entity: a named habit, its color tag and this week's completion record."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict

from habits.domain.errors import UnknownColorError
from habits.utilities.constants import DAYS


class Color(str, Enum):
    BLUE = "blue"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    WHITE = "white"
    ORANGE = "orange"
    PURPLE = "purple"
    LIGHTBLUE = "lightblue"
    LIGHTGREEN = "lightgreen"

    @classmethod
    def parse(cls, value) -> "Color":
        """Return the Color for a name (case-insensitive); unknown names are rejected."""
        if isinstance(value, Color):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnknownColorError(value) from None

    @property
    def style(self) -> str:
        """Terminal (rich) color name."""
        return _TERMINAL_STYLES[self]

    @property
    def hex(self) -> str:
        """Print color used by the PDF week sheet."""
        return _PRINT_COLORS[self]


_TERMINAL_STYLES: Dict[Color, str] = {
    Color.BLUE: "blue",
    Color.RED: "red",
    Color.GREEN: "green",
    Color.YELLOW: "yellow",
    Color.WHITE: "white",
    Color.ORANGE: "orange1",
    Color.PURPLE: "purple",
    Color.LIGHTBLUE: "light_sky_blue1",
    Color.LIGHTGREEN: "light_green",
}

_PRINT_COLORS: Dict[Color, str] = {
    Color.BLUE: "#1E63D6",
    Color.RED: "#D32F2F",
    Color.GREEN: "#2E7D32",
    Color.YELLOW: "#C9A400",
    Color.WHITE: "#616161",
    Color.ORANGE: "#EF6C00",
    Color.PURPLE: "#7B1FA2",
    Color.LIGHTBLUE: "#4FA3E0",
    Color.LIGHTGREEN: "#66BB6A",
}


@dataclass
class Habit:
    # Identity is the name alone
    name: str
    color: Color = field(default=Color.BLUE, compare=False)
    days: Dict[str, bool] = field(default_factory=dict, compare=False, repr=False)

    def __post_init__(self):
        self.color = Color.parse(self.color)

    def is_done(self, day: str) -> bool:
        return bool(self.days.get(day, False))

    def to_dict(self):
        return {
            "name": self.name,
            "color": self.color.value,
            # Every day is written explicitly; readers still treat a missing day as False
            "days": {day: self.is_done(day) for day in DAYS},
        }

    @staticmethod
    def from_dict(data):
        return Habit(data["name"], data.get("color", Color.BLUE), dict(data.get("days") or {}))
