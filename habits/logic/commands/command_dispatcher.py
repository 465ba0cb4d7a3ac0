"""Command set and dispatcher for the habit grid.

Every command is applied synchronously. Mutations (toggle, add, remove) are written
through the WeekStore before `handle` returns; there is no dirty flag or batching.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from habits.domain.Cursor import Cursor, Direction
from habits.domain.Habit import Color
from habits.domain.WeekKey import WeekKey
from habits.domain.WeeklyGrid import WeeklyGrid
from habits.domain.errors import WeekStoreError
from habits.events.Event_Bus import (
    EventBus, GRID_TOGGLED, HABIT_ADDED, HABIT_REMOVED, WEEK_SAVED, WEEK_SAVE_FAILED
)
from habits.infra.Week_Repository import WeekStore

logger = logging.getLogger(__name__)


# --- Commands ---------------------------------------------------------------
@dataclass(frozen=True)
class Move:
    direction: Direction


@dataclass(frozen=True)
class Toggle:
    pass


@dataclass(frozen=True)
class AddHabit:
    name: str
    color: Color = Color.BLUE


@dataclass(frozen=True)
class RemoveHabit:
    name: str


@dataclass(frozen=True)
class ShowHelp:
    pass


@dataclass(frozen=True)
class Quit:
    pass


Command = Union[Move, Toggle, AddHabit, RemoveHabit, ShowHelp, Quit]


class OutcomeKind(str, Enum):
    CONTINUE = "continue"
    HELP = "help"
    QUIT = "quit"


@dataclass
class Outcome:
    kind: OutcomeKind = OutcomeKind.CONTINUE
    mutated: bool = False
    error: Optional[WeekStoreError] = None


# --- State ------------------------------------------------------------------
@dataclass
class Session:
    """Everything one run of the tracker works on.

    `key` is pinned when the session starts: all saves of this session go to the
    week that is on screen, even if the clock crosses into the next ISO week.
    """
    store: WeekStore
    key: WeekKey
    grid: WeeklyGrid
    cursor: Optional[Cursor] = None

    def __post_init__(self):
        if self.cursor is None:
            self.cursor = Cursor(len(self.grid.habits))

    @classmethod
    def start(cls, store: WeekStore, key: Optional[WeekKey] = None) -> "Session":
        key = key or store.current_key()
        grid = store.load(key)
        logger.info(f"Session started for week {key} with {len(grid.habits)} habits")
        return cls(store, key, grid)


# --- Dispatcher -------------------------------------------------------------
class CommandDispatcher:
    def __init__(self, session: Session, bus: Optional[EventBus] = None):
        self.session = session
        self.bus = bus or EventBus()

    def handle(self, command: Command) -> Outcome:
        """Apply one command to the session and persist any mutation."""
        if isinstance(command, Move):
            self.session.cursor.move(command.direction)
            return Outcome()
        if isinstance(command, Toggle):
            return self._toggle()
        if isinstance(command, AddHabit):
            return self._add(command.name, command.color)
        if isinstance(command, RemoveHabit):
            return self._remove(command.name)
        if isinstance(command, ShowHelp):
            return Outcome(OutcomeKind.HELP)
        if isinstance(command, Quit):
            logger.info("Quit requested")
            return Outcome(OutcomeKind.QUIT)
        raise TypeError(f"Unsupported command: {command!r}")

    def _toggle(self) -> Outcome:
        target = self.session.cursor.target()
        if target is None:
            return Outcome()
        habit_index, day = target
        done = self.session.grid.toggle(habit_index, day)
        habit = self.session.grid.habits[habit_index]
        self.bus.publish(GRID_TOGGLED, {"week": self.session.key, "habit": habit.name, "day": day, "done": done})
        return self._persist()

    def _add(self, name: str, color) -> Outcome:
        habit = self.session.grid.add_habit(name, color)
        logger.info(f"Added habit '{habit.name}' ({habit.color.value}) to week {self.session.key}")
        self.session.cursor.reset(self.session.grid.habit_count())
        self.bus.publish(HABIT_ADDED, {"week": self.session.key, "habit": habit.name, "color": habit.color.value})
        return self._persist()

    def _remove(self, name: str) -> Outcome:
        if not self.session.grid.remove_habit(name):
            logger.debug(f"Remove ignored, no habit named '{name}'")
            return Outcome()
        logger.info(f"Removed habit '{name}' from week {self.session.key}")
        self.session.cursor.reset(self.session.grid.habit_count())
        self.bus.publish(HABIT_REMOVED, {"week": self.session.key, "habit": name})
        return self._persist()

    def _persist(self) -> Outcome:
        try:
            path = self.session.store.save(self.session.grid, self.session.key)
        except WeekStoreError as e:
            logger.error(f"Keeping unsaved changes in memory for week {self.session.key}: {e}")
            self.bus.publish(WEEK_SAVE_FAILED, {"week": self.session.key, "error": e})
            return Outcome(mutated=True, error=e)
        self.bus.publish(WEEK_SAVED, {"week": self.session.key, "path": path})
        return Outcome(mutated=True)
