from typing import Final

APP_NAME: Final[str] = "habit-tracker"
APP_VERSION: Final[str] = "1.0.0"

DAYS: Final[tuple[str, ...]] = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)

# Palette offered by the add-habit dialog, first entry is the preselected one
COLOR_NAMES: Final[tuple[str, ...]] = (
    "blue", "red", "green", "yellow", "white", "orange", "purple", "lightblue", "lightgreen",
)

DEFAULT_HABITS: Final[tuple[tuple[str, str], ...]] = (
    ("water", "blue"),
    ("exercise", "red"),
    ("certification", "yellow"),
    ("breath", "white"),
    ("newsboat", "orange"),
    ("recap", "lightblue"),
    ("personal", "green"),
    ("read", "purple"),
)

MAX_HABIT_NAME_LENGTH: Final[int] = 40
WEEK_FILE_TEMPLATE: Final[str] = "habits_{year}_{week}.json"

DONE_MARK: Final[str] = "✓"
OPEN_MARK: Final[str] = "✗"

TITLE_BANNER: Final[str] = (
    r"""
 _   _       _     _ _     _____               _
| | | | __ _| |__ (_) |_  |_   _| __ __ _  ___| | _____ _ __
| |_| |/ _` | '_ \| | __|   | || '__/ _` |/ __| |/ / _ \ '__|
|  _  | (_| | |_) | | |_    | || | | (_| | (__|   <  __/ |
|_| |_|\__,_|_.__/|_|\__|   |_||_|  \__,_|\___|_|\_\___|_|
"""
)

HELP_TEXT: Final[str] = (
    """
Habit Tracker Keybindings:

h, j, k, l  - Navigate (vim-style, arrow keys work too)
Space or x  - Toggle habit status
a           - Add new habit
d           - Delete a habit
?           - Show this help dialog
q or Esc    - Quit application
"""
)
