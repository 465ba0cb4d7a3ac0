"""
Centralized keybindings for the habit grid.

Keys map to abstract action names; `command_for_action` turns an action name into
the command the dispatcher understands. Add and remove open a dialog first, so they
have no direct command here.
"""

from textual.binding import Binding

from habits.domain.Cursor import Direction
from habits.logic.commands.command_dispatcher import Move, Quit, ShowHelp, Toggle

GRID_BINDINGS = [
    Binding("h,left", "move('left')", "Left", show=False),
    Binding("j,down", "move('down')", "Down", show=False),
    Binding("k,up", "move('up')", "Up", show=False),
    Binding("l,right", "move('right')", "Right", show=False),
    Binding("space,x", "toggle", "Toggle"),
    Binding("a", "add_habit", "Add"),
    Binding("d", "remove_habit", "Delete"),
    Binding("question_mark", "show_help", "Help"),
    Binding("q,escape", "quit", "Quit"),
]

DIALOG_BINDINGS = [
    Binding("escape", "cancel", "Cancel"),
]


def command_for_action(action: str, argument: str = ""):
    if action == "move":
        return Move(Direction(argument))
    if action == "toggle":
        return Toggle()
    if action == "show_help":
        return ShowHelp()
    if action == "quit":
        return Quit()
    raise KeyError(action)
