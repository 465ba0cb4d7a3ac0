"""Terminal UI: renders the session's grid and turns key presses into commands."""
import logging

from textual.app import App, ComposeResult
from textual.screen import Screen
from textual.widgets import Footer, Static

from habits.domain.errors import DuplicateNameError
from habits.events.status_observers import StatusLog
from habits.logic.commands.command_dispatcher import Command, CommandDispatcher, OutcomeKind
from habits.logic.view.grid_view import build_grid_view
from habits.ui.keybindings import GRID_BINDINGS, command_for_action
from habits.ui.render import render_grid
from habits.ui.screens import AddHabitScreen, HelpScreen, RemoveHabitScreen
from habits.utilities.constants import TITLE_BANNER

logger = logging.getLogger(__name__)

APP_CSS = """
#title { color: green; content-align: center middle; height: 7; }
#grid { padding: 1 4; }
#status { height: 1; padding: 0 4; color: $text-muted; }
#status.error { color: $error; }
ModalScreen { align: center middle; }
.dialog { width: 60; height: auto; border: round $accent; padding: 1 2; }
.buttons { height: auto; margin-top: 1; }
.error { color: $error; height: auto; }
"""


class GridScreen(Screen):
    BINDINGS = GRID_BINDINGS

    def __init__(self, dispatcher: CommandDispatcher, status_log: StatusLog):
        super().__init__()
        self.dispatcher = dispatcher
        self.status_log = status_log

    @property
    def session(self):
        return self.dispatcher.session

    def compose(self) -> ComposeResult:
        yield Static(TITLE_BANNER, id="title")
        yield Static(id="grid")
        yield Static("", id="status")
        yield Footer()

    def on_mount(self) -> None:
        self.refresh_grid()

    def refresh_grid(self) -> None:
        self.query_one("#grid", Static).update(render_grid(build_grid_view(self.session)))
        entry = self.status_log.latest()
        status = self.query_one("#status", Static)
        status.update(f"{entry['ts']}  {entry['text']}" if entry else "")
        status.set_class(bool(entry and entry["error"]), "error")

    def apply_command(self, command: Command) -> None:
        outcome = self.dispatcher.handle(command)
        if outcome.kind == OutcomeKind.QUIT:
            self.app.exit()
            return
        if outcome.kind == OutcomeKind.HELP:
            self.app.push_screen(HelpScreen())
        if outcome.error is not None:
            self.notify(str(outcome.error), title="Save failed", severity="error")
        self.refresh_grid()

    # --- Actions (see keybindings.GRID_BINDINGS) ----------------------------
    def action_move(self, direction: str) -> None:
        self.apply_command(command_for_action("move", direction))

    def action_toggle(self) -> None:
        self.apply_command(command_for_action("toggle"))

    def action_show_help(self) -> None:
        self.apply_command(command_for_action("show_help"))

    def action_quit(self) -> None:
        self.apply_command(command_for_action("quit"))

    def action_add_habit(self) -> None:
        self.app.push_screen(AddHabitScreen(), self._on_add_result)

    def action_remove_habit(self) -> None:
        names = self.session.grid.habits.names()
        if not names:
            return
        self.app.push_screen(RemoveHabitScreen(names), self._on_remove_result)

    def _on_add_result(self, command) -> None:
        if command is None:
            return
        try:
            self.apply_command(command)
        except DuplicateNameError as e:
            logger.info(f"Rejected duplicate habit '{e.name}'")
            self.notify(str(e), title="Not added", severity="warning")

    def _on_remove_result(self, command) -> None:
        if command is not None:
            self.apply_command(command)


class HabitTrackerApp(App):
    CSS = APP_CSS
    TITLE = "Habit Tracker"

    def __init__(self, dispatcher: CommandDispatcher, status_log: StatusLog):
        super().__init__()
        self.dispatcher = dispatcher
        self.status_log = status_log

    def on_mount(self) -> None:
        self.push_screen(GridScreen(self.dispatcher, self.status_log))
