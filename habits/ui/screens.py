"""Modal dialogs. Each one dismisses with a result value (a command, or None when cancelled)."""
from typing import List, Optional

from pydantic import ValidationError
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, OptionList, Select, Static

from habits.logic.commands.command_dispatcher import AddHabit, RemoveHabit
from habits.ui.keybindings import DIALOG_BINDINGS
from habits.utilities.constants import COLOR_NAMES, HELP_TEXT
from habits.utilities.validators import HabitInput

class HelpScreen(ModalScreen[None]):
    BINDINGS = DIALOG_BINDINGS

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog"):
            yield Static(HELP_TEXT)
            yield Button("Close", id="close")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(None)

    def action_cancel(self) -> None:
        self.dismiss(None)


class AddHabitScreen(ModalScreen[Optional[AddHabit]]):
    BINDINGS = DIALOG_BINDINGS

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog"):
            yield Label("Add New Habit")
            yield Input(placeholder="Habit Name", id="name")
            yield Select([(c, c) for c in COLOR_NAMES], value=COLOR_NAMES[0], allow_blank=False, id="color")
            yield Static("", id="error", classes="error")
            with Horizontal(classes="buttons"):
                yield Button("Save", id="save", variant="primary")
                yield Button("Cancel", id="cancel")

    def on_mount(self) -> None:
        self.query_one("#name", Input).focus()

    def _submit(self) -> None:
        try:
            data = HabitInput(
                name=self.query_one("#name", Input).value,
                color=self.query_one("#color", Select).value,
            )
        except ValidationError as e:
            self.query_one("#error", Static).update(e.errors()[0]["msg"])
            return
        self.dismiss(AddHabit(data.name, data.color))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self._submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "save":
            self._submit()
        else:
            self.dismiss(None)

    def action_cancel(self) -> None:
        self.dismiss(None)


class ConfirmScreen(ModalScreen[bool]):
    BINDINGS = DIALOG_BINDINGS

    def __init__(self, question: str):
        super().__init__()
        self.question = question

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog"):
            yield Static(self.question)
            with Horizontal(classes="buttons"):
                yield Button("Yes", id="yes", variant="error")
                yield Button("No", id="no")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.id == "yes")

    def action_cancel(self) -> None:
        self.dismiss(False)


class RemoveHabitScreen(ModalScreen[Optional[RemoveHabit]]):
    BINDINGS = DIALOG_BINDINGS

    def __init__(self, names: List[str]):
        super().__init__()
        self.names = list(names)

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog"):
            yield Label("Select Habit to Remove")
            yield OptionList(*self.names, "Cancel", id="habits")

    def on_mount(self) -> None:
        self.query_one("#habits", OptionList).focus()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        if event.option_index >= len(self.names):
            self.dismiss(None)
            return
        name = self.names[event.option_index]

        def confirmed(yes: Optional[bool]) -> None:
            self.dismiss(RemoveHabit(name) if yes else None)

        self.app.push_screen(ConfirmScreen(f"Are you sure you want to remove '{name}'?"), confirmed)

    def action_cancel(self) -> None:
        self.dismiss(None)
