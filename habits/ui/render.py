"""Draws a GridView as a rich Table; spacer rows are blank and never highlighted."""
from rich.table import Table
from rich.text import Text

from habits.domain.WeeklyGrid import WeeklyGrid
from habits.logic.view.grid_view import GridView
from habits.utilities.constants import DONE_MARK, OPEN_MARK

CURSOR_STYLE = "bold underline"
HEADER_STYLE = "white"
OPEN_STYLE = "grey50"


def _highlight(text: Text, selected: bool) -> Text:
    if selected:
        text.stylize(CURSOR_STYLE)
    return text


def render_grid(view: GridView) -> Table:
    cur_row, cur_col = view.cursor_position
    table = Table(box=None, expand=True, show_edge=False, pad_edge=False, title=view.title)
    for col, label in enumerate(view.header_labels):
        header = _highlight(Text(label, style=HEADER_STYLE), cur_row == 0 and cur_col == col)
        table.add_column(header, justify="left" if col == 0 else "center", ratio=1)

    spacers = set(view.spacer_row_indices)
    for i, row in enumerate(view.rows):
        rendered_row = WeeklyGrid.row_for_habit(i)
        cells = [_highlight(Text(f"  {row.label}  ", style=row.color), cur_row == rendered_row and cur_col == 0)]
        for col, done in enumerate(row.cells, start=1):
            mark = Text(DONE_MARK, style=row.color) if done else Text(OPEN_MARK, style=OPEN_STYLE)
            cells.append(_highlight(mark, cur_row == rendered_row and cur_col == col))
        table.add_row(*cells)
        if rendered_row + 1 in spacers:
            table.add_row(*[""] * len(view.header_labels))
    return table
