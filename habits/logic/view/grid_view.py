"""Render-sink payload: what the screen needs to draw one week's grid."""
from dataclasses import dataclass, field
from typing import List, Tuple

from habits.utilities.constants import DAYS


@dataclass(frozen=True)
class RowView:
    label: str
    color: str
    cells: List[bool] = field(default_factory=list)


@dataclass(frozen=True)
class GridView:
    title: str
    header_labels: List[str]
    rows: List[RowView]
    spacer_row_indices: List[int]
    cursor_position: Tuple[int, int]


def build_grid_view(session) -> GridView:
    """Snapshot the session into plain data; rendering never reads the session directly."""
    grid, key = session.grid, session.key
    header = ["Habit"] + [f"{day} {d.day}" for day, d in zip(DAYS, key.dates())]
    rows = [
        RowView(habit.name, habit.color.style, grid.row_cells(i))
        for i, habit in enumerate(grid.habits)
    ]
    return GridView(
        title=f"Week {key.week}, {key.year}",
        header_labels=header,
        rows=rows,
        spacer_row_indices=grid.spacer_rows(),
        cursor_position=session.cursor.position,
    )
