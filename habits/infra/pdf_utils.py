import io
from reportlab.lib.pagesizes import A4, landscape
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from habits.domain.WeekKey import WeekKey
from habits.domain.WeeklyGrid import WeeklyGrid
from habits.utilities.constants import DAYS


def generate_pdf_for_week(grid: WeeklyGrid, key: WeekKey) -> bytes:
    """Printable week sheet: Habit / Monday .. Sunday, X for done and - for open cells."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=landscape(A4),
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [
        Paragraph(f"Habits – Week {key.week}, {key.year}", styles["Title"]),
        Spacer(1, 16),
    ]

    header = ["Habit"] + [f"{day}\n{d.strftime('%d.%m')}" for day, d in zip(DAYS, key.dates())]
    data = [header]
    for i, habit in enumerate(grid.habits):
        data.append([habit.name] + ["X" if done else "-" for done in grid.row_cells(i)])

    style = [
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#4CAF50")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
        ("ALIGN", (0,0), (-1,-1), "CENTER"),
        ("ALIGN", (0,1), (0,-1), "LEFT"),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,0), 12),
        ("BOTTOMPADDING", (0,0), (-1,0), 10),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
    ]
    # Habit names in their own color
    for i, habit in enumerate(grid.habits, start=1):
        style.append(("TEXTCOLOR", (0,i), (0,i), colors.HexColor(habit.color.hex)))

    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle(style))

    elements.append(table)
    doc.build(elements)
    return buf.getvalue()
