from pathlib import Path

from habits.utilities.config import DATA_DIR, LOG_FILE
from habits.utilities.constants import WEEK_FILE_TEMPLATE

# Centralized paths for data files (single source of truth)


def week_file(data_dir: Path, year: int, week: int) -> Path:
    """One JSON record per ISO week, e.g. habits_2024_10.json."""
    return Path(data_dir) / WEEK_FILE_TEMPLATE.format(year=year, week=week)


__all__ = ['DATA_DIR', 'LOG_FILE', 'week_file']
