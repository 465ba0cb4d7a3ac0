import json
import logging
import os
import tempfile
from datetime import date
from pathlib import Path
from typing import Callable, Optional

from pydantic import ValidationError

from habits.domain.WeekKey import WeekKey
from habits.domain.WeeklyGrid import WeeklyGrid
from habits.domain.errors import WeekStoreError
from habits.infra.paths import DATA_DIR, week_file
from habits.utilities.validators import WeekSnapshot

logger = logging.getLogger(__name__)


class WeekStore:
    """Maps an ISO (year, week) key to one JSON snapshot of that week's grid.

    Nothing is cached between calls: when a caller omits the key it is derived
    from `clock()` on every load and save.
    """

    def __init__(self, data_dir: Path = DATA_DIR, clock: Callable[[], date] = date.today):
        self.data_dir = Path(data_dir)
        self.clock = clock

    def current_key(self) -> WeekKey:
        return WeekKey.from_date(self.clock())

    def path_for(self, key: Optional[WeekKey] = None) -> Path:
        key = key or self.current_key()
        return week_file(self.data_dir, key.year, key.week)

    def exists(self, key: Optional[WeekKey] = None) -> bool:
        return self.path_for(key).exists()

    def load(self, key: Optional[WeekKey] = None) -> WeeklyGrid:
        """Return the stored grid for `key`.

        A week that was never visited is seeded with the default habits and
        written immediately, so its file exists from then on. Unreadable or
        malformed files raise WeekStoreError instead of being replaced.
        """
        key = key or self.current_key()
        path = self.path_for(key)
        if not path.exists():
            grid = WeeklyGrid.default()
            logger.info(f"No record for week {key}; seeding {len(grid.habits)} default habits")
            self.save(grid, key)
            return grid
        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"Invalid JSON in week file {path}: {e}")
            raise WeekStoreError(f"Corrupt week record ({e})", path) from e
        except OSError as e:
            logger.error(f"Cannot read week file {path}: {e}")
            raise WeekStoreError(f"Cannot read week record ({e.strerror or e})", path) from e
        try:
            snapshot = WeekSnapshot.model_validate(raw)
        except ValidationError as e:
            logger.error(f"Malformed week file {path}: {e.error_count()} validation error(s)")
            raise WeekStoreError(f"Malformed week record ({e.error_count()} error(s))", path) from e
        grid = WeeklyGrid.from_records(snapshot.to_records())
        logger.debug(f"Loaded week {key} with {len(grid.habits)} habits")
        return grid

    def save(self, grid: WeeklyGrid, key: Optional[WeekKey] = None) -> Path:
        """Overwrite the snapshot for `key`; readers never observe a partial file."""
        key = key or self.current_key()
        path = self.path_for(key)
        payload = json.dumps(grid.to_records(), indent=2, ensure_ascii=False)
        tmp_name = None
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.data_dir, prefix=f".{path.stem}.", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, path)
        except OSError as e:
            logger.error(f"Failed to save week {key} to {path}: {e}")
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise WeekStoreError(f"Cannot write week record ({e.strerror or e})", path) from e
        logger.debug(f"Saved week {key} ({len(grid.habits)} habits)")
        return path
