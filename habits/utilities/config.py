"""Configuration management for the habit tracker."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Storage
DATA_DIR: Final[Path] = Path(
    os.getenv('HABITS_DATA_DIR', str(Path.home() / '.habit-tracker'))
).expanduser()

# Logging
LOG_FILE: Final[Path] = Path(
    os.getenv('HABITS_LOG_FILE', str(DATA_DIR / 'habit-tracker.log'))
).expanduser()
LOG_LEVEL: Final[str] = os.getenv('HABITS_LOG_LEVEL', 'INFO').upper()
LOG_MAX_BYTES: Final[int] = int(os.getenv('HABITS_LOG_MAX_BYTES', '1000000'))
LOG_BACKUP_COUNT: Final[int] = int(os.getenv('HABITS_LOG_BACKUP_COUNT', '3'))
