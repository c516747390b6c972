"""
Runtime configuration for LessonView.

Values come from environment variables, optionally loaded from a .env file
at the project root.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).parent.parent
ENV_FILE = PROJECT_ROOT / ".env"

if ENV_FILE.exists():
    load_dotenv(ENV_FILE)

_FALSE_VALUES = {"0", "false", "no", "off"}


def env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() not in _FALSE_VALUES


# Lesson files (*.yaml / *.json)
LESSONS_DIR = Path(os.getenv("LESSONVIEW_LESSONS_DIR", str(PROJECT_ROOT / "data" / "lessons")))

# Learner progress lives outside the content directory
DEFAULT_PROGRESS_DIR = Path.home() / ".lessonview"
PROGRESS_DB = Path(os.getenv("LESSONVIEW_PROGRESS_DB", str(DEFAULT_PROGRESS_DIR / "progress.db")))

# Out-of-range answer/selection indices raise when true, are ignored when false
STRICT_INDICES = env_flag("LESSONVIEW_STRICT_INDICES", True)

LOG_LEVEL = os.getenv("LESSONVIEW_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
