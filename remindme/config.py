"""
REMINDME Configuration

Settings are read from the environment, after loading an optional
.env file from the project root.

Variables:
- REMINDME_LOG_LEVEL        logging level name (default: WARNING)
- REMINDME_LOG_FORMAT       logging format string
- REMINDME_FUZZY_THRESHOLD  minimum fuzzy match score, 0-100 (default: 80)
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# ============================================================================
# Load .env file
# ============================================================================

ENV_PATH = Path(__file__).parent.parent / ".env"

if ENV_PATH.exists():
    load_dotenv(ENV_PATH)

# ============================================================================
# Settings
# ============================================================================

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DEFAULT_FUZZY_THRESHOLD = 80


def _read_fuzzy_threshold() -> int:
    raw = os.environ.get("REMINDME_FUZZY_THRESHOLD")
    if raw is None:
        return DEFAULT_FUZZY_THRESHOLD
    try:
        value = int(raw)
    except ValueError:
        logger.warning(
            f"Invalid REMINDME_FUZZY_THRESHOLD {raw!r}, using {DEFAULT_FUZZY_THRESHOLD}"
        )
        return DEFAULT_FUZZY_THRESHOLD
    if not 0 <= value <= 100:
        logger.warning(
            f"REMINDME_FUZZY_THRESHOLD {value} outside 0-100, using {DEFAULT_FUZZY_THRESHOLD}"
        )
        return DEFAULT_FUZZY_THRESHOLD
    return value


LOG_LEVEL = os.environ.get("REMINDME_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
LOG_FORMAT = os.environ.get("REMINDME_LOG_FORMAT", DEFAULT_LOG_FORMAT)
FUZZY_THRESHOLD = _read_fuzzy_threshold()


def resolve_log_level(level_name: str) -> int:
    """Map a level name such as "INFO" to its number, WARNING if unknown"""
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        logger.warning(f"Unknown log level {level_name!r}, using {DEFAULT_LOG_LEVEL}")
        return logging.WARNING
    return level


def configure_logging(level: Optional[str] = None):
    """
    Configure root logging for the CLI.

    Args:
        level: Level name overriding REMINDME_LOG_LEVEL
    """
    logging.basicConfig(
        level=resolve_log_level(level or LOG_LEVEL),
        format=LOG_FORMAT
    )
