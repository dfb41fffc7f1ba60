"""Runtime configuration for taskscore.

Settings come from the environment (optionally via a `.env` file):
- TASKSCORE_TIME_ZONE: time zone used to resolve "now" at the API edge (default UTC)
- TASKSCORE_TOP_LIMIT: default number of recommended tasks (default 5)
- DEBUG: enable debug logging

Values are re-read on every call so tests can change them with monkeypatch.
"""

import logging
import os
from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

from taskscore.models.constants import DEFAULT_TOP_LIMIT

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_TIME_ZONE = "UTC"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def is_debug() -> bool:
    return os.getenv("DEBUG", "False").lower() == "true"


def get_time_zone() -> ZoneInfo:
    """Return the configured time zone.

    Raises:
        ValueError: If TASKSCORE_TIME_ZONE is not a known IANA time zone
    """
    name = os.getenv("TASKSCORE_TIME_ZONE", DEFAULT_TIME_ZONE).strip() or DEFAULT_TIME_ZONE
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown time zone in TASKSCORE_TIME_ZONE: {name!r}") from e


def get_default_top_limit() -> int:
    """Return the default recommended-task limit, falling back to 5 on bad input."""
    raw = os.getenv("TASKSCORE_TOP_LIMIT")
    if raw is None:
        return DEFAULT_TOP_LIMIT
    try:
        limit = int(raw)
    except ValueError:
        logger.warning(f"Invalid TASKSCORE_TOP_LIMIT {raw!r}. Using {DEFAULT_TOP_LIMIT}.")
        return DEFAULT_TOP_LIMIT
    if limit <= 0:
        logger.warning(f"Non-positive TASKSCORE_TOP_LIMIT {limit}. Using {DEFAULT_TOP_LIMIT}.")
        return DEFAULT_TOP_LIMIT
    return limit


def current_instant() -> datetime:
    """Current time in the configured time zone (timezone-aware)."""
    return datetime.now(get_time_zone())


def configure_logging() -> None:
    """Set up root logging once, at DEBUG level when DEBUG=true."""
    logging.basicConfig(
        level=logging.DEBUG if is_debug() else logging.INFO,
        format=LOG_FORMAT,
    )
