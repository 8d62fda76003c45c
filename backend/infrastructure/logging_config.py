"""Logging setup for entry points (scripts, local runs).

Library modules only create loggers; configuration happens once here.
"""

import logging
from typing import Optional

import structlog

from infrastructure.config import get_log_level

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: Optional[str] = None) -> int:
    """Configure stdlib logging and structlog.

    Args:
        level: Level name (e.g. "debug"). Defaults to LOG_LEVEL env var.

    Returns:
        Numeric level applied. Unknown names fall back to INFO.
    """
    level_name = (level or get_log_level()).upper()
    numeric_level = getattr(logging, level_name, logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
    # basicConfig is a no-op when handlers already exist
    logging.getLogger().setLevel(numeric_level)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
    )

    return numeric_level
