"""Logging configuration for the API process and the loader script."""

import logging
import sys
from typing import Optional

from txn_report.config.settings import get_settings

# Libraries that log every query or request at INFO
QUIET_LOGGERS = ("sqlalchemy.engine", "httpx", "httpcore")


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging on stdout.

    ``level`` overrides ``Settings.log_level``. Root handlers are only
    installed when none exist yet; library levels are reset on every call.
    """
    settings = get_settings()
    level_name = (level or settings.log_level).upper()
    if not isinstance(logging.getLevelName(level_name), int):
        raise ValueError(f"Unknown log level: {level_name}")

    logging.basicConfig(
        level=level_name,
        format=settings.log_format,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    # uvicorn.access follows the app level
    logging.getLogger("uvicorn.access").setLevel(level_name)
