"""Logging configuration for the data-access layer."""

import logging
import sys

from collabstore.core.config import Settings, get_settings

# Driver loggers that are chatty at INFO.
QUIET_LOGGERS = ("botocore", "boto3", "urllib3", "asyncio")


def setup_logging(settings: Settings | None = None) -> None:
    """Configure process-wide logging to stdout.

    DEBUG when settings.debug (cache HIT/MISS/SET lines are logged at
    DEBUG), otherwise INFO. Driver loggers stay at WARNING unless
    debugging. SQL echo is controlled by DATABASE_ECHO.
    """
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(level if settings.debug else logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
