"""structlog configuration for the fee tracker entry points."""

import logging
import os

import structlog

LOG_LEVEL_ENV = "FEE_TRACKER_LOG_LEVEL"


def configure_logging(level: str | None = None) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        level: Level name (e.g. "DEBUG"). Defaults to FEE_TRACKER_LOG_LEVEL,
            then INFO.

    Raises:
        ValueError: If the level name is unknown
    """
    name = (level or os.environ.get(LOG_LEVEL_ENV, "INFO")).upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {name}")

    logging.basicConfig(level=numeric, format="%(message)s")
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(max(numeric, logging.WARNING))

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric),
        cache_logger_on_first_use=True,
    )
