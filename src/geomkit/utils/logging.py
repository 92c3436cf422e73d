"""Logging utilities for geomkit.

Library modules log through the standard ``logging`` module under the
``geomkit`` namespace and stay silent until an application configures
handlers. ``configure_logging`` is the opt-in setup: it attaches console and
file handlers and routes structlog through them.
"""

import logging
from pathlib import Path

import structlog

from geomkit.config.settings import LoggingConfig

_FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (console only if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, skip the console handler

    Returns:
        Configured structlog logger
    """
    package_logger = logging.getLogger("geomkit")
    package_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        package_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("geomkit")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level if log_file else console_level,
    )

    return logger


def configure_from_settings(config: LoggingConfig, quiet: bool = False) -> structlog.stdlib.BoundLogger:
    """Configure logging from a LoggingConfig."""
    return configure_logging(
        log_file=config.log_file,
        console_level=config.log_level,
        file_level=config.file_log_level,
        quiet=quiet,
    )
