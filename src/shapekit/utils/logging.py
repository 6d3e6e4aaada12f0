"""Logging utilities for Shapekit."""

import logging

import structlog

from shapekit.config.settings import LoggingConfig

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def configure_logging(
    config: LoggingConfig | None = None,
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Send structured logs to the console and, optionally, a file.

    Geometry calls are short and frequent, so nothing is written to disk
    unless ``config.log_file`` is set.

    Args:
        config: Levels and log file (defaults if None)
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    config = config or LoggingConfig()
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if config.log_file is not None:
        file_handler = logging.FileHandler(config.log_file, encoding="utf-8")
        file_handler.setLevel(config.file_log_level)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(config.log_level)
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

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

    logger = structlog.get_logger("shapekit")
    logger.info(
        "Logging initialized",
        log_file=str(config.log_file) if config.log_file else None,
        console_level=config.log_level,
        file_level=config.file_log_level,
    )

    return logger
