"""Structured logging built on structlog and the stdlib logging module."""
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import List, Optional

import structlog

from gof_patterns.config.schemas import LoggingConfig

_SHARED_PROCESSORS = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _configure_structlog() -> None:
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _build_formatter(renderer: str) -> logging.Formatter:
    if renderer == "json":
        processors = [
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.dev.ConsoleRenderer(colors=False),
        ]
    return structlog.stdlib.ProcessorFormatter(
        processors=processors,
        foreign_pre_chain=_SHARED_PROCESSORS,
    )


def setup_logging(config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application.

    Console records always go to stderr so that demo output on stdout stays
    untouched.

    Args:
        config: Logging configuration. Defaults to LoggingConfig().

    Returns:
        Configured structlog logger for the package.
    """
    config = config or LoggingConfig()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level))

    formatter = _build_formatter(config.renderer)
    handlers: List[logging.Handler] = []

    if config.destination in ("file", "both"):
        log_dir = os.path.dirname(config.file_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if config.destination in ("stderr", "both"):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    # Remove any existing handlers and add new ones
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)

    _configure_structlog()

    logger = get_logger("gof_patterns")
    logger.debug(
        "Logging configured",
        log_level=config.level,
        log_destination=config.destination,
        log_file=config.file_path,
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to the stdlib logger ``name``."""
    if not structlog.is_configured():
        _configure_structlog()
    return structlog.get_logger(name)
