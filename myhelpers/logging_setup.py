"""
Logging Setup
=============
Structured logging configuration for applications using myhelpers.

The library only emits events through structlog; it never configures
logging on import. Call setup_logging once at application startup.

Usage:
    from myhelpers.logging_setup import setup_logging

    logger = setup_logging(level="DEBUG", json_output=True)
    logger.info("service started")
"""

import logging
import sys

import structlog


def setup_logging(level: str = "INFO", json_output: bool = False):
    """
    Configure structlog on top of the standard library logging module.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: Render JSON lines instead of console output

    Returns:
        Configured structlog logger
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
        force=True,
    )

    return structlog.stdlib.get_logger()
