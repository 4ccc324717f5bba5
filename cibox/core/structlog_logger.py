"""Structlog logger factory for cibox."""

import logging
from typing import Any

import structlog


def get_struct_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger with the given name.

    Args:
        name: The logger name, usually __name__

    Returns:
        A bound structlog logger instance

    Note: For exception logging with debug stack traces, use this pattern:
        try:
            # some operation
        except Exception as e:
            exc_info = traceback_enabled(logger)
            logger.error("operation_failed", error=str(e), exc_info=exc_info)
    """
    return structlog.get_logger(name)  # type: ignore[no-any-return]


def get_struct_logger_with_context(
    name: str, **context: Any
) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger with bound context.

    Example:
        logger = get_struct_logger_with_context(__name__, build_key="a1b2c3")
        logger.info("mirroring_source")  # Will include build_key in output
    """
    logger = structlog.get_logger(name)
    return logger.bind(**context)  # type: ignore[no-any-return]


def traceback_enabled(logger: Any) -> bool:
    """Return True when errors should be logged with a stack trace.

    Stack traces are attached only in debug mode. Works for configured
    stdlib-backed loggers as well as structlog's default filtering loggers.
    """
    if hasattr(logger, "isEnabledFor"):
        return bool(logger.isEnabledFor(logging.DEBUG))
    if hasattr(logger, "is_enabled_for"):
        return bool(logger.is_enabled_for(logging.DEBUG))
    return logging.getLogger().isEnabledFor(logging.DEBUG)
