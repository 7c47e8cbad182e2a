# File: src/mstair/maptree/xlogging/logger_factory.py
"""
Factory for CoreLogger instances.

Loggers are created through logging.getLogger() with CoreLogger temporarily
installed as the logger class, so they join the normal logging hierarchy
(parents, propagation, pytest's caplog).
"""

import logging

from mstair.maptree.xlogging.core_logger import CoreLogger


__all__ = ["create_logger"]


def create_logger(name: str, *, level: int | str | None = None) -> CoreLogger:
    """
    Return the CoreLogger registered under `name`, creating it if needed.

    :param name: Logger name, normally the calling module's ``__name__``.
    :param level: Optional explicit level, overriding environment configuration.
    :raises ValueError: If `name` is empty (the root logger is never a CoreLogger).
    :raises TypeError: If a plain logging.Logger already owns `name`.
    """
    if not name:
        raise ValueError("Logger name must be non-empty")

    existing = logging.Logger.manager.loggerDict.get(name)
    logger = existing if isinstance(existing, CoreLogger) else _get_core_logger_from_logging(name)

    if level is not None:
        logger.setLevel(level)
    return logger


def _get_core_logger_from_logging(name: str) -> CoreLogger:
    """
    Create or retrieve a CoreLogger through logging.getLogger().

    :raises TypeError: If getLogger() returns a different logger type.
    """
    logging_class = logging.getLoggerClass()
    if logging_class is not CoreLogger:
        logging.setLoggerClass(CoreLogger)
    try:
        logger = logging.getLogger(name)
    finally:
        if logging_class is not CoreLogger:
            logging.setLoggerClass(logging_class)
    if not isinstance(logger, CoreLogger):
        raise TypeError(f"Failed to create CoreLogger: {logger!r}")
    return logger


# End of file: src/mstair/maptree/xlogging/logger_factory.py
