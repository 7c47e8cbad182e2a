# File: src/mstair/maptree/xlogging/logger_constants.py

import logging


TRACE = logging.DEBUG - 1  # (9) LOG.trace() will not output at DEBUG level

DEFAULT_LOG_LEVEL = logging.WARNING
DEFAULT_LOG_FORMAT = r"%(levelName)s %(asctime)s %(fileAndLine)s [%(name)s] %(message)s"
DEFAULT_LOG_DATEFMT = "%H:%M:%S"
DEFAULT_LOG_TIMEZONE = "UTC"


_logging_constants_initialized = False


def initialize_logger_constants() -> None:
    """Register custom logging levels if not already registered."""
    global _logging_constants_initialized
    if _logging_constants_initialized:
        return
    _logging_constants_initialized = True
    if "TRACE" not in logging.getLevelNamesMapping():
        logging.addLevelName(TRACE, "TRACE")


# End of file: src/mstair/maptree/xlogging/logger_constants.py
