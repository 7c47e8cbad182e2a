"""
package: mstair.maptree.xlogging
"""

# <AUTOGEN_INIT>
from mstair.maptree.xlogging import (
    core_logger,
    logger_constants,
    logger_factory,
    logger_formatter,
    logger_util,
)


__all__ = [
    "core_logger",
    "logger_constants",
    "logger_factory",
    "logger_formatter",
    "logger_util",
]
# </AUTOGEN_INIT>

from mstair.maptree.xlogging.core_logger import CoreLogger, initialize_root
from mstair.maptree.xlogging.logger_constants import TRACE
from mstair.maptree.xlogging.logger_factory import create_logger


__all__ += ["CoreLogger", "TRACE", "create_logger", "initialize_root"]
