# File: src/mstair/maptree/xlogging/logger_formatter.py

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Literal

import pytz
from colorama import Fore

from mstair.maptree import config as cfg
from mstair.maptree.xlogging.logger_constants import DEFAULT_LOG_TIMEZONE


__all__ = ["CoreFormatter", "get_color_code", "rgb_code"]


FormatStyle = Literal["%", "{", "$"]


def rgb_code(r: int, g: int, b: int) -> str:
    """
    Convert RGB values to an ANSI 24-bit foreground escape code.

    :param r: Red component (0-255)
    :param g: Green component (0-255)
    :param b: Blue component (0-255)
    """
    return f"\033[38;2;{max(0, min(255, r))};{max(0, min(255, g))};{max(0, min(255, b))}m"


COLOR_MAP: dict[str | None, str] = {
    "fileAndLine": rgb_code(64, 128, 160),
    "TRACE": rgb_code(96, 0, 64),
    "DEBUG": rgb_code(128, 128, 128),
    "INFO": rgb_code(184, 184, 216),
    "WARNING": rgb_code(192, 176, 0),
    "ERROR": rgb_code(224, 128, 0),
    "CRITICAL": rgb_code(255, 64, 64),
    None: Fore.RESET,
}


def get_color_code(key: str | None = None) -> str:
    """
    Return the escape code for a level name or record field, or "" when colour is off.

    Unknown keys fall back to colorama's named colours ("red", "light_blue"), then RESET.
    """
    if not cfg.in_desktop_mode():
        return ""
    if not key or key == "RESET":
        return Fore.RESET
    if key in COLOR_MAP:
        return COLOR_MAP[key]

    clean_key = key.upper().replace("BRIGHT", "LIGHT")
    if "LIGHT" in clean_key and not clean_key.endswith("_EX"):
        clean_key += "_EX"
    return getattr(Fore, clean_key, Fore.RESET)


class CoreFormatter(logging.Formatter):
    """
    Formatter for CoreLogger records.

    Adds two record fields usable in the format string:
    - ``%(fileAndLine)s``: caller path relative to the working directory, plus line.
    - ``%(levelName)s``: the level name, coloured in desktop mode.

    Timestamps are rendered in the timezone named by LOG_TIMEZONE (default UTC).
    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        style: FormatStyle = "%",
        validate: bool = True,
        *,
        defaults: dict[str, Any] | None = None,
        timezone: str | None = None,
    ) -> None:
        super().__init__(
            fmt=fmt, datefmt=datefmt, style=style, validate=validate, defaults=defaults
        )
        tz_name = timezone or os.environ.get("LOG_TIMEZONE") or DEFAULT_LOG_TIMEZONE
        try:
            self.tz = pytz.timezone(tz_name)
        except pytz.UnknownTimeZoneError:
            print(f"Unknown LOG_TIMEZONE {tz_name!r}, using UTC", file=sys.stderr)
            self.tz = pytz.utc

    def format(self, record: logging.LogRecord) -> str:
        record.fileAndLine = self.format_fileAndLine(record.pathname, record.lineno)
        record.levelName = get_color_code(record.levelname) + record.levelname + get_color_code()
        message = super().format(record)
        return get_color_code(record.levelname) + message + get_color_code()

    @staticmethod
    def format_file(file: str) -> str:
        """Return `file` relative to the working directory when possible, in POSIX form."""
        if not file:
            return "<unknown file>"
        path = Path(file)
        try:
            return path.absolute().relative_to(Path.cwd()).as_posix()
        except ValueError:
            return path.as_posix()

    def format_fileAndLine(self, file: str, lineno: int) -> str:
        file_and_line = f"{self.format_file(file)}:{lineno}"
        return get_color_code("fileAndLine") + file_and_line + get_color_code()

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        stamp = datetime.fromtimestamp(record.created, self.tz)
        if datefmt:
            try:
                return stamp.strftime(datefmt)
            except ValueError as e:
                print(f"Bad LOG_DATEFMT {datefmt!r}: {e}", file=sys.stderr)
        return stamp.isoformat(timespec="milliseconds")


# End of file: src/mstair/maptree/xlogging/logger_formatter.py
