# File: src/mstair/maptree/xlogging/core_logger.py
"""
Logger class with environment-driven levels and scoped message prefixes.

Example:
    >>> from mstair.maptree.xlogging import create_logger
    >>> LOG = create_logger(__name__)
    >>> LOG.trace("descending into %r", key)
    >>>
    >>> with LOG.prefix_with("[put]"):
    ...     LOG.debug("conflict at %r", key)

Design:
- Only the root logger owns handlers; CoreLogger instances propagate.
- A CoreLogger's level comes from LogLevelConfig, raised to at least the root
  logger's effective level at construction.
- initialize_root() is the only place that installs a handler. It runs
  lazily on the first record that passes the level check, never on import.
"""

from __future__ import annotations

import contextvars
import logging
import os
import re
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, TextIO

from mstair.maptree.xlogging.logger_constants import (
    DEFAULT_LOG_DATEFMT,
    DEFAULT_LOG_FORMAT,
    TRACE,
    initialize_logger_constants,
)
from mstair.maptree.xlogging.logger_formatter import CoreFormatter
from mstair.maptree.xlogging.logger_util import LogLevelConfig


__all__: list[str] = [
    "CoreLogger",
    "initialize_root",
]

_LOG_ROOT_ATTR_NAME = "_mstair_maptree_corelogger_initialized"

_log_prefix: contextvars.ContextVar[str] = contextvars.ContextVar("log_prefix", default="")


class CoreLogger(logging.Logger):
    """
    logging.Logger with a TRACE level, env-configured levels, and prefix scopes.

    Every level method funnels through log(), which keeps caller resolution
    (filename/lineno) pointed at the code that called the level method.
    """

    def __init__(self, name: str, level: int | str = logging.NOTSET) -> None:
        initialize_logger_constants()
        if level in {logging.NOTSET, "NOTSET", ""}:
            level = LogLevelConfig.get_instance().get_effective_level(name)
        super().__init__(name, level)

        root_level = logging.getLogger().getEffectiveLevel()
        if self.level < root_level:
            self.setLevel(root_level)

    def __repr__(self) -> str:
        level = self.getEffectiveLevel()
        return f"<{type(self).__name__} '{self.name}' {logging.getLevelName(level)}={level}>"

    def log(self, level: int, msg: object, *args: Any, **kwargs: Any) -> None:
        """Emit `msg` at `level`, applying the active prefix."""
        if not self.isEnabledFor(level):
            return
        initialize_root()

        if prefix := _log_prefix.get():
            msg = f"{prefix}{msg}"

        # +1 for this frame; level methods add their own frame before calling here
        kwargs["stacklevel"] = kwargs.get("stacklevel", 1) + 1
        super().log(level, msg, *args, **kwargs)

    def _log_from_level_method(
        self, level: int, msg: object, args: tuple[Any, ...], kwargs: dict[str, Any]
    ) -> None:
        kwargs["stacklevel"] = kwargs.get("stacklevel", 1) + 2
        self.log(level, msg, *args, **kwargs)

    def trace(self, msg: object, *args: Any, **kwargs: Any) -> None:
        """Log a message at TRACE level (below DEBUG)."""
        self._log_from_level_method(TRACE, msg, args, kwargs)

    def debug(self, msg: object, *args: Any, **kwargs: Any) -> None:
        self._log_from_level_method(logging.DEBUG, msg, args, kwargs)

    def info(self, msg: object, *args: Any, **kwargs: Any) -> None:
        self._log_from_level_method(logging.INFO, msg, args, kwargs)

    def warning(self, msg: object, *args: Any, **kwargs: Any) -> None:
        self._log_from_level_method(logging.WARNING, msg, args, kwargs)

    def error(self, msg: object, *args: Any, **kwargs: Any) -> None:
        self._log_from_level_method(logging.ERROR, msg, args, kwargs)

    def critical(self, msg: object, *args: Any, **kwargs: Any) -> None:
        self._log_from_level_method(logging.CRITICAL, msg, args, kwargs)

    def exception(self, msg: object, *args: Any, exc_info: Any = True, **kwargs: Any) -> None:
        """Log at ERROR level with the current exception attached."""
        kwargs["exc_info"] = exc_info
        self._log_from_level_method(logging.ERROR, msg, args, kwargs)

    @contextmanager
    def prefix_with(self, prefix: str) -> Iterator[None]:
        """
        Prefix every message logged in this context (any CoreLogger, same task/thread).

        Nested prefixes accumulate: "[a] > [b] > message".

        :param prefix: Text placed before each message.
        """
        current = _log_prefix.get()
        token = _log_prefix.set(f"{current}{prefix} > ")
        try:
            yield
        finally:
            _log_prefix.reset(token)


def initialize_root(
    fmt: str | None = None,
    datefmt: str | None = None,
    level: int | str | None = None,
    force: bool = False,
) -> None:
    """
    Idempotently give the root logger one stderr handler using CoreFormatter.

    - If `force=False` and already initialized, returns immediately.
    - If `force=True`, replaces existing stderr handlers.
    - Sets the root level to `level` if provided, otherwise WARNING if unset.
    - Never touches non-stderr handlers owned by the host application.

    :param fmt: Format string. Defaults to LOG_FORMAT or the package default.
    :param datefmt: Date format. Defaults to LOG_DATEFMT or the package default. If it
        contains no percent directives, timestamps are removed from the format.
    :param level: Root logger level (int or name).
    :param force: Reinitialize even if already initialized.
    """
    root = logging.getLogger()
    if getattr(root, _LOG_ROOT_ATTR_NAME, False) and not force:
        return
    setattr(root, _LOG_ROOT_ATTR_NAME, True)
    initialize_logger_constants()

    if force:
        root.handlers = [h for h in root.handlers if not _is_stderr_handler(h)]

    fmt = fmt or os.environ.get("LOG_FORMAT") or DEFAULT_LOG_FORMAT
    datefmt = datefmt if datefmt is not None else os.environ.get("LOG_DATEFMT", DEFAULT_LOG_DATEFMT)
    if "%" not in datefmt:
        fmt = re.sub(r"\s*%\(asctime\)s\s*", " ", fmt).strip()
        datefmt = None

    stderr_handlers = [h for h in root.handlers if _is_stderr_handler(h)]
    if not stderr_handlers:
        handler: logging.StreamHandler[TextIO] = logging.StreamHandler(sys.stderr)
        handler.setFormatter(CoreFormatter(fmt, datefmt))
        root.addHandler(handler)
    elif not any(isinstance(h.formatter, CoreFormatter) for h in stderr_handlers):
        stderr_handlers[0].setFormatter(CoreFormatter(fmt, datefmt))

    if level is not None:
        if isinstance(level, str):
            level = logging.getLevelNamesMapping().get(level.upper(), logging.WARNING)
        root.setLevel(level)
    elif root.level == logging.NOTSET:
        root.setLevel(logging.WARNING)


def _is_stderr_handler(handler: logging.Handler) -> bool:
    return type(handler) is logging.StreamHandler and handler.stream is sys.stderr


# End of file: src/mstair/maptree/xlogging/core_logger.py
