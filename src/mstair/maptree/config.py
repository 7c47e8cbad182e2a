# File: src/mstair/maptree/config.py
"""
Execution context detection used by the logging layer.

Tree operations are pure and read no configuration. This module only answers
questions the logging stack needs: whether we run under a test runner,
whether output is headed for an interactive terminal (coloured log lines),
and loading a `.env` file once so LOG_LEVEL* variables defined there apply.

Overrides are stored in thread-local state so a test can force a mode on its
own thread without leaking it elsewhere.

Exports:
- in_test_mode(): check or override whether code is in test mode.
- in_desktop_mode(): check or override whether log output may use colour.
- load_dotenv_once(): load `.env` into os.environ on first call only.
"""

from __future__ import annotations

import os
import sys
import threading
from dataclasses import dataclass

import dotenv


__all__ = [
    "in_desktop_mode",
    "in_test_mode",
    "load_dotenv_once",
]

_tls = threading.local()
_dotenv_lock = threading.Lock()
_dotenv_loaded = False


@dataclass
class TLSAttrs:
    """Thread-local overrides for environment context."""

    in_test_mode_override: bool | None = None
    in_desktop_mode_override: bool | None = None


def _get_tls() -> TLSAttrs:
    """Return the current thread's TLSAttrs instance, initializing if needed."""
    try:
        return _tls.state
    except AttributeError:
        _tls.state = TLSAttrs()
        return _tls.state


def in_test_mode(
    *,
    unset_override: bool = False,
    override: bool | None = None,
) -> bool:
    """
    Check if running in test mode, with optional override.

    Detection order:
      1. Explicit override (thread-local).
      2. Presence of pytest/unittest in sys.modules.
      3. Known environment variables (PYTEST_CURRENT_TEST, CI, APP_TEST_MODE).

    :param unset_override: If True, clears any prior override for this thread.
    :param override: If True or False, sets the override for this thread.
    :return: True if test mode is active, False otherwise.
    """
    tls = _get_tls()
    if unset_override:
        tls.in_test_mode_override = None
    if override is not None:
        tls.in_test_mode_override = override
        return override
    if tls.in_test_mode_override is not None:
        return tls.in_test_mode_override
    if "pytest" in sys.modules or "unittest" in sys.modules:
        return True

    env = os.environ
    return bool(
        env.get("PYTEST_CURRENT_TEST") or env.get("CI") == "true" or env.get("APP_TEST_MODE") == "1"
    )


def in_desktop_mode(
    *,
    unset_override: bool = False,
    override: bool | None = None,
) -> bool:
    """
    Determine if log output should be formatted for interactive display.

    Rules:
      - Explicit override wins.
      - NO_COLOR (any non-empty value) disables it.
      - Returns True in test mode.
      - Otherwise True only when stderr is a terminal.

    :param unset_override: If True, clears any prior override for this thread.
    :param override: If True or False, sets the override for this thread.
    :return: True if desktop mode is active, False otherwise.
    """
    tls = _get_tls()
    if unset_override:
        tls.in_desktop_mode_override = None
    if override is not None:
        tls.in_desktop_mode_override = override
        return override
    if tls.in_desktop_mode_override is not None:
        return tls.in_desktop_mode_override

    if os.environ.get("NO_COLOR"):
        return False
    if in_test_mode():
        return True
    stream = sys.stderr
    return bool(stream is not None and hasattr(stream, "isatty") and stream.isatty())


def load_dotenv_once(*, force: bool = False) -> bool:
    """
    Load variables from the nearest `.env` file into os.environ.

    Existing environment variables are never overridden. Subsequent calls are
    no-ops unless `force` is given.

    :param force: Reload even if a previous call already ran.
    :return: True if this call loaded at least one variable.
    """
    global _dotenv_loaded
    with _dotenv_lock:
        if _dotenv_loaded and not force:
            return False
        _dotenv_loaded = True
        dotenv_path = dotenv.find_dotenv(usecwd=True)
        if not dotenv_path:
            return False
        return dotenv.load_dotenv(dotenv_path=dotenv_path, override=False, encoding="utf-8")


# End of file: src/mstair/maptree/config.py
