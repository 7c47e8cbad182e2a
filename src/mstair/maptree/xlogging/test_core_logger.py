# File: src/mstair/maptree/xlogging/test_core_logger.py
"""
Tests for CoreLogger, initialize_root(), create_logger() and CoreFormatter.

Confirms that:
- Level methods report the caller's file and function, not logger internals.
- prefix_with() scopes and nests message prefixes.
- initialize_root() is idempotent and only manages stderr handlers.
- CoreFormatter renders plain text when colour is off.
"""

from __future__ import annotations

import io
import logging
import sys
from collections.abc import Iterator

import pytest

from mstair.maptree import config as cfg
from mstair.maptree.xlogging import core_logger as cl
from mstair.maptree.xlogging.core_logger import CoreLogger, initialize_root
from mstair.maptree.xlogging.logger_constants import TRACE
from mstair.maptree.xlogging.logger_factory import create_logger
from mstair.maptree.xlogging.logger_formatter import CoreFormatter, get_color_code


@pytest.fixture
def clean_root() -> Iterator[logging.Logger]:
    """Reset root logger handlers, level and init flag around a test."""
    root = logging.getLogger()
    prev_level = root.level
    prev_handlers = list(root.handlers)
    prev_flag = getattr(root, cl._LOG_ROOT_ATTR_NAME, None)  # pyright: ignore[reportPrivateUsage]

    root.handlers = []
    root.setLevel(logging.WARNING)
    if prev_flag is not None:
        delattr(root, cl._LOG_ROOT_ATTR_NAME)  # pyright: ignore[reportPrivateUsage]

    yield root

    root.handlers = prev_handlers
    root.setLevel(prev_level)
    if prev_flag is not None:
        setattr(root, cl._LOG_ROOT_ATTR_NAME, prev_flag)  # pyright: ignore[reportPrivateUsage]
    elif hasattr(root, cl._LOG_ROOT_ATTR_NAME):  # pyright: ignore[reportPrivateUsage]
        delattr(root, cl._LOG_ROOT_ATTR_NAME)  # pyright: ignore[reportPrivateUsage]


@pytest.fixture
def no_color() -> Iterator[None]:
    cfg.in_desktop_mode(override=False)
    yield
    cfg.in_desktop_mode(unset_override=True)


# ----------------------------------------------------------------------
# create_logger
# ----------------------------------------------------------------------


def test_create_logger_returns_registered_core_logger() -> None:
    log = create_logger("maptree_tests.factory")
    assert isinstance(log, CoreLogger)
    assert create_logger("maptree_tests.factory") is log
    assert logging.getLogger("maptree_tests.factory") is log


def test_create_logger_applies_explicit_level() -> None:
    log = create_logger("maptree_tests.explicit", level=logging.DEBUG)
    assert log.level == logging.DEBUG


def test_create_logger_rejects_empty_name() -> None:
    with pytest.raises(ValueError):
        create_logger("")


def test_create_logger_keeps_default_logger_class() -> None:
    create_logger("maptree_tests.class_restored")
    assert logging.getLoggerClass() is logging.Logger


# ----------------------------------------------------------------------
# CoreLogger
# ----------------------------------------------------------------------


def test_trace_level_below_debug(caplog: pytest.LogCaptureFixture) -> None:
    log = create_logger("maptree_tests.trace", level=TRACE)
    caplog.set_level(TRACE, logger="maptree_tests.trace")
    log.trace("walking %r", "a")
    log.debug("done")
    levels = [(r.levelname, r.getMessage()) for r in caplog.records]
    assert levels == [("TRACE", "walking 'a'"), ("DEBUG", "done")]


def test_trace_suppressed_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    log = create_logger("maptree_tests.trace_off", level=logging.DEBUG)
    caplog.set_level(TRACE)
    log.trace("hidden")
    assert not [r for r in caplog.records if r.name == "maptree_tests.trace_off"]


@pytest.mark.parametrize("method", ["trace", "debug", "info", "warning", "error", "critical"])
def test_caller_is_reported(caplog: pytest.LogCaptureFixture, method: str) -> None:
    log = create_logger("maptree_tests.caller", level=TRACE)
    caplog.set_level(TRACE, logger="maptree_tests.caller")
    getattr(log, method)("message")
    (record,) = caplog.records
    assert record.funcName == "test_caller_is_reported"
    assert record.pathname == __file__


def test_direct_log_reports_caller(caplog: pytest.LogCaptureFixture) -> None:
    log = create_logger("maptree_tests.direct", level=logging.INFO)
    caplog.set_level(logging.INFO, logger="maptree_tests.direct")
    log.log(logging.INFO, "direct")
    assert caplog.records[0].funcName == "test_direct_log_reports_caller"


def test_exception_attaches_exc_info(caplog: pytest.LogCaptureFixture) -> None:
    log = create_logger("maptree_tests.exc", level=logging.ERROR)
    caplog.set_level(logging.ERROR, logger="maptree_tests.exc")
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        log.exception("failed")
    (record,) = caplog.records
    assert record.exc_info is not None
    assert record.exc_info[0] is RuntimeError


def test_prefix_with_nests_and_resets(caplog: pytest.LogCaptureFixture) -> None:
    log = create_logger("maptree_tests.prefix", level=logging.INFO)
    caplog.set_level(logging.INFO, logger="maptree_tests.prefix")
    with log.prefix_with("[outer]"):
        log.info("one")
        with log.prefix_with("[inner]"):
            log.info("two")
    log.info("three")
    assert [r.getMessage() for r in caplog.records] == [
        "[outer] > one",
        "[outer] > [inner] > two",
        "three",
    ]


def test_logger_level_not_below_root(clean_root: logging.Logger) -> None:
    log = CoreLogger("maptree_tests.unattached", level=TRACE)
    assert log.level == logging.WARNING


def test_repr_shows_level() -> None:
    log = create_logger("maptree_tests.repr", level=logging.INFO)
    assert repr(log) == "<CoreLogger 'maptree_tests.repr' INFO=20>"


# ----------------------------------------------------------------------
# initialize_root
# ----------------------------------------------------------------------


def _stderr_handlers(root: logging.Logger) -> list[logging.Handler]:
    return [
        h
        for h in root.handlers
        if type(h) is logging.StreamHandler and h.stream is sys.stderr  # type: ignore[attr-defined]
    ]


def test_initialize_root_installs_one_handler(clean_root: logging.Logger) -> None:
    initialize_root()
    initialize_root()
    handlers = _stderr_handlers(clean_root)
    assert len(handlers) == 1
    assert isinstance(handlers[0].formatter, CoreFormatter)


def test_initialize_root_force_replaces_handler(clean_root: logging.Logger) -> None:
    initialize_root()
    first = _stderr_handlers(clean_root)[0]
    initialize_root(force=True)
    handlers = _stderr_handlers(clean_root)
    assert len(handlers) == 1
    assert handlers[0] is not first


def test_initialize_root_sets_level_by_name(clean_root: logging.Logger) -> None:
    initialize_root(level="debug")
    assert clean_root.level == logging.DEBUG


def test_initialize_root_keeps_foreign_handlers(clean_root: logging.Logger) -> None:
    foreign = logging.StreamHandler(io.StringIO())
    clean_root.addHandler(foreign)
    initialize_root(force=True)
    assert foreign in clean_root.handlers


def test_first_emission_initializes_root(clean_root: logging.Logger) -> None:
    log = create_logger("maptree_tests.lazy_root", level=logging.WARNING)
    assert not _stderr_handlers(clean_root)
    log.warning("hello")
    assert len(_stderr_handlers(clean_root)) == 1


# ----------------------------------------------------------------------
# CoreFormatter
# ----------------------------------------------------------------------


def _record(msg: str = "hello", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="maptree_tests.fmt",
        level=level,
        pathname=__file__,
        lineno=42,
        msg=msg,
        args=(),
        exc_info=None,
    )


def test_formatter_plain_output(no_color: None) -> None:
    formatter = CoreFormatter("%(levelName)s %(fileAndLine)s [%(name)s] %(message)s")
    text = formatter.format(_record())
    assert text.startswith("INFO ")
    assert text.endswith(":42 [maptree_tests.fmt] hello")
    assert "\033[" not in text


def test_formatter_uses_timezone(no_color: None) -> None:
    formatter = CoreFormatter("%(asctime)s", "%Z", timezone="UTC")
    assert formatter.format(_record()) == "UTC"


def test_formatter_unknown_timezone_falls_back_to_utc(capsys: pytest.CaptureFixture[str]) -> None:
    formatter = CoreFormatter(timezone="Nowhere/Atlantis")
    assert formatter.tz.zone == "UTC"
    assert "Nowhere/Atlantis" in capsys.readouterr().err


def test_color_codes_only_in_desktop_mode(no_color: None) -> None:
    assert get_color_code("ERROR") == ""
    cfg.in_desktop_mode(override=True)
    assert get_color_code("ERROR").startswith("\033[38;2;")
    assert get_color_code("red") == "\033[31m"


# End of file: src/mstair/maptree/xlogging/test_core_logger.py
