# File: src/mstair/maptree/xlogging/logger_util.py
"""
Environment variable-driven log level resolution.

Recognized variables:
- LOG_LEVEL / LOG_LEVELS: a DSL of ``pattern:LEVEL`` fragments separated by
  ``;``, ``,`` or spaces. A bare ``LEVEL`` (or ``root:LEVEL``) sets the default.
  Example: ``LOG_LEVELS="mstair.maptree.*:TRACE; WARNING"``.
- LOG_LEVEL_<NAME>: per-logger override, where ``_`` in NAME stands for ``.``
  and ``__`` for a literal underscore. Example: ``LOG_LEVEL_MSTAIR_MAPTREE=DEBUG``.

Resolution for a logger name: exact > ancestor > best glob > default > fallback.

This module only decides levels for CoreLogger instances; it never lowers the
root logger's threshold. Use initialize_root(level=...) for that.
"""

from __future__ import annotations

import fnmatch
import logging
import os
import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Final, NamedTuple

from mstair.maptree.config import load_dotenv_once
from mstair.maptree.xlogging.logger_constants import DEFAULT_LOG_LEVEL, initialize_logger_constants


__all__ = ["LogLevelConfig", "LogPatternLevel", "logger_name_from_env_suffix"]

_FRAGMENT_SEPARATOR_RX: Final[re.Pattern[str]] = re.compile(r"[;, ]+")
_ASSIGNMENT_OPERATOR_RX: Final[re.Pattern[str]] = re.compile(r"[:=]+")
_ENV_NAME_RX: Final[re.Pattern[str]] = re.compile(r"^LOG_LEVELS?(?P<SUFFIX>(?:_[A-Z][A-Z0-9_]*)*)$")

_log_level_config_instance: LogLevelConfig | None = None


class LogPatternLevel(NamedTuple):
    """One parsed ``pattern:LEVEL`` fragment; an empty pattern means default."""

    pattern: str
    level: int


def logger_name_from_env_suffix(suffix: str) -> str:
    """
    Convert an env var suffix into a logger name.

    "MSTAIR_MAPTREE" -> "mstair.maptree", "MY__APP" -> "my_app", "ROOT" -> "".
    """
    suffix = suffix.lstrip("_")
    if not suffix or suffix.upper() == "ROOT":
        return ""
    return suffix.replace("__", "\0").replace("_", ".").replace("\0", "_").lower()


def _level_names_mapping() -> dict[str, int]:
    initialize_logger_constants()
    return {
        k.upper(): v
        for k, v in logging.getLevelNamesMapping().items()
        if isinstance(k, str) and k.isupper() and isinstance(v, int)
    }


def _strip_quotes(text: str) -> str:
    return text.strip().strip("'\"")


@dataclass(slots=True)
class LogLevelConfig:
    """
    Pattern->level table built from the environment.

    Pass `pattern_to_level` explicitly to bypass the environment (tests do).
    """

    pattern_to_level: dict[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.pattern_to_level:
            self.update_from_environment()

    @classmethod
    def get_instance(cls) -> LogLevelConfig:
        """Return the process-wide LogLevelConfig, creating it on first use."""
        global _log_level_config_instance
        if _log_level_config_instance is None:
            _log_level_config_instance = cls()
        return _log_level_config_instance

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the process-wide instance so the next lookup rereads the environment."""
        global _log_level_config_instance
        _log_level_config_instance = None

    def update_from_environment(self) -> None:
        """Rebuild the pattern table from current environment variables."""
        load_dotenv_once()
        level_map = _level_names_mapping()
        self.pattern_to_level.clear()
        # Reverse sort: LOG_LEVEL_<NAME> entries are applied before LOG_LEVELS/LOG_LEVEL
        for name, value in sorted(os.environ.items(), reverse=True):
            match = _ENV_NAME_RX.match(name)
            if match is None:
                continue
            module = logger_name_from_env_suffix(match["SUFFIX"])
            for entry in self.parse_dsl(value, level_map, module=module):
                self.pattern_to_level[entry.pattern] = entry.level

    @staticmethod
    def parse_dsl(
        value: str, level_map: dict[str, int], *, module: str = ""
    ) -> Iterator[LogPatternLevel]:
        """
        Parse one variable value into (pattern, level) entries.

        Unknown level names are skipped. When `module` is given (from a
        LOG_LEVEL_<NAME> variable) patterns are scoped beneath it.
        """
        for fragment in _FRAGMENT_SEPARATOR_RX.split(value):
            if not fragment.strip():
                continue
            parts = _ASSIGNMENT_OPERATOR_RX.split(fragment, maxsplit=1)
            if len(parts) == 2:
                pattern, level_name = _strip_quotes(parts[0]), _strip_quotes(parts[1])
            else:
                pattern, level_name = "", _strip_quotes(parts[0])

            if module:
                pattern = module if pattern in {"", "root"} else f"{module}.{pattern}"
            if pattern.lower() == "root":
                pattern = ""

            level = level_map.get(level_name.upper(), logging.NOTSET)
            if level == logging.NOTSET:
                continue
            yield LogPatternLevel(pattern, level)

    def get_effective_level(self, logger_name: str, *, default: int = DEFAULT_LOG_LEVEL) -> int:
        """Return the configured level for `logger_name`."""
        name_lc = logger_name.lower()
        named = {k.lower(): v for k, v in self.pattern_to_level.items() if k}

        # Exact, then nearest ancestor
        candidates = [name_lc, *_ancestors(name_lc)]
        for candidate in candidates:
            if candidate in named:
                return named[candidate]

        # Best glob: longest literal prefix wins
        best: tuple[int, int] | None = None
        for pattern, level in named.items():
            if not _is_glob(pattern) or not fnmatch.fnmatchcase(name_lc, pattern):
                continue
            score = _glob_specificity(pattern)
            if best is None or score > best[0]:
                best = (score, level)
        if best is not None:
            return best[1]

        return self.pattern_to_level.get("", default)


def _ancestors(logger_name: str) -> list[str]:
    """Dotted ancestors, most specific first: "a.b.c" -> ["a.b", "a"]."""
    parts = logger_name.split(".")
    return [".".join(parts[:i]) for i in range(len(parts) - 1, 0, -1)]


def _is_glob(pattern: str) -> bool:
    return any(ch in pattern for ch in "*?[")


def _glob_specificity(pattern: str) -> int:
    return min((i for i, ch in enumerate(pattern) if ch in "*?["), default=len(pattern))


# End of file: src/mstair/maptree/xlogging/logger_util.py
