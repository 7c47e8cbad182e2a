# File: src/mstair/maptree/keypath.py
"""
Key path validation and conversion helpers.

A key path is a non-empty ordered sequence of hashable keys, outermost first.
Any iterable of keys is accepted and normalized to a tuple. Text is never
treated as a path on its own, because iterating a string yields characters;
use ``parse_keypath("a.b.c")`` to split dot-separated text explicitly.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import Any, TypeAlias


__all__ = [
    "KeyPath",
    "as_keypath",
    "format_keypath",
    "parse_keypath",
]

KeyPath: TypeAlias = tuple[Hashable, ...]


def as_keypath(path: Iterable[Hashable]) -> KeyPath:
    """
    Validate a key path and return it as a tuple.

    :param path: Iterable of keys, outermost first.
    :return: The keys as a tuple.
    :raises TypeError: If `path` is a str/bytes or is not iterable.
    :raises ValueError: If `path` contains no keys.
    """
    if isinstance(path, str | bytes | bytearray):
        raise TypeError(
            f"Key path must be a sequence of keys, not {type(path).__name__} "
            f"(use parse_keypath() for dotted text): {path!r}"
        )
    try:
        keys = tuple(path)
    except TypeError:
        raise TypeError(f"Key path must be iterable (got {type(path).__name__})") from None
    if not keys:
        raise ValueError("Key path must contain at least one key")
    return keys


def parse_keypath(text: str, sep: str = ".") -> tuple[str, ...]:
    """
    Split dotted text such as "tool.setuptools.packages" into a key path.

    :param text: Separator-delimited keys.
    :param sep: Segment separator, default ".".
    :return: Tuple of string keys.
    :raises ValueError: If `text` is empty or contains an empty segment.
    """
    if not sep:
        raise ValueError("Separator must be a non-empty string")
    if not text:
        raise ValueError("Key path text is empty")
    keys = tuple(text.split(sep))
    if any(not k for k in keys):
        raise ValueError(f"Empty segment in key path {text!r}")
    return keys


def format_keypath(path: Iterable[Any]) -> str:
    """Render a key path for diagnostics, e.g. ``[1, 'b', 3]``."""
    return "[" + ", ".join(repr(k) for k in path) + "]"


# End of file: src/mstair/maptree/keypath.py
