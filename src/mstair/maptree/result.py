# File: src/mstair/maptree/result.py
"""
Explicit success/failure values returned by every tree operation.

Operations never raise for path conflicts or absence; they return either
``Ok(value)`` or ``Err(error)`` where ``error`` is one of the two tree errors:

- ``NotFound()``: a key along the path is absent (fetch only).
- ``NotAMap(key)``: a non-final path segment resolves to a non-mapping value.

Both wrappers are frozen dataclasses, so they compare structurally and work
with ``match`` statements:

    >>> match fetch(tree, ["a", "b"]):
    ...     case Ok(value):
    ...         use(value)
    ...     case Err(NotAMap(key)):
    ...         complain(key)
    ...     case Err(NotFound()):
    ...         pass

Callers that prefer exceptions can call ``unwrap()``, which raises
``KeyPathNotFoundError`` (a ``KeyError``) or ``NotAMapError`` (a ``TypeError``).
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any, Generic, Literal, NoReturn, TypeAlias, TypeVar


__all__ = [
    "Err",
    "KeyPathNotFoundError",
    "MapTreeError",
    "NotAMap",
    "NotAMapError",
    "NotFound",
    "Ok",
    "Result",
    "TreeError",
]


# ---------- Error values ----------


@dataclass(frozen=True, slots=True)
class NotFound:
    """A key (final or intermediate) was absent while reading a path."""


@dataclass(frozen=True, slots=True)
class NotAMap:
    """A non-final path segment resolved to a value that is not a mapping."""

    key: Hashable


TreeError: TypeAlias = NotFound | NotAMap


# ---------- Exception forms (raised only by unwrap) ----------


class MapTreeError(Exception):
    """Base class for exceptions raised when unwrapping a failed result."""

    error: TreeError

    def __init__(self, error: TreeError, message: str) -> None:
        super().__init__(message)
        self.error = error


class KeyPathNotFoundError(MapTreeError, KeyError):
    """Raised by ``Err(NotFound()).unwrap()``."""

    def __init__(self, error: NotFound) -> None:
        super().__init__(error, "Key path not found")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0])


class NotAMapError(MapTreeError, TypeError):
    """Raised by ``Err(NotAMap(key)).unwrap()``."""

    key: Hashable

    def __init__(self, error: NotAMap) -> None:
        super().__init__(error, f"Value at key {error.key!r} is not a mapping")
        self.key = error.key


def _raise_for(error: TreeError) -> NoReturn:
    if isinstance(error, NotAMap):
        raise NotAMapError(error)
    raise KeyPathNotFoundError(error)


# ---------- Result wrappers ----------


T = TypeVar("T")
D = TypeVar("D")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful operation outcome carrying the produced value."""

    value: T

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    def unwrap(self) -> T:
        """Return the carried value."""
        return self.value

    def unwrap_or(self, default: Any) -> T:
        del default
        return self.value


@dataclass(frozen=True, slots=True)
class Err:
    """Failed operation outcome carrying a ``NotFound`` or ``NotAMap`` error."""

    error: TreeError

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True

    def unwrap(self) -> NoReturn:
        """
        Raise the exception form of the carried error.

        :raises KeyPathNotFoundError: for ``NotFound``.
        :raises NotAMapError: for ``NotAMap``.
        """
        _raise_for(self.error)

    def unwrap_or(self, default: D) -> D:
        return default


Result: TypeAlias = Ok[T] | Err


# End of file: src/mstair/maptree/result.py
