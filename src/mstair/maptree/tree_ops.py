# File: src/mstair/maptree/tree_ops.py
"""
Put, fetch, update and delete values at any depth of a nested mapping.

Every operation takes a tree and a key path and returns a Result; the input
tree is never modified:

    >>> put({}, [1, 2, 3], "yes")
    Ok(value={1: {2: {3: 'yes'}}})
    >>> tree = put({}, [1, 2], "yes").unwrap()
    >>> put(tree, [1, 2, 3], "no")
    Err(error=NotAMap(key=2))
    >>> fetch({1: {2: {3: "yes"}}}, [1, 2])
    Ok(value={3: 'yes'})
    >>> fetch({1: {2: {3: "yes"}}}, [1, 2, 4])
    Err(error=NotFound())

The three mutating operations share one navigator and differ only in the edit
applied to the mapping that holds the final key.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from typing import Any

from mstair.maptree.keypath import as_keypath
from mstair.maptree.navigator import Tree, navigate, read
from mstair.maptree.result import Result


__all__ = [
    "delete",
    "fetch",
    "get",
    "put",
    "update",
]


def put(tree: Tree, path: Iterable[Hashable], leaf: Any) -> Result[dict[Hashable, Any]]:
    """
    Store `leaf` at `path`, creating missing intermediate mappings.

    Any value already at the final key is replaced, whether leaf or subtree.

    :return: ``Ok(new_tree)``, or ``Err(NotAMap(key))`` if a non-final key holds a leaf.
    :raises TypeError: If `path` is text or not iterable.
    :raises ValueError: If `path` is empty.
    """

    def set_key(mapping: Tree, key: Hashable) -> dict[Hashable, Any]:
        return {**mapping, key: leaf}

    return navigate(tree, as_keypath(path), set_key)


def update(
    tree: Tree,
    path: Iterable[Hashable],
    initial: Any,
    mapper: Callable[[Any], Any],
) -> Result[dict[Hashable, Any]]:
    """
    Store `mapper(current)` at `path`, or `initial` when the final key is absent.

    `mapper` is only called when the final key is present, and `initial` is
    stored as given (it is not passed through `mapper`). Exceptions raised by
    `mapper` propagate to the caller.

    :return: ``Ok(new_tree)``, or ``Err(NotAMap(key))`` if a non-final key holds a leaf.
    :raises TypeError: If `path` is text or not iterable.
    :raises ValueError: If `path` is empty.
    """

    def set_or_map_key(mapping: Tree, key: Hashable) -> dict[Hashable, Any]:
        if key in mapping:
            return {**mapping, key: mapper(mapping[key])}
        return {**mapping, key: initial}

    return navigate(tree, as_keypath(path), set_or_map_key)


def delete(tree: Tree, path: Iterable[Hashable]) -> Result[dict[Hashable, Any]]:
    """
    Remove the final key of `path`. Deleting an absent key is a no-op.

    Intermediate mappings along the path are kept even when left empty, and
    missing ones are created.

    :return: ``Ok(new_tree)``, or ``Err(NotAMap(key))`` if a non-final key holds a leaf.
    :raises TypeError: If `path` is text or not iterable.
    :raises ValueError: If `path` is empty.
    """

    def remove_key(mapping: Tree, key: Hashable) -> dict[Hashable, Any]:
        remaining = dict(mapping)
        remaining.pop(key, None)
        return remaining

    return navigate(tree, as_keypath(path), remove_key)


def fetch(tree: Tree, path: Iterable[Hashable]) -> Result[Any]:
    """
    Return the leaf or subtree stored at `path`.

    :return: ``Ok(value)``; ``Err(NotFound())`` if any key along the path is
        absent; ``Err(NotAMap(key))`` if a non-final key holds a leaf.
    :raises TypeError: If `path` is text or not iterable.
    :raises ValueError: If `path` is empty.
    """
    return read(tree, as_keypath(path))


def get(tree: Tree, path: Iterable[Hashable], default: Any = None) -> Any:
    """Return the value at `path`, or `default` when fetch() would fail."""
    return fetch(tree, path).unwrap_or(default)


# End of file: src/mstair/maptree/tree_ops.py
