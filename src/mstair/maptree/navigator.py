# File: src/mstair/maptree/navigator.py
"""
Recursive traversal of nested mappings along a key path.

Two navigators share the same data model (a Tree is any Mapping whose values
are leaves or further Mappings):

- ``navigate(tree, path, edit)`` walks the path for a mutating operation.
  Missing intermediate mappings are created (auto-vivification), the caller's
  ``edit(mapping, key)`` is applied to the mapping holding the final key, and
  the spine is rebuilt back up to the root as new dicts. A non-final segment
  that holds a non-mapping value stops the walk with ``Err(NotAMap(key))``.

- ``read(tree, path)`` walks the path without creating anything, reporting
  ``Err(NotFound())`` for absence and ``Err(NotAMap(key))`` for a non-mapping
  value on a non-final segment.

Neither navigator mutates its input. Branches off the edited spine are shared
between the input and the output tree.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping
from typing import Any, TypeAlias

from mstair.maptree.keypath import KeyPath, format_keypath
from mstair.maptree.result import Err, NotAMap, NotFound, Ok, Result
from mstair.maptree.xlogging import create_logger


__all__ = [
    "Edit",
    "Tree",
    "is_tree",
    "navigate",
    "read",
]

Tree: TypeAlias = Mapping[Hashable, Any]
Edit: TypeAlias = Callable[[Tree, Hashable], dict[Hashable, Any]]
"""Mapping-level edit: receives the mapping holding the final key and that key."""

LOG = create_logger(__name__)


def is_tree(value: object) -> bool:
    """Return True if `value` is a subtree (a Mapping) rather than a leaf."""
    return isinstance(value, Mapping)


def navigate(tree: Tree, path: KeyPath, edit: Edit) -> Result[dict[Hashable, Any]]:
    """
    Apply `edit` at the position addressed by `path`, rebuilding the spine.

    :param tree: Root mapping; never mutated.
    :param path: Validated, non-empty key path (see keypath.as_keypath()).
    :param edit: Called once, with the mapping that holds the final key.
    :return: ``Ok(new_root)`` or ``Err(NotAMap(key))`` naming the first
        non-final segment whose value is not a mapping.
    """
    result = _navigate(tree, path, 0, edit)
    if isinstance(result, Err):
        LOG.debug("navigate %s: %s", format_keypath(path), result.error)
    return result


def _navigate(tree: Tree, path: KeyPath, depth: int, edit: Edit) -> Result[dict[Hashable, Any]]:
    key = path[depth]
    if depth == len(path) - 1:
        return Ok(edit(tree, key))

    if key not in tree:
        LOG.trace("creating mapping for %r at depth %d", key, depth)
        # An empty mapping holds no values, so nothing below can conflict
        subtree = _navigate({}, path, depth + 1, edit)
    elif is_tree(child := tree[key]):
        subtree = _navigate(child, path, depth + 1, edit)
    else:
        return Err(NotAMap(key))

    if isinstance(subtree, Err):
        return subtree
    return Ok({**tree, key: subtree.value})


def read(tree: Tree, path: KeyPath) -> Result[Any]:
    """
    Return the value (leaf or subtree, as stored) at `path`.

    :param tree: Root mapping; never mutated.
    :param path: Validated, non-empty key path.
    :return: ``Ok(value)``, ``Err(NotFound())`` if any key along the path is
        absent, or ``Err(NotAMap(key))`` if a non-final segment holds a leaf.
    """
    return _read(tree, path, 0)


def _read(tree: Tree, path: KeyPath, depth: int) -> Result[Any]:
    key = path[depth]
    if key not in tree:
        return Err(NotFound())
    value = tree[key]
    if depth == len(path) - 1:
        return Ok(value)
    if not is_tree(value):
        return Err(NotAMap(key))
    return _read(value, path, depth + 1)


# End of file: src/mstair/maptree/navigator.py
