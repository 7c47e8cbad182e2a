"""
package: mstair.maptree
"""

# <AUTOGEN_INIT>
from mstair.maptree import (
    config,
    keypath,
    navigator,
    result,
    tree_ops,
    xlogging,
)


__all__ = [
    "config",
    "keypath",
    "navigator",
    "result",
    "tree_ops",
    "xlogging",
]
# </AUTOGEN_INIT>

from mstair.maptree.keypath import as_keypath, parse_keypath
from mstair.maptree.result import (
    Err,
    KeyPathNotFoundError,
    MapTreeError,
    NotAMap,
    NotAMapError,
    NotFound,
    Ok,
    Result,
)
from mstair.maptree.tree_ops import delete, fetch, get, put, update


__all__ += [
    "Err",
    "KeyPathNotFoundError",
    "MapTreeError",
    "NotAMap",
    "NotAMapError",
    "NotFound",
    "Ok",
    "Result",
    "as_keypath",
    "delete",
    "fetch",
    "get",
    "parse_keypath",
    "put",
    "update",
]

__version__ = "0.1.0"
