"""
Splay trees: self-adjusting binary search trees keyed by real numbers.

The engine works on root nodes directly (`splay`, `insert`, `delete`,
`find_min`); `SplayTree` wraps a root reference for object-style use.
"""

from splay_trees.base import (
    Node,
    EmptyTreeError,
)

from splay_trees.splay_tree import (
    SplayTree,
    rotate_left,
    rotate_right,
    splay,
    insert,
    delete,
    find_min,
)

__all__ = [
    'Node',
    'EmptyTreeError',
    'SplayTree',
    'rotate_left',
    'rotate_right',
    'splay',
    'insert',
    'delete',
    'find_min',
]
