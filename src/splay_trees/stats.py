"""Structural statistics and invariant checks for splay trees."""

from dataclasses import dataclass
from typing import Any, Optional

from splay_trees.base import Node


@dataclass
class Stats:
    node_count: int
    leaf_count: int
    height: int
    least_key: Optional[Any]
    greatest_key: Optional[Any]
    is_search_tree: bool
    is_proper_tree: bool


def tree_height(root: Optional[Node]) -> int:
    """Number of nodes on the longest root-to-leaf path (0 for an empty tree)."""
    height = 0
    stack = [(root, 1)] if root is not None else []
    while stack:
        node, depth = stack.pop()
        height = max(height, depth)
        if node.left is not None:
            stack.append((node.left, depth + 1))
        if node.right is not None:
            stack.append((node.right, depth + 1))
    return height


def tree_stats_(root: Optional[Node]) -> Stats:
    """
    Returns aggregated statistics for a splay tree in **O(n)** time.

    The walk carries the open key interval each subtree must lie in, so the
    search tree property is checked against all ancestors, not only the
    parent. Every node is visited at most once: a node reached a second time
    marks the structure as not a proper tree and is not descended into again,
    which also keeps the walk finite on cyclic structures.
    """
    if root is None:
        return Stats(node_count     = 0,
                     leaf_count     = 0,
                     height         = 0,
                     least_key      = None,
                     greatest_key   = None,
                     is_search_tree = True,
                     is_proper_tree = True)

    stats = Stats(node_count=0, leaf_count=0, height=0,
                  least_key=None, greatest_key=None,
                  is_search_tree=True, is_proper_tree=True)

    seen = set()
    # (node, depth, exclusive lower bound, exclusive upper bound)
    stack = [(root, 1, None, None)]
    while stack:
        node, depth, low, high = stack.pop()
        if id(node) in seen:
            stats.is_proper_tree = False
            continue
        seen.add(id(node))

        key = node.key
        stats.node_count += 1
        stats.height = max(stats.height, depth)
        if node.is_leaf():
            stats.leaf_count += 1

        if (low is not None and not key > low) or (high is not None and not key < high):
            stats.is_search_tree = False

        if stats.least_key is None or key < stats.least_key:
            stats.least_key = key
        if stats.greatest_key is None or key > stats.greatest_key:
            stats.greatest_key = key

        if node.right is not None:
            stack.append((node.right, depth + 1, key, high))
        if node.left is not None:
            stack.append((node.left, depth + 1, low, key))

    return stats
