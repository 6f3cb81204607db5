"""Random tree builders and reference helpers for splay tree tests."""
# pylint: skip-file

import logging
from typing import List, Optional, Tuple

import numpy as np

from splay_trees.base import Node
from splay_trees.splay_tree import insert, iter_keys, rotate_left, rotate_right
from splay_trees.stats import tree_stats_

from tests.utils import assert_tree_invariants_log


def reference_splay(root: Optional[Node], key) -> Optional[Node]:
    """
    Plain recursive top-down splay. Used as the oracle the engine's
    stack-based splay must match node for node. Only safe on shallow trees.
    """
    if root is None or root.key == key:
        return root

    if key < root.key:
        if root.left is None:
            return root
        if key < root.left.key:
            root.left.left = reference_splay(root.left.left, key)
            root = rotate_right(root)
        elif key > root.left.key:
            root.left.right = reference_splay(root.left.right, key)
            if root.left.right is not None:
                root.left = rotate_left(root.left)
        return root if root.left is None else rotate_right(root)

    if root.right is None:
        return root
    if key < root.right.key:
        root.right.left = reference_splay(root.right.left, key)
        if root.right.left is not None:
            root.right = rotate_right(root.right)
    elif key > root.right.key:
        root.right.right = reference_splay(root.right.right, key)
        root = rotate_left(root)
    return root if root.right is None else rotate_left(root)


def clone_tree(root: Optional[Node]) -> Optional[Node]:
    if root is None:
        return None
    return Node(root.key, clone_tree(root.left), clone_tree(root.right))


def tree_shape(root: Optional[Node]) -> Tuple:
    """Nested (key, left, right) tuples; equal shapes mean identical trees."""
    if root is None:
        return ()
    return (root.key, tree_shape(root.left), tree_shape(root.right))


def build_tree(shape: Tuple) -> Optional[Node]:
    """Inverse of tree_shape, for writing fixed trees in tests."""
    if not shape:
        return None
    key, left, right = shape
    return Node(key, build_tree(left), build_tree(right))


def random_keys(n: int, rng: np.random.Generator, space: int = 1 << 24) -> List[int]:
    """`n` distinct integer keys drawn from [0, space)."""
    if space <= n:
        raise ValueError(f"Key-space too small! Required: {n + 1}, Available: {space}")
    return [int(k) for k in rng.choice(space, size=n, replace=False)]


def random_splay_tree_of_size(n: int, rng: np.random.Generator) -> Tuple[Optional[Node], List[int]]:
    """Build a tree by inserting `n` distinct random keys; returns (root, keys)."""
    keys = random_keys(n, rng)
    root = None
    for key in keys:
        root = insert(root, key)
    return root, keys


def check_keys(root: Optional[Node], expected_keys: Optional[List] = None) -> Tuple[List, bool, bool]:
    """
    Collect the keys in order and compute two checks:
      1. presence_ok: the keys are exactly `expected_keys` (always True if None).
      2. order_ok: the keys are strictly increasing.

    Returns:
        (keys, presence_ok, order_ok)
    """
    keys = list(iter_keys(root))
    order_ok = all(a < b for a, b in zip(keys, keys[1:]))
    presence_ok = True
    if expected_keys is not None:
        presence_ok = keys == sorted(set(expected_keys))
    return keys, presence_ok, order_ok


def validate(root: Optional[Node]) -> bool:
    return assert_tree_invariants_log(root, tree_stats_(root))


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s: [%(levelname)s] %(message)s"
    )
    rng = np.random.default_rng(42)
    for size in (10, 100, 1000, 10_000):
        root, _ = random_splay_tree_of_size(size, rng)
        stats = tree_stats_(root)
        logging.info(f"n={size:<6} height={stats.height:<6} leaves={stats.leaf_count:<6} valid={validate(root)}")
