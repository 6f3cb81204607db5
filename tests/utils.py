"""Utility functions for testing splay tree invariants."""

import logging
from typing import Optional

from splay_trees.base import Node
from splay_trees.stats import Stats

TREE_FLAGS = (
    "is_search_tree",
    "is_proper_tree",
)

def assert_tree_invariants_tc(tc, root: Optional[Node], stats: Stats) -> None:
    """TestCase version: use inside unittest.TestCase methods."""
    for flag in TREE_FLAGS:
        tc.assertTrue(
            getattr(stats, flag),
            f"Invariant failed: {flag} is False"
        )

    if root is not None:
        tc.assertGreater(
            stats.node_count, 0,
            f"Invariant failed: node_count={stats.node_count} ≤ 0 for non-empty tree"
        )
        tc.assertGreater(
            stats.height, 0,
            f"Invariant failed: height={stats.height} ≤ 0 for non-empty tree"
        )
        tc.assertGreater(
            stats.leaf_count, 0,
            f"Invariant failed: leaf_count={stats.leaf_count} ≤ 0 for non-empty tree"
        )
        tc.assertLessEqual(
            stats.height, stats.node_count,
            f"Invariant failed: height={stats.height} > node_count={stats.node_count}"
        )
        tc.assertIsNotNone(
            stats.least_key,
            "Invariant failed: least_key is None for non-empty tree"
        )
        tc.assertIsNotNone(
            stats.greatest_key,
            "Invariant failed: greatest_key is None for non-empty tree"
        )
    else:
        tc.assertEqual(stats.node_count, 0)


def assert_tree_invariants_log(root: Optional[Node], stats: Stats) -> bool:
    """Check all invariants, logging the first failure. Returns True if all hold."""
    for flag in TREE_FLAGS:
        if not getattr(stats, flag):
            logging.error(f"Invariant failed: {flag} is False")
            return False

    if root is not None:
        if stats.node_count <= 0:
            logging.error(f"Invariant failed: node_count={stats.node_count} ≤ 0 for non-empty tree")
            return False
        if stats.height > stats.node_count:
            logging.error(f"Invariant failed: height={stats.height} > node_count={stats.node_count}")
            return False
        if stats.least_key is None or stats.greatest_key is None:
            logging.error("Invariant failed: least/greatest key missing for non-empty tree")
            return False
    return True
