"""Shared TestCase for splay tree tests"""
# pylint: skip-file

import unittest
import logging

from splay_trees.splay_tree import SplayTree
from splay_trees.render import print_structure
from splay_trees.stats import tree_stats_

from tests.stats_splay_tree import check_keys
from tests.utils import assert_tree_invariants_tc

# Configure logging for test
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class TreeTestCase(unittest.TestCase):
    """
    Base class for splay tree tests.

    Tests work on `self.root` (engine functions) or `self.tree` (SplayTree);
    whichever is non-empty at the end is checked in tearDown. Set
    `expected_keys`, `expected_root_key` or `expected_node_count` in a test to
    have those checked too.
    """
    def setUp(self):
        self.root = None
        self.tree = SplayTree()

    def _final_root(self):
        if self.root is not None:
            return self.root
        return self.tree.node

    def tearDown(self):
        root = self._final_root()
        stats = tree_stats_(root)
        assert_tree_invariants_tc(self, root, stats)

        keys, presence_ok, order_ok = check_keys(
            root, getattr(self, 'expected_keys', None)
        )
        self.assertTrue(order_ok, f"Keys must be in sorted order, got {keys}")

        expected_keys = getattr(self, 'expected_keys', None)
        if expected_keys is not None:
            self.assertTrue(
                presence_ok,
                f"Keys {keys} do not match expected {sorted(expected_keys)}\n"
                f"Tree structure:\n{print_structure(root)}"
            )

        expected_node_count = getattr(self, 'expected_node_count', None)
        if expected_node_count is not None:
            self.assertEqual(
                stats.node_count, expected_node_count,
                f"Node count {stats.node_count} does not match expected "
                f"{expected_node_count}"
            )

        expected_root_key = getattr(self, 'expected_root_key', None)
        if expected_root_key is not None:
            self.assertIsNotNone(root, "Expected a non-empty tree")
            self.assertEqual(
                root.key, expected_root_key,
                f"Root key {root.key} does not match expected {expected_root_key}\n"
                f"Tree structure:\n{print_structure(root)}"
            )
