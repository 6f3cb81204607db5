# -*- coding: utf-8 -*-
# ------------------------------------------------------------------------------
#
#   Copyright 2025 Jannik Hehemann
#
#   Licensed under the Apache License, Version 2.0 (the "License");
#   you may not use this file except in compliance with the License.
#   You may obtain a copy of the License at
#
#       http://www.apache.org/licenses/LICENSE-2.0
#
#   Unless required by applicable law or agreed to in writing, software
#   distributed under the License is distributed on an "AS IS" BASIS,
#   WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#   See the License for the specific language governing permissions and
#   limitations under the License.
#
# ------------------------------------------------------------------------------

"""Splay tree implementation"""

from __future__ import annotations
import logging
from typing import Iterable, Iterator, List, Optional, Tuple

from splay_trees.base import Node, EmptyTreeError, Key, check_key
from splay_trees.profiling import track_performance
from splay_trees.render import print_structure

# Configure logging
logger = logging.getLogger(__name__)
if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)

# Pending restructuring steps recorded while descending in splay().
# The first letter is the side of the child, the second the side of the grandchild.
_LEFT_LEFT = 0      # zig-zig, left side
_LEFT_RIGHT = 1     # zig-zag, left side
_RIGHT_RIGHT = 2    # zig-zig, right side
_RIGHT_LEFT = 3     # zig-zag, right side


def rotate_right(x: Node) -> Node:
    """Rotate around x's left child and return that child as the new local root."""
    y = x.left
    x.left = y.right
    y.right = x
    return y


def rotate_left(x: Node) -> Node:
    """Rotate around x's right child and return that child as the new local root."""
    y = x.right
    x.right = y.left
    y.left = x
    return y


def splay(root: Optional[Node], key: Key) -> Optional[Node]:
    """
    Restructure the tree so that `key`, or the node where the search for it
    ends, becomes the root.

    Each step looks two levels ahead: zig-zig when the key continues on the
    same side as the child, zig-zag when it turns, and a single zig when the
    child itself holds the key or the grandchild slot is the last one visited.
    Steps are recorded on an explicit stack while descending and applied while
    unwinding, so arbitrarily tall trees are handled without deep recursion.

    Args:
        root (Optional[Node]): Root of the tree to splay.
        key: The key to bring to the root.

    Returns:
        Optional[Node]: The new root. Its key equals `key` if the key is
            present; otherwise it is the in-order predecessor or successor of
            `key`. None if the tree is empty.
    """
    frames: List[Tuple[Node, int]] = []
    cur = root

    # Descend two levels per step until the key or an empty slot is reached
    while True:
        if cur is None or cur.key == key:
            result = cur
            break

        if key < cur.key:
            left = cur.left
            if left is None:
                result = cur
                break
            if key < left.key:
                frames.append((cur, _LEFT_LEFT))
                cur = left.left
            elif key > left.key:
                frames.append((cur, _LEFT_RIGHT))
                cur = left.right
            else:
                result = rotate_right(cur)
                break
        else:
            right = cur.right
            if right is None:
                result = cur
                break
            if key > right.key:
                frames.append((cur, _RIGHT_RIGHT))
                cur = right.right
            elif key < right.key:
                frames.append((cur, _RIGHT_LEFT))
                cur = right.left
            else:
                result = rotate_left(cur)
                break

    # Unwind: hang the splayed subtree back in and rotate it upwards
    for node, step in reversed(frames):
        if step == _LEFT_LEFT:
            node.left.left = result
            top = rotate_right(node)
            result = top if top.left is None else rotate_right(top)
        elif step == _LEFT_RIGHT:
            left = node.left
            left.right = result
            if result is not None:
                node.left = rotate_left(left)
            result = rotate_right(node)
        elif step == _RIGHT_RIGHT:
            node.right.right = result
            top = rotate_left(node)
            result = top if top.right is None else rotate_left(top)
        else:
            right = node.right
            right.left = result
            if result is not None:
                node.right = rotate_right(right)
            result = rotate_left(node)

    return result


@track_performance(tag="insert")
def insert(root: Optional[Node], key: Key) -> Node:
    """
    Insert `key` and return the new root.

    The tree is splayed on `key` first. If the key is already present the
    splayed tree is returned as is; otherwise a new node becomes the root and
    the old root is split off to its left or right.

    Raises:
        TypeError: If `key` is not a real number.
        ValueError: If `key` is NaN.
    """
    check_key(key, "insert")
    if root is None:
        return Node(key)
    return _split_at_root(splay(root, key), key)


def _split_at_root(root: Node, key: Key) -> Node:
    """Put a new node for `key` above `root`, which must already be splayed on `key`."""
    if root.key == key:
        return root

    if root.key < key:
        # Old root and its left side are all smaller than the new key
        node = Node(key, left=root, right=root.right)
        root.right = None
    else:
        node = Node(key, left=root.left, right=root)
        root.left = None
    return node


@track_performance(tag="delete")
def delete(root: Optional[Node], key: Key) -> Optional[Node]:
    """
    Remove `key` and return the new root.

    Deleting from an empty tree or deleting an absent key is a no-op apart
    from the splay. When the removed node has a left subtree, that subtree is
    splayed on `key` again, which lifts the in-order predecessor to its root
    with an empty right slot for the removed node's right subtree.
    """
    if root is None:
        return None

    root = splay(root, key)
    if root.key != key:
        return root

    if root.left is None:
        new_root = root.right
    else:
        right = root.right
        new_root = splay(root.left, key)
        new_root.right = right

    # Detach the removed node from the live tree
    root.left = None
    root.right = None
    return new_root


@track_performance(tag="find_min")
def find_min(root: Optional[Node]) -> Node:
    """
    Return the node with the smallest key without restructuring the tree.

    Raises:
        EmptyTreeError: If the tree is empty.
    """
    if root is None:
        raise EmptyTreeError("find_min")
    node = root
    while node.left is not None:
        node = node.left
    return node


def iter_keys(root: Optional[Node]) -> Iterator[Key]:
    """Yield all keys in ascending order. Does not splay."""
    stack: List[Node] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.key
        node = node.right


def iter_preorder(root: Optional[Node]) -> Iterator[Key]:
    """Yield all keys in pre-order (node, left, right). Does not splay."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node.key
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def count_nodes(root: Optional[Node]) -> int:
    return sum(1 for _ in iter_preorder(root))


class SplayTree:
    """
    A splay tree is either empty or holds a reference to its root node.

    Attributes:
        node (Optional[Node]): The root node. If None, the tree is empty.

    The tree object carries no size or other metadata; every method works on
    the root reference and reassigns it. Mutating methods return the tree so
    calls can be chained.
    """
    __slots__ = ("node",)

    def __init__(self, node: Optional[Node] = None):
        self.node: Optional[Node] = node

    @classmethod
    def from_keys(cls, keys: Iterable[Key]) -> SplayTree:
        tree = cls()
        for key in keys:
            tree.insert(key)
        return tree

    def is_empty(self) -> bool:
        return self.node is None

    def __str__(self):
        return "Empty SplayTree" if self.is_empty() else f"SplayTree(root={self.node})"

    __repr__ = __str__

    # Public API
    @track_performance
    def insert(self, key: Key) -> SplayTree:
        """
        Insert a key (amortized O(log n)). The inserted or already present key
        is the root afterwards.

        Raises:
            TypeError: If key is not a real number.
            ValueError: If key is NaN.
        """
        check_key(key, "insert")
        if self.node is None:
            self.node = Node(key)
            return self
        self.node = splay(self.node, key)
        if self.node.key == key:
            logger.debug(f"insert(): key {key!r} already present, tree unchanged")
            return self
        self.node = _split_at_root(self.node, key)
        return self

    @track_performance
    def delete(self, key: Key) -> SplayTree:
        """Delete a key (amortized O(log n)). Absent keys are ignored."""
        if self.node is None:
            logger.debug(f"delete(): tree is empty, nothing to delete for {key!r}")
            return self
        self.node = splay(self.node, key)
        if self.node.key != key:
            logger.debug(f"delete(): key {key!r} not found, root is now {self.node.key!r}")
            return self
        self.node = delete(self.node, key)
        return self

    @track_performance
    def find_min(self) -> Node:
        """
        Return the node with the smallest key. The tree is not restructured.

        Raises:
            EmptyTreeError: If the tree is empty.
        """
        return find_min(self.node)

    @track_performance
    def retrieve(self, key: Key) -> Optional[Node]:
        """
        Splay the tree on `key` and return the matching node, or None if the
        key is absent. Either way the tree is restructured.
        """
        self.node = splay(self.node, key)
        if self.node is not None and self.node.key == key:
            return self.node
        return None

    def __contains__(self, key) -> bool:
        try:
            check_key(key, "contains")
        except (TypeError, ValueError):
            return False
        return self.retrieve(key) is not None

    def __iter__(self) -> Iterator[Key]:
        return iter_keys(self.node)

    def __len__(self) -> int:
        return count_nodes(self.node)

    def print_structure(self, indent: int = 0, max_depth: Optional[int] = None) -> str:
        return print_structure(self.node, indent=indent, max_depth=max_depth)
