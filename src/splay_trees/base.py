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

"""Node and error types shared by the splay tree modules."""

import math
import numbers
from typing import Optional, Union

Key = Union[int, float]


class Node:
    """
    A single key of a splay tree.

    A node exclusively owns its left and right subtrees. There is no parent
    pointer; the tree is fully described by a reference to its root node.
    """
    __slots__ = ("key", "left", "right")  # Define slots for memory efficiency

    def __init__(
            self,
            key: Key,
            left: Optional["Node"] = None,
            right: Optional["Node"] = None,
    ):
        """
        Initialize a Node.

        Parameters:
            key (int | float): The node's key. It is both sort key and payload.
            left (Node): The left subtree (keys strictly smaller).
            right (Node): The right subtree (keys strictly greater).
        """
        self.key = key
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def label(self) -> str:
        """Format the key the way C's ``%g`` does for display purposes."""
        return format(self.key, "g")

    def __repr__(self) -> str:
        cls = self.__class__.__name__
        left = self.left.key if self.left is not None else None
        right = self.right.key if self.right is not None else None
        return f"{cls}(key={self.key!r}, left={left!r}, right={right!r})"

    def __str__(self):
        cls = self.__class__.__name__
        return f"{cls}(key={self.label()})"


class EmptyTreeError(LookupError):
    """Raised when an operation needs at least one node but the tree is empty."""

    def __init__(self, operation: str):
        super().__init__(f"{operation}(): the tree is empty")
        self.operation = operation


def check_key(key, operation: str = "insert") -> Key:
    """
    Validate a key before it is stored in a tree.

    Parameters:
        key: The candidate key.
        operation (str): Name of the calling operation, used in error messages.

    Returns:
        The key unchanged.

    Raises:
        TypeError: If the key is not a real number (bools are rejected too).
        ValueError: If the key is NaN, which has no place in a total order.
    """
    if isinstance(key, bool) or not isinstance(key, numbers.Real):
        raise TypeError(
            f"{operation}(): expected a real number key, got {type(key).__name__}"
        )
    if isinstance(key, float) and math.isnan(key):
        raise ValueError(f"{operation}(): NaN cannot be used as a key")
    return key
