"""Text renderings of a splay tree for diagnostics. Nothing here mutates a tree."""

from typing import List, Optional, Tuple

from splay_trees.base import Node
from splay_trees.stats import tree_height

# Trees taller than this are not drawn
MAX_HEIGHT = 500


def print_structure(root: Optional[Node], indent: int = 0, max_depth: Optional[int] = None) -> str:
    """
    Indented dump with one node per line, children below their parent.

    Leaves get no child lines; a node with a single child shows the missing
    side as Empty.
    """
    if root is None:
        return f"{' ' * indent}Empty SplayTree"

    result = []
    stack = [(root, 0, "Root")]
    while stack:
        node, depth, side = stack.pop()
        prefix = ' ' * (indent + 4 * depth)
        if max_depth is not None and depth > max_depth:
            result.append(f"{prefix}... (max depth reached)")
            continue
        if node is None:
            result.append(f"{prefix}{side}: Empty")
            continue

        result.append(f"{prefix}{side}: {node.__class__.__name__}(key={node.label()})")
        if node.is_leaf():
            continue
        # Pushed right first so the left subtree is printed first
        stack.append((node.right, depth + 1, "Right"))
        stack.append((node.left, depth + 1, "Left"))
    return "\n".join(result)


def _layout(node: Node) -> Tuple[List[str], int, int, int]:
    """
    Lay out the subtree rooted at `node`.

    Returns:
        (lines, width, height, middle): the padded text lines, their common
        width, the number of lines and the column of the node's label centre.
    """
    label = node.label()
    n = len(label)

    if node.left is None and node.right is None:
        return [label], n, 1, n // 2

    if node.right is None:
        lines, w, h, m = _layout(node.left)
        first = (m + 1) * ' ' + (w - m - 1) * '_' + label
        second = m * ' ' + '/' + (w - m - 1 + n) * ' '
        shifted = [line + n * ' ' for line in lines]
        return [first, second] + shifted, w + n, h + 2, w + n // 2

    if node.left is None:
        lines, w, h, m = _layout(node.right)
        first = label + m * '_' + (w - m) * ' '
        second = (n + m) * ' ' + '\\' + (w - m - 1) * ' '
        shifted = [n * ' ' + line for line in lines]
        return [first, second] + shifted, w + n, h + 2, n // 2

    left, lw, lh, lm = _layout(node.left)
    right, rw, rh, rm = _layout(node.right)
    first = (lm + 1) * ' ' + (lw - lm - 1) * '_' + label + rm * '_' + (rw - rm) * ' '
    second = lm * ' ' + '/' + (lw - lm - 1 + n + rm) * ' ' + '\\' + (rw - rm - 1) * ' '
    if lh < rh:
        left += [lw * ' '] * (rh - lh)
    elif rh < lh:
        right += [rw * ' '] * (lh - rh)
    lines = [first, second] + [a + n * ' ' + b for a, b in zip(left, right)]
    return lines, lw + rw + n, max(lh, rh) + 2, lw + n // 2


def render_tree(root: Optional[Node]) -> str:
    """
    Draw the tree as ASCII art with `/` and `\\` edges and each label centred
    over its children. Labels are formatted like C's ``%g``.

    Returns an empty string for an empty tree.
    """
    if root is None:
        return ""
    height = tree_height(root)
    if height > MAX_HEIGHT:
        return f"(This tree is taller than {MAX_HEIGHT}, and is not drawn.)"
    lines, _, _, _ = _layout(root)
    return "\n".join(line.rstrip() for line in lines)


def print_ascii_tree(root: Optional[Node]) -> None:
    if root is None:
        return
    print(render_tree(root))
