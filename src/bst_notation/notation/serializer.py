"""Serializer: renders a tree as indentation notation.

Layout, for the tree 10 -> (5, 15)::

    value: 10
    left:
      value: 5
    right:
      value: 15

Each child block is indented one unit deeper than its introducer line.
"""

from __future__ import annotations

from bst_notation.notation.config import NotationConfig
from bst_notation.tree.nodes import Tree, TreeNode

__all__ = ["tree_to_notation"]


def tree_to_notation(tree: Tree, config: NotationConfig | None = None) -> str:
    """Serialize *tree* to notation text.

    Args:
        tree:   Root of the tree, or None.
        config: Layout parameters.  Defaults to ``NotationConfig()``.

    Returns:
        The notation text, newline-terminated; ``""`` for an empty tree.
    """
    if tree is None:
        return ""
    unit = " " * (config or NotationConfig()).indent_unit

    lines: list[str] = []
    # Work items are either a node to render at a depth or a literal line.
    stack: list[tuple[TreeNode, int] | str] = [(tree, 0)]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            lines.append(item)
            continue
        node, depth = item
        pad = unit * depth
        lines.append(f"{pad}value: {node.value}")
        if node.right is not None:
            stack.append((node.right, depth + 1))
            stack.append(f"{pad}right:")
        if node.left is not None:
            stack.append((node.left, depth + 1))
            stack.append(f"{pad}left:")
    return "\n".join(lines) + "\n"
