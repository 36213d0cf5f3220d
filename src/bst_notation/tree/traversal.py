"""Traversal Engine: depth-first orders and value-range selection.

Both functions are pure readers.  Their results follow structural
position; they are sorted only while the BST invariant holds, which
``edit_value`` may break.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import StrEnum, auto

from bst_notation.tree.nodes import Tree, TreeNode

__all__ = ["TraversalOrder", "iter_nodes", "range_query", "traverse"]


class TraversalOrder(StrEnum):
    """Depth-first visiting orders.

    - INORDER   -> "inorder"   : left, self, right
    - PREORDER  -> "preorder"  : self, left, right
    - POSTORDER -> "postorder" : left, right, self
    """

    INORDER = auto()
    PREORDER = auto()
    POSTORDER = auto()


def iter_nodes(
    tree: Tree, order: TraversalOrder | str = TraversalOrder.INORDER
) -> Iterator[TreeNode]:
    """Yield the nodes of *tree* in the given depth-first *order*.

    Raises:
        ValueError: If *order* is not a TraversalOrder value.
    """
    order = TraversalOrder(order)
    if order is TraversalOrder.PREORDER:
        return _preorder(tree)
    if order is TraversalOrder.POSTORDER:
        return _postorder(tree)
    return _inorder(tree)


def traverse(
    tree: Tree, order: TraversalOrder | str = TraversalOrder.INORDER
) -> list[int]:
    """Return the values of *tree* in the given order; ``[]`` for an empty tree."""
    return [node.value for node in iter_nodes(tree, order)]


def range_query(tree: Tree, low: int, high: int) -> list[int]:
    """Return every value ``v`` with ``low <= v <= high``, in in-order sequence.

    Subtrees that the BST invariant places wholly outside the range are
    skipped: the left subtree is entered only when ``node.value > low`` and
    the right one only when ``node.value < high``.  While the invariant holds
    the result is ascending and complete.  After an ordering-breaking
    ``edit_value`` a value may sit in a pruned subtree and be missed.

    ``low > high`` yields ``[]``.
    """
    if low > high:
        return []
    result: list[int] = []
    stack: list[TreeNode] = []
    node = tree
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left if node.value > low else None
        node = stack.pop()
        if low <= node.value <= high:
            result.append(node.value)
        node = node.right if node.value < high else None
    return result


def _inorder(tree: Tree) -> Iterator[TreeNode]:
    stack: list[TreeNode] = []
    node = tree
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def _preorder(tree: Tree) -> Iterator[TreeNode]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def _postorder(tree: Tree) -> Iterator[TreeNode]:
    # Reverse of a (self, right, left) walk.
    visited: list[TreeNode] = []
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        visited.append(node)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    yield from reversed(visited)
