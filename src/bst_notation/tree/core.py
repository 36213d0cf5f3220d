"""Tree Core: structural operations over the binary search tree.

Every public operation treats its input tree as read-only: it deep-copies
the tree with ``clone()`` and edits the copy, so earlier snapshots stay
valid and independently observable.  Operations never raise for
well-typed input; "not found" cases return an unchanged copy.

All walks use explicit stacks or loops rather than recursion.  A tree built
from sorted input degenerates into a list, and its depth equals its size.
"""

from __future__ import annotations

from collections.abc import Iterable

from bst_notation.tree.nodes import Tree, TreeNode

__all__ = [
    "clone",
    "contains",
    "delete",
    "edit_value",
    "find_by_id",
    "from_values",
    "insert",
    "is_valid_bst",
]


def clone(tree: Tree) -> Tree:
    """Return a deep copy of *tree*, preserving every ``value`` and ``id``."""
    if tree is None:
        return None
    root = TreeNode(value=tree.value, id=tree.id)
    stack: list[tuple[TreeNode, TreeNode]] = [(tree, root)]
    while stack:
        src, dst = stack.pop()
        if src.left is not None:
            dst.left = TreeNode(value=src.left.value, id=src.left.id)
            stack.append((src.left, dst.left))
        if src.right is not None:
            dst.right = TreeNode(value=src.right.value, id=src.right.id)
            stack.append((src.right, dst.right))
    return root


def insert(tree: Tree, value: int) -> Tree:
    """Return a copy of *tree* with *value* inserted at its BST position.

    If *value* is met on the descent path the copy is returned as is: no
    duplicate node is created and no id is allocated.

    Args:
        tree:  Root of the input tree (not mutated).
        value: Integer key to insert.  Callers validate it beforehand.

    Returns:
        Root of the new tree.
    """
    return _attach(clone(tree), value)


def delete(tree: Tree, value: int) -> Tree:
    """Return a copy of *tree* without the node holding *value*.

    Removal cases:
    - leaf: the node is dropped;
    - one child: the child takes the node's place;
    - two children: the node adopts the value of its in-order successor
      (leftmost node of its right subtree) and that value is then deleted
      from the right subtree.  The node keeps its own ``id``, so an id does
      not pin a value over time.

    A missing *value* yields an unchanged copy.
    """
    return _remove(clone(tree), value)


def edit_value(tree: Tree, node_id: str, new_value: int) -> Tree:
    """Return a copy of *tree* where the node with *node_id* holds *new_value*.

    The node is found by identity, not by value.  Ordering is NOT checked
    and nothing is rebalanced: the edit may leave the tree violating the BST
    invariant (see ``is_valid_bst``).  An unknown id yields an unchanged
    copy.
    """
    root = clone(tree)
    node = find_by_id(root, node_id)
    if node is not None:
        node.value = new_value
    return root


def find_by_id(tree: Tree, node_id: str) -> TreeNode | None:
    """Return the node of *tree* whose id is *node_id*, or None."""
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        if node.id == node_id:
            return node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return None


def contains(tree: Tree, value: int) -> bool:
    """Return True if *value* is found by BST descent from the root."""
    node = tree
    while node is not None:
        if value == node.value:
            return True
        node = node.left if value < node.value else node.right
    return False


def is_valid_bst(tree: Tree) -> bool:
    """Return True if every node satisfies the strict BST ordering.

    Each node is checked against the open interval inherited from its
    ancestors, so a violation deep in a subtree (e.g. after ``edit_value``)
    is caught even when each parent/child pair looks ordered.
    """
    stack: list[tuple[TreeNode, int | None, int | None]] = []
    if tree is not None:
        stack.append((tree, None, None))
    while stack:
        node, low, high = stack.pop()
        if low is not None and node.value <= low:
            return False
        if high is not None and node.value >= high:
            return False
        if node.left is not None:
            stack.append((node.left, low, node.value))
        if node.right is not None:
            stack.append((node.right, node.value, high))
    return True


def from_values(values: Iterable[int]) -> Tree:
    """Build a tree by inserting *values* in order into an empty tree.

    Equivalent to folding ``insert`` over *values*, without copying the
    partial tree at every step.
    """
    root: Tree = None
    for value in values:
        root = _attach(root, value)
    return root


# ---------------------------------------------------------------------------
# In-place helpers (only ever applied to a private copy)
# ---------------------------------------------------------------------------


def _attach(root: Tree, value: int) -> Tree:
    if root is None:
        return TreeNode(value=value)
    node = root
    while True:
        if value < node.value:
            if node.left is None:
                node.left = TreeNode(value=value)
                return root
            node = node.left
        elif value > node.value:
            if node.right is None:
                node.right = TreeNode(value=value)
                return root
            node = node.right
        else:
            return root


def _remove(root: Tree, value: int) -> Tree:
    parent: TreeNode | None = None
    side = ""
    node = root
    while node is not None:
        if value < node.value:
            parent, side, node = node, "left", node.left
            continue
        if value > node.value:
            parent, side, node = node, "right", node.right
            continue

        if node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            # Take over the successor's value, then delete it from the right.
            node.value = successor.value
            value = successor.value
            parent, side, node = node, "right", node.right
            continue

        child = node.left if node.left is not None else node.right
        if parent is None:
            return child
        setattr(parent, side, child)
        return root
    return root
