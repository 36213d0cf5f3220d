"""TreeNode dataclass for the binary search tree.

A tree is represented by its optional root (``Tree``); ``None`` is the
empty tree.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from bst_notation.tree.identity import new_id

__all__ = ["Tree", "TreeNode"]


@dataclass(slots=True, eq=False)
class TreeNode:
    """A node of the binary search tree.

    Attributes:
        value: Integer key.  Left subtree values are strictly smaller, right
            subtree values strictly greater (unless broken by ``edit_value``).
        id:    Opaque stable identifier, assigned once at creation.
        left:  Exclusively owned left child, or None.
        right: Exclusively owned right child, or None.

    Equality ignores ``id``: two trees are ``==`` when they hold the same
    values at the same structural positions.  The comparison walks both
    trees with an explicit stack, so list-shaped trees of any depth compare
    without hitting the recursion limit.
    """

    value: int
    id: str = field(default_factory=new_id)
    left: TreeNode | None = None
    right: TreeNode | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TreeNode):
            return NotImplemented
        stack: list[tuple[TreeNode | None, TreeNode | None]] = [(self, other)]
        while stack:
            a, b = stack.pop()
            if a is None or b is None:
                if a is not b:
                    return False
                continue
            if a.value != b.value:
                return False
            stack.append((a.left, b.left))
            stack.append((a.right, b.right))
        return True


Tree = TreeNode | None
