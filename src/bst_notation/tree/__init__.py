"""Tree subpackage: node type, identity, structural edits and traversals.

Re-exports the public API for the tree module:
- TreeNode / Tree: the node dataclass and the optional-root alias
- IdAllocator / new_id: stable node identity
- clone, insert, delete, edit_value and friends: copy-on-write edits
- TraversalOrder, traverse, iter_nodes, range_query: read-only walks
"""

from bst_notation.tree.core import (
    clone,
    contains,
    delete,
    edit_value,
    find_by_id,
    from_values,
    insert,
    is_valid_bst,
)
from bst_notation.tree.identity import IdAllocator, new_id
from bst_notation.tree.nodes import Tree, TreeNode
from bst_notation.tree.traversal import (
    TraversalOrder,
    iter_nodes,
    range_query,
    traverse,
)

__all__ = [
    "IdAllocator",
    "TraversalOrder",
    "Tree",
    "TreeNode",
    "clone",
    "contains",
    "delete",
    "edit_value",
    "find_by_id",
    "from_values",
    "insert",
    "is_valid_bst",
    "iter_nodes",
    "new_id",
    "range_query",
    "traverse",
]
