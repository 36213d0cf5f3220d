"""bst-notation - binary search tree editing with an indentation notation."""

from __future__ import annotations

from bst_notation.api import build, dump, load, traversals
from bst_notation.editor import TreeEditor
from bst_notation.notation import (
    IndentationRepairer,
    NotationConfig,
    NotationParser,
    ParseError,
    ParseErrorCategory,
    notation_to_tree,
    repair_indentation,
    tree_to_notation,
)
from bst_notation.result import ParseResult, RepairResult
from bst_notation.tree import (
    TraversalOrder,
    Tree,
    TreeNode,
    clone,
    delete,
    edit_value,
    insert,
    is_valid_bst,
    range_query,
    traverse,
)

__version__: str = "0.1.0"
__all__: list[str] = [
    "IndentationRepairer",
    "NotationConfig",
    "NotationParser",
    "ParseError",
    "ParseErrorCategory",
    "ParseResult",
    "RepairResult",
    "TraversalOrder",
    "Tree",
    "TreeEditor",
    "TreeNode",
    "build",
    "clone",
    "delete",
    "dump",
    "edit_value",
    "insert",
    "is_valid_bst",
    "load",
    "notation_to_tree",
    "range_query",
    "repair_indentation",
    "traversals",
    "traverse",
    "tree_to_notation",
]
