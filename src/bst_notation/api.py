"""Public API functions for bst-notation.

Thin module-level shortcuts over the Tree Core, the Traversal Engine and the
notation codec, for callers that do not need a ``TreeEditor`` session.  Each
call builds its own parser/repairer, so there is no state between calls.
"""

from __future__ import annotations

from collections.abc import Iterable

from bst_notation.notation.config import NotationConfig
from bst_notation.notation.parser import NotationParser
from bst_notation.notation.repair import IndentationRepairer
from bst_notation.notation.serializer import tree_to_notation
from bst_notation.result import ParseResult
from bst_notation.tree.core import from_values
from bst_notation.tree.nodes import Tree
from bst_notation.tree.traversal import TraversalOrder, traverse

__all__ = ["build", "dump", "load", "traversals"]


def load(
    text: str, *, repair: bool = False, config: NotationConfig | None = None
) -> ParseResult:
    """Parse notation *text* into a tree.

    Args:
        text:   Notation text.
        repair: When True, run the indentation repair pass first.  The
                repaired text is parsed and may still fail.
        config: Layout parameters.  Defaults to ``NotationConfig()``.

    Returns:
        A ``ParseResult``; parse failures are reported in ``error``.
    """
    if repair:
        text = IndentationRepairer(config).repair(text)
    return NotationParser(config).parse(text)


def dump(tree: Tree, config: NotationConfig | None = None) -> str:
    """Serialize *tree* to notation text (``""`` for an empty tree)."""
    return tree_to_notation(tree, config)


def build(values: Iterable[int]) -> Tree:
    """Return the tree obtained by inserting *values* in order."""
    return from_values(values)


def traversals(tree: Tree) -> dict[TraversalOrder, list[int]]:
    """Return the value sequence of *tree* for every TraversalOrder."""
    return {order: traverse(tree, order) for order in TraversalOrder}
