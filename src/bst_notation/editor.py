"""TreeEditor: the command surface consumed by a presentation layer.

The editor owns the current tree snapshot plus a little session state
(selected node, last status line, last notation error).  Each command
replaces the snapshot with a fresh tree from the Tree Core, so any snapshot
a renderer is still holding stays valid.

Architecture:
- Structural commands (insert, delete, edit_value, clear) validate their
  raw input, delegate to ``bst_notation.tree.core`` and record a status line.
- Notation commands (parse_notation, repair_notation) never raise for bad
  text.  A failed parse leaves the current tree untouched and is kept in
  ``notation_error`` until the next command that replaces the tree.
"""

from __future__ import annotations

import logging
import math
import re

from bst_notation.notation.config import NotationConfig
from bst_notation.notation.errors import ParseError
from bst_notation.notation.parser import NotationParser
from bst_notation.notation.repair import IndentationRepairer
from bst_notation.notation.serializer import tree_to_notation
from bst_notation.result import ParseResult, RepairResult
from bst_notation.tree import core
from bst_notation.tree.nodes import Tree, TreeNode
from bst_notation.tree.traversal import TraversalOrder, range_query, traverse

__all__ = ["TreeEditor", "coerce_value"]

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")


def coerce_value(raw: object) -> int:
    """Turn raw command input into an integer key.

    Accepts ``int``, a finite integral ``float`` and a ``str`` holding an
    optionally signed decimal integer (surrounding whitespace allowed).

    Raises:
        TypeError:  For ``bool`` and any other type.
        ValueError: For non-integral or non-finite floats and non-integer
                    strings.
    """
    # bool MUST be rejected before int: bool subclasses int in Python
    if isinstance(raw, bool):
        msg = f"node values must be integers, got {raw!r}"
        raise TypeError(msg)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if math.isfinite(raw) and raw.is_integer():
            return int(raw)
        msg = f"node values must be finite integers, got {raw!r}"
        raise ValueError(msg)
    if isinstance(raw, str):
        text = raw.strip()
        if _INTEGER.fullmatch(text):
            return int(text)
        msg = f"not an integer: {raw!r}"
        raise ValueError(msg)
    msg = f"node values must be integers, got {type(raw).__name__}"
    raise TypeError(msg)


class TreeEditor:
    """Single-user editing session over one binary search tree.

    Example::

        editor = TreeEditor()
        editor.insert(10)
        editor.insert("5")
        editor.traverse("inorder")        # [5, 10]
        print(editor.notation)            # "value: 10\\nleft:\\n  value: 5\\n"
        editor.parse_notation("value: 1\\n")
        editor.root.value                 # 1
    """

    def __init__(
        self,
        root: Tree = None,
        config: NotationConfig | None = None,
    ) -> None:
        """Initialise the session.

        Args:
            root:   Initial tree.  It is cloned, never adopted.
            config: Notation layout.  Defaults to ``NotationConfig()``.
        """
        self._config: NotationConfig = (
            config if config is not None else NotationConfig()
        )
        self._parser = NotationParser(self._config)
        self._repairer = IndentationRepairer(self._config)
        self._root: Tree = core.clone(root)
        self._selected_id: str | None = None
        self._last_action: str | None = None
        self._notation_error: ParseError | None = None

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def root(self) -> Tree:
        """The current snapshot.  Treat it as read-only."""
        return self._root

    @property
    def config(self) -> NotationConfig:
        return self._config

    @property
    def selected_id(self) -> str | None:
        return self._selected_id

    @property
    def selected(self) -> TreeNode | None:
        """The selected node of the current snapshot, if any."""
        if self._selected_id is None:
            return None
        return core.find_by_id(self._root, self._selected_id)

    @property
    def last_action(self) -> str | None:
        """Status line describing the last command, e.g. ``"Inserted node 5"``."""
        return self._last_action

    @property
    def notation_error(self) -> ParseError | None:
        """Error of the last failed notation command, or None.

        Cleared by every command that replaces the tree.
        """
        return self._notation_error

    @property
    def notation(self) -> str:
        """The current snapshot serialized to notation text."""
        return tree_to_notation(self._root, self._config)

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def select(self, node_id: str) -> TreeNode | None:
        """Select the node with *node_id*; unknown ids clear the selection."""
        node = core.find_by_id(self._root, node_id)
        self._selected_id = node.id if node is not None else None
        return node

    def deselect(self) -> None:
        self._selected_id = None

    # ------------------------------------------------------------------
    # Structural commands
    # ------------------------------------------------------------------

    def insert(self, value: object) -> Tree:
        """Insert *value*; duplicates leave the tree as it was."""
        key = self._checked(value)
        self._replace_root(core.insert(self._root, key))
        self._record(f"Inserted node {key}")
        return self._root

    def delete(self, value: object = None) -> Tree:
        """Delete *value*, or the selected node's value when *value* is None.

        The selection is always cleared.  Deleting with nothing selected and
        no value is a no-op.
        """
        if value is None:
            node = self.selected
            if node is None:
                logger.warning("Delete ignored: no value given and no node selected")
                return self._root
            key = node.value
        else:
            key = self._checked(value)
        self._replace_root(core.delete(self._root, key))
        self._selected_id = None
        self._record(f"Deleted node {key}")
        return self._root

    def edit_value(self, value: object, node_id: str | None = None) -> Tree:
        """Relabel the node *node_id* (default: the selected node) with *value*.

        BST ordering is not re-checked; see ``core.edit_value``.  An id that
        is not in the tree is a no-op.
        """
        key = self._checked(value)
        target = node_id if node_id is not None else self._selected_id
        if target is None:
            logger.warning("Edit ignored: no node id given and no node selected")
            return self._root
        if core.find_by_id(self._root, target) is None:
            logger.warning("Edit ignored: no node with id %r", target)
            return self._root
        self._replace_root(core.edit_value(self._root, target, key))
        self._record(f"Updated node to {key}")
        return self._root

    def clear(self) -> None:
        """Drop the whole tree and the selection."""
        self._replace_root(None)
        self._selected_id = None
        self._record("Tree cleared")

    # ------------------------------------------------------------------
    # Notation commands
    # ------------------------------------------------------------------

    def parse_notation(self, text: str) -> ParseResult:
        """Replace the tree with the parse of *text*, if it parses.

        On failure the current tree and selection are kept and the error is
        stored in ``notation_error``.
        """
        result = self._parser.parse(text)
        if result.ok:
            self._adopt(result)
            self._record("Notation synced successfully")
        else:
            self._reject(result, prefix="Notation error")
        return result

    def repair_notation(self, text: str) -> RepairResult:
        """Repair the indentation of *text*, re-parse it and adopt it if valid.

        Returns:
            A ``RepairResult`` with the repaired text (useful to put back in
            the user's buffer) and its parse result.
        """
        repaired = self._repairer.repair(text)
        result = self._parser.parse(repaired)
        if result.ok:
            self._adopt(result)
            self._record("Notation structure repaired")
        else:
            self._reject(result, prefix="Repair incomplete")
        return RepairResult(text=repaired, result=result)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def traverse(
        self, order: TraversalOrder | str = TraversalOrder.INORDER
    ) -> list[int]:
        return traverse(self._root, order)

    def range_query(self, low: object, high: object) -> list[int]:
        return range_query(self._root, self._checked(low), self._checked(high))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _checked(self, value: object) -> int:
        try:
            return coerce_value(value)
        except (TypeError, ValueError) as exc:
            logger.warning("Rejected command input: %s", exc)
            raise

    def _replace_root(self, tree: Tree) -> None:
        self._root = tree
        self._notation_error = None

    def _adopt(self, result: ParseResult) -> None:
        self._replace_root(result.tree)
        self._selected_id = None

    def _reject(self, result: ParseResult, prefix: str) -> None:
        self._notation_error = result.error
        self._record(f"{prefix}: {result.error}")

    def _record(self, action: str) -> None:
        self._last_action = action
        logger.info(action)
