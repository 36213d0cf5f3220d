"""ParseResult and RepairResult dataclasses.

These are the values returned to the presentation layer by the notation
entry points.  Neither is ever raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bst_notation.notation.errors import ParseError
    from bst_notation.tree.nodes import Tree

__all__ = ["ParseResult", "RepairResult"]


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of parsing notation text.

    Attributes:
        tree:  The freshly built tree on success (None for empty input), or
               None on failure.
        error: The failure, or None on success.
    """

    tree: Tree = None
    error: ParseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True, slots=True)
class RepairResult:
    """Outcome of an indentation repair followed by a re-parse.

    Attributes:
        text:   The repaired (advisory) notation text.
        result: The parse of ``text``.  May still carry an error.
    """

    text: str
    result: ParseResult

    @property
    def ok(self) -> bool:
        return self.result.ok
