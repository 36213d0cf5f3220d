"""Notation subpackage: text codec between trees and indentation notation.

Re-exports the public API for the notation module:
- NotationConfig: indent unit and tab width
- ParseError / ParseErrorCategory: structured parse failures
- tree_to_notation: serializer (never fails)
- NotationParser / notation_to_tree: parser returning a ParseResult
- IndentationRepairer / repair_indentation: advisory re-indentation pre-pass
"""

from bst_notation.notation.config import NotationConfig
from bst_notation.notation.errors import ParseError, ParseErrorCategory
from bst_notation.notation.parser import NotationParser, notation_to_tree
from bst_notation.notation.repair import IndentationRepairer, repair_indentation
from bst_notation.notation.serializer import tree_to_notation

__all__ = [
    "IndentationRepairer",
    "NotationConfig",
    "NotationParser",
    "ParseError",
    "ParseErrorCategory",
    "notation_to_tree",
    "repair_indentation",
    "tree_to_notation",
]
