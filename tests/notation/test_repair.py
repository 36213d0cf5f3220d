"""Tests for IndentationRepairer / repair_indentation.

Covers the malformations the heuristic claims to fix:
- 4-space (or other consistent) indentation
- tabs instead of spaces
- trailing whitespace
- over-indented lines clamped to one level below their predecessor
and its non-guarantees (output that still fails to parse).
"""

from __future__ import annotations

import pytest

from bst_notation.notation.config import NotationConfig
from bst_notation.notation.errors import ParseErrorCategory
from bst_notation.notation.parser import notation_to_tree
from bst_notation.notation.repair import IndentationRepairer, repair_indentation
from bst_notation.notation.serializer import tree_to_notation
from bst_notation.tree.core import from_values
from bst_notation.tree.nodes import TreeNode

TWO_SPACE = (
    "value: 50\n"
    "left:\n"
    "  value: 30\n"
    "  left:\n"
    "    value: 20\n"
    "right:\n"
    "  value: 70\n"
)

FOUR_SPACE = (
    "value: 50\n"
    "left:\n"
    "    value: 30\n"
    "    left:\n"
    "        value: 20\n"
    "right:\n"
    "    value: 70\n"
)


class TestConsistentUnit:
    def test_four_spaces_become_two(self) -> None:
        assert repair_indentation(FOUR_SPACE) == TWO_SPACE

    def test_four_space_reparse_equals_two_space_parse(self) -> None:
        repaired = notation_to_tree(repair_indentation(FOUR_SPACE))
        reference = notation_to_tree(TWO_SPACE)
        assert repaired.ok
        assert repaired.tree == reference.tree

    def test_three_spaces(self) -> None:
        text = "value: 5\nleft:\n   value: 1\n   right:\n      value: 3\n"
        assert repair_indentation(text) == (
            "value: 5\nleft:\n  value: 1\n  right:\n    value: 3\n"
        )

    def test_well_formed_text_unchanged(self, balanced: TreeNode) -> None:
        text = tree_to_notation(balanced)
        assert repair_indentation(text) == text

    def test_custom_target_unit(self) -> None:
        repairer = IndentationRepairer(NotationConfig(indent_unit=4))
        assert repairer.repair(TWO_SPACE) == FOUR_SPACE


class TestTabsAndWhitespace:
    def test_tabs_become_spaces(self) -> None:
        text = (
            "value: 50\n"
            "left:\n"
            "\tvalue: 30\n"
            "\tleft:\n"
            "\t\tvalue: 20\n"
            "right:\n"
            "\tvalue: 70\n"
        )
        assert repair_indentation(text) == TWO_SPACE

    def test_trailing_whitespace_stripped(self) -> None:
        text = "value: 10  \nleft:\t\n  value: 5   \n"
        assert repair_indentation(text) == "value: 10\nleft:\n  value: 5\n"

    def test_whitespace_only_lines_emptied_but_kept(self) -> None:
        text = "value: 10\n   \nleft:\n    value: 5\n"
        assert repair_indentation(text) == "value: 10\n\nleft:\n  value: 5\n"

    def test_trailing_newline_preserved_only_if_present(self) -> None:
        assert repair_indentation("value: 1") == "value: 1"
        assert repair_indentation("value: 1\n") == "value: 1\n"


class TestLevelClamping:
    def test_first_line_forced_to_level_zero(self) -> None:
        assert repair_indentation("    value: 1\n") == "value: 1\n"

    def test_jump_of_two_levels_clamped(self) -> None:
        # step is 2 (from line 3); line 5 jumps from level 1 to level 4
        text = "value: 5\nleft:\n  value: 1\n  right:\n        value: 3\n"
        assert repair_indentation(text) == (
            "value: 5\nleft:\n  value: 1\n  right:\n    value: 3\n"
        )

    def test_rounds_to_nearest_level(self) -> None:
        # step 4; 5 columns rounds to level 1, 7 columns rounds to level 2
        text = "value: 5\nleft:\n    value: 1\n     right:\n       value: 3\n"
        assert repair_indentation(text) == (
            "value: 5\nleft:\n  value: 1\n  right:\n    value: 3\n"
        )

    def test_decrease_to_any_open_level(self) -> None:
        text = (
            "value: 50\n"
            "left:\n"
            "    value: 30\n"
            "    right:\n"
            "        value: 40\n"
            "        left:\n"
            "           value: 35\n"
            "right:\n"
            "    value: 70\n"
        )
        repaired = notation_to_tree(repair_indentation(text))
        assert repaired.tree == from_values([50, 30, 40, 35, 70])

    def test_no_indentation_at_all(self) -> None:
        assert repair_indentation("value: 1\nleft:\nvalue: 2\n") == (
            "value: 1\nleft:\nvalue: 2\n"
        )


class TestAdvisoryOnly:
    def test_never_raises(self) -> None:
        assert isinstance(repair_indentation("\t\t{[\n  ::\n"), str)

    def test_empty_text(self) -> None:
        assert repair_indentation("") == ""

    def test_structural_error_survives_repair(self) -> None:
        # Repair cannot invent the missing child block.
        result = notation_to_tree(repair_indentation("value: 1\nleft:\n"))
        assert not result.ok
        assert result.error is not None
        assert result.error.category is ParseErrorCategory.EMPTY_BLOCK

    def test_missing_indent_not_invented(self) -> None:
        result = notation_to_tree(repair_indentation("value: 1\nleft:\nvalue: 2\n"))
        assert result.error is not None
        assert result.error.category is ParseErrorCategory.EMPTY_BLOCK

    @pytest.mark.parametrize("tab_width", [2, 8])
    def test_tab_width_irrelevant_for_tab_only_text(self, tab_width: int) -> None:
        text = "value: 50\nleft:\n\tvalue: 30\n"
        repairer = IndentationRepairer(NotationConfig(tab_width=tab_width))
        assert repairer.repair(text) == "value: 50\nleft:\n  value: 30\n"
