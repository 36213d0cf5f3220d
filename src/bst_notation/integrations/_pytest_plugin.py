"""pytest plugin for bst-notation.

Auto-discovered by pytest via the pytest11 entry point declared in
pyproject.toml.  When the package is installed (even in editable mode),
pytest discovers this plugin automatically; no conftest.py changes are
needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from bst_notation import NotationConfig, TreeNode, notation_to_tree, tree_to_notation


@pytest.fixture(scope="session")
def assert_notation_equivalent() -> Any:
    """Fixture that returns a callable tree-shape asserter.

    Each side may be notation text or a tree (``TreeNode`` or None).  Text is
    parsed first; a parse error fails the assertion.  Two sides are
    equivalent when they hold the same values at the same structural
    positions.  Node ids are ignored.

    Usage in tests::

        def test_round_trip(assert_notation_equivalent):
            assert_notation_equivalent("value: 1\\n", TreeNode(1))

    Returns:
        A callable ``_assert(actual, expected, config=None) -> None`` raising
        ``AssertionError`` with both notations when the trees differ.
    """

    def _as_tree(side: str, value: Any, config: NotationConfig | None) -> Any:
        if value is None or isinstance(value, TreeNode):
            return value
        result = notation_to_tree(value, config)
        if not result.ok:
            raise AssertionError(f"{side} notation does not parse: {result.error}")
        return result.tree

    def _assert(
        actual: Any,
        expected: Any,
        config: NotationConfig | None = None,
    ) -> None:
        actual_tree = _as_tree("actual", actual, config)
        expected_tree = _as_tree("expected", expected, config)
        if actual_tree != expected_tree:
            raise AssertionError(
                "trees not equivalent:\n"
                f"  actual:\n{tree_to_notation(actual_tree, config)}"
                f"  expected:\n{tree_to_notation(expected_tree, config)}"
            )

    return _assert
