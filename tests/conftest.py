"""Shared fixtures for the bst-notation test suite."""

from __future__ import annotations

import pytest

from bst_notation.integrations._pytest_plugin import assert_notation_equivalent  # noqa: F401
from bst_notation.tree.core import from_values
from bst_notation.tree.nodes import TreeNode

# Insert order producing:
#
#          50
#        /    \
#      30      70
#     /  \    /  \
#   20   40  60   80
BALANCED_VALUES = [50, 30, 70, 20, 40, 60, 80]


@pytest.fixture
def balanced() -> TreeNode:
    """A complete 7-node tree built by insertion."""
    tree = from_values(BALANCED_VALUES)
    assert tree is not None
    return tree


@pytest.fixture
def small() -> TreeNode:
    """The 10 -> (5, 15) tree."""
    tree = from_values([10, 5, 15])
    assert tree is not None
    return tree
