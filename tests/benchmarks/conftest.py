"""Deterministic tree generators for performance benchmarks.

All generators produce fixed, reproducible trees.  Shuffles use a seeded
``random.Random`` so every run benchmarks the same shapes.
Two tiers: 1000 and 10000 nodes.
"""

from __future__ import annotations

import random

import pytest

from bst_notation import NotationConfig, tree_to_notation
from bst_notation.tree.core import from_values
from bst_notation.tree.nodes import Tree


def shuffled_values(count: int, seed: int = 0) -> list[int]:
    """Return ``range(count)`` in a fixed pseudo-random order."""
    values = list(range(count))
    random.Random(seed).shuffle(values)
    return values


# --- Fixtures for each size tier ---


@pytest.fixture
def values_1000() -> list[int]:
    return shuffled_values(1000)


@pytest.fixture
def values_10000() -> list[int]:
    return shuffled_values(10000)


@pytest.fixture
def tree_1000(values_1000: list[int]) -> Tree:
    """1000-node random-insertion tree (expected depth around 20)."""
    return from_values(values_1000)


@pytest.fixture
def tree_10000(values_10000: list[int]) -> Tree:
    """10000-node random-insertion tree."""
    return from_values(values_10000)


@pytest.fixture
def wide_text_1000(tree_1000: Tree) -> str:
    """The 1000-node tree serialized with 4-space indentation, for repair."""
    return tree_to_notation(tree_1000, NotationConfig(indent_unit=4))
