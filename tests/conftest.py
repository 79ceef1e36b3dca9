"""Shared pytest configuration and fixtures for bstreelib tests."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from bstreelib import BinarySearchTree


# Insertion order used throughout: yields the shape
#         20
#       /    \
#      8      22
#     / \
#    5   10
#       /  \
#      9    15
SCENARIO_KEYS = (20, 8, 5, 10, 9, 15, 22)


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long-running workloads (deselect with -m 'not slow')")


@pytest.fixture
def scenario_tree():
    """Tree built from SCENARIO_KEYS in order."""
    tree = BinarySearchTree()
    for key in SCENARIO_KEYS:
        tree.insert(key)
    return tree
