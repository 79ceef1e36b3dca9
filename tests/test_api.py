"""Tests for the functional API."""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from bstreelib import (
    BinarySearchTree,
    TreeConfig,
    build_tree,
    get_leaf_keys,
    get_tree_stats,
    tree_sort,
)


def test_build_tree_inserts_in_order():
    tree = build_tree([20, 8, 5, 10, 9, 15, 22])
    
    assert isinstance(tree, BinarySearchTree)
    assert tree.root.key == 20
    assert tree.ordered_sequence() == [5, 8, 9, 10, 15, 20, 22]


def test_build_tree_accepts_generator_and_config():
    config = TreeConfig.debug()
    tree = build_tree((k * 3 % 7 for k in range(7)), config)
    
    assert tree.config is config
    assert tree.ordered_sequence() == list(range(7))


def test_tree_sort():
    assert tree_sort([3, 1, 2, 1]) == [1, 1, 2, 3]
    assert tree_sort(["b", "c", "a"]) == ["a", "b", "c"]


def test_tree_sort_empty_input():
    assert tree_sort([]) == []


def test_get_leaf_keys(scenario_tree):
    assert get_leaf_keys(scenario_tree) == [5, 9, 15, 22]
    assert get_leaf_keys(BinarySearchTree()) == []


def test_get_tree_stats(scenario_tree):
    stats = get_tree_stats(scenario_tree)
    
    assert stats['total_nodes'] == 7
    assert stats['leaf_nodes'] == 4
    assert stats['internal_nodes'] == 3
    assert stats['height'] == 4
    assert stats['height'] == scenario_tree.height()
    assert stats['depths'] == {0: 1, 1: 2, 2: 2, 3: 2}
    assert stats['min_key'] == 5
    assert stats['max_key'] == 22
    assert stats['average_branching'] == 2.0


def test_get_tree_stats_empty():
    stats = get_tree_stats(BinarySearchTree())
    
    assert stats['total_nodes'] == 0
    assert stats['leaf_nodes'] == 0
    assert stats['internal_nodes'] == 0
    assert stats['height'] == 0
    assert stats['depths'] == {}
    assert stats['min_key'] is None
    assert stats['max_key'] is None
    assert stats['average_branching'] == 0


def test_get_tree_stats_chain():
    stats = get_tree_stats(build_tree([1, 2, 3, 4]))
    
    assert stats['height'] == 4
    assert stats['leaf_nodes'] == 1
    assert stats['average_branching'] == 1.0
