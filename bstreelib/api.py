"""High-level API for bstreelib.

This module provides simple, functional interfaces for common tree
operations. These functions wrap BinarySearchTree for ease of use in
simple cases.
"""

from typing import Any, Dict, Iterable, List, Optional

from .config import TreeConfig
from .core.traverser import InOrderTraverser, LevelOrderTraverser
from .core.tree import BinarySearchTree


def build_tree(keys: Iterable[Any],
               config: Optional[TreeConfig] = None) -> BinarySearchTree:
    """Build a tree by inserting keys in iteration order.
    
    Args:
        keys: Keys to insert (duplicates are kept)
        config: Tree configuration
        
    Returns:
        New BinarySearchTree
        
    Example:
        >>> tree = build_tree([20, 8, 5, 10, 9, 15, 22])
        >>> tree.contains(9)
        True
    """
    tree = BinarySearchTree(config)
    for key in keys:
        tree.insert(key)
    return tree


def tree_sort(keys: Iterable[Any]) -> List[Any]:
    """Sort keys by inserting them into a tree and dumping it in order.
    
    Duplicates are kept. Worst case is quadratic on already-sorted input.
    
    Example:
        >>> tree_sort([3, 1, 2, 1])
        [1, 1, 2, 3]
    """
    ordered = build_tree(keys).ordered_sequence()
    return ordered if ordered is not None else []


def get_leaf_keys(tree: BinarySearchTree) -> List[Any]:
    """Get keys of all leaf nodes, left to right."""
    return [
        node.key
        for node, _ in InOrderTraverser().traverse(tree.root)
        if node.is_leaf()
    ]


def get_tree_stats(tree: BinarySearchTree) -> Dict[str, Any]:
    """Get statistics about a tree.
    
    Args:
        tree: Tree to inspect
        
    Returns:
        Dictionary with tree statistics
        
    Example:
        >>> stats = get_tree_stats(build_tree([2, 1, 3]))
        >>> stats['total_nodes'], stats['leaf_nodes'], stats['height']
        (3, 2, 2)
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'height': 0,
        'depths': {},
        'min_key': tree.minimum(),
        'max_key': tree.maximum(),
    }
    
    for node, depth in LevelOrderTraverser().traverse(tree.root):
        stats['total_nodes'] += 1
        
        if node.is_leaf():
            stats['leaf_nodes'] += 1
        
        stats['height'] = max(stats['height'], depth + 1)
        
        if depth not in stats['depths']:
            stats['depths'][depth] = 0
        stats['depths'][depth] += 1
    
    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    stats['average_branching'] = (
        (stats['total_nodes'] - 1) / stats['internal_nodes']
        if stats['internal_nodes'] > 0 else 0
    )
    
    return stats
