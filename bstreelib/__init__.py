"""bstreelib - Ordered key container backed by a binary search tree.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from bstreelib import BinarySearchTree
    
    tree = BinarySearchTree()
    tree.insert(20)
    tree.ordered_sequence()   # [20], or None when empty
━━━━━━━━━━━━━━━━━━━━━━━━━━

The tree is unbalanced and single-threaded. Callers sharing a tree between
threads must serialize access themselves.
"""

__version__ = "0.1.0"

from .config import TreeConfig, DisplayConfig, TraversalOrder, parse_order
from .errors import BSTError, InvariantViolationError
from .core import (
    BinaryNode,
    BinarySearchTree,
    percolate,
    TreeTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .display import format_sequence, render_tree, print_tree
from .api import build_tree, tree_sort, get_leaf_keys, get_tree_stats

__all__ = [
    "__version__",
    # Config
    "TreeConfig",
    "DisplayConfig",
    "TraversalOrder",
    "parse_order",
    # Errors
    "BSTError",
    "InvariantViolationError",
    # Core
    "BinaryNode",
    "BinarySearchTree",
    "percolate",
    "TreeTraverser",
    "InOrderTraverser",
    "PreOrderTraverser",
    "PostOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    # Display
    "format_sequence",
    "render_tree",
    "print_tree",
    # API
    "build_tree",
    "tree_sort",
    "get_leaf_keys",
    "get_tree_stats",
]
