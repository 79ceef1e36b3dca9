"""Core structures for bstreelib.

This module contains the node type, the traversal strategies and the
tree that ties them together.
"""

from .node import BinaryNode
from .traverser import (
    TreeTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .tree import BinarySearchTree, percolate

__all__ = [
    "BinaryNode",
    "TreeTraverser",
    "InOrderTraverser",
    "PreOrderTraverser",
    "PostOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    "BinarySearchTree",
    "percolate",
]
