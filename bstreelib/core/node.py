"""BinaryNode storage unit for bstreelib.

The node is intentionally kept simple - it's a data container holding one
key and two optional child links. All algorithms live in the tree.
"""

from typing import Any, List, Optional


class BinaryNode:
    """One key plus optional left and right children.
    
    A node is owned by exactly one parent (or by the tree, for the root),
    so the structure is always a strict tree.
    """
    
    def __init__(self,
                 key: Any,
                 left: Optional['BinaryNode'] = None,
                 right: Optional['BinaryNode'] = None):
        self.key = key
        self.left = left
        self.right = right
    
    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self.left is None and self.right is None
    
    def children(self) -> List['BinaryNode']:
        """Return the existing children, left before right."""
        return [child for child in (self.left, self.right) if child is not None]
    
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(key={self.key!r})"
