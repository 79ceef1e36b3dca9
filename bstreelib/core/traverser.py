"""Traversal strategies for bstreelib.

Traversers walk a BinaryNode structure in a fixed order and yield
``(node, depth)`` pairs, where depth is relative to the starting node.
They are used internally to build one-shot key dumps; the tree never
hands a live traverser to callers.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple, Union

from ..config import TraversalOrder, parse_order
from .node import BinaryNode


class TreeTraverser(ABC):
    """Abstract base class for traversal strategies."""
    
    @abstractmethod
    def traverse(self, root: Optional[BinaryNode]) -> Iterator[Tuple[BinaryNode, int]]:
        """Traverse the subtree starting at root.
        
        Args:
            root: Starting node (None yields nothing)
            
        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass
    
    def keys(self, root: Optional[BinaryNode]) -> List:
        """Collect just the keys, in traversal order."""
        return [node.key for node, _ in self.traverse(root)]


class InOrderTraverser(TreeTraverser):
    """Left subtree, then node, then right subtree.
    
    On a valid BST this yields keys in non-decreasing order.
    """
    
    def traverse(self, root: Optional[BinaryNode]) -> Iterator[Tuple[BinaryNode, int]]:
        def _traverse_recursive(node: Optional[BinaryNode], depth: int) -> Iterator[Tuple[BinaryNode, int]]:
            if node is None:
                return
            yield from _traverse_recursive(node.left, depth + 1)
            yield (node, depth)
            yield from _traverse_recursive(node.right, depth + 1)
        
        yield from _traverse_recursive(root, 0)


class PreOrderTraverser(TreeTraverser):
    """Node before its children.
    
    Re-inserting keys in this order rebuilds an identical tree shape.
    """
    
    def traverse(self, root: Optional[BinaryNode]) -> Iterator[Tuple[BinaryNode, int]]:
        def _traverse_recursive(node: Optional[BinaryNode], depth: int) -> Iterator[Tuple[BinaryNode, int]]:
            if node is None:
                return
            yield (node, depth)
            yield from _traverse_recursive(node.left, depth + 1)
            yield from _traverse_recursive(node.right, depth + 1)
        
        yield from _traverse_recursive(root, 0)


class PostOrderTraverser(TreeTraverser):
    """Children before their node."""
    
    def traverse(self, root: Optional[BinaryNode]) -> Iterator[Tuple[BinaryNode, int]]:
        def _traverse_recursive(node: Optional[BinaryNode], depth: int) -> Iterator[Tuple[BinaryNode, int]]:
            if node is None:
                return
            yield from _traverse_recursive(node.left, depth + 1)
            yield from _traverse_recursive(node.right, depth + 1)
            yield (node, depth)
        
        yield from _traverse_recursive(root, 0)


class LevelOrderTraverser(TreeTraverser):
    """Breadth-first, left to right within each level.
    
    Uses a queue instead of recursion, so it is not bounded by the
    interpreter's recursion limit.
    """
    
    def traverse(self, root: Optional[BinaryNode]) -> Iterator[Tuple[BinaryNode, int]]:
        if root is None:
            return
        
        queue: Deque[Tuple[BinaryNode, int]] = deque([(root, 0)])
        while queue:
            node, depth = queue.popleft()
            yield (node, depth)
            for child in node.children():
                queue.append((child, depth + 1))


_TRAVERSERS = {
    TraversalOrder.IN_ORDER: InOrderTraverser,
    TraversalOrder.PRE_ORDER: PreOrderTraverser,
    TraversalOrder.POST_ORDER: PostOrderTraverser,
    TraversalOrder.LEVEL_ORDER: LevelOrderTraverser,
}


def create_traverser(order: Union[TraversalOrder, str]) -> TreeTraverser:
    """Create a traverser instance for an order.
    
    Args:
        order: TraversalOrder member or string alias ("in", "pre", "bfs", ...)
        
    Returns:
        TreeTraverser instance
        
    Raises:
        ValueError: If order is not recognized
    """
    return _TRAVERSERS[parse_order(order)]()
