"""Unbalanced binary search tree for bstreelib.

All algorithms are recursive descents over BinaryNode. Mutating helpers
take a subtree and return its (possibly new) root, and the caller stores
that result back into the slot it came from. This makes every re-link an
explicit reassignment instead of an aliasing side effect.

Recursion depth equals tree height. Nothing rebalances, so inserting
sorted keys produces a linked list and Python's recursion limit (about
1000 frames by default) caps the usable height; past it the interpreter's
RecursionError propagates to the caller.
"""

import logging
from typing import Any, List, Optional, Union

from ..config import TraversalOrder, TreeConfig
from ..errors import InvariantViolationError
from .node import BinaryNode
from .traverser import InOrderTraverser, create_traverser

logger = logging.getLogger(__name__)


def percolate(node: Optional[BinaryNode]) -> Optional[BinaryNode]:
    """Descend left-ward from node until no left child remains.

    Applied to a right subtree this finds the in-order successor of the
    subtree's parent.

    Args:
        node: Subtree root (None returns None)

    Returns:
        The node holding the subtree's minimum key
    """
    if node is None:
        return None
    if node.left is None:
        return node
    return percolate(node.left)


class BinarySearchTree:
    """Ordered key container backed by an unbalanced BST.

    Keys only need to support ``<``. Equal keys are not rejected: a key
    that is not less than a node's key is routed right, so duplicates live
    in their own nodes in the right subtree.

    The empty-tree condition is reported by returning None from the
    dump/traverse/min/max queries, never by raising.

    Example:
        >>> tree = BinarySearchTree()
        >>> for key in (20, 8, 5, 10, 9, 15, 22):
        ...     tree.insert(key)
        >>> tree.ordered_sequence()
        [5, 8, 9, 10, 15, 20, 22]
        >>> tree.remove(20)
        True
        >>> tree.ordered_sequence()
        [5, 8, 9, 10, 15, 22]
    """

    def __init__(self, config: Optional[TreeConfig] = None):
        """Create an empty tree.

        Args:
            config: Tree configuration (defaults to TreeConfig())
        """
        self.config = config or TreeConfig()
        self.root: Optional[BinaryNode] = None
        self._size = 0

    # Insertion

    def insert(self, key: Any) -> None:
        """Insert key as a new leaf.

        Always succeeds. A duplicate key becomes a new node in the right
        subtree of its equal. A failing comparison propagates before any
        link is changed.
        """
        self.root = self._insert(key, self.root)
        self._size += 1
        logger.debug("Inserted %r (size=%d)", key, self._size)
        self._check_after_mutation()

    def _insert(self, key: Any, node: Optional[BinaryNode]) -> BinaryNode:
        if node is None:
            return BinaryNode(key)

        if key < node.key:
            node.left = self._insert(key, node.left)
        else:
            node.right = self._insert(key, node.right)
        return node

    # Membership

    def contains(self, key: Any) -> bool:
        """Check if a node with key lies on the canonical search path."""
        return self._contains(key, self.root)

    def _contains(self, key: Any, node: Optional[BinaryNode]) -> bool:
        if node is None:
            return False

        if key < node.key:
            return self._contains(key, node.left)
        elif key > node.key:
            return self._contains(key, node.right)
        else:
            return True

    def __contains__(self, key: Any) -> bool:
        return self.contains(key)

    # Removal

    def remove(self, key: Any) -> bool:
        """Remove the first node holding key on its search path.

        Removing an absent key is a no-op.

        Returns:
            True if a node was removed, False if key was absent
        """
        if not self.contains(key):
            logger.debug("Remove of absent key %r ignored", key)
            return False

        self.root = self._remove(key, self.root)
        self._size -= 1
        logger.debug("Removed %r (size=%d)", key, self._size)
        self._check_after_mutation()
        return True

    def _remove(self, key: Any, node: Optional[BinaryNode]) -> Optional[BinaryNode]:
        if node is None:
            return None

        if key < node.key:
            node.left = self._remove(key, node.left)
        elif key > node.key:
            node.right = self._remove(key, node.right)
        else:
            return self._splice(node)
        return node

    def _splice(self, node: BinaryNode) -> Optional[BinaryNode]:
        """Delete node itself and return what replaces it in its parent's slot."""
        if node.left is not None and node.right is not None:
            # Copy the successor's key up, then delete the successor below.
            successor = percolate(node.right)
            node.key = successor.key
            node.right = self._remove(node.key, node.right)
            return node

        # Zero or one child: promote whichever of this node's children exists.
        if node.left is not None:
            return node.left
        return node.right

    def clear(self) -> None:
        """Drop every node."""
        self.root = None
        self._size = 0

    # Dumps

    def ordered_sequence(self) -> Optional[List[Any]]:
        """Return all keys in ascending order, duplicates included.

        A fresh list is built on every call.

        Returns:
            List of keys, or None if the tree is empty
        """
        if self.root is None:
            return None
        return InOrderTraverser().keys(self.root)

    def traverse(self, order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER) -> Optional[List[Any]]:
        """Return all keys in the given traversal order.

        Args:
            order: TraversalOrder member or alias ("in", "pre", "post", "level")

        Returns:
            List of keys, or None if the tree is empty

        Raises:
            ValueError: If order is not recognized
        """
        traverser = create_traverser(order)
        if self.root is None:
            return None
        return traverser.keys(self.root)

    # Queries

    def minimum(self) -> Optional[Any]:
        """Smallest key, or None if empty."""
        node = percolate(self.root)
        return node.key if node is not None else None

    def maximum(self) -> Optional[Any]:
        """Largest key, or None if empty."""
        node = self.root
        if node is None:
            return None
        while node.right is not None:
            node = node.right
        return node.key

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        def _height(node: Optional[BinaryNode]) -> int:
            if node is None:
                return 0
            return 1 + max(_height(node.left), _height(node.right))

        return _height(self.root)

    def is_empty(self) -> bool:
        return self.root is None

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={self._size}, height={self.height()})"

    # Invariant checking

    def validate(self) -> bool:
        """Check the BST property and the node count.

        Left subtrees must hold keys strictly less than their node, right
        subtrees keys not less than it (duplicates go right).

        Returns:
            True if the tree is valid

        Raises:
            InvariantViolationError: On the first violation found
        """
        count = self._validate(self.root, None, None)
        if count != self._size:
            self._violation(
                f"Node count {count} does not match recorded size {self._size}"
            )
        return True

    def _validate(self, node: Optional[BinaryNode], low: Any, high: Any) -> int:
        """Validate subtree against bounds low <= key < high; return node count.

        A bound of None means unbounded on that side.
        """
        if node is None:
            return 0

        if low is not None and node.key < low:
            self._violation(f"Key {node.key!r} is less than lower bound {low!r}", node.key)
        if high is not None and not node.key < high:
            self._violation(f"Key {node.key!r} is not less than upper bound {high!r}", node.key)

        left_count = self._validate(node.left, low, node.key)
        right_count = self._validate(node.right, node.key, high)
        return 1 + left_count + right_count

    def _violation(self, message: str, key: Any = None) -> None:
        logger.error("BST invariant violated: %s", message)
        raise InvariantViolationError(message, key=key)

    def _check_after_mutation(self) -> None:
        if self.config.validate_on_mutation:
            self.validate()
