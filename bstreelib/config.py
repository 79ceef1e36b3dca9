"""Configuration system for bstreelib.

This module defines how users tune a tree: debug validation of the BST
property after each mutation, and how a tree is rendered for display.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class TraversalOrder(Enum):
    """Order in which keys are visited when dumping a tree."""
    IN_ORDER = "in"         # Left, node, right (ascending)
    PRE_ORDER = "pre"       # Node before children
    POST_ORDER = "post"     # Children before node
    LEVEL_ORDER = "level"   # Level by level, left to right


_ORDER_ALIASES = {
    'in': TraversalOrder.IN_ORDER,
    'inorder': TraversalOrder.IN_ORDER,
    'in_order': TraversalOrder.IN_ORDER,
    'pre': TraversalOrder.PRE_ORDER,
    'preorder': TraversalOrder.PRE_ORDER,
    'pre_order': TraversalOrder.PRE_ORDER,
    'post': TraversalOrder.POST_ORDER,
    'postorder': TraversalOrder.POST_ORDER,
    'post_order': TraversalOrder.POST_ORDER,
    'level': TraversalOrder.LEVEL_ORDER,
    'level_order': TraversalOrder.LEVEL_ORDER,
    'bfs': TraversalOrder.LEVEL_ORDER,
}


def parse_order(order: Union[TraversalOrder, str]) -> TraversalOrder:
    """Parse a traversal order from an enum member or a string alias.
    
    Args:
        order: TraversalOrder member or name such as "in", "preorder", "bfs"
        
    Returns:
        TraversalOrder enum value
        
    Raises:
        ValueError: If the alias is not recognized
    """
    if isinstance(order, TraversalOrder):
        return order
    
    order_lower = order.lower() if isinstance(order, str) else str(order)
    if order_lower in _ORDER_ALIASES:
        return _ORDER_ALIASES[order_lower]
    
    raise ValueError(
        f"Unknown traversal order: {order}. "
        f"Choose from: {', '.join(_ORDER_ALIASES.keys())}"
    )


@dataclass
class DisplayConfig:
    """How a tree is turned into a single line of text."""
    
    separator: str = " "                # Between keys
    prefix: str = "BST: "               # Before the first key
    empty_message: str = "Empty tree."  # Written to the error stream
    order: TraversalOrder = TraversalOrder.IN_ORDER
    
    def __post_init__(self):
        self.order = parse_order(self.order)


@dataclass
class TreeConfig:
    """Complete configuration for a BinarySearchTree."""
    
    # Re-check the whole tree after every insert/remove (O(n) each)
    validate_on_mutation: bool = False
    
    display: DisplayConfig = field(default_factory=DisplayConfig)
    
    @classmethod
    def debug(cls) -> 'TreeConfig':
        """Create config that validates the tree after every mutation."""
        return cls(validate_on_mutation=True)
