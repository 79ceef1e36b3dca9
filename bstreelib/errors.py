"""Exception types for bstreelib.

Absent keys and empty trees are not errors here: ``remove`` of a missing
key is a no-op and empty-tree queries return ``None``. Comparison failures
from the keys themselves propagate unchanged.
"""

from typing import Any, Optional


class BSTError(Exception):
    """Base class for all bstreelib errors."""
    pass


class InvariantViolationError(BSTError):
    """Raised when a tree no longer satisfies the BST property.
    
    Attributes:
        key: Key of the node where the violation was found (if any)
    """
    
    def __init__(self, message: str, key: Optional[Any] = None):
        super().__init__(message)
        self.key = key
