"""Text rendering for bstreelib trees.

The tree itself never writes output. These helpers turn its dumps into a
single line and decide where an empty tree's message goes.
"""

import logging
import sys
from typing import Any, Iterable, Optional, TextIO

from .config import DisplayConfig
from .core.tree import BinarySearchTree

logger = logging.getLogger(__name__)


def format_sequence(keys: Iterable[Any], separator: str = " ") -> str:
    """Join keys into one string using str() on each key."""
    return separator.join(str(key) for key in keys)


def render_tree(tree: BinarySearchTree,
                config: Optional[DisplayConfig] = None) -> Optional[str]:
    """Render a tree as a single line.
    
    Args:
        tree: Tree to render
        config: Display options (defaults to the tree's own display config)
        
    Returns:
        Prefix followed by the keys in config.order, or None if the tree is empty
    """
    config = config or tree.config.display
    keys = tree.traverse(config.order)
    if keys is None:
        return None
    return config.prefix + format_sequence(keys, config.separator)


def print_tree(tree: BinarySearchTree,
               out: Optional[TextIO] = None,
               err: Optional[TextIO] = None,
               config: Optional[DisplayConfig] = None) -> bool:
    """Print a tree, or its empty message if it has no keys.
    
    Args:
        tree: Tree to print
        out: Stream for the rendered keys (default: sys.stdout)
        err: Stream for the empty-tree message (default: sys.stderr)
        config: Display options (defaults to the tree's own display config)
        
    Returns:
        True if keys were printed, False if the tree was empty
    """
    config = config or tree.config.display
    line = render_tree(tree, config)
    
    if line is None:
        logger.warning("Attempted to display an empty tree")
        print(config.empty_message, file=err or sys.stderr)
        return False
    
    print(line, file=out or sys.stdout)
    return True
