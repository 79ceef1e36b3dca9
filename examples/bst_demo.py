#!/usr/bin/env python3
"""
Basic bstreelib example: build a tree, probe a key, maybe remove it.

This example demonstrates:
- Inserting a fixed sequence of keys
- Membership testing with a random (or given) probe key
- Removal and the before/after ordered dumps
- How an empty tree is reported

Usage:
    python examples/bst_demo.py          # Random probe in [0, 23)
    python examples/bst_demo.py 9        # Probe a specific key
"""

import random
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from bstreelib import BinarySearchTree, print_tree


KEYS = (20, 8, 5, 10, 9, 15, 22)


def main():
    """Run the demonstration."""
    probe = int(sys.argv[1]) if len(sys.argv) > 1 else random.randrange(23)
    
    tree = BinarySearchTree()
    for key in KEYS:
        tree.insert(key)
    
    print_tree(tree)
    
    print(f"\nIs {probe} in the tree? ", end="")
    if tree.contains(probe):
        print("YES")
        print(f"Removing {probe}")
        tree.remove(probe)
    else:
        print("NO")
    
    print()
    print_tree(tree)
    
    # An empty tree reports on stderr instead of printing an empty line
    print()
    print_tree(BinarySearchTree())


if __name__ == "__main__":
    print("bstreelib - Basic Example")
    print("=" * 50)
    main()
