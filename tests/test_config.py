"""Tests for configuration objects and invariant validation."""

import sys
import unittest
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from bstreelib import (
    BinarySearchTree,
    BSTError,
    DisplayConfig,
    InvariantViolationError,
    TraversalOrder,
    TreeConfig,
    build_tree,
    parse_order,
)


class TestConfigDefaults(unittest.TestCase):
    
    def test_tree_config_defaults(self):
        config = TreeConfig()
        
        self.assertFalse(config.validate_on_mutation)
        self.assertIsInstance(config.display, DisplayConfig)
    
    def test_display_defaults(self):
        display = DisplayConfig()
        
        self.assertEqual(display.separator, " ")
        self.assertEqual(display.prefix, "BST: ")
        self.assertEqual(display.empty_message, "Empty tree.")
        self.assertEqual(display.order, TraversalOrder.IN_ORDER)
    
    def test_display_configs_are_not_shared(self):
        self.assertIsNot(TreeConfig().display, TreeConfig().display)
    
    def test_debug_preset(self):
        self.assertTrue(TreeConfig.debug().validate_on_mutation)
    
    def test_display_order_accepts_alias(self):
        self.assertEqual(DisplayConfig(order="level").order, TraversalOrder.LEVEL_ORDER)
    
    def test_display_order_rejects_unknown(self):
        with self.assertRaises(ValueError):
            DisplayConfig(order="spiral")


class TestParseOrder:
    
    def test_enum_passes_through(self):
        assert parse_order(TraversalOrder.POST_ORDER) is TraversalOrder.POST_ORDER
    
    def test_aliases_are_case_insensitive(self):
        assert parse_order("PreOrder") is TraversalOrder.PRE_ORDER
        assert parse_order("BFS") is TraversalOrder.LEVEL_ORDER
    
    def test_unknown_alias(self):
        with pytest.raises(ValueError, match="Choose from"):
            parse_order("diagonal")


class TestValidation:
    
    def test_valid_tree(self, scenario_tree):
        assert scenario_tree.validate() is True
    
    def test_empty_tree_is_valid(self):
        assert BinarySearchTree().validate() is True
    
    def test_detects_misplaced_key(self, scenario_tree):
        scenario_tree.root.left.key = 100
        
        with pytest.raises(InvariantViolationError) as excinfo:
            scenario_tree.validate()
        assert excinfo.value.key == 100
    
    def test_detects_equal_key_on_left(self):
        tree = build_tree([10, 5])
        tree.root.left.key = 10
        
        with pytest.raises(InvariantViolationError):
            tree.validate()
    
    def test_detects_size_mismatch(self, scenario_tree):
        scenario_tree._size = 99
        
        with pytest.raises(InvariantViolationError, match="does not match"):
            scenario_tree.validate()
    
    def test_violation_is_a_bst_error(self):
        assert issubclass(InvariantViolationError, BSTError)
    
    def test_violation_is_logged(self, scenario_tree, caplog):
        scenario_tree.root.right.key = 1
        
        with caplog.at_level("ERROR", logger="bstreelib.core.tree"):
            with pytest.raises(InvariantViolationError):
                scenario_tree.validate()
        assert "invariant violated" in caplog.text
    
    def test_validate_on_mutation(self):
        tree = build_tree([20, 8, 5], TreeConfig.debug())
        tree.root.left.key = 100
        
        with pytest.raises(InvariantViolationError):
            tree.insert(1)
    
    def test_no_validation_by_default(self):
        tree = build_tree([20, 8, 5])
        tree.root.left.key = 100
        
        tree.insert(1)
        assert len(tree) == 4


if __name__ == "__main__":
    unittest.main()
