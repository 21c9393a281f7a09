"""
Visualization module for form state trees.

Provides console rendering of a tree's structure, values and flags.
"""

from formstate.visualization.tree_exporter import (
    build_form_state_tree,
    print_form_state,
)

__all__ = ["build_form_state_tree", "print_form_state"]
