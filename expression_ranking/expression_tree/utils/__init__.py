"""Utilities for expression trees."""

from .tree_utils import (
    get_all_nodes, calculate_tree_depth, find_nodes_by_operator,
    get_constants, get_variables, validate_tree_structure
)

__all__ = [
    'get_all_nodes', 'calculate_tree_depth', 'find_nodes_by_operator',
    'get_constants', 'get_variables', 'validate_tree_structure'
]
