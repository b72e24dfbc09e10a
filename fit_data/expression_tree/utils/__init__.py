"""Utilities for expression trees."""

from .simplifier import ExpressionSimplifier, SIMPLIFICATION_RULES, simplify
from .sympy_utils import SymPyRenderer, to_latex
from .tree_utils import (
    get_all_nodes, calculate_tree_depth, find_nodes_by_type,
    find_nodes_by_operator, apply_to_all_nodes, get_constants, get_parameters
)

__all__ = [
    'ExpressionSimplifier', 'SIMPLIFICATION_RULES', 'simplify',
    'SymPyRenderer', 'to_latex',
    'get_all_nodes', 'calculate_tree_depth', 'find_nodes_by_type',
    'find_nodes_by_operator', 'apply_to_all_nodes', 'get_constants', 'get_parameters'
]
