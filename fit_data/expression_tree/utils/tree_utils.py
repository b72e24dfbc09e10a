"""
Tree Utility Functions

Traversal and inspection helpers for expression trees. All helpers go
through `Node.children()`, so they work for every node kind without type
switches.
"""

from typing import List, Any, Callable, cast
from collections import deque

from ..core.node import Node, BinaryOpNode, UnaryOpNode, ConstantNode, ParameterNode


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative)"""
    nodes_to_visit = deque([node])
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.popleft()
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.children())

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Pre-order, left to right (iterative)"""
    stack = [node]
    all_nodes = []

    while stack:
        current_node = stack.pop()
        all_nodes.append(current_node)
        stack.extend(reversed(current_node.children()))

    return all_nodes


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        node: Root node of the tree

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    children = node.children()
    if not children:
        return 1
    return 1 + max(calculate_tree_depth(child) for child in children)


def find_nodes_by_type(node: Node, node_type: type) -> List[Node]:
    """Find all nodes of a specific type in the tree (depth-first order)."""
    return [n for n in get_all_nodes(node, 'depth_first') if isinstance(n, node_type)]


def find_nodes_by_operator(node: Node, operator: str) -> List[Node]:
    """
    Find all operator nodes with a specific operator.

    Args:
        node: Root node of the tree
        operator: Operator string to search for, e.g. '+' or 'sin'

    Returns:
        List of nodes with the specified operator
    """
    return [
        n for n in get_all_nodes(node, 'depth_first')
        if isinstance(n, (BinaryOpNode, UnaryOpNode)) and n.operator == operator
    ]


def apply_to_all_nodes(node: Node, func: Callable[[Node], Any]) -> List[Any]:
    """Apply `func` to every node, depth-first, and collect the results."""
    return [func(n) for n in get_all_nodes(node, 'depth_first')]


def get_constants(node: Node) -> List[ConstantNode]:
    """Get all constant nodes in the tree."""
    return cast(List[ConstantNode], find_nodes_by_type(node, ConstantNode))


def get_parameters(node: Node) -> List[ParameterNode]:
    """Get all parameter nodes in the tree."""
    return cast(List[ParameterNode], find_nodes_by_type(node, ParameterNode))
