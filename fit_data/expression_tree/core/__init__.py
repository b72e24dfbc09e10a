"""Core expression tree components."""

from .node import (
    Node, VariableNode, ConstantNode, ZeroNode, OneNode, ParameterNode,
    UnaryOpNode, BinaryOpNode, PolynomialNode, ExpSeriesNode, format_number
)
from .operators import (
    NodeType, OpType, BINARY_OP_MAP, UNARY_OP_MAP, UNARY_OPERATORS, BINARY_OPERATORS,
    evaluate_binary_op_fast, evaluate_unary_op_fast,
    evaluate_polynomial
)

__all__ = [
    'Node', 'VariableNode', 'ConstantNode', 'ZeroNode', 'OneNode', 'ParameterNode',
    'UnaryOpNode', 'BinaryOpNode', 'PolynomialNode', 'ExpSeriesNode', 'format_number',
    'NodeType', 'OpType', 'BINARY_OP_MAP', 'UNARY_OP_MAP', 'UNARY_OPERATORS', 'BINARY_OPERATORS',
    'evaluate_binary_op_fast', 'evaluate_unary_op_fast',
    'evaluate_polynomial'
]
