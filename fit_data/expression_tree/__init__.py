"""Expression Tree Module

Parsing, evaluation, simplification and rendering of single-variable
expression trees.
"""

from .expression import Expression, evaluate, evaluate_many, collect_parameter_names
from .parser import ExpressionParser, parse
from .core.node import (
    Node,
    VariableNode,
    ConstantNode,
    ZeroNode,
    OneNode,
    ParameterNode,
    UnaryOpNode,
    BinaryOpNode,
    PolynomialNode,
    ExpSeriesNode
)
from .core.operators import NodeType, OpType, UNARY_OPERATORS, BINARY_OPERATORS
from .errors import (
    ParseError,
    UnbalancedBracketsError,
    BracketOrderError,
    UnrecognizedLiteralError,
    UnrecognizedExpressionError,
    ParameterNotBoundError
)
from .utils import ExpressionSimplifier, SymPyRenderer, simplify, to_latex

__all__ = [
    "Expression", "evaluate", "evaluate_many", "collect_parameter_names",
    "ExpressionParser", "parse",
    "Node", "VariableNode", "ConstantNode", "ZeroNode", "OneNode", "ParameterNode",
    "UnaryOpNode", "BinaryOpNode", "PolynomialNode", "ExpSeriesNode",
    "NodeType", "OpType", "UNARY_OPERATORS", "BINARY_OPERATORS",
    "ParseError", "UnbalancedBracketsError", "BracketOrderError",
    "UnrecognizedLiteralError", "UnrecognizedExpressionError", "ParameterNotBoundError",
    "ExpressionSimplifier", "SymPyRenderer", "simplify", "to_latex"
]
