"""
fit_data - symbolic expression engine for brute-force curve fitting

Formulas in one variable `x` with named scalar parameters: parsed from infix
text, evaluated with IEEE-754 float64 semantics, generated at random under a
complexity budget, simplified in one bottom-up pass and rendered for display,
gnuplot and LaTeX.
"""

from typing import Mapping, Optional

from .expression_tree import (
    Expression,
    ExpressionParser,
    ExpressionSimplifier,
    SymPyRenderer,
    Node,
    VariableNode,
    ConstantNode,
    ZeroNode,
    OneNode,
    ParameterNode,
    UnaryOpNode,
    BinaryOpNode,
    PolynomialNode,
    ExpSeriesNode,
    ParseError,
    UnbalancedBracketsError,
    BracketOrderError,
    UnrecognizedLiteralError,
    UnrecognizedExpressionError,
    ParameterNotBoundError,
    parse,
    evaluate,
    evaluate_many,
    collect_parameter_names,
    simplify,
    to_latex,
)
from .generator import ExpressionGenerator, generate
from .params import Params
from .config import PARAMETER_NAMES
from .logging_system import LogLevel, configure_logging, set_log_level, get_logger


def to_display_string(node: Node) -> str:
    """Fully parenthesized infix text that `parse` reads back"""
    return node.to_string()


def to_plot_string(node: Node, params: Optional[Mapping[str, float]] = None) -> str:
    """gnuplot syntax; parameter values are substituted when `params` is given"""
    return node.to_plot_string(params)


__version__ = "0.1.0"

__all__ = [
    # Operations
    "parse", "evaluate", "evaluate_many", "collect_parameter_names", "simplify",
    "generate", "to_display_string", "to_plot_string", "to_latex",

    # Classes
    "Expression", "ExpressionParser", "ExpressionSimplifier", "ExpressionGenerator",
    "SymPyRenderer", "Params",

    # Nodes
    "Node", "VariableNode", "ConstantNode", "ZeroNode", "OneNode", "ParameterNode",
    "UnaryOpNode", "BinaryOpNode", "PolynomialNode", "ExpSeriesNode",

    # Errors
    "ParseError", "UnbalancedBracketsError", "BracketOrderError",
    "UnrecognizedLiteralError", "UnrecognizedExpressionError", "ParameterNotBoundError",

    # Configuration and logging
    "PARAMETER_NAMES", "LogLevel", "configure_logging", "set_log_level", "get_logger",
]
