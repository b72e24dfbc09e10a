import sympy as sp
from typing import Mapping, Optional
from ..core.node import Node


class SymPyRenderer:
  """SymPy-based conversion and LaTeX rendering of expression trees"""

  def __init__(self, simplify: bool = False):
    self.simplify = simplify

  def to_sympy(self, node: Node, params: Optional[Mapping[str, float]] = None) -> sp.Expr:
    """Convert a tree, substituting parameter values when `params` is given"""
    sympy_expr = node.to_sympy()
    if params:
      substitutions = {sp.Symbol(name): sp.Float(value) for name, value in params.items()}
      sympy_expr = sympy_expr.subs(substitutions)
    if self.simplify:
      sympy_expr = sp.simplify(sympy_expr)
    return sympy_expr

  def latex_representation(self, node: Node, params: Optional[Mapping[str, float]] = None) -> str:
    """Get LaTeX representation of the expression"""
    return sp.latex(self.to_sympy(node, params))


def to_latex(node: Node, params: Optional[Mapping[str, float]] = None, simplify: bool = False) -> str:
  return SymPyRenderer(simplify=simplify).latex_representation(node, params)
