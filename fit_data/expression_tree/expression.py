import numpy as np
import sympy as sp
from typing import Mapping, List, Optional
from .core.node import Node
from .parser import parse
from .utils.simplifier import simplify
from .utils.sympy_utils import to_latex
from .utils.tree_utils import calculate_tree_depth

_NO_PARAMS: Mapping[str, float] = {}


def evaluate(node: Node, x: float, params: Optional[Mapping[str, float]] = None) -> float:
  """Evaluate at a single point. Non-finite results are returned, not raised."""
  with np.errstate(all='ignore'):
    return float(node.evaluate(np.float64(x), _NO_PARAMS if params is None else params))


def evaluate_many(node: Node, xs, params: Optional[Mapping[str, float]] = None) -> np.ndarray:
  """Evaluate over an array of points in one walk"""
  xs = np.asarray(xs, dtype=np.float64)
  with np.errstate(all='ignore'):
    result = node.evaluate(xs, _NO_PARAMS if params is None else params)
  # x-free trees evaluate to a scalar
  return np.array(np.broadcast_to(result, xs.shape), dtype=np.float64)


def collect_parameter_names(node: Node) -> List[str]:
  """Parameter names in left-to-right order, duplicates kept"""
  names: List[str] = []
  node.collect_parameter_names(names)
  return names


class Expression:
  """Immutable expression wrapper with string caching"""

  __slots__ = ('root', '_string_cache')

  def __init__(self, root: Node):
    self.root = root
    self._string_cache: Optional[str] = None

  @classmethod
  def from_string(cls, text: str) -> 'Expression':
    return cls(parse(text))

  def evaluate(self, x: float, params: Optional[Mapping[str, float]] = None) -> float:
    return evaluate(self.root, x, params)

  def evaluate_many(self, xs, params: Optional[Mapping[str, float]] = None) -> np.ndarray:
    return evaluate_many(self.root, xs, params)

  def simplify(self) -> 'Expression':
    return Expression(simplify(self.root))

  def to_string(self) -> str:
    if self._string_cache is None:
      self._string_cache = self.root.to_string()
    return self._string_cache

  def to_plot_string(self, params: Optional[Mapping[str, float]] = None) -> str:
    return self.root.to_plot_string(params)

  def to_latex(self, params: Optional[Mapping[str, float]] = None) -> str:
    return to_latex(self.root, params)

  def to_sympy(self) -> sp.Expr:
    return self.root.to_sympy()

  def get_parameter_names(self) -> List[str]:
    return collect_parameter_names(self.root)

  def size(self) -> int:
    """Node count"""
    return self.root.size()

  def depth(self) -> int:
    return calculate_tree_depth(self.root)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return NotImplemented
    return self.root == other.root

  def __hash__(self) -> int:
    return hash(self.root)

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"Expression({self.to_string()!r})"
