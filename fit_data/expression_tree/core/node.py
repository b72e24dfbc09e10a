import math
import numpy as np
import sympy as sp
from abc import ABC, abstractmethod
from typing import Optional, List, Mapping, Tuple
from .operators import (
  NodeType, BINARY_OP_MAP, UNARY_OP_MAP, FUNCTION_NAMES, PLOT_FUNCTION_NAMES,
  evaluate_binary_op_fast, evaluate_unary_op_fast, evaluate_polynomial
)
from ..errors import ParameterNotBoundError
from ...config import PARAMETER_NAMES, VARIABLE_NAME


def format_number(value: float) -> str:
  """Positional float formatting that the parser reads back unchanged"""
  text = np.format_float_positional(value, trim='0')
  if np.signbit(value):
    return f"({text})"
  return text


def lookup_parameter(params: Mapping[str, float], name: str) -> float:
  try:
    return params[name]
  except KeyError:
    raise ParameterNotBoundError(name) from None


class Node(ABC):
  """Base node class. Nodes are never mutated after construction."""

  __slots__ = ('_hash_cache', '_size_cache')

  def __init__(self):
    self._hash_cache: Optional[int] = None
    self._size_cache: Optional[int] = None

  @abstractmethod
  def evaluate(self, x, params: Mapping[str, float]):
    """Evaluate for a float64 scalar or array `x`"""
    pass

  @abstractmethod
  def to_string(self) -> str:
    pass

  @abstractmethod
  def to_plot_string(self, params: Optional[Mapping[str, float]] = None) -> str:
    pass

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  def collect_parameter_names(self, names: List[str]):
    pass

  def children(self) -> Tuple['Node', ...]:
    return ()

  def with_children(self, *children: 'Node') -> 'Node':
    """Same node kind over new children (leaves return themselves)"""
    return self

  def size(self) -> int:
    """Node count"""
    if self._size_cache is None:
      self._size_cache = 1 + sum(child.size() for child in self.children())
    return self._size_cache

  @abstractmethod
  def _key(self) -> tuple:
    pass

  def __eq__(self, other) -> bool:
    if self is other:
      return True
    if not isinstance(other, Node):
      return NotImplemented
    return self._key() == other._key()

  def __hash__(self) -> int:
    if self._hash_cache is None:
      self._hash_cache = hash(self._key())
    return self._hash_cache

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self.to_string()!r})"


class VariableNode(Node):
  __slots__ = ()

  def evaluate(self, x, params):
    return x

  def to_string(self) -> str:
    return VARIABLE_NAME

  def to_plot_string(self, params=None) -> str:
    return VARIABLE_NAME

  def to_sympy(self):
    return sp.Symbol(VARIABLE_NAME)

  def _key(self) -> tuple:
    return (NodeType.VARIABLE,)


class ConstantNode(Node):
  __slots__ = ('value',)

  def __init__(self, value: float):
    super().__init__()
    self.value = float(value)

  def evaluate(self, x, params):
    return np.float64(self.value)

  def to_string(self) -> str:
    return format_number(self.value)

  def to_plot_string(self, params=None) -> str:
    return format_number(self.value)

  def to_sympy(self):
    return sp.Float(self.value)

  def _key(self) -> tuple:
    return (NodeType.CONSTANT, self.value)


class ZeroNode(Node):
  __slots__ = ()
  value = 0.0

  def evaluate(self, x, params):
    return np.float64(0.0)

  def to_string(self) -> str:
    return "0"

  def to_plot_string(self, params=None) -> str:
    return "0"

  def to_sympy(self):
    return sp.Integer(0)

  def _key(self) -> tuple:
    return (NodeType.ZERO,)


class OneNode(Node):
  __slots__ = ()
  value = 1.0

  def evaluate(self, x, params):
    return np.float64(1.0)

  def to_string(self) -> str:
    return "1"

  def to_plot_string(self, params=None) -> str:
    return "1"

  def to_sympy(self):
    return sp.Integer(1)

  def _key(self) -> tuple:
    return (NodeType.ONE,)


class ParameterNode(Node):
  __slots__ = ('name',)

  def __init__(self, name: str):
    super().__init__()
    if name not in PARAMETER_NAMES:
      raise ValueError(f"Unknown parameter name: {name!r}")
    self.name = name

  def evaluate(self, x, params):
    return np.float64(lookup_parameter(params, self.name))

  def to_string(self) -> str:
    return self.name

  def to_plot_string(self, params=None) -> str:
    if params is None:
      return self.name
    return format_number(lookup_parameter(params, self.name))

  def to_sympy(self):
    return sp.Symbol(self.name)

  def collect_parameter_names(self, names):
    names.append(self.name)

  def _key(self) -> tuple:
    return (NodeType.PARAMETER, self.name)


class UnaryOpNode(Node):
  __slots__ = ('operator', 'operand', '_op_type')

  def __init__(self, operator: str, operand: Node):
    super().__init__()
    if operator not in UNARY_OP_MAP:
      raise ValueError(f"Unknown unary operator: {operator!r}")
    self.operator = operator
    self.operand = operand
    self._op_type = UNARY_OP_MAP[operator]

  def evaluate(self, x, params):
    return evaluate_unary_op_fast(self.operand.evaluate(x, params), self._op_type)

  def to_string(self) -> str:
    operand = self.operand.to_string()
    if self.operator == 'neg':
      return f"(-{operand})"
    if self.operator == 'square':
      return f"({operand})^2"
    return f"{FUNCTION_NAMES[self.operator]}({operand})"

  def to_plot_string(self, params=None) -> str:
    operand = self.operand.to_plot_string(params)
    if self.operator == 'neg':
      return f"(-{operand})"
    if self.operator == 'square':
      return f"({operand})**2"
    return f"{PLOT_FUNCTION_NAMES[self.operator]}({operand})"

  def to_sympy(self):
    operand_sympy = self.operand.to_sympy()

    if self.operator == 'neg':
      return -operand_sympy
    elif self.operator == 'exp':
      return sp.exp(operand_sympy)
    elif self.operator == 'ln':
      return sp.log(operand_sympy)
    elif self.operator == 'sqrt':
      return sp.sqrt(operand_sympy)
    elif self.operator == 'square':
      return operand_sympy**2
    elif self.operator == 'sin':
      return sp.sin(operand_sympy)
    elif self.operator == 'cos':
      return sp.cos(operand_sympy)
    return sp.tan(operand_sympy)

  def collect_parameter_names(self, names):
    self.operand.collect_parameter_names(names)

  def children(self):
    return (self.operand,)

  def with_children(self, operand):
    if operand is self.operand:
      return self
    return UnaryOpNode(self.operator, operand)

  def _key(self) -> tuple:
    return (NodeType.UNARY_OP, self.operator, self.operand)


class BinaryOpNode(Node):
  __slots__ = ('operator', 'left', 'right', '_op_type')

  def __init__(self, operator: str, left: Node, right: Node):
    super().__init__()
    if operator not in BINARY_OP_MAP:
      raise ValueError(f"Unknown binary operator: {operator!r}")
    self.operator = operator
    self.left = left
    self.right = right
    self._op_type = BINARY_OP_MAP[operator]

  def evaluate(self, x, params):
    left_val = self.left.evaluate(x, params)
    right_val = self.right.evaluate(x, params)
    return evaluate_binary_op_fast(left_val, right_val, self._op_type)

  def to_string(self) -> str:
    if self.operator == '^':
      return f"({self.left.to_string()})^({self.right.to_string()})"
    return f"({self.left.to_string()} {self.operator} {self.right.to_string()})"

  def to_plot_string(self, params=None) -> str:
    left = self.left.to_plot_string(params)
    right = self.right.to_plot_string(params)
    if self.operator == '^':
      return f"({left})**({right})"
    return f"({left} {self.operator} {right})"

  def to_sympy(self):
    left = self.left.to_sympy()
    right = self.right.to_sympy()
    if self.operator == '+':
      return sp.Add(left, right)
    elif self.operator == '-':
      return sp.Add(left, sp.Mul(-1, right))
    elif self.operator == '*':
      return sp.Mul(left, right)
    elif self.operator == '/':
      return sp.Mul(left, sp.Pow(right, -1))
    return sp.Pow(left, right)

  def collect_parameter_names(self, names):
    self.left.collect_parameter_names(names)
    self.right.collect_parameter_names(names)

  def children(self):
    return (self.left, self.right)

  def with_children(self, left, right):
    if left is self.left and right is self.right:
      return self
    return BinaryOpNode(self.operator, left, right)

  def _key(self) -> tuple:
    return (NodeType.BINARY_OP, self.operator, self.left, self.right)


class PolynomialNode(Node):
  """a + bx + cx^2 + dx^3 + ... over the first degree+1 parameter names"""

  __slots__ = ('degree',)
  factorial = False

  def __init__(self, degree: int):
    super().__init__()
    if degree < 0 or degree >= len(PARAMETER_NAMES):
      raise ValueError(f"Polynomial degree out of range: {degree}")
    self.degree = int(degree)

  @property
  def parameter_names(self) -> Tuple[str, ...]:
    return PARAMETER_NAMES[:self.degree + 1]

  def evaluate(self, x, params):
    coefficients = np.array(
      [lookup_parameter(params, name) for name in self.parameter_names], dtype=np.float64
    )
    return evaluate_polynomial(coefficients, x, self.factorial)

  def _terms(self, coefficients: List[str], power: str) -> str:
    terms = []
    for i, coefficient in enumerate(coefficients):
      if i == 0:
        term = coefficient
      elif i == 1:
        term = f"{coefficient}*x"
      else:
        term = f"{coefficient}*x{power}{i}"
      if self.factorial and i >= 2:
        term += f"/{math.factorial(i)}"
      terms.append(term)
    return "(" + " + ".join(terms) + ")"

  def to_string(self) -> str:
    return self._terms(list(self.parameter_names), "^")

  def to_plot_string(self, params=None) -> str:
    if params is None:
      coefficients = list(self.parameter_names)
    else:
      coefficients = [format_number(lookup_parameter(params, name)) for name in self.parameter_names]
    return self._terms(coefficients, "**")

  def to_sympy(self):
    x = sp.Symbol(VARIABLE_NAME)
    terms = []
    for i, name in enumerate(self.parameter_names):
      term = sp.Symbol(name) * x**i
      if self.factorial:
        term = term / sp.factorial(i)
      terms.append(term)
    return sp.Add(*terms)

  def collect_parameter_names(self, names):
    names.extend(self.parameter_names)

  def _key(self) -> tuple:
    return (NodeType.POLYNOMIAL, self.degree)


class ExpSeriesNode(PolynomialNode):
  """a + bx + cx^2/2! + dx^3/3! + ... (truncated exponential-like series)"""

  __slots__ = ()
  factorial = True

  def _key(self) -> tuple:
    return (NodeType.EXP_SERIES, self.degree)
