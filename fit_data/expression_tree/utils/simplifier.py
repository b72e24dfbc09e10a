import numpy as np
from typing import Callable, List, Optional, Tuple
from ..core.node import (
  Node, VariableNode, ConstantNode, ZeroNode, OneNode, ParameterNode,
  UnaryOpNode, BinaryOpNode
)
from ...logging_system import log_debug

Rule = Callable[[Node], Optional[Node]]

_CONSTANT_TYPES = (ConstantNode, ZeroNode, OneNode)
_ABSORBING_TYPES = (ParameterNode, ConstantNode, ZeroNode, OneNode)

# Pairs of unary operators that undo each other: outer(inner(e)) -> e
_INVERSE_PAIRS = {
  ('neg', 'neg'), ('ln', 'exp'), ('exp', 'ln'), ('sqrt', 'square'), ('square', 'sqrt')
}


def _is_unary(node: Node, operator: str) -> bool:
  return isinstance(node, UnaryOpNode) and node.operator == operator


def _is_negated_variable(node: Node) -> bool:
  return _is_unary(node, 'neg') and isinstance(node.operand, VariableNode)


def absorb_parameter(node: Node) -> Optional[Node]:
  """A free parameter can take the value of f(p) or of p op constant"""
  if isinstance(node, UnaryOpNode) and isinstance(node.operand, ParameterNode):
    return node.operand
  if (isinstance(node, BinaryOpNode) and isinstance(node.left, ParameterNode)
      and isinstance(node.right, _ABSORBING_TYPES)):
    return node.left
  return None


def divide_by_parameter(node: Node) -> Optional[Node]:
  if isinstance(node, BinaryOpNode) and node.operator == '/' and isinstance(node.right, ParameterNode):
    return BinaryOpNode('*', node.left, node.right)
  return None


def fold_constants(node: Node) -> Optional[Node]:
  children = node.children()
  if children and all(isinstance(child, _CONSTANT_TYPES) for child in children):
    with np.errstate(all='ignore'):
      return ConstantNode(float(node.evaluate(np.float64(0.0), {})))
  return None


def zero_identity(node: Node) -> Optional[Node]:
  if not isinstance(node, BinaryOpNode):
    return None
  left, right = node.left, node.right
  if node.operator == '-':
    if isinstance(left, VariableNode) and isinstance(right, VariableNode):
      return ZeroNode()
  elif node.operator == '+':
    if ((isinstance(left, VariableNode) and _is_negated_variable(right))
        or (_is_negated_variable(left) and isinstance(right, VariableNode))):
      return ZeroNode()
  elif node.operator == '*':
    if isinstance(left, ZeroNode) or isinstance(right, ZeroNode):
      return ZeroNode()
  elif node.operator == '^':
    if isinstance(left, ZeroNode):
      return ZeroNode()
  return None


def one_identity(node: Node) -> Optional[Node]:
  if not isinstance(node, BinaryOpNode):
    return None
  left, right = node.left, node.right
  if node.operator == '/':
    # x / (-x) is reduced to one as well
    if ((isinstance(left, VariableNode) and isinstance(right, VariableNode))
        or (isinstance(left, VariableNode) and _is_negated_variable(right))
        or (_is_negated_variable(left) and isinstance(right, VariableNode))):
      return OneNode()
  elif node.operator == '^':
    if isinstance(left, OneNode) or isinstance(right, ZeroNode):
      return OneNode()
  return None


def inverse_cancellation(node: Node) -> Optional[Node]:
  if isinstance(node, UnaryOpNode) and isinstance(node.operand, UnaryOpNode):
    if (node.operator, node.operand.operator) in _INVERSE_PAIRS:
      return node.operand.operand
  return None


def identity_elision(node: Node) -> Optional[Node]:
  if not isinstance(node, BinaryOpNode):
    return None
  left, right = node.left, node.right
  if node.operator == '+':
    if isinstance(right, ZeroNode):
      return left
    if isinstance(left, ZeroNode):
      return right
  elif node.operator == '-':
    if isinstance(right, ZeroNode):
      return left
  elif node.operator == '*':
    if isinstance(right, OneNode):
      return left
    if isinstance(left, OneNode):
      return right
  elif node.operator in ('/', '^'):
    if isinstance(right, OneNode):
      return left
  return None


def sign_normalization(node: Node) -> Optional[Node]:
  if isinstance(node, BinaryOpNode) and node.operator == '-' and isinstance(node.left, ZeroNode):
    return UnaryOpNode('neg', node.right)
  if _is_unary(node, 'square') and _is_unary(node.operand, 'neg'):
    return UnaryOpNode('square', node.operand.operand)
  return None


# First matching rule wins, one rewrite per node
SIMPLIFICATION_RULES: List[Tuple[str, Rule]] = [
  ('absorb_parameter', absorb_parameter),
  ('divide_by_parameter', divide_by_parameter),
  ('fold_constants', fold_constants),
  ('zero_identity', zero_identity),
  ('one_identity', one_identity),
  ('inverse_cancellation', inverse_cancellation),
  ('identity_elision', identity_elision),
  ('sign_normalization', sign_normalization),
]


class ExpressionSimplifier:
  """Single bottom-up rewrite pass over an expression tree.

  Not a canonicalizer: results depend on the input shape, and a second pass
  may simplify further.
  """

  def __init__(self, rules: Optional[List[Tuple[str, Rule]]] = None):
    self.rules = list(SIMPLIFICATION_RULES if rules is None else rules)

  def simplify(self, node: Node) -> Node:
    children = node.children()
    if children:
      node = node.with_children(*(self.simplify(child) for child in children))
    return self._apply_rules(node)

  def _apply_rules(self, node: Node) -> Node:
    for name, rule in self.rules:
      result = rule(node)
      if result is not None:
        log_debug("simplifier %s: %s -> %s", name, node, result)
        return result
    return node


_default_simplifier = ExpressionSimplifier()


def simplify(node: Node) -> Node:
  return _default_simplifier.simplify(node)
