"""
Infix Expression Parser

Recursive splitting parser: the text is cut at the lowest-precedence
top-level operator and both halves are parsed again. Precedence, from the
first split attempted to the last: `+`, binary `-`, unary `-`, `*`, `/`, `^`.
"""

from typing import Optional, Tuple

from .core.node import (
  Node, VariableNode, ConstantNode, ZeroNode, OneNode, ParameterNode,
  UnaryOpNode, BinaryOpNode
)
from .errors import (
  UnbalancedBracketsError, BracketOrderError, UnrecognizedLiteralError,
  UnrecognizedExpressionError
)
from ..config import PARAMETER_NAMES, VARIABLE_NAME
from ..logging_system import log_debug

OPERATOR_CHARS = frozenset('()+-*/^')

# Prefix functions tried before the `^2` suffix, then the trigonometric ones
_LEADING_FUNCTIONS = (('exp(', 'exp'), ('ln(', 'ln'), ('sqrt(', 'sqrt'))
_TRAILING_FUNCTIONS = (('sin(', 'sin'), ('cos(', 'cos'), ('tan(', 'tan'))


class ExpressionParser:
  """Parses infix text into an expression tree"""

  def parse(self, text: str) -> Node:
    return self._parse(self.normalize(text))

  @staticmethod
  def normalize(text: str) -> str:
    """Drop whitespace and unify bracket kinds to round brackets"""
    text = ''.join(text.split())
    return text.replace('{', '(').replace('[', '(').replace('}', ')').replace(']', ')')

  def _parse(self, text: str) -> Node:
    log_debug("parsing %r", text)
    if not text:
      raise UnrecognizedLiteralError(text, "Empty expression")

    if self._is_wrapped(text):
      return self._parse(text[1:-1])

    if not any(char in OPERATOR_CHARS for char in text):
      return self._parse_literal(text)

    self._check_brackets(text)

    node = self._split(text)
    if node is not None:
      return node
    return self._parse_function(text)

  @staticmethod
  def _is_wrapped(text: str) -> bool:
    """True if the first bracket closes exactly at the last character"""
    if len(text) < 2 or text[0] != '(' or text[-1] != ')':
      return False
    depth = 0
    for char in text[:-1]:
      if char == '(':
        depth += 1
      elif char == ')':
        depth -= 1
      if depth == 0:
        return False
    return True

  @staticmethod
  def _check_brackets(text: str):
    if text.count('(') != text.count(')'):
      raise UnbalancedBracketsError(text)
    depth = 0
    for char in text:
      if char == '(':
        depth += 1
      elif char == ')':
        depth -= 1
      if depth < 0:
        raise BracketOrderError(text)

  @staticmethod
  def _find_top_level(text: str, symbol: str, reverse: bool = False) -> Optional[int]:
    """Index of the first (or last) `symbol` outside of brackets"""
    if reverse:
      # Position 0 is a leading minus, never a binary operator
      depth = 0
      for i in range(len(text) - 1, 0, -1):
        char = text[i]
        if char == ')':
          depth += 1
        elif char == '(':
          depth -= 1
        elif char == symbol and depth == 0:
          return i
      return None

    depth = 0
    for i, char in enumerate(text):
      if char == '(':
        depth += 1
      elif char == ')':
        depth -= 1
      elif char == symbol and depth == 0:
        return i
    return None

  def _split_binary(self, text: str, index: int) -> Tuple[Node, Node]:
    return self._parse(text[:index]), self._parse(text[index + 1:])

  def _split(self, text: str) -> Optional[Node]:
    index = self._find_top_level(text, '+')
    if index is not None:
      return BinaryOpNode('+', *self._split_binary(text, index))

    index = self._find_top_level(text, '-', reverse=True)
    if index is not None:
      return BinaryOpNode('-', *self._split_binary(text, index))

    if text[0] == '-':
      return UnaryOpNode('neg', self._parse(text[1:]))

    for symbol in ('*', '/'):
      index = self._find_top_level(text, symbol)
      if index is not None:
        return BinaryOpNode(symbol, *self._split_binary(text, index))

    index = self._find_top_level(text, '^')
    if index is not None:
      left, right = self._split_binary(text, index)
      if isinstance(right, ConstantNode) and right.value == 2.0:
        return UnaryOpNode('square', left)
      return BinaryOpNode('^', left, right)

    return None

  def _parse_literal(self, text: str) -> Node:
    if text == VARIABLE_NAME:
      return VariableNode()
    if len(text) == 1 and text in PARAMETER_NAMES:
      return ParameterNode(text)
    if text == '0':
      return ZeroNode()
    if text == '1':
      return OneNode()
    try:
      return ConstantNode(float(text))
    except ValueError:
      raise UnrecognizedLiteralError(text) from None

  def _parse_function(self, text: str) -> Node:
    """Function application, reached only when no operator split applies"""
    for prefix, operator in _LEADING_FUNCTIONS:
      if text.startswith(prefix) and text.endswith(')'):
        return UnaryOpNode(operator, self._parse(text[len(prefix):-1]))

    if text.endswith('^2'):
      return UnaryOpNode('square', self._parse(text[:-2]))

    for prefix, operator in _TRAILING_FUNCTIONS:
      if text.startswith(prefix) and text.endswith(')'):
        return UnaryOpNode(operator, self._parse(text[len(prefix):-1]))

    raise UnrecognizedExpressionError(text)


_default_parser = ExpressionParser()


def parse(text: str) -> Node:
  """Parse infix text, raising a ParseError subclass on failure"""
  return _default_parser.parse(text)
