import random
import sys
from typing import Optional, Sequence, Tuple
from .config import (
  PARAMETER_NAMES, FUNCTION_COMPLEXITY_MIN, FUNCTION_COMPLEXITY_MAX,
  FUNCTION_PARAM_VALUE_MIN, FUNCTION_PARAM_VALUE_MAX
)
from .expression_tree import Expression, Node, VariableNode, ParameterNode, BinaryOpNode, UnaryOpNode
from .expression_tree.core.operators import UNARY_OPERATORS, BINARY_OPERATORS
from .logging_system import LogLevel, log_debug, log_info, log_warning
from .params import Params

# 8 unary wrappers followed by 5 binary operators, drawn uniformly
PRODUCTION_RULES = UNARY_OPERATORS + BINARY_OPERATORS


class ExpressionGenerator:
  """Random expression generator driven by a complexity budget.

  A budget of 0 yields a leaf. Every operator consumes one unit, and binary
  operators split what is left between their children, so a tree for budget
  `c` has depth at most c + 1 and at most 2c + 1 nodes.
  """

  def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None,
               parameter_names: Sequence[str] = PARAMETER_NAMES,
               complexity_range: Tuple[int, int] = (FUNCTION_COMPLEXITY_MIN, FUNCTION_COMPLEXITY_MAX),
               param_value_range: Tuple[float, float] = (FUNCTION_PARAM_VALUE_MIN, FUNCTION_PARAM_VALUE_MAX)):
    if rng is not None and seed is not None:
      raise ValueError("Pass either rng or seed, not both")
    self.rng = rng if rng is not None else random.Random(seed)
    self.parameter_names = tuple(parameter_names)
    if not self.parameter_names:
      raise ValueError("At least one parameter name is required")
    self.complexity_range = complexity_range
    self.param_value_range = param_value_range

    if complexity_range[1] > sys.getrecursionlimit() // 4:
      log_warning("Complexity up to %d may exceed the recursion limit (%d)",
                  complexity_range[1], sys.getrecursionlimit())

  def generate(self, complexity: int) -> Node:
    """Generate a random tree for the given budget"""
    if complexity < 0:
      raise ValueError(f"Complexity must be non-negative, got {complexity}")
    return self._generate_node(complexity)

  def _generate_node(self, complexity: int) -> Node:
    rng = self.rng
    if complexity == 0:
      if rng.randint(0, 1) == 0:
        return VariableNode()
      return ParameterNode(rng.choice(self.parameter_names))

    complexity -= 1
    # Split point is drawn before the rule, unary rules ignore it
    partition = rng.randint(0, complexity)
    rule = PRODUCTION_RULES[rng.randint(0, len(PRODUCTION_RULES) - 1)]

    if rule in UNARY_OPERATORS:
      return UnaryOpNode(rule, self._generate_node(complexity))
    return BinaryOpNode(
      rule,
      self._generate_node(partition),
      self._generate_node(complexity - partition)
    )

  def random_complexity(self) -> int:
    low, high = self.complexity_range
    return self.rng.randint(low, high)

  def random_params(self, names: Sequence[str]) -> Params:
    """Bind each distinct name to a uniform random value"""
    low, high = self.param_value_range
    return Params.random(names, self.rng, low, high)

  def generate_candidate(self, complexity: Optional[int] = None) -> Tuple[Expression, Params]:
    """Random simplified expression together with random bindings for its parameters"""
    if complexity is None:
      complexity = self.random_complexity()
    expression = Expression(self.generate(complexity)).simplify()
    params = self.random_params(expression.get_parameter_names())
    log_info("Generated candidate (complexity %d): %s", complexity, expression,
             level=LogLevel.DETAILED)
    log_debug("candidate params: %r", params)
    return expression, params


def generate(complexity: int, rng: Optional[random.Random] = None) -> Node:
  """Generate one random tree; `rng` defaults to a fresh unseeded generator"""
  return ExpressionGenerator(rng=rng).generate(complexity)
