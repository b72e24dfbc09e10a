import numpy as np
import numba
from enum import IntEnum


class NodeType(IntEnum):
  VARIABLE = 0
  CONSTANT = 1
  ZERO = 2
  ONE = 3
  PARAMETER = 4
  UNARY_OP = 5
  BINARY_OP = 6
  POLYNOMIAL = 7
  EXP_SERIES = 8

class OpType(IntEnum):
  # Binary ops
  ADD = 0
  SUB = 1
  MUL = 2
  DIV = 3
  POW = 4
  # Unary ops
  NEG = 5
  EXP = 6
  LN = 7
  SQRT = 8
  SQUARE = 9
  SIN = 10
  COS = 11
  TAN = 12

# Order matters: it is the production order used by the generator
UNARY_OPERATORS = ('neg', 'exp', 'ln', 'sqrt', 'square', 'sin', 'cos', 'tan')
BINARY_OPERATORS = ('+', '-', '*', '/', '^')

# Mapping dictionaries
BINARY_OP_MAP = {'+': OpType.ADD, '-': OpType.SUB, '*': OpType.MUL, '/': OpType.DIV, '^': OpType.POW}
UNARY_OP_MAP = {
    'neg': OpType.NEG, 'exp': OpType.EXP, 'ln': OpType.LN,
    'sqrt': OpType.SQRT, 'square': OpType.SQUARE,
    'sin': OpType.SIN, 'cos': OpType.COS, 'tan': OpType.TAN
}

# numpy ufuncs keep IEEE-754 semantics for float64 scalars and arrays alike
_BINARY_UFUNCS = {
    OpType.ADD: np.add,
    OpType.SUB: np.subtract,
    OpType.MUL: np.multiply,
    OpType.DIV: np.true_divide,
    OpType.POW: np.power,
}
_UNARY_UFUNCS = {
    OpType.NEG: np.negative,
    OpType.EXP: np.exp,
    OpType.LN: np.log,
    OpType.SQRT: np.sqrt,
    OpType.SQUARE: np.square,
    OpType.SIN: np.sin,
    OpType.COS: np.cos,
    OpType.TAN: np.tan,
}

# Function names used by the parser, the display string and gnuplot
FUNCTION_NAMES = {'exp': 'exp', 'ln': 'ln', 'sqrt': 'sqrt', 'sin': 'sin', 'cos': 'cos', 'tan': 'tan'}
PLOT_FUNCTION_NAMES = {'exp': 'exp', 'ln': 'log', 'sqrt': 'sqrt', 'sin': 'sin', 'cos': 'cos', 'tan': 'tan'}


def evaluate_binary_op_fast(left_val, right_val, op_type):
  return _BINARY_UFUNCS[op_type](left_val, right_val)

def evaluate_unary_op_fast(operand_val, op_type):
  return _UNARY_UFUNCS[op_type](operand_val)

@numba.njit(cache=True)
def evaluate_polynomial(coefficients, x, factorial):
  """sum(c_i * x^i), divided by i! term by term when `factorial` is set"""
  # Start from the constant term: 0.0 * inf would already be NaN
  result = coefficients[0] * x ** 0
  denominator = 1.0
  for i in range(1, coefficients.shape[0]):
    if factorial and i >= 2:
      denominator *= i
    result = result + coefficients[i] * x ** i / denominator
  return result
