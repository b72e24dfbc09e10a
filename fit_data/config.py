"""Engine-wide constants.

The parameter alphabet order is significant: it is the enumeration order used
by polynomial nodes, parameter collection and random parameter binding.
"""

from typing import Tuple

# Lowercase latin letters without `e` (Euler's number) and `x` (the variable).
PARAMETER_NAMES: Tuple[str, ...] = tuple('abcdfghijklmnopqrstuvwyz')

VARIABLE_NAME = 'x'

# Range for randomly initialized parameter values
FUNCTION_PARAM_VALUE_MIN: float = -9.0
FUNCTION_PARAM_VALUE_MAX: float = 9.0

# Complexity budget range used when no explicit budget is requested
FUNCTION_COMPLEXITY_MIN: int = 5
FUNCTION_COMPLEXITY_MAX: int = 30
