"""
Parameter bindings

`Params` maps parameter names to float values. It is the read-only
collaborator the evaluator, the plot renderer and the generator share; a
fitting routine produces new instances through `with_value` instead of
mutating one in place.
"""

import random
import numpy as np
from collections.abc import Mapping
from typing import Dict, Iterable, Iterator, Optional, Tuple

from .config import FUNCTION_PARAM_VALUE_MIN, FUNCTION_PARAM_VALUE_MAX
from .expression_tree.errors import ParameterNotBoundError


class Params(Mapping):
  """Insertion-ordered name -> value mapping"""

  __slots__ = ('_values',)

  def __init__(self, values: Optional[Dict[str, float]] = None):
    self._values: Dict[str, float] = {}
    if values:
      for name, value in values.items():
        self._values[name] = float(value)

  @classmethod
  def empty(cls) -> 'Params':
    return cls()

  @classmethod
  def from_pairs(cls, pairs: Iterable[Tuple[str, float]]) -> 'Params':
    """Later pairs overwrite earlier ones with the same name"""
    params = cls()
    for name, value in pairs:
      params._values[name] = float(value)
    return params

  @classmethod
  def random(cls, names: Iterable[str], rng: Optional[random.Random] = None,
             low: float = FUNCTION_PARAM_VALUE_MIN,
             high: float = FUNCTION_PARAM_VALUE_MAX) -> 'Params':
    """Bind every distinct name to a uniform value in [low, high]"""
    rng = rng if rng is not None else random.Random()
    params = cls()
    for name in names:
      if name not in params._values:
        params._values[name] = rng.uniform(low, high)
    return params

  def __getitem__(self, name: str) -> float:
    try:
      return self._values[name]
    except KeyError:
      raise ParameterNotBoundError(name) from None

  def __iter__(self) -> Iterator[str]:
    return iter(self._values)

  def __len__(self) -> int:
    return len(self._values)

  def get_by_name(self, name: str) -> float:
    return self[name]

  def amount(self) -> int:
    return len(self._values)

  def names(self) -> Tuple[str, ...]:
    return tuple(self._values)

  def to_array(self) -> np.ndarray:
    return np.fromiter(self._values.values(), dtype=np.float64, count=len(self._values))

  def with_value(self, name: str, value: float) -> 'Params':
    values = dict(self._values)
    values[name] = float(value)
    return Params(values)

  def __repr__(self) -> str:
    body = ', '.join(f"{name}={value!r}" for name, value in self._values.items())
    return f"Params({body})"
