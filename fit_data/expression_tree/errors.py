"""Exceptions raised by the expression engine."""


class ParseError(ValueError):
  """Base class for all parser failures"""

  def __init__(self, text: str, message: str):
    super().__init__(f"{message} (while parsing {text!r})")
    self.text = text
    self.message = message


class UnbalancedBracketsError(ParseError):
  """Opening and closing bracket counts differ"""

  def __init__(self, text: str):
    super().__init__(text, "Bad brackets sequence: opening and closing brackets count doesn't match")


class BracketOrderError(ParseError):
  """A closing bracket appears before its opening one"""

  def __init__(self, text: str):
    super().__init__(text, "Bad brackets sequence: closing bracket found before opening one")


class UnrecognizedLiteralError(ParseError):

  def __init__(self, text: str, message: str = "Unable to parse literal"):
    super().__init__(text, message)


class UnrecognizedExpressionError(ParseError):

  def __init__(self, text: str):
    super().__init__(text, "Unable to parse")


class ParameterNotBoundError(KeyError):
  """A parameter name was looked up that has no bound value"""

  def __init__(self, name: str):
    super().__init__(name)
    self.name = name

  def __str__(self) -> str:
    return f"parameter {self.name!r} is not bound"
