"""Exception hierarchy for building, scoring and ranking expressions."""

from typing import Optional


class ExpressionRankingError(Exception):
  """Base class for every fatal condition raised by the package"""


class ParseError(ExpressionRankingError):
  """A postfix line could not be turned into an expression tree"""

  def __init__(self, message: str, token: Optional[str] = None,
               line_number: Optional[int] = None):
    super().__init__(message)
    self.message = message
    self.token = token
    self.line_number = line_number

  def with_line(self, line_number: int) -> 'ParseError':
    self.line_number = line_number
    return self

  def __str__(self) -> str:
    if self.line_number is None:
      return self.message
    return f"line {self.line_number}: {self.message}"


class InsufficientOperandsError(ParseError):
  """An operator was reached with fewer trees on the stack than its arity"""

  def __init__(self, operator: str, line_number: Optional[int] = None):
    super().__init__(f"Invalid postfix expression: not enough operands for {operator}",
                     token=operator, line_number=line_number)
    self.operator = operator


class MalformedExpressionError(ParseError):
  """The stack did not hold exactly one tree after the last token"""

  def __init__(self, remaining: int, line_number: Optional[int] = None):
    if remaining == 0:
      detail = "not enough operators (no expression)"
    else:
      detail = f"leftover operands ({remaining} trees remaining in stack)"
    super().__init__(f"Invalid postfix expression: {detail}", line_number=line_number)
    self.remaining = remaining


class NumericLiteralError(ParseError, ValueError):
  """An operand token is neither a variable nor a float literal"""

  def __init__(self, token: str, line_number: Optional[int] = None):
    super().__init__(f"Invalid numeric literal: {token!r}", token=token,
                     line_number=line_number)


class EmptyDatasetError(ExpressionRankingError, ValueError):
  """Scoring was requested against zero input pairs"""

  def __init__(self, message: str = "Cannot score expressions against an empty dataset"):
    super().__init__(message)


class UnscoredExpressionError(ExpressionRankingError):
  """Ranking was requested for an expression that has no score yet"""


class InputFormatError(ExpressionRankingError, ValueError):
  """A line of the input-pair source is unusable"""

  def __init__(self, message: str, line_number: Optional[int] = None):
    if line_number is not None:
      message = f"line {line_number}: {message}"
    super().__init__(message)
    self.line_number = line_number
