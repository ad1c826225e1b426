# builder.py
"""Stack-machine construction of expression trees from postfix tokens."""

from typing import Iterable, List, Sequence, Union

from .errors import (
  ParseError, InsufficientOperandsError, MalformedExpressionError, NumericLiteralError
)
from .expression_tree import Expression, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode
from .expression_tree.core.operators import BINARY_OP_MAP, UNARY_OP_MAP, VARIABLE_MAP
from .logging_system import LogLevel, get_logger, log_debug


def tokenize(line: str) -> List[str]:
  return line.split()


def parse_literal(token: str) -> float:
  """Parse a numeric operand token, raising NumericLiteralError if it is not a float"""
  # float() tolerates digit-group underscores, postfix literals do not
  if '_' in token:
    raise NumericLiteralError(token)
  try:
    return float(token)
  except ValueError:
    raise NumericLiteralError(token) from None


def make_operand(token: str):
  if token in VARIABLE_MAP:
    return VariableNode.from_token(token)
  return ConstantNode(parse_literal(token), token)


def build_expression(tokens: Union[str, Sequence[str]]) -> Expression:
  """Build one expression tree from a postfix token sequence.

  Each stack entry is a root node exclusively owned by the stack; popping it
  and attaching it to an operator node moves ownership to that node.
  """
  if isinstance(tokens, str):
    tokens = tokenize(tokens)

  stack = []
  for token in tokens:
    if token in UNARY_OP_MAP:
      if not stack:
        raise InsufficientOperandsError(token)
      operand = stack.pop()
      stack.append(UnaryOpNode(token, operand))
    elif token in BINARY_OP_MAP:
      if len(stack) < 2:
        raise InsufficientOperandsError(token)
      right = stack.pop()
      left = stack.pop()
      stack.append(BinaryOpNode(token, left, right))
    else:
      stack.append(make_operand(token))

  if len(stack) != 1:
    raise MalformedExpressionError(len(stack))
  return Expression(stack.pop())


def build_expressions(lines: Iterable[str]) -> List[Expression]:
  """Build one tree per non-empty line; the first failure aborts the whole batch."""
  expressions = []
  for line_number, line in enumerate(lines, start=1):
    tokens = tokenize(line)
    if not tokens:
      continue
    try:
      expression = build_expression(tokens)
    except ParseError as e:
      raise e.with_line(line_number)
    if get_logger().is_enabled(LogLevel.VERBOSE):
      log_debug(f"line {line_number}: built {expression.to_string()} ({expression.size()} nodes)")
    expressions.append(expression)
  return expressions
