# scoring.py
from typing import List, Sequence
import numpy as np

from .errors import EmptyDatasetError
from .expression_tree import Expression, as_input_matrix
from .logging_system import LogLevel, get_logger, log_debug


def _checked_matrix(pairs) -> np.ndarray:
  X = as_input_matrix(pairs)
  if X.shape[0] == 0:
    raise EmptyDatasetError()
  return X


def mean_output(expression: Expression, X: np.ndarray) -> float:
  """Arithmetic mean of the expression over every row; inf and NaN propagate"""
  with np.errstate(all='ignore'):
    values = expression.evaluate(X)
    return float(np.sum(values) / values.shape[0])


def score_expression(expression: Expression, pairs) -> float:
  """Score one expression by its mean output and store the score on it"""
  X = _checked_matrix(pairs)
  expression.score = mean_output(expression, X)
  return expression.score


def score_expressions(expressions: Sequence[Expression], pairs) -> List[float]:
  """Score every expression in order against the same dataset"""
  X = _checked_matrix(pairs)
  scores = []
  verbose = get_logger().is_enabled(LogLevel.VERBOSE)
  for expression in expressions:
    expression.score = mean_output(expression, X)
    if verbose:
      log_debug(f"scored {expression.to_string()} -> {expression.score}")
    scores.append(expression.score)
  return scores
