# ranking.py
import math
from typing import List, Sequence, Tuple

from .errors import UnscoredExpressionError
from .expression_tree import Expression


def _rank_key(expression: Expression) -> Tuple[bool, float]:
  # NaN compares false against everything, so it is moved behind all numeric scores
  if expression.score is None:
    raise UnscoredExpressionError(f"Expression {expression.to_string()} has not been scored")
  is_nan = math.isnan(expression.score)
  return (is_nan, 0.0 if is_nan else expression.score)


def rank_expressions(expressions: Sequence[Expression]) -> List[Expression]:
  """Order expressions by ascending score.

  The sort is stable, so equal scores keep their input order. NaN scores go last.
  """
  return sorted(expressions, key=_rank_key)


def best_expression(expressions: Sequence[Expression]) -> Expression:
  """Lowest-scoring expression, as it would appear first in the ranking"""
  if not expressions:
    raise ValueError("No expressions to rank")
  return min(expressions, key=_rank_key)
