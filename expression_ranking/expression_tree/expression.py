import math
import numpy as np
import sympy as sp
from typing import Optional
from .core.node import Node
from ..errors import UnscoredExpressionError


def as_input_matrix(pairs) -> np.ndarray:
  """Coerce input pairs into a C-contiguous (n, 2) float64 matrix.

  Extra columns are accepted and dropped; only (a, b) take part in evaluation.
  """
  X = np.asarray(pairs, dtype=np.float64)
  if X.ndim == 1:
    if X.size == 0:
      X = X.reshape(0, 2)
    else:
      X = X.reshape(1, -1)
  if X.ndim != 2 or (X.shape[0] > 0 and X.shape[1] < 2):
    raise ValueError(f"Input pairs must have shape (n, >=2), got {X.shape}")
  return np.ascontiguousarray(X[:, :2])


class Expression:
  """One owned expression tree plus the score assigned to it"""

  __slots__ = ('root', 'score', '_string_cache')

  def __init__(self, root: Node):
    self.root = root
    self.score: Optional[float] = None
    self._string_cache: Optional[str] = None

  def evaluate(self, X: np.ndarray) -> np.ndarray:
    """Evaluate against every row of an (n, 2) matrix, column 0 is a and column 1 is b"""
    return self.root.evaluate(as_input_matrix(X))

  def evaluate_pair(self, a: float, b: float) -> float:
    X = np.array([[a, b]], dtype=np.float64)
    return float(self.root.evaluate(X)[0])

  def to_string(self) -> str:
    if self._string_cache is None:
      self._string_cache = self.root.to_string()
    return self._string_cache

  def copy(self) -> 'Expression':
    clone = Expression(self.root.copy())
    clone.score = self.score
    return clone

  def size(self) -> int:
    """Node count, equal to the number of tokens the tree was built from"""
    return self.root.size()

  @property
  def is_scored(self) -> bool:
    return self.score is not None

  def to_sympy(self) -> sp.Expr:
    return self.root.to_sympy()

  def __hash__(self) -> int:
    return hash(self.root)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return False
    return hash(self) == hash(other) and self.to_string() == other.to_string()

  def __repr__(self) -> str:
    return f"Expression({self.to_string()!r}, score={self.score!r})"


def evaluate(expression: Expression, a: float, b: float) -> float:
  """Evaluate an expression tree for a single (a, b) pair"""
  return expression.evaluate_pair(a, b)


def render(expression: Expression) -> str:
  """Fully parenthesized infix text of an expression tree"""
  return expression.to_string()


def format_score(score: float) -> str:
  # Matches the default iostream float text (%g, 6 significant digits)
  if math.isnan(score):
    return "nan"
  return f"{score:g}"


def format_result(expression: Expression) -> str:
  if expression.score is None:
    raise UnscoredExpressionError(f"Expression {expression.to_string()} has not been scored")
  return f"Exp {expression.to_string()} Score {format_score(expression.score)}"
