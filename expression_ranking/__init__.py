"""Expression Ranking Package

Builds expression trees from postfix lines, scores each by its mean output over
(a, b) input pairs, ranks them and renders them as parenthesized infix.
"""

from .expression_tree import (
  Expression, Node, VariableNode, ConstantNode,
  BinaryOpNode, UnaryOpNode, PositionalTree,
  evaluate, render, format_result
)
from .builder import build_expression, build_expressions
from .scoring import score_expression, score_expressions
from .ranking import rank_expressions
from .pipeline import ExpressionRankingPipeline, rank_batch
from .config import PipelineConfig
from .errors import (
  ExpressionRankingError, ParseError, InsufficientOperandsError,
  MalformedExpressionError, NumericLiteralError, EmptyDatasetError,
  UnscoredExpressionError, InputFormatError
)
from .logging_system import LogLevel, configure_logging, get_logger
from .report import get_detailed_expressions

__version__ = "0.1.0"
__all__ = [
  "Expression", "Node", "VariableNode", "ConstantNode",
  "BinaryOpNode", "UnaryOpNode", "PositionalTree",
  "evaluate", "render", "format_result",
  "build_expression", "build_expressions",
  "score_expression", "score_expressions", "rank_expressions",
  "ExpressionRankingPipeline", "rank_batch", "PipelineConfig",
  "ExpressionRankingError", "ParseError", "InsufficientOperandsError",
  "MalformedExpressionError", "NumericLiteralError", "EmptyDatasetError",
  "UnscoredExpressionError", "InputFormatError",
  "LogLevel", "configure_logging", "get_logger",
  "get_detailed_expressions"
]
