# pipeline.py
"""
Batch pipeline: build every expression, score each against the full pair
dataset, rank by score and format the result lines. Stages run to completion
one after another and any error aborts the whole run.
"""

from typing import Iterable, List, Optional

from .builder import build_expressions
from .config import PipelineConfig
from .data_io import read_expression_lines, read_input_pairs
from .errors import EmptyDatasetError
from .expression_tree import Expression, as_input_matrix, format_result
from .logging_system import LogLevel, get_logger, log_milestone
from .ranking import rank_expressions, best_expression
from .report import get_detailed_expressions
from .scoring import score_expressions


class ExpressionRankingPipeline:
  """Build, score and rank postfix expressions against an input-pair dataset"""

  def __init__(self, config: Optional[PipelineConfig] = None):
    self.config = config or PipelineConfig()

  def run(self, expression_lines: Iterable[str], pairs) -> List[Expression]:
    expressions = build_expressions(expression_lines)
    log_milestone(f"Built {len(expressions)} expressions")

    X = as_input_matrix(pairs)
    if X.shape[0] == 0:
      raise EmptyDatasetError()
    score_expressions(expressions, X)
    log_milestone(f"Scored {len(expressions)} expressions on {X.shape[0]} input pairs")

    ranked = rank_expressions(expressions)
    log_milestone("Ranked expressions by score")

    logger = get_logger()
    if ranked:
      best = best_expression(ranked)
      logger.result_summary({
        'expressions': len(ranked),
        'input_pairs': X.shape[0],
        'best_expression': best.to_string(),
        'best_score': best.score,
      })
      if logger.is_enabled(LogLevel.DETAILED):
        logger.ranking_summary(get_detailed_expressions(ranked), self.config.summary_top_n)
    return ranked

  def run_files(self) -> List[Expression]:
    expression_lines = read_expression_lines(self.config.expressions_path)
    pairs = read_input_pairs(self.config.inputs_path)
    log_milestone(f"Read {self.config.expressions_path} and {self.config.inputs_path}")
    return self.run(expression_lines, pairs)

  @staticmethod
  def result_lines(ranked: Iterable[Expression]) -> List[str]:
    return [format_result(expression) for expression in ranked]


def rank_batch(expression_lines: Iterable[str], pairs) -> List[str]:
  """Ranked ``Exp <infix> Score <score>`` lines for a batch of postfix expressions"""
  pipeline = ExpressionRankingPipeline()
  return pipeline.result_lines(pipeline.run(expression_lines, pairs))
