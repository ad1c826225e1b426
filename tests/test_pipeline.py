import numpy as np
import pytest

from expression_ranking import (
  ExpressionRankingPipeline, PipelineConfig, rank_batch, InsufficientOperandsError,
  NumericLiteralError, EmptyDatasetError, LogLevel, configure_logging
)


def test_sum_example():
  assert rank_batch(["a b +"], [(1, 2), (3, 4)]) == ["Exp (a+b) Score 5"]


def test_abs_example():
  assert rank_batch(["a abs"], [(-5, 0)]) == ["Exp abs(a) Score 5"]


def test_comparison_example():
  assert rank_batch(["a b >"], [(1, 2), (3, 1)]) == ["Exp (a>b) Score 0"]


def test_batch_is_ranked_ascending():
  lines = ["a b *", "", "a", "a b - abs", "1 3 /"]
  result = rank_batch(lines, [(1, 2), (3, 4)])
  assert result == [
    "Exp (1/3) Score 0.333333",
    "Exp abs((a-b)) Score 1",
    "Exp a Score 2",
    "Exp (a*b) Score 7",
  ]


def test_insufficient_operands_fails_before_scoring():
  pipeline = ExpressionRankingPipeline()
  with pytest.raises(InsufficientOperandsError) as excinfo:
    pipeline.run(["a b +", "+"], [(1, 2)])
  assert excinfo.value.line_number == 2


def test_bad_literal_aborts_batch():
  with pytest.raises(NumericLiteralError):
    rank_batch(["a b +", "a q *"], [(1, 2)])


def test_empty_dataset_aborts_batch():
  with pytest.raises(EmptyDatasetError):
    rank_batch(["a b +"], np.empty((0, 2)))


def test_run_files(tmp_path):
  expressions = tmp_path / "expressions.txt"
  inputs = tmp_path / "input.txt"
  expressions.write_text("a b +\n\na abs\n")
  inputs.write_text("1 2 9\n\n-3 4\n")
  config = PipelineConfig(expressions_path=str(expressions), inputs_path=str(inputs))
  pipeline = ExpressionRankingPipeline(config)
  ranked = pipeline.run_files()
  assert pipeline.result_lines(ranked) == [
    "Exp (a+b) Score 2",
    "Exp abs(a) Score 2",
  ]


def test_detailed_logging_summarizes_run(tmp_path):
  log_file = tmp_path / "run.log"
  configure_logging(LogLevel.VERBOSE, log_to_file=True, log_file_path=str(log_file))
  rank_batch(["a b +", "a abs"], [(1, 2)])
  text = log_file.read_text()
  assert "MILESTONE: Built 2 expressions" in text
  assert "EXPRESSION RANKING RESULTS:" in text
  assert "abs(a)" in text


def test_deeply_nested_unary_chain():
  depth = 2500
  result = rank_batch(["a" + " abs" * depth], [(-1, 2)])
  assert result == ["Exp " + "abs(" * depth + "a" + ")" * depth + " Score 1"]


def test_deeply_nested_binary_chain():
  depth = 2500
  result = rank_batch(["1 " + "1 + " * depth], [(0, 0)])
  assert result[0].endswith(f" Score {depth + 1:g}")
  assert result[0].startswith("Exp " + "(" * depth + "1+1)")


def test_deep_batch_with_detailed_logging(tmp_path):
  log_file = tmp_path / "deep.log"
  configure_logging(LogLevel.VERBOSE, log_to_file=True, log_file_path=str(log_file))
  result = rank_batch(["a" + " abs" * 2000, "b"], [(-3, 2)])
  assert [line.split()[-1] for line in result] == ["2", "3"]
  assert "size=2001 depth=2001" in log_file.read_text()


def test_logger_level_gate_is_public():
  from expression_ranking import logging_system

  logger = configure_logging(LogLevel.MINIMAL)
  assert logger.is_enabled(LogLevel.MINIMAL)
  assert not logger.is_enabled(LogLevel.DETAILED)
  assert not configure_logging(LogLevel.SILENT).is_enabled(LogLevel.MINIMAL)
  assert configure_logging(LogLevel.VERBOSE).is_enabled(LogLevel.DETAILED)
  for name in ("set_log_level", "log_info", "log_warning"):
    assert not hasattr(logging_system, name)
