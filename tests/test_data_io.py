import io
import numpy as np
import pytest

from expression_ranking import build_expression, InputFormatError
from expression_ranking.data_io import (
  parse_input_pairs, read_input_pairs, read_expression_lines, write_results
)


def test_parse_pairs_uses_first_two_values():
  X = parse_input_pairs(["1 2", "", "3   4 5 6", "  "])
  np.testing.assert_array_equal(X, [[1.0, 2.0], [3.0, 4.0]])
  assert X.dtype == np.float64


def test_parse_pairs_empty():
  assert parse_input_pairs([]).shape == (0, 2)


def test_parse_pairs_single_value_line():
  with pytest.raises(InputFormatError) as excinfo:
    parse_input_pairs(["1 2", "3"])
  assert excinfo.value.line_number == 2


def test_parse_pairs_bad_number():
  with pytest.raises(InputFormatError):
    parse_input_pairs(["1 x"])


def test_read_files(tmp_path):
  path = tmp_path / "input.txt"
  path.write_text("0.5 -1\n2 3\n")
  np.testing.assert_array_equal(read_input_pairs(str(path)), [[0.5, -1.0], [2.0, 3.0]])
  expr_path = tmp_path / "expressions.txt"
  expr_path.write_text("a b +\n\n")
  assert read_expression_lines(str(expr_path)) == ["a b +", ""]


def test_write_results():
  expr = build_expression("a b -")
  expr.score = -1.0
  stream = io.StringIO()
  write_results([expr], stream)
  assert stream.getvalue() == "Exp (a-b) Score -1\n"


def test_non_utf8_file_is_input_error(tmp_path):
  path = tmp_path / "input.txt"
  path.write_bytes(b"1 2\n\xff\xfe 3\n")
  with pytest.raises(InputFormatError) as excinfo:
    read_input_pairs(str(path))
  assert "UTF-8" in str(excinfo.value)
  with pytest.raises(InputFormatError):
    read_expression_lines(str(path))
