from expression_ranking.cli import main, build_parser
from expression_ranking.config import PipelineConfig
from expression_ranking.logging_system import LogLevel


def _write_inputs(tmp_path, expressions, inputs):
  expr_path = tmp_path / "expressions.txt"
  input_path = tmp_path / "input.txt"
  expr_path.write_text(expressions)
  input_path.write_text(inputs)
  return ["--expressions", str(expr_path), "--inputs", str(input_path), "-q"]


def test_cli_prints_ranked_lines(tmp_path, capsys):
  argv = _write_inputs(tmp_path, "a b *\na b +\n", "1 2\n3 4\n")
  assert main(argv) == 0
  out = capsys.readouterr().out
  assert out.splitlines() == ["Exp (a+b) Score 5", "Exp (a*b) Score 7"]


def test_cli_parse_error_exits_with_status_one(tmp_path, capsys):
  argv = _write_inputs(tmp_path, "a b +\n+\n", "1 2\n")
  assert main(argv) == 1
  captured = capsys.readouterr()
  assert captured.out == ""
  assert "not enough operands for +" in captured.err


def test_cli_missing_file(tmp_path, capsys):
  assert main(["--expressions", str(tmp_path / "nope.txt"), "-q"]) == 1
  assert "Error:" in capsys.readouterr().err


def test_config_from_args():
  args = build_parser().parse_args(["-vv", "--log-file", "x.log"])
  config = PipelineConfig.from_args(args)
  assert config.log_level == LogLevel.DETAILED
  assert config.log_to_file and config.log_file_path == "x.log"
  assert config.expressions_path == "expressions.txt"
  assert config.inputs_path == "input.txt"
  quiet = PipelineConfig.from_args(build_parser().parse_args(["-q", "-vvvv"]))
  assert quiet.log_level == LogLevel.SILENT


def test_cli_non_utf8_expressions(tmp_path, capsys):
  argv = _write_inputs(tmp_path, "", "1 2\n")
  (tmp_path / "expressions.txt").write_bytes(b"a b \xff\n")
  assert main(argv) == 1
  captured = capsys.readouterr()
  assert captured.out == ""
  assert captured.err.startswith("Error:")
