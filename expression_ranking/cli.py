"""Command-line entry point: rank postfix expressions read from two text files."""

import argparse
import sys
from typing import List, Optional

from .config import PipelineConfig, DEFAULT_EXPRESSIONS_PATH, DEFAULT_INPUTS_PATH
from .data_io import write_results
from .errors import ExpressionRankingError
from .logging_system import configure_logging, log_critical
from .pipeline import ExpressionRankingPipeline


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="expression-ranking",
        description="Evaluate postfix expressions over (a, b) input pairs and rank them by mean output")
    parser.add_argument("--expressions", default=DEFAULT_EXPRESSIONS_PATH,
                        help="File with one postfix expression per line")
    parser.add_argument("--inputs", default=DEFAULT_INPUTS_PATH,
                        help="File with whitespace-separated a b values per line")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Increase log verbosity (repeatable)")
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress all log output")
    parser.add_argument("--log-file", default=None, help="Also write log records to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = PipelineConfig.from_args(args)
    configure_logging(config.log_level, config.log_to_file, config.log_file_path)

    try:
        ranked = ExpressionRankingPipeline(config).run_files()
    except (ExpressionRankingError, OSError) as e:
        log_critical(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    write_results(ranked, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
