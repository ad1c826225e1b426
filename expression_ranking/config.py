"""Run configuration for the expression ranking pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .logging_system import LogLevel

DEFAULT_EXPRESSIONS_PATH = "expressions.txt"
DEFAULT_INPUTS_PATH = "input.txt"


@dataclass
class PipelineConfig:
    expressions_path: str = DEFAULT_EXPRESSIONS_PATH
    inputs_path: str = DEFAULT_INPUTS_PATH
    log_level: LogLevel = LogLevel.MINIMAL
    log_to_file: bool = False
    log_file_path: Optional[str] = None
    summary_top_n: int = 5

    @classmethod
    def from_args(cls, args) -> "PipelineConfig":
        """Build a config from an argparse namespace produced by the CLI parser."""
        if args.quiet:
            level = LogLevel.SILENT
        else:
            level_value = min(LogLevel.MINIMAL.value + args.verbose, LogLevel.VERBOSE.value)
            level = LogLevel(level_value)
        return cls(
            expressions_path=args.expressions,
            inputs_path=args.inputs,
            log_level=level,
            log_to_file=args.log_file is not None,
            log_file_path=args.log_file,
        )
