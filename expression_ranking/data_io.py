"""
Line-oriented sources and sink for the ranking pipeline.

Expression lines are returned raw (the builder tokenizes them). Pair lines are
parsed into an (n, 2) float64 matrix holding the first two values of each
non-empty line.
"""

from typing import Iterable, List, TextIO
import numpy as np

from .errors import InputFormatError
from .expression_tree import Expression, format_result


def _read_lines(path: str) -> List[str]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read().splitlines()
    except UnicodeDecodeError as e:
        raise InputFormatError(f"{path} is not valid UTF-8 text ({e.reason} at byte {e.start})") from e


def read_expression_lines(path: str) -> List[str]:
    return _read_lines(path)


def parse_input_pairs(lines: Iterable[str]) -> np.ndarray:
    rows = []
    for line_number, line in enumerate(lines, start=1):
        fields = line.split()
        if not fields:
            continue
        if len(fields) < 2:
            raise InputFormatError(f"expected at least two values, got {len(fields)}", line_number)
        try:
            a, b = float(fields[0]), float(fields[1])
        except ValueError:
            raise InputFormatError(f"invalid number in {line.strip()!r}", line_number) from None
        rows.append((a, b))
    if not rows:
        return np.empty((0, 2), dtype=np.float64)
    return np.array(rows, dtype=np.float64)


def read_input_pairs(path: str) -> np.ndarray:
    return parse_input_pairs(_read_lines(path))


def write_results(expressions: Iterable[Expression], stream: TextIO):
    for expression in expressions:
        stream.write(format_result(expression) + "\n")
