# report.py
from typing import List, Dict, Optional
import sympy as sp
from .expression_tree import Expression, calculate_tree_depth


def to_sympy_string(expression: Expression) -> Optional[str]:
  """SymPy text form of an expression, unsimplified; None if the export fails"""
  try:
    return sp.sstr(expression.to_sympy())
  except (TypeError, ValueError, AssertionError, RecursionError):
    return None


def get_detailed_expressions(expressions: List[Expression], include_sympy: bool = True) -> List[Dict]:
  """Get detailed information about ranked expressions"""
  if not expressions:
    return []

  detailed = []
  for i, expr in enumerate(expressions):
    info = {
      'rank': i + 1,
      'expression': expr.to_string(),
      'score': expr.score,
      'size': expr.size(),
      'depth': calculate_tree_depth(expr.root),
      'sympy': None
    }

    if include_sympy:
      info['sympy'] = to_sympy_string(expr)

    detailed.append(info)

  return detailed
