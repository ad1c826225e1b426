"""Expression Tree Module

Expression trees for postfix arithmetic over the variables ``a`` and ``b``.
"""

from .expression import (
  Expression, as_input_matrix, evaluate, render, format_score, format_result
)
from .core.node import (
  Node,
  VariableNode,
  ConstantNode,
  BinaryOpNode,
  UnaryOpNode
)
from .core.operators import (
  NodeType,
  OpType,
  BINARY_OP_MAP,
  UNARY_OP_MAP,
  VARIABLE_MAP,
  evaluate_binary_op,
  evaluate_unary_op
)
from .positional_tree import PositionalTree, Position
from .utils import get_all_nodes, calculate_tree_depth, validate_tree_structure

__all__ = [
  "Expression", "as_input_matrix", "evaluate", "render", "format_score", "format_result",
  "Node", "VariableNode", "ConstantNode", "BinaryOpNode", "UnaryOpNode",
  "NodeType", "OpType",
  "BINARY_OP_MAP", "UNARY_OP_MAP", "VARIABLE_MAP",
  "evaluate_binary_op", "evaluate_unary_op",
  "PositionalTree", "Position",
  "get_all_nodes", "calculate_tree_depth", "validate_tree_structure"
]
