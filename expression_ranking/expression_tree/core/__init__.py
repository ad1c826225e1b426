"""Core expression tree components."""

from .node import Node, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode
from .operators import (
    NodeType, OpType, BINARY_OP_MAP, UNARY_OP_MAP, VARIABLE_MAP,
    evaluate_variable, evaluate_constant,
    evaluate_binary_op, evaluate_unary_op
)

__all__ = [
    'Node', 'VariableNode', 'ConstantNode', 'BinaryOpNode', 'UnaryOpNode',
    'NodeType', 'OpType', 'BINARY_OP_MAP', 'UNARY_OP_MAP', 'VARIABLE_MAP',
    'evaluate_variable', 'evaluate_constant',
    'evaluate_binary_op', 'evaluate_unary_op'
]
