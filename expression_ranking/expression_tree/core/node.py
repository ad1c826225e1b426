import numpy as np
import sympy as sp
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional, Sequence
from .operators import (
  NodeType, OpType, BINARY_OP_MAP, UNARY_OP_MAP, OP_SYMBOLS, VARIABLE_MAP,
  evaluate_variable, evaluate_constant, evaluate_binary_op, evaluate_unary_op
)

VARIABLE_NAMES: Dict[int, str] = {index: name for name, index in VARIABLE_MAP.items()}


def fold(root: 'Node', visit: Callable[['Node', list], Any]) -> Any:
  """Post-order reduction with an explicit stack.

  ``visit(node, child_results)`` runs once per node after all of its children,
  so tree depth is bounded by memory rather than the interpreter recursion limit.
  """
  results: Dict[int, Any] = {}
  stack = [(root, False)]
  while stack:
    node, expanded = stack.pop()
    children = node.children()
    if expanded:
      results[id(node)] = visit(node, [results.pop(id(child)) for child in children])
    else:
      stack.append((node, True))
      stack.extend((child, False) for child in reversed(children))
  return results[id(root)]


class Node(ABC):
  """Base node class with size and hash caching. Subtrees are never shared between parents.

  Whole-tree operations go through ``fold``; subclasses only combine the
  already computed results of their own children.
  """

  __slots__ = ('_hash_cache', '_size_cache')

  def __init__(self):
    self._hash_cache: Optional[int] = None
    self._size_cache: Optional[int] = None

  @abstractmethod
  def children(self) -> tuple:
    pass

  @abstractmethod
  def _evaluate_local(self, X: np.ndarray, child_values: Sequence[np.ndarray]) -> np.ndarray:
    pass

  @abstractmethod
  def _render_local(self, child_texts: Sequence[str]) -> str:
    pass

  @abstractmethod
  def _copy_local(self, child_copies: Sequence['Node']) -> 'Node':
    pass

  @abstractmethod
  def _sympy_local(self, child_exprs: Sequence[sp.Expr]) -> sp.Expr:
    pass

  @abstractmethod
  def _compute_hash(self) -> int:
    """Hash from this node's tag and its children's cached hashes"""
    pass

  def evaluate(self, X: np.ndarray) -> np.ndarray:
    return fold(self, lambda node, values: node._evaluate_local(X, values))

  def to_string(self) -> str:
    return fold(self, lambda node, texts: node._render_local(texts))

  def copy(self) -> 'Node':
    return fold(self, lambda node, copies: node._copy_local(copies))

  def to_sympy(self) -> sp.Expr:
    return fold(self, lambda node, exprs: node._sympy_local(exprs))

  def is_leaf(self) -> bool:
    return not self.children()

  def size(self) -> int:
    """Node count of this subtree"""
    if self._size_cache is None:
      fold(self, _cache_size)
    return self._size_cache

  def __hash__(self) -> int:
    if self._hash_cache is None:
      fold(self, _cache_hash)
    return self._hash_cache

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self.to_string()})"


def _cache_size(node: Node, child_sizes: list) -> int:
  if node._size_cache is None:
    node._size_cache = 1 + sum(child_sizes)
  return node._size_cache


def _cache_hash(node: Node, _child_hashes: list) -> int:
  # Children are already cached, so _compute_hash never recurses
  if node._hash_cache is None:
    node._hash_cache = node._compute_hash()
  return node._hash_cache


class VariableNode(Node):
  __slots__ = ('index',)

  def __init__(self, index: int):
    super().__init__()
    if index not in VARIABLE_NAMES:
      raise ValueError(f"Unknown variable index: {index}")
    self.index = index

  @classmethod
  def from_token(cls, token: str) -> 'VariableNode':
    return cls(VARIABLE_MAP[token])

  @property
  def name(self) -> str:
    return VARIABLE_NAMES[self.index]

  def children(self) -> tuple:
    return ()

  def _evaluate_local(self, X, child_values):
    return evaluate_variable(X, self.index)

  def _render_local(self, child_texts):
    return self.name

  def _copy_local(self, child_copies):
    return VariableNode(self.index)

  def _sympy_local(self, child_exprs):
    return sp.Symbol(self.name)

  def _compute_hash(self) -> int:
    return hash((NodeType.VARIABLE, self.index))


class ConstantNode(Node):
  """Numeric literal; keeps the token text so rendering reproduces the input"""

  __slots__ = ('value', 'text')

  def __init__(self, value: float, text: Optional[str] = None):
    super().__init__()
    self.value = float(value)
    self.text = text if text is not None else repr(self.value)

  def children(self) -> tuple:
    return ()

  def _evaluate_local(self, X, child_values):
    return evaluate_constant(X.shape[0], self.value)

  def _render_local(self, child_texts):
    return self.text

  def _copy_local(self, child_copies):
    return ConstantNode(self.value, self.text)

  def _sympy_local(self, child_exprs):
    return sp.Float(self.value)

  def _compute_hash(self) -> int:
    return hash((NodeType.CONSTANT, self.text))


class BinaryOpNode(Node):
  __slots__ = ('operator', 'op_type', 'left', 'right')

  def __init__(self, operator: str, left: Node, right: Node):
    super().__init__()
    if operator not in BINARY_OP_MAP:
      raise ValueError(f"Not a binary operator: {operator!r}")
    if left is None or right is None:
      raise ValueError(f"Binary operator {operator!r} requires two operands")
    self.operator = operator
    self.op_type: OpType = BINARY_OP_MAP[operator]
    self.left = left
    self.right = right

  def children(self) -> tuple:
    return (self.left, self.right)

  def _evaluate_local(self, X, child_values):
    left_val, right_val = child_values
    return evaluate_binary_op(np.ascontiguousarray(left_val), np.ascontiguousarray(right_val),
                              self.op_type)

  def _render_local(self, child_texts):
    left, right = child_texts
    return f"({left}{OP_SYMBOLS[self.op_type]}{right})"

  def _copy_local(self, child_copies):
    left, right = child_copies
    return BinaryOpNode(self.operator, left, right)

  def _compute_hash(self) -> int:
    return hash((NodeType.BINARY_OP, self.op_type, hash(self.left), hash(self.right)))

  def _sympy_local(self, child_exprs):
    left, right = child_exprs
    if self.op_type == OpType.ADD:
      return sp.Add(left, right, evaluate=False)
    elif self.op_type == OpType.SUB:
      return sp.Add(left, sp.Mul(-1, right, evaluate=False), evaluate=False)
    elif self.op_type == OpType.MUL:
      return sp.Mul(left, right, evaluate=False)
    elif self.op_type == OpType.DIV:
      return sp.Mul(left, sp.Pow(right, -1, evaluate=False), evaluate=False)
    elif self.op_type == OpType.GT:
      return sp.Piecewise((sp.Integer(1), sp.StrictGreaterThan(left, right)), (sp.Integer(-1), True))
    raise AssertionError(f"to_sympy reached unexpected operation: {self.operator}")


class UnaryOpNode(Node):
  __slots__ = ('operator', 'op_type', 'operand')

  def __init__(self, operator: str, operand: Node):
    super().__init__()
    if operator not in UNARY_OP_MAP:
      raise ValueError(f"Not a unary operator: {operator!r}")
    if operand is None:
      raise ValueError(f"Unary operator {operator!r} requires one operand")
    self.operator = operator
    self.op_type: OpType = UNARY_OP_MAP[operator]
    self.operand = operand

  def children(self) -> tuple:
    return (self.operand,)

  def _evaluate_local(self, X, child_values):
    return evaluate_unary_op(np.ascontiguousarray(child_values[0]), self.op_type)

  def _render_local(self, child_texts):
    return f"{OP_SYMBOLS[self.op_type]}({child_texts[0]})"

  def _copy_local(self, child_copies):
    return UnaryOpNode(self.operator, child_copies[0])

  def _compute_hash(self) -> int:
    return hash((NodeType.UNARY_OP, self.op_type, hash(self.operand)))

  def _sympy_local(self, child_exprs):
    if self.op_type == OpType.ABS:
      return sp.Abs(child_exprs[0], evaluate=False)
    raise AssertionError(f"to_sympy reached unexpected unary operation: {self.operator}")
