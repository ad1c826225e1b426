import numpy as np
import numba
from enum import IntEnum

class NodeType(IntEnum):
  VARIABLE = 0
  CONSTANT = 1
  BINARY_OP = 2
  UNARY_OP = 3

class OpType(IntEnum):
  # Binary ops
  ADD = 0
  SUB = 1
  MUL = 2
  DIV = 3
  GT = 4
  # Unary ops
  ABS = 5

# Mapping dictionaries
BINARY_OP_MAP = {'+': OpType.ADD, '-': OpType.SUB, '*': OpType.MUL, '/': OpType.DIV, '>': OpType.GT}
UNARY_OP_MAP = {'abs': OpType.ABS}

OP_SYMBOLS = {op_type: symbol for symbol, op_type in {**BINARY_OP_MAP, **UNARY_OP_MAP}.items()}

# Variable token -> column of the (n, 2) input matrix
VARIABLE_MAP = {'a': 0, 'b': 1}

# Sentinels returned by the comparison operator
GT_TRUE = 1.0
GT_FALSE = -1.0


# fastmath stays off: it assumes no NaN/inf and would break '>' and '/' semantics.
@numba.njit(cache=True, inline='always')
def evaluate_variable(X, index):
  return X[:, index].astype(np.float64)

@numba.njit(cache=True, inline='always')
def evaluate_constant(n_samples, value):
  return np.full(n_samples, value, dtype=np.float64)

@numba.njit(cache=True, error_model='numpy')
def _binary_kernel(left_val, right_val, op_code):
  if op_code == 0:
    return left_val + right_val
  elif op_code == 1:
    return left_val - right_val
  elif op_code == 2:
    return left_val * right_val
  elif op_code == 3:
    return left_val / right_val
  # op_code == 4, comparison encoded as a numeric sentinel
  out = np.empty_like(left_val)
  for i in range(left_val.shape[0]):
    out[i] = GT_TRUE if left_val[i] > right_val[i] else GT_FALSE
  return out

@numba.njit(cache=True, error_model='numpy')
def _unary_kernel(operand_val, op_code):
  return np.abs(operand_val)


def evaluate_binary_op(left_val: np.ndarray, right_val: np.ndarray, op_type: OpType) -> np.ndarray:
  """IEEE-754 binary operation over two float64 columns"""
  if op_type not in _BINARY_CODES:
    raise AssertionError(f"unreachable binary operator code: {op_type!r}")
  return _binary_kernel(left_val, right_val, int(op_type))

def evaluate_unary_op(operand_val: np.ndarray, op_type: OpType) -> np.ndarray:
  if op_type not in _UNARY_CODES:
    raise AssertionError(f"unreachable unary operator code: {op_type!r}")
  return _unary_kernel(operand_val, int(op_type))


_BINARY_CODES = frozenset(BINARY_OP_MAP.values())
_UNARY_CODES = frozenset(UNARY_OP_MAP.values())
