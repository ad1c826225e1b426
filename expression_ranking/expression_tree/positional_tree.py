"""
Positionally addressable binary tree backed by an index arena.

Nodes live in parallel lists and are addressed by positions, so structural
edits never rewire object references. Slots released by
``remove_above_external`` go back to a free list and are reused by later
expansions. A position pairs its slot index with the slot's generation, which
is bumped on release, so a position kept across a removal is rejected even
after its slot has been handed out again. The expression pipeline does not
depend on this tree.
"""

from typing import Generic, List, NamedTuple, Optional, TypeVar

T = TypeVar('T')

NO_NODE = -1


class Position(NamedTuple):
  index: int
  generation: int


class PositionalTree(Generic[T]):
  """Proper binary tree supporting leaf expansion and leaf-plus-parent removal"""

  def __init__(self):
    self._elements: List[Optional[T]] = []
    self._parent: List[int] = []
    self._left: List[int] = []
    self._right: List[int] = []
    self._alive: List[bool] = []
    self._generation: List[int] = []
    self._free: List[int] = []
    self._root = NO_NODE
    self._size = 0

  def _allocate(self, parent: int) -> int:
    if self._free:
      i = self._free.pop()
      self._elements[i] = None
      self._parent[i] = parent
      self._left[i] = NO_NODE
      self._right[i] = NO_NODE
      self._alive[i] = True
    else:
      i = len(self._elements)
      self._elements.append(None)
      self._parent.append(parent)
      self._left.append(NO_NODE)
      self._right.append(NO_NODE)
      self._alive.append(True)
      self._generation.append(0)
    self._size += 1
    return i

  def _release(self, i: int):
    self._alive[i] = False
    self._elements[i] = None
    self._generation[i] += 1
    self._size -= 1
    self._free.append(i)

  def _position(self, i: int) -> Optional[Position]:
    if i == NO_NODE:
      return None
    return Position(i, self._generation[i])

  def _check(self, p: Position) -> int:
    i, generation = p
    if not (0 <= i < len(self._alive)) or not self._alive[i] or self._generation[i] != generation:
      raise ValueError(f"Invalid or stale position: {tuple(p)}")
    return i

  def size(self) -> int:
    return self._size

  def __len__(self) -> int:
    return self._size

  def empty(self) -> bool:
    return self._size == 0

  def root(self) -> Position:
    if self._root == NO_NODE:
      raise ValueError("Tree is empty")
    return self._position(self._root)

  def add_root(self, element: Optional[T] = None) -> Position:
    if not self.empty():
      raise ValueError("Tree already has a root")
    self._root = self._allocate(NO_NODE)
    self._elements[self._root] = element
    return self._position(self._root)

  def element(self, p: Position) -> Optional[T]:
    return self._elements[self._check(p)]

  def set_element(self, p: Position, element: T):
    self._elements[self._check(p)] = element

  def left(self, p: Position) -> Optional[Position]:
    return self._position(self._left[self._check(p)])

  def right(self, p: Position) -> Optional[Position]:
    return self._position(self._right[self._check(p)])

  def parent(self, p: Position) -> Optional[Position]:
    return self._position(self._parent[self._check(p)])

  def is_root(self, p: Position) -> bool:
    return self._parent[self._check(p)] == NO_NODE

  def is_external(self, p: Position) -> bool:
    i = self._check(p)
    return self._left[i] == NO_NODE and self._right[i] == NO_NODE

  def expand_external(self, p: Position):
    """Give the leaf at ``p`` two new empty children"""
    if not self.is_external(p):
      raise ValueError(f"Position {tuple(p)} is not external")
    i = p.index
    self._left[i] = self._allocate(i)
    self._right[i] = self._allocate(i)

  def remove_above_external(self, p: Position) -> Position:
    """Remove the leaf at ``p`` and its parent; the sibling takes the parent's place"""
    if not self.is_external(p):
      raise ValueError(f"Position {tuple(p)} is not external")
    w = p.index
    v = self._parent[w]
    if v == NO_NODE:
      raise ValueError("Cannot remove above the root")
    sib = self._right[v] if self._left[v] == w else self._left[v]

    gpar = self._parent[v]
    if gpar == NO_NODE:
      self._root = sib
    elif self._left[gpar] == v:
      self._left[gpar] = sib
    else:
      self._right[gpar] = sib
    self._parent[sib] = gpar

    self._release(w)
    self._release(v)
    return self._position(sib)

  def positions(self) -> List[Position]:
    """All live positions in preorder"""
    if self._root == NO_NODE:
      return []
    result = []
    stack = [self._root]
    while stack:
      i = stack.pop()
      result.append(self._position(i))
      if self._right[i] != NO_NODE:
        stack.append(self._right[i])
      if self._left[i] != NO_NODE:
        stack.append(self._left[i])
    return result

  def get_stats(self) -> dict:
    return {
      'size': self._size,
      'arena_slots': len(self._elements),
      'free_slots': len(self._free),
    }
