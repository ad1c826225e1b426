import pytest

from expression_ranking import PositionalTree


def test_expand_and_positions():
  tree = PositionalTree()
  assert tree.empty()
  root = tree.add_root("+")
  tree.expand_external(root)
  left, right = tree.left(root), tree.right(root)
  tree.set_element(left, "a")
  tree.set_element(right, "b")
  assert tree.size() == 3
  assert [tree.element(p) for p in tree.positions()] == ["+", "a", "b"]
  assert tree.parent(left) == root
  assert tree.is_root(root) and not tree.is_root(left)
  assert tree.is_external(left) and not tree.is_external(root)


def test_remove_above_external_promotes_sibling():
  tree = PositionalTree()
  root = tree.add_root("*")
  tree.expand_external(root)
  left = tree.left(root)
  right = tree.right(root)
  tree.set_element(right, "b")
  tree.expand_external(left)
  tree.set_element(tree.left(left), "x")
  tree.set_element(tree.right(left), "y")

  sib = tree.remove_above_external(tree.left(left))
  assert tree.element(sib) == "y"
  assert tree.parent(sib) == root
  assert tree.left(root) == sib
  assert tree.size() == 3

  new_root = tree.remove_above_external(right)
  assert new_root == sib
  assert tree.root() == sib and tree.is_root(sib)
  assert tree.positions() == [sib]


def test_freed_slots_are_reused():
  tree = PositionalTree()
  root = tree.add_root()
  tree.expand_external(root)
  tree.remove_above_external(tree.left(root))
  slots = tree.get_stats()['arena_slots']
  tree.expand_external(tree.root())
  assert tree.get_stats()['arena_slots'] == slots
  assert tree.size() == 3


def test_precondition_violations():
  tree = PositionalTree()
  with pytest.raises(ValueError):
    tree.root()
  root = tree.add_root()
  with pytest.raises(ValueError):
    tree.add_root()
  with pytest.raises(ValueError):
    tree.remove_above_external(root)
  tree.expand_external(root)
  with pytest.raises(ValueError):
    tree.expand_external(root)
  stale = tree.left(root)
  tree.remove_above_external(stale)
  with pytest.raises(ValueError):
    tree.element(stale)


def test_stale_position_rejected_after_slot_reuse():
  tree = PositionalTree()
  root = tree.add_root("r")
  tree.expand_external(root)
  stale = tree.left(root)
  tree.remove_above_external(stale)
  tree.expand_external(tree.root())
  assert tree.get_stats()['free_slots'] == 0
  reused = [p for p in tree.positions() if p.index == stale.index]
  assert len(reused) == 1 and reused[0] != stale
  for op in (tree.element, tree.left, tree.parent, tree.is_external, tree.expand_external):
    with pytest.raises(ValueError):
      op(stale)
  with pytest.raises(ValueError):
    tree.set_element(stale, "x")


def test_arena_does_not_grow_under_churn():
  tree = PositionalTree()
  tree.add_root()
  for _ in range(2000):
    tree.expand_external(tree.root())
    tree.remove_above_external(tree.left(tree.root()))
  assert tree.size() == 1
  assert tree.get_stats()['arena_slots'] == 3
