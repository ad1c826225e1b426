"""
Tree Utility Functions

Traversal and inspection helpers for expression trees. Every helper walks
children through ``Node.children()`` so unary and binary operators share one
code path.
"""

from collections import deque
from typing import List

from ..core.node import fold, Node, BinaryOpNode, UnaryOpNode, ConstantNode, VariableNode


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first' (preorder)

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative, non-recursive)"""
    nodes_to_visit = deque([node])
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.popleft()
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.children())

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Depth-first preorder traversal (iterative, non-recursive)"""
    nodes = []
    stack = [node]
    while stack:
        current_node = stack.pop()
        nodes.append(current_node)
        stack.extend(reversed(current_node.children()))
    return nodes


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    return fold(node, lambda _node, child_depths: 1 + max(child_depths, default=0))


def find_nodes_by_operator(node: Node, operator: str) -> List[Node]:
    """Find all operator nodes carrying the given operator token."""
    return [n for n in get_all_nodes(node, 'depth_first')
            if isinstance(n, (BinaryOpNode, UnaryOpNode)) and n.operator == operator]


def get_constants(node: Node) -> List[ConstantNode]:
    return [n for n in get_all_nodes(node, 'depth_first') if isinstance(n, ConstantNode)]


def get_variables(node: Node) -> List[VariableNode]:
    return [n for n in get_all_nodes(node, 'depth_first') if isinstance(n, VariableNode)]


def validate_tree_structure(node: Node) -> bool:
    """
    Check the structural invariants of a tree.

    Leaves must be operands, unary operators must hold one child and binary
    operators two. Also rejects trees where one node object appears twice,
    since subtrees are exclusively owned by their parent.
    """
    seen = set()
    stack = [node]
    while stack:
        current = stack.pop()
        if id(current) in seen:
            return False
        seen.add(id(current))

        if isinstance(current, (ConstantNode, VariableNode)):
            if current.children():
                return False
        elif isinstance(current, UnaryOpNode):
            if not isinstance(current.operand, Node):
                return False
        elif isinstance(current, BinaryOpNode):
            if not (isinstance(current.left, Node) and isinstance(current.right, Node)):
                return False
        else:
            return False
        stack.extend(current.children())
    return True
