"""AVL tree checks, insertion, removal and construction."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from bintrees_kit.bst import bst_remove, bst_search
from bintrees_kit.structure import rotate_left, rotate_right
from bintrees_kit.tree import Node, balance, is_leaf


def _is_avl(tree: Optional[Node], low: Optional[int], high: Optional[int]) -> bool:
    if tree is None:
        return True
    if low is not None and tree.value <= low:
        return False
    if high is not None and tree.value >= high:
        return False
    if abs(balance(tree)) > 1:
        return False
    return _is_avl(tree.left, low, tree.value) and _is_avl(tree.right, tree.value, high)


def is_avl(tree: Optional[Node]) -> bool:
    """Return True if ``tree`` is a search tree with distinct values whose
    subtrees all differ in height by at most one."""
    if tree is None:
        return False
    return _is_avl(tree, None, None)


def _insert(
    node: Optional[Node], parent: Optional[Node], value: int
) -> tuple[Node, Optional[Node]]:
    """Insert below ``node`` and return (new subtree root, created node or None)."""
    if node is None:
        created = Node(value, parent)
        return created, created

    if value < node.value:
        node.left, created = _insert(node.left, node, value)
    elif value > node.value:
        node.right, created = _insert(node.right, node, value)
    else:
        return node, None

    factor = balance(node)
    if factor > 1 and node.left.value > value:
        node = rotate_right(node)
    elif factor < -1 and node.right.value < value:
        node = rotate_left(node)
    elif factor > 1 and node.left.value < value:
        node.left = rotate_left(node.left)
        node = rotate_right(node)
    elif factor < -1 and node.right.value > value:
        node.right = rotate_right(node.right)
        node = rotate_left(node)
    return node, created


def avl_insert(root: Optional[Node], value: int) -> tuple[Node, Optional[Node]]:
    """Insert ``value`` into the AVL tree at ``root``, rebalancing on the way up.

    Returns ``(new_root, created_node)``; ``created_node`` is None when the
    value was already present and the tree was left as it was.
    """
    if root is None:
        created = Node(value)
        return created, created
    return _insert(root, None, value)


def array_to_avl(values: Iterable[int]) -> Optional[Node]:
    """Build an AVL tree from ``values``, skipping repeats; None if empty."""
    root: Optional[Node] = None
    seen: set[int] = set()
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        root, _ = avl_insert(root, value)
    return root


def _rebalance(tree: Optional[Node]) -> Optional[Node]:
    """Rebalance bottom-up with single rotations and return the subtree root."""
    if tree is None or is_leaf(tree):
        return tree
    tree.left = _rebalance(tree.left)
    tree.right = _rebalance(tree.right)
    factor = balance(tree)
    if factor > 1:
        return rotate_right(tree)
    if factor < -1:
        return rotate_left(tree)
    return tree


def avl_remove(root: Optional[Node], value: int) -> Optional[Node]:
    """Remove ``value`` from the AVL tree and return the rebalanced root.

    A node with two children takes its in-order successor's value. A value
    that is not present leaves the tree's contents unchanged.
    """
    if root is None:
        return None
    if bst_search(root, value) is not None:
        root = bst_remove(root, value)
    return _rebalance(root)


def _build(
    values: Sequence[int], begin: int, last: int, parent: Optional[Node]
) -> Optional[Node]:
    if begin > last:
        return None
    mid = (begin + last) // 2
    node = Node(values[mid], parent)
    node.left = _build(values, begin, mid - 1, node)
    node.right = _build(values, mid + 1, last, node)
    return node


def sorted_array_to_avl(values: Iterable[int]) -> Optional[Node]:
    """Build an AVL tree from sorted ``values`` by taking middles; None if empty."""
    items = list(values)
    if not items:
        return None
    return _build(items, 0, len(items) - 1, None)