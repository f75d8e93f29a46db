"""Binary search tree operations."""

from __future__ import annotations

from typing import Iterable, Optional

from bintrees_kit.tree import Node


def _within(tree: Optional[Node], low: Optional[int], high: Optional[int]) -> bool:
    if tree is None:
        return True
    if low is not None and tree.value <= low:
        return False
    if high is not None and tree.value >= high:
        return False
    return _within(tree.left, low, tree.value) and _within(tree.right, tree.value, high)


def is_bst(tree: Optional[Node]) -> bool:
    """Return True if ``tree`` is a binary search tree with distinct values."""
    if tree is None:
        return False
    return _within(tree, None, None)


def bst_insert(root: Optional[Node], value: int) -> Optional[Node]:
    """Insert ``value`` into the tree at ``root`` and return the new node.

    With ``root`` None the returned node is the root of a new tree.
    Returns None if the value is already present.
    """
    if root is None:
        return Node(value)
    current = root
    while True:
        if value < current.value:
            if current.left is None:
                current.left = Node(value, current)
                return current.left
            current = current.left
        elif value > current.value:
            if current.right is None:
                current.right = Node(value, current)
                return current.right
            current = current.right
        else:
            return None


def array_to_bst(values: Iterable[int]) -> Optional[Node]:
    """Build a binary search tree from ``values``, skipping repeats; None if empty."""
    root: Optional[Node] = None
    for value in values:
        node = bst_insert(root, value)
        if root is None:
            root = node
    return root


def bst_search(tree: Optional[Node], value: int) -> Optional[Node]:
    """Return the node holding ``value``, or None."""
    while tree is not None:
        if tree.value == value:
            return tree
        tree = tree.left if value < tree.value else tree.right
    return None


def _delete(root: Node, node: Node) -> Optional[Node]:
    if node.left is None or node.right is None:
        child = node.right if node.left is None else node.left
        parent = node.parent
        if parent is not None:
            if parent.left is node:
                parent.left = child
            else:
                parent.right = child
        if child is not None:
            child.parent = parent
        node.parent = node.left = node.right = None
        return child if parent is None else root
    successor = node.right
    while successor.left is not None:
        successor = successor.left
    node.value = successor.value
    return _delete(root, successor)


def bst_remove(root: Optional[Node], value: int) -> Optional[Node]:
    """Remove ``value`` from the tree and return the new root.

    A node with two children takes its in-order successor's value.
    Raises KeyError if the value is not in the tree.
    """
    node = bst_search(root, value)
    if node is None:
        raise KeyError(value)
    return _delete(root, node)