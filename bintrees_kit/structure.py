"""Structural queries and rotations on binary trees."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from bintrees_kit.tree import Node


def lowest_common_ancestor(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Return the deepest node that is an ancestor of both nodes, or None.

    A node counts as its own ancestor. Nodes in different trees have none.
    """
    if first is None or second is None:
        return None
    ancestors: set[Node] = set()
    node: Optional[Node] = first
    while node is not None:
        ancestors.add(node)
        node = node.parent
    node = second
    while node is not None:
        if node in ancestors:
            return node
        node = node.parent
    return None


def levelorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield the values of ``tree`` level by level, left to right."""
    if tree is None:
        return
    queue = deque([tree])
    while queue:
        node = queue.popleft()
        yield node.value
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)


def is_complete(tree: Optional[Node]) -> bool:
    """Return True if every level is filled except possibly the last, filled from the left."""
    if tree is None:
        return False
    queue = deque([tree])
    seen_gap = False
    while queue:
        node = queue.popleft()
        for child in (node.left, node.right):
            if child is None:
                seen_gap = True
            elif seen_gap:
                return False
            else:
                queue.append(child)
    return True


def _replace_in_parent(parent: Optional[Node], old: Node, new: Node) -> None:
    if parent is None:
        return
    if parent.left is old:
        parent.left = new
    else:
        parent.right = new


def rotate_left(tree: Node) -> Node:
    """Rotate ``tree`` left and return the new subtree root.

    Raises ValueError if ``tree`` is None or has no right child.
    """
    if tree is None or tree.right is None:
        raise ValueError("left rotation needs a node with a right child")
    pivot = tree.right
    moved = pivot.left
    pivot.left = tree
    tree.right = moved
    if moved is not None:
        moved.parent = tree
    parent = tree.parent
    tree.parent = pivot
    pivot.parent = parent
    _replace_in_parent(parent, tree, pivot)
    return pivot


def rotate_right(tree: Node) -> Node:
    """Rotate ``tree`` right and return the new subtree root.

    Raises ValueError if ``tree`` is None or has no left child.
    """
    if tree is None or tree.left is None:
        raise ValueError("right rotation needs a node with a left child")
    pivot = tree.left
    moved = pivot.right
    pivot.right = tree
    tree.left = moved
    if moved is not None:
        moved.parent = tree
    parent = tree.parent
    tree.parent = pivot
    pivot.parent = parent
    _replace_in_parent(parent, tree, pivot)
    return pivot