"""Max binary heaps stored as linked binary trees."""

from __future__ import annotations

from typing import Iterable, Optional

from bintrees_kit.structure import is_complete
from bintrees_kit.tree import Node, size


def _ordered(tree: Optional[Node]) -> bool:
    """Return True if no child in ``tree`` holds a value above its parent's."""
    if tree is None:
        return True
    for child in (tree.left, tree.right):
        if child is not None and child.value > tree.value:
            return False
    return _ordered(tree.left) and _ordered(tree.right)


def is_heap(tree: Optional[Node]) -> bool:
    """Return True if ``tree`` is a complete tree in which every parent
    holds a value at least as large as its children's."""
    if not is_complete(tree):
        return False
    return _ordered(tree)


def _node_at(root: Node, position: int) -> Node:
    """Return the node at 1-based level-order ``position`` of a complete tree."""
    node = root
    for bit in bin(position)[3:]:
        node = node.right if bit == "1" else node.left
    return node


def heap_insert(root: Optional[Node], value: int) -> tuple[Node, Node]:
    """Insert ``value`` into the max heap at ``root``.

    The value is placed at the next free level-order position and then
    moved up while it exceeds its parent's. Returns ``(root, node)`` where
    ``node`` is the node that finally holds ``value``.
    """
    if root is None:
        created = Node(value)
        return created, created

    position = size(root) + 1
    parent = _node_at(root, position // 2)
    node = Node(value, parent)
    if position % 2:
        parent.right = node
    else:
        parent.left = node

    while node.parent is not None and node.value > node.parent.value:
        node.value, node.parent.value = node.parent.value, node.value
        node = node.parent
    return root, node


def array_to_heap(values: Iterable[int]) -> Optional[Node]:
    """Build a max heap by inserting ``values`` in order; None if empty."""
    root: Optional[Node] = None
    for value in values:
        root, _ = heap_insert(root, value)
    return root


def _sift_down(node: Node) -> None:
    while node.left is not None:
        larger = node.left
        if node.right is not None and node.right.value > larger.value:
            larger = node.right
        if larger.value <= node.value:
            return
        node.value, larger.value = larger.value, node.value
        node = larger


def heap_extract(root: Optional[Node]) -> tuple[int, Optional[Node]]:
    """Remove the largest value from the heap.

    The last level-order node replaces the root and sinks to its place.
    Returns ``(value, new_root)``; ``new_root`` is None once the heap is
    empty. Raises IndexError if the heap is empty.
    """
    if root is None:
        raise IndexError("extract from an empty heap")

    value = root.value
    count = size(root)
    if count == 1:
        return value, None

    last = _node_at(root, count)
    parent = last.parent
    if parent.right is last:
        parent.right = None
    else:
        parent.left = None
    last.parent = None

    root.value = last.value
    _sift_down(root)
    return value, root


def heap_to_sorted_array(heap: Optional[Node]) -> list[int]:
    """Empty the heap and return its values in descending order."""
    result: list[int] = []
    while heap is not None:
        value, heap = heap_extract(heap)
        result.append(value)
    return result