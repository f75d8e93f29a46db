"""Binary tree nodes and basic measurements on them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer value and links to its relatives."""

    value: int
    parent: Optional[Node] = None
    left: Optional[Node] = field(default=None)
    right: Optional[Node] = field(default=None)

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


def insert_left(parent: Node, value: int) -> Node:
    """Insert a new node as the left child of ``parent``.

    An existing left child becomes the left child of the new node.
    """
    if parent is None:
        raise ValueError("parent node is required")
    new = Node(value, parent)
    if parent.left is not None:
        new.left = parent.left
        parent.left.parent = new
    parent.left = new
    return new


def insert_right(parent: Node, value: int) -> Node:
    """Insert a new node as the right child of ``parent``.

    An existing right child becomes the right child of the new node.
    """
    if parent is None:
        raise ValueError("parent node is required")
    new = Node(value, parent)
    if parent.right is not None:
        new.right = parent.right
        parent.right.parent = new
    parent.right = new
    return new


def is_leaf(node: Optional[Node]) -> bool:
    """Return True if ``node`` exists and has no children."""
    return node is not None and node.left is None and node.right is None


def is_root(node: Optional[Node]) -> bool:
    """Return True if ``node`` exists and has no parent."""
    return node is not None and node.parent is None


def preorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield the values of ``tree`` in pre-order."""
    if tree is not None:
        yield tree.value
        yield from preorder(tree.left)
        yield from preorder(tree.right)


def inorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield the values of ``tree`` in in-order."""
    if tree is not None:
        yield from inorder(tree.left)
        yield tree.value
        yield from inorder(tree.right)


def postorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield the values of ``tree`` in post-order."""
    if tree is not None:
        yield from postorder(tree.left)
        yield from postorder(tree.right)
        yield tree.value


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest downward path; 0 for None."""
    if tree is None:
        return 0
    left = 1 + height(tree.left) if tree.left is not None else 0
    right = 1 + height(tree.right) if tree.right is not None else 0
    return max(left, right)


def _levels(tree: Optional[Node]) -> int:
    """Return the number of nodes on the longest downward path; 0 for None."""
    if tree is None:
        return 0
    return 1 + max(_levels(tree.left), _levels(tree.right))


def depth(node: Optional[Node]) -> int:
    """Return the number of edges from ``node`` up to its root; 0 for None."""
    count = 0
    while node is not None and node.parent is not None:
        count += 1
        node = node.parent
    return count


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in ``tree``."""
    if tree is None:
        return 0
    return 1 + size(tree.left) + size(tree.right)


def leaves(tree: Optional[Node]) -> int:
    """Return the number of leaves in ``tree``."""
    if tree is None:
        return 0
    own = 1 if is_leaf(tree) else 0
    return own + leaves(tree.left) + leaves(tree.right)


def internal_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes in ``tree`` with at least one child."""
    if tree is None:
        return 0
    own = 1 if (tree.left is not None or tree.right is not None) else 0
    return own + internal_nodes(tree.left) + internal_nodes(tree.right)


def balance(tree: Optional[Node]) -> int:
    """Return the balance factor of ``tree``: left height minus right height."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def _is_full(tree: Optional[Node]) -> bool:
    if tree is None:
        return True
    if (tree.left is None) != (tree.right is None):
        return False
    return _is_full(tree.left) and _is_full(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node of ``tree`` has zero or two children."""
    if tree is None:
        return False
    return _is_full(tree)


def _first_leaf(tree: Node) -> Node:
    while not is_leaf(tree):
        tree = tree.left if tree.left is not None else tree.right
    return tree


def _is_perfect(tree: Node, leaf_depth: int, level: int) -> bool:
    if is_leaf(tree):
        return level == leaf_depth
    if tree.left is None or tree.right is None:
        return False
    return _is_perfect(tree.left, leaf_depth, level + 1) and _is_perfect(
        tree.right, leaf_depth, level + 1
    )


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if ``tree`` is full and all its leaves share one depth."""
    if tree is None:
        return False
    return _is_perfect(tree, depth(_first_leaf(tree)), 0)


def sibling(node: Optional[Node]) -> Optional[Node]:
    """Return the other child of ``node``'s parent, or None."""
    if node is None or node.parent is None:
        return None
    if node.parent.left is node:
        return node.parent.right
    return node.parent.left


def uncle(node: Optional[Node]) -> Optional[Node]:
    """Return the sibling of ``node``'s parent, or None."""
    if node is None or node.parent is None or node.parent.parent is None:
        return None
    return sibling(node.parent)