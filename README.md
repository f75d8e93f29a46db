# bintrees_kit

Binary trees made of linked nodes. Each node knows its parent and its left
and right children. The package has functions to build, inspect and reshape
such trees, and covers plain binary trees, binary search trees, AVL trees
and max binary heaps. It has no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Plain binary trees: `bintrees_kit.tree`

`Node(value, parent=None, left=None, right=None)` is a dataclass. Nodes
compare by identity.

```python
from bintrees_kit.tree import Node, insert_left, insert_right, inorder, height

root = Node(98)
root.left = Node(12, parent=root)
root.right = Node(402, parent=root)
insert_right(root.left, 54)
insert_right(root, 128)

list(inorder(root))   # [12, 54, 98, 402, 128]
height(root)          # 2
```

- `insert_left(parent, value)` and `insert_right(parent, value)` return the
  new node. If that side already had a child, the old child moves down and
  becomes the new node's child on the same side. A `parent` of `None`
  raises `ValueError`.
- `is_leaf(node)` and `is_root(node)` return `False` for `None`.
- `preorder(tree)`, `inorder(tree)` and `postorder(tree)` are generators
  that yield node values.
- `height(tree)` counts edges on the longest downward path.
  `depth(node)` counts edges up to the root. Both return 0 for `None`.
- `size(tree)`, `leaves(tree)` and `internal_nodes(tree)` count all nodes,
  nodes with no children, and nodes with at least one child.
- `balance(tree)` is the height of the left subtree minus the height of the
  right subtree.
- `is_full(tree)` checks that every node has zero or two children.
  `is_perfect(tree)` also checks that all leaves are at the same depth.
  Both return `False` for `None`.
- `sibling(node)` and `uncle(node)` return the related node, or `None` if
  there is no such node.

## Structure: `bintrees_kit.structure`

- `lowest_common_ancestor(first, second)` returns the deepest node that is
  an ancestor of both nodes. A node counts as its own ancestor. It returns
  `None` when the nodes are in different trees.
- `levelorder(tree)` yields values level by level, left to right.
- `is_complete(tree)` checks that every level is filled, except perhaps the
  last, which must be filled from the left. It returns `False` for `None`.
- `rotate_left(tree)` and `rotate_right(tree)` rotate the subtree, fix up
  the parent links and return the new subtree root. They raise `ValueError`
  if the needed child is missing.

## Binary search trees: `bintrees_kit.bst`

```python
from bintrees_kit.bst import array_to_bst, bst_insert, bst_search, bst_remove

root = array_to_bst([79, 47, 68, 87, 84, 91, 21, 32])
bst_search(root, 32).value    # 32
bst_insert(root, 79)          # None: already present
root = bst_remove(root, 79)   # 84 takes the root's place
```

- `is_bst(tree)` checks that the tree is a search tree with distinct
  values.
- `bst_insert(root, value)` returns the new node, or `None` if the value is
  already present. With `root` set to `None` it returns the root of a new
  tree.
- `array_to_bst(values)` skips repeated values and returns `None` for an
  empty input.
- `bst_remove(root, value)` returns the new root. A node with two children
  takes the value of its in-order successor. A missing value raises
  `KeyError`.

## AVL trees: `bintrees_kit.avl`

- `is_avl(tree)` checks search order and that the two subtrees of every
  node differ in height by at most one.
- `avl_insert(root, value)` rebalances on the way back up and returns
  `(new_root, created_node)`. `created_node` is `None` when the value was
  already present.
- `array_to_avl(values)` inserts values in order and skips repeats.
- `avl_remove(root, value)` removes the value, rebalances, and returns the
  new root. A value that is not present leaves the contents unchanged.
- `sorted_array_to_avl(values)` builds a balanced tree from sorted values
  by taking middle elements.

## Max binary heaps: `bintrees_kit.heap`

- `is_heap(tree)` checks that the tree is complete and that no child holds
  a value greater than its parent's.
- `heap_insert(root, value)` returns `(root, node)`, where `node` is the
  node that ends up holding `value` after it has moved up.
- `array_to_heap(values)` inserts the values in order.
- `heap_extract(root)` returns `(largest_value, new_root)`. `new_root` is
  `None` once the heap is empty. Extracting from `None` raises `IndexError`.
- `heap_to_sorted_array(heap)` empties the heap and returns its values in
  descending order.

## What it does not do

The package has no command-line program, and it does not draw or print
trees. To inspect a tree, use the traversal generators or look at node
attributes directly.