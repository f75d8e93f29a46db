import pytest

from bintrees_kit.heap import (
    array_to_heap,
    heap_extract,
    heap_insert,
    heap_to_sorted_array,
    is_heap,
)
from bintrees_kit.structure import levelorder
from bintrees_kit.tree import Node, size

SAMPLE = [79, 47, 68, 87, 84, 91, 21, 32, 34, 2, 20, 22, 98, 1, 62, 95]


def _attach(parent, value, side):
    node = Node(value, parent)
    setattr(parent, side, node)
    return node


def _basic_tree():
    root = Node(98)
    left = _attach(root, 90, "left")
    _attach(root, 85, "right")
    _attach(left, 80, "right")
    _attach(left, 79, "left")
    return root


def test_is_heap_basic_tree():
    root = _basic_tree()
    assert is_heap(root) is True
    assert is_heap(root.left) is True


def test_is_heap_rejects_child_larger_than_parent():
    root = _basic_tree()
    _attach(root.right, 97, "left")
    assert is_heap(root) is False


def test_is_heap_rejects_incomplete_tree():
    root = _basic_tree()
    _attach(root.right, 79, "right")
    assert is_heap(root) is False


def test_is_heap_none_is_false():
    assert is_heap(None) is False


def test_is_heap_allows_equal_values():
    root = Node(5)
    _attach(root, 5, "left")
    _attach(root, 5, "right")
    assert is_heap(root) is True


def test_heap_insert_sequence():
    root = None
    inserted = []
    for value in [98, 402, 12, 46, 128, 256, 512, 50]:
        root, node = heap_insert(root, value)
        inserted.append(node.value)
    assert inserted == [98, 402, 12, 46, 128, 256, 512, 50]
    assert list(levelorder(root)) == [512, 128, 402, 50, 98, 12, 256, 46]
    assert is_heap(root) is True


def test_heap_insert_intermediate_shapes():
    root, node = heap_insert(None, 98)
    assert node is root
    root, node = heap_insert(root, 402)
    assert node is root
    assert list(levelorder(root)) == [402, 98]
    root, node = heap_insert(root, 12)
    assert list(levelorder(root)) == [402, 98, 12]
    assert node is root.right
    root, node = heap_insert(root, 46)
    assert list(levelorder(root)) == [402, 98, 12, 46]
    assert node is root.left.left
    root, node = heap_insert(root, 128)
    assert list(levelorder(root)) == [402, 128, 12, 46, 98]
    assert node is root.left


def test_heap_insert_keeps_root_object():
    root, _ = heap_insert(None, 1)
    same, node = heap_insert(root, 10)
    assert same is root
    assert node is root
    assert root.value == 10
    assert root.left.value == 1


def test_array_to_heap_sample():
    tree = array_to_heap(SAMPLE)
    assert list(levelorder(tree)) == [
        98, 95, 91, 84, 79, 87, 62, 47, 34, 2, 20, 22, 68, 1, 21, 32,
    ]
    assert is_heap(tree) is True
    assert size(tree) == 16


def test_array_to_heap_empty():
    assert array_to_heap([]) is None


def test_heap_extract_sample():
    tree = array_to_heap(SAMPLE)

    value, tree = heap_extract(tree)
    assert value == 98
    assert list(levelorder(tree)) == [
        95, 84, 91, 47, 79, 87, 62, 32, 34, 2, 20, 22, 68, 1, 21,
    ]

    value, tree = heap_extract(tree)
    assert value == 95
    assert list(levelorder(tree)) == [
        91, 84, 87, 47, 79, 68, 62, 32, 34, 2, 20, 22, 21, 1,
    ]

    value, tree = heap_extract(tree)
    assert value == 91
    assert list(levelorder(tree)) == [
        87, 84, 68, 47, 79, 22, 62, 32, 34, 2, 20, 1, 21,
    ]
    assert is_heap(tree) is True


def test_heap_extract_single_node_empties_heap():
    root, _ = heap_insert(None, 7)
    value, rest = heap_extract(root)
    assert value == 7
    assert rest is None


def test_heap_extract_empty_raises():
    with pytest.raises(IndexError):
        heap_extract(None)


def test_heap_to_sorted_array_sample():
    tree = array_to_heap(SAMPLE)
    assert heap_to_sorted_array(tree) == [
        98, 95, 91, 87, 84, 79, 68, 62, 47, 34, 32, 22, 21, 20, 2, 1,
    ]


def test_heap_to_sorted_array_none():
    assert heap_to_sorted_array(None) == []


@pytest.mark.parametrize(
    "values",
    [
        [3],
        [1, 2],
        [5, 5, 5, 1],
        [4, 1, 4, 2, 9, 9, 0, -3],
        list(range(20)),
        list(range(20, 0, -1)),
    ],
)
def test_heap_to_sorted_array_is_descending_permutation(values):
    result = heap_to_sorted_array(array_to_heap(values))
    assert len(result) == len(values)
    assert sorted(result) == sorted(values)
    assert all(a >= b for a, b in zip(result, result[1:]))


@pytest.mark.parametrize("values", [SAMPLE, [5, 5, 5, 1], list(range(12))])
def test_extraction_keeps_heap_property(values):
    tree = array_to_heap(values)
    remaining = len(values)
    while tree is not None:
        _, tree = heap_extract(tree)
        remaining -= 1
        if tree is not None:
            assert is_heap(tree) is True
            assert size(tree) == remaining
    assert remaining == 0