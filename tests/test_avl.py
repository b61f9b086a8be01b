import math

import pytest

from dsakit.avl import AVLTree


def _max_avl_height(n):
    return 1.4405 * math.log2(n + 2) - 0.3277


def test_sample_insertions_preorder():
    tree = AVLTree([1, 2, 3, 4, 5])
    assert tree.preorder() == [2, 1, 4, 3, 5]


def test_sample_height():
    tree = AVLTree([1, 2, 3, 4, 5])
    assert tree.height() == 3


def test_empty_tree():
    tree = AVLTree()
    assert tree.height() == 0
    assert tree.preorder() == []
    assert len(tree) == 0
    assert 1 not in tree


def test_single_leaf_has_height_one():
    tree = AVLTree([7])
    assert tree.height() == 1
    assert tree.preorder() == [7]


@pytest.mark.parametrize(
    "values",
    [
        list(range(100)),
        list(range(100, 0, -1)),
        [50, 20, 80, 10, 30, 25, 27, 26, 90, 85, 86, 84],
        [(i * 37) % 101 for i in range(101)],
    ],
)
def test_balanced_and_ordered(values):
    tree = AVLTree(values)
    assert list(tree) == sorted(set(values))
    assert len(tree) == len(set(values))
    assert tree.height() <= _max_avl_height(len(tree))


def test_preorder_holds_same_keys():
    values = [9, 4, 17, 3, 6, 22, 5, 7, 20]
    tree = AVLTree(values)
    assert sorted(tree.preorder()) == sorted(values)


def test_duplicates_are_ignored():
    tree = AVLTree([3, 1, 2])
    assert tree.insert(2) is False
    assert tree.insert(4) is True
    assert len(tree) == 4
    assert list(tree) == [1, 2, 3, 4]


def test_contains():
    tree = AVLTree(["m", "c", "x", "a"])
    assert "c" in tree
    assert "x" in tree
    assert "b" not in tree


@pytest.mark.parametrize("values", [[3, 1, 2], [1, 3, 2]])
def test_double_rotations_give_middle_root(values):
    tree = AVLTree(values)
    assert tree.preorder()[0] == 2
    assert tree.height() == 2