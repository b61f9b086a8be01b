import pytest

from dsakit.bst import BinarySearchTree

NUMS = [4, 5, 2, 3, 6, 5, 8]


def test_search_finds_inserted_key():
    tree = BinarySearchTree(NUMS)
    assert tree.search(6) == 6


def test_preorder_of_sample():
    assert BinarySearchTree(NUMS).preorder() == [4, 2, 3, 5, 6, 8]


def test_duplicates_are_dropped():
    tree = BinarySearchTree(NUMS)
    assert len(tree) == len(set(NUMS))
    assert tree.insert(5) is False
    assert tree.insert(7) is True
    assert len(tree) == len(set(NUMS)) + 1


def test_iteration_is_sorted():
    tree = BinarySearchTree(NUMS)
    assert list(tree) == sorted(set(NUMS))


def test_preorder_starts_with_first_key_and_holds_all_keys():
    tree = BinarySearchTree(NUMS)
    order = tree.preorder()
    assert order[0] == NUMS[0]
    assert sorted(order) == sorted(set(NUMS))


def test_membership():
    tree = BinarySearchTree(NUMS)
    assert all(n in tree for n in NUMS)
    assert 7 not in tree


def test_search_missing_raises():
    with pytest.raises(KeyError):
        BinarySearchTree(NUMS).search(10)


def test_empty_tree():
    tree = BinarySearchTree()
    assert tree.preorder() == []
    assert list(tree) == []
    assert 1 not in tree
    with pytest.raises(KeyError):
        tree.search(1)


def test_works_with_strings():
    tree = BinarySearchTree("DBFACEG")
    assert "".join(tree) == "ABCDEFG"
    assert tree.preorder()[0] == "D"