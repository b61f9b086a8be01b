import pytest

from dsakit.binary_tree import inorder, parse_preorder, postorder, preorder
from dsakit.threaded_tree import (
    inorder_threaded,
    parse_threaded,
    postorder_threaded,
    preorder_threaded,
    thread_inorder,
    thread_postorder,
    thread_preorder,
)

EXAMPLE = "AB#D##CE###"
SHAPES = [EXAMPLE, "A##", "AB#C###", "A#B#C##", "ABD##E##CF##G##", "ABC####", "AB###"]


def test_inorder_example():
    root = parse_threaded(EXAMPLE)
    thread_inorder(root)
    assert "".join(inorder_threaded(root)) == "BDAEC"


def test_preorder_example():
    root = parse_threaded(EXAMPLE)
    thread_preorder(root)
    assert "".join(preorder_threaded(root)) == "ABDCE"


def test_postorder_example():
    root = parse_threaded(EXAMPLE)
    thread_postorder(root)
    assert "".join(postorder_threaded(root)) == "DBECA"


@pytest.mark.parametrize("text", SHAPES)
def test_threaded_walks_match_plain_traversals(text):
    plain = parse_preorder(text)

    root = parse_threaded(text)
    thread_inorder(root)
    assert list(inorder_threaded(root)) == inorder(plain)

    root = parse_threaded(text)
    thread_preorder(root)
    assert list(preorder_threaded(root)) == preorder(plain)

    root = parse_threaded(text)
    thread_postorder(root)
    assert list(postorder_threaded(root)) == postorder(plain)


def test_parent_links():
    root = parse_threaded(EXAMPLE)
    assert root.parent is None
    assert root.left.parent is root
    assert root.right.left.parent is root.right


def test_inorder_threads_point_to_neighbours():
    root = parse_threaded(EXAMPLE)
    thread_inorder(root)
    b = root.left
    d = b.right
    assert b.left_thread and b.left is None
    assert d.left_thread and d.left is b
    assert d.right_thread and d.right is root


def test_empty_tree():
    root = parse_threaded("#")
    assert root is None
    thread_inorder(root)
    thread_postorder(root)
    assert list(inorder_threaded(root)) == []
    assert list(postorder_threaded(root)) == []
    assert list(preorder_threaded(root)) == []


@pytest.mark.parametrize("text", ["", "A#", "AB#D##CE##"])
def test_incomplete_description_raises(text):
    with pytest.raises(ValueError):
        parse_threaded(text)