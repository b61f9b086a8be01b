"""Threaded binary trees: in-, pre- and post-order threading and traversal."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

EMPTY = "#"


@dataclass(eq=False, repr=False)
class ThreadedNode:
    """A tree node whose empty child links may be replaced by threads.

    ``left_thread``/``right_thread`` tell whether ``left``/``right`` point to
    a predecessor/successor rather than a child.
    """

    value: str
    left: ThreadedNode | None = None
    right: ThreadedNode | None = None
    parent: ThreadedNode | None = None
    left_thread: bool = False
    right_thread: bool = False

    def __repr__(self) -> str:
        return f"ThreadedNode({self.value!r})"


def parse_threaded(text: str) -> ThreadedNode | None:
    """Build an unthreaded tree, with parent links, from pre-order text.

    ``#`` marks an empty subtree; raises ValueError if the text ends early.
    """
    chars = iter(text)

    def build(parent: ThreadedNode | None) -> ThreadedNode | None:
        try:
            ch = next(chars)
        except StopIteration:
            raise ValueError("tree description ends early") from None
        if ch == EMPTY:
            return None
        node = ThreadedNode(ch, parent=parent)
        node.left = build(node)
        node.right = build(node)
        return node

    return build(None)


def _link(node: ThreadedNode, pre: ThreadedNode | None) -> None:
    if node.left is None:
        node.left = pre
        node.left_thread = True
    if pre is not None and pre.right is None:
        pre.right = node
        pre.right_thread = True


def thread_inorder(root: ThreadedNode | None) -> None:
    """Thread a fresh tree in in-order, in place."""
    if root is None:
        return
    pre: ThreadedNode | None = None

    def visit(node: ThreadedNode | None) -> None:
        nonlocal pre
        if node is None:
            return
        visit(node.left)
        _link(node, pre)
        pre = node
        visit(node.right)

    visit(root)
    pre.right = None
    pre.right_thread = True


def thread_preorder(root: ThreadedNode | None) -> None:
    """Thread a fresh tree in pre-order, in place."""
    if root is None:
        return
    pre: ThreadedNode | None = None

    def visit(node: ThreadedNode | None) -> None:
        nonlocal pre
        if node is None:
            return
        _link(node, pre)
        pre = node
        if not node.left_thread:
            visit(node.left)
        if not node.right_thread:
            visit(node.right)

    visit(root)
    pre.right = None
    pre.right_thread = True


def thread_postorder(root: ThreadedNode | None) -> None:
    """Thread a fresh tree in post-order, in place; the root stays last."""
    pre: ThreadedNode | None = None

    def visit(node: ThreadedNode | None) -> None:
        nonlocal pre
        if node is None:
            return
        visit(node.left)
        visit(node.right)
        _link(node, pre)
        pre = node

    visit(root)


def _first_inorder(node: ThreadedNode) -> ThreadedNode:
    while not node.left_thread:
        node = node.left
    return node


def inorder_threaded(root: ThreadedNode | None) -> Iterator[str]:
    """Walk an in-order threaded tree without a stack."""
    if root is None:
        return
    node: ThreadedNode | None = _first_inorder(root)
    while node is not None:
        yield node.value
        node = node.right if node.right_thread else _first_inorder(node.right)


def preorder_threaded(root: ThreadedNode | None) -> Iterator[str]:
    """Walk a pre-order threaded tree without a stack."""
    node = root
    while node is not None:
        yield node.value
        node = node.right if node.left_thread else node.left


def _first_postorder(node: ThreadedNode) -> ThreadedNode:
    while True:
        while not node.left_thread:
            node = node.left
        if node.right_thread or node.right is None:
            return node
        node = node.right


def _next_postorder(node: ThreadedNode) -> ThreadedNode | None:
    if node.right_thread:
        return node.right
    parent = node.parent
    if parent is None:
        return None
    if parent.right is node or parent.right_thread or parent.right is None:
        return parent
    return _first_postorder(parent.right)


def postorder_threaded(root: ThreadedNode | None) -> Iterator[str]:
    """Walk a post-order threaded tree using threads and parent links."""
    if root is None:
        return
    node: ThreadedNode | None = _first_postorder(root)
    while node is not None:
        yield node.value
        node = _next_postorder(node)