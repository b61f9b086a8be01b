"""Binary trees read from pre-order text, with recursive and iterative traversals."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

EMPTY = "#"


@dataclass
class TreeNode:
    """A node of a binary tree holding one character."""

    value: str
    left: TreeNode | None = None
    right: TreeNode | None = None


def parse_preorder(text: str) -> TreeNode | None:
    """Build a tree from its pre-order listing, ``#`` marking an empty subtree.

    Characters after the tree is complete are ignored. Raises ValueError when
    the text ends before the tree is complete.
    """
    chars = iter(text)

    def build() -> TreeNode | None:
        try:
            ch = next(chars)
        except StopIteration:
            raise ValueError("tree description ends early") from None
        if ch == EMPTY:
            return None
        node = TreeNode(ch)
        node.left = build()
        node.right = build()
        return node

    return build()


def preorder(root: TreeNode | None) -> list[str]:
    """Return the values in root, left, right order."""
    if root is None:
        return []
    return [root.value, *preorder(root.left), *preorder(root.right)]


def inorder(root: TreeNode | None) -> list[str]:
    """Return the values in left, root, right order."""
    if root is None:
        return []
    return [*inorder(root.left), root.value, *inorder(root.right)]


def postorder(root: TreeNode | None) -> list[str]:
    """Return the values in left, right, root order."""
    if root is None:
        return []
    return [*postorder(root.left), *postorder(root.right), root.value]


def level_order(root: TreeNode | None) -> list[str]:
    """Return the values level by level, left to right."""
    return [value for row in level_order_rows(root) for value in row]


def level_order_rows(root: TreeNode | None) -> list[list[str]]:
    """Return one list of values per level of the tree."""
    rows: list[list[str]] = []
    queue: deque[TreeNode] = deque([root] if root is not None else [])
    while queue:
        row = []
        for _ in range(len(queue)):
            node = queue.popleft()
            row.append(node.value)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        rows.append(row)
    return rows


def iterative_preorder(root: TreeNode | None) -> list[str]:
    """Pre-order traversal with an explicit stack."""
    result: list[str] = []
    stack: list[TreeNode] = []
    node = root
    while node is not None or stack:
        if node is not None:
            result.append(node.value)
            stack.append(node)
            node = node.left
        else:
            node = stack.pop().right
    return result


def iterative_inorder(root: TreeNode | None) -> list[str]:
    """In-order traversal with an explicit stack."""
    result: list[str] = []
    stack: list[TreeNode] = []
    node = root
    while node is not None or stack:
        if node is not None:
            stack.append(node)
            node = node.left
        else:
            top = stack.pop()
            result.append(top.value)
            node = top.right
    return result


def iterative_postorder(root: TreeNode | None) -> list[str]:
    """Post-order traversal with an explicit stack and a record of emitted nodes."""
    result: list[str] = []
    stack: list[TreeNode] = []
    emitted: set[int] = set()
    node = root
    while node is not None or stack:
        if node is not None:
            stack.append(node)
            node = node.left
            continue
        top = stack[-1]
        if top.right is not None and id(top.right) not in emitted:
            stack.append(top.right)
            node = top.right.left
        else:
            stack.pop()
            result.append(top.value)
            emitted.add(id(top))
    return result