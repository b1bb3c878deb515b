"""Binary tree traversals and per-level sums of leaf values."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

__all__ = [
    "TreeNode",
    "inorder_iterative",
    "inorder_recursive",
    "leaf_sums_by_level",
    "preorder_iterative",
    "preorder_recursive",
]


@dataclass
class TreeNode:
    """A node of a binary tree."""

    value: Any
    left: TreeNode | None = None
    right: TreeNode | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _inorder(node: TreeNode | None) -> Iterator[Any]:
    if node is None:
        return
    yield from _inorder(node.left)
    yield node.value
    yield from _inorder(node.right)


def _preorder(node: TreeNode | None) -> Iterator[Any]:
    if node is None:
        return
    yield node.value
    yield from _preorder(node.left)
    yield from _preorder(node.right)


def inorder_recursive(root: TreeNode | None) -> list[Any]:
    """Return values in left, root, right order, found by recursion."""
    return list(_inorder(root))


def inorder_iterative(root: TreeNode | None) -> list[Any]:
    """Return values in left, root, right order, found with an explicit stack."""
    result: list[Any] = []
    pending: list[TreeNode] = []
    current = root
    while pending or current is not None:
        if current is not None:
            pending.append(current)
            current = current.left
        else:
            current = pending.pop()
            result.append(current.value)
            current = current.right
    return result


def preorder_recursive(root: TreeNode | None) -> list[Any]:
    """Return values in root, left, right order, found by recursion."""
    return list(_preorder(root))


def preorder_iterative(root: TreeNode | None) -> list[Any]:
    """Return values in root, left, right order, found with an explicit stack."""
    if root is None:
        return []
    result: list[Any] = []
    pending = [root]
    while pending:
        node = pending.pop()
        result.append(node.value)
        if node.right is not None:
            pending.append(node.right)
        if node.left is not None:
            pending.append(node.left)
    return result


def leaf_sums_by_level(root: TreeNode | None) -> dict[int, Any]:
    """Map each level (the root is level 1) to the sum of the leaf values on it.

    Levels without leaves map to 0; an empty tree gives an empty mapping.
    """
    sums: dict[int, Any] = {}
    if root is None:
        return sums
    queue: deque[tuple[TreeNode, int]] = deque([(root, 1)])
    while queue:
        node, level = queue.popleft()
        sums.setdefault(level, 0)
        if node.is_leaf:
            sums[level] += node.value
        for child in (node.left, node.right):
            if child is not None:
                queue.append((child, level + 1))
    return sums