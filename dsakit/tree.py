"""Binary tree nodes and the basic traversals over them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding a value and two optional children."""

    val: Any = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def preorder(root: Optional[TreeNode]) -> Iterator[Any]:
    """Yield node values in pre-order (node, left subtree, right subtree)."""
    if root is None:
        return
    stack = [root]
    while stack:
        node = stack.pop()
        yield node.val
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def inorder_traversal(root: Optional[TreeNode]) -> list[Any]:
    """Return node values in in-order (left subtree, node, right subtree)."""
    result: list[Any] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.val)
        node = node.right
    return result


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Return True when both trees have the same shape and values."""
    pending = [(p, q)]
    while pending:
        a, b = pending.pop()
        if a is None and b is None:
            continue
        if a is None or b is None:
            return False
        if a.val != b.val:
            return False
        pending.append((a.right, b.right))
        pending.append((a.left, b.left))
    return True


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of levels in the tree, counted breadth first."""
    if root is None:
        return 0
    level = deque([root])
    depth = 0
    while level:
        depth += 1
        for _ in range(len(level)):
            node = level.popleft()
            if node.left is not None:
                level.append(node.left)
            if node.right is not None:
                level.append(node.right)
    return depth