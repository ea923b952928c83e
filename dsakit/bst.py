"""An unbalanced binary search tree."""

from __future__ import annotations

from typing import Any, Optional

from dsakit.tree import TreeNode

_ROOT_INDENT = "\t\t"
_LEFT_INDENT = "\t"
_RIGHT_INDENT = "\t\t\t"


class BST:
    """Binary search tree; equal values are placed in the right subtree."""

    def __init__(self, root: Optional[TreeNode] = None) -> None:
        self.root = root

    def search(self, target: Any) -> bool:
        """Return True if target is stored in the tree."""
        node = self.root
        while node is not None:
            if node.val == target:
                return True
            node = node.left if target < node.val else node.right
        return False

    def __contains__(self, target: Any) -> bool:
        return self.search(target)

    def insert(self, value: Any) -> None:
        """Insert value as a new leaf."""
        new_node = TreeNode(value)
        if self.root is None:
            self.root = new_node
            return
        node = self.root
        while True:
            if value < node.val:
                if node.left is None:
                    node.left = new_node
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new_node
                    return
                node = node.right

    def render(self) -> str:
        """Return the tree in pre-order, one node per line.

        The root is indented by two tabs, left children by one and right
        children by three.
        """
        if self.root is None:
            return ""
        lines = []
        stack = [(self.root, _ROOT_INDENT)]
        while stack:
            node, indent = stack.pop()
            lines.append(f"{indent}{node.val}\n")
            if node.right is not None:
                stack.append((node.right, _RIGHT_INDENT))
            if node.left is not None:
                stack.append((node.left, _LEFT_INDENT))
        return "".join(lines)