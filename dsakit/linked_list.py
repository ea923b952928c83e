"""Singly and doubly linked list nodes and list algorithms."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class SinglyNode:
    """A node of a singly linked list."""

    val: Any = 0
    next: Optional[SinglyNode] = None

    def __iter__(self) -> Iterator[Any]:
        node: Optional[SinglyNode] = self
        while node is not None:
            yield node.val
            node = node.next

    def __str__(self) -> str:
        return str(self.val)

    def render(self) -> str:
        """Return the list from this node on, as a titled arrow chain."""
        chain = "".join(f"{value}->" for value in self)
        return f"Single Linked list\n{chain}null\n"

    def search(self, x: Any) -> bool:
        """Return True if x occurs from this node onward."""
        return any(value == x for value in self)


@dataclass(eq=False)
class DoubleNode:
    """A node of a doubly linked list."""

    val: Any = 0
    next: Optional[DoubleNode] = None
    prev: Optional[DoubleNode] = None

    def __iter__(self) -> Iterator[Any]:
        node: Optional[DoubleNode] = self
        while node is not None:
            yield node.val
            node = node.next

    def __str__(self) -> str:
        return str(self.val)

    def render(self) -> str:
        """Return the list from this node on, as a titled arrow chain."""
        chain = "".join(f"{value}<->" for value in self)
        return f"Double Linked list\n{chain}null\n"


def build_singly(values: Iterable[Any]) -> Optional[SinglyNode]:
    """Link the values into a singly linked list and return its head."""
    head: Optional[SinglyNode] = None
    for value in reversed(list(values)):
        head = SinglyNode(value, head)
    return head


def build_double(values: Iterable[Any]) -> Optional[DoubleNode]:
    """Link the values into a doubly linked list and return its head."""
    head: Optional[DoubleNode] = None
    for value in reversed(list(values)):
        node = DoubleNode(value, head)
        if head is not None:
            head.prev = node
        head = node
    return head


def remove_elements(head: Optional[SinglyNode], val: Any) -> Optional[SinglyNode]:
    """Unlink every node holding val and return the new head."""
    dummy = SinglyNode(0, head)
    cur = dummy
    while cur.next is not None:
        if cur.next.val == val:
            cur.next = cur.next.next
        else:
            cur = cur.next
    return dummy.next


def reverse_list(head: Optional[SinglyNode]) -> Optional[SinglyNode]:
    """Reverse the list in place and return the new head."""
    previous: Optional[SinglyNode] = None
    while head is not None:
        following = head.next
        head.next = previous
        previous = head
        head = following
    return previous


def middle_node(head: Optional[SinglyNode]) -> SinglyNode:
    """Return the middle node; with an even length, the second of the two middles."""
    if head is None:
        raise ValueError("middle_node requires a non-empty list")
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[assignment]
        fast = fast.next.next
    return slow