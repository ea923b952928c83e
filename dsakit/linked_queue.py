"""A first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any, Optional


class QueueEmptyError(IndexError):
    """Raised when the front or back of an empty queue is requested."""


class LinkedQueue:
    """FIFO queue: values are pushed at the back and popped from the front."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def push(self, x: Any) -> None:
        """Enqueue x at the back."""
        self._items.append(x)

    def back(self) -> Any:
        """Return the most recently pushed value."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items[-1]

    def pop(self) -> Optional[Any]:
        """Dequeue the front value and return it; an empty queue is left as is."""
        if not self._items:
            return None
        return self._items.popleft()

    def front(self) -> Any:
        """Return the value that will be popped next."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items[0]

    def empty(self) -> bool:
        """Return True if the queue holds no values."""
        return not self._items

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def render(self) -> str:
        """Return the values front to back as a bracketed list and a blank line."""
        body = ", ".join(str(value) for value in self._items)
        return f"[{body}]\n\n"