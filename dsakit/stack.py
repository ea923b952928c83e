"""A last-in, first-out stack."""

from __future__ import annotations

from typing import Any

_BORDER = "=================\n"


class Stack:
    """LIFO stack backed by a list."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, x: Any) -> None:
        """Put x on top."""
        self._items.append(x)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def empty(self) -> bool:
        """Return True if the stack holds no values."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def render(self) -> str:
        """Return the stack drawn top first between two borders."""
        rows = "".join(f"|\t{value}\t|\n" for value in reversed(self._items))
        return f"{_BORDER}{rows}{_BORDER}"