"""A first-in first-out queue and a last-in first-out stack."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


class Queue:
    """FIFO queue; iteration runs from front to rear."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, item: Any) -> None:
        """Add ``item`` at the rear."""
        self._items.append(item)

    def dequeue(self) -> Any:
        """Remove and return the front item; raise ``IndexError`` when empty."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def describe(self) -> str:
        """Text listing of the queue from front to rear."""
        if not self._items:
            return "The queue is empty .\n"
        body = "".join(f" {item} -->" for item in self._items)
        return f"The queue is :\n{body}NULL\n\n"

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"


class Stack:
    """LIFO stack; iteration runs from top to bottom."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, item: Any) -> None:
        """Put ``item`` on top."""
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item; raise ``IndexError`` when empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return reversed(self._items)

    def describe(self) -> str:
        """Text listing of the stack from top to bottom."""
        if not self._items:
            return "The stack is empty. \n"
        body = "".join(f"{item} --> " for item in self)
        return f"The stack is :\n{body}NULL\n\n"

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"