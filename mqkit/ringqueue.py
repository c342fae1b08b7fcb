"""A first-in first-out queue with indexed access."""

from collections import deque
from typing import Any, Iterator


class Queue:
    """FIFO queue supporting peeking and indexing from either end.

    Not thread-safe.
    """

    def __init__(self) -> None:
        self._items: deque = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def add(self, elem: Any) -> None:
        """Append ``elem`` to the end of the queue."""
        self._items.append(elem)

    def peek(self) -> Any:
        """Return the element at the head without removing it."""
        if not self._items:
            raise IndexError("peek on empty queue")
        return self._items[0]

    def get(self, index: int) -> Any:
        """Return the element at ``index``; negative indices count from the end."""
        count = len(self._items)
        position = index + count if index < 0 else index
        if not 0 <= position < count:
            raise IndexError("queue index out of range")
        return self._items[position]

    def remove(self) -> Any:
        """Remove and return the element at the head."""
        if not self._items:
            raise IndexError("remove from empty queue")
        return self._items.popleft()