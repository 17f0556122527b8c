"""Double-ended queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any

__all__ = ["Queue"]


class Queue:
    """A double-ended queue: values can be added and removed at either end."""

    def __init__(self, iterable: Iterable[Any] | None = None) -> None:
        self._items: deque[Any] = deque(iterable if iterable is not None else ())

    def push_head(self, value: Any) -> None:
        """Add a value to the head of the queue."""
        self._items.appendleft(value)

    def pop_head(self) -> Any:
        """Remove and return the value at the head; IndexError if empty."""
        if not self._items:
            raise IndexError("pop from an empty queue")
        return self._items.popleft()

    def peek_head(self) -> Any:
        """Return the value at the head without removing it; IndexError if empty."""
        if not self._items:
            raise IndexError("peek at an empty queue")
        return self._items[0]

    def push_tail(self, value: Any) -> None:
        """Add a value to the tail of the queue."""
        self._items.append(value)

    def pop_tail(self) -> Any:
        """Remove and return the value at the tail; IndexError if empty."""
        if not self._items:
            raise IndexError("pop from an empty queue")
        return self._items.pop()

    def peek_tail(self) -> Any:
        """Return the value at the tail without removing it; IndexError if empty."""
        if not self._items:
            raise IndexError("peek at an empty queue")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return True if the queue holds no values."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from head to tail."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"