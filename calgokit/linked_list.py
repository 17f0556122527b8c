"""Doubly-linked list with entry handles and a removal-safe iterator."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

__all__ = ["ListEntry", "ListIterator", "LinkedList"]

EqualFunc = Callable[[Any, Any], Any]
CompareFunc = Callable[[Any, Any], int]


class ListEntry:
    """One entry of a :class:`LinkedList`, holding a value and its neighbours."""

    __slots__ = ("data", "_prev", "_next", "_owner")

    def __init__(self, data: Any, owner: LinkedList | None = None) -> None:
        self.data = data
        self._prev: ListEntry | None = None
        self._next: ListEntry | None = None
        self._owner = owner

    @property
    def prev(self) -> ListEntry | None:
        """The previous entry, or None if this is the first."""
        return self._prev

    @property
    def next(self) -> ListEntry | None:
        """The next entry, or None if this is the last."""
        return self._next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.data!r})"


class ListIterator:
    """Iterator over a list's values that allows removing the current value."""

    def __init__(self, linked_list: LinkedList) -> None:
        self._list = linked_list
        self._prev: ListEntry | None = None
        self._current: ListEntry | None = None

    def _link(self) -> ListEntry | None:
        """The entry that follows the last position reached."""
        if self._prev is None:
            return self._list._head
        return self._prev._next

    def _current_is_live(self) -> bool:
        return self._current is not None and self._current is self._link()

    def has_more(self) -> bool:
        """Return True if another value can be read."""
        if not self._current_is_live():
            return self._link() is not None
        return self._current._next is not None

    def __iter__(self) -> ListIterator:
        return self

    def __next__(self) -> Any:
        if not self._current_is_live():
            self._current = self._link()
        else:
            self._prev = self._current
            self._current = self._current._next
        if self._current is None:
            raise StopIteration
        return self._current.data

    def remove(self) -> None:
        """Remove the value last returned; does nothing if there is none."""
        if not self._current_is_live():
            return
        self._list._unlink(self._current)
        self._current = None


class LinkedList:
    """A doubly-linked list of values."""

    def __init__(self, iterable: Iterable[Any] | None = None) -> None:
        self._head: ListEntry | None = None
        self._tail: ListEntry | None = None
        self._length = 0
        if iterable is not None:
            for value in iterable:
                self.append(value)

    def _unlink(self, entry: ListEntry) -> None:
        if entry._prev is None:
            self._head = entry._next
        else:
            entry._prev._next = entry._next
        if entry._next is None:
            self._tail = entry._prev
        else:
            entry._next._prev = entry._prev
        entry._prev = None
        entry._next = None
        entry._owner = None
        self._length -= 1

    def _entries(self) -> Iterator[ListEntry]:
        entry = self._head
        while entry is not None:
            following = entry._next
            yield entry
            entry = following

    def prepend(self, data: Any) -> ListEntry:
        """Add a value to the start of the list and return its entry."""
        entry = ListEntry(data, self)
        entry._next = self._head
        if self._head is not None:
            self._head._prev = entry
        else:
            self._tail = entry
        self._head = entry
        self._length += 1
        return entry

    def append(self, data: Any) -> ListEntry:
        """Add a value to the end of the list and return its entry."""
        entry = ListEntry(data, self)
        entry._prev = self._tail
        if self._tail is not None:
            self._tail._next = entry
        else:
            self._head = entry
        self._tail = entry
        self._length += 1
        return entry

    @property
    def head(self) -> ListEntry | None:
        """The first entry, or None if the list is empty."""
        return self._head

    def nth_entry(self, n: int) -> ListEntry:
        """Return the entry at index n; IndexError if out of range."""
        if n < 0 or n >= self._length:
            raise IndexError("list index out of range")
        for index, entry in enumerate(self._entries()):
            if index == n:
                return entry
        raise IndexError("list index out of range")

    def nth_data(self, n: int) -> Any:
        """Return the value at index n; IndexError if out of range."""
        return self.nth_entry(n).data

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        return self.iterator()

    def iterator(self) -> ListIterator:
        """Return an iterator that supports removing the current value."""
        return ListIterator(self)

    def to_list(self) -> list[Any]:
        """Return the values in order as a Python list."""
        return [entry.data for entry in self._entries()]

    def remove_entry(self, entry: ListEntry) -> None:
        """Remove an entry; ValueError if it does not belong to this list."""
        if entry is None or entry._owner is not self:
            raise ValueError("entry is not in this list")
        self._unlink(entry)

    def remove_data(self, equal_func: EqualFunc, data: Any) -> int:
        """Remove every value equal to data; return how many were removed."""
        removed = 0
        for entry in list(self._entries()):
            if equal_func(entry.data, data):
                self._unlink(entry)
                removed += 1
        return removed

    def sort(self, compare_func: CompareFunc) -> None:
        """Sort the list in place with a three-way compare function.

        Uses a quicksort with the first entry as pivot; entries are kept,
        only their order changes.
        """
        ordered: list[ListEntry] = []
        work: list[tuple[bool, Any]] = [(True, list(self._entries()))]
        while work:
            is_group, item = work.pop()
            if not is_group:
                ordered.append(item)
                continue
            if len(item) < 2:
                ordered.extend(item)
                continue
            pivot, rest = item[0], item[1:]
            less: list[ListEntry] = []
            more: list[ListEntry] = []
            for entry in rest:
                (less if compare_func(entry.data, pivot.data) < 0 else more).append(entry)
            # Each partition is built by pushing onto its front.
            less.reverse()
            more.reverse()
            work.append((True, more))
            work.append((False, pivot))
            work.append((True, less))
        self._relink(ordered)

    def _relink(self, ordered: list[ListEntry]) -> None:
        previous: ListEntry | None = None
        for entry in ordered:
            entry._prev = previous
            entry._next = None
            if previous is not None:
                previous._next = entry
            previous = entry
        self._head = ordered[0] if ordered else None
        self._tail = previous

    def find_data(self, equal_func: EqualFunc, data: Any) -> ListEntry | None:
        """Return the first entry whose value equals data, or None."""
        for entry in self._entries():
            if equal_func(entry.data, data):
                return entry
        return None

    def clear(self) -> None:
        """Remove every entry."""
        for entry in self._entries():
            entry._prev = None
            entry._next = None
            entry._owner = None
        self._head = None
        self._tail = None
        self._length = 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"