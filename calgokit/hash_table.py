"""Hash table with chained buckets and user-supplied hash and equality functions."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator
from typing import Any

__all__ = ["HashTable"]

# Good hash table primes: each roughly double the last and far from powers of two.
_PRIMES = (
    193, 389, 769, 1543, 3079, 6151, 12289, 24593, 49157, 98317,
    196613, 393241, 786433, 1572869, 3145739, 6291469,
    12582917, 25165843, 50331653, 100663319, 201326611,
    402653189, 805306457, 1610612741,
)

_MISSING = object()

HashFunc = Callable[[Any], int]
EqualFunc = Callable[[Any, Any], Any]
FreeFunc = Callable[[Any], Any]


class _Entry:
    __slots__ = ("key", "value")

    def __init__(self, key: Any, value: Any) -> None:
        self.key = key
        self.value = value


class HashTable:
    """A mapping from keys to values using caller-supplied hash and equality.

    Iterating over the table yields its values.  The value most recently
    yielded may be removed during iteration without disturbing it.
    """

    def __init__(
        self,
        hash_func: HashFunc = hash,
        equal_func: EqualFunc = operator.eq,
    ) -> None:
        self._hash_func = hash_func
        self._equal_func = equal_func
        self._key_free_func: FreeFunc | None = None
        self._value_free_func: FreeFunc | None = None
        self._entries = 0
        self._prime_index = 0
        self._table: list[list[_Entry]] = self._allocate_table()

    def _allocate_table(self) -> list[list[_Entry]]:
        if self._prime_index < len(_PRIMES):
            size = _PRIMES[self._prime_index]
        else:
            size = self._entries * 10
        return [[] for _ in range(size)]

    def _index(self, key: Any) -> int:
        return self._hash_func(key) % len(self._table)

    def _release(self, entry: _Entry) -> None:
        if self._key_free_func is not None:
            self._key_free_func(entry.key)
        if self._value_free_func is not None:
            self._value_free_func(entry.value)

    def _enlarge(self) -> None:
        old_table = self._table
        self._prime_index += 1
        self._table = self._allocate_table()
        for chain in old_table:
            for entry in chain:
                self._table[self._index(entry.key)].append(entry)

    def _find(self, key: Any) -> _Entry | None:
        for entry in self._table[self._index(key)]:
            if self._equal_func(key, entry.key):
                return entry
        return None

    def register_free_functions(
        self,
        key_free_func: FreeFunc | None,
        value_free_func: FreeFunc | None,
    ) -> None:
        """Set callbacks invoked on keys and values when entries are discarded."""
        self._key_free_func = key_free_func
        self._value_free_func = value_free_func

    def insert(self, key: Any, value: Any) -> None:
        """Insert a value, replacing any existing entry with an equal key."""
        if (self._entries * 3) // len(self._table) > 0:
            self._enlarge()

        chain = self._table[self._index(key)]
        for entry in chain:
            if self._equal_func(entry.key, key):
                if self._value_free_func is not None:
                    self._value_free_func(entry.value)
                if self._key_free_func is not None:
                    self._key_free_func(entry.key)
                entry.key = key
                entry.value = value
                return

        chain.append(_Entry(key, value))
        self._entries += 1

    def lookup(self, key: Any, default: Any = None) -> Any:
        """Return the value stored under key, or default if there is none."""
        entry = self._find(key)
        return default if entry is None else entry.value

    def __getitem__(self, key: Any) -> Any:
        value = self.lookup(key, _MISSING)
        if value is _MISSING:
            raise KeyError(key)
        return value

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def remove(self, key: Any) -> bool:
        """Remove the entry with the given key; return True if one was removed."""
        chain = self._table[self._index(key)]
        for position, entry in enumerate(chain):
            if self._equal_func(key, entry.key):
                del chain[position]
                self._release(entry)
                self._entries -= 1
                return True
        return False

    def __len__(self) -> int:
        return self._entries

    def __iter__(self) -> Iterator[Any]:
        """Yield every value in the table."""
        for chain in self._table:
            for entry in list(chain):
                yield entry.value

    def close(self) -> None:
        """Discard every entry, invoking the registered free functions."""
        for chain in self._table:
            for entry in chain:
                self._release(entry)
            chain.clear()
        self._entries = 0

    def __enter__(self) -> HashTable:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(entries={self._entries})"