# calgokit

Classic in-memory data structures whose hashing and ordering are supplied
by the caller, plus a few ready-made hash and comparison functions.

## Modules

### `calgokit.hash_table`

`HashTable(hash_func=hash, equal_func=operator.eq)` is a chained hash table.
It starts with 193 buckets and moves to the next larger prime table size
whenever an insert finds it a third full.

- `insert(key, value)` adds an entry, replacing the entry with an equal key.
- `lookup(key, default=None)` returns the stored value or `default`;
  `table[key]` raises `KeyError` instead; `key in table` tests membership.
- `remove(key)` returns `True` if an entry was removed, else `False`.
- `len(table)` is the number of entries; iterating yields the **values**.
  The value just yielded may be removed while iterating.
- `register_free_functions(key_free_func, value_free_func)` sets callbacks
  (either may be `None`) called with the old key and value when an entry is
  replaced, removed, or discarded by `close()`.
- `close()` discards every entry; the table is also a context manager that
  calls `close()` on exit.

### `calgokit.linked_list`

`LinkedList(iterable=None)` is a doubly-linked list of `ListEntry` objects.
Each entry has `data`, `prev` and `next`.

- `append(data)` / `prepend(data)` return the new `ListEntry`; `head` is the
  first entry or `None`.
- `nth_entry(n)` / `nth_data(n)` raise `IndexError` when out of range.
- `remove_entry(entry)` raises `ValueError` if the entry is not in this list.
- `remove_data(equal_func, data)` removes every matching value and returns
  the count; `find_data(equal_func, data)` returns the first matching entry
  or `None`.
- `sort(compare_func)` sorts in place with a three-way compare function.
- `to_list()`, `len()`, `clear()`.
- Iterating (or `iterator()`) gives a `ListIterator` with `has_more()` and
  `remove()`, which removes the value last returned without breaking the
  iteration.

### `calgokit.queue`

`Queue(iterable=None)` is a double-ended queue with `push_head`,
`push_tail`, `pop_head`, `pop_tail`, `peek_head`, `peek_tail` and
`is_empty()`. Popping or peeking an empty queue raises `IndexError`.
Iteration runs from head to tail.

### `calgokit.rb_tree`

`RBTree(compare_func)` is a red-black tree ordered by a three-way key
compare function (by default the natural ordering of the keys).

- `insert(key, value)` returns the new `RBTreeNode`. Keys that compare
  equal may be inserted more than once.
- `lookup_node(key)` returns a node or `None`; `lookup(key, default=None)`
  returns its value or `default`.
- `remove(key)` returns `True` if a node was removed; `remove_node(node)`
  removes a given node. The tree stays balanced.
- `root`, `len(tree)`, `to_list()` (keys in order) and iteration over keys
  in order.
- `RBTreeNode` has `key`, `value`, `color` (`NodeColor.RED` or
  `NodeColor.BLACK`), `parent`, and `child(side)` for `NodeSide.LEFT` or
  `NodeSide.RIGHT` (any other side gives `None`).
- `subtree_height(node)` returns the height of a subtree, `0` for `None`.

### `calgokit.hashing`

Hash functions returning unsigned 32-bit values:

- `int_hash(value)` – the integer reduced to 32 bits.
- `pointer_hash(obj)` – based on the object's identity, not its value.
- `string_hash(string)` – djb2 over the bytes (text is encoded as UTF-8).
- `string_nocase_hash(string)` – djb2 ignoring the case of ASCII letters.

### `calgokit.compare_string`

- `string_equal(a, b)` and `string_compare(a, b)` (returns -1, 0 or 1).
- `string_nocase_equal(a, b)` and `string_nocase_compare(a, b)` ignore the
  case of ASCII letters only; a prefix sorts before the longer string.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from calgokit.hash_table import HashTable
from calgokit.hashing import string_hash
from calgokit.compare_string import string_equal

table = HashTable(string_hash, string_equal)
table.insert("apple", 1)
table.insert("pear", 2)
print(table.lookup("apple"))       # 1
print("pear" in table, len(table)) # True 2
table.remove("pear")
```

```python
from calgokit.queue import Queue

queue = Queue([1, 2, 3])
queue.push_head(0)
print(queue.pop_tail())   # 3
print(queue.peek_head())  # 0
```

```python
from calgokit.linked_list import LinkedList
from calgokit.compare_string import string_compare

items = LinkedList(["pear", "apple", "fig"])
items.sort(string_compare)
print(items.to_list())    # ['apple', 'fig', 'pear']
```

```python
from calgokit.rb_tree import RBTree

tree = RBTree()
for n in (5, 2, 8):
    tree.insert(n, str(n))
print(tree.lookup(2))     # '2'
print(tree.to_list())     # [2, 5, 8]
```

## What it does not do

Everything lives in memory: there is no persistence, no command-line tool,
and none of the structures is safe for concurrent use from several threads.