"""Hash table, doubly-linked list, double-ended queue and red-black tree, with hash and string comparison helpers."""

__version__ = "0.1.0"

__all__ = [
    "compare_string",
    "hashing",
    "queue",
    "hash_table",
    "linked_list",
    "rb_tree",
]