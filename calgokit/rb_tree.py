"""Red-black balanced binary tree mapping ordered keys to values."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterator
from typing import Any

__all__ = ["NodeColor", "NodeSide", "RBTreeNode", "RBTree", "subtree_height"]

CompareFunc = Callable[[Any, Any], int]


class NodeColor(enum.Enum):
    """Each node in a red-black tree is either red or black."""

    RED = "red"
    BLACK = "black"


class NodeSide(enum.IntEnum):
    """The side of a child relative to its parent."""

    LEFT = 0
    RIGHT = 1


def _default_compare(key1: Any, key2: Any) -> int:
    return (key1 > key2) - (key1 < key2)


class RBTreeNode:
    """A node of an :class:`RBTree`, holding a key, a value and its links."""

    __slots__ = ("key", "value", "color", "parent", "children")

    def __init__(self, key: Any, value: Any) -> None:
        self.key = key
        self.value = value
        self.color = NodeColor.RED
        self.parent: RBTreeNode | None = None
        self.children: list[RBTreeNode | None] = [None, None]

    def child(self, side: Any) -> RBTreeNode | None:
        """Return the child on the given side, or None for no child or a bad side."""
        if isinstance(side, bool) or side not in (NodeSide.LEFT, NodeSide.RIGHT):
            return None
        return self.children[int(side)]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.key!r}, {self.value!r}, {self.color.value})"


def subtree_height(node: RBTreeNode | None) -> int:
    """Return the height of the subtree rooted at node; 0 for an empty subtree."""
    if node is None:
        return 0
    return 1 + max(subtree_height(node.children[0]), subtree_height(node.children[1]))


def _is_black(node: RBTreeNode | None) -> bool:
    return node is None or node.color is NodeColor.BLACK


def _side(node: RBTreeNode) -> int:
    assert node.parent is not None
    return NodeSide.LEFT if node.parent.children[NodeSide.LEFT] is node else NodeSide.RIGHT


def _sibling(node: RBTreeNode) -> RBTreeNode | None:
    assert node.parent is not None
    return node.parent.children[1 - _side(node)]


class RBTree:
    """A red-black tree ordered by a three-way key compare function.

    Keys that compare equal may be inserted more than once; lookups find
    one of them.
    """

    def __init__(self, compare_func: CompareFunc = _default_compare) -> None:
        self.compare_func = compare_func
        self.root: RBTreeNode | None = None
        self._count = 0

    def _replace(self, node1: RBTreeNode, node2: RBTreeNode | None) -> None:
        """Put node2 in node1's place under node1's parent."""
        if node2 is not None:
            node2.parent = node1.parent
        if node1.parent is None:
            self.root = node2
        else:
            node1.parent.children[_side(node1)] = node2

    def _rotate(self, node: RBTreeNode, direction: int) -> RBTreeNode:
        """Rotate at node; a LEFT rotation lifts the right child, and vice versa."""
        new_root = node.children[1 - direction]
        assert new_root is not None
        self._replace(node, new_root)
        node.children[1 - direction] = new_root.children[direction]
        new_root.children[direction] = node
        node.parent = new_root
        moved = node.children[1 - direction]
        if moved is not None:
            moved.parent = node
        return new_root

    def _insert_fixup(self, node: RBTreeNode) -> None:
        while True:
            parent = node.parent
            if parent is None:
                node.color = NodeColor.BLACK
                return
            if parent.color is NodeColor.BLACK:
                return
            grandparent = parent.parent
            assert grandparent is not None
            uncle = _sibling(parent)
            if uncle is not None and uncle.color is NodeColor.RED:
                parent.color = NodeColor.BLACK
                uncle.color = NodeColor.BLACK
                grandparent.color = NodeColor.RED
                node = grandparent
                continue
            side = _side(node)
            if side != _side(parent):
                self._rotate(parent, 1 - side)
                node = parent
            parent = node.parent
            assert parent is not None
            grandparent = parent.parent
            assert grandparent is not None
            self._rotate(grandparent, 1 - _side(node))
            parent.color = NodeColor.BLACK
            grandparent.color = NodeColor.RED
            return

    def insert(self, key: Any, value: Any) -> RBTreeNode:
        """Insert a key-value pair and return the new node."""
        node = RBTreeNode(key, value)
        parent: RBTreeNode | None = None
        rover = self.root
        side = NodeSide.LEFT
        while rover is not None:
            parent = rover
            side = NodeSide.LEFT if self.compare_func(key, rover.key) < 0 else NodeSide.RIGHT
            rover = rover.children[side]
        node.parent = parent
        if parent is None:
            self.root = node
        else:
            parent.children[side] = node
        self._insert_fixup(node)
        self._count += 1
        return node

    def lookup_node(self, key: Any) -> RBTreeNode | None:
        """Return the node holding key, or None if there is none."""
        node = self.root
        while node is not None:
            diff = self.compare_func(key, node.key)
            if diff == 0:
                return node
            node = node.children[NodeSide.LEFT if diff < 0 else NodeSide.RIGHT]
        return None

    def lookup(self, key: Any, default: Any = None) -> Any:
        """Return the value stored under key, or default if there is none."""
        node = self.lookup_node(key)
        return default if node is None else node.value

    def _remove_fixup(self, node: RBTreeNode | None, parent: RBTreeNode | None) -> None:
        while node is not self.root and _is_black(node):
            assert parent is not None
            side = NodeSide.LEFT if parent.children[NodeSide.LEFT] is node else NodeSide.RIGHT
            other = 1 - side
            sibling = parent.children[other]
            assert sibling is not None
            if sibling.color is NodeColor.RED:
                sibling.color = NodeColor.BLACK
                parent.color = NodeColor.RED
                self._rotate(parent, side)
                sibling = parent.children[other]
                assert sibling is not None
            if _is_black(sibling.children[0]) and _is_black(sibling.children[1]):
                sibling.color = NodeColor.RED
                node = parent
                parent = node.parent
                continue
            if _is_black(sibling.children[other]):
                near = sibling.children[side]
                assert near is not None
                near.color = NodeColor.BLACK
                sibling.color = NodeColor.RED
                self._rotate(sibling, other)
                sibling = parent.children[other]
                assert sibling is not None
            sibling.color = parent.color
            parent.color = NodeColor.BLACK
            far = sibling.children[other]
            assert far is not None
            far.color = NodeColor.BLACK
            self._rotate(parent, side)
            node = self.root
            break
        if node is not None:
            node.color = NodeColor.BLACK

    def remove_node(self, node: RBTreeNode) -> None:
        """Remove a node of this tree, keeping the tree balanced."""
        left, right = node.children
        removed_color = node.color
        if left is None or right is None:
            child = right if left is None else left
            child_parent = node.parent
            self._replace(node, child)
        else:
            successor = right
            while successor.children[NodeSide.LEFT] is not None:
                successor = successor.children[NodeSide.LEFT]
            removed_color = successor.color
            child = successor.children[NodeSide.RIGHT]
            if successor.parent is node:
                child_parent = successor
            else:
                child_parent = successor.parent
                self._replace(successor, child)
                successor.children[NodeSide.RIGHT] = right
                right.parent = successor
            self._replace(node, successor)
            successor.children[NodeSide.LEFT] = left
            left.parent = successor
            successor.color = node.color
        if removed_color is NodeColor.BLACK:
            self._remove_fixup(child, child_parent)
        node.parent = None
        node.children = [None, None]
        self._count -= 1

    def remove(self, key: Any) -> bool:
        """Remove the node with the given key; return True if one was removed."""
        node = self.lookup_node(key)
        if node is None:
            return False
        self.remove_node(node)
        return True

    def _nodes(self) -> Iterator[RBTreeNode]:
        stack: list[RBTreeNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.children[NodeSide.LEFT]
            node = stack.pop()
            yield node
            node = node.children[NodeSide.RIGHT]

    def to_list(self) -> list[Any]:
        """Return all keys in order."""
        return [node.key for node in self._nodes()]

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        """Yield the keys in order."""
        for node in self._nodes():
            yield node.key

    def __repr__(self) -> str:
        return f"{type(self).__name__}(entries={self._count})"