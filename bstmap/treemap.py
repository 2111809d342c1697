"""An ordered map built on an unbalanced binary search tree.

Keys are ordered by a user-supplied ``lower_than`` predicate; two keys are
considered equal when neither is lower than the other.  The map keeps a
``current`` cursor that search, insertion and iteration update.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional

LowerThan = Callable[[Any, Any], Any]


@dataclass
class Pair:
    """A key together with the value stored under it."""

    key: Any
    value: Any


@dataclass(eq=False)
class TreeNode:
    """A node of the search tree holding one pair."""

    pair: Pair
    left: Optional["TreeNode"] = field(default=None, repr=False)
    right: Optional["TreeNode"] = field(default=None, repr=False)
    parent: Optional["TreeNode"] = field(default=None, repr=False)

    @classmethod
    def create(cls, key: Any, value: Any) -> "TreeNode":
        """Build a detached node for ``key`` and ``value``."""
        return cls(Pair(key, value))


def minimum(node: TreeNode) -> TreeNode:
    """Return the leftmost node of the subtree rooted at ``node``."""
    if node is None:
        raise ValueError("minimum() needs a node")
    while node.left is not None:
        node = node.left
    return node


class TreeMap:
    """Ordered map whose ordering is given by a ``lower_than`` predicate."""

    def __init__(self, lower_than: LowerThan) -> None:
        self.root: Optional[TreeNode] = None
        self.current: Optional[TreeNode] = None
        self.lower_than = lower_than

    def _is_equal(self, key1: Any, key2: Any) -> bool:
        return not self.lower_than(key1, key2) and not self.lower_than(key2, key1)

    def insert(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key``; an existing key is left untouched."""
        if self.root is None:
            self.root = TreeNode.create(key, value)
            self.current = self.root
            return

        node = self.root
        while True:
            if self._is_equal(key, node.pair.key):
                return
            if self.lower_than(key, node.pair.key):
                if node.left is None:
                    node.left = TreeNode.create(key, value)
                    node.left.parent = node
                    self.current = node.left
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = TreeNode.create(key, value)
                    node.right.parent = node
                    self.current = node.right
                    return
                node = node.right

    def _replace_in_parent(self, node: TreeNode, child: Optional[TreeNode]) -> None:
        parent = node.parent
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        if child is not None:
            child.parent = parent

    def remove_node(self, node: TreeNode) -> None:
        """Unlink ``node`` from the tree, keeping the search order."""
        if node.left is not None and node.right is not None:
            successor = minimum(node.right)
            node.pair = successor.pair
            self.remove_node(successor)
            return
        child = node.left if node.left is not None else node.right
        self._replace_in_parent(node, child)

    def erase(self, key: Any) -> None:
        """Remove the entry for ``key`` if it is present."""
        if self.root is None:
            return
        if self.search(key) is None:
            return
        self.remove_node(self.current)

    def search(self, key: Any) -> Optional[Pair]:
        """Return the pair for ``key`` and move the cursor to it, or None."""
        node = self.root
        while node is not None:
            if self._is_equal(key, node.pair.key):
                self.current = node
                return node.pair
            node = node.left if self.lower_than(key, node.pair.key) else node.right
        return None

    def upper_bound(self, key: Any) -> Optional[Pair]:
        """Return the pair with the smallest key not lower than ``key``, or None."""
        node = self.root
        result: Optional[TreeNode] = None
        while node is not None:
            if self._is_equal(key, node.pair.key):
                self.current = node
                return node.pair
            if self.lower_than(node.pair.key, key):
                node = node.right
            else:
                result = node
                node = node.left
        if result is None:
            return None
        self.current = result
        return result.pair

    def first(self) -> Optional[Pair]:
        """Move the cursor to the smallest key and return its pair."""
        if self.root is None:
            self.current = None
            return None
        self.current = minimum(self.root)
        return self.current.pair

    @staticmethod
    def _successor(node: TreeNode) -> Optional[TreeNode]:
        if node.right is not None:
            return minimum(node.right)
        while node.parent is not None and node.parent.right is node:
            node = node.parent
        return node.parent

    def next(self) -> Optional[Pair]:
        """Advance the cursor to the next key in order and return its pair."""
        if self.current is None:
            return None
        self.current = self._successor(self.current)
        return None if self.current is None else self.current.pair

    def __iter__(self) -> Iterator[Pair]:
        """Yield the pairs in key order without moving the cursor."""
        if self.root is None:
            return
        node: Optional[TreeNode] = minimum(self.root)
        while node is not None:
            yield node.pair
            node = self._successor(node)