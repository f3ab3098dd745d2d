"""An unbalanced binary search tree with parent links."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


@dataclass(eq=False)
class Node(Generic[K, V]):
    """A tree node holding a key, its value and links to its neighbours."""

    key: K
    value: V
    parent: Optional["Node[K, V]"] = field(default=None, repr=False)
    left: Optional["Node[K, V]"] = field(default=None, repr=False)
    right: Optional["Node[K, V]"] = field(default=None, repr=False)


class Bst(Generic[K, V]):
    """Binary search tree; equal keys are placed in the right subtree."""

    def __init__(self) -> None:
        self.root: Optional[Node[K, V]] = None

    def insert(self, key: K, value: V) -> None:
        """Add a new node for ``key``; existing nodes with that key are kept."""
        node: Node[K, V] = Node(key, value)
        if self.root is None:
            self.root = node
            return

        parent = self.root
        while True:
            child = parent.left if key < parent.key else parent.right
            if child is None:
                break
            parent = child

        if key < parent.key:
            parent.left = node
        else:
            parent.right = node
        node.parent = parent

    def search(self, key: Any) -> Optional[Node[K, V]]:
        """Return the first node found with ``key``, or None."""
        node = self.root
        while node is not None:
            if node.key < key:
                node = node.right
            elif key < node.key:
                node = node.left
            else:
                return node
        return None

    def min(self, node: Optional[Node[K, V]]) -> Optional[Node[K, V]]:
        """Return the node with the smallest key in the subtree of ``node``."""
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node

    def max(self, node: Optional[Node[K, V]]) -> Optional[Node[K, V]]:
        """Return the node with the largest key in the subtree of ``node``."""
        if node is None:
            return None
        while node.right is not None:
            node = node.right
        return node

    def _transplant(self, u: Node[K, V], v: Optional[Node[K, V]]) -> None:
        """Put the subtree ``v`` where the subtree ``u`` was."""
        parent = u.parent
        if parent is None:
            self.root = v
        elif parent.left is u:
            parent.left = v
        else:
            parent.right = v
        if v is not None:
            v.parent = parent

    def remove(self, node: Optional[Node[K, V]]) -> None:
        """Unlink ``node`` from the tree; None is ignored."""
        if node is None:
            return
        left, right = node.left, node.right

        if left is None:
            self._transplant(node, right)
        elif right is None:
            self._transplant(node, left)
        else:
            successor = self.min(right)
            assert successor is not None
            if successor is not right:
                self._transplant(successor, successor.right)
                successor.right = right
                right.parent = successor
            self._transplant(node, successor)
            successor.left = left
            left.parent = successor