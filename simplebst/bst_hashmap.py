"""A key/value map stored in a binary search tree."""

from __future__ import annotations

from typing import Any, Generic, Optional, Tuple, TypeVar

from simplebst.bst import Bst

K = TypeVar("K")
V = TypeVar("V")


class BstHashmap(Generic[K, V]):
    """Map whose lookups return values rather than tree nodes."""

    def __init__(self) -> None:
        self.bst: Bst[K, V] = Bst()

    def insert(self, key: K, value: V) -> None:
        """Store ``value`` under ``key``."""
        self.bst.insert(key, value)

    def search(self, key: Any) -> Optional[V]:
        """Return the value stored under ``key``, or None."""
        node = self.bst.search(key)
        return None if node is None else node.value

    def min(self, key: Any) -> Optional[Tuple[K, V]]:
        """Return the smallest (key, value) in the subtree rooted at ``key``."""
        node = self.bst.min(self.bst.search(key))
        return None if node is None else (node.key, node.value)

    def max(self, key: Any) -> Optional[Tuple[K, V]]:
        """Return the largest (key, value) in the subtree rooted at ``key``."""
        node = self.bst.max(self.bst.search(key))
        return None if node is None else (node.key, node.value)

    def remove(self, key: Any) -> None:
        """Remove one entry for ``key``; a missing key is ignored."""
        self.bst.remove(self.bst.search(key))