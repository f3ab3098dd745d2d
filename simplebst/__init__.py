"""A binary search tree and a key-value map built on it."""

__version__ = "0.1.2"
__all__ = ["bst", "bst_hashmap"]