# simplebst

A small, dependency-free binary search tree for Python, together with a
map-style wrapper that stores values under ordered keys.

## Installation

```
pip install simplebst
```

## The map

`BstHashmap` (in `simplebst.bst_hashmap`) gives you a map interface over the
tree. Keys only need to support `<` against each other.

```python
from simplebst.bst_hashmap import BstHashmap

m = BstHashmap()
m.insert(5, "five")
m.insert(3, "three")
m.insert(7, "seven")
m.insert(6, "six")
m.insert(8, "eight")

m.search(7)      # "seven"
m.search(10)     # None

m.min(5)         # (3, "three")  smallest entry in the subtree rooted at 5
m.max(5)         # (8, "eight")  largest entry in the subtree rooted at 5

m.remove(7)
m.search(7)      # None
```

`min` and `max` take the key of a subtree root and return that subtree's
smallest or largest `(key, value)` pair. If the key is not present they return
`None`. Removing a key that is not present does nothing.

Inserting a key that is already present does not replace the old entry: the new
entry is placed in the right subtree of the existing one, and `search` finds the
one nearer the root. `remove` takes out one entry at a time.

The underlying tree is available as the map's `bst` attribute.

## The tree

`Bst` (in `simplebst.bst`) works on the nodes themselves. Each `Node` has a
`key`, a `value`, and `parent`, `left` and `right` links. The tree's top node
is in `root`, which is `None` for an empty tree.

```python
from simplebst.bst import Bst

tree = Bst()
for key in (3, 4, 6, 7, 2):
    tree.insert(key, f"val{key}")

node = tree.search(6)
node.key                    # 6
tree.min(node).key          # 6
tree.max(node).key          # 7
tree.root.key               # 3

tree.remove(tree.search(3))
tree.search(3)              # None
```

`search` returns the node with the given key or `None`. `min` and `max` take a
node, or `None`, and return the leftmost or rightmost node under it. `remove`
takes a node, or `None`, and unlinks it from the tree. A node with two children
is replaced by the smallest node of its right subtree.

## Limitations

The tree is not self-balancing: inserting keys in sorted order produces a
chain, and operations then take time proportional to the number of entries.
There is no iteration, length or in-order traversal; entries are reached
through `search`, `min` and `max` only.

## Running the tests

```
pip install -e ".[test]"
pytest
```