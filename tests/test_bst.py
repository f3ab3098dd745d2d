import pytest

from simplebst.bst import Bst


def _in_order(node):
    if node is None:
        return []
    return _in_order(node.left) + [node.key] + _in_order(node.right)


def _links_consistent(node, parent=None):
    if node is None:
        return True
    if node.parent is not parent:
        return False
    return _links_consistent(node.left, node) and _links_consistent(node.right, node)


def _build(keys):
    bst = Bst()
    for key in keys:
        bst.insert(key, f"val{key}")
    return bst


def test_basic_bst_operations():
    bst = _build([3, 4, 6, 7, 2])
    node = bst.search(6)
    assert node is not None
    assert node.key == 6
    assert bst.min(node).key == 6
    assert bst.max(node).key == 7
    assert bst.root.key == 3


def test_remove_leaf_node():
    bst = _build([5, 3, 7])
    node = bst.search(3)
    assert node is not None
    bst.remove(node)
    assert bst.search(3) is None
    assert bst.root.key == 5
    assert bst.search(7).value == "val7"


def test_remove_node_with_one_child():
    bst = _build([5, 3, 4])
    node = bst.search(3)
    assert node is not None
    bst.remove(node)
    assert bst.search(3) is None
    assert bst.search(4).key == 4
    assert bst.root.key == 5
    assert bst.root.left.key == 4


def test_remove_node_with_two_children():
    bst = _build([5, 3, 7, 6, 8])
    bst.remove(bst.search(7))
    assert bst.search(7) is None
    assert bst.search(6).key == 6
    assert bst.search(8).key == 8
    assert _in_order(bst.root) == [3, 5, 6, 8]
    assert _links_consistent(bst.root)


def test_remove_root_node():
    bst = _build([5, 3, 7])
    bst.remove(bst.root)
    assert bst.root is not None
    assert bst.root.key != 5
    assert bst.root.key == 7
    assert bst.root.parent is None


def test_remove_with_deep_successor():
    bst = _build([10, 5, 20, 15, 25, 17])
    bst.remove(bst.root)
    assert bst.root.key == 15
    assert _in_order(bst.root) == [5, 15, 17, 20, 25]
    assert _links_consistent(bst.root)


def test_remove_only_node_empties_tree():
    bst = _build([1])
    bst.remove(bst.root)
    assert bst.root is None
    assert bst.search(1) is None


def test_remove_none_is_ignored():
    bst = _build([2, 1, 3])
    bst.remove(None)
    assert _in_order(bst.root) == [1, 2, 3]


def test_empty_tree():
    bst = Bst()
    assert bst.root is None
    assert bst.search(1) is None
    assert bst.min(None) is None
    assert bst.max(None) is None


def test_in_order_is_sorted_after_inserts():
    keys = [50, 30, 70, 20, 40, 60, 80, 35, 45, 65]
    bst = _build(keys)
    assert _in_order(bst.root) == sorted(keys)
    assert _links_consistent(bst.root)
    assert bst.min(bst.root).key == 20
    assert bst.max(bst.root).key == 80


def test_duplicate_keys_go_right():
    bst = Bst()
    bst.insert(1, "first")
    bst.insert(1, "second")
    assert bst.root.value == "first"
    assert bst.root.right.value == "second"
    assert bst.search(1).value == "first"
    bst.remove(bst.search(1))
    assert bst.search(1).value == "second"


@pytest.mark.parametrize("victim", [50, 30, 70, 20, 40, 60, 80])
def test_remove_each_keeps_order(victim):
    keys = [50, 30, 70, 20, 40, 60, 80]
    bst = _build(keys)
    bst.remove(bst.search(victim))
    assert _in_order(bst.root) == sorted(k for k in keys if k != victim)
    assert _links_consistent(bst.root)