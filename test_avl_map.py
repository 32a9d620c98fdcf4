"""Scenario tests for the persistent AVL functions and `AVLMap`."""
import pytest
from avl_map import tree as avl
from avl_map.balance import Balance
from avl_map.invariants import check_invariants
from avl_map.ordered_map import AVLMap


def build(keys):
    root = avl.empty()
    for key in keys:
        root = avl.insert(root, key, key)
    return root


def test_three_descending_inserts_rotate():
    root = build([3, 2, 1])
    for key in (1, 2, 3):
        assert avl.lookup(root, key) == key
    assert root.key == 2
    assert avl.height(root) == 2


def test_insert_order_does_not_change_contents():
    direct = build([1, 2, 3, 4])
    shuffled = build([1, 2, 4, 3])
    check_invariants(direct)
    check_invariants(shuffled)
    assert list(avl.items(direct)) == list(avl.items(shuffled))
    assert direct.key == shuffled.key == 2
    assert direct.balance is shuffled.balance is Balance.RIGHT
    assert avl.height(direct) == avl.height(shuffled) == 3


def test_remove_node_with_two_children():
    root = avl.remove(build([1, 2, 3, 4]), 2)
    check_invariants(root)
    assert list(avl.keys(root)) == [1, 3, 4]
    assert avl.lookup(root, 2) is None
    assert root.key == 3
    assert root.balance is Balance.EVEN


def test_lookup_on_empty_tree():
    assert avl.lookup(avl.empty(), 0) is None
    assert avl.lookup(avl.empty(), 12345) is None
    assert not avl.contains(avl.empty(), 0)


def test_lookup_missing_key():
    root = build([5, 3, 8])
    for key in (0, 4, 6, 9):
        assert avl.lookup(root, key) is None
        assert not avl.contains(root, key)


def test_remove_absent_key_is_noop():
    root = build(range(10))
    assert avl.remove(root, 100) is root
    assert avl.remove(root, -1) is root
    assert avl.remove(avl.empty(), 1) is None


def test_insert_overwrites_value():
    root = build(range(10))
    updated = avl.insert(root, 5, 'five')
    assert avl.lookup(updated, 5) == 'five'
    assert avl.lookup(root, 5) == 5
    assert avl.size(updated) == 10
    assert [k for k, _ in avl.items(updated)] == list(range(10))


def test_untouched_subtrees_are_shared():
    root = build(range(1, 8))  # perfect tree rooted at 4
    updated = avl.insert(root, 8, 8)
    assert updated.left is root.left
    removed = avl.remove(root, 7)
    assert removed.left is root.left


def test_remove_min():
    root = build([5, 3, 8, 1, 4])
    rest, item = avl.remove_min(root)
    check_invariants(rest)
    assert item == (1, 1)
    assert list(avl.keys(rest)) == [3, 4, 5, 8]
    assert avl.remove_min(avl.empty()) == (None, None)


def test_min_max_item():
    root = build([5, 3, 8, 1, 4])
    assert avl.min_item(root) == (1, 1)
    assert avl.max_item(root) == (8, 8)
    assert avl.min_item(avl.empty(), ('none', 0)) == ('none', 0)
    assert avl.max_item(avl.empty()) is None


def test_contains_with_none_values():
    root = avl.insert(avl.empty(), 1, None)
    assert avl.lookup(root, 1) is None
    assert avl.contains(root, 1)


def test_map_basics():
    tree = AVLMap(check=True)
    assert repr(tree) == 'empty AVL map'
    assert tree.min() is None and tree.max() is None
    for key in (5, 2, 9, 1):
        tree.insert(key, str(key))
    tree.insert(2, 'two')
    assert len(tree) == tree.size == 4
    assert tree.find(2) == 'two'
    assert tree.find(3) is None
    assert 9 in tree and 3 not in tree
    assert list(tree) == [1, 2, 5, 9]
    assert tree.min() == (1, '1')
    assert tree.max() == (9, '9')
    assert tree.height == 3
    assert repr(tree) == "AVL map (size 4) with root key 5"


def test_map_remove():
    tree = AVLMap.from_pairs([(1, 'a'), (2, 'b'), (3, 'c')])
    tree.remove(4)
    assert len(tree) == 3
    with pytest.raises(ValueError, match='not in tree'):
        tree.remove(4, strict=True)
    tree.remove(2, strict=True)
    assert list(tree.all()) == [(1, 'a'), (3, 'c')]
    assert len(tree) == 2
    tree.check_invariants()


def test_map_snapshot_is_unaffected_by_updates():
    tree = AVLMap.from_pairs((i, i) for i in range(20))
    snapshot = tree.snapshot()
    for i in range(0, 20, 2):
        tree.remove(i)
    tree.insert(100, 100)
    assert list(avl.keys(snapshot)) == list(range(20))
    assert list(tree) == list(range(1, 20, 2)) + [100]


@pytest.mark.parametrize('key', [-1, 1.5, '3', True, None])
def test_map_natural_keys_rejects(key):
    tree = AVLMap(natural_keys=True)
    with pytest.raises(ValueError):
        tree.insert(key, 'x')
    assert len(tree) == 0


def test_map_natural_keys_accepts():
    tree = AVLMap(natural_keys=True)
    tree.insert(0, 'zero')
    tree.insert(2**70, 'big')
    assert list(tree) == [0, 2**70]


@pytest.mark.parametrize('kwargs', [{'check': 'no'}, {'check': 1},
                                    {'natural_keys': None},
                                    {'natural_keys': 'yes'}])
def test_map_rejects_bad_options(kwargs):
    with pytest.raises(ValueError):
        AVLMap(**kwargs)
    with pytest.raises(ValueError):
        AVLMap.from_pairs([(1, 1)], **kwargs)
