import pytest

from avlstep.tracing import (
    NOTFOUND,
    ROTATE_LEFT,
    ROTATE_LEFT_RIGHT,
    ROTATE_RIGHT,
    ROTATE_RIGHT_LEFT,
    ROTATION,
    TraceEvent,
)
from avlstep.tree import delete

from avl_helpers import all_nodes, assert_avl, build_tree, keys_inorder, shape


def test_two_child_delete_replaces_with_successor():
    tree = build_tree([20, 10, 30, 5, 15, 25, 35])

    events = tree.delete(20)

    assert events == [
        TraceEvent.deleting(20),
        TraceEvent.replaced(20, 25),
        TraceEvent.traversed(25, 30, "left"),
        TraceEvent.deleting(25),
    ]
    assert tree.root.key == 25
    assert keys_inorder(tree.root) == [5, 10, 15, 25, 30, 35]
    assert_avl(tree.root)


def test_two_child_delete_unlinks_successor_node():
    tree = build_tree([20, 10, 30, 5, 15, 25, 35])
    matched = tree.root
    successor = tree.root.right.left
    assert successor.key == 25

    tree.delete(20)

    assert tree.root is matched
    assert matched.key == 25
    assert all(n is not successor for n in all_nodes(tree.root))


def test_delete_leaf_and_single_child():
    tree = build_tree([20, 10, 30, 5])

    tree.delete(5)
    assert shape(tree.root) == (20, (10, None, None), (30, None, None))

    tree.insert(35)
    events = tree.delete(30)
    assert [e.kind for e in events] == ["traverse", "delete"]
    assert shape(tree.root) == (20, (10, None, None), (35, None, None))
    assert_avl(tree.root)


def test_delete_last_node_empties_tree():
    tree = build_tree([7])

    events = tree.delete(7)

    assert events == [TraceEvent.deleting(7)]
    assert tree.is_empty
    assert tree.height == 0


@pytest.mark.parametrize(
    "keys, doomed, rotation, at_node, new_root",
    [
        ([20, 10, 30, 5], 30, ROTATE_RIGHT, 20, 10),
        ([20, 10, 30, 5, 15], 30, ROTATE_RIGHT, 20, 10),
        ([20, 10, 30, 15], 30, ROTATE_LEFT_RIGHT, 20, 15),
        ([10, 5, 20, 30], 5, ROTATE_LEFT, 10, 20),
        ([10, 5, 20, 15, 30], 5, ROTATE_LEFT, 10, 20),
        ([10, 5, 20, 15], 5, ROTATE_RIGHT_LEFT, 10, 15),
    ],
)
def test_delete_rotation_cases(keys, doomed, rotation, at_node, new_root):
    tree = build_tree(keys)

    events = tree.delete(doomed)

    assert events[-1] == TraceEvent.rotated(rotation, at_node)
    assert tree.root.key == new_root
    assert keys_inorder(tree.root) == sorted(k for k in keys if k != doomed)
    assert_avl(tree.root)


def test_delete_rebalances_every_ancestor_on_the_way_up():
    tree = build_tree([8, 5, 11, 3, 7, 10, 12, 2, 4, 6, 9, 1])
    assert tree.root.key == 8
    assert tree.height == 5

    events = tree.delete(12)

    assert events == [
        TraceEvent.traversed(12, 8, "right"),
        TraceEvent.traversed(12, 11, "right"),
        TraceEvent.deleting(12),
        TraceEvent.rotated(ROTATE_RIGHT, 11),
        TraceEvent.rotated(ROTATE_RIGHT, 8),
    ]
    assert tree.root.key == 5
    assert tree.height == 4
    assert_avl(tree.root)


def test_delete_missing_key_leaves_tree_untouched():
    tree = build_tree([20, 10, 30])
    before = shape(tree.root)

    events = tree.delete(15)

    assert events == [
        TraceEvent.traversed(15, 20, "left"),
        TraceEvent.traversed(15, 10, "right"),
        TraceEvent.not_found(15),
    ]
    assert [e.kind for e in events].count(NOTFOUND) == 1
    assert shape(tree.root) == before


def test_delete_from_empty_tree():
    root, events = delete(None, 3)

    assert root is None
    assert events == [TraceEvent.not_found(3)]


def test_delete_never_rotates_on_not_found():
    tree = build_tree(range(20))

    events = tree.delete(100)

    assert all(e.kind != ROTATION for e in events)
    assert events[-1].kind == NOTFOUND
