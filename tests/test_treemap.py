import pytest

from bstmap.treemap import Pair, TreeMap, TreeNode, minimum


def lower_than_int(key1, key2):
    return key1 < key2


def make_tree():
    tree = TreeMap(lower_than_int)
    for key, word in [(5239, "auto"), (8213, "rayo"), (6980, "hoja"), (1273, "reto")]:
        tree.insert(key, word)
    return tree


def attach(parent, side, key, value):
    node = TreeNode.create(key, value)
    node.parent = parent
    setattr(parent, side, node)
    return node


def test_create_empty():
    tree = TreeMap(lower_than_int)
    assert tree.root is None
    assert tree.current is None
    assert tree.lower_than is lower_than_int
    assert tree.lower_than(10, 15)


def test_shape_of_initial_tree():
    tree = make_tree()
    assert tree.root.pair.key == 5239
    assert tree.root.right.pair.key == 8213
    assert tree.root.right.left.pair.key == 6980
    assert tree.root.left.pair.key == 1273
    assert tree.root.right.left.parent is tree.root.right


def test_search_root():
    tree = make_tree()
    pair = tree.search(5239)
    assert pair == Pair(5239, "auto")
    assert tree.current is tree.root


def test_search_right():
    tree = make_tree()
    assert tree.search(8213).value == "rayo"
    assert tree.current is tree.root.right


def test_search_right_left():
    tree = make_tree()
    assert tree.search(6980).value == "hoja"
    assert tree.current is tree.root.right.left


def test_search_missing():
    tree = make_tree()
    assert tree.search(7010) is None


def test_insert_duplicate_ignored():
    tree = make_tree()
    tree.insert(1273, "repetido")
    assert tree.root.left.left is None
    assert tree.root.left.right is None
    assert tree.search(1273).value == "reto"


def test_insert_new_leaf():
    tree = make_tree()
    tree.insert(900, "maicol")
    new = tree.root.left.left
    assert new is not None and new.pair.value == "maicol"
    assert new.pair.key == 900
    assert new.parent is tree.root.left
    assert tree.current is new


def test_minimum():
    tree = make_tree()
    assert minimum(tree.root).pair.key == 1273
    assert minimum(tree.root.left).pair.key == 1273
    attach(tree.root.left, "left", 100, "first_word")
    assert minimum(tree.root).pair.key == 100


def test_minimum_requires_node():
    with pytest.raises(ValueError):
        minimum(None)


def test_erase_leaf():
    tree = make_tree()
    tree.erase(1273)
    assert tree.root.left is None


def test_erase_one_child():
    tree = make_tree()
    tree.erase(8213)
    assert tree.root.right.pair.key == 6980
    assert tree.root.right.parent is tree.root


def test_erase_two_children():
    tree = make_tree()
    tree.erase(5239)
    assert tree.root.pair.key == 6980
    assert tree.root.right.pair.key == 8213
    assert tree.search(5239) is None


def test_erase_missing_keeps_contents():
    tree = make_tree()
    tree.erase(4242)
    assert [p.key for p in tree] == [1273, 5239, 6980, 8213]


def test_erase_only_node_empties_tree():
    tree = TreeMap(lower_than_int)
    tree.insert(1, "x")
    tree.erase(1)
    assert tree.root is None
    assert list(tree) == []


def test_first():
    tree = make_tree()
    assert tree.first().value == "reto"
    assert tree.current is tree.root.left


def test_first_after_adding_smaller():
    tree = make_tree()
    attach(tree.root.left, "left", 100, "first_word")
    assert tree.first().key == 100


def test_first_on_empty_tree():
    assert TreeMap(lower_than_int).first() is None


def test_next_with_right_child():
    tree = make_tree()
    attach(tree.root.left, "right", 2000, "next_word")
    tree.current = tree.root.left
    assert tree.next().key == 2000


def test_next_walks_to_end():
    tree = make_tree()
    tree.current = tree.root
    assert tree.next().key == 6980
    assert tree.next().key == 8213
    assert tree.next() is None
    assert tree.next() is None


def test_next_climbs_to_ancestor():
    tree = make_tree()
    tree.current = attach(tree.root.left, "right", 2000, "next_word")
    assert tree.next().key == 5239


@pytest.mark.parametrize(
    "key, expected",
    [(6980, 6980), (6979, 6980), (6981, 8213)],
)
def test_upper_bound_found(key, expected):
    tree = make_tree()
    pair = tree.upper_bound(key)
    assert pair.key == expected
    assert tree.current.pair is pair


def test_upper_bound_past_end():
    tree = make_tree()
    assert tree.upper_bound(8214) is None


def test_iteration_is_sorted_and_keeps_cursor():
    tree = TreeMap(lower_than_int)
    keys = [50, 20, 80, 10, 30, 70, 90, 25, 35]
    for key in keys:
        tree.insert(key, str(key))
    tree.search(30)
    cursor = tree.current
    assert [p.key for p in tree] == sorted(keys)
    assert tree.current is cursor


def test_first_next_matches_iteration_after_erasures():
    tree = TreeMap(lower_than_int)
    for key in [50, 20, 80, 10, 30, 70, 90, 25, 35]:
        tree.insert(key, key)
    for key in (20, 50, 90):
        tree.erase(key)
    walked = []
    pair = tree.first()
    while pair is not None:
        walked.append(pair.key)
        pair = tree.next()
    assert walked == [p.key for p in tree]
    assert walked == [10, 25, 30, 35, 70, 80]