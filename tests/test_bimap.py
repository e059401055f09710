import pytest
from hypothesis import given, strategies as st

from pcclub.bimap import BiMap


def make(pairs):
    bm = BiMap()
    for left, right in pairs:
        bm.insert(left, right)
    return bm


def test_insert_and_lookup_both_sides():
    bm = BiMap()
    assert bm.insert("alice", 1) is True
    assert bm.insert("bob", 2) is True
    assert bm.at_left("alice") == 1
    assert bm.at_right(2) == "bob"
    assert len(bm) == 2


def test_insert_rejects_duplicate_left_or_right():
    bm = make([("alice", 1)])
    assert bm.insert("alice", 5) is False
    assert bm.insert("carol", 1) is False
    assert len(bm) == 1
    assert bm.at_left("alice") == 1


def test_empty_map_is_falsy():
    bm = BiMap()
    assert not bm
    assert len(bm) == 0
    bm.insert("x", 1)
    assert bm


def test_at_missing_raises_key_error():
    bm = make([("a", 1)])
    with pytest.raises(KeyError):
        bm.at_left("b")
    with pytest.raises(KeyError):
        bm.at_right(2)


def test_erase_left_removes_both_sides():
    bm = make([("a", 1), ("b", 2)])
    assert bm.erase_left("a") is True
    assert not bm.contains_left("a")
    assert not bm.contains_right(1)
    assert bm.erase_left("a") is False
    assert len(bm) == 1


def test_erase_right_removes_both_sides():
    bm = make([("a", 1), ("b", 2)])
    assert bm.erase_right(2) is True
    assert not bm.contains_left("b")
    assert not bm.contains_right(2)
    assert bm.erase_right(2) is False
    assert len(bm) == 1


def test_reinsert_after_erase():
    bm = make([("a", 1)])
    bm.erase_right(1)
    assert bm.insert("b", 1) is True
    assert bm.at_right(1) == "b"


def test_items_are_sorted():
    bm = make([("c", 1), ("a", 3), ("b", 2)])
    assert list(bm.left_items()) == [("a", 3), ("b", 2), ("c", 1)]
    assert list(bm.right_items()) == [(1, "c"), (2, "b"), (3, "a")]


def test_bounds_left():
    bm = make([("b", 1), ("d", 2)])
    assert bm.lower_bound_left("b") == ("b", 1)
    assert bm.upper_bound_left("b") == ("d", 2)
    assert bm.lower_bound_left("c") == ("d", 2)
    assert bm.lower_bound_left("a") == ("b", 1)
    assert bm.lower_bound_left("e") is None
    assert bm.upper_bound_left("d") is None


def test_bounds_right():
    bm = make([("x", 10), ("y", 20)])
    assert bm.lower_bound_right(10) == (10, "x")
    assert bm.upper_bound_right(10) == (20, "y")
    assert bm.lower_bound_right(15) == (20, "y")
    assert bm.upper_bound_right(20) is None


def test_bounds_on_empty_map():
    bm = BiMap()
    assert bm.lower_bound_left("a") is None
    assert bm.upper_bound_right(0) is None


def test_at_left_or_default_existing_key():
    bm = make([("a", 1)])
    assert bm.at_left_or_default("a", 0) == 1
    assert len(bm) == 1


def test_at_left_or_default_inserts_default():
    bm = make([("a", 1)])
    assert bm.at_left_or_default("b", 0) == 0
    assert bm.at_right(0) == "b"
    assert len(bm) == 2


def test_at_left_or_default_steals_default_from_other_key():
    bm = make([("a", 0), ("c", 5)])
    assert bm.at_left_or_default("b", 0) == 0
    assert bm.at_right(0) == "b"
    assert not bm.contains_left("a")
    assert len(bm) == 2


def test_at_right_or_default_steals_default_from_other_key():
    bm = make([("", 1), ("z", 2)])
    assert bm.at_right_or_default(3, "") == ""
    assert bm.at_left("") == 3
    assert not bm.contains_right(1)
    assert len(bm) == 2


def test_at_right_or_default_existing_key():
    bm = make([("a", 1)])
    assert bm.at_right_or_default(1, "") == "a"
    assert len(bm) == 1


def test_custom_key_functions_define_order_and_identity():
    bm = BiMap(left_key=str.lower, right_key=lambda v: -v)
    assert bm.insert("Bob", 1)
    assert bm.insert("alice", 2)
    assert bm.insert("BOB", 3) is False
    assert bm.contains_left("bob")
    assert [left for left, _ in bm.left_items()] == ["alice", "Bob"]
    assert [right for right, _ in bm.right_items()] == [2, 1]


def test_copy_is_independent():
    bm = make([("a", 1), ("b", 2)])
    clone = bm.copy()
    assert clone == bm
    clone.erase_left("a")
    assert bm.contains_left("a")
    assert clone != bm


def test_equality():
    assert make([("a", 1), ("b", 2)]) == make([("b", 2), ("a", 1)])
    assert make([("a", 1)]) != make([("a", 2)])
    assert make([("a", 1)]) != make([("a", 1), ("b", 2)])
    assert make([]) == BiMap()
    assert (BiMap() == 5) is False


@given(st.lists(st.tuples(st.integers(0, 20), st.integers(0, 20))))
def test_matches_model(pairs):
    bm = BiMap()
    forward = {}
    backward = {}
    for left, right in pairs:
        expected = left not in forward and right not in backward
        assert bm.insert(left, right) is expected
        if expected:
            forward[left] = right
            backward[right] = left
    assert len(bm) == len(forward)
    assert list(bm.left_items()) == sorted(forward.items())
    assert list(bm.right_items()) == sorted(backward.items())
    for left, right in forward.items():
        assert bm.at_left(left) == right
        assert bm.at_right(right) == left


@given(
    st.lists(st.tuples(st.integers(0, 15), st.integers(0, 15))),
    st.lists(st.integers(0, 15)),
)
def test_erase_keeps_sides_consistent(pairs, removals):
    bm = make(pairs)
    for value in removals:
        bm.erase_left(value)
    lefts = {left for left, _ in bm.left_items()}
    rights = {right for right, _ in bm.right_items()}
    assert lefts.isdisjoint(removals)
    assert len(lefts) == len(rights) == len(bm)
    for right, left in bm.right_items():
        assert bm.at_left(left) == right