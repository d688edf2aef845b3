import pytest

from ftcontainers.utility import Pair, make_pair, map_key, map_value, set_key


def test_default_pair_is_empty():
    p = Pair()
    assert p.first is None
    assert p.second is None


def test_make_pair_round_trip():
    p = make_pair("x", 100)
    assert p.first == "x"
    assert p.second == 100
    assert p == Pair("x", 100)


def test_equality_needs_both_members():
    assert Pair(1, 2) == Pair(1, 2)
    assert not (Pair(1, 2) == Pair(1, 3))
    assert Pair(1, 2) != Pair(2, 2)


def test_ordering_by_first_then_second():
    assert Pair(1, 2) < Pair(1, 3)
    assert Pair(1, 9) < Pair(2, 0)
    assert not (Pair(2, 0) < Pair(1, 9))
    assert not (Pair(1, 2) < Pair(1, 2))


def test_derived_comparisons_are_consistent():
    a, b = Pair(3, "a"), Pair(3, "b")
    assert a <= b and not (a >= b)
    assert b > a and b >= a
    assert a <= a and a >= a
    assert not (a > a)


@pytest.mark.parametrize(
    "items",
    [
        [(3, 1), (1, 5), (2, 2), (1, 1), (3, 0)],
        [("b", 2), ("a", 9), ("b", 1)],
    ],
)
def test_sorting_matches_tuple_order(items):
    pairs = sorted(make_pair(a, b) for a, b in items)
    assert [(p.first, p.second) for p in pairs] == sorted(items)


def test_compare_with_non_pair_is_type_error():
    with pytest.raises(TypeError):
        Pair(1, 2) < (1, 2)


def test_second_member_is_mutable():
    p = make_pair("k", 1)
    p.second = 5
    assert map_value(p) == 5


def test_extractors():
    p = make_pair("key", "value")
    assert map_key(p) == "key"
    assert map_value(p) == "value"
    obj = object()
    assert set_key(obj) is obj