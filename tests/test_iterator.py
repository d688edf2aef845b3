import pytest

from ftcontainers.iterator import NormalIterator, ReverseIterator


def _ends(data):
    return NormalIterator(data, 0), NormalIterator(data, len(data))


def _rends(data):
    begin, end = _ends(data)
    return ReverseIterator(end), ReverseIterator(begin)


def ordering(a, b):
    return (a < b, a <= b, a > b, a >= b)


def test_value_read_and_write():
    data = [10, 20, 30]
    it = NormalIterator(data, 1)
    assert it.value == 20
    it.value = 25
    assert data[1] == 25


def test_forward_walk_collects_sequence():
    data = [4, 5, 6, 7]
    it, end = _ends(data)
    seen = []
    while it != end:
        seen.append(it.value)
        it += 1
    assert seen == data


def test_arithmetic_and_difference():
    data = list("abcdef")
    begin, end = _ends(data)
    assert end - begin == len(data)
    assert (begin + 2).value == data[2]
    assert (2 + begin) == begin + 2
    assert (end - 1).value == data[-1]
    assert begin[3] == data[3]


def test_iadd_does_not_affect_copies():
    data = [1, 2, 3]
    a = NormalIterator(data, 0)
    b = a
    b += 1
    assert a.base() == 0
    assert b.base() == 1


def test_subscript_assignment():
    data = [0, 0, 0]
    NormalIterator(data, 1)[1] = 9
    assert data[2] == 9


def test_dereference_out_of_range_raises():
    data = [1, 2]
    with pytest.raises(IndexError):
        NormalIterator(data, 2).value
    with pytest.raises(IndexError):
        NormalIterator(data, 0)[-1]


def test_comparisons_between_positions():
    data = [1, 2, 3]
    begin, end = _ends(data)
    assert ordering(begin, end) == (True, True, False, False)
    assert ordering(begin + 3, end) == (False, True, False, True)


def test_different_sequences():
    a, b = [1], [1]
    assert NormalIterator(a, 0) != NormalIterator(b, 0)
    with pytest.raises(ValueError):
        NormalIterator(a, 0) < NormalIterator(b, 0)
    with pytest.raises(ValueError):
        NormalIterator(a, 0) - NormalIterator(b, 0)


def test_hash_consistent_with_equality():
    data = [1, 2, 3]
    positions = {NormalIterator(data, 1), NormalIterator(data, 0) + 1}
    assert len(positions) == 1


def test_reverse_fill_like_reference_program():
    data = [0] * 5
    it, rend = _rends(data)
    i = 5
    while it != rend:
        it.value = i
        it += 1
        i -= 1
    assert data == list(range(1, 6))


def test_reverse_walk_yields_reversed_sequence():
    data = [3, 8, 1, 9]
    it, rend = _rends(data)
    seen = []
    while it != rend:
        seen.append(it.value)
        it += 1
    assert seen == list(reversed(data))
    assert rend - _rends(data)[0] == len(data)


def test_reverse_base_round_trip():
    data = [1, 2, 3]
    end = NormalIterator(data, 3)
    rit = ReverseIterator(end)
    assert rit.base() == end
    assert rit.value == data[-1]
    assert rit[1] == data[-2]


def test_reverse_orderings_from_reference_program():
    data = [1, 2, 3, 4, 5]
    it_0, it_1 = _rends(data)
    it_mid = it_0 + 3
    assert it_0 + 3 == it_mid
    assert ordering(it_0 + 3, it_mid) == (False, True, False, True)
    assert ordering(it_0, it_1) == (True, True, False, False)
    assert ordering(it_1, it_0) == (False, False, True, True)
    assert ordering(it_1 - 3, it_mid) == (True, True, False, False)
    assert ordering(it_mid, it_1 - 3) == (False, False, True, True)
    assert it_mid.value == data[len(data) - 4]


def test_reverse_subtract_and_radd():
    data = [1, 2, 3, 4]
    rbegin, rend = _rends(data)
    assert (2 + rbegin) == rbegin + 2
    assert (rend - 1).value == data[0]
    assert (rbegin + 2) - rbegin == 2


def test_reverse_independent_of_source_iterator():
    data = [1, 2, 3]
    end = NormalIterator(data, 3)
    rit = ReverseIterator(end)
    end += -1
    assert rit.base().base() == 3


def test_reverse_hash_and_setitem():
    data = [1, 2, 3]
    rbegin, _ = _rends(data)
    assert len({rbegin + 1, ReverseIterator(NormalIterator(data, 2))}) == 1
    rbegin[2] = 7
    assert data[0] == 7