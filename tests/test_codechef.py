import pytest

from puzzlekit.codechef import is_consistent


def test_empty_log_is_consistent():
    assert is_consistent(0, [])


@pytest.mark.parametrize("capacity", [1, 2, 5, 10])
def test_fill_and_empty(capacity):
    events = [("+", i) for i in range(capacity)] + [("-", i) for i in range(capacity)]
    assert is_consistent(capacity, events)


@pytest.mark.parametrize("capacity", [0, 1, 3, 7])
def test_overflow(capacity):
    events = [("+", i) for i in range(capacity + 1)]
    assert not is_consistent(capacity, events)


def test_departure_of_absent_item():
    assert not is_consistent(3, [("+", 1), ("-", 2)])


def test_repeated_arrival_into_full_lot():
    assert not is_consistent(1, [("+", 1), ("+", 1)])


def test_repeated_arrival_takes_no_extra_place():
    assert is_consistent(2, [("+", 1), ("+", 1), ("+", 2)])


def test_inconsistency_is_not_recovered():
    bad_prefix = [("+", 1), ("-", 1), ("-", 1)]
    for tail in ([], [("+", 1)], [("+", 1), ("-", 1)]):
        assert not is_consistent(5, bad_prefix + tail)


def test_accepts_a_generator():
    events = (("+" if i % 2 == 0 else "-", i // 2) for i in range(10))
    assert is_consistent(1, events)