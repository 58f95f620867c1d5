import pytest

from minios.intlist import IntList


def test_new_list_is_empty():
    lst = IntList()
    assert lst.is_empty()
    assert len(lst) == 0


def test_remove_returns_last_prepended_first():
    lst = IntList()
    values = [17, 18, 19]
    for value in values:
        lst.prepend(value)
    assert len(lst) == len(values)
    assert [lst.remove() for _ in values] == list(reversed(values))
    assert lst.is_empty()


def test_duplicates_are_allowed():
    lst = IntList()
    lst.prepend(4)
    lst.prepend(4)
    assert len(lst) == 2
    assert lst.remove() == 4
    assert lst.remove() == 4


def test_remove_from_empty_raises():
    lst = IntList()
    with pytest.raises(IndexError):
        lst.remove()


def test_single_item_round_trip():
    lst = IntList()
    lst.prepend(-3)
    assert not lst.is_empty()
    assert lst.remove() == -3
    assert lst.is_empty()