import pytest

from minios.hashtable import HashTable

TEST_VECTOR = [str(i) for i in range(15)]


def make_table():
    return HashTable(int, lambda key: key)


def test_self_test_vector_round_trip():
    table = make_table()
    assert table.is_empty()
    assert list(table) == []
    for text in TEST_VECTOR:
        table.insert(text)
        assert int(text) in table
        assert not table.is_empty()
    table.sanity_check()
    assert len(table) == len(TEST_VECTOR)
    for text in TEST_VECTOR:
        assert table.remove(int(text)) == text
    assert table.is_empty()
    table.sanity_check()


def test_iteration_order_follows_buckets():
    table = make_table()
    for text in ["1", "4", "2"]:
        table.insert(text)
    assert list(table) == ["4", "1", "2"]


def test_growth_spreads_items_over_more_buckets():
    table = make_table()
    for text in TEST_VECTOR:
        table.insert(text)
    assert list(table) == TEST_VECTOR
    table.sanity_check()


def test_find_present_and_absent():
    table = make_table()
    table.insert("7")
    assert table.find(7) == "7"
    assert table.find(8) is None
    assert 8 not in table


def test_duplicate_key_rejected():
    table = make_table()
    table.insert("3")
    with pytest.raises(KeyError):
        table.insert("03")
    assert len(table) == 1


def test_remove_missing_key_raises():
    table = make_table()
    table.insert("3")
    with pytest.raises(KeyError):
        table.remove(4)
    assert len(table) == 1


def test_apply_visits_every_item():
    table = make_table()
    for text in TEST_VECTOR:
        table.insert(text)
    seen = []
    table.apply(seen.append)
    assert sorted(seen, key=int) == TEST_VECTOR


def test_colliding_keys_share_bucket():
    table = HashTable(lambda item: item[0], lambda key: 0)
    items = [("a", 1), ("b", 2), ("c", 3)]
    for item in items:
        table.insert(item)
    assert table.find("b") == ("b", 2)
    assert table.remove("a") == ("a", 1)
    assert "a" not in table
    table.sanity_check()
    assert list(table) == [("b", 2), ("c", 3)]