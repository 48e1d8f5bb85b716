import pytest

from algocollection.hashing import ChainedHashTable


def test_hash_of_nonnegative_is_remainder():
    table = ChainedHashTable(7)
    assert all(table.hash_of(x) == x % 7 for x in range(50))


def test_hash_of_negative_keeps_sign():
    table = ChainedHashTable(5)
    assert table.hash_of(-7) == -2
    assert all(table.hash_of(-x) == -table.hash_of(x) for x in range(30))


def test_add_and_contains():
    table = ChainedHashTable(4)
    for value in (3, 7, 11, 20):
        table.add(value)
    assert table.contains(7) is True
    assert table.contains(20) is True
    assert table.contains(15) is False
    assert 11 in table
    assert "11" not in table


def test_negative_values_are_stored_and_found():
    table = ChainedHashTable(6)
    table.add(-13)
    assert table.contains(-13) is True
    assert table.buckets()[abs(table.hash_of(-13))] == [-13]


def test_buckets_keep_insertion_order():
    table = ChainedHashTable(3)
    values = [9, 3, 6, 0]
    for value in values:
        table.add(value)
    buckets = table.buckets()
    assert buckets[0] == values
    assert buckets[1] == [] and buckets[2] == []
    buckets[0].append(99)
    assert table.contains(99) is False


def test_describe_format():
    table = ChainedHashTable(3)
    table.add(4)
    table.add(7)
    assert table.describe() == (
        "Key 0 is empty\nKey 1 has values = 4 7\nKey 2 is empty\n"
    )


def test_size_must_be_positive():
    with pytest.raises(ValueError):
        ChainedHashTable(0)