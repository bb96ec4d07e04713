import pytest

from ledgercore.unique import Unique


class Item(Unique):
    def __init__(self, key):
        self.key = key

    def unique_key(self):
        return self.key


def test_ordering_follows_key():
    low, high = Item(1), Item(2)
    assert Unique.__lt__(low, high) is True
    assert Unique.__gt__(high, low) is True
    assert Unique.__le__(low, high) is True
    assert Unique.__ge__(high, low) is True
    assert Unique.__lt__(high, low) is False
    assert low < high and high > low


def test_equal_keys_are_le_and_ge():
    a, b = Item("k"), Item("k")
    assert Unique.__le__(a, b) is True
    assert Unique.__ge__(a, b) is True
    assert Unique.__lt__(a, b) is False
    assert Unique.__gt__(a, b) is False


def test_sorted_uses_keys():
    items = [Item(k) for k in (3, 1, 2)]
    ordered = sorted(items)
    assert [i.unique_key() for i in ordered] == [1, 2, 3]
    assert Unique.__lt__(ordered[0], ordered[1]) is True
    assert Unique.__lt__(ordered[1], ordered[2]) is True


def test_cannot_instantiate_abstract():
    with pytest.raises(TypeError):
        Unique()


def test_compare_with_non_unique_raises():
    item = Item(1)
    assert Unique.__lt__(item, Item(2)) is True
    with pytest.raises(TypeError):
        item < 5