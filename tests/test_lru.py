import pytest

from ledgercore.lru import LRUCache

VAL = 4


def test_int_put():
    cache = LRUCache(4)
    cache.put(1, VAL)
    cache.put(2, VAL)
    cache.put(3, VAL)
    cache.put(4, VAL)
    assert cache.get(1) == VAL
    assert cache.get(2) == VAL
    assert cache.get(3) == VAL
    assert cache.get(4) == VAL
    cache.put(5, VAL)
    assert cache.get(1) is None
    assert cache.get(2) == VAL
    cache.put(4, VAL)
    assert cache.get(3) == VAL
    assert cache.get(4) == VAL
    assert cache.get(5) == VAL
    cache.put(10, VAL)
    assert cache.get(2) is None
    assert cache.get(3) == VAL
    cache.put(11, VAL)
    assert cache.get(4) is None


def test_string_put():
    cache = LRUCache(4)
    cache.put("stop", VAL)
    cache.put("A", VAL)
    cache.put("B", VAL)
    cache.put("C", VAL)
    cache.put("D", VAL)
    assert cache.get("stop") is None


def test_put_replaces_value():
    cache = LRUCache(2)
    cache.put("a", 1)
    cache.put("a", 2)
    assert cache.get("a") == 2
    assert len(cache) == 1


def test_len_never_exceeds_capacity():
    cache = LRUCache(3)
    for i in range(10):
        cache.put(i, i)
        assert len(cache) <= 3
    assert 9 in cache
    assert 0 not in cache


def test_contains_does_not_refresh():
    cache = LRUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    assert 1 in cache
    cache.put(3, 3)
    assert 1 not in cache
    assert 2 in cache


@pytest.mark.parametrize("capacity", [0, -1])
def test_invalid_capacity(capacity):
    with pytest.raises(ValueError):
        LRUCache(capacity)