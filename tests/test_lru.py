import pytest

from hpclab.lru import LRUCache


def test_put_then_get_returns_value():
    cache = LRUCache(2)
    cache.put("a", 10)
    cache.put("b", 20)
    assert cache.get("a") == 10
    assert cache.get("b") == 20
    assert len(cache) == 2


def test_least_recently_used_is_evicted():
    cache = LRUCache(2)
    cache.put(1, "one")
    cache.put(2, "two")
    cache.get(1)
    cache.put(3, "three")
    assert 2 not in cache
    assert 1 in cache
    assert 3 in cache
    assert len(cache) == cache.capacity


def test_missing_key_raises():
    cache = LRUCache(1)
    cache.put(1, "one")
    cache.put(2, "two")
    with pytest.raises(KeyError):
        cache.get(1)


def test_updating_existing_key_keeps_size_and_refreshes():
    cache = LRUCache(2)
    cache.put("x", 1)
    cache.put("y", 2)
    cache.put("x", 3)
    assert len(cache) == 2
    assert cache.get("x") == 3
    cache.put("z", 4)
    assert "y" not in cache
    assert "x" in cache


@pytest.mark.parametrize("capacity", [0, -1])
def test_invalid_capacity(capacity):
    with pytest.raises(ValueError):
        LRUCache(capacity)