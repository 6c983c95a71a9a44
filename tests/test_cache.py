"""Tests for the LRU cache and the per-language cache registry."""

import pytest

from lookup_core.cache import CacheRegistry, LRUCache
from lookup_core.models import LookupResult, Upstream


def _result(baseform):
    return LookupResult(upstream=Upstream.SAOL, baseform=baseform)


def test_lru_evicts_least_recently_written():
    cache = LRUCache(max_entries=2)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.put("c", 3)
    assert "a" not in cache
    assert cache.get("b") == 2
    assert cache.get("c") == 3
    assert len(cache) == 2


def test_lru_read_refreshes_recency():
    cache = LRUCache(max_entries=2)
    cache.put("a", 1)
    cache.put("b", 2)
    assert cache.get("a") == 1
    cache.put("c", 3)
    assert "b" not in cache
    assert cache.get("a") == 1


def test_lru_overwrite_refreshes_recency():
    cache = LRUCache(max_entries=2)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.put("a", 10)
    cache.put("c", 3)
    assert cache.get("a") == 10
    assert "b" not in cache


def test_lru_miss_returns_none():
    assert LRUCache().get("missing") is None


def test_lru_rejects_zero_capacity():
    with pytest.raises(ValueError):
        LRUCache(max_entries=0)


def test_registry_creates_one_cache_per_language_lazily():
    registry = CacheRegistry(max_entries_per_language=10)
    assert registry.languages() == []

    sv = registry.get_or_create("sv")
    assert registry.get_or_create("sv") is sv
    assert registry.get_or_create("it") is not sv
    assert registry.languages() == ["sv", "it"]
    assert sv.max_entries == 10


def test_registry_partitions_by_language():
    registry = CacheRegistry(max_entries_per_language=1)
    registry.put("sv", "di", [_result("di")])
    registry.put("it", "di", [_result("dì")])
    registry.put("it", "da", [_result("da")])

    # Italian traffic evicted only Italian entries
    assert registry.get("sv", "di") == [_result("di")]
    assert registry.get("it", "di") is None
    assert registry.get("it", "da") == [_result("da")]


def test_registry_returns_copies_of_cached_lists():
    registry = CacheRegistry()
    registry.put("sv", "and", [_result("and")])
    registry.get("sv", "and").append(_result("ande"))
    assert registry.get("sv", "and") == [_result("and")]
