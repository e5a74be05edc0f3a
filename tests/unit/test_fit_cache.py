"""Tests for the FIFO-bounded fit cache."""

import threading
import time
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import MagicMock

import pytest

from darkroom_easel.config import CacheSettings
from darkroom_easel.easel import resolve_fit
from darkroom_easel.easel import cache as cache_module
from darkroom_easel.easel.cache import (
    CacheStats,
    FitCache,
    get_cached_fit,
    get_fit_cache,
    reset_fit_cache,
)


@pytest.fixture
def resolver():
    """Resolver spy that still computes real fits."""
    return MagicMock(wraps=resolve_fit)


@pytest.fixture
def small_cache(resolver):
    """Cache holding three entries."""
    return FitCache(capacity=3, resolver=resolver)


class TestFitCacheLookup:
    """Test hits and misses."""

    def test_repeated_lookup_resolves_once(self, resolver):
        cache = FitCache(resolver=resolver)

        first = cache.get(9, 12, False)
        second = cache.get(9, 12, False)

        assert first == second
        assert resolver.call_count == 1

    def test_cached_result_matches_resolver(self, small_cache):
        assert small_cache.get(8, 10, True) == resolve_fit(8, 10, True)

    def test_orientation_is_part_of_key(self, small_cache, resolver):
        small_cache.get(8, 10, False)
        small_cache.get(8, 10, True)

        assert resolver.call_count == 2
        assert len(small_cache) == 2

    def test_key_is_exact(self, small_cache, resolver):
        """Sizes differing below display precision are separate entries."""
        small_cache.get(8.001, 10, False)
        small_cache.get(8.004, 10, False)

        assert resolver.call_count == 2

    def test_contains(self, small_cache):
        small_cache.get(5, 7, False)

        assert FitCache.make_key(5, 7, False) in small_cache
        assert FitCache.make_key(5, 7, True) not in small_cache

    def test_stats(self, small_cache):
        small_cache.get(5, 7, False)
        small_cache.get(5, 7, False)
        small_cache.get(8, 10, False)

        assert small_cache.stats.hits == 1
        assert small_cache.stats.misses == 2
        assert small_cache.stats.lookups == 3
        assert small_cache.stats.hit_rate == pytest.approx(1 / 3)

    def test_stats_to_dict(self):
        stats = CacheStats(hits=3, misses=1, evictions=0)

        assert stats.to_dict() == {"hits": 3, "misses": 1, "evictions": 0, "hit_rate": 0.75}

    def test_empty_stats_hit_rate(self):
        assert CacheStats().hit_rate == 0.0


class TestFitCacheEviction:
    """Test strict insertion-order eviction."""

    def test_never_exceeds_capacity(self, small_cache):
        for w in range(1, 10):
            small_cache.get(w, 10, False)

        assert len(small_cache) == 3
        assert small_cache.stats.evictions == 6

    def test_oldest_insert_is_evicted(self, small_cache):
        for w in (1, 2, 3, 4):
            small_cache.get(w, 10, False)

        assert small_cache.keys() == [(2, 10, False), (3, 10, False), (4, 10, False)]

    def test_reads_do_not_protect_old_entries(self, small_cache, resolver):
        """A heavily read first entry is still the first one evicted."""
        small_cache.get(1, 10, False)
        small_cache.get(2, 10, False)
        small_cache.get(3, 10, False)
        for _ in range(5):
            small_cache.get(1, 10, False)

        small_cache.get(4, 10, False)

        assert (1, 10, False) not in small_cache
        assert (2, 10, False) in small_cache
        assert (3, 10, False) in small_cache
        assert (4, 10, False) in small_cache

        calls_before = resolver.call_count
        small_cache.get(1, 10, False)
        assert resolver.call_count == calls_before + 1

    def test_capacity_one(self, resolver):
        cache = FitCache(capacity=1, resolver=resolver)

        cache.get(5, 7, False)
        cache.get(8, 10, False)

        assert cache.keys() == [(8, 10, False)]

    def test_capacity_from_settings(self):
        cache = FitCache(settings=CacheSettings(max_memo_size=2))

        assert cache.capacity == 2

    def test_default_capacity(self):
        assert FitCache().capacity == 50

    def test_clear(self, small_cache):
        small_cache.get(5, 7, False)
        small_cache.clear()

        assert len(small_cache) == 0
        assert small_cache.keys() == []
        assert small_cache.stats.lookups == 0


class TestFitCacheConcurrency:
    """Test shared use across threads."""

    def test_each_key_resolved_once(self, resolver):
        cache = FitCache(capacity=100, resolver=resolver)
        keys = [(w, 10.0, landscape) for w in (5.0, 6.0, 7.0, 8.0) for landscape in (False, True)]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda k: cache.get(*k), keys * 25))

        assert resolver.call_count == len(keys)
        assert len(results) == len(keys) * 25
        assert len(cache) == len(keys)


class TestDefaultFitCache:
    """Test the process-wide cache helpers."""

    def test_get_fit_cache_is_shared(self):
        assert get_fit_cache() is get_fit_cache()

    def test_get_cached_fit_uses_default_cache(self):
        result = get_cached_fit(8, 10, False)

        assert result == resolve_fit(8, 10, False)
        assert (8, 10, False) in get_fit_cache()

    def test_get_cached_fit_with_explicit_cache(self, small_cache):
        get_cached_fit(5, 7, True, cache=small_cache)

        assert (5, 7, True) in small_cache
        assert (5, 7, True) not in get_fit_cache()

    def test_reset_fit_cache(self, small_cache):
        old = get_fit_cache()

        assert reset_fit_cache() is not old
        assert reset_fit_cache(small_cache) is small_cache
        assert get_fit_cache() is small_cache


class TestFitCacheLocking:
    """Test that reads and the lazy default honour the locks."""

    def test_len_and_contains_wait_for_lock(self, small_cache):
        small_cache.get(5, 7, False)
        results = {}

        def read():
            results["len"] = len(small_cache)
            results["contains"] = (5, 7, False) in small_cache

        with small_cache._lock:
            reader = threading.Thread(target=read)
            reader.start()
            reader.join(timeout=0.1)
            assert reader.is_alive()
            assert results == {}

        reader.join(timeout=5)
        assert results == {"len": 1, "contains": True}

    def test_default_cache_built_once_under_contention(self, monkeypatch):
        real_cache = cache_module.FitCache

        def slow_cache(*args, **kwargs):
            time.sleep(0.01)
            return real_cache(*args, **kwargs)

        factory = MagicMock(side_effect=slow_cache)
        monkeypatch.setattr(cache_module, "FitCache", factory)
        monkeypatch.setattr(cache_module, "_default_cache", None)
        barrier = threading.Barrier(8)

        def first_use(_):
            barrier.wait()
            return get_fit_cache()

        with ThreadPoolExecutor(max_workers=8) as pool:
            caches = list(pool.map(first_use, range(8)))

        assert factory.call_count == 1
        assert all(c is caches[0] for c in caches)
