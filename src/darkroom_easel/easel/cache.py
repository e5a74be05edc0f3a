"""
Bounded memo over the fit resolver.

Entries are evicted strictly in insertion order (FIFO): once the cache is
full, each new insert first drops the oldest-inserted key. Reading an entry
does not move it, so a frequently read old entry can still be evicted while
a rarely read newer one survives.
"""

import threading
from collections import deque
from dataclasses import dataclass
from typing import Callable, Optional

from darkroom_easel.config import CacheSettings, get_settings
from darkroom_easel.core.logging import LoggingMixin
from darkroom_easel.core.models import FitResult
from darkroom_easel.easel.fit import resolve_fit

FitKey = tuple[float, float, bool]
FitResolver = Callable[[float, float, bool], FitResult]


@dataclass
class CacheStats:
    """Counters for cache activity."""

    hits: int = 0
    misses: int = 0
    evictions: int = 0

    @property
    def lookups(self) -> int:
        return self.hits + self.misses

    @property
    def hit_rate(self) -> float:
        return self.hits / self.lookups if self.lookups else 0.0

    def to_dict(self) -> dict:
        return {
            "hits": self.hits,
            "misses": self.misses,
            "evictions": self.evictions,
            "hit_rate": round(self.hit_rate, 3),
        }


class FitCache(LoggingMixin):
    """FIFO-bounded cache of easel fits keyed by ``(width, height, landscape)``.

    Lookup, resolution, eviction and insertion happen under one lock, so the
    eviction order is the same whether or not callers share the cache across
    threads.
    """

    def __init__(
        self,
        capacity: Optional[int] = None,
        resolver: Optional[FitResolver] = None,
        settings: Optional[CacheSettings] = None,
    ):
        """Initialize the cache.

        Args:
            capacity: Maximum number of entries. Defaults to
                ``settings.max_memo_size``.
            resolver: Function computing a fit on a miss. Defaults to
                :func:`resolve_fit` over the standard catalog.
            settings: Cache settings. If None, uses global settings.
        """
        settings = settings or get_settings().cache
        self.capacity = max(1, capacity if capacity is not None else settings.max_memo_size)
        self._resolver: FitResolver = resolver or resolve_fit
        self._entries: dict[FitKey, FitResult] = {}
        self._order: deque[FitKey] = deque()
        self._lock = threading.Lock()
        self.stats = CacheStats()

    @staticmethod
    def make_key(paper_w: float, paper_h: float, landscape: bool) -> FitKey:
        return (paper_w, paper_h, bool(landscape))

    def get(self, paper_w: float, paper_h: float, landscape: bool) -> FitResult:
        """Return the fit for a paper size, resolving it on a miss."""
        key = self.make_key(paper_w, paper_h, landscape)
        with self._lock:
            cached = self._entries.get(key)
            if cached is not None:
                self.stats.hits += 1
                return cached

            self.stats.misses += 1
            result = self._resolver(paper_w, paper_h, bool(landscape))

            if len(self._entries) >= self.capacity:
                oldest = self._order.popleft()
                del self._entries[oldest]
                self.stats.evictions += 1
                self.logger.debug(f"Fit cache full ({self.capacity}); evicted {oldest}")

            self._entries[key] = result
            self._order.append(key)
            return result

    def keys(self) -> list[FitKey]:
        """Cached keys, oldest insert first."""
        with self._lock:
            return list(self._order)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._order.clear()
            self.stats = CacheStats()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        return f"FitCache(size={len(self)}, capacity={self.capacity})"


# Process-wide default cache - lazy loaded
_default_cache: Optional[FitCache] = None
_default_cache_lock = threading.Lock()


def get_fit_cache() -> FitCache:
    """Get the process-wide fit cache, creating it if necessary."""
    global _default_cache
    with _default_cache_lock:
        if _default_cache is None:
            _default_cache = FitCache()
        return _default_cache


def reset_fit_cache(cache: Optional[FitCache] = None) -> FitCache:
    """Replace the process-wide fit cache (a fresh one when ``cache`` is None)."""
    global _default_cache
    with _default_cache_lock:
        _default_cache = cache if cache is not None else FitCache()
        return _default_cache


def get_cached_fit(
    paper_w: float,
    paper_h: float,
    landscape: bool,
    cache: Optional[FitCache] = None,
) -> FitResult:
    """Memoized :func:`resolve_fit`.

    Args:
        paper_w: Paper width as entered.
        paper_h: Paper height as entered.
        landscape: Whether the paper lies landscape.
        cache: Cache to use. Defaults to the process-wide cache.
    """
    cache = cache if cache is not None else get_fit_cache()
    return cache.get(paper_w, paper_h, landscape)
