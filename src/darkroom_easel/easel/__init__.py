"""
Easel catalog, fit resolution and the fit cache.
"""

from darkroom_easel.easel.cache import (
    CacheStats,
    FitCache,
    get_cached_fit,
    get_fit_cache,
    reset_fit_cache,
)
from darkroom_easel.easel.catalog import (
    DEFAULT_CATALOG,
    STANDARD_EASEL_SIZES,
    EaselCatalog,
)
from darkroom_easel.easel.fit import resolve_fit

__all__ = [
    "CacheStats",
    "DEFAULT_CATALOG",
    "EaselCatalog",
    "FitCache",
    "STANDARD_EASEL_SIZES",
    "get_cached_fit",
    "get_fit_cache",
    "reset_fit_cache",
    "resolve_fit",
]
