"""Response caching."""

from mindtrade.cache.ttl_cache import TTLCache, CacheEntry, DEFAULT_TTL_SECONDS, DEFAULT_NAMESPACE

__all__ = [
    "TTLCache",
    "CacheEntry",
    "DEFAULT_TTL_SECONDS",
    "DEFAULT_NAMESPACE",
]
