"""In-memory document cache for cvterm."""

from cvterm.cache.data_cache import DEFAULT_TTL_MS, CacheEntry, CacheState, DataCache

__all__ = ["DEFAULT_TTL_MS", "CacheEntry", "CacheState", "DataCache"]
