"""Encrypted disk storage for cached HTTP responses.

This package provides :class:`DiskCacheStore`, a flat key-value store that
keeps one encrypted file per entry, and the :class:`CacheStore` interface it
implements.  :func:`new_store` is the usual way to open one.

The store does not decide what to cache or whether an entry is still fresh;
the HTTP layer computes keys and evaluates ``expires_at`` itself.
"""

from cryptcache.cache.base import CacheStore
from cryptcache.cache.disk_store import DiskCacheStore, new_store

__all__ = ["CacheStore", "DiskCacheStore", "new_store"]
