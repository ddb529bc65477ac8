"""cryptcache -- Encrypted, single-entry-per-key disk cache for HTTP responses.

An HTTP client stores response artifacts (status, headers, body, expiry)
under a request fingerprint it computes itself.  Each entry lives in its own
file named by a hash of the store directory and the key, and every field is
encrypted line by line.

Typical usage::

    from cryptcache import CacheEntry, new_store

    store = new_store("/tmp/http-cache", password="s3cret")
    store.replace("GET https://api.example.com/users", CacheEntry(
        status_code=200, headers={"content-type": ["application/json"]},
        body=b"[]", expires_at=1_700_000_000_000,
    ))
    entry = store.get("GET https://api.example.com/users")

Modules:
    models: Pydantic models for entries and store configuration.
    config: XDG-aware default cache directory.
    exceptions: Internal error taxonomy.
    fileutil: Filesystem primitives (directory creation, deletion, atomic writes).
    secure: Cipher boundary and key normalization.
    cache: Record codec and the disk-backed store.
    client: Conversion between :class:`httpx.Response` and cache entries.
"""

from cryptcache.cache import CacheStore, DiskCacheStore, new_store
from cryptcache.models import CacheEntry, StoreConfig

__version__ = "0.1.0"

__all__ = [
    "CacheEntry",
    "CacheStore",
    "DiskCacheStore",
    "StoreConfig",
    "new_store",
]
