"""Bridge between :mod:`httpx` responses and cache entries.

Functions:
    :func:`entry_from_response` -- capture an :class:`httpx.Response` as a
    :class:`~cryptcache.models.CacheEntry`.
    :func:`response_from_entry` -- rebuild an :class:`httpx.Response` from
    a stored entry.

Example::

    from cryptcache.client import entry_from_response, response_from_entry

    store.replace(key, entry_from_response(response, expires_at=deadline_ms))
    cached = store.get(key)
    if cached is not None:
        response = response_from_entry(cached, request)
"""

from cryptcache.client.response import entry_from_response, response_from_entry

__all__ = ["entry_from_response", "response_from_entry"]
