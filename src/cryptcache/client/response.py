"""Conversion between :class:`httpx.Response` and :class:`~cryptcache.models.CacheEntry`.

The body is stored as :attr:`httpx.Response.content`, which httpx has
already decoded from any ``Content-Encoding``.  Headers describing the
transfer of the original bytes are therefore dropped when a response is
rebuilt, so httpx does not try to decode the body a second time.
"""

from __future__ import annotations

from typing import Optional

import httpx

from cryptcache.models import CacheEntry

_TRANSFER_HEADERS = frozenset({"content-encoding", "transfer-encoding", "content-length"})


def entry_from_response(response: httpx.Response, expires_at: int) -> CacheEntry:
    """Capture *response* as a cache entry.

    Repeated headers (e.g. ``Set-Cookie``) keep every value, in order.
    The response body is read if it has not been already.

    Args:
        response: The response to capture.
        expires_at: Expiry in epoch milliseconds, computed by the caller.

    Returns:
        A :class:`CacheEntry` holding status, headers, body and expiry.
    """
    headers: dict[str, list[str]] = {}
    for name, value in response.headers.multi_items():
        headers.setdefault(name, []).append(value)

    return CacheEntry(
        status_code=response.status_code,
        headers=headers,
        body=response.read(),
        expires_at=expires_at,
    )


def response_from_entry(
    entry: CacheEntry,
    request: Optional[httpx.Request] = None,
) -> httpx.Response:
    """Rebuild an :class:`httpx.Response` from a stored entry.

    Args:
        entry: The cached entry.
        request: Request to attach to the response, so that
            :meth:`httpx.Response.raise_for_status` and ``response.url``
            work as usual.

    Returns:
        A fully-read response whose ``content`` equals ``entry.body``.
    """
    header_list = [
        (name, value)
        for name, values in entry.headers.items()
        if name.lower() not in _TRANSFER_HEADERS
        for value in values
    ]
    return httpx.Response(
        status_code=entry.status_code,
        headers=header_list,
        content=entry.body,
        request=request,
    )
