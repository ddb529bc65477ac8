"""Shared test fixtures for cryptcache.

Provides a store rooted in a disposable directory, a representative entry,
and isolation of the XDG cache location so tests never touch the real user
cache.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from cryptcache import CacheEntry, DiskCacheStore, new_store


# ---------------------------------------------------------------------------
# Store fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def store_dir(tmp_path: Path) -> Path:
    """Root directory for a test store (not created up front)."""
    return tmp_path / "http-cache"


@pytest.fixture
def store(store_dir: Path) -> DiskCacheStore:
    """A password-protected store over :func:`store_dir`."""
    return new_store(store_dir, password="correct horse battery staple")


# ---------------------------------------------------------------------------
# Entry fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_entry() -> CacheEntry:
    """A response entry with repeated headers and non-UTF-8 body bytes."""
    return CacheEntry(
        status_code=200,
        headers={
            "content-type": ["application/octet-stream"],
            "set-cookie": ["a=1; Path=/", "b=2; Path=/"],
            "etag": ['"abc123"'],
        },
        body=b"\x00\xff\x10binary\nbody\r\n",
        expires_at=1_893_456_000_000,
    )


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_cache_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the XDG cache location at a temporary directory.

    Returns:
        The directory used as ``XDG_CACHE_HOME``.
    """
    cache_home = tmp_path / "xdg-cache"
    monkeypatch.setattr("cryptcache.config._is_xdg_platform", lambda: True)
    monkeypatch.setenv("XDG_CACHE_HOME", str(cache_home))
    return cache_home
