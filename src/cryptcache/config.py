"""XDG-aware location of the default cache directory.

On Linux/BSD the cache lives under ``$XDG_CACHE_HOME/cryptcache/``
(default ``~/.cache/cryptcache/``).  On macOS and Windows it falls back to
``~/.cryptcache/cache/``.  Cached data can be safely deleted at any time, so
:func:`get_cache_dir` is the only location this package needs.
"""

from __future__ import annotations

import os
import platform
from pathlib import Path

_APP_NAME = "cryptcache"
_HTTP_SUBDIR = "http"


def _is_xdg_platform() -> bool:
    system = platform.system()
    return system == "Linux" or system.endswith("BSD")


def get_cache_dir() -> Path:
    """Return the cache base directory.

    Unlike the store directory itself, this path is not created here: the
    store creates its root lazily on the first successful write.

    Returns:
        Absolute path to the cache base directory.
    """
    if not _is_xdg_platform():
        return Path.home() / f".{_APP_NAME}" / "cache"
    xdg_cache = os.environ.get("XDG_CACHE_HOME", "")
    base = Path(xdg_cache) if xdg_cache else Path.home() / ".cache"
    return base / _APP_NAME


def default_store_dir() -> Path:
    """Return the default root directory for HTTP response entries."""
    return get_cache_dir() / _HTTP_SUBDIR
