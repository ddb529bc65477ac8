"""One-way hashing of cache keys into file names."""

from __future__ import annotations

import hashlib
from collections.abc import Callable

KeyHasher = Callable[[str], str]
"""Maps arbitrary text to a fixed-length, filesystem-safe identifier."""


def md5_hex(text: str) -> str:
    """Return the lowercase hex MD5 digest of *text*.

    Lone surrogates are encoded with ``surrogatepass`` so that any Python
    string hashes without error.
    """
    data = text.encode("utf-8", "surrogatepass")
    return hashlib.md5(data, usedforsecurity=False).hexdigest()


def normalize_key(directory: str, key: str, hasher: KeyHasher = md5_hex) -> str:
    """Map a raw cache key to the file name that stores its entry.

    The directory is part of the hashed material, so the same raw key yields
    different file names in different stores.

    Args:
        directory: The store's root directory, as a string.
        key: The caller's raw key.  May be empty.
        hasher: Hash function producing the file name.

    Returns:
        The normalized key, e.g. a 32-character hex string for MD5.
    """
    return hasher(directory + key)
