"""Abstract cache store interface."""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from cryptcache.models import CacheEntry


@runtime_checkable
class CacheStore(Protocol):
    """Key-value storage for :class:`~cryptcache.models.CacheEntry` objects.

    Implementations never raise from these methods: failures are reported
    as ``None`` or ``False``.
    """

    def get(self, key: str) -> Optional[CacheEntry]:
        """Return the entry stored under *key*, or None if absent or unreadable."""
        ...

    def replace(self, key: str, entry: CacheEntry) -> bool:
        """Store *entry* under *key*, replacing any previous entry."""
        ...

    def remove(self, key: str) -> bool:
        """Remove the entry under *key*; True if it is gone afterwards."""
        ...

    def clear(self) -> bool:
        """Remove every entry; True if the store is empty afterwards."""
        ...
