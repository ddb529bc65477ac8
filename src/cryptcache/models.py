"""Pydantic models shared across cryptcache.

:class:`CacheEntry` is the unit of storage: one cached HTTP response for one
logical key.  :class:`StoreConfig` is the configuration value passed to
:class:`~cryptcache.cache.disk_store.DiskCacheStore`.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path, PurePath
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class CacheEntry(BaseModel):
    """A cached response artifact.

    Attributes:
        status_code: HTTP-like status code.
        headers: Ordered mapping from header name to one or more values.  A
            bare string value is accepted and wrapped in a single-item list.
        body: Raw body bytes.
        expires_at: Expiry timestamp in epoch milliseconds.  The store keeps
            it verbatim and never compares it against the current time.

    Example::

        CacheEntry(
            status_code=200,
            headers={"content-type": "application/json", "set-cookie": ["a=1", "b=2"]},
            body=b'{"id": 1}',
            expires_at=1_700_000_000_000,
        )
    """

    status_code: int
    headers: dict[str, list[str]] = Field(default_factory=dict)
    body: bytes = b""
    expires_at: int = 0

    @field_validator("headers", mode="before")
    @classmethod
    def _wrap_single_values(cls, value: Any) -> Any:
        if not isinstance(value, Mapping):
            return value
        return {
            name: [values] if isinstance(values, str) else values
            for name, values in value.items()
        }


class StoreConfig(BaseModel):
    """Configuration for a single :class:`~cryptcache.cache.disk_store.DiskCacheStore`.

    Attributes:
        directory: Root directory under which all entry files live.  An
            empty path or the current directory is rejected, because
            :meth:`~cryptcache.cache.disk_store.DiskCacheStore.clear` deletes
            the whole root.
        password: Key material for the cipher.  When missing or empty the
            directory path itself is used instead, which keeps entries
            readable across restarts but offers no real secrecy.
    """

    directory: Path
    password: Optional[str] = Field(default=None, repr=False)

    @field_validator("directory", mode="before")
    @classmethod
    def _reject_working_directory(cls, value: Any) -> Any:
        if isinstance(value, (str, PurePath)) and str(Path(value)) == ".":
            raise ValueError("directory must not be empty or the current directory")
        return value

    @property
    def effective_password(self) -> str:
        """The key material actually handed to the cipher."""
        return self.password or str(self.directory)
