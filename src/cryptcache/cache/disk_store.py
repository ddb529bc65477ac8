"""Encrypted, file-per-entry disk store.

:class:`DiskCacheStore` keeps each entry in its own file directly inside the
root directory.  File names are the hash of ``directory + key`` (see
:func:`~cryptcache.secure.digest.normalize_key`), and file contents are the
four encrypted lines produced by :mod:`cryptcache.cache.codec`.

Failure handling is fail-silent at the public surface:

- A record that cannot be read, decrypted or parsed is deleted and reported
  as a miss.  Callers cannot tell "never cached" from "was corrupt".
- A failed write deletes whatever is at the entry path and reports ``False``.
  Writes go through a temp file and an atomic rename, so no reader ever
  sees a half-written record.

A single :class:`threading.Lock` serializes every operation on a handle,
regardless of key.  Two handles over the same directory are not coordinated.

See Also:
    :class:`~cryptcache.models.StoreConfig` -- directory and password.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Optional

from cryptcache.cache.codec import decode_record, encode_record
from cryptcache.config import default_store_dir
from cryptcache.exceptions import (
    CacheStoreError,
    CorruptEntryError,
    EntryNotFoundError,
    InvalidKeyError,
    WriteFailureError,
)
from cryptcache.fileutil import atomic_write_lines, delete_path, ensure_directory
from cryptcache.models import CacheEntry, StoreConfig
from cryptcache.secure.cipher import Cipher, create_cipher
from cryptcache.secure.digest import KeyHasher, md5_hex, normalize_key

logger = logging.getLogger(__name__)


class DiskCacheStore:
    """Disk-backed, encrypted :class:`~cryptcache.cache.base.CacheStore`.

    The cipher is bound once at construction.  Without an explicit *cipher*
    it is derived from ``config.password``, or from the directory path when
    no password is set.  Handles opened with different passwords over the
    same directory cannot read each other's entries, and each purges the
    other's files as corrupt when it tries.

    Args:
        config: Root directory and optional password.
        cipher: Line cipher to use instead of the default Fernet cipher.
        key_hasher: Hash used to turn keys into file names.  Defaults to
            hex MD5.

    Example::

        store = DiskCacheStore(StoreConfig(directory="/tmp/cache", password="pw"))
        store.replace("users", CacheEntry(status_code=200, body=b"[]"))
        entry = store.get("users")
    """

    def __init__(
        self,
        config: StoreConfig,
        cipher: Optional[Cipher] = None,
        key_hasher: KeyHasher = md5_hex,
    ) -> None:
        self._lock = threading.Lock()
        self._directory = config.directory
        self._cipher = cipher if cipher is not None else create_cipher(config.effective_password)
        self._key_hasher = key_hasher

    @property
    def directory(self) -> Path:
        """Root directory holding the entry files."""
        return self._directory

    # ------------------------------------------------------------------ #
    # Public operations
    # ------------------------------------------------------------------ #

    def get(self, key: str) -> Optional[CacheEntry]:
        """Read the entry stored under *key*.

        Returns:
            The entry, or ``None`` when no regular file exists for the key,
            the key cannot be normalized, or the file is unreadable.
            Unreadable files are deleted.
        """
        with self._lock:
            try:
                path = self._entry_path(key)
            except InvalidKeyError as exc:
                logger.warning("Cache lookup skipped: %s", exc)
                return None
            try:
                return self._read_entry(path)
            except EntryNotFoundError:
                logger.debug("Cache miss for %s", path.name)
                return None
            except Exception as exc:
                logger.warning("Purging unreadable cache entry %s: %s", path.name, exc)
                self._purge(path)
                return None

    def replace(self, key: str, entry: CacheEntry) -> bool:
        """Store *entry* under *key*, replacing any previous entry.

        Returns:
            ``True`` once all four record lines are written, flushed and
            synced to disk.  ``False`` for an empty or unusable key, a
            ``None`` entry, or any write failure; after a write failure
            nothing is left at the entry path.
        """
        with self._lock:
            if not key or entry is None:
                return False
            try:
                path = self._entry_path(key)
                ensure_directory(self._directory)
            except (InvalidKeyError, WriteFailureError) as exc:
                logger.warning("Cache write skipped: %s", exc)
                return False

            try:
                self._write_entry(path, entry)
            except Exception as exc:
                logger.warning("Failed to write cache entry %s: %s", path.name, exc)
                self._purge(path)
                return False
            return True

    def remove(self, key: str) -> bool:
        """Delete the entry stored under *key*.

        Returns:
            ``True`` if nothing exists at the entry path afterwards, which
            includes the case where nothing was there to begin with.
        """
        with self._lock:
            try:
                delete_path(self._entry_path(key))
            except Exception as exc:
                logger.warning("Failed to remove cache entry: %s", exc)
                return False
            return True

    def clear(self) -> bool:
        """Delete the root directory and every entry in it.

        Returns:
            ``True`` if the root directory no longer exists afterwards.
        """
        with self._lock:
            try:
                delete_path(self._directory)
            except Exception as exc:
                logger.warning("Failed to clear cache: %s", exc)
                return False
            return True

    # ------------------------------------------------------------------ #
    # Private helpers (called with the lock held)
    # ------------------------------------------------------------------ #

    def _entry_path(self, key: str) -> Path:
        if not isinstance(key, str):
            raise InvalidKeyError(f"Cache key must be a string, not {type(key).__name__}")
        try:
            name = normalize_key(str(self._directory), key, self._key_hasher)
        except Exception as exc:
            raise InvalidKeyError(f"Cannot normalize cache key: {exc}") from exc
        return self._directory / name

    def _read_entry(self, path: Path) -> CacheEntry:
        if not path.is_file():
            raise EntryNotFoundError("No entry file", key=path.name)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise CorruptEntryError(f"Cannot read entry file: {exc}", key=path.name) from exc
        return decode_record(text.splitlines(), self._cipher)

    def _write_entry(self, path: Path, entry: CacheEntry) -> None:
        lines = encode_record(entry, self._cipher)
        try:
            atomic_write_lines(path, lines)
        except OSError as exc:
            raise WriteFailureError(f"Cannot write entry file: {exc}", key=path.name) from exc

    def _purge(self, path: Path) -> None:
        try:
            delete_path(path)
        except CacheStoreError as exc:
            logger.warning("Failed to purge cache entry %s: %s", path.name, exc)


def new_store(
    directory: str | Path | None = None,
    *,
    password: Optional[str] = None,
) -> DiskCacheStore:
    """Open a :class:`DiskCacheStore` over *directory*.

    Args:
        directory: Root directory for entry files.  Defaults to
            :func:`~cryptcache.config.default_store_dir`.  It is created on
            the first successful :meth:`~DiskCacheStore.replace`.
        password: Cipher key material.  When omitted or empty the directory
            path is used instead.

    Returns:
        A ready-to-use store handle.

    Raises:
        pydantic.ValidationError: If *directory* is empty or resolves to
            the current working directory.
    """
    if directory is None:
        directory = default_store_dir()
    return DiskCacheStore(StoreConfig(directory=directory, password=password))
