"""Exception hierarchy for cryptcache.

These exceptions never reach callers of the public store operations.  Each
public operation of :class:`~cryptcache.cache.disk_store.DiskCacheStore`
catches them at its boundary and translates them into a ``None`` or ``False``
result.  They exist so that helpers (codec, cipher, file utilities) can signal
*which* failure happened, and so that logs name it.

Subclass hierarchy::

    CacheStoreError
    +-- EntryNotFoundError   no file for the normalized key
    +-- CorruptEntryError    decrypt or parse failure on an existing file
    +-- WriteFailureError    directory/file creation or write failure
    +-- DeleteFailureError   filesystem deletion failure
    +-- CipherError          encryption or decryption failure
    +-- InvalidKeyError      key cannot be normalized into a file name
"""


class CacheStoreError(Exception):
    """Base exception for all cryptcache errors.

    Args:
        message: Human-readable error description.
        key: Optional normalized key (file name) the error relates to.
    """

    def __init__(self, message: str, key: str | None = None):
        super().__init__(message)
        self.key = key


class EntryNotFoundError(CacheStoreError):
    """Raised when no entry file exists for a normalized key."""


class CorruptEntryError(CacheStoreError):
    """Raised when an entry file exists but cannot be decrypted or parsed."""


class WriteFailureError(CacheStoreError):
    """Raised when an entry file or the store directory cannot be written."""


class DeleteFailureError(CacheStoreError):
    """Raised when an entry file or the store directory cannot be deleted."""


class CipherError(CacheStoreError):
    """Raised by a :class:`~cryptcache.secure.cipher.Cipher` on any failure.

    Wrong key material, tampered or truncated ciphertext, and algorithm-level
    errors all surface as this type so the store can treat them as corruption.
    """


class InvalidKeyError(CacheStoreError):
    """Raised when a key is not a string or the key hasher fails on it."""
