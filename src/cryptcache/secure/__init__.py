"""Cipher boundary and key normalization.

Both capabilities are plain interfaces so the store can be exercised with
fakes in tests:

- :class:`~cryptcache.secure.cipher.Cipher` encrypts and decrypts single
  lines of text.  :class:`~cryptcache.secure.cipher.FernetCipher` is the
  default implementation, backed by :mod:`cryptography`.
- :data:`~cryptcache.secure.digest.KeyHasher` maps text to a fixed-length,
  path-safe string.  :func:`~cryptcache.secure.digest.md5_hex` is the default.
"""

from cryptcache.secure.cipher import Cipher, FernetCipher, create_cipher
from cryptcache.secure.digest import KeyHasher, md5_hex, normalize_key

__all__ = [
    "Cipher",
    "FernetCipher",
    "KeyHasher",
    "create_cipher",
    "md5_hex",
    "normalize_key",
]
