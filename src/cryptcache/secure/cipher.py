"""Line-oriented encryption for entry records.

Each field of a record is encrypted on its own, so a :class:`Cipher` works
on single lines of text and must produce ciphertext without embedded
newlines.  Any failure is raised as
:class:`~cryptcache.exceptions.CipherError`; the store reads that as "this
entry is corrupt" and purges it.

:class:`FernetCipher` uses :class:`cryptography.fernet.Fernet` (AES-128-CBC
with HMAC-SHA256 and a fresh IV per token).  Its tokens are URL-safe base64
and therefore always a single line.
"""

from __future__ import annotations

import base64
from typing import Protocol, runtime_checkable

from cryptography.fernet import Fernet, InvalidToken
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

from cryptcache.exceptions import CipherError

_KDF_INFO = b"cryptcache fernet line key"


@runtime_checkable
class Cipher(Protocol):
    """Encrypts and decrypts single lines of text."""

    def encrypt_line(self, plaintext: str) -> str:
        """Encrypt *plaintext* into a single line of ciphertext."""
        ...

    def decrypt_line(self, ciphertext: str) -> str:
        """Decrypt a line produced by :meth:`encrypt_line`."""
        ...


def derive_key(password: str) -> bytes:
    """Derive a Fernet key (32 bytes, URL-safe base64) from *password* with HKDF-SHA256."""
    hkdf = HKDF(algorithm=hashes.SHA256(), length=32, salt=None, info=_KDF_INFO)
    material = hkdf.derive(password.encode("utf-8", "surrogatepass"))
    return base64.urlsafe_b64encode(material)


class FernetCipher:
    """:class:`Cipher` backed by Fernet, keyed from a password.

    Two instances built from the same password can read each other's
    ciphertext; instances built from different passwords cannot.

    Args:
        password: Key material.  Any string, including the empty string.
    """

    def __init__(self, password: str) -> None:
        self._fernet = Fernet(derive_key(password))

    def encrypt_line(self, plaintext: str) -> str:
        try:
            token = self._fernet.encrypt(plaintext.encode("utf-8"))
        except UnicodeError as exc:
            raise CipherError(f"Cannot encode plaintext: {exc}") from exc
        return token.decode("ascii")

    def decrypt_line(self, ciphertext: str) -> str:
        try:
            plaintext = self._fernet.decrypt(ciphertext.encode("ascii"))
            return plaintext.decode("utf-8")
        except (InvalidToken, UnicodeError) as exc:
            raise CipherError("Cannot decrypt line") from exc


def create_cipher(password: str) -> Cipher:
    """Return the default :class:`Cipher` for *password*."""
    return FernetCipher(password)
