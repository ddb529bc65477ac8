"""Serialization of a :class:`~cryptcache.models.CacheEntry` into record lines.

A record is exactly four lines, each encrypted on its own::

    line 1: encrypt(str(status_code))
    line 2: encrypt(json(headers))
    line 3: encrypt(hex(body))
    line 4: encrypt(str(expires_at))

There is no header, length prefix or checksum: a record is valid when all
four lines decrypt and parse.
"""

from __future__ import annotations

import json
import re
from collections.abc import Sequence

from cryptcache.exceptions import CipherError, CorruptEntryError
from cryptcache.models import CacheEntry
from cryptcache.secure.cipher import Cipher

RECORD_LINES = 4

_INTEGER = re.compile(r"-?[0-9]+")
_HEX = re.compile(r"(?:[0-9a-fA-F]{2})*")


def _parse_int(text: str, field: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"{field} is not an integer: {text!r}")
    return int(text)


def _parse_hex(text: str) -> bytes:
    if not _HEX.fullmatch(text):
        raise ValueError("body is not hex-encoded")
    return bytes.fromhex(text)


def encode_record(entry: CacheEntry, cipher: Cipher) -> list[str]:
    """Encrypt the fields of *entry* into the four record lines.

    Raises:
        CipherError: If the cipher fails on any field.
    """
    fields = [
        str(entry.status_code),
        json.dumps(entry.headers, ensure_ascii=False, separators=(",", ":")),
        entry.body.hex(),
        str(entry.expires_at),
    ]
    return [cipher.encrypt_line(field) for field in fields]


def decode_record(lines: Sequence[str], cipher: Cipher) -> CacheEntry:
    """Decrypt and parse four record lines back into an entry.

    Raises:
        CorruptEntryError: If the line count is wrong, any line fails to
            decrypt, or any field fails to parse.  No partial entry is ever
            returned.
    """
    if len(lines) != RECORD_LINES:
        raise CorruptEntryError(f"Expected {RECORD_LINES} lines, found {len(lines)}")
    try:
        status, headers, body, expires = (cipher.decrypt_line(line) for line in lines)
        return CacheEntry(
            status_code=_parse_int(status, "status"),
            headers=json.loads(headers),
            body=_parse_hex(body),
            expires_at=_parse_int(expires, "expiry"),
        )
    except (CipherError, ValueError) as exc:
        raise CorruptEntryError(f"Unreadable record: {exc}") from exc
