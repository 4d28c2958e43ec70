"""SHA-1 helpers for content addressing."""

from __future__ import annotations

import hashlib
import string
from pathlib import Path

from regress.core.constants import HASH_CHUNK_SIZE, SHA1_HEX_LENGTH


def sha1_hex_of_bytes(data: bytes) -> str:
    """Return the lowercase SHA-1 hex digest of ``data``."""
    return hashlib.sha1(data).hexdigest()


def sha1_hex_of_file(path: str | Path) -> str:
    """Return the lowercase SHA-1 hex digest of a file, read in chunks.

    Raises:
        OSError: If the file cannot be read.
    """
    digest = hashlib.sha1()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(HASH_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


def is_sha1_hex(value: str) -> bool:
    """True if ``value`` is exactly 40 hexadecimal characters (any case)."""
    return len(value) == SHA1_HEX_LENGTH and all(c in string.hexdigits for c in value)
