"""SHA-1 digests, one-shot or fed incrementally."""

from __future__ import annotations

import hashlib

from .hexcodec import hex_encode

DIGEST_SIZE = 20


def _as_bytes(data: str | bytes | bytearray | memoryview) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


class Sha1:
    """An incremental SHA-1 hasher."""

    def __init__(self) -> None:
        self._hash = hashlib.sha1(usedforsecurity=False)

    def update(self, data: str | bytes | bytearray | memoryview) -> None:
        """Feed more ``data`` into the hash; ``str`` is encoded as UTF-8."""
        self._hash.update(_as_bytes(data))

    def digest(self) -> bytes:
        """Return the 20-byte digest of everything fed so far."""
        return self._hash.digest()


def sha1(data: str | bytes | bytearray | memoryview) -> bytes:
    """Return the 20-byte SHA-1 digest of ``data``."""
    hasher = Sha1()
    hasher.update(data)
    return hasher.digest()


def sha1sum(data: str | bytes | bytearray | memoryview) -> str:
    """Return the SHA-1 digest of ``data`` as lowercase hexadecimal text."""
    return hex_encode(sha1(data))