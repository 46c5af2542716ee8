"""MD5 digests of byte strings."""

from __future__ import annotations

import hashlib

from .hexcodec import hex_encode


def _as_bytes(data: str | bytes | bytearray | memoryview) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def md5(data: str | bytes | bytearray | memoryview) -> bytes:
    """Return the 16-byte MD5 digest of ``data``.

    A ``str`` argument is encoded as UTF-8 first.
    """
    return hashlib.md5(_as_bytes(data), usedforsecurity=False).digest()


def md5sum(data: str | bytes | bytearray | memoryview) -> str:
    """Return the MD5 digest of ``data`` as lowercase hexadecimal text."""
    return hex_encode(md5(data))