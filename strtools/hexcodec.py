"""Lowercase hexadecimal encoding and strict decoding."""

from __future__ import annotations

from .errors import InputError

_HEX_DIGITS = frozenset(b"0123456789abcdefABCDEF")


def _as_bytes(data: str | bytes | bytearray | memoryview) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def hex_encode(data: str | bytes | bytearray | memoryview) -> str:
    """Encode ``data`` as lowercase hexadecimal text.

    A ``str`` argument is encoded as UTF-8 first.
    """
    return _as_bytes(data).hex()


def hex_decode(text: str | bytes | bytearray | memoryview) -> bytes:
    """Decode hexadecimal ``text`` (either letter case) into bytes.

    Raises ``ValueError`` when the length is odd and ``InputError`` at the
    first byte that is not a hexadecimal digit.
    """
    raw = _as_bytes(text)
    if len(raw) % 2:
        raise ValueError("Invalid hex text size")
    bad = next(
        ((offset, byte) for offset, byte in enumerate(raw) if byte not in _HEX_DIGITS),
        None,
    )
    if bad is not None:
        raise InputError(*bad)
    return bytes.fromhex(raw.decode("ascii"))