"""Standard base64 encoding with padding, and strict decoding."""

from __future__ import annotations

import base64

from .errors import InputError

_ALPHABET = frozenset(
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
)


def _as_bytes(data: str | bytes | bytearray | memoryview) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def base64_encode_size(data: str | bytes | bytearray | memoryview) -> int:
    """Return the length of the base64 text that encodes ``data``."""
    return (len(_as_bytes(data)) + 2) // 3 * 4


def base64_decode_size(text: str | bytes | bytearray | memoryview) -> int:
    """Return the number of bytes that base64 ``text`` decodes to."""
    raw = _as_bytes(text)
    padding = len(raw) - len(raw.rstrip(b"="))
    return len(raw) // 4 * 3 - padding


def base64_encode(data: str | bytes | bytearray | memoryview) -> str:
    """Encode ``data`` as padded base64 text.

    A ``str`` argument is encoded as UTF-8 first.
    """
    return base64.b64encode(_as_bytes(data)).decode("ascii")


def base64_decode(text: str | bytes | bytearray | memoryview) -> bytes:
    """Decode padded base64 ``text`` into bytes.

    Raises ``InputError`` at the first byte outside the base64 alphabet
    (trailing ``=`` padding aside) and ``ValueError`` when the text is not
    made of whole four-character groups.
    """
    raw = _as_bytes(text)
    body = raw.rstrip(b"=")
    padding = len(raw) - len(body)
    bad = next(
        ((offset, byte) for offset, byte in enumerate(body) if byte not in _ALPHABET),
        None,
    )
    if bad is not None:
        raise InputError(*bad)
    if len(raw) % 4 or padding > 2:
        raise ValueError("Invalid base64 text")
    return base64.b64decode(raw)