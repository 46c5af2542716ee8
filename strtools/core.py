"""Basic string helpers: split, join, case conversion, trimming, affixes.

Every function accepts either ``str`` or ``bytes``; case conversion and
trimming work on ASCII characters only, as the C locale does.
"""

from __future__ import annotations

import string
from typing import Iterable, TypeVar

AnyStr = TypeVar("AnyStr", str, bytes)

_WHITESPACE = " \t\n\v\f\r"
_WHITESPACE_BYTES = _WHITESPACE.encode("ascii")

_UPPER_STR = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_LOWER_STR = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_UPPER_BYTES = bytes.maketrans(
    string.ascii_lowercase.encode("ascii"), string.ascii_uppercase.encode("ascii")
)
_LOWER_BYTES = bytes.maketrans(
    string.ascii_uppercase.encode("ascii"), string.ascii_lowercase.encode("ascii")
)


def str_split(text: AnyStr, delimiter: AnyStr, trim: bool = False) -> list[AnyStr]:
    """Split ``text`` at every occurrence of ``delimiter``.

    Empty pieces are kept. With ``trim`` each piece is stripped of
    surrounding whitespace.
    """
    if not delimiter:
        raise ValueError("empty delimiter")
    parts = text.split(delimiter)
    if trim:
        return [str_trim(part) for part in parts]
    return parts


def str_join(parts: Iterable[AnyStr], delimiter: AnyStr) -> AnyStr:
    """Join ``parts`` with ``delimiter`` between each pair."""
    return delimiter.join(parts)


def str_toupper(text: AnyStr) -> AnyStr:
    """Return ``text`` with ASCII lowercase letters made uppercase."""
    if isinstance(text, str):
        return text.translate(_UPPER_STR)
    return bytes(text).translate(_UPPER_BYTES)


def str_tolower(text: AnyStr) -> AnyStr:
    """Return ``text`` with ASCII uppercase letters made lowercase."""
    if isinstance(text, str):
        return text.translate(_LOWER_STR)
    return bytes(text).translate(_LOWER_BYTES)


def str_trim(text: AnyStr) -> AnyStr:
    """Strip ASCII whitespace from both ends of ``text``."""
    if isinstance(text, str):
        return text.strip(_WHITESPACE)
    return text.strip(_WHITESPACE_BYTES)


def str_starts_with(text: AnyStr, prefix: AnyStr) -> bool:
    """Tell whether ``text`` begins with ``prefix``."""
    return text.startswith(prefix)


def str_ends_with(text: AnyStr, suffix: AnyStr) -> bool:
    """Tell whether ``text`` ends with ``suffix``."""
    return text.endswith(suffix)