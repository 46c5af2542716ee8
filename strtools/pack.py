"""Binary packing and unpacking driven by a compact format string.

Format options:

``b``/``B``  signed/unsigned 1-byte integer
``h``/``H``  signed/unsigned 2-byte integer
``l``/``L``  signed/unsigned 8-byte integer
``T``        8-byte unsigned size
``i[n]``     signed integer of ``n`` bytes (default 4)
``I[n]``     unsigned integer of ``n`` bytes (default 4)
``f``/``d``  4-byte float / 8-byte double
``s[n]``     string preceded by its length as an ``n``-byte integer (default 8)
``z``        zero-terminated string
``c<n>``     fixed-size string of ``n`` bytes, zero padded
``x``        one zero byte of padding
``X<op>``    pad to the alignment of the option ``op``
``<`` ``>`` ``=``  little, big or native byte order
``![n]``     maximum alignment (default 8)
`` ``        ignored
"""

from __future__ import annotations

import enum
import math
import struct
import sys
from dataclasses import dataclass

from .errors import InputError

_NATIVE_LITTLE = sys.byteorder == "little"
_INT_SIZE = 4
_SIZE_T = 8
_MAX_ALIGN = 8
_NUMBER_LIMIT = (2**31 - 1 - 9) // 10
_U64 = (1 << 64) - 1
_DIGITS = "0123456789"


class Kind(enum.Enum):
    """The kind of one format option."""

    INT = "int"
    UINT = "uint"
    FLOAT = "float"
    DOUBLE = "double"
    CHAR = "charn"
    STRING = "string"
    ZSTR = "zstr"
    PADDING = "padding"
    PADDALIGN = "paddalign"
    NOP = "nop"
    END = "end"


_NUMERIC_KINDS = frozenset({Kind.INT, Kind.UINT, Kind.FLOAT, Kind.DOUBLE})
_SKIP_KINDS = frozenset({Kind.PADDALIGN, Kind.NOP})
_TEXT_TYPES = (str, bytes, bytearray, memoryview)

_FIXED = {
    "b": (Kind.INT, 1),
    "B": (Kind.UINT, 1),
    "h": (Kind.INT, 2),
    "H": (Kind.UINT, 2),
    "l": (Kind.INT, 8),
    "L": (Kind.UINT, 8),
    "T": (Kind.UINT, _SIZE_T),
    "f": (Kind.FLOAT, 4),
    "d": (Kind.DOUBLE, 8),
    "x": (Kind.PADDING, 1),
}


@dataclass(frozen=True)
class Option:
    """One parsed format option with the padding that must precede it."""

    kind: Kind
    size: int
    ntoalign: int
    little: bool


class FormatParser:
    """Reads a format string one option at a time, tracking alignment."""

    def __init__(self, fmt: str | bytes) -> None:
        self._fmt = fmt.decode("latin-1") if isinstance(fmt, (bytes, bytearray)) else fmt
        self._offset = 0
        self._little = _NATIVE_LITTLE
        self._maxalign = 1
        self._total = 0

    def add_size(self, size: int) -> None:
        """Account for ``size`` more bytes of packed data."""
        self._total += size

    def next_option(self) -> Option:
        """Parse and return the next option; ``Kind.END`` once exhausted."""
        little = self._little
        kind = Kind.NOP
        size = 0
        align = 0
        if self._offset >= len(self._fmt):
            kind = Kind.END
        else:
            ch = self._fmt[self._offset]
            self._offset += 1
            if ch in _FIXED:
                kind, size = _FIXED[ch]
            elif ch in "iI":
                size = self._read_number(_INT_SIZE)
                kind = Kind.INT if ch == "i" else Kind.UINT
            elif ch == "s":
                size = self._read_number(_SIZE_T)
                kind = Kind.STRING
            elif ch == "z":
                kind = Kind.ZSTR
            elif ch == "c":
                count = self._read_number(None)
                if count is None:
                    raise ValueError("missing size for format option 'c'")
                size = count
                kind = Kind.CHAR
            elif ch == "X":
                target = self.next_option()
                if target.kind is Kind.CHAR or target.size == 0:
                    raise ValueError("invalid next option for option 'X'")
                align = target.size
                kind = Kind.PADDALIGN
            elif ch == " ":
                pass
            elif ch == "<":
                self._little = True
            elif ch == ">":
                self._little = False
            elif ch == "=":
                self._little = _NATIVE_LITTLE
            elif ch == "!":
                self._maxalign = self._read_number(_MAX_ALIGN)
            else:
                raise InputError(self._offset - 1, ord(ch))

        if kind is not Kind.PADDALIGN:
            align = size
        ntoalign = 0
        if align > 1 and kind is not Kind.CHAR:
            align = min(align, self._maxalign)
            if align > 1:
                if align & (align - 1):
                    raise ValueError("format asks for alignment not power of 2")
                ntoalign = (align - (self._total & (align - 1))) & (align - 1)
        return Option(kind, size, ntoalign, little)

    def _read_number(self, default: int | None) -> int | None:
        fmt = self._fmt
        if self._offset >= len(fmt) or fmt[self._offset] not in _DIGITS:
            return default
        number = 0
        while True:
            number = number * 10 + int(fmt[self._offset])
            self._offset += 1
            if (
                self._offset >= len(fmt)
                or fmt[self._offset] not in _DIGITS
                or number > _NUMBER_LIMIT
            ):
                return number


def _as_bytes(data: str | bytes | bytearray | memoryview) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _mismatch(type_name: str, kind: Kind) -> TypeError:
    return TypeError(f"Type mismatch({type_name}, {kind.value})")


def _overflow(offset: int, length: int) -> ValueError:
    return ValueError(f"Data overflow. offset = {offset}, len = {length}")


def _pack_int(value: int, option: Option, negative: bool) -> bytes:
    size = option.size
    bits = (1 << (8 * size)) - 1
    number = value & _U64
    if negative and size > 8:
        number |= bits ^ _U64
    return (number & bits).to_bytes(size, "little" if option.little else "big")


def _pack_float(value: int | float, option: Option) -> bytes:
    code = ("<" if option.little else ">") + ("f" if option.kind is Kind.FLOAT else "d")
    try:
        return struct.pack(code, float(value))
    except OverflowError:
        return struct.pack(code, math.inf if value > 0 else -math.inf)


def _pack_value(out: bytearray, option: Option, value: object, parser: FormatParser) -> None:
    kind = option.kind
    if kind in _NUMERIC_KINDS:
        if isinstance(value, _TEXT_TYPES):
            raise _mismatch("string", kind)
        if not isinstance(value, (int, float)):
            raise _mismatch(type(value).__name__, kind)
        if kind is Kind.INT:
            out += _pack_int(int(value), option, value < 0)
        elif kind is Kind.UINT:
            out += _pack_int(int(value), option, False)
        else:
            out += _pack_float(value, option)
        return

    if not isinstance(value, _TEXT_TYPES):
        raise _mismatch(type(value).__name__, kind)
    data = _as_bytes(value)
    if kind is Kind.CHAR:
        padding = option.size - len(data)
        if padding < 0:
            raise ValueError("string longer than given size")
        out += data
        out += bytes(padding)
    elif kind is Kind.STRING:
        out += _pack_int(len(data), option, False)
        out += data
        parser.add_size(len(data))
    else:
        out += data
        out.append(0)
        parser.add_size(len(data) + 1)


def str_pack(fmt: str | bytes, *args: object) -> bytes:
    """Pack ``args`` according to ``fmt`` and return the bytes.

    Arguments left over once the format ends are ignored; too few raise
    ``ValueError``.
    """
    parser = FormatParser(fmt)
    out = bytearray()
    values = iter(args)
    missing = object()
    while True:
        option = parser.next_option()
        out += bytes(option.ntoalign)
        parser.add_size(option.ntoalign + option.size)
        kind = option.kind
        if kind is Kind.END:
            break
        if kind is Kind.PADDING:
            out.append(0)
        elif kind not in _SKIP_KINDS:
            value = next(values, missing)
            if value is missing:
                raise ValueError("not enough arguments for format")
            _pack_value(out, option, value, parser)
    return bytes(out)


def _unpack_int(chunk: bytes, little: bool, signed: bool) -> int:
    size = len(chunk)
    if size == 0:
        return 0
    ordered = chunk if little else chunk[::-1]
    low = int.from_bytes(ordered[:8], "little")
    if size < 8:
        if signed and low >> (size * 8 - 1):
            low -= 1 << (size * 8)
        return low
    value = low - (1 << 64) if signed and low >> 63 else low
    if size > 8:
        fill = 0xFF if value < 0 else 0
        if any(byte != fill for byte in ordered[8:]):
            raise ValueError(f"{size}-byte integer does not fit into Integer")
    return value


def _unpack_value(raw: bytes, offset: int, option: Option) -> tuple[object, int]:
    kind = option.kind
    length = len(raw)
    if kind is Kind.STRING:
        start = offset + option.size
        if start > length:
            raise _overflow(start, length)
        count = _unpack_int(raw[offset:start], option.little, False)
        end = start + count
        if end > length:
            raise _overflow(end, length)
        return raw[start:end], option.size + count
    if kind is Kind.ZSTR:
        nul = raw.find(0, offset)
        if nul < 0:
            raise _overflow(length + 1, length)
        return raw[offset:nul], nul - offset + 1

    end = offset + option.size
    if end > length:
        raise _overflow(end, length)
    chunk = raw[offset:end]
    if kind is Kind.CHAR:
        return chunk, option.size
    if kind in (Kind.FLOAT, Kind.DOUBLE):
        code = ("<" if option.little else ">") + ("f" if kind is Kind.FLOAT else "d")
        return struct.unpack(code, chunk)[0], option.size
    return _unpack_int(chunk, option.little, kind is Kind.INT), option.size


def str_unpack(
    fmt: str | bytes, data: str | bytes | bytearray | memoryview
) -> tuple[object, ...]:
    """Unpack ``data`` according to ``fmt``.

    Returns every decoded value (integers, floats, or bytes for strings)
    followed by the offset just past the last byte read.
    """
    raw = _as_bytes(data)
    parser = FormatParser(fmt)
    values: list[object] = []
    offset = 0
    while True:
        option = parser.next_option()
        offset += option.ntoalign
        parser.add_size(option.ntoalign)
        kind = option.kind
        if kind is Kind.PADDING:
            offset += 1
            parser.add_size(1)
        elif kind not in _SKIP_KINDS and kind is not Kind.END:
            if offset > len(raw):
                raise _overflow(offset, len(raw))
            value, consumed = _unpack_value(raw, offset, option)
            values.append(value)
            offset += consumed
            parser.add_size(consumed)
        if offset > len(raw):
            raise _overflow(offset, len(raw))
        if kind is Kind.END:
            break
    return (*values, offset)