import pytest

from strtools.base64codec import (
    base64_decode,
    base64_decode_size,
    base64_encode,
    base64_encode_size,
)
from strtools.errors import InputError

CASES = [
    ("a", "YQ=="),
    ("ab", "YWI="),
    ("abc", "YWJj"),
    (
        "abcdefghijklmnopqrstuvwxyz0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789",
        "YWJjZGVmZ2hpamtsbW5vcHFyc3R1dnd4eXowMTIzNDU2Nzg5QUJDRE"
        "VGR0hJSktMTU5PUFFSU1RVVldYWVowMTIzNDU2Nzg5",
    ),
    ("abc123!?$*&()'-=@~", "YWJjMTIzIT8kKiYoKSctPUB+"),
    ("TutorialsPoint?java8", "VHV0b3JpYWxzUG9pbnQ/amF2YTg="),
]


@pytest.mark.parametrize("plain, encoded", CASES)
def test_encode_known_values(plain, encoded):
    assert base64_encode(plain) == encoded


@pytest.mark.parametrize("plain, encoded", CASES)
def test_decode_known_values(plain, encoded):
    assert base64_decode(encoded) == plain.encode("ascii")


def _long_text():
    text = "abcdefghijklmnopqrstuvwxyz0123456789"
    for _ in range(10):
        text += text
    return text


@pytest.mark.parametrize(
    "length", list(range(1, 130)) + [255, 256, 257, 1000, 4095, 4096, 36864]
)
def test_round_trip_prefixes(length):
    prefix = _long_text()[:length]
    assert base64_decode(base64_encode(prefix)) == prefix.encode("ascii")


def test_invalid_byte_reports_offset():
    text = "YWJkZWZhZWRmYWZhZmFmYWZhZmFmYXNmYWZhc2Zkc2FmZGFzeHp2enZhYXNkYWRhZGFzZGFk]Q=="
    with pytest.raises(InputError) as info:
        base64_decode(text)
    assert info.value.offset == 72
    assert info.value.byte == ord("]")


def test_padding_inside_text_is_rejected():
    with pytest.raises(InputError) as info:
        base64_decode("YQ==YWJj")
    assert info.value.offset == 2


def test_incomplete_group_is_rejected():
    with pytest.raises(ValueError):
        base64_decode("YWJ")


def test_empty_round_trip():
    assert base64_encode(b"") == ""
    assert base64_decode("") == b""


def test_bytes_input_round_trip():
    data = bytes(range(256))
    assert base64_decode(base64_encode(data).encode("ascii")) == data


@pytest.mark.parametrize("length, expected", [(0, 0), (1, 4), (2, 4), (3, 4), (4, 8)])
def test_encode_size(length, expected):
    assert base64_encode_size(b"x" * length) == expected


@pytest.mark.parametrize(
    "text, expected", [("", 0), ("YQ==", 1), ("YWI=", 2), ("YWJj", 3), ("YWJjYQ==", 4)]
)
def test_decode_size(text, expected):
    assert base64_decode_size(text) == expected