import pytest

from strtools.errors import InputError
from strtools.hexcodec import hex_encode
from strtools.pack import FormatParser, Kind, str_pack, str_unpack


def test_native_i2():
    assert hex_encode(str_pack("i2", 1)) == "0100"


@pytest.mark.parametrize(
    "fmt, value",
    [
        ("B", 0xFF),
        ("b", 0x7F),
        ("b", -0x80),
        ("H", 0xFFFF),
        ("h", 0x7FFF),
        ("h", -0x8000),
        ("L", 0xFFFFFFFF),
        ("l", 0x7FFFFFFF),
        ("l", -0x80000000),
    ],
)
def test_integer_round_trip(fmt, value):
    assert str_unpack(fmt, str_pack(fmt, value))[:-1] == (value,)


def test_zstr_and_byte():
    packed = str_pack("zB", "abc", 247)
    assert hex_encode(packed) == "61626300f7"
    assert str_unpack("zB", packed) == (b"abc", 247, len(packed))


def test_fixed_strings():
    assert str_pack("<! c3", "abc") == b"abc"
    assert str_pack("<!4 c6", "abcdef") == b"abcdef"
    assert hex_encode(str_pack("c8", "123456")) == "3132333435360000"


def test_unpack_zstr_then_chars():
    buf = b"abcdefghi\0xyz"
    assert str_unpack("!4 z c3", buf) == (b"abcdefghi", b"xyz", 13)


def test_mixed_numbers_round_trip():
    fmt = "<b h b f d f I i"
    packed = str_pack(fmt, 1, 2, 3, 4, 5, 6, 7, 8)
    *values, pos = str_unpack(fmt, packed)
    assert values == [1, 2, 3, 4.0, 5.0, 6.0, 7, 8]
    assert pos == len(packed) == 28


def test_spaces_and_sizes():
    assert hex_encode(str_pack(" < i1 i2 ", 2, 3)) == "020300"


def test_big_endian_alignment():
    fmt = " >!8 b Xh i4 i8 c1 Xi8"
    packed = str_pack(fmt, -12, 100, 200, b"\xec")
    assert hex_encode(packed) == "f40000000000006400000000000000c8ec00000000000000"
    assert str_unpack(fmt, packed) == (-12, 100, 200, b"\xec", len(packed))


def test_strings_with_alignment():
    fmt = ">!4 c3 c4 c2 z i4 c5 c2 Xi4"
    packed = str_pack(fmt, "abc", "abcd", "xz", "hello", 5, "world", "xy")
    assert hex_encode(packed) == "61626361626364787a68656c6c6f000000000005776f726c64787900"
    assert str_unpack(fmt, packed) == (
        b"abc",
        b"abcd",
        b"xz",
        b"hello",
        5,
        b"world",
        b"xy",
        len(packed),
    )


def test_alignment_clamped_by_default_maxalign():
    fmt = " b b Xd b Xb x"
    packed = str_pack(fmt, 1, 2, 3)
    assert hex_encode(packed) == "01020300"
    assert str_unpack(fmt, packed) == (1, 2, 3, 4)


def test_length_prefixed_string():
    packed = str_pack("<s2", b"hi")
    assert packed == b"\x02\x00hi"
    assert str_unpack("<s2", packed) == (b"hi", 4)


def test_wide_negative_integer():
    packed = str_pack("<i9", -1)
    assert packed == b"\xff" * 9
    assert str_unpack("<i9", packed) == (-1, 9)


def test_wide_integer_that_does_not_fit():
    with pytest.raises(ValueError, match="does not fit"):
        str_unpack("<i9", b"\x01" + b"\0" * 7 + b"\x01")


def test_big_endian_double():
    assert hex_encode(str_pack(">d", 1.5)) == "3ff8000000000000"


def test_str_argument_is_utf8():
    assert str_pack("z", "é") == b"\xc3\xa9\x00"


def test_extra_arguments_are_ignored():
    assert str_pack("b", 1, 2) == b"\x01"


def test_missing_argument():
    with pytest.raises(ValueError, match="not enough arguments"):
        str_pack("b b", 1)


def test_char_needs_size():
    with pytest.raises(ValueError, match="missing size"):
        str_pack("c", "a")


@pytest.mark.parametrize("fmt", ["Xc3", "X"])
def test_invalid_align_target(fmt):
    with pytest.raises(ValueError, match="invalid next option"):
        str_pack(fmt)


def test_alignment_not_power_of_two():
    with pytest.raises(ValueError, match="power of 2"):
        str_pack("!8 i3", 1)


def test_unknown_option():
    with pytest.raises(InputError) as info:
        str_pack("b q", 1)
    assert info.value.offset == 2
    assert info.value.byte == ord("q")


def test_string_too_long():
    with pytest.raises(ValueError, match="longer than given size"):
        str_pack("c2", "abc")


def test_type_mismatch_string_for_int():
    with pytest.raises(TypeError, match=r"Type mismatch\(string, int\)"):
        str_pack("b", "abc")


def test_type_mismatch_int_for_chars():
    with pytest.raises(TypeError, match=r"Type mismatch\(int, charn\)"):
        str_pack("c2", 5)


def test_unpack_overflow():
    with pytest.raises(ValueError, match="Data overflow"):
        str_unpack("i4", b"\x01\x02")


def test_unpack_zstr_without_terminator():
    with pytest.raises(ValueError, match="Data overflow"):
        str_unpack("z", b"abc")


def test_parser_options_sequence():
    parser = FormatParser("<i2")
    first = parser.next_option()
    second = parser.next_option()
    third = parser.next_option()
    assert first.kind is Kind.NOP
    assert (second.kind, second.size, second.little) == (Kind.INT, 2, True)
    assert third.kind is Kind.END


def test_parser_alignment_follows_size():
    parser = FormatParser("!4 i4")
    assert parser.next_option().kind is Kind.NOP
    assert parser.next_option().kind is Kind.NOP
    parser.add_size(1)
    option = parser.next_option()
    assert option.kind is Kind.INT
    assert option.ntoalign == 3