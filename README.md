# strtools

A small library of string and byte utilities, with no dependencies outside
the standard library.

| Module | Contents |
|--------|----------|
| `strtools.core` | `str_split`, `str_join`, `str_toupper`, `str_tolower`, `str_trim`, `str_starts_with`, `str_ends_with` |
| `strtools.hexcodec` | `hex_encode`, `hex_decode` |
| `strtools.base64codec` | `base64_encode`, `base64_decode`, `base64_encode_size`, `base64_decode_size` |
| `strtools.md5` | `md5`, `md5sum` |
| `strtools.sha1` | `sha1`, `sha1sum`, the incremental `Sha1` hasher |
| `strtools.aes128` | `aes128_enc`, `aes128_dec` |
| `strtools.pack` | `str_pack`, `str_unpack`, and the `FormatParser`, `Option` and `Kind` they are built on |
| `strtools.errors` | `InputError` |

## Installation

```
pip install .
```

## Examples

```python
from strtools.core import str_split, str_join, str_toupper, str_trim
from strtools.hexcodec import hex_encode, hex_decode
from strtools.base64codec import base64_encode, base64_decode
from strtools.md5 import md5sum
from strtools.sha1 import Sha1, sha1sum
from strtools.aes128 import aes128_enc, aes128_dec
from strtools.pack import str_pack, str_unpack

str_split("a,,bb,,ccc", ",,")          # ['a', 'bb', 'ccc']
str_split("a , b", ",", trim=True)     # ['a', 'b']
str_join(["a", "bb"], ",")             # 'a,bb'
str_toupper("abc123")                  # 'ABC123'
str_trim(" abc ")                      # 'abc'

hex_encode(b"hello,world")             # '68656c6c6f2c776f726c64'
hex_decode("68656c6c6f")               # b'hello'
base64_encode(b"ab")                   # 'YWI='
base64_decode("YWI=")                  # b'ab'

md5sum(b"hello")                       # '5d41402abc4b2a76b9719d911017c592'
sha1sum(b"hello")                      # 'aaf4c61ddcc5e8a2dabede0f3b482cd9aea9434d'

hasher = Sha1()
hasher.update(b"hel")
hasher.update(b"lo")
hasher.digest()                        # 20-byte digest of b"hello"

cipher = aes128_enc(b"abcdefg", b"123")
aes128_dec(cipher, b"123")             # b'abcdefg'

packed = str_pack("zB", "abc", 247)    # b'abc\x00\xf7'
str_unpack("zB", packed)               # (b'abc', 247, 5)
```

## Notes on behaviour

- The `core` functions accept `str` or `bytes`. Case mapping and trimming
  affect ASCII characters only. `str_split` keeps empty pieces and raises
  `ValueError` for an empty delimiter.
- The encoders, hashes, cipher and packer accept `str` (taken as UTF-8),
  `bytes`, `bytearray` or `memoryview`. `hex_encode`, `base64_encode`,
  `md5sum` and `sha1sum` return `str`. The decoders, `md5`, `sha1`, the
  cipher functions and `str_pack` return `bytes`.
- `hex_encode` writes lowercase digits. `hex_decode` accepts either case.
- `aes128_enc` uses AES-128 in ECB mode. The key is cut to, or zero-padded up
  to, 16 bytes. It always appends 1 to 16 padding bytes, each holding the
  padding length. `aes128_dec` strips that padding.

## Format options for `str_pack` / `str_unpack`

| Option | Meaning |
|--------|---------|
| `b` / `B` | signed / unsigned 1-byte integer |
| `h` / `H` | signed / unsigned 2-byte integer |
| `l` / `L` | signed / unsigned 8-byte integer |
| `T` | 8-byte unsigned size |
| `i[n]` / `I[n]` | signed / unsigned integer of `n` bytes (default 4) |
| `f` / `d` | 4-byte float / 8-byte double |
| `s[n]` | string preceded by its length as an `n`-byte integer (default 8) |
| `z` | zero-terminated string |
| `c<n>` | fixed-size string of `n` bytes, zero padded; `n` is required |
| `x` | one zero byte of padding |
| `X<op>` | pad to the alignment of option `op` |
| `<` `>` `=` | little / big / native byte order |
| `![n]` | maximum alignment (default 8) |
| space | ignored |

Alignment is applied only after a `!` option. Before any `!`, the maximum
alignment is 1.

`str_pack` ignores arguments left over once the format ends. It raises
`ValueError` if there are too few arguments, and `TypeError` if a value
does not suit its option. For example, it raises `TypeError` for a string
given to an integer option.

`str_unpack` returns the decoded values followed by the offset just past
the last byte it read. Integers come back as `int`, `f` and `d` as `float`,
and every string option as `bytes`. Reading past the end of the data raises
`ValueError`.

## Errors

`strtools.errors.InputError` is a subclass of `ValueError`. It has `offset`
and `byte` attributes. It is raised for:

- a non-hex digit in `hex_decode`;
- a byte outside the base64 alphabet in `base64_decode`;
- an unknown character in a pack format.

Other malformed input raises `ValueError`. This includes:

- odd-length hex text;
- base64 text not made of whole four-character groups;
- ciphertext that is not a whole number of 16-byte blocks.

## Running the tests

```
pip install .[test]
pytest
```