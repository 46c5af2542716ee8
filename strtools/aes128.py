"""AES-128 in ECB mode with PKCS#7-style padding.

The key is cut to, or zero-padded up to, 16 bytes. Encryption always adds
between 1 and 16 bytes of padding, each holding the padding length.
"""

from __future__ import annotations

BLOCK_SIZE = 16
_ROUNDS = 10


def _xtime(value: int) -> int:
    value <<= 1
    return (value ^ 0x1B) & 0xFF if value & 0x100 else value


def _gmul(a: int, b: int) -> int:
    result = 0
    while b:
        if b & 1:
            result ^= a
        a = _xtime(a)
        b >>= 1
    return result


def _rotl8(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (8 - shift))) & 0xFF


def _build_sboxes() -> tuple[bytes, bytes]:
    exp = []
    log = {}
    x = 1
    for power in range(255):
        exp.append(x)
        log[x] = power
        x = _gmul(x, 3)

    def substitute(value: int) -> int:
        inv = exp[(255 - log[value]) % 255] if value else 0
        return (
            inv
            ^ _rotl8(inv, 1)
            ^ _rotl8(inv, 2)
            ^ _rotl8(inv, 3)
            ^ _rotl8(inv, 4)
            ^ 0x63
        )

    sbox = bytes(substitute(value) for value in range(256))
    inverse = bytearray(256)
    for value, substituted in enumerate(sbox):
        inverse[substituted] = value
    return sbox, bytes(inverse)


_SBOX, _INV_SBOX = _build_sboxes()
_MUL = {k: bytes(_gmul(a, k) for a in range(256)) for k in (2, 3, 9, 11, 13, 14)}

# State bytes are stored column by column: index = 4 * column + row.
_SHIFT = [r + 4 * ((c + r) % 4) for c in range(4) for r in range(4)]
_INV_SHIFT = [r + 4 * ((c - r) % 4) for c in range(4) for r in range(4)]


def _as_bytes(data: str | bytes | bytearray | memoryview) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _round_keys(key: str | bytes | bytearray | memoryview) -> list[bytes]:
    raw = _as_bytes(key)[:BLOCK_SIZE].ljust(BLOCK_SIZE, b"\0")
    words = [list(raw[i : i + 4]) for i in range(0, BLOCK_SIZE, 4)]
    rcon = 1
    for i in range(4, 4 * (_ROUNDS + 1)):
        temp = list(words[-1])
        if i % 4 == 0:
            temp = [_SBOX[b] for b in temp[1:] + temp[:1]]
            temp[0] ^= rcon
            rcon = _xtime(rcon)
        words.append([a ^ b for a, b in zip(words[i - 4], temp)])
    return [
        bytes(byte for word in words[4 * r : 4 * r + 4] for byte in word)
        for r in range(_ROUNDS + 1)
    ]


def _xor(state: bytes, round_key: bytes) -> bytes:
    return bytes(a ^ b for a, b in zip(state, round_key))


def _sub_shift(state: bytes) -> bytes:
    return bytes(_SBOX[state[i]] for i in _SHIFT)


def _inv_sub_shift(state: bytes) -> bytes:
    return bytes(_INV_SBOX[state[i]] for i in _INV_SHIFT)


def _mix_columns(state: bytes) -> bytes:
    m2, m3 = _MUL[2], _MUL[3]
    out = bytearray()
    for c in range(0, BLOCK_SIZE, 4):
        a0, a1, a2, a3 = state[c : c + 4]
        out += bytes(
            (
                m2[a0] ^ m3[a1] ^ a2 ^ a3,
                a0 ^ m2[a1] ^ m3[a2] ^ a3,
                a0 ^ a1 ^ m2[a2] ^ m3[a3],
                m3[a0] ^ a1 ^ a2 ^ m2[a3],
            )
        )
    return bytes(out)


def _inv_mix_columns(state: bytes) -> bytes:
    m9, m11, m13, m14 = _MUL[9], _MUL[11], _MUL[13], _MUL[14]
    out = bytearray()
    for c in range(0, BLOCK_SIZE, 4):
        a0, a1, a2, a3 = state[c : c + 4]
        out += bytes(
            (
                m14[a0] ^ m11[a1] ^ m13[a2] ^ m9[a3],
                m9[a0] ^ m14[a1] ^ m11[a2] ^ m13[a3],
                m13[a0] ^ m9[a1] ^ m14[a2] ^ m11[a3],
                m11[a0] ^ m13[a1] ^ m9[a2] ^ m14[a3],
            )
        )
    return bytes(out)


def _encrypt_block(block: bytes, keys: list[bytes]) -> bytes:
    state = _xor(block, keys[0])
    for round_key in keys[1:_ROUNDS]:
        state = _xor(_mix_columns(_sub_shift(state)), round_key)
    return _xor(_sub_shift(state), keys[_ROUNDS])


def _decrypt_block(block: bytes, keys: list[bytes]) -> bytes:
    state = _xor(block, keys[_ROUNDS])
    for round_key in reversed(keys[1:_ROUNDS]):
        state = _inv_mix_columns(_xor(_inv_sub_shift(state), round_key))
    return _xor(_inv_sub_shift(state), keys[0])


def aes128_enc(
    plain: str | bytes | bytearray | memoryview,
    key: str | bytes | bytearray | memoryview,
) -> bytes:
    """Encrypt ``plain`` with ``key`` and return the padded ciphertext."""
    data = _as_bytes(plain)
    padding = BLOCK_SIZE - len(data) % BLOCK_SIZE
    data += bytes([padding]) * padding
    keys = _round_keys(key)
    return b"".join(
        _encrypt_block(data[i : i + BLOCK_SIZE], keys)
        for i in range(0, len(data), BLOCK_SIZE)
    )


def aes128_dec(
    cipher: str | bytes | bytearray | memoryview,
    key: str | bytes | bytearray | memoryview,
) -> bytes:
    """Decrypt ``cipher`` with ``key`` and strip the trailing padding.

    Raises ``ValueError`` when the ciphertext is empty or not a whole number
    of 16-byte blocks, or when the padding length exceeds the data.
    """
    data = _as_bytes(cipher)
    if not data or len(data) % BLOCK_SIZE:
        raise ValueError("Invalid aes128 size")
    keys = _round_keys(key)
    plain = b"".join(
        _decrypt_block(data[i : i + BLOCK_SIZE], keys)
        for i in range(0, len(data), BLOCK_SIZE)
    )
    padding = plain[-1]
    if padding > len(plain):
        raise ValueError("Invalid aes128 padding")
    return plain[: len(plain) - padding]