"""AES-256 in infinite garble extension (IGE) mode and key derivation."""

from __future__ import annotations

import hashlib
from collections.abc import Iterator

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

BLOCK_SIZE = 16


class IgeError(ValueError):
    """Base error for AES-IGE operations."""


class DataTooSmallError(IgeError):
    """The data is shorter than one AES block."""

    def __init__(self) -> None:
        super().__init__("AES256IGE: data too small")


class DataNotDivisibleError(IgeError):
    """The data length is not a multiple of the AES block size."""

    def __init__(self) -> None:
        super().__init__("AES256IGE: data not divisible by block size")


def _xor(left: bytes, right: bytes) -> bytes:
    return bytes(a ^ b for a, b in zip(left, right))


def _sha1(data: bytes) -> bytes:
    return hashlib.sha1(data).digest()


def _blocks(data: bytes) -> Iterator[bytes]:
    for offset in range(0, len(data), BLOCK_SIZE):
        yield bytes(data[offset : offset + BLOCK_SIZE])


def check_data(data: bytes) -> None:
    """Raise if ``data`` cannot be processed block by block."""
    if len(data) < BLOCK_SIZE:
        raise DataTooSmallError()
    if len(data) % BLOCK_SIZE != 0:
        raise DataNotDivisibleError()


class IgeCipher:
    """Stateful AES-IGE cipher; the chaining state carries over between calls."""

    def __init__(self, key: bytes, iv: bytes) -> None:
        if len(iv) < 2 * BLOCK_SIZE:
            raise IgeError(
                f"initialization vector must be at least {2 * BLOCK_SIZE} bytes, got {len(iv)}"
            )
        try:
            cipher = Cipher(algorithms.AES(bytes(key)), modes.ECB())
        except ValueError as exc:
            raise IgeError(f"creating new cipher: {exc}") from exc
        self._encryptor = cipher.encryptor()
        self._decryptor = cipher.decryptor()
        self._x = bytes(iv[:BLOCK_SIZE])
        self._y = bytes(iv[BLOCK_SIZE : 2 * BLOCK_SIZE])

    def encrypt(self, data: bytes) -> bytes:
        """Encrypt ``data``, whose length must be a positive multiple of 16."""
        check_data(data)
        out = bytearray()
        for block in _blocks(data):
            encrypted = _xor(self._encryptor.update(_xor(block, self._x)), self._y)
            self._x, self._y = encrypted, block
            out += encrypted
        return bytes(out)

    def decrypt(self, data: bytes) -> bytes:
        """Decrypt ``data``, whose length must be a positive multiple of 16."""
        check_data(data)
        out = bytearray()
        for block in _blocks(data):
            plain = _xor(self._decryptor.update(_xor(block, self._y)), self._x)
            self._y, self._x = plain, block
            out += plain
        return bytes(out)


def ige_encrypt(data: bytes, key: bytes, iv: bytes) -> bytes:
    """Encrypt ``data`` with a fresh cipher built from ``key`` and ``iv``."""
    return IgeCipher(key, iv).encrypt(data)


def ige_decrypt(data: bytes, key: bytes, iv: bytes) -> bytes:
    """Decrypt ``data`` with a fresh cipher built from ``key`` and ``iv``."""
    return IgeCipher(key, iv).decrypt(data)


def generate_aes_ige(msg_key: bytes, auth_key: bytes, decode: bool) -> tuple[bytes, bytes]:
    """Derive the AES key and IV from a message key and an authorization key."""
    x = 8 if decode else 0
    needed = 96 + x + 32
    if len(auth_key) < needed:
        raise ValueError(f"wrong len of auth key, got {len(auth_key)} want at least {needed}")

    msg_key = bytes(msg_key)
    auth_key = bytes(auth_key)

    sha1_a = _sha1(msg_key + auth_key[x : x + 32])
    sha1_b = _sha1(auth_key[32 + x : 48 + x] + msg_key + auth_key[48 + x : 64 + x])
    sha1_c = _sha1(auth_key[64 + x : 96 + x] + msg_key)
    sha1_d = _sha1(msg_key + auth_key[96 + x : 128 + x])

    aes_key = sha1_a[0:8] + sha1_b[8:20] + sha1_c[4:16]
    aes_iv = sha1_a[8:20] + sha1_b[0:8] + sha1_c[16:20] + sha1_d[0:8]
    return aes_key, aes_iv